"""Sprint capacity planning backend."""
