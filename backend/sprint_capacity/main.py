"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from sprint_capacity.config import get_settings
from sprint_capacity.database import async_session_maker, init_db
from sprint_capacity.routers import absences, capacity, data, settings as settings_routes, sprints, team
from sprint_capacity.services.settings_service import seed_default_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    async with async_session_maker() as db:
        await seed_default_settings(db)
        await db.commit()
    logger.info("Sprint capacity planner started ({})", settings.app_env)
    yield


app = FastAPI(
    title="Sprint Capacity Planner",
    description="Team members, absences and sprint capacity calculation",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(team.router)
app.include_router(sprints.router)
app.include_router(absences.router)
app.include_router(capacity.router)
app.include_router(settings_routes.router)
app.include_router(data.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
