"""Team role vocabulary. Roles stay free text; these are the suggested values."""

STANDARD_ROLES = (
    "Scrum Master",
    "Product Owner",
    "Developer",
    "Frontend Developer",
    "Backend Developer",
    "Full Stack Developer",
    "DevOps Engineer",
    "QA Engineer",
    "UI/UX Designer",
    "Data Analyst",
    "Architect",
    "Technical Lead",
    "Business Analyst",
    "Security Engineer",
)


def is_standard_role(role: str) -> bool:
    return role in STANDARD_ROLES


def role_display_name(role: str) -> str:
    """Standard roles by their canonical spelling, custom roles as entered."""
    if not role or not role.strip():
        return "Unassigned"
    r = role.strip()
    for standard in STANDARD_ROLES:
        if standard.lower() == r.lower():
            return standard
    return r
