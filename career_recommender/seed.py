import logging
from sqlalchemy.orm import Session
from .crud import create_career_path, list_career_paths

logger = logging.getLogger(__name__)

CAREER_PATHS = [
    {
        "name": "Full Stack Development",
        "slug": "fullstack",
        "description": "Master both frontend and backend technologies to build complete web applications",
        "color": "#10b981",
        "icon": "Code",
    },
    {
        "name": "Data Science & AI",
        "slug": "datascience",
        "description": "Analyze data and build intelligent systems using machine learning and AI",
        "color": "#8b5cf6",
        "icon": "Brain",
    },
    {
        "name": "Cloud & DevOps",
        "slug": "cloud",
        "description": "Build and manage scalable cloud infrastructure and deployment pipelines",
        "color": "#06b6d4",
        "icon": "Cloud",
    },
    {
        "name": "Mobile Development",
        "slug": "mobile",
        "description": "Create native and cross-platform mobile applications for iOS and Android",
        "color": "#f59e0b",
        "icon": "Smartphone",
    },
    {
        "name": "Cybersecurity",
        "slug": "security",
        "description": "Protect systems and data from security threats and vulnerabilities",
        "color": "#ef4444",
        "icon": "Shield",
    },
]


def seed_career_paths(db: Session) -> int:
    """Insert the default catalog when it is empty. Returns rows created."""
    if list_career_paths(db):
        return 0

    for payload in CAREER_PATHS:
        create_career_path(db, dict(payload))

    logger.info("Seeded %d career paths", len(CAREER_PATHS))
    return len(CAREER_PATHS)
