import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from shared.database import Base, make_engine, make_session_factory
from .config import Settings, load_settings
from .routes import build_router
from .seed import seed_career_paths

logger = logging.getLogger("career-recommender")


def create_app(
    settings: Optional[Settings] = None,
    SessionLocal=None,
    transport=None,
) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    if SessionLocal is None:
        engine = make_engine(settings.database_url)
        SessionLocal = make_session_factory(engine)
    else:
        engine = SessionLocal.kw["bind"]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Base.metadata.create_all(bind=engine)
        with SessionLocal() as db:
            seed_career_paths(db)
        logger.info("Career recommender ready (path resolution: %s)", settings.path_resolution_mode)
        yield

    app = FastAPI(title="Career Recommender", version="1.0.0", lifespan=lifespan)
    app.include_router(build_router(SessionLocal, settings, transport=transport), prefix="/ai", tags=["AI Recommendations"])

    @app.get("/health", operation_id="health_check", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "service": "career-recommender"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=load_settings().port)
