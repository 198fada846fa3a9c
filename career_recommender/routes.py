import json
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session
from shared.database import db_dependency

from .config import Settings
from .crud import (
    SqlCareerStore,
    create_interest_responses,
    create_question_attempts,
    get_career_path,
    latest_recommendation,
    list_career_paths,
    save_recommendation,
)
from .errors import RecommendationError
from .interest_rules import QUESTIONNAIRE_VERSION
from .profile_client import fetch_user_level, push_career_path
from .recommender import CareerRecommender, Recommendation
from .schemas import (
    CareerPathOut,
    CareerPathProbabilityOut,
    InterestSubmitIn,
    QuestionAttemptsIn,
    QuestionAttemptsOut,
    RecommendationOut,
    StoredRecommendationOut,
)

logger = logging.getLogger(__name__)


def _probabilities_payload(rec: Recommendation) -> list[dict]:
    return [
        {
            "career_path_id": c.display_id,
            "path_key": c.path_key,
            "probability": c.probability,
            "score": c.score,
            "resolved": c.resolved,
        }
        for c in rec.probabilities
    ]


def _career_path_out(row) -> CareerPathOut | None:
    if row is None:
        return None
    return CareerPathOut(
        id=row.id, name=row.name, slug=row.slug,
        description=row.description, color=row.color, icon=row.icon,
    )


def build_router(SessionLocal, settings: Settings, transport=None):
    router = APIRouter()
    get_db = db_dependency(SessionLocal)

    def current_user_id(request: Request) -> str:
        # set by api-gateway middleware, or forwarded as X-User-ID
        user = getattr(request.state, "user", None)
        if isinstance(user, dict) and user.get("sub"):
            return str(user["sub"])
        uid = (request.headers.get("x-user-id") or "").strip()
        if not uid:
            raise HTTPException(401, "Missing user identity")
        return uid

    async def current_user_level(request: Request, uid: str) -> int:
        # trust only server-side sources: the gateway's verified user, then the profile service
        user = getattr(request.state, "user", None)
        if isinstance(user, dict) and isinstance(user.get("level"), int):
            return user["level"]

        level = await fetch_user_level(settings.profile_service_url, uid, transport=transport)
        if level is None:
            raise HTTPException(503, "Unable to verify user level")
        return level

    def run_recommender(db: Session, uid: str) -> Recommendation:
        recommender = CareerRecommender(SqlCareerStore(db), resolution_mode=settings.path_resolution_mode)
        try:
            return recommender.recommend(uid)
        except RecommendationError as e:
            logger.info("Recommendation refused for user=%s: %s", uid, e.code)
            raise HTTPException(e.status_code, {"code": e.code, "message": str(e)})

    def persist(db: Session, uid: str, rec: Recommendation) -> None:
        top = rec.top
        save_recommendation(
            db,
            user_id=uid,
            path_key=top.path_key,
            # never store an internal key as if it were a catalog id
            career_path_id=top.career_path_id,
            confidence=rec.confidence,
            probabilities=_probabilities_payload(rec),
        )

    def build_out(db: Session, rec: Recommendation, profile_synced: bool) -> RecommendationOut:
        return RecommendationOut(
            recommended_career_path_id=rec.recommended_path_id,
            recommended_path=_career_path_out(get_career_path(db, rec.top.career_path_id)),
            confidence=rec.confidence,
            all_probabilities=[CareerPathProbabilityOut(**p) for p in _probabilities_payload(rec)],
            unresolved_keys=rec.unresolved_keys,
            profile_synced=profile_synced,
            questionnaire_version=QUESTIONNAIRE_VERSION,
        )

    @router.post("/question-attempts", response_model=QuestionAttemptsOut)
    def record_attempts(payload: QuestionAttemptsIn, request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)
        rows = create_question_attempts(db, uid, [a.model_dump() for a in payload.attempts])
        return QuestionAttemptsOut(recorded=len(rows))

    @router.post("/interest/submit", response_model=RecommendationOut)
    async def submit_interest(payload: InterestSubmitIn, request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)

        level = await current_user_level(request, uid)
        if level < settings.interest_min_level:
            raise HTTPException(403, f"Must be level {settings.interest_min_level} to take interest assessment")

        # answers only become durable together with the recommendation
        create_interest_responses(db, uid, [r.model_dump() for r in payload.responses], commit=False)
        try:
            rec = run_recommender(db, uid)
        except HTTPException:
            db.rollback()
            raise
        persist(db, uid, rec)

        profile_synced = False
        if rec.is_resolved and settings.profile_sync_enabled:
            profile_synced = await push_career_path(
                settings.profile_service_url, uid, rec.recommended_path_id, transport=transport,
            )
        elif not rec.is_resolved:
            logger.warning(
                "Not syncing unresolved career path %r for user=%s", rec.recommended_path_id, uid,
            )

        return build_out(db, rec, profile_synced)

    @router.post("/recommend", response_model=RecommendationOut)
    def recommend(request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)
        rec = run_recommender(db, uid)
        persist(db, uid, rec)
        return build_out(db, rec, profile_synced=False)

    @router.get("/recommendation/latest", response_model=StoredRecommendationOut)
    def latest(request: Request, db: Session = Depends(get_db)):
        uid = current_user_id(request)
        row = latest_recommendation(db, uid)
        if not row:
            raise HTTPException(404, "No recommendation yet")
        return StoredRecommendationOut(
            id=row.id,
            user_id=row.user_id,
            path_key=row.path_key,
            career_path_id=row.career_path_id,
            confidence=row.confidence,
            probabilities=json.loads(row.probabilities_json or "[]"),
        )

    @router.get("/career-paths", response_model=list[CareerPathOut])
    def career_paths(db: Session = Depends(get_db)):
        return [_career_path_out(p) for p in list_career_paths(db)]

    return router
