import json
from sqlalchemy.orm import Session
from .models import CareerPath, InterestResponse, QuestionAttempt, RecommendationResult
from .records import AttemptRecord, CatalogEntry, InterestRecord


def create_question_attempts(db: Session, user_id: str, attempts: list[dict]) -> list[QuestionAttempt]:
    rows = [
        QuestionAttempt(
            user_id=user_id,
            question_id=a.get("question_id"),
            category=a.get("category"),
            is_correct=bool(a.get("is_correct")),
        )
        for a in attempts
    ]
    db.add_all(rows)
    db.commit()
    return rows


def create_interest_responses(
    db: Session, user_id: str, responses: list[dict], *, commit: bool = True,
) -> list[InterestResponse]:
    rows = [
        InterestResponse(
            user_id=user_id,
            question_id=int(r["question_id"]),
            response=str(r["response"]),
        )
        for r in responses
    ]
    db.add_all(rows)
    if commit:
        db.commit()
    else:
        # visible to this session's queries, discarded on rollback
        db.flush()
    return rows


def list_question_attempts(db: Session, user_id: str) -> list[QuestionAttempt]:
    return db.query(QuestionAttempt).filter(QuestionAttempt.user_id == user_id).all()


def list_interest_responses(db: Session, user_id: str) -> list[InterestResponse]:
    return db.query(InterestResponse).filter(InterestResponse.user_id == user_id).all()


def list_career_paths(db: Session) -> list[CareerPath]:
    return db.query(CareerPath).order_by(CareerPath.name.asc()).all()


def get_career_path(db: Session, path_id: str | None) -> CareerPath | None:
    if not path_id:
        return None
    return db.query(CareerPath).filter(CareerPath.id == path_id).first()


def create_career_path(db: Session, payload: dict) -> CareerPath:
    p = CareerPath(**payload)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p


def save_recommendation(
    db: Session,
    *,
    user_id: str,
    path_key: str,
    career_path_id: str | None,
    confidence: float,
    probabilities: list[dict],
) -> RecommendationResult:
    row = RecommendationResult(
        user_id=user_id,
        path_key=path_key,
        career_path_id=career_path_id,
        confidence=confidence,
        probabilities_json=json.dumps(probabilities),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def latest_recommendation(db: Session, user_id: str) -> RecommendationResult | None:
    return (
        db.query(RecommendationResult)
        .filter(RecommendationResult.user_id == user_id)
        .order_by(RecommendationResult.id.desc())
        .first()
    )


class SqlCareerStore:
    """
    Adapts a SQLAlchemy session to the recommender's read interface.
    """

    def __init__(self, db: Session):
        self.db = db

    def fetch_question_attempts(self, user_id: str) -> list[AttemptRecord]:
        return [
            AttemptRecord(category=r.category, is_correct=bool(r.is_correct))
            for r in list_question_attempts(self.db, user_id)
        ]

    def fetch_interest_responses(self, user_id: str) -> list[InterestRecord]:
        return [
            InterestRecord(question_id=r.question_id, response=r.response)
            for r in list_interest_responses(self.db, user_id)
        ]

    def fetch_career_path_catalog(self) -> list[CatalogEntry]:
        # ordered by name so "first match" is deterministic
        return [CatalogEntry(id=r.id, name=r.name, slug=r.slug) for r in list_career_paths(self.db)]
