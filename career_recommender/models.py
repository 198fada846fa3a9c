import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from shared.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class CareerPath(Base):
    __tablename__ = "career_path"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=_new_id)
    name: Mapped[str] = mapped_column(String(255))
    # stable key for slug-based resolution: fullstack/datascience/cloud/mobile/security
    slug: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True, default=None)
    description: Mapped[str] = mapped_column(Text, default="")
    color: Mapped[str] = mapped_column(String(20), default="")
    icon: Mapped[str] = mapped_column(String(50), default="")


class QuestionAttempt(Base):
    __tablename__ = "question_attempt"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    question_id: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    category: Mapped[str | None] = mapped_column(String(50), nullable=True, default=None)  # frontend/backend/data/cloud/mobile/security
    is_correct: Mapped[bool] = mapped_column(Boolean, default=False)
    answered_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


class InterestResponse(Base):
    __tablename__ = "interest_response"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    question_id: Mapped[int] = mapped_column(Integer)  # 1-5
    response: Mapped[str] = mapped_column(Text)        # Likert digit or option text
    completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)


class RecommendationResult(Base):
    __tablename__ = "recommendation_result"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    path_key: Mapped[str] = mapped_column(String(20))
    # NULL when the key did not resolve to a catalog entry
    career_path_id: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    confidence: Mapped[float] = mapped_column(Float, default=0.0)  # 0-100
    probabilities_json: Mapped[str] = mapped_column(Text, default="[]")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
