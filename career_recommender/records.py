from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AttemptRecord:
    category: Optional[str]  # "frontend" | "backend" | "data" | "cloud" | "mobile" | "security" | None
    is_correct: bool


@dataclass(frozen=True)
class InterestRecord:
    question_id: int
    response: str


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    name: str
    slug: Optional[str] = None
