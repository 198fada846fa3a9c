import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .errors import AssessmentIncompleteError, NoQuizDataError
from .interest_rules import analyze_interest_responses
from .naive_bayes import CareerPathCandidate, calculate_category_performance, calculate_probabilities
from .path_resolution import apply_path_ids, build_path_id_mapping
from .records import AttemptRecord, CatalogEntry, InterestRecord

logger = logging.getLogger(__name__)


class CareerStore(Protocol):
    """Read side of whatever persistence layer holds the user's history."""

    def fetch_question_attempts(self, user_id: str) -> Sequence[AttemptRecord]: ...

    def fetch_interest_responses(self, user_id: str) -> Sequence[InterestRecord]: ...

    def fetch_career_path_catalog(self) -> Sequence[CatalogEntry]: ...


@dataclass
class Recommendation:
    recommended_path_id: str
    probabilities: List[CareerPathCandidate]
    confidence: float  # 0-100
    unresolved_keys: List[str] = field(default_factory=list)

    @property
    def top(self) -> CareerPathCandidate:
        return self.probabilities[0]

    @property
    def is_resolved(self) -> bool:
        return self.top.resolved


class CareerRecommender:
    """
    Naive-Bayes style career path recommender.

    Blends per-category quiz accuracy (60%) with questionnaire affinity (40%)
    for each of the five career paths, softmaxes the scores and resolves the
    winner to a catalog id. Holds no per-user state between calls.
    """

    def __init__(self, store: CareerStore, resolution_mode: str = "name"):
        self.store = store
        self.resolution_mode = resolution_mode

    def recommend(self, user_id: str) -> Recommendation:
        attempts = self.store.fetch_question_attempts(user_id)
        if not attempts:
            raise NoQuizDataError(user_id)

        responses = self.store.fetch_interest_responses(user_id)
        if not responses:
            raise AssessmentIncompleteError(user_id)

        logger.info(
            "Recommending career path for user=%s (attempts=%d, responses=%d)",
            user_id, len(attempts), len(responses),
        )

        performance = calculate_category_performance(attempts)
        affinities = analyze_interest_responses(responses)
        candidates = calculate_probabilities(performance, affinities)

        mapping = build_path_id_mapping(self.store.fetch_career_path_catalog(), mode=self.resolution_mode)
        candidates, unresolved = apply_path_ids(candidates, mapping)
        top = candidates[0]

        result = Recommendation(
            recommended_path_id=top.display_id,
            probabilities=candidates,
            confidence=top.probability * 100,
            unresolved_keys=unresolved,
        )

        logger.info(
            "Recommended %s (%s) for user=%s with confidence %.1f%%",
            top.path_key, result.recommended_path_id, user_id, result.confidence,
        )
        return result
