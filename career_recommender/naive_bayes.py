import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from .records import AttemptRecord


# ----------------------------
# Career path weights
# ----------------------------

PATH_KEYS = ("fullstack", "datascience", "cloud", "mobile", "security")

CAREER_PATH_WEIGHTS: Dict[str, Dict[str, float]] = {
    "fullstack": {
        "frontend": 0.40,
        "backend": 0.40,
        "data": 0.10,
        "cloud": 0.05,
        "mobile": 0.05,
        "security": 0.00,
    },
    "datascience": {
        "frontend": 0.05,
        "backend": 0.15,
        "data": 0.70,
        "cloud": 0.05,
        "mobile": 0.00,
        "security": 0.05,
    },
    "cloud": {
        "frontend": 0.05,
        "backend": 0.25,
        "data": 0.10,
        "cloud": 0.55,
        "mobile": 0.00,
        "security": 0.05,
    },
    "mobile": {
        "frontend": 0.30,
        "backend": 0.15,
        "data": 0.05,
        "cloud": 0.05,
        "mobile": 0.45,
        "security": 0.00,
    },
    "security": {
        "frontend": 0.05,
        "backend": 0.20,
        "data": 0.10,
        "cloud": 0.10,
        "mobile": 0.00,
        "security": 0.55,
    },
}

# Empirical tuning constants; every ranking depends on them.
PERFORMANCE_SCALE = 100.0
INTEREST_SCALE = 10.0
INTEREST_CAP = 100.0
PERFORMANCE_WEIGHT = 0.6
INTEREST_WEIGHT = 0.4
SOFTMAX_TEMPERATURE = 10.0


# ----------------------------
# Category performance
# ----------------------------

@dataclass
class CategoryTally:
    correct: int = 0
    total: int = 0

    @property
    def accuracy(self) -> float:
        return self.correct / self.total


def calculate_category_performance(attempts: Iterable[AttemptRecord]) -> Dict[str, CategoryTally]:
    """
    Count correct/total per category. Attempts without a category are skipped,
    so every tally present has total >= 1.
    """
    performance: Dict[str, CategoryTally] = {}

    for a in attempts:
        if not a.category:
            continue

        tally = performance.setdefault(a.category, CategoryTally())
        tally.total += 1
        if a.is_correct:
            tally.correct += 1

    return performance


# ----------------------------
# Scoring + softmax
# ----------------------------

@dataclass(frozen=True)
class CareerPathCandidate:
    path_key: str
    score: float
    probability: float = 0.0
    career_path_id: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.career_path_id is not None

    @property
    def display_id(self) -> str:
        # unresolved candidates fall back to the internal key
        return self.career_path_id if self.career_path_id is not None else self.path_key


def score_path(
    weights: Mapping[str, float],
    performance: Mapping[str, CategoryTally],
    affinities: Mapping[str, float],
) -> float:
    performance_score = 0.0
    interest_score = 0.0

    for category, weight in weights.items():
        tally = performance.get(category)
        if tally is not None and tally.total > 0:
            performance_score += tally.accuracy * weight

        interest_score += affinities.get(category, 0.0) * weight

    normalized_performance = performance_score * PERFORMANCE_SCALE
    normalized_interest = min(interest_score * INTEREST_SCALE, INTEREST_CAP)

    return normalized_performance * PERFORMANCE_WEIGHT + normalized_interest * INTEREST_WEIGHT


def softmax(scores: List[float], temperature: float = SOFTMAX_TEMPERATURE) -> List[float]:
    exps = [math.exp(s / temperature) for s in scores]
    total = sum(exps)
    return [e / total for e in exps]


def calculate_probabilities(
    performance: Mapping[str, CategoryTally],
    affinities: Mapping[str, float],
    weights: Mapping[str, Mapping[str, float]] = CAREER_PATH_WEIGHTS,
) -> List[CareerPathCandidate]:
    """
    Score every career path, normalize with softmax and return the candidates
    sorted by probability (descending). Ties keep the weight-table order.
    """
    keys = list(weights.keys())
    scores = [score_path(weights[k], performance, affinities) for k in keys]
    probs = softmax(scores)

    results = [
        CareerPathCandidate(path_key=k, score=s, probability=p)
        for k, s, p in zip(keys, scores, probs)
    ]
    results.sort(key=lambda c: c.probability, reverse=True)
    return results
