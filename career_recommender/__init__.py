from .errors import AssessmentIncompleteError, NoQuizDataError, RecommendationError, UnresolvedPathIdWarning
from .recommender import CareerRecommender, CareerStore, Recommendation

__all__ = [
    "CareerRecommender",
    "CareerStore",
    "Recommendation",
    "RecommendationError",
    "NoQuizDataError",
    "AssessmentIncompleteError",
    "UnresolvedPathIdWarning",
]
