class RecommendationError(Exception):
    """
    Base class for failures that abort a recommendation entirely.
    `code` is stable and safe to return to clients.
    """
    code = "recommendation_error"
    status_code = 422
    default_message = "Recommendation failed"

    def __init__(self, user_id: str, message: str | None = None):
        self.user_id = user_id
        super().__init__(message or self.default_message)


class NoQuizDataError(RecommendationError):
    code = "no_quiz_data"
    default_message = "No quiz data available for recommendation"


class AssessmentIncompleteError(RecommendationError):
    code = "assessment_incomplete"
    default_message = "Interest assessment not completed"


class UnresolvedPathIdWarning(UserWarning):
    """
    A career path key did not resolve to a catalog id.
    The recommendation still stands, but the key is not a durable foreign key.
    """
