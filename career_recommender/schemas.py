from pydantic import BaseModel, Field, field_validator


class QuestionAttemptIn(BaseModel):
    question_id: str | None = None
    # unknown or missing categories are stored but never scored
    category: str | None = Field(default=None, max_length=50)
    is_correct: bool


class QuestionAttemptsIn(BaseModel):
    attempts: list[QuestionAttemptIn] = Field(min_length=1)


class QuestionAttemptsOut(BaseModel):
    recorded: int


class InterestResponseIn(BaseModel):
    question_id: int
    response: str

    @field_validator("response", mode="before")
    @classmethod
    def stringify(cls, v):
        # Likert answers may arrive as numbers
        if isinstance(v, bool):
            return v
        if isinstance(v, int):
            return str(v)
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return v


class InterestSubmitIn(BaseModel):
    responses: list[InterestResponseIn] = Field(min_length=1)


class CareerPathOut(BaseModel):
    id: str
    name: str
    slug: str | None = None
    description: str = ""
    color: str = ""
    icon: str = ""


class CareerPathProbabilityOut(BaseModel):
    career_path_id: str
    path_key: str
    probability: float
    score: float
    resolved: bool


class RecommendationOut(BaseModel):
    recommended_career_path_id: str
    recommended_path: CareerPathOut | None = None
    confidence: float  # 0-100
    all_probabilities: list[CareerPathProbabilityOut]
    unresolved_keys: list[str] = []
    profile_synced: bool = False
    questionnaire_version: int


class StoredRecommendationOut(BaseModel):
    id: int
    user_id: str
    path_key: str
    career_path_id: str | None
    confidence: float
    probabilities: list[dict]
