from pydantic import BaseModel
from typing import Optional, List, Any


class Review(BaseModel):
    id: int
    company: str
    role: str
    experience: str = "Neutral"
    difficulty: str = "Medium"
    rating: int = 3
    date: str
    interview_process: str = ""
    questions_asked: List[str] = []
    preparation_tips: str = ""
    author: str = "Unknown"


class ReviewSubmission(BaseModel):
    # loosely typed on purpose: sanitize_review stringifies and defaults every field
    company: Optional[Any] = None
    role: Optional[Any] = None
    experience: Optional[Any] = None
    difficulty: Optional[Any] = None
    rating: Optional[Any] = None
    interview_process: Optional[Any] = None
    questions_asked: Optional[Any] = None
    preparation_tips: Optional[Any] = None


class ReviewSubmissionResponse(BaseModel):
    review: Review
    aiInsights: Optional[dict] = None
    message: str
