from pydantic import BaseModel
from typing import Optional, List


class MCQ(BaseModel):
    id: int
    question: str
    options: List[str]
    correct: int
    category: str
    difficulty: str
    company: Optional[str] = None
    role: Optional[str] = None
    explanation: str = ""
