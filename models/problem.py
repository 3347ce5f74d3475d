from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List


class ProblemCase(BaseModel):
    input: Any
    output: Any


class Problem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: str
    difficulty: str
    category: str
    test_cases: List[ProblemCase] = Field(default_factory=list, alias="testCases")
    solution: str = ""
