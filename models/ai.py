from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CodeAnalysisRequest(BaseModel):
    code: str = ""
    language: str = "javascript"


class HintRequest(CamelModel):
    problem_id: Optional[str] = Field(default=None, alias="problemId")
    current_code: Optional[str] = Field(default=None, alias="currentCode")
    language: Optional[str] = None


class MCQGenerationRequest(BaseModel):
    company: Optional[str] = None
    role: Optional[str] = None
    difficulty: Optional[str] = "Medium"


class MockInterviewRequest(BaseModel):
    company: Optional[str] = None
    role: Optional[str] = None
    experience: Optional[str] = None
    duration: Optional[int] = 45


class ResumeAnalysisRequest(CamelModel):
    resume_text: Optional[str] = Field(default=None, alias="resumeText")
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    target_company: Optional[str] = Field(default=None, alias="targetCompany")


class StudyPlanRequest(CamelModel):
    target_role: Optional[str] = Field(default=None, alias="targetRole")
    current_level: Optional[str] = Field(default=None, alias="currentLevel")
    time_available: Optional[int] = Field(default=None, alias="timeAvailable")
    weak_areas: Optional[List[str]] = Field(default=None, alias="weakAreas")
