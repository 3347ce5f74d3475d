from .review import Review, ReviewSubmission, ReviewSubmissionResponse
from .problem import Problem, ProblemCase
from .mcq import MCQ
from .ai import (
    CodeAnalysisRequest, HintRequest, MCQGenerationRequest,
    MockInterviewRequest, ResumeAnalysisRequest, StudyPlanRequest
)
