import logging

from fastapi import APIRouter, HTTPException, Depends

from auth.dependencies import require_api_key
from core.exceptions import ValidationError
from models.ai import (
    CodeAnalysisRequest, HintRequest, MCQGenerationRequest,
    MockInterviewRequest, ResumeAnalysisRequest, StudyPlanRequest
)
from services.interview_ai import InterviewAI
from .deps import get_ai

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["AI"], dependencies=[Depends(require_api_key)])


@router.post("/ai/analyze-code")
async def analyze_code(request: CodeAnalysisRequest, ai: InterviewAI = Depends(get_ai)):
    """Free-text review of a code snippet"""
    try:
        analysis = await ai.analyze_code(request.code, request.language)
        return {"analysis": analysis}
    except Exception as e:
        logger.error(f"AI analysis error: {e}")
        raise HTTPException(status_code=500, detail=f"AI analysis failed: {e}")


@router.post("/ai/hint")
async def get_hint(request: HintRequest, ai: InterviewAI = Depends(get_ai)):
    try:
        hint = await ai.get_hint(request.current_code, request.language, request.problem_id)
        return {"hint": hint}
    except Exception as e:
        logger.error(f"AI hint error: {e}")
        raise HTTPException(status_code=500, detail=f"AI hint generation failed: {e}")


@router.post("/ai/generate-mcqs")
async def generate_mcqs(request: MCQGenerationRequest, ai: InterviewAI = Depends(get_ai)):
    try:
        mcqs = await ai.generate_mcqs(request.company, request.role, request.difficulty)
        return {"mcqs": mcqs}
    except Exception as e:
        logger.error(f"AI MCQ generation error: {e}")
        raise HTTPException(status_code=500, detail=f"AI MCQ generation failed: {e}")


@router.post("/mock-interview")
async def mock_interview(request: MockInterviewRequest, ai: InterviewAI = Depends(get_ai)):
    """
    Generate a mock interview (technical, behavioral and company questions)
    for a company/role pair
    """
    if not request.company or not request.role:
        raise ValidationError("Company and role are required")

    try:
        return await ai.generate_mock_interview(
            request.company, request.role, request.experience, request.duration
        )
    except Exception as e:
        logger.error(f"Error generating mock interview: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate mock interview: {e}")


@router.post("/resume/analyze")
async def analyze_resume(request: ResumeAnalysisRequest, ai: InterviewAI = Depends(get_ai)):
    if not request.resume_text:
        raise ValidationError("Resume text is required")

    try:
        return await ai.analyze_resume(request.resume_text, request.target_role, request.target_company)
    except Exception as e:
        logger.error(f"Error analyzing resume: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to analyze resume: {e}")


@router.post("/study-plan")
async def study_plan(request: StudyPlanRequest, ai: InterviewAI = Depends(get_ai)):
    try:
        return await ai.generate_study_plan(
            request.target_role, request.current_level, request.time_available, request.weak_areas
        )
    except Exception as e:
        logger.error(f"Error generating study plan: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate study plan: {e}")


@router.get("/company/{name}/insights")
async def company_insights(name: str, ai: InterviewAI = Depends(get_ai)):
    try:
        return await ai.company_insights(name)
    except Exception as e:
        logger.error(f"Error fetching company insights: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to fetch company insights: {e}")
