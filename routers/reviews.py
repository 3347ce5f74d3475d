import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Depends, status

from auth.dependencies import require_api_key
from core.exceptions import InterviewPrepError, ValidationError
from models.review import Review, ReviewSubmission, ReviewSubmissionResponse
from services.filters import filter_reviews
from services.interview_ai import InterviewAI
from services.review_cache import ReviewCache
from services.sanitizer import sanitize_review
from services.store import SampleDataStore
from .deps import get_store, get_cache, get_ai

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reviews", tags=["Reviews"], dependencies=[Depends(require_api_key)])


@router.get("", response_model=List[Review])
async def get_reviews(
    company: Optional[str] = None,
    role: Optional[str] = None,
    store: SampleDataStore = Depends(get_store),
    cache: ReviewCache = Depends(get_cache),
    ai: InterviewAI = Depends(get_ai)
):
    """
    Get interview reviews, optionally filtered by company and role.
    When nothing in the store matches and both filters are given, a review is
    generated by AI and cached for 24 hours.
    """
    try:
        if not company and not role:
            return [sanitize_review(r) for r in store.reviews]

        matches = filter_reviews(store.reviews, company=company, role=role)
        if matches:
            return [sanitize_review(r) for r in matches]

        if company and role:
            cached = cache.get(company, role)
            if cached is not None:
                return cached

            review = await ai.generate_review(company, role)
            cache.put(company, role, [review])
            return [review]

        return []

    except (HTTPException, InterviewPrepError):
        raise
    except Exception as e:
        logger.exception(f"Error in reviews endpoint: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch reviews")


@router.post("", response_model=ReviewSubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_review(
    submission: ReviewSubmission,
    store: SampleDataStore = Depends(get_store),
    ai: InterviewAI = Depends(get_ai)
):
    """
    Submit an interview review. The review is kept in memory for the life of
    the process; AI insights are attached when generation succeeds.
    """
    if not submission.company or not submission.role:
        raise ValidationError("Company and role are required")

    try:
        payload = submission.model_dump()
        review = sanitize_review({**payload, "author": "User Submitted"})

        insights = await ai.generate_insights(payload)

        store.add_review(review)
        logger.info(f"Review submitted for {review.company} / {review.role}")

        return {
            "review": review,
            "aiInsights": insights,
            "message": "Review submitted successfully!"
        }

    except (HTTPException, InterviewPrepError):
        raise
    except Exception as e:
        logger.exception(f"Error submitting review: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit review")
