from fastapi import Request

from services.interview_ai import InterviewAI
from services.review_cache import ReviewCache
from services.store import SampleDataStore


def get_store(request: Request) -> SampleDataStore:
    return request.app.state.store


def get_cache(request: Request) -> ReviewCache:
    return request.app.state.review_cache


def get_ai(request: Request) -> InterviewAI:
    return request.app.state.ai
