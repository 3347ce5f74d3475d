import copy
import logging
from typing import Optional

from services.filters import filter_reviews, filter_problems, filter_mcqs
from . import fallbacks
from .gateway import ApiGateway, ApiError

logger = logging.getLogger(__name__)


def _params(**kwargs) -> dict:
    return {k: v for k, v in kwargs.items() if v}


class ApiService:
    """
    Data access for the dashboard. Read methods fall back to local mock data
    when the gateway gives up; write and AI methods raise ApiError so the
    caller can report the failure.
    """

    def __init__(self, gateway: ApiGateway):
        self.gateway = gateway

    def _get_or_fallback(self, endpoint: str, fallback, params: Optional[dict] = None):
        try:
            return self.gateway.get(endpoint, params=params or None)
        except ApiError as e:
            logger.warning(f"Falling back to mock data for {endpoint}: {e.message}")
            return fallback() if callable(fallback) else copy.deepcopy(fallback)

    def get_dashboard_stats(self) -> dict:
        return self._get_or_fallback("/api/dashboard/stats", fallbacks.MOCK_DASHBOARD_STATS)

    def get_activities(self) -> list:
        return self._get_or_fallback("/api/dashboard/activity", fallbacks.mock_activities)

    def get_user_progress(self) -> dict:
        return self._get_or_fallback("/api/user/progress", fallbacks.MOCK_USER_PROGRESS)

    def get_analytics(self) -> dict:
        return self._get_or_fallback("/api/analytics", fallbacks.MOCK_ANALYTICS)

    def get_leaderboard(self) -> dict:
        return self._get_or_fallback("/api/leaderboard", fallbacks.MOCK_LEADERBOARD)

    def get_problems(self, category: str = None, difficulty: str = None) -> list:
        return self._get_or_fallback(
            "/api/problems",
            lambda: filter_problems(copy.deepcopy(fallbacks.MOCK_PROBLEMS), category=category, difficulty=difficulty),
            params=_params(category=category, difficulty=difficulty),
        )

    def get_problem(self, problem_id: int) -> Optional[dict]:
        """None when the problem does not exist; mock lookup when the API is unreachable"""
        try:
            return self.gateway.get(f"/api/problems/{problem_id}")
        except ApiError as e:
            if e.status == 404:
                return None
            logger.warning(f"Falling back to mock data for problem {problem_id}: {e.message}")
            for problem in fallbacks.MOCK_PROBLEMS:
                if problem["id"] == problem_id:
                    return copy.deepcopy(problem)
            return None

    def get_mcqs(self, category: str = None, difficulty: str = None, company: str = None,
                 role: str = None, limit: int = 10) -> list:
        return self._get_or_fallback(
            "/api/mcqs",
            lambda: filter_mcqs(fallbacks.mock_mcqs(limit), category=category, difficulty=difficulty,
                                company=company, role=role),
            params=_params(category=category, difficulty=difficulty, company=company, role=role),
        )

    def get_reviews(self, company: str = None, role: str = None) -> list:
        return self._get_or_fallback(
            "/api/reviews",
            lambda: filter_reviews(copy.deepcopy(fallbacks.MOCK_REVIEWS), company=company, role=role),
            params=_params(company=company, role=role),
        )

    def submit_review(self, review: dict) -> dict:
        return self.gateway.post("/api/reviews", review)

    def analyze_code(self, code: str, language: str) -> dict:
        return self.gateway.post("/api/ai/analyze-code", {"code": code, "language": language})

    def get_hint(self, current_code: str, language: str = None, problem_id: str = None) -> dict:
        return self.gateway.post(
            "/api/ai/hint",
            {"currentCode": current_code, "language": language, "problemId": problem_id},
        )
