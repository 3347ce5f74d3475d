import copy
from typing import List, Optional

from models.mcq import MCQ
from models.problem import Problem
from models.review import Review
from .seed_data import SAMPLE_REVIEWS, SAMPLE_PROBLEMS, SAMPLE_MCQS


class SampleDataStore:
    """
    In-memory reviews, problems and MCQs for one app instance.
    Reviews are kept as raw dicts and sanitized on the way out; problems and
    MCQs are immutable after seeding.
    """

    def __init__(self, reviews: list = None, problems: list = None, mcqs: list = None):
        self._reviews = copy.deepcopy(SAMPLE_REVIEWS if reviews is None else reviews)
        self._problems = [Problem.model_validate(p) for p in (SAMPLE_PROBLEMS if problems is None else problems)]
        self._mcqs = [MCQ.model_validate(q) for q in (SAMPLE_MCQS if mcqs is None else mcqs)]

    @property
    def reviews(self) -> List[dict]:
        return list(self._reviews)

    @property
    def problems(self) -> List[Problem]:
        return list(self._problems)

    @property
    def mcqs(self) -> List[MCQ]:
        return list(self._mcqs)

    def add_review(self, review: Review) -> None:
        """Newest submissions come first"""
        self._reviews.insert(0, review.model_dump())

    def get_problem(self, problem_id: int) -> Optional[Problem]:
        for problem in self._problems:
            if problem.id == problem_id:
                return problem
        return None
