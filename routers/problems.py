from typing import List, Optional

from fastapi import APIRouter, Depends

from auth.dependencies import require_api_key
from core.exceptions import NotFoundError
from models.problem import Problem
from services.filters import filter_problems
from services.store import SampleDataStore
from .deps import get_store

router = APIRouter(prefix="/api/problems", tags=["Problems"], dependencies=[Depends(require_api_key)])


@router.get("", response_model=List[Problem])
async def get_problems(
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    store: SampleDataStore = Depends(get_store)
):
    return filter_problems(store.problems, category=category, difficulty=difficulty)


@router.get("/{problem_id}", response_model=Problem)
async def get_problem(problem_id: str, store: SampleDataStore = Depends(get_store)):
    """Get a single problem; unknown or non-numeric ids are a 404"""
    try:
        problem = store.get_problem(int(problem_id))
    except ValueError:
        problem = None

    if problem is None:
        raise NotFoundError("Problem not found")
    return problem
