from typing import List, Optional

from fastapi import APIRouter, Depends

from auth.dependencies import require_api_key
from models.mcq import MCQ
from services.filters import filter_mcqs
from services.store import SampleDataStore
from .deps import get_store

router = APIRouter(prefix="/api/mcqs", tags=["MCQs"], dependencies=[Depends(require_api_key)])


@router.get("", response_model=List[MCQ], response_model_exclude_none=True)
async def get_mcqs(
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
    company: Optional[str] = None,
    role: Optional[str] = None,
    store: SampleDataStore = Depends(get_store)
):
    return filter_mcqs(store.mcqs, category=category, difficulty=difficulty, company=company, role=role)
