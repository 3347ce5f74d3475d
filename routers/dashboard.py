from fastapi import APIRouter, Depends

from auth.dependencies import require_api_key
from services.dashboard_data import (
    DASHBOARD_STATS, RECENT_ACTIVITY, USER_PROGRESS, ANALYTICS, LEADERBOARD
)

router = APIRouter(prefix="/api", tags=["Dashboard"], dependencies=[Depends(require_api_key)])


@router.get("/dashboard/stats")
async def get_dashboard_stats():
    return DASHBOARD_STATS


@router.get("/dashboard/activity")
async def get_dashboard_activity():
    return RECENT_ACTIVITY


@router.get("/user/progress")
async def get_user_progress():
    return USER_PROGRESS


@router.get("/analytics")
async def get_analytics():
    return ANALYTICS


@router.get("/leaderboard")
async def get_leaderboard():
    return LEADERBOARD
