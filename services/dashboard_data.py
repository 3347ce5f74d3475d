"""Static dashboard payloads. No per-user data is tracked."""

DASHBOARD_STATS = {
    "problemsSolved": 42,
    "dayStreak": 7,
    "successRate": 85,
    "companiesCount": 12,
}

RECENT_ACTIVITY = [
    {"id": 1, "type": "problem", "title": "Two Sum", "status": "solved", "time": "2024-07-29T10:30:00Z"},
    {"id": 2, "type": "mcq", "title": "JavaScript Fundamentals", "status": "completed", "time": "2024-07-28T15:45:00Z"},
    {"id": 3, "type": "mock", "title": "System Design Mock Interview", "status": "completed", "time": "2024-07-27T11:20:00Z"},
]

USER_PROGRESS = {
    "totalProblems": 150,
    "solvedProblems": 42,
    "totalMCQs": 200,
    "completedMCQs": 85,
    "studyStreak": 7,
    "totalStudyTime": 1250,  # minutes
    "achievements": [
        {"id": "first-problem", "name": "First Steps", "unlocked": True},
        {"id": "week-streak", "name": "Week Warrior", "unlocked": True},
        {"id": "problem-solver", "name": "Problem Solver", "unlocked": False},
    ],
    "weeklyActivity": [
        {"day": "Mon", "problems": 3, "mcqs": 5},
        {"day": "Tue", "problems": 2, "mcqs": 8},
        {"day": "Wed", "problems": 4, "mcqs": 3},
        {"day": "Thu", "problems": 1, "mcqs": 6},
        {"day": "Fri", "problems": 5, "mcqs": 4},
        {"day": "Sat", "problems": 2, "mcqs": 7},
        {"day": "Sun", "problems": 3, "mcqs": 2},
    ],
}

ANALYTICS = {
    "performanceMetrics": {
        "averageScore": 78.5,
        "improvementRate": 12.3,
        "timeSpent": 1250,
        "problemsSolved": 42,
    },
    "categoryBreakdown": [
        {"category": "Algorithms", "solved": 15, "total": 25, "percentage": 60},
        {"category": "Data Structures", "solved": 12, "total": 20, "percentage": 60},
        {"category": "System Design", "solved": 8, "total": 15, "percentage": 53},
        {"category": "Databases", "solved": 7, "total": 12, "percentage": 58},
    ],
    "difficultyBreakdown": [
        {"difficulty": "Easy", "solved": 20, "total": 30, "percentage": 67},
        {"difficulty": "Medium", "solved": 15, "total": 25, "percentage": 60},
        {"difficulty": "Hard", "solved": 7, "total": 15, "percentage": 47},
    ],
    "monthlyProgress": [
        {"month": "Jan", "problems": 8, "mcqs": 15},
        {"month": "Feb", "problems": 12, "mcqs": 20},
        {"month": "Mar", "problems": 15, "mcqs": 25},
        {"month": "Apr", "problems": 18, "mcqs": 30},
        {"month": "May", "problems": 22, "mcqs": 35},
        {"month": "Jun", "problems": 25, "mcqs": 40},
    ],
}

LEADERBOARD = {
    "global": [
        {"rank": 1, "name": "Alex Chen", "score": 2450, "problems": 180, "streak": 25},
        {"rank": 2, "name": "Sarah Johnson", "score": 2380, "problems": 175, "streak": 22},
        {"rank": 3, "name": "Mike Rodriguez", "score": 2320, "problems": 165, "streak": 18},
        {"rank": 4, "name": "Emily Davis", "score": 2280, "problems": 160, "streak": 20},
        {"rank": 5, "name": "David Kim", "score": 2250, "problems": 155, "streak": 15},
    ],
    "friends": [
        {"rank": 1, "name": "You", "score": 1850, "problems": 42, "streak": 7},
        {"rank": 2, "name": "John Doe", "score": 1720, "problems": 38, "streak": 5},
        {"rank": 3, "name": "Jane Smith", "score": 1650, "problems": 35, "streak": 8},
    ],
    "weekly": [
        {"rank": 1, "name": "CodeMaster", "score": 450, "problems": 15},
        {"rank": 2, "name": "AlgoExpert", "score": 420, "problems": 14},
        {"rank": 3, "name": "DevNinja", "score": 380, "problems": 12},
    ],
}
