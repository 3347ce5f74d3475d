"""
Mock data served by ApiService when the API cannot be reached, so read
paths never fail hard.
"""
from datetime import datetime, timedelta, timezone

MOCK_DASHBOARD_STATS = {
    "problemsSolved": 0,
    "dayStreak": 0,
    "successRate": 0,
    "companiesCount": 0,
}

MOCK_REVIEWS = [
    {
        "id": 1,
        "author": "Cisco Candidate 1",
        "company": "Cisco",
        "role": "Software Developer Intern",
        "experience": "Positive",
        "difficulty": "Hard",
        "rating": 4,
        "date": "2024-06-15",
        "interview_process": "3 Rounds: OA, Technical, HR",
        "questions_asked": ["Reverse Linked List", "SQL Joins", "OOPs concepts", "Data Structures"],
        "preparation_tips": "Focus on DSA and core CS concepts. Practice Leetcode medium problems.",
    },
    {
        "id": 2,
        "author": "Cisco Candidate 2",
        "company": "Cisco",
        "role": "Full Stack Developer",
        "experience": "Positive",
        "difficulty": "Medium",
        "rating": 5,
        "date": "2024-05-20",
        "interview_process": "3 Rounds: Technical Screen, Panel, HR",
        "questions_asked": ["React concepts", "Node.js architecture", "REST API design", "System design basics"],
        "preparation_tips": "Prepare your portfolio projects. Be ready for in-depth technical discussions.",
    },
]

MOCK_PROBLEMS = [
    {
        "id": 1,
        "title": "Two Sum",
        "description": (
            "Given an array of integers nums and an integer target, return indices of the "
            "two numbers such that they add up to target."
        ),
        "difficulty": "Easy",
        "category": "Array",
        "testCases": [
            {"input": {"nums": [2, 7, 11, 15], "target": 9}, "output": [0, 1]},
            {"input": {"nums": [3, 2, 4], "target": 6}, "output": [1, 2]},
        ],
        "solution": "",
    },
]

MOCK_USER_PROGRESS = {
    "totalProblems": 0,
    "solvedProblems": 0,
    "totalMCQs": 0,
    "completedMCQs": 0,
    "studyStreak": 0,
    "totalStudyTime": 0,
    "achievements": [],
    "weeklyActivity": [],
}

MOCK_ANALYTICS = {
    "performanceMetrics": {"averageScore": 0, "improvementRate": 0, "timeSpent": 0, "problemsSolved": 0},
    "categoryBreakdown": [],
    "difficultyBreakdown": [],
    "monthlyProgress": [],
}

MOCK_LEADERBOARD = {"global": [], "friends": [], "weekly": []}

_MCQ_CATEGORIES = ["Algorithms", "Data Structures", "System Design", "OOP", "Databases"]
_MCQ_DIFFICULTIES = ["Easy", "Medium", "Hard"]
_MCQ_COMPANIES = ["Google", "Microsoft", "Amazon", "Meta", "Apple"]
_MCQ_ROLES = ["Software Engineer", "Frontend Developer", "Backend Developer", "Full Stack Developer"]


def mock_activities(now: datetime = None) -> list:
    now = now or datetime.now(timezone.utc)
    return [
        {"id": 1, "type": "coding", "title": "Two Sum Problem", "status": "completed",
         "time": (now - timedelta(hours=1)).isoformat()},
        {"id": 2, "type": "mcq", "title": "JavaScript Fundamentals", "status": "in-progress",
         "time": (now - timedelta(hours=2)).isoformat()},
        {"id": 3, "type": "interview", "title": "Mock Interview - Google", "status": "completed",
         "time": (now - timedelta(days=1)).isoformat()},
    ]


def mock_mcqs(count: int = 10) -> list:
    """Placeholder questions cycling through categories, difficulties, companies and roles"""
    questions = []
    for i in range(count):
        category = _MCQ_CATEGORIES[i % len(_MCQ_CATEGORIES)]
        difficulty = _MCQ_DIFFICULTIES[i % len(_MCQ_DIFFICULTIES)]
        questions.append({
            "id": i + 1,
            "question": f"Sample question about {category} ({difficulty})",
            "options": [
                f"Incorrect option 1 about {category}",
                f"Incorrect option 2 about {category}",
                f"Incorrect option 3 about {category}",
                f"Correct answer for {category}",
            ],
            "correct": 3,
            "category": category,
            "difficulty": difficulty,
            "company": _MCQ_COMPANIES[i % len(_MCQ_COMPANIES)],
            "role": _MCQ_ROLES[i % len(_MCQ_ROLES)],
            "explanation": (
                f"This is a detailed explanation for the question about {category}. The correct "
                f"answer demonstrates understanding of {category} concepts."
            ),
        })
    return questions
