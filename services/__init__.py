from .store import SampleDataStore
from .filters import filter_reviews, filter_problems, filter_mcqs
from .sanitizer import sanitize_review
from .review_cache import ReviewCache
from .interview_ai import InterviewAI, extract_json_object, fallback_review
