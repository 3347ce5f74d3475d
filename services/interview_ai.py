import json
import re
import logging
from datetime import datetime, timezone
from typing import List, Optional

from openai import AsyncOpenAI

from core.exceptions import ConfigurationError, UpstreamParseError
from models.review import Review
from .sanitizer import sanitize_review

logger = logging.getLogger(__name__)

# greedy: first "{" through the last "}" in the reply
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)

JSON_SYSTEM_PROMPT = "You are an expert technical interviewer and career coach. Respond with valid JSON."
TEXT_SYSTEM_PROMPT = "You are an expert technical interviewer and coding mentor."


def extract_json_object(text: str) -> dict:
    """
    Pull a JSON object out of a free-text model reply.

    Tries the whole reply as JSON first, then the greedy brace substring.
    Raises UpstreamParseError when neither yields an object.
    """
    if not text:
        raise UpstreamParseError("Empty AI response")

    try:
        parsed = json.loads(text.strip())
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    match = _JSON_OBJECT.search(text)
    if not match:
        raise UpstreamParseError("Failed to parse AI response")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise UpstreamParseError(f"Failed to parse AI response: {e}")

    if not isinstance(parsed, dict):
        raise UpstreamParseError("Failed to parse AI response")
    return parsed


def fallback_review(company: str, role: str, now: Optional[datetime] = None) -> Review:
    """Deterministic stub used when generation or parsing fails"""
    return sanitize_review({
        "company": company,
        "role": role,
        "experience": "Neutral",
        "difficulty": "Medium",
        "rating": 3,
        "interview_process": "Standard technical interview process",
        "questions_asked": ["Technical questions related to the role"],
        "preparation_tips": "Practice relevant technical skills and review company information",
        "author": "System Generated",
    }, now=now)


class InterviewAI:
    """Prompt builders and parsers around the OpenAI chat completions API"""

    def __init__(self, api_key: Optional[str], model: str = "gpt-4o", client=None, temperature: float = 0.7):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    def _get_client(self):
        if not self.api_key:
            raise ConfigurationError("OPENAI_KEY is not configured on the server.")
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def _complete(self, prompt: str, system_prompt: str = TEXT_SYSTEM_PROMPT) -> str:
        client = self._get_client()
        response = await client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt}
            ],
            temperature=self.temperature,
        )
        return response.choices[0].message.content or ""

    async def _complete_json(self, prompt: str) -> dict:
        text = await self._complete(prompt, JSON_SYSTEM_PROMPT)
        return extract_json_object(text)

    async def generate_freeform(self, prompt: str) -> str:
        return await self._complete(prompt)

    async def generate_review(self, company: str, role: str) -> Review:
        """
        Generate a realistic interview review for a company/role pair.
        A missing credential raises ConfigurationError; every other failure
        degrades to fallback_review().
        """
        self._get_client()

        prompt = f"""
        Generate a realistic and detailed interview review for a {role} position at {company}. Include:
        - Interview experience (Positive/Mixed/Negative)
        - Interview difficulty (Easy/Medium/Hard)
        - Rating (1-5)
        - Recent date
        - Detailed interview process (multiple rounds)
        - At least 4 specific technical questions
        - Comprehensive preparation tips

        Respond in this exact JSON format:
        {{
            "company": "{company}",
            "role": "{role}",
            "experience": "",
            "difficulty": "",
            "rating": 0,
            "date": "",
            "interview_process": "",
            "questions_asked": [],
            "preparation_tips": ""
        }}
        """

        try:
            review = await self._complete_json(prompt)
        except Exception as e:
            logger.error(f"AI review generation failed for {company}/{role}: {e}")
            return fallback_review(company, role)

        questions = review.get("questions_asked")
        return sanitize_review({
            "company": review.get("company") or company,
            "role": review.get("role") or role,
            "experience": review.get("experience") or "Neutral",
            "difficulty": review.get("difficulty") or "Medium",
            "rating": review.get("rating"),
            "date": review.get("date") or datetime.now(timezone.utc).date().isoformat(),
            "interview_process": review.get("interview_process") or "Not specified",
            "questions_asked": questions if isinstance(questions, list) else ["No questions provided"],
            "preparation_tips": review.get("preparation_tips") or "No preparation tips provided",
            "author": "AI Generated",
        })

    async def generate_insights(self, review: dict) -> Optional[dict]:
        """Extra preparation insights for a submitted review. Best-effort: None on any failure."""
        questions = review.get("questions_asked")
        if isinstance(questions, list) and questions:
            questions_text = ", ".join(str(q) for q in questions)
        else:
            questions_text = "None specified"

        company = review.get("company")
        prompt = f"""
        Based on this interview review submission, provide additional insights and suggestions:

        Company: {company}
        Role: {review.get("role")}
        Experience: {review.get("experience")}
        Difficulty: {review.get("difficulty")}
        Interview Process: {review.get("interview_process")}
        Questions Asked: {questions_text}
        Preparation Tips: {review.get("preparation_tips")}

        Please provide:
        1. Additional preparation suggestions
        2. Common follow-up questions for this role
        3. Industry-specific insights for {company}
        4. Salary expectations and negotiation tips

        Respond in this exact JSON format:
        {{
            "additional_prep_tips": "string",
            "common_followup_questions": ["question1", "question2", "question3"],
            "industry_insights": "string",
            "salary_insights": "string"
        }}
        """

        try:
            return await self._complete_json(prompt)
        except Exception as e:
            logger.warning(f"AI insights generation failed: {e}")
            return None

    async def analyze_code(self, code: str, language: str) -> str:
        prompt = (
            f"Analyze this {language} code and provide feedback on correctness, "
            f"efficiency, and best practices:\n\n{code}"
        )
        return await self._complete(prompt)

    async def get_hint(self, current_code: Optional[str], language: Optional[str] = None,
                       problem_id: Optional[str] = None) -> str:
        prompt = "Provide a helpful hint for solving this coding problem without giving away the full solution."
        if problem_id:
            prompt += f"\nProblem: {problem_id}"
        if language:
            prompt += f"\nLanguage: {language}"
        prompt += f"\nCurrent code: {current_code or 'No code yet'}"
        return await self._complete(prompt)

    async def generate_mcqs(self, company: str, role: str, difficulty: str, count: int = 5) -> List[dict]:
        prompt = f"""
        Generate {count} technical interview MCQs for a {role} position at {company} with {difficulty} difficulty.

        Respond in this exact JSON format:
        {{
            "mcqs": [
                {{
                    "question": "string",
                    "options": ["option1", "option2", "option3", "option4"],
                    "correct": 0,
                    "explanation": "string"
                }}
            ]
        }}
        """
        data = await self._complete_json(prompt)
        mcqs = data.get("mcqs")
        if not isinstance(mcqs, list):
            raise UpstreamParseError("AI response did not contain an mcqs list")
        return mcqs

    async def generate_mock_interview(self, company: str, role: str, experience: Optional[str],
                                      duration: Optional[int]) -> dict:
        prompt = f"""
        Generate a mock interview for a {role} position at {company} for someone with {experience} experience.
        Duration: {duration} minutes.

        Include:
        1. 5-7 technical questions with expected answers
        2. 2-3 behavioral questions
        3. Company-specific questions
        4. Difficulty progression from easy to hard

        Respond in this exact JSON format:
        {{
            "questions": [
                {{
                    "type": "technical|behavioral|company",
                    "question": "string",
                    "expectedAnswer": "string",
                    "difficulty": "easy|medium|hard",
                    "timeLimit": "number in minutes"
                }}
            ],
            "totalDuration": "number",
            "tips": ["tip1", "tip2", "tip3"]
        }}
        """
        return await self._complete_json(prompt)

    async def analyze_resume(self, resume_text: str, target_role: Optional[str],
                             target_company: Optional[str]) -> dict:
        prompt = f"""
        Analyze this resume for a {target_role} position at {target_company}:

        {resume_text}

        Provide:
        1. Overall score (1-10)
        2. Strengths
        3. Areas for improvement
        4. Missing keywords
        5. Suggestions for better formatting
        6. ATS compatibility score

        Respond in this exact JSON format:
        {{
            "overallScore": 7,
            "atsScore": 70,
            "strengths": ["strength1", "strength2"],
            "improvements": ["improvement1", "improvement2"],
            "missingKeywords": ["keyword1", "keyword2"],
            "suggestions": ["suggestion1", "suggestion2"]
        }}
        """
        return await self._complete_json(prompt)

    async def generate_study_plan(self, target_role: Optional[str], current_level: Optional[str],
                                  time_available: Optional[int], weak_areas: Optional[List[str]]) -> dict:
        prompt = f"""
        Create a personalized study plan for someone preparing for a {target_role} position.

        Current level: {current_level}
        Time available: {time_available} hours per week
        Weak areas: {", ".join(weak_areas) if weak_areas else "Not specified"}

        Create a 4-week study plan with:
        1. Daily tasks
        2. Weekly goals
        3. Resource recommendations
        4. Practice problems
        5. Mock interview schedule

        Respond with a JSON object containing a "weeks" array with daily tasks.
        """
        return await self._complete_json(prompt)

    async def company_insights(self, name: str) -> dict:
        prompt = f"""
        Provide comprehensive interview insights for {name} company:

        Include:
        1. Interview process overview
        2. Common question types
        3. Company culture and values
        4. Technical stack preferences
        5. Salary ranges for different roles
        6. Interview tips specific to this company

        Respond with a single structured JSON object.
        """
        return await self._complete_json(prompt)
