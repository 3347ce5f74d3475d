import asyncio

import pytest

from core.exceptions import ConfigurationError, UpstreamParseError
from services.interview_ai import InterviewAI, extract_json_object, fallback_review

GENERATED = {
    "company": "Zeta Corp",
    "role": "Data Wizard",
    "experience": "Positive",
    "difficulty": "Hard",
    "rating": "4",
    "date": "2024-08-01",
    "interview_process": "3 rounds",
    "questions_asked": ["Explain joins", "  ", "Design a pipeline"],
    "preparation_tips": "Practice SQL",
}


def run(coro):
    return asyncio.run(coro)


class TestExtractJsonObject:
    def test_whole_reply_is_json(self):
        assert extract_json_object('{"a": 1}') == {"a": 1}

    def test_object_embedded_in_prose(self):
        text = 'Sure! Here is the review:\n```json\n{"a": {"b": [1, 2]}}\n```\nGood luck.'
        assert extract_json_object(text) == {"a": {"b": [1, 2]}}

    def test_no_braces(self):
        with pytest.raises(UpstreamParseError):
            extract_json_object("I cannot help with that.")

    def test_malformed_json(self):
        with pytest.raises(UpstreamParseError):
            extract_json_object("Result: {rating: four}")

    def test_greedy_match_spanning_two_objects_fails(self):
        with pytest.raises(UpstreamParseError):
            extract_json_object('first {"a": 1} then {"b": 2}')

    def test_top_level_array_is_not_an_object(self):
        with pytest.raises(UpstreamParseError):
            extract_json_object("[1, 2, 3]")

    def test_empty_reply(self):
        with pytest.raises(UpstreamParseError):
            extract_json_object("")


class TestGenerateReview:
    def test_parsed_reply_is_sanitized_and_tagged(self, ai_service, ai_client):
        ai_client.reply_with(GENERATED)

        review = run(ai_service.generate_review("Zeta Corp", "Data Wizard"))

        assert review.author == "AI Generated"
        assert review.rating == 4
        assert review.questions_asked == ["Explain joins", "Design a pipeline"]
        assert review.date == "2024-08-01"
        assert len(ai_client.calls) == 1
        assert ai_client.calls[0]["model"] == "gpt-4o"

    def test_missing_fields_get_placeholders(self, ai_service, ai_client):
        ai_client.reply_with({"rating": 11})

        review = run(ai_service.generate_review("Zeta Corp", "Data Wizard"))

        assert review.company == "Zeta Corp"
        assert review.role == "Data Wizard"
        assert review.rating == 5
        assert review.interview_process == "Not specified"
        assert review.questions_asked == ["No questions provided"]
        assert review.preparation_tips == "No preparation tips provided"

    def test_unparsable_reply_falls_back(self, ai_service, ai_client):
        ai_client.reply_with("Sorry, I can't do that.")

        review = run(ai_service.generate_review("Zeta Corp", "Data Wizard"))

        assert review.author == "System Generated"
        assert review.rating == 3
        assert review.questions_asked == ["Technical questions related to the role"]

    def test_upstream_error_falls_back(self, ai_service, ai_client):
        ai_client.fail_with(RuntimeError("connection reset"))

        review = run(ai_service.generate_review("Zeta Corp", "Data Wizard"))

        assert review.author == "System Generated"

    def test_missing_credential_is_not_degraded(self, ai_client):
        ai = InterviewAI(None, client=ai_client)

        with pytest.raises(ConfigurationError):
            run(ai.generate_review("Zeta Corp", "Data Wizard"))
        assert ai_client.calls == []


class TestGenerateInsights:
    def test_returns_parsed_object(self, ai_service, ai_client):
        ai_client.reply_with('Insights: {"industry_insights": "Fast paced"}')

        insights = run(ai_service.generate_insights({"company": "Acme", "role": "Engineer"}))

        assert insights == {"industry_insights": "Fast paced"}
        assert "Questions Asked: None specified" in ai_client.calls[0]["messages"][1]["content"]

    def test_parse_failure_returns_none(self, ai_service, ai_client):
        ai_client.reply_with("no json here")
        assert run(ai_service.generate_insights({"company": "Acme", "role": "Engineer"})) is None

    def test_missing_credential_returns_none(self, ai_client):
        ai = InterviewAI("", client=ai_client)
        assert run(ai.generate_insights({"company": "Acme", "role": "Engineer"})) is None


def test_generate_freeform_returns_raw_text(ai_service, ai_client):
    ai_client.reply_with("Use a hash map.")
    assert run(ai_service.generate_freeform("hint please")) == "Use a hash map."


def test_generate_mcqs_requires_list(ai_service, ai_client):
    ai_client.reply_with({"mcqs": "none"})
    with pytest.raises(UpstreamParseError):
        run(ai_service.generate_mcqs("Acme", "Engineer", "Easy"))


def test_fallback_review_is_deterministic():
    first = fallback_review("Acme", "Engineer")
    second = fallback_review("Acme", "Engineer")
    assert first.model_dump(exclude={"id"}) == second.model_dump(exclude={"id"})
    assert first.author == "System Generated"
