"""
Unit tests for the off-topic prompt guard.
"""
import pytest

from virtual_sa.services.prompt_guard import REJECTION_MESSAGES, check_prompt


class TestPromptGuard:
    """Test prompt acceptance and rejection."""

    def test_short_greeting_rejected(self):
        result = check_prompt("hi")

        assert not result.accepted
        assert result.reason == "too_short"
        assert result.message == REJECTION_MESSAGES["too_short"]

    def test_business_use_case_accepted(self):
        result = check_prompt("Build a fraud detection pipeline for card transactions")

        assert result.accepted
        assert result.reason is None

    def test_denylisted_word_rejected(self):
        result = check_prompt("Create a recipe recommendation app")

        assert not result.accepted
        assert result.reason == "off_topic"
        assert result.matched == "recipe"

    @pytest.mark.parametrize("prompt", [
        "Hello, how are you?",
        "   Thank you so much!!!   ",
        "good morning!!!!!!!!!!!",
        "what's up?????????????",
        "how are you doing today?",
    ])
    def test_social_chatter_rejected(self, prompt):
        result = check_prompt(prompt)

        assert not result.accepted
        assert result.reason == "social"

    def test_social_match_requires_whole_text(self):
        result = check_prompt("Hello, I need an agent that summarizes support tickets")
        assert result.accepted

    def test_whole_word_match_only(self):
        # "dating" inside "validating" is not a match
        result = check_prompt("Build a pipeline validating supplier invoices with OCR")
        assert result.accepted

    def test_case_insensitive(self):
        result = check_prompt("Predict the FOOTBALL league winner with an LLM")

        assert not result.accepted
        assert result.matched == "football"

    def test_empty_prompt(self):
        assert check_prompt("").reason == "too_short"
        assert check_prompt(None).reason == "too_short"
