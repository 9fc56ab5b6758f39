"""Tests for jjnamer.llm.prompts module."""

import pytest

from jjnamer.llm.prompts import BOOKMARK_PROMPT_TEMPLATE, build_prompt


class TestBuildPrompt:
    """Tests for build_prompt function."""

    def test_same_messages_same_prompt(self):
        """Test that the prompt is a pure function of the messages."""
        messages = ["fix login bug", "add retry logic"]

        assert build_prompt(messages) == build_prompt(list(messages))
        assert build_prompt(messages) == build_prompt(tuple(messages))

    def test_embeds_messages_in_order(self):
        """Test that all messages appear in the given order."""
        prompt = build_prompt(["fix login bug", "add retry logic"])

        assert "fix login bug\nadd retry logic" in prompt
        assert prompt.index("fix login bug") < prompt.index("add retry logic")

    def test_messages_are_fenced(self):
        """Test that messages sit inside a code fence after the instructions."""
        prompt = build_prompt(["fix login bug"])

        assert prompt.endswith("```\nfix login bug\n```")

    def test_instructions(self):
        """Test that the prompt asks for a lowercase hyphenated identifier only."""
        prompt = build_prompt(["fix login bug"])

        assert "*all*" in prompt
        assert "lowercase" in prompt
        assert "hyphens" in prompt
        assert "Reply with only the phrase" in prompt

    def test_different_messages_different_prompt(self):
        """Test that the messages are the only variable input."""
        assert build_prompt(["a"]) != build_prompt(["b"])

    def test_braces_in_messages_are_kept(self):
        """Test that template-like text in messages is not interpreted."""
        prompt = build_prompt(["handle {messages} placeholder"])

        assert "handle {messages} placeholder" in prompt

    def test_multiline_descriptions(self):
        """Test that whole descriptions are embedded unchanged."""
        prompt = build_prompt(["fix login bug\n\nThe token expired too early."])

        assert "fix login bug\n\nThe token expired too early." in prompt

    def test_empty_messages_raises(self):
        """Test that an empty sequence is a programming error."""
        with pytest.raises(ValueError):
            build_prompt([])

    def test_template_has_single_placeholder(self):
        """Test that the template only interpolates messages."""
        assert BOOKMARK_PROMPT_TEMPLATE.count("{messages}") == 1
