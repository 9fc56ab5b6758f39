"""Prompt template for bookmark name generation."""

from typing import Sequence

BOOKMARK_PROMPT_TEMPLATE = """Summarize *all* of the commit messages below in a single short phrase.

Rules:
- Use 2-4 words, all lowercase.
- Join the words with hyphens, e.g. "fix-login-retry".
- Do not mention branches or bookmarks.
- Reply with only the phrase. No explanation, no quotes, no markdown.

```
{messages}
```"""


def build_prompt(messages: Sequence[str]) -> str:
    """Build the prompt for a non-empty sequence of commit messages.

    The messages are embedded in order, one after another. The same messages
    always produce the same prompt.

    Raises:
        ValueError: If messages is empty.
    """
    if not messages:
        raise ValueError("At least one commit message is required to build a prompt.")

    return BOOKMARK_PROMPT_TEMPLATE.format(messages="\n".join(messages))
