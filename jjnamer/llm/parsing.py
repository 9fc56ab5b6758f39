"""Bookmark name extraction from model completions.

Contains functions for reading a name out of free-text LLM output:
- extract_candidate: Find the token the model meant as the name
- extract_bookmark_name: Extract, normalize and prefix a bookmark name
"""

import re

from jjnamer.llm.exceptions import ExtractionError
from jjnamer.logging import get_logger
from jjnamer.naming import apply_prefix, is_valid_bookmark_name, normalize_slug

logger = get_logger("llm.parsing")

_WRAPPING_CHARS = "\"'`"
_TRAILING_PUNCTUATION = ".,;:!?"
_LABEL_SEPARATOR = ": "

# Letters, digits, underscores and hyphens, with at most one "/" boundary
_TOKEN_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]*(/[A-Za-z0-9_-]+)?$")
_LIST_MARKER_RE = re.compile(r"^(?:[-*+]|\d+[.)]|#+)\s+")
_CODE_SPAN_RE = re.compile(r"`([^`\n]+)`")
_FENCE = "```"


def _strip_wrapping(text: str) -> str:
    """Strip whitespace and surrounding quotes/backticks."""
    previous = None
    while text != previous:
        previous = text
        text = text.strip().strip(_WRAPPING_CHARS)
    return text


def _clean_line(line: str) -> str:
    """Remove list markers, emphasis and quotes around a line."""
    cleaned = _LIST_MARKER_RE.sub("", line.strip())
    cleaned = cleaned.strip("*")
    return _strip_wrapping(cleaned)


def _is_compound(token: str) -> bool:
    return "-" in token or "/" in token


def _token_candidate(text: str) -> str | None:
    """Return `text` if it is a single slug-like token.

    Sentence punctuation after the token is dropped only when the token is
    compound, so "Sure!" and "Sorry." are never names.
    """
    if len(text.split()) != 1:
        return None

    token = text.rstrip(_TRAILING_PUNCTUATION)
    if token != text:
        token = _strip_wrapping(token)
        if not _is_compound(token):
            return None

    return token if _TOKEN_RE.match(token) else None


def _label_candidate(cleaned: str) -> str | None:
    """The token of a "Bookmark name: fix-login" style line."""
    label, separator, value = cleaned.partition(_LABEL_SEPARATOR)
    if not separator or not label.strip():
        return None

    token = _token_candidate(_strip_wrapping(value))
    if token is None or not _is_compound(token):
        return None
    return token


def _line_candidate(line: str) -> str | None:
    """The name a line holds, or None if it is prose."""
    cleaned = _clean_line(line)
    if not cleaned:
        return None

    candidate = _token_candidate(cleaned) or _label_candidate(cleaned)
    if candidate is not None:
        return candidate

    for span in _CODE_SPAN_RE.findall(line):
        if _TOKEN_RE.match(span.strip()):
            return span.strip()
    return None


def _is_single_token(text: str) -> bool:
    return "\n" not in text and len(text.split()) == 1


def extract_candidate(raw_completion: str) -> str:
    """Find the bookmark name the model intended in its reply.

    A reply that is a single token is returned as is. Otherwise the first
    line holding a name is used: a lone token, a "label: token" line or an
    inline code span. Lines of prose, fences and interjections like "Sure!"
    are skipped.

    Args:
        raw_completion: The raw text returned by the model.

    Returns:
        The candidate name, not yet normalized.

    Raises:
        ExtractionError: If no line holds a slug-like token.
    """
    text = _strip_wrapping(raw_completion)
    if not text:
        raise ExtractionError("The model returned no text to extract a name from.")

    if _is_single_token(text):
        return text

    for line in raw_completion.splitlines():
        if line.strip().startswith(_FENCE):
            continue
        candidate = _line_candidate(line)
        if candidate is not None:
            return candidate

    raise ExtractionError(
        "Could not find a bookmark name in the model's reply.\n"
        f"Raw response:\n{raw_completion}"
    )


def extract_bookmark_name(raw_completion: str, prefix: str | None = None) -> str:
    """Turn a model completion into a bookmark name jj will accept.

    Args:
        raw_completion: The raw text returned by the model.
        prefix: Optional prefix, joined to the name with "/".

    Returns:
        A non-empty name made of [a-z0-9/-].

    Raises:
        ExtractionError: If no candidate is found or normalization leaves nothing.
    """
    candidate = extract_candidate(raw_completion)
    logger.debug("Candidate name: %r", candidate)

    name = normalize_slug(candidate)
    if not name:
        raise ExtractionError(
            f"The model's suggestion {candidate!r} contains no usable characters."
        )

    try:
        bookmark = apply_prefix(name, prefix)
    except ValueError as e:
        raise ExtractionError(str(e))

    if not is_valid_bookmark_name(bookmark):
        raise ExtractionError(f"Could not build a valid bookmark name from {candidate!r}.")
    return bookmark
