"""Bookmark name normalization.

Pure functions turning free text into names jj accepts:
- normalize_slug: Lower-case and reduce to [a-z0-9-]
- apply_prefix: Join a normalized prefix and a name with "/"
- is_valid_bookmark_name: Check the final shape of a name
"""

import re

PREFIX_SEPARATOR = "/"

_DISALLOWED_RUN_RE = re.compile(r"[^a-z0-9-]+")
_REPEATED_HYPHENS_RE = re.compile(r"-{2,}")
_SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def normalize_slug(text: str) -> str:
    """Reduce text to a lowercase, hyphen-separated slug.

    Every run of characters outside [a-z0-9-] becomes a single hyphen, repeated
    hyphens collapse, and leading/trailing hyphens are stripped. The result may
    be empty. Applying the function to its own output returns it unchanged.

    Examples:
        >>> normalize_slug("My-Cool_Name!!")
        'my-cool-name'
        >>> normalize_slug("fix login  bug")
        'fix-login-bug'
        >>> normalize_slug("!!!")
        ''
    """
    slug = text.lower()
    slug = _DISALLOWED_RUN_RE.sub("-", slug)
    slug = _REPEATED_HYPHENS_RE.sub("-", slug)
    return slug.strip("-")


def apply_prefix(name: str, prefix: str | None = None) -> str:
    """Prepend a normalized `prefix/` to an already normalized name.

    Raises:
        ValueError: If the prefix normalizes to nothing.
    """
    if prefix is None:
        return name

    normalized_prefix = normalize_slug(prefix)
    if not normalized_prefix:
        raise ValueError(f"Prefix {prefix!r} contains no usable characters.")

    return f"{normalized_prefix}{PREFIX_SEPARATOR}{name}"


def is_valid_bookmark_name(name: str) -> bool:
    """Check that name is a slug, optionally preceded by one `slug/` prefix."""
    parts = name.split(PREFIX_SEPARATOR)
    if len(parts) > 2:
        return False
    return all(_SLUG_RE.match(part) for part in parts)
