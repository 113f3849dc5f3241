import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Lowercases `text`, collapses every run of non-alphanumeric characters
    into one hyphen and trims hyphens from both ends.

    >>> slugify("My Trip! #1")
    'my-trip-1'
    """
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


def resolve_slug(slug: Optional[str], source: Optional[str]) -> str:
    """Normalizes a submitted slug, deriving it from `source` when blank."""
    if slug and slug.strip():
        return slugify(slug)
    return slugify(source or "")
