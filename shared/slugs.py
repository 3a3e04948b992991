# shared/slugs.py
import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")


def slugify(name: str) -> str:
    """
    Derive a URL slug from a display name.

    >>> slugify("Chemistry A2!!")
    'chemistry-a2'
    """
    slug = _DISALLOWED.sub("", name.lower().strip())
    return _WHITESPACE.sub("-", slug)
