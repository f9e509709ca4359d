"""Text clean-up helpers for dictionary payloads."""

import re

# Shortest match between "<" and ">"; no attribute or nesting awareness.
_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(text: str) -> str:
    """Remove every ``<...>`` tag from text.

    A ``<`` that survives has no ``>`` after it, so applying this twice gives
    the same result as applying it once.
    """
    return _TAG_RE.sub("", text)
