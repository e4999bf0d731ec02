"""Human-readable location labels."""

import re
from typing import Any

_WORD_RE = re.compile(r"\w\S*")


def title_case(text: str) -> str:
    """Uppercase the first letter of each word and lowercase the rest.

    A word is a word character followed by any run of non-space characters,
    so ``"o'neill"`` becomes ``"O'neill"``.
    """
    return _WORD_RE.sub(lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def resolve_label(response: Any, fallback_query: str) -> str:
    """Build ``"Name, CC"`` from an API response, else title-case the user's query."""
    if isinstance(response, dict) and response.get("name"):
        country = (response.get("sys") or {}).get("country")
        return f"{response['name']}, {country}" if country else str(response["name"])
    return title_case(fallback_query.strip())
