"""
Parsing of the language model's news response.

The model is asked for a bare JSON array but sometimes wraps it in markdown
fences or surrounds it with prose, so parsing happens in two stages: a strict
parse of the whole text, then a recovery parse of the first bracketed array.
"""

import json
import re
from typing import Any, Optional

CODE_FENCE_OPEN = re.compile(r"```json\s*")
CODE_FENCE_CLOSE = re.compile(r"```\s*")
BRACKETED_ARRAY = re.compile(r"\[[\s\S]*\]")

class NewsParseError(ValueError):
    """Raised when no JSON value can be recovered from a model response."""

def strip_code_fences(text: str) -> str:
    """Remove markdown code fences around a model response."""
    text = CODE_FENCE_OPEN.sub("", text)
    text = CODE_FENCE_CLOSE.sub("", text)
    return text.strip()

def _strict_parse(text: str) -> Optional[Any]:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return None

def _recover_parse(text: str) -> Optional[Any]:
    match = BRACKETED_ARRAY.search(text)
    if not match:
        return None
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError:
        return None

def parse_news_items(text: str) -> Any:
    """
    Parse a model response into a JSON value.

    Args:
        text: Response text, already stripped of code fences

    Returns:
        The decoded JSON value (normally a list of news objects)

    Raises:
        NewsParseError: If neither the strict nor the recovery parse succeeds
    """
    result = _strict_parse(text)
    if result is not None:
        return result

    result = _recover_parse(text)
    if result is not None:
        return result

    raise NewsParseError("Could not find JSON array in response")
