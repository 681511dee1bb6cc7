"""Helpers for pulling JSON out of model output."""

import json
import re
from typing import Any

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```")


def extract_json_text(text: str) -> str:
    """
    Return the JSON object embedded in ``text``.

    Models sometimes wrap JSON in a markdown fence or add a sentence around
    it even in JSON mode. Fenced content wins, then the outermost braces,
    else the stripped text unchanged.
    """
    match = _FENCED_JSON.search(text)
    if match:
        return match.group(1)

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return text[start : end + 1]

    return text.strip()


def loads_json(text: str) -> Any:
    """Decode model output as JSON; raises json.JSONDecodeError."""
    return json.loads(extract_json_text(text))
