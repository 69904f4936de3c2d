"""
Best-effort recovery of a JSON object from raw LLM output.

Models often wrap JSON in markdown fences or surround it with prose. The
extractor tries, in order and at most once each:

1. the whole string as JSON
2. the inside of a ```json fenced block
3. the slice from the first '{' to the last '}'

and returns {} when none of them yields a JSON object. It never raises.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\s*(.*?)\s*```", re.IGNORECASE | re.DOTALL)


def _loads_object(candidate: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_json_object(raw_output: Any) -> dict[str, Any]:
    if isinstance(raw_output, dict):
        return raw_output

    if not isinstance(raw_output, str):
        logger.warning("extract_json_object: raw output is %s, not str", type(raw_output).__name__)
        return {}

    text = raw_output.strip()

    parsed = _loads_object(text)
    if parsed is not None:
        return parsed

    fenced = _JSON_FENCE.search(text)
    if fenced:
        parsed = _loads_object(fenced.group(1))
        if parsed is not None:
            return parsed

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        parsed = _loads_object(text[start : end + 1])
        if parsed is not None:
            return parsed

    logger.info("extract_json_object: no JSON object found in %d chars of output", len(text))
    return {}
