"""
Coerce an arbitrary JSON-ish payload into a fully populated SummaryRecord.

Normalization is total: any input (None, lists, arrays of objects, nested
junk) produces a valid record, with unrecognized or malformed fields falling
back to their defaults. Normalizing a dumped record yields the same record.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from simplifier.schemas.summary import MoneyAndDates, Obligations, SummaryRecord

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 70

# canonical key -> older/alternate keys models (and earlier schema versions) use
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "tldr": ("summary",),
    "partiesPurpose": ("parties_purpose",),
    "obligations": (),
    "moneyAndDates": ("money_and_dates",),
    "riskFlags": ("risk_flags",),
    "actions": ("nextSteps", "next_steps"),
    "unknowns": (),
    "excerpt": (),
    "confidence": (),
}

# flat keys from the earlier UI schema, folded into the nested groups
_FLAT_GROUP_ALIASES: dict[tuple[str, str], str] = {
    ("obligations", "you"): "youMust",
    ("obligations", "them"): "theyMust",
    ("moneyAndDates", "payments"): "moneyTerms",
    ("moneyAndDates", "dates"): "datesAndDeadlines",
}

RECOGNIZED_KEYS: frozenset[str] = frozenset(
    list(FIELD_ALIASES)
    + [alias for aliases in FIELD_ALIASES.values() for alias in aliases]
    + list(_FLAT_GROUP_ALIASES.values())
)

_MISSING = object()


def recognized_keys(raw: Any) -> set[str]:
    """Keys of `raw` that the normalizer knows how to read."""
    if not isinstance(raw, Mapping):
        return set()
    return {key for key in raw if key in RECOGNIZED_KEYS}


def _lookup(raw: Mapping[str, Any], field: str) -> Any:
    if field in raw:
        return raw[field]
    for alias in FIELD_ALIASES.get(field, ()):
        if alias in raw:
            return raw[alias]
    return _MISSING


def to_str(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def to_str_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        items = (to_str(item) for item in value)
        return [item for item in items if item]
    if isinstance(value, str) and value.strip():
        return [value.strip()]
    return []


def _to_number(value: Any) -> int | float | None:
    """JSON-style number from a raw value; strings parse like JSON literals."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip().rstrip("%").strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return None
    return None


def to_confidence(value: Any) -> int:
    """
    0-100 integer confidence.

    Floats in [0.0, 1.0] are fractions and get scaled by 100; integers are
    always percentages, so an already-normalized value stays put.
    """
    number = _to_number(value)
    if number is None or (isinstance(number, float) and math.isnan(number)):
        return DEFAULT_CONFIDENCE

    if isinstance(number, float) and 0.0 <= number <= 1.0:
        number = number * 100

    clamped = min(100, max(0, number))
    return int(math.floor(clamped + 0.5))


def _group(raw: Mapping[str, Any], field: str) -> Mapping[str, Any]:
    value = _lookup(raw, field)
    return value if isinstance(value, Mapping) else {}


def _group_list(raw: Mapping[str, Any], group: Mapping[str, Any], field: str, key: str) -> list[str]:
    if key in group:
        return to_str_list(group[key])
    flat_key = _FLAT_GROUP_ALIASES.get((field, key))
    if flat_key and flat_key in raw:
        return to_str_list(raw[flat_key])
    return []


def normalize_summary(raw: Any) -> SummaryRecord:
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.debug("normalize_summary: ignoring non-object payload (%s)", type(raw).__name__)
        raw = {}

    obligations = _group(raw, "obligations")
    money_and_dates = _group(raw, "moneyAndDates")
    confidence = _lookup(raw, "confidence")

    return SummaryRecord(
        tldr=to_str(_lookup(raw, "tldr")),
        parties_purpose=to_str(_lookup(raw, "partiesPurpose")),
        obligations=Obligations(
            you=_group_list(raw, obligations, "obligations", "you"),
            them=_group_list(raw, obligations, "obligations", "them"),
        ),
        money_and_dates=MoneyAndDates(
            payments=_group_list(raw, money_and_dates, "moneyAndDates", "payments"),
            dates=_group_list(raw, money_and_dates, "moneyAndDates", "dates"),
        ),
        risk_flags=to_str_list(_lookup(raw, "riskFlags")),
        actions=to_str_list(_lookup(raw, "actions")),
        unknowns=to_str_list(_lookup(raw, "unknowns")),
        excerpt=to_str(_lookup(raw, "excerpt")),
        confidence=DEFAULT_CONFIDENCE if confidence is _MISSING else to_confidence(confidence),
    )
