"""Parsing and merging of generated (LLM) assessment replies.

A text generator may be asked to produce an assessment as JSON. Its reply is
free text: the JSON may sit inside a fenced code block or be surrounded by
prose. ``extract_json_object`` recovers the object; ``merge_enrichment``
overlays it on the deterministic assessment payload, accepting a section only
when its shape matches the deterministic one. The result therefore always
validates against the API response schema.
"""

import json
import math
import re
from typing import Any, get_args

from logistics_ai_maturity.core.models import MaturityLevel, Rating
from logistics_ai_maturity.observability import get_logger

logger = get_logger(__name__)

_CODE_BLOCK_PATTERN = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```")

# Keys whose string values must be valid maturity level labels.
_LEVEL_KEYS: frozenset[str] = frozenset({"maturityLevel", "level"})
_LEVEL_VALUES: frozenset[str] = frozenset(level.value for level in MaturityLevel)

# Keys whose string values must be Low/Medium/High ratings.
_RATING_KEYS: frozenset[str] = frozenset(
    {"priority", "effort", "impact", "probability", "complexity"}
)
_RATING_VALUES: frozenset[str] = frozenset(get_args(Rating))


def extract_json_object(text: str | None) -> dict[str, Any] | None:
    """Extract a JSON object from a generated reply.

    Prefers the body of a fenced code block, then narrows to the span between
    the first ``{`` and the last ``}``.

    Args:
        text: Raw reply text.

    Returns:
        The parsed object, or None when the text holds no valid JSON object.
    """
    if not text:
        return None

    candidate = text
    block_match = _CODE_BLOCK_PATTERN.search(candidate)
    if block_match:
        candidate = block_match.group(1)

    start_index = candidate.find("{")
    last_index = candidate.rfind("}")
    if start_index != -1 and last_index > start_index:
        candidate = candidate[start_index : last_index + 1]

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        logger.debug("Generated reply is not valid JSON", reply_length=len(text))
        return None

    if not isinstance(parsed, dict):
        return None
    return parsed


def merge_enrichment(
    fallback: dict[str, Any],
    parsed: dict[str, Any],
) -> tuple[dict[str, Any], list[str]]:
    """Overlay shape-compatible sections of a parsed reply onto the fallback payload.

    Only top-level keys already present in ``fallback`` are considered.
    Each is taken from ``parsed`` when its shape matches the fallback value,
    otherwise the fallback value is kept.

    Args:
        fallback: Deterministic assessment payload (camelCase dict).
        parsed: Object extracted from the generated reply.

    Returns:
        Tuple of (merged payload, keys taken from the reply).
    """
    merged = dict(fallback)
    accepted: list[str] = []
    rejected: list[str] = []

    for key, template in fallback.items():
        if key not in parsed:
            continue
        if _matches_shape(parsed[key], template, key):
            merged[key] = parsed[key]
            accepted.append(key)
        else:
            rejected.append(key)

    if rejected:
        logger.info(
            "Generated sections rejected on shape mismatch",
            rejected_sections=rejected,
        )
    return merged, accepted


def _matches_shape(value: Any, template: Any, key: str = "") -> bool:
    """Return True when ``value`` has the same structure as ``template``.

    Dicts must contain every template key with matching values (extra keys are
    allowed). Lists must have the template's length, and every item must match
    the template's first item. Integer fields accept only ints; float fields
    accept finite ints and floats. Booleans never count as numbers.
    """
    if isinstance(template, dict):
        if not isinstance(value, dict):
            return False
        return all(
            sub_key in value and _matches_shape(value[sub_key], sub_template, sub_key)
            for sub_key, sub_template in template.items()
        )

    if isinstance(template, list):
        if not isinstance(value, list):
            return False
        if len(value) != len(template):
            return False
        if not template:
            return True
        return all(_matches_shape(item, template[0], key) for item in value)

    if isinstance(template, bool):
        return isinstance(value, bool)

    if isinstance(template, int):
        return isinstance(value, int) and not isinstance(value, bool)

    if isinstance(template, float):
        return (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and math.isfinite(value)
        )

    if isinstance(template, str):
        if not isinstance(value, str):
            return False
        if key in _LEVEL_KEYS:
            return value in _LEVEL_VALUES
        if key in _RATING_KEYS:
            return value in _RATING_VALUES
        return True

    return value is None
