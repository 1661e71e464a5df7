"""JSON well-formedness checks and canonical serialization for document content."""

import json
import math
from typing import Any, Optional

EMPTY_CONTENT_FALLBACK = "{}"


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {token}")
    return value


def _parse(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant, parse_float=_finite_float)


def _dump(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def is_valid_json(text: Optional[str]) -> bool:
    """Check whether text is a syntactically valid JSON value.

    Objects, arrays and scalars are all accepted. Empty or whitespace-only
    text is not, nor is anything whose compact form would not be valid
    UTF-8 JSON (out-of-range numbers, lone surrogate escapes).
    """
    if text is None or not text.strip():
        return False

    try:
        _dump(_parse(text)).encode("utf-8")
    except (ValueError, RecursionError):
        return False
    return True


def canonicalize(text: Optional[str]) -> str:
    """Re-serialize JSON text in compact form.

    Invalid input degrades to ``"{}"`` instead of raising.
    """
    if not is_valid_json(text):
        return EMPTY_CONTENT_FALLBACK

    return _dump(_parse(text))


def empty_document_content() -> str:
    """Default content for a new document: an object with no blocks."""
    return json.dumps({"blocks": []}, separators=(",", ":"))
