# =============================================================================
# core/formatter.py  :  Response Formatter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns an arbitrary decoded API payload (parsed JSON or raw text) into a
#   short, human-readable summary for the fetchApi tool.
#
# HOW IT WORKS:
#   1. classify() tags the payload with a PayloadKind
#   2. format_response() picks the renderer for that kind from _RENDERERS
#   3. the renderer builds the text
#
#   format_response() always returns text.  If a renderer fails on a payload
#   it did not expect, the failure is caught right there and the payload is
#   dumped as indented JSON instead.
#
# LIMITS:
#   Lists of objects show at most _MAX_SAMPLE_ITEMS entries.  Lists of plain
#   values are always shown in full.  Array fields inside an object list their
#   elements only when there are between 1 and _MAX_INLINE_ELEMENTS of them.
# =============================================================================

import json
import logging
from enum import Enum
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

_MAX_SAMPLE_ITEMS = 3
_MAX_INLINE_ELEMENTS = 5

EMPTY_ARRAY_MESSAGE = "The API returned an empty array."

# Fields of an object payload that are rendered as the Status line.
_STATUS_FIELDS = ("status", "success")


class PayloadKind(Enum):
    EMPTY_LIST = "empty_list"
    OBJECT_LIST = "object_list"
    VALUE_LIST = "value_list"
    MAPPING = "mapping"
    SCALAR = "scalar"


def classify(payload: Any) -> PayloadKind:
    """Tag a decoded payload with the shape the formatter dispatches on.

    A list counts as a list of objects when its first element is a mapping.
    Strings are scalars, not sequences.
    """
    if isinstance(payload, (list, tuple)):
        if not payload:
            return PayloadKind.EMPTY_LIST
        if isinstance(payload[0], Mapping):
            return PayloadKind.OBJECT_LIST
        return PayloadKind.VALUE_LIST
    if isinstance(payload, Mapping):
        return PayloadKind.MAPPING
    return PayloadKind.SCALAR


# -----------------------------------------------------------------------------
# Small helpers
# -----------------------------------------------------------------------------
def _header(source: str) -> str:
    return f"Response from {source}"


def _label(key: str) -> str:
    """Upper-case only the first character: "userId" -> "UserId"."""
    return key[:1].upper() + key[1:]


def _inline(value: Any) -> str:
    """Render a value on one line.

    Containers and JSON literals (true/false/null) are written as JSON, so a
    decoded payload reads the way the API sent it.  Everything else goes
    through str().
    """
    if value is None or isinstance(value, (bool, Mapping, list, tuple)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


# -----------------------------------------------------------------------------
# Renderers: one per PayloadKind, each (payload, source) -> str
# -----------------------------------------------------------------------------
def _render_empty_list(payload: Any, source: str) -> str:
    return EMPTY_ARRAY_MESSAGE


def _render_object_list(payload: Any, source: str) -> str:
    total = len(payload)
    lines = [_header(source), "", f"Found {total} items", ""]

    for index, item in enumerate(payload[:_MAX_SAMPLE_ITEMS], start=1):
        lines.append(f"Item {index}:")
        if isinstance(item, Mapping):
            for key, value in item.items():
                lines.append(f"  {key}: {_inline(value)}")
        else:
            lines.append(f"  {_inline(item)}")
        lines.append("")

    if total > _MAX_SAMPLE_ITEMS:
        lines.append(f"... and {total - _MAX_SAMPLE_ITEMS} more items")

    return "\n".join(lines).rstrip()


def _render_value_list(payload: Any, source: str) -> str:
    # No truncation here, unlike lists of objects.
    return "\n".join([
        _header(source),
        "",
        f"Found {len(payload)} items",
        ", ".join(_inline(item) for item in payload),
    ])


def _status_line(payload: Mapping) -> str | None:
    if "status" in payload:
        return f"Status: {_inline(payload['status'])}"
    success = payload.get("success")
    if isinstance(success, bool):
        return f"Status: {'Success' if success else 'Failed'}"
    return None


def _render_field(key: str, value: Any) -> list[str]:
    label = _label(key)

    if isinstance(value, (list, tuple)):
        lines = [f"{label}: {len(value)} items"]
        if 1 <= len(value) <= _MAX_INLINE_ELEMENTS:
            lines.extend(f"  - {_inline(element)}" for element in value)
        return lines

    if isinstance(value, Mapping):
        lines = [f"{label}:"]
        lines.extend(f"  • {k}: {_inline(v)}" for k, v in value.items())
        return lines

    return [f"{label}: {_inline(value)}"]


def _render_mapping(payload: Any, source: str) -> str:
    lines = [_header(source), ""]

    if payload.get("error"):
        lines.append(f"Error: {_inline(payload['error'])}")
        if "message" in payload:
            lines.append(f"Message: {_inline(payload['message'])}")
        return "\n".join(lines)

    status = _status_line(payload)
    if status is not None:
        lines.append(status)

    for key, value in payload.items():
        if key in _STATUS_FIELDS:
            continue
        lines.extend(_render_field(key, value))

    return "\n".join(lines)


def _render_scalar(payload: Any, source: str) -> str:
    return f"{_header(source)}\n\n{_inline(payload)}"


_RENDERERS: dict[PayloadKind, Callable[[Any, str], str]] = {
    PayloadKind.EMPTY_LIST: _render_empty_list,
    PayloadKind.OBJECT_LIST: _render_object_list,
    PayloadKind.VALUE_LIST: _render_value_list,
    PayloadKind.MAPPING: _render_mapping,
    PayloadKind.SCALAR: _render_scalar,
}


def render_fallback(payload: Any, source: str) -> str:
    """Header plus the payload as indented JSON.

    Falls back to repr(), and to a fixed placeholder when even repr() fails
    (a value whose __str__/__repr__ raises, or nesting too deep to recurse).
    """
    try:
        dumped = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    except Exception:
        try:
            dumped = repr(payload)
        except Exception:
            dumped = f"<unrenderable payload of type {type(payload).__name__}>"
    return f"{_header(source)}\n\n{dumped}"


# =============================================================================
# PUBLIC API
# =============================================================================
def format_response(payload: Any, source: str) -> str:
    """Summarize a decoded API payload as readable text.

    Args:
        payload: Parsed JSON value (dict, list, str, number, bool, None) or
                 the raw response text.
        source: Where the payload came from, shown in the header.

    Returns:
        The summary text.  Never raises: if rendering fails, the payload is
        returned as indented JSON under the same header.
    """
    try:
        return _RENDERERS[classify(payload)](payload, source)
    except Exception as exc:
        logger.debug("Formatting %s payload from %s failed: %s",
                     type(payload).__name__, source, exc.__class__.__name__)
        return render_fallback(payload, source)
