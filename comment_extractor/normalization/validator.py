"""Coerces parsed model JSON into Comment records."""

from typing import Any

from comment_extractor.normalization.models import Comment

COMMENTS_FIELD = "comments"
_OPTIONAL_FIELDS = ("username", "timestamp", "likes")


def coerce_comments(data: Any) -> list[Comment] | None:
    """Build comments from a parsed payload, or None if its shape is wrong.

    The payload must be an object whose ``comments`` field is an array.
    Unknown keys are dropped and optional fields are only kept when present,
    so nothing is invented for fields the model did not return.
    """
    if not isinstance(data, dict):
        return None
    items = data.get(COMMENTS_FIELD)
    if not isinstance(items, list):
        return None
    comments: list[Comment] = []
    for item in items:
        comment = _coerce_comment(item)
        if comment is not None:
            comments.append(comment)
    return comments


def _coerce_comment(raw: Any) -> Comment | None:
    if isinstance(raw, str):
        return Comment(text=raw) if raw.strip() else None
    if not isinstance(raw, dict):
        return None
    text = _scalar_to_str(raw.get("text"))
    if text is None or not text.strip():
        return None
    optional = {name: _scalar_to_str(raw.get(name)) for name in _OPTIONAL_FIELDS}
    return Comment(text=text, **optional)


def _scalar_to_str(value: Any) -> str | None:
    # bool is an int subclass; "True" is not a like count.
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None
