"""Parsing rungs used by the response normalizer.

Each rung takes the raw model reply and returns a comment list, or None to
let the next rung try. None of them raise.
"""

import json
import re
from typing import Any

from comment_extractor.normalization.models import Comment
from comment_extractor.normalization.validator import coerce_comments

_FENCED_BLOCK = re.compile(r"```[\w-]*[ \t]*\r?\n?([\s\S]*?)```")
_LABELLED_FRAGMENT = re.compile(
    r"""["']?\b(?:comment|text|username)\b["']?\s*:\s*"""
    r"""(?:"([^"\n]*)"|'([^'\n]*)'|([^,}\n]+))""",
    re.IGNORECASE,
)

_JSON_LITERALS = frozenset({"null", "true", "false"})

_NOT_PARSED = object()


def parse_fenced_block(raw: str) -> list[Comment] | None:
    """Parse the inner content of the first ``` fenced block."""
    match = _FENCED_BLOCK.search(raw)
    if match is None:
        return None
    return _coerce_candidate(match.group(1))


def parse_brace_span(raw: str) -> list[Comment] | None:
    """Parse the text between the first '{' and the last '}'."""
    start = raw.find("{")
    end = raw.rfind("}")
    if start == -1 or end <= start:
        return None
    return _coerce_candidate(raw[start : end + 1])


def parse_whole_text(raw: str) -> list[Comment] | None:
    return _coerce_candidate(raw)


def scrape_labelled_fragments(raw: str) -> list[Comment] | None:
    """Pick ``text: value`` style fragments out of otherwise unparseable text."""
    comments: list[Comment] = []
    for line in raw.splitlines():
        for match in _LABELLED_FRAGMENT.finditer(line):
            value = _fragment_value(match)
            if value:
                comments.append(Comment(text=value))
    return comments or None


def _fragment_value(match: re.Match[str]) -> str:
    double_quoted, single_quoted, bare = match.groups()
    if double_quoted is not None:
        return double_quoted.strip()
    if single_quoted is not None:
        return single_quoted.strip()
    value = bare.strip()
    if value.lower() in _JSON_LITERALS:
        return ""
    # Unterminated quotes come from truncated JSON.
    return value.strip("\"'").strip()


def truncate_raw_text(raw: str, max_length: int) -> list[Comment]:
    """Terminal rung: keep the reply itself as a single comment."""
    return [Comment(text=raw[:max_length])]


def _coerce_candidate(candidate: str) -> list[Comment] | None:
    parsed = _loads(candidate.strip())
    if parsed is _NOT_PARSED:
        return None
    return coerce_comments(parsed)


def _loads(candidate: str) -> Any:
    try:
        return json.loads(candidate)
    except (ValueError, RecursionError):
        return _NOT_PARSED
