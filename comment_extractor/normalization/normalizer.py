"""Turns raw vision-model replies into comment lists."""

from collections.abc import Callable

from comment_extractor.logging.logger import Log
from comment_extractor.normalization.models import Comment
from comment_extractor.normalization.strategies import (
    parse_brace_span,
    parse_fenced_block,
    parse_whole_text,
    scrape_labelled_fragments,
    truncate_raw_text,
)

DEFAULT_FALLBACK_MAX_LENGTH = 500

Strategy = Callable[[str], list[Comment] | None]


class ResponseNormalizer:
    """Recovers comments from a model reply through an ordered fallback ladder.

    Rungs are tried in order and the first one returning a list wins:
    fenced block, brace span, whole text, labelled-fragment scrape. When all
    of them fall through, the truncated reply becomes a single comment.
    ``normalize`` never raises.
    """

    STRATEGIES: tuple[tuple[str, Strategy], ...] = (
        ("fenced_block", parse_fenced_block),
        ("brace_span", parse_brace_span),
        ("whole_text", parse_whole_text),
        ("labelled_fragments", scrape_labelled_fragments),
    )

    def __init__(self, fallback_max_length: int = DEFAULT_FALLBACK_MAX_LENGTH) -> None:
        self._fallback_max_length = fallback_max_length

    def normalize(self, raw: str) -> list[Comment]:
        for name, strategy in self.STRATEGIES:
            comments = strategy(raw)
            if comments is not None:
                Log.debug(f"Normalized {len(comments)} comments", strategy=name)
                return comments
        Log.debug("No structure recovered, keeping raw reply", strategy="raw_text")
        return truncate_raw_text(raw, self._fallback_max_length)
