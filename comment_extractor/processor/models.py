from dataclasses import dataclass, field

from comment_extractor.normalization.models import Comment


@dataclass(frozen=True)
class ExtractionAttempt:
    """Raw model reply for one page image."""

    display_name: str
    raw_response: str


@dataclass(frozen=True)
class PageResult:
    """Comments extracted from one image or PDF page.

    A degraded result has no comments and an error description in place of
    the model reply.
    """

    display_name: str
    comments: list[Comment] = field(default_factory=list)
    raw_response: str = ""


@dataclass(frozen=True)
class PageSuccess:
    attempt: ExtractionAttempt
    comments: list[Comment]

    def to_page_result(self) -> PageResult:
        return PageResult(
            display_name=self.attempt.display_name,
            comments=list(self.comments),
            raw_response=self.attempt.raw_response,
        )


@dataclass(frozen=True)
class PageFailure:
    display_name: str
    error_message: str

    def to_page_result(self) -> PageResult:
        return PageResult(display_name=self.display_name, raw_response=self.error_message)


PageOutcome = PageSuccess | PageFailure


@dataclass
class BatchResult:
    """Page results in input-file order, pages ascending within a file."""

    results: list[PageResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def comment_count(self) -> int:
        return sum(len(result.comments) for result in self.results)


@dataclass(frozen=True)
class FlatCommentRecord:
    """One comment with the name of the image or page it came from."""

    image_name: str
    comment: Comment
