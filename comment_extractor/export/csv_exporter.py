"""Flattens batch results into CSV rows."""

import csv
import io
from collections.abc import Iterable

from comment_extractor.processor.models import BatchResult, FlatCommentRecord

CSV_HEADER = ("Image Name", "Username", "Comment Text", "Timestamp", "Likes")
DEFAULT_FILENAME = "comments.csv"


def flatten(batch: BatchResult) -> list[FlatCommentRecord]:
    """One record per comment, labelled with its image or page name."""
    return [
        FlatCommentRecord(image_name=result.display_name, comment=comment)
        for result in batch.results
        for comment in result.comments
    ]


def to_csv(records: Iterable[FlatCommentRecord]) -> str:
    """Serialize records with minimal RFC 4180 quoting.

    Fields holding a comma, quote, newline or carriage return are quoted
    with inner quotes doubled; missing fields are written empty.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\r\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(CSV_HEADER)
    for record in records:
        comment = record.comment
        writer.writerow(
            (
                record.image_name,
                comment.username or "",
                comment.text,
                comment.timestamp or "",
                comment.likes or "",
            )
        )
    return buf.getvalue()


def export_csv(batch: BatchResult) -> str:
    return to_csv(flatten(batch))
