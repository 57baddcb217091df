import csv
import io

from comment_extractor.export.csv_exporter import CSV_HEADER, export_csv, flatten, to_csv
from comment_extractor.normalization.models import Comment
from comment_extractor.processor.models import BatchResult, FlatCommentRecord, PageResult


def _batch(*results: PageResult) -> BatchResult:
    return BatchResult(results=list(results))


class TestFlatten:
    def test_one_record_per_comment_with_owner_name(self) -> None:
        batch = _batch(
            PageResult("a.png", [Comment(text="1"), Comment(text="2")], "raw"),
            PageResult("doc.pdf (page 1)", [Comment(text="3")], "raw"),
        )
        records = flatten(batch)
        assert [(r.image_name, r.comment.text) for r in records] == [
            ("a.png", "1"),
            ("a.png", "2"),
            ("doc.pdf (page 1)", "3"),
        ]

    def test_degraded_results_contribute_no_rows(self) -> None:
        batch = _batch(PageResult("bad.pdf", [], "Error processing PDF: broken"))
        assert flatten(batch) == []


class TestToCsv:
    def test_header_only_for_empty_input(self) -> None:
        assert to_csv([]) == "Image Name,Username,Comment Text,Timestamp,Likes\r\n"

    def test_full_row(self) -> None:
        record = FlatCommentRecord(
            "a.png", Comment(text="nice", username="bob", timestamp="2h", likes="1.2K")
        )
        assert to_csv([record]).splitlines()[1] == "a.png,bob,nice,2h,1.2K"

    def test_absent_fields_are_empty(self) -> None:
        record = FlatCommentRecord("a.png", Comment(text="nice"))
        assert to_csv([record]).splitlines()[1] == "a.png,,nice,,"

    def test_quotes_are_doubled_and_wrapped(self) -> None:
        record = FlatCommentRecord("a.png", Comment(text='He said "hi", then left'))
        row = to_csv([record]).splitlines()[1]
        assert row == 'a.png,,"He said ""hi"", then left",,'

    def test_newlines_are_wrapped(self) -> None:
        record = FlatCommentRecord("a.png", Comment(text="line one\nline two"))
        assert '"line one\nline two"' in to_csv([record])

    def test_lone_carriage_return_is_wrapped(self) -> None:
        record = FlatCommentRecord("a.png", Comment(text="line one\rline two"))
        rows = list(csv.reader(io.StringIO(to_csv([record]), newline="")))
        assert rows[1] == ["a.png", "", "line one\rline two", "", ""]

    def test_round_trips_through_csv_reader(self) -> None:
        texts = ['He said "hi", then left', "multi\nline", "plain", "comma, only"]
        records = [FlatCommentRecord("a,b.png", Comment(text=t)) for t in texts]
        rows = list(csv.reader(io.StringIO(to_csv(records))))
        assert tuple(rows[0]) == CSV_HEADER
        assert [row[2] for row in rows[1:]] == texts
        assert {row[0] for row in rows[1:]} == {"a,b.png"}


class TestExportCsv:
    def test_combines_flatten_and_serialize(self) -> None:
        batch = _batch(PageResult("a.png", [Comment(text="hi", username="u")], "raw"))
        assert export_csv(batch) == (
            "Image Name,Username,Comment Text,Timestamp,Likes\r\n" "a.png,u,hi,,\r\n"
        )
