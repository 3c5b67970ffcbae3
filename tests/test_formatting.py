"""Tests for row display formatting."""

from datetime import datetime

from doclist.models.document import Document
from doclist.ui.formatting import format_medium_datetime, format_modified, format_size
from doclist.ui.viewmodels import DocumentDetailVM, DocumentRowVM


class TestFormatSize:
    def test_bytes_suffix(self):
        assert format_size(100) == "100 bytes"

    def test_zero(self):
        assert format_size(0) == "0 bytes"


class TestFormatModified:
    def test_afternoon(self):
        assert format_medium_datetime(datetime(2018, 7, 9, 15, 42, 17)) == "Jul 9, 2018 at 3:42:17 PM"

    def test_midnight_is_twelve_am(self):
        assert format_medium_datetime(datetime(2021, 12, 25, 0, 5, 9)) == "Dec 25, 2021 at 12:05:09 AM"

    def test_noon_is_twelve_pm(self):
        assert format_medium_datetime(datetime(2021, 1, 1, 12, 0, 0)) == "Jan 1, 2021 at 12:00:00 PM"

    def test_none_is_unknown(self):
        assert format_modified(None) == "unknown"


class TestViewModels:
    def test_row_from_document(self):
        doc = Document(id=3, name="Budget", content="numbers", size=100)
        row = DocumentRowVM.from_document(doc)
        assert row == DocumentRowVM(id=3, name="Budget", size_text="100 bytes", modified_text="unknown")

    def test_detail_line_count(self):
        doc = Document(id=1, name="n", content="a\nb\nc", size=5)
        assert DocumentDetailVM.from_document(doc).line_count == 3

    def test_document_from_row_parses_string_date(self):
        doc = Document.from_row(
            {"id": 1, "name": "n", "content": None, "size": None, "modified_date": "2018-07-09T15:42:17"}
        )
        assert doc.modified_date == datetime(2018, 7, 9, 15, 42, 17)
        assert doc.content == ""
        assert doc.size == 0
