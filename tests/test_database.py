"""Tests for doclist/database -- connection, CRUD and search.

Each test gets its own temporary SQLite file through the ``connection``
fixture in conftest.py.
"""

from datetime import datetime

import pytest

from doclist.database import (
    SortSpec,
    content_size,
    count_documents,
    delete_document,
    get_document,
    list_documents,
    save_document,
    search_documents,
    update_document,
)


# =========================================================================
# Schema
# =========================================================================


class TestEnsureSchema:
    def test_creates_documents_table(self, connection):
        with connection.get_connection() as conn:
            cursor = conn.execute("PRAGMA table_info(documents)")
            columns = [col[1] for col in cursor.fetchall()]
        assert columns == ["id", "name", "content", "size", "modified_date"]

    def test_is_idempotent(self, connection):
        save_document("Keep", "me", connection=connection)
        connection.ensure_schema()
        assert count_documents(connection=connection) == 1

    def test_db_path_follows_env_var(self, tmp_path, monkeypatch):
        from doclist.database import DatabaseConnection

        target = tmp_path / "from-env.db"
        monkeypatch.setenv("DOCLIST_DB", str(target))
        assert DatabaseConnection().db_path == target


# =========================================================================
# CRUD
# =========================================================================


class TestSaveDocument:
    def test_save_returns_positive_id(self, connection):
        doc_id = save_document("My Doc", "Some content", connection=connection)
        assert isinstance(doc_id, int)
        assert doc_id > 0

    def test_size_defaults_to_utf8_length(self, connection):
        doc_id = save_document("Accents", "héllo", connection=connection)
        doc = get_document(doc_id, connection=connection)
        assert doc.size == 6
        assert content_size("héllo") == 6

    def test_explicit_size_and_date_are_kept(self, connection):
        stamp = datetime(2020, 1, 2, 3, 4, 5)
        doc_id = save_document("Sized", "x", size=999, modified_date=stamp, connection=connection)
        doc = get_document(doc_id, connection=connection)
        assert doc.size == 999
        assert doc.modified_date == stamp

    def test_modified_date_defaults_to_now(self, connection):
        before = datetime.now()
        doc_id = save_document("Now", "x", connection=connection)
        doc = get_document(doc_id, connection=connection)
        assert doc.modified_date is not None
        assert doc.modified_date >= before.replace(microsecond=0)

    def test_duplicate_names_allowed(self, connection):
        save_document("Same", "one", connection=connection)
        save_document("Same", "two", connection=connection)
        assert count_documents(connection=connection) == 2


class TestGetDocument:
    def test_missing_returns_none(self, connection):
        assert get_document(12345, connection=connection) is None

    def test_null_modified_date(self, connection):
        with connection.get_connection() as conn:
            cursor = conn.execute(
                "INSERT INTO documents (name, content, size) VALUES ('Old', 'c', 3)"
            )
            conn.commit()
            doc_id = cursor.lastrowid
        doc = get_document(doc_id, connection=connection)
        assert doc.modified_date is None
        assert doc.size == 3


class TestListDocuments:
    def test_sorted_by_name_ascending(self, connection):
        for name in ["delta", "Bravo", "alpha", "Charlie"]:
            save_document(name, "", connection=connection)
        names = [d.name for d in list_documents(connection=connection)]
        assert names == sorted(names)
        assert names == ["Bravo", "Charlie", "alpha", "delta"]

    def test_descending_sort(self, connection, sample_documents):
        names = [d.name for d in list_documents(SortSpec("name", False), connection=connection)]
        assert names == ["Budget", "Apple"]

    def test_sort_by_size(self, connection, sample_documents):
        docs = list_documents(SortSpec("size"), connection=connection)
        assert [d.size for d in docs] == [50, 100]

    def test_empty_store(self, connection):
        assert list_documents(connection=connection) == []

    def test_invalid_sort_key_rejected(self):
        with pytest.raises(ValueError, match="Cannot sort by"):
            SortSpec("content; DROP TABLE documents")


class TestUpdateDocument:
    def test_update_content_restamps_size(self, connection):
        doc_id = save_document(
            "Note", "short", modified_date=datetime(2000, 1, 1), connection=connection
        )
        assert update_document(doc_id, content="much longer text", connection=connection)
        doc = get_document(doc_id, connection=connection)
        assert doc.name == "Note"
        assert doc.size == len("much longer text")
        assert doc.modified_date > datetime(2000, 1, 1)

    def test_update_name_only(self, connection):
        doc_id = save_document("Old", "body", connection=connection)
        update_document(doc_id, name="New", connection=connection)
        doc = get_document(doc_id, connection=connection)
        assert doc.name == "New"
        assert doc.content == "body"

    def test_update_missing_returns_false(self, connection):
        assert update_document(999, name="x", connection=connection) is False


class TestDeleteDocument:
    def test_delete_removes_row(self, connection, sample_documents):
        assert delete_document(sample_documents["Apple"], connection=connection) is True
        assert get_document(sample_documents["Apple"], connection=connection) is None
        assert count_documents(connection=connection) == 1

    def test_delete_missing_returns_false(self, connection):
        assert delete_document(999, connection=connection) is False


# =========================================================================
# Search
# =========================================================================


class TestSearchDocuments:
    def test_matches_content(self, connection, sample_documents):
        names = [d.name for d in search_documents("frui", connection=connection)]
        assert names == ["Apple"]

    def test_matches_name_case_insensitively(self, connection, sample_documents):
        names = [d.name for d in search_documents("bUDg", connection=connection)]
        assert names == ["Budget"]

    def test_no_match_is_empty_list(self, connection, sample_documents):
        assert search_documents("xyz", connection=connection) == []

    def test_results_sorted_by_name(self, connection):
        for name in ["zeta note", "alpha note", "Mid note"]:
            save_document(name, "", connection=connection)
        names = [d.name for d in search_documents("note", connection=connection)]
        assert names == ["Mid note", "alpha note", "zeta note"]

    def test_wildcards_matched_literally(self, connection):
        save_document("100% done", "", connection=connection)
        save_document("1000 done", "", connection=connection)
        save_document("snake_case", "", connection=connection)
        save_document("snakeXcase", "", connection=connection)

        assert [d.name for d in search_documents("0%", connection=connection)] == ["100% done"]
        assert [d.name for d in search_documents("e_c", connection=connection)] == ["snake_case"]

    def test_unicode_case_folding(self, connection):
        save_document("ÉCOLE", "", connection=connection)
        assert [d.name for d in search_documents("école", connection=connection)] == ["ÉCOLE"]

    def test_matches_exactly_the_expected_set(self, connection):
        rows = [
            ("Report", "Quarterly FRUIT sales"),
            ("fruit basket", ""),
            ("Other", "vegetables"),
            ("Grapefruit", "citrus"),
        ]
        for name, content in rows:
            save_document(name, content, connection=connection)

        term = "Fruit"
        expected = sorted(
            name
            for name, content in rows
            if term.casefold() in name.casefold() or term.casefold() in content.casefold()
        )
        assert [d.name for d in search_documents(term, connection=connection)] == expected
