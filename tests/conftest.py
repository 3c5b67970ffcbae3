"""Shared pytest fixtures for doclist tests."""

from datetime import datetime

import pytest

from doclist.database import DatabaseConnection, SQLiteDocumentRepository, save_document


@pytest.fixture
def isolate_test_database(tmp_path, monkeypatch):
    """Point the global connection at a fresh temporary database file."""
    from doclist.database.connection import db_connection

    db_path = tmp_path / "test.db"
    monkeypatch.setenv("DOCLIST_DB", str(db_path))
    monkeypatch.setattr(db_connection, "_db_path", None)
    db_connection.ensure_schema()
    yield db_path


@pytest.fixture
def connection(tmp_path):
    """A DatabaseConnection on its own temporary file, schema applied."""
    conn = DatabaseConnection(tmp_path / "docs.db")
    conn.ensure_schema()
    return conn


@pytest.fixture
def repository(connection):
    return SQLiteDocumentRepository(connection)


@pytest.fixture
def sample_documents(connection):
    """Budget and Apple, inserted out of name order."""
    budget_id = save_document(
        "Budget",
        "numbers",
        size=100,
        modified_date=datetime(2018, 7, 9, 15, 42, 17),
        connection=connection,
    )
    apple_id = save_document("Apple", "fruit", size=50, connection=connection)
    return {"Budget": budget_id, "Apple": apple_id}
