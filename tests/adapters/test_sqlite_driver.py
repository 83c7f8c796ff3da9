import sqlite3

from dialectry.adapters.sqlite import SQLiteDriver


def test_connects_to_file_database(tmp_path):
    handle = SQLiteDriver()
    path = tmp_path / "driver.db"
    connection = handle.connect(f"sqlite:///{path}", {"timeout": "1.5"})
    try:
        connection.execute("CREATE TABLE t (id INTEGER)")
        assert path.exists()
    finally:
        connection.close()


def test_memory_urls():
    assert SQLiteDriver._normalize_path("sqlite://") == ":memory:"
    assert SQLiteDriver._normalize_path("sqlite:///:memory:") == ":memory:"
    assert SQLiteDriver._normalize_path("sqlite:///relative.db") == "relative.db"
    assert SQLiteDriver._normalize_path("sqlite:////var/data/app.db") == "/var/data/app.db"
    assert SQLiteDriver._normalize_path("sqlite:app.db") == "app.db"


def test_foreign_url_is_not_accepted():
    assert SQLiteDriver().connect("postgresql://localhost/db", {}) is None


def test_describe_autocommit_and_closed_state():
    handle = SQLiteDriver()
    connection = handle.connect("sqlite:///:memory:", {})
    metadata = handle.describe(connection)
    assert metadata.product_name == "SQLite"
    assert metadata.product_version == sqlite3.sqlite_version
    assert metadata.catalog == "main"

    assert handle.get_autocommit(connection) is False
    handle.set_autocommit(connection, True)
    assert handle.get_autocommit(connection) is True

    assert handle.is_closed(connection) is False
    connection.close()
    assert handle.is_closed(connection) is True


def test_sqlite_exposes_no_keyword_list():
    handle = SQLiteDriver()
    connection = handle.connect("sqlite://", {})
    try:
        assert handle.sql_keywords(connection) == []
    finally:
        connection.close()
