import pytest

from dialectry.dialects import (
    MariaDBDialect,
    MockDialect,
    MySQLDialect,
    OracleDialect,
    PostgresDialect,
    SQLiteDialect,
    UnsupportedDialect,
)


class FakeConnection:
    def __init__(self, product_name, product_version=""):
        self.database_product_name = product_name
        self.database_product_version = product_version
        self.attached_with = None

    def attached(self, dialect):
        self.attached_with = dialect


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.format_table("public.users") == "public.users"
    assert dialect.format_table("public.Users") == 'public."Users"'
    assert dialect.escape_object_name("order") == '"order"'


def test_postgres_dialect_limit_clause():
    dialect = PostgresDialect()
    assert dialect.limit_clause(10, None) == "LIMIT 10"
    assert dialect.limit_clause(None, 5) == "OFFSET 5"
    assert dialect.limit_clause(10, 5) == "LIMIT 10 OFFSET 5"
    assert dialect.parameter_placeholder() == "%s"


def test_mysql_dialect_uses_backticks_and_large_limit_for_offset_only():
    dialect = MySQLDialect()
    assert dialect.quote_identifier("na`me") == "`na``me`"
    assert dialect.escape_object_name("select") == "`select`"
    assert dialect.limit_clause(None, 5) == "LIMIT 18446744073709551615 OFFSET 5"


def test_sqlite_dialect_limit_and_placeholder():
    dialect = SQLiteDialect()
    assert dialect.limit_clause(None, 3) == "LIMIT -1 OFFSET 3"
    assert dialect.parameter_placeholder() == "?"
    assert dialect.format_table("main.users") == '"main.users"'


def test_oracle_dialect_folds_to_upper_case_and_uses_fetch():
    dialect = OracleDialect()
    assert dialect.escape_object_name("USERS") == "USERS"
    assert dialect.escape_object_name("users") == '"users"'
    assert dialect.escape_object_name("LEVEL") == '"LEVEL"'
    assert dialect.limit_clause(10, 20) == "OFFSET 20 ROWS FETCH NEXT 10 ROWS ONLY"
    assert dialect.parameter_placeholder(2) == ":2"


@pytest.mark.parametrize(
    "dialect_class, url, expected",
    [
        (PostgresDialect, "postgresql://h/db", "psycopg"),
        (PostgresDialect, "postgres://h/db", "psycopg"),
        (MySQLDialect, "mysql://h/db", "pymysql"),
        (MySQLDialect, "mysql+mysqldb://h/db", "mysqldb"),
        (MariaDBDialect, "mariadb://h/db", "pymysql"),
        (SQLiteDialect, "sqlite:///app.db", "sqlite3"),
        (OracleDialect, "oracle://h:1521/svc", "oracledb"),
        (PostgresDialect, "mysql://h/db", None),
        (UnsupportedDialect, "postgresql://h/db", None),
    ],
)
def test_default_driver(dialect_class, url, expected):
    assert dialect_class().default_driver(url) == expected


def test_product_name_matching_is_case_insensitive_prefix():
    assert PostgresDialect().is_correct_implementation(FakeConnection("postgresql"))
    assert not PostgresDialect().is_correct_implementation(FakeConnection("EnterpriseDB"))
    assert not MockDialect().is_correct_implementation(FakeConnection("mock"))
    assert not UnsupportedDialect().is_correct_implementation(FakeConnection("anything"))


def test_mariadb_matches_mariadb_product_name_directly():
    assert MariaDBDialect().is_correct_implementation(FakeConnection("MariaDB", "11.2"))


def test_set_connection_notifies_connection_and_binds_once():
    dialect = SQLiteDialect()
    connection = FakeConnection("SQLite")
    dialect.set_connection(connection)
    assert dialect.connection is connection
    assert connection.attached_with is dialect
    with pytest.raises(ValueError):
        dialect.set_connection(FakeConnection("SQLite"))


def test_reserved_words_are_case_insensitive():
    dialect = SQLiteDialect()
    assert not dialect.is_reserved_word("pragma")
    dialect.add_reserved_words(["pragma", " vacuum ", ""])
    assert dialect.is_reserved_word("PRAGMA")
    assert dialect.escape_object_name("vacuum") == '"vacuum"'
    assert dialect.escape_object_name("my column") == '"my column"'


def test_capabilities_describe_vendor_features():
    assert PostgresDialect.capabilities.supports_schema_namespaces
    assert PostgresDialect.capabilities.supports_partial_indexes
    assert MariaDBDialect.capabilities.supports_returning
    assert not MySQLDialect.capabilities.supports_returning
    assert OracleDialect.capabilities.supports_sequences
    assert not SQLiteDialect.capabilities.supports_schema_namespaces
