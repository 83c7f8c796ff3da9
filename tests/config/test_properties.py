import pytest

from dialectry.errors import ConfigurationError
from dialectry.properties import load_properties, parse_properties


def test_parse_properties_handles_comments_separators_and_continuations():
    text = "\n".join(
        [
            "# connection tuning",
            "! legacy comment",
            "",
            "user = app",
            "connect_timeout: 5",
            "options=-c search_path=app\\",
            ",public",
            "flag",
        ]
    )
    assert parse_properties(text) == {
        "user": "app",
        "connect_timeout": "5",
        "options": "-c search_path=app,public",
        "flag": "",
    }


def test_load_properties_from_file(tmp_path):
    path = tmp_path / "driver.properties"
    path.write_text("password=old\n", encoding="utf-8")
    assert load_properties(path) == {"password": "old"}


def test_missing_file_raises_configuration_error(tmp_path):
    missing = tmp_path / "nope.properties"
    with pytest.raises(ConfigurationError) as excinfo:
        load_properties(missing)
    assert str(missing) in str(excinfo.value)


def test_parse_properties_unescapes_java_escapes():
    text = "\n".join(
        [
            r"path=C:\\dir\\sub",
            r"key\=with\:separators = value",
            r"greeting=caf\u00e9\tbar",
            r"padded\ key=x",
        ]
    )
    assert parse_properties(text) == {
        "path": "C:\\dir\\sub",
        "key=with:separators": "value",
        "greeting": "caf\u00e9\tbar",
        "padded key": "x",
    }


def test_whitespace_separates_key_and_value():
    assert parse_properties("ssl true\nsslmode   : require") == {"ssl": "true", "sslmode": "require"}


def test_escaped_trailing_backslash_does_not_continue():
    text = "dir=C:\\\\\nnext=1"
    assert parse_properties(text) == {"dir": "C:\\", "next": "1"}


def test_malformed_unicode_escape_is_rejected():
    with pytest.raises(ConfigurationError):
        parse_properties(r"name=\u00zz")
