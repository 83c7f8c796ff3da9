from typing import ClassVar

import pytest

from dialectry.dialects import (
    Dialect,
    DialectRegistry,
    MockDialect,
    PostgresDialect,
    SQLiteDialect,
    get_registry,
    reset_registry,
    set_registry,
)


class GenericX(Dialect):
    short_name: ClassVar[str] = "x"
    priority: ClassVar[int] = 5


class SpecialX(Dialect):
    short_name: ClassVar[str] = "x"
    priority: ClassVar[int] = 10


class OnlyC(Dialect):
    short_name: ClassVar[str] = "c"


class InternalThing(Dialect):
    short_name: ClassVar[str] = "thing"
    internal: ClassVar[bool] = True


def test_get_by_name_returns_highest_priority_variant():
    registry = DialectRegistry()
    registry.register(GenericX())
    registry.register(SpecialX())
    assert isinstance(registry.get_by_name("x"), SpecialX)
    assert [type(d) for d in registry.get_all_by_name("x")] == [SpecialX, GenericX]


def test_get_by_name_ignores_registration_order():
    registry = DialectRegistry([SpecialX, GenericX])
    assert isinstance(registry.get_by_name("x"), SpecialX)


def test_get_by_name_unknown_returns_none():
    assert DialectRegistry().get_by_name("nope") is None


def test_list_real_returns_one_dialect_per_name():
    registry = DialectRegistry([GenericX, SpecialX, SQLiteDialect])
    listed = registry.list_real()
    assert [type(d) for d in listed] == [SpecialX, SQLiteDialect]


def test_registering_same_descriptor_twice_is_idempotent():
    registry = DialectRegistry()
    prototype = GenericX()
    first = registry.register(prototype)
    second = registry.register(prototype)
    registry.register(GenericX)
    assert first is second is prototype
    assert len(registry.get_all_by_name("x")) == 1


def test_internal_dialects_are_kept_apart():
    registry = DialectRegistry([InternalThing, SQLiteDialect])
    assert [type(d) for d in registry.list_internal()] == [InternalThing]
    assert [type(d) for d in registry.list_real()] == [SQLiteDialect]
    assert registry.get_by_name("thing") is None
    assert isinstance(registry.get_internal_by_name("thing"), InternalThing)


def test_clear_registry_then_register_leaves_exactly_one():
    registry = DialectRegistry([PostgresDialect, SQLiteDialect, GenericX, MockDialect])
    registry.clear_registry()
    registry.register(OnlyC)
    assert [type(d) for d in registry.list_real()] == [OnlyC]
    assert [type(d) for d in registry.list_internal()] == [MockDialect]


def test_with_only_leaves_original_untouched():
    registry = DialectRegistry([PostgresDialect, SQLiteDialect, MockDialect])
    scoped = registry.with_only(OnlyC)
    assert [type(d) for d in scoped.list_real()] == [OnlyC]
    assert [type(d) for d in scoped.list_internal()] == [MockDialect]
    assert [type(d) for d in registry.list_real()] == [PostgresDialect, SQLiteDialect]


def test_snapshot_is_read_only():
    registry = DialectRegistry([SQLiteDialect])
    snapshot = registry.snapshot()
    assert snapshot.frozen
    with pytest.raises(RuntimeError):
        snapshot.register(GenericX)
    with pytest.raises(RuntimeError):
        snapshot.clear_registry()
    registry.register(GenericX)
    assert snapshot.get_by_name("x") is None


def test_register_rejects_non_dialects():
    registry = DialectRegistry()
    with pytest.raises(TypeError):
        registry.register(object())
    with pytest.raises(TypeError):
        registry.register(int)


def test_find_default_driver_uses_first_answer():
    registry = DialectRegistry([SQLiteDialect, PostgresDialect])
    assert registry.find_default_driver("postgresql://localhost/db") == "psycopg"
    assert registry.find_default_driver("sqlite:///tmp.db") == "sqlite3"
    assert registry.find_default_driver("postgresql+pg8000://localhost/db") == "pg8000"
    assert registry.find_default_driver("db2://host/db") is None


@pytest.fixture
def restore_default_registry():
    yield
    reset_registry()


def test_default_registry_contains_builtins(restore_default_registry):
    registry = reset_registry()
    names = {d.short_name for d in registry.list_real()}
    assert {"postgresql", "mysql", "mariadb", "sqlite", "oracle"} <= names
    assert {d.short_name for d in registry.list_internal()} == {"mock"}
    assert get_registry() is registry


def test_set_registry_replaces_process_wide_instance(restore_default_registry):
    custom = DialectRegistry([OnlyC])
    set_registry(custom)
    assert get_registry() is custom
