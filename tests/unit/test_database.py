"""Unit tests for Database and AsyncDatabase over a fake executor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import pytest

from row_record.core.database import AsyncDatabase, Database, default_query
from row_record.core.exceptions import MissingPrimaryKeyError, MultipleRowsError
from row_record.core.executor import AsyncCommandExecutor, CommandExecutor
from row_record.core.results import ResultSet
from row_record.mapping.record import Record
from row_record.mapping.schema import resolve


@dataclass
class Person(Record, primary_key="Id"):
    Id: int = 0
    LastName: str | None = None


@dataclass
class Legacy(Record, table="tbl_legacy", primary_key="Id"):
    Id: int = 0


@dataclass
class Event(Record):
    Name: str = ""


def _rows(*rows: tuple[Any, ...]) -> ResultSet:
    return ResultSet(("id", "last_name"), list(rows))


class TestFakeExecutorContract:
    def test_sync(self, fake_executor: Any) -> None:
        assert isinstance(fake_executor, CommandExecutor)

    def test_async(self, async_fake_executor: Any) -> None:
        assert isinstance(async_fake_executor, AsyncCommandExecutor)


class TestQuery:
    def test_default_query(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((1, "Smith"), (2, "Jones"))
        people = Database(fake_executor).query(Person)
        assert fake_executor.queries == [("select * from person", None)]
        assert [p.LastName for p in people] == ["Smith", "Jones"]
        assert all(p.loaded for p in people)

    def test_default_query_uses_table_override(self) -> None:
        assert default_query(resolve(Legacy)) == "select * from tbl_legacy"

    def test_explicit_sql_and_params(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((1, "Smith"))
        Database(fake_executor).query(
            Person, "select * from person where id = :id", {"id": 1}
        )
        assert fake_executor.queries == [
            ("select * from person where id = :id", {"id": 1})
        ]

    def test_query_one(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((1, "Smith"))
        person = Database(fake_executor).query_one(Person)
        assert person is not None
        assert person.Id == 1

    def test_query_one_no_rows(self, fake_executor: Any) -> None:
        fake_executor.result = _rows()
        assert Database(fake_executor).query_one(Person) is None

    def test_query_one_multiple_rows(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((1, "A"), (2, "B"))
        with pytest.raises(MultipleRowsError):
            Database(fake_executor).query_one(Person)

    def test_binding_not_shared_between_queries(self, fake_executor: Any) -> None:
        db = Database(fake_executor)
        fake_executor.result = ResultSet(("last_name", "id"), [("Smith", 1)])
        first = db.query(Person, "select last_name, id from person")

        fake_executor.result = ResultSet(("id", "count"), [(2, 9)])
        second = db.query(Person, "select id, count(*) as count from person group by id")

        assert (first[0].Id, first[0].LastName) == (1, "Smith")
        assert (second[0].Id, second[0].LastName, second[0].count) == (2, None, 9)
        assert dict(second[0].snapshot) == {"id": 2}


class TestSave:
    def test_save_loaded_record_updates(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((1, "Smith"))
        db = Database(fake_executor)
        person = db.query_one(Person)
        assert person is not None
        person.LastName = "O'Brien"

        assert person.save(db) == 1
        assert fake_executor.statements == [
            ("update person set last_name = 'O''Brien' where id = '1'", None)
        ]

    def test_save_new_record_inserts(self, fake_executor: Any) -> None:
        Database(fake_executor).save(Person(Id=3, LastName="Kim"))
        assert fake_executor.statements == [
            ("insert into person (id, last_name) values ('3', 'Kim')", None)
        ]

    def test_unchanged_update_not_executed(
        self, fake_executor: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        fake_executor.result = _rows((1, "Smith"))
        db = Database(fake_executor)
        person = db.query_one(Person)
        assert person is not None

        with caplog.at_level(logging.INFO, logger="row_record.core.database"):
            assert db.save(person) == 0
        assert fake_executor.statements == []
        assert any("skipping update" in r.getMessage() for r in caplog.records)

    def test_parameterized(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((1, "Smith"))
        db = Database(fake_executor, parameterized=True)
        person = db.query_one(Person)
        assert person is not None
        person.LastName = "O'Brien"
        db.save(person)
        assert fake_executor.statements == [
            (
                "update person set last_name = :last_name where id = :key_id",
                {"last_name": "O'Brien", "key_id": 1},
            )
        ]


class TestDelete:
    def test_delete_loaded(self, fake_executor: Any) -> None:
        fake_executor.result = _rows((4, "Lee"))
        db = Database(fake_executor)
        person = db.query_one(Person)
        assert person is not None
        assert person.delete(db) == 1
        assert fake_executor.statements == [("delete from person where id = '4'", None)]

    def test_delete_new_record_is_noop(self, fake_executor: Any) -> None:
        assert Database(fake_executor).delete(Person(Id=4)) == 0
        assert fake_executor.statements == []


class TestRecordWithoutPrimaryKey:
    def _loaded_event(self, fake_executor: Any) -> Event:
        fake_executor.result = ResultSet(("name",), [("deploy",)])
        event = Database(fake_executor).query_one(Event)
        assert event is not None
        return event

    def test_delete_raises(self, fake_executor: Any) -> None:
        event = self._loaded_event(fake_executor)
        with pytest.raises(MissingPrimaryKeyError):
            Database(fake_executor).delete(event)
        assert fake_executor.statements == []

    def test_save_raises(self, fake_executor: Any) -> None:
        event = self._loaded_event(fake_executor)
        event.Name = "rollback"
        with pytest.raises(MissingPrimaryKeyError):
            event.save(Database(fake_executor))
        assert fake_executor.statements == []

    def test_insert_allowed(self, fake_executor: Any) -> None:
        Database(fake_executor).save(Event(Name="deploy"))
        assert fake_executor.statements == [
            ("insert into event (name) values ('deploy')", None)
        ]


class TestContextManager:
    def test_close_called(self, fake_executor: Any) -> None:
        closed = []
        fake_executor.close = lambda: closed.append(True)
        with Database(fake_executor):
            pass
        assert closed == [True]

    def test_executor_without_close(self, fake_executor: Any) -> None:
        with Database(fake_executor) as db:
            assert db.executor is fake_executor


class TestAsyncDatabase:
    async def test_query_and_update(self, async_fake_executor: Any) -> None:
        async_fake_executor.result = _rows((1, "Smith"))
        db = AsyncDatabase(async_fake_executor)
        person = await db.query_one(Person)
        assert person is not None
        person.LastName = "O'Brien"

        assert await db.save(person) == 1
        assert async_fake_executor.statements == [
            ("update person set last_name = 'O''Brien' where id = '1'", None)
        ]

    async def test_insert_and_delete(self, async_fake_executor: Any) -> None:
        db = AsyncDatabase(async_fake_executor)
        person = Person(Id=2, LastName="Ng")
        await db.insert(person)
        person.mark_persisted()
        await db.delete(person)
        assert [sql for sql, _ in async_fake_executor.statements] == [
            "insert into person (id, last_name) values ('2', 'Ng')",
            "delete from person where id = '2'",
        ]

    async def test_unchanged_update_skipped(self, async_fake_executor: Any) -> None:
        async_fake_executor.result = _rows((1, "Smith"))
        db = AsyncDatabase(async_fake_executor)
        people = await db.query(Person)
        assert await db.update(people[0]) == 0
        assert async_fake_executor.statements == []

    async def test_query_one_multiple_rows(self, async_fake_executor: Any) -> None:
        async_fake_executor.result = _rows((1, "A"), (2, "B"))
        with pytest.raises(MultipleRowsError):
            await AsyncDatabase(async_fake_executor).query_one(Person)
