"""Record base class.

A record type is a dataclass deriving from ``Record`` with one PascalCase
field per column::

    @dataclass
    class Person(Record, primary_key=("Id",)):
        Id: int = 0
        LastName: str | None = None
        BirthDate: datetime = DATETIME_SENTINEL

Primary keys are declared explicitly, either with the ``primary_key`` class
keyword or with the ``key()`` field specifier. The table name defaults to the
snake_case class name and can be overridden with ``table=``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar

from row_record.core.enums import RecordState
from row_record.core.exceptions import RecordStateError

if TYPE_CHECKING:
    from row_record.core.database import Database

PRIMARY_KEY = "row_record.primary_key"

_EMPTY_SNAPSHOT: Mapping[str, Any] = MappingProxyType({})


def key(default: Any = dataclasses.MISSING, **kwargs: Any) -> Any:
    """Dataclass field specifier marking a primary-key field."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[PRIMARY_KEY] = True
    return dataclasses.field(default=default, metadata=metadata, **kwargs)


class Record:
    """Base class for mapped records.

    Holds the load-time snapshot used for change detection and the two
    reserved numeric slots filled from ``count`` / ``max`` columns.
    """

    __table_name__: ClassVar[str | None] = None
    __primary_key__: ClassVar[tuple[str, ...]] = ()

    # Instance state, assigned per instance once it changes.
    _state = RecordState.NEW
    _snapshot = _EMPTY_SNAPSHOT
    count = 0
    max = 0

    def __init_subclass__(
        cls,
        *,
        table: str | None = None,
        primary_key: tuple[str, ...] | list[str] | str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if table is not None:
            cls.__table_name__ = table
        if primary_key is not None:
            if isinstance(primary_key, str):
                primary_key = (primary_key,)
            cls.__primary_key__ = tuple(primary_key)

    @property
    def loaded(self) -> bool:
        """True once the record has a snapshot (loaded or persisted)."""
        return self._state is not RecordState.NEW

    @property
    def state(self) -> RecordState:
        return self._state

    @property
    def snapshot(self) -> Mapping[str, Any]:
        """Read-only column -> value mapping captured at load time."""
        return self._snapshot

    def _mark_loaded(self, snapshot: dict[str, Any]) -> None:
        # Bypass frozen dataclasses, the same way field values are assigned.
        object.__setattr__(self, "_snapshot", MappingProxyType(snapshot))
        object.__setattr__(self, "_state", RecordState.LOADED)

    def mark_persisted(self) -> None:
        """Record that a NEW record has been inserted.

        Takes the one and only snapshot from the current field values, so a
        later ``save`` generates an update containing only subsequent changes.
        """
        if self._state is not RecordState.NEW:
            raise RecordStateError(self._state.value, "mark persisted")

        from row_record.mapping.schema import resolve

        descriptor = resolve(type(self))
        snapshot = {}
        for spec in descriptor.fields:
            value = getattr(self, spec.name)
            if value is not None:
                snapshot[spec.column] = value
        object.__setattr__(self, "_snapshot", MappingProxyType(snapshot))
        object.__setattr__(self, "_state", RecordState.PERSISTED)

    def save(self, database: Database) -> int:
        """Insert or update this record through *database*."""
        return database.save(self)

    def delete(self, database: Database) -> int:
        """Delete this record through *database*. Returns 0 if never loaded."""
        return database.delete(self)
