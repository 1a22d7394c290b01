"""A thin SQL layer over a DB-API connection with identifier checks."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator, Sequence
from contextlib import closing
from dataclasses import dataclass
from typing import Any

MAX_IDENTIFIER_LEN = 63

_ID_START = frozenset(string.ascii_letters + "_")
_ID_REST = frozenset(string.ascii_letters + string.digits + "_")
_WHERE_CHARS = frozenset(string.ascii_letters + string.digits + "_ \t=<>!(),'.%-")

_PLACEHOLDERS = {
    "qmark": lambda i: "?",
    "format": lambda i: "%s",
    "numeric": lambda i: f":{i}",
    "dollar": lambda i: f"${i}",
}


class DatabaseError(Exception):
    """Raised when a statement fails."""


class InvalidIdentifierError(DatabaseError):
    """Raised for a table or column name that is not a plain SQL identifier."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class InvalidWhereClauseError(DatabaseError):
    """Raised for a WHERE clause containing characters that are not allowed."""


def sanitize_sql_value(value: str | None, single_quote: bool = True) -> str:
    """Double every single (or double) quote in *value*."""
    if value is None:
        return ""
    quote = "'" if single_quote else '"'
    return value.replace(quote, quote * 2)


def validate_where_clause(where_clause: str | None) -> bool:
    """Return whether *where_clause* uses only the permitted characters."""
    if where_clause is None:
        return False
    return all(c in _WHERE_CHARS for c in where_clause)


def is_valid_sql_id(name: str | None) -> bool:
    """Return whether *name* is a plain identifier of at most 63 characters."""
    if not name or len(name) > MAX_IDENTIFIER_LEN:
        return False
    return name[0] in _ID_START and all(c in _ID_REST for c in name[1:])


def first_invalid_sql_id(identifiers: Iterable[str | None]) -> int | None:
    """Return the index of the first invalid identifier, or ``None``."""
    return next(
        (i for i, name in enumerate(identifiers) if not is_valid_sql_id(name)), None
    )


class Model:
    """A table description: its name and typed fields."""

    def __init__(self, table_name: str) -> None:
        self.table_name = table_name
        self.fields: list[str] = []
        self.field_types: list[str] = []

    @property
    def field_count(self) -> int:
        return len(self.fields)

    def add_field(self, field_name: str, field_type: str) -> None:
        self.fields.append(field_name)
        self.field_types.append(field_type)


@dataclass(frozen=True)
class SelectResult:
    """Rows of a SELECT, every value as text ("" for NULL)."""

    field_names: tuple[str, ...]
    records: tuple[tuple[str, ...], ...]

    @property
    def record_count(self) -> int:
        return len(self.records)

    @property
    def field_count(self) -> int:
        return len(self.field_names)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self.records)


class Database:
    """Runs statements on a DB-API connection."""

    def __init__(self, connection: Any, paramstyle: str = "qmark") -> None:
        if paramstyle not in _PLACEHOLDERS:
            raise ValueError(f"unsupported paramstyle: {paramstyle!r}")
        self._connection = connection
        self._placeholder = _PLACEHOLDERS[paramstyle]

    def _run(self, query: str, params: Sequence[Any] | None = None) -> tuple[Any, list]:
        try:
            with closing(self._connection.cursor()) as cursor:
                if params is None:
                    cursor.execute(query)
                else:
                    cursor.execute(query, params)
                description = cursor.description
                rows = cursor.fetchall() if description else []
            self._connection.commit()
        except Exception as exc:
            try:
                self._connection.rollback()
            except Exception:
                pass
            raise DatabaseError(str(exc)) from exc
        return description, rows

    def execute(self, query: str) -> None:
        """Execute a statement that returns no rows."""
        self._run(query)

    def insert(self, table: str, fields: Sequence[str], values: Sequence[Any]) -> None:
        """Insert one row, passing the values as query parameters."""
        if not fields:
            raise ValueError("at least one field is required")
        if len(fields) != len(values):
            raise ValueError("fields and values differ in length")
        bad = first_invalid_sql_id(fields)
        if bad is not None:
            raise InvalidIdentifierError(
                f"invalid field id on index {bad}: {fields[bad]}", bad
            )
        placeholders = ", ".join(self._placeholder(i) for i in range(1, len(fields) + 1))
        query = f"INSERT INTO {table} ({', '.join(fields)}) VALUES ({placeholders});"
        self._run(query, list(values))

    def select(self, table: str, where_clause: str | None = None) -> SelectResult:
        """Select every column of *table*, optionally filtered."""
        if not is_valid_sql_id(table):
            raise InvalidIdentifierError(f"invalid table id: {table}")
        if where_clause is None:
            query = f"SELECT * FROM {table}"
        elif validate_where_clause(where_clause):
            query = f"SELECT * FROM {table} WHERE {where_clause}"
        else:
            raise InvalidWhereClauseError(
                f"invalid or unsupported where clause: {where_clause}"
            )
        description, rows = self._run(query)
        names = tuple(column[0] for column in description or ())
        records = tuple(
            tuple("" if value is None else str(value) for value in row) for row in rows
        )
        return SelectResult(names, records)