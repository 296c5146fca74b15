"""Unit tests for ModelMapper."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from sql_mapper.core.exceptions import ColumnMismatchError
from sql_mapper.mapping.model import ModelMapper, rows_to_dicts


@dataclass
class UserDC:
    id: int
    name: str
    email: str


class UserPydantic(BaseModel):
    id: int
    name: str
    email: str


class UserPlain:
    def __init__(self, id: int, name: str, email: str) -> None:
        self.id = id
        self.name = name
        self.email = email


class TestModelMapper:
    def test_map_to_dataclass(self) -> None:
        mapper = ModelMapper(UserDC)
        row = {"id": 1, "name": "Alice", "email": "alice@ex.com"}
        result = mapper.map_one(row)
        assert isinstance(result, UserDC)
        assert result.id == 1
        assert result.name == "Alice"

    def test_map_to_pydantic(self) -> None:
        mapper = ModelMapper(UserPydantic)
        row = {"id": 1, "name": "Alice", "email": "alice@ex.com"}
        result = mapper.map_one(row)
        assert isinstance(result, UserPydantic)
        assert result.id == 1

    def test_pydantic_type_coercion(self) -> None:
        mapper = ModelMapper(UserPydantic)
        row = {"id": "42", "name": "Alice", "email": "a@ex.com"}
        result = mapper.map_one(row)
        assert result.id == 42  # Coerced from str to int

    def test_map_to_plain_class(self) -> None:
        mapper = ModelMapper(UserPlain)
        row = {"id": 1, "name": "Alice", "email": "alice@ex.com"}
        result = mapper.map_one(row)
        assert isinstance(result, UserPlain)
        assert result.name == "Alice"

    def test_map_many(self) -> None:
        mapper = ModelMapper(UserDC)
        rows = [
            {"id": 1, "name": "Alice", "email": "a@ex.com"},
            {"id": 2, "name": "Bob", "email": "b@ex.com"},
        ]
        results = mapper.map_many(rows)
        assert len(results) == 2
        assert all(isinstance(r, UserDC) for r in results)

    def test_column_mismatch_error(self) -> None:
        mapper = ModelMapper(UserDC)
        row = {"id": 1, "name": "Alice"}  # missing "email"
        with pytest.raises(ColumnMismatchError):
            mapper.map_one(row)

    def test_column_aliasing(self) -> None:
        mapper = ModelMapper(UserDC, aliases={"user_email": "email"})
        row = {"id": 1, "name": "Alice", "user_email": "alice@ex.com"}
        result = mapper.map_one(row)
        assert result.email == "alice@ex.com"

    def test_map_many_empty(self) -> None:
        mapper = ModelMapper(UserDC)
        results = mapper.map_many([])
        assert results == []


class _Cursor:
    """Minimal DB-API cursor stand-in."""

    def __init__(self, columns: list[str] | None, rows: list) -> None:
        self.description = None if columns is None else [(c,) for c in columns]
        self._rows = rows

    def fetchall(self) -> list:
        return self._rows


class TestRowsToDicts:
    def test_tuple_rows_zip_with_columns(self) -> None:
        cursor = _Cursor(["id", "name"], [(1, "Alice"), (2, "Bob")])
        assert rows_to_dicts(cursor) == [
            {"id": 1, "name": "Alice"},
            {"id": 2, "name": "Bob"},
        ]

    def test_dict_rows_are_copied(self) -> None:
        row = {"id": 1, "name": "Alice"}
        result = rows_to_dicts(_Cursor(["id", "name"], [row]))
        assert result == [row]
        assert result[0] is not row

    def test_no_description_returns_empty(self) -> None:
        assert rows_to_dicts(_Cursor(None, [])) == []

    def test_empty_result(self) -> None:
        assert rows_to_dicts(_Cursor(["id"], [])) == []


class TestModelMapperAsRowBuilder:
    def test_call_maps_cursor(self) -> None:
        mapper = ModelMapper(UserDC)
        cursor = _Cursor(["id", "name", "email"], [(1, "Alice", "a@ex.com")])
        result = mapper(cursor)
        assert result == [UserDC(id=1, name="Alice", email="a@ex.com")]
