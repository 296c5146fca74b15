"""Row builders.

A row builder turns a result set into a list of values and can be handed
to the Mapper as ``build_collection``. Supports dataclasses, Pydantic
models, and plain classes.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sql_mapper.core.exceptions import ColumnMismatchError

T = TypeVar("T")


def rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor results to list of dicts.

    Handles tuple-like rows, ``sqlite3.Row`` and dict rows.
    """
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = cursor.fetchall()
    if not rows:
        return []

    if isinstance(rows[0], dict):
        return [dict(row) for row in rows]

    # Tuple-like rows (sqlite3.Row included), zip with columns
    return [dict(zip(columns, tuple(row), strict=True)) for row in rows]


def _is_pydantic_model(cls: type) -> bool:
    """Check if a class is a Pydantic BaseModel."""
    from pydantic import BaseModel

    return isinstance(cls, type) and issubclass(cls, BaseModel)


class ModelMapper(Generic[T]):
    """Simple row-to-model mapper.

    Detection order:
    1. Pydantic BaseModel -> model_validate(row)
    2. dataclass -> target_class(**row)
    3. Plain class -> target_class(**row)

    Calling the mapper on a cursor maps every row, which makes an instance
    usable directly as the Mapper's ``build_collection``.

    Args:
        target_class: The class to construct from row data.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        aliases: dict[str, str] | None = None,
    ) -> None:
        self._target_class = target_class
        self._aliases = aliases
        self._is_pydantic = _is_pydantic_model(target_class)

    def __call__(self, cursor: Any) -> list[T]:
        return self.map_many(rows_to_dicts(cursor))

    def _apply_aliases(self, row: dict[str, Any]) -> dict[str, Any]:
        if not self._aliases:
            return row
        return {self._aliases.get(key, key): value for key, value in row.items()}

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row to target_class instance."""
        row = self._apply_aliases(row)

        if self._is_pydantic:
            try:
                return self._target_class.model_validate(row)  # type: ignore[attr-defined, no-any-return]
            except Exception as e:
                raise ColumnMismatchError(
                    self._target_class.__name__,
                    [str(e)],
                ) from e

        try:
            return self._target_class(**row)
        except TypeError as e:
            raise ColumnMismatchError(
                self._target_class.__name__,
                [str(e)],
            ) from e

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
