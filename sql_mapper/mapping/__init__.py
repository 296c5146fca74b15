"""Mapping layer - turn result sets into lists of dicts or typed objects."""

from __future__ import annotations

from sql_mapper.mapping.model import ModelMapper, rows_to_dicts

__all__ = [
    "ModelMapper",
    "rows_to_dicts",
]
