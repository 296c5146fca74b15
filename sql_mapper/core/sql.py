"""SQL statement builders.

Statements are plain string concatenation. Identifiers and clause
fragments are inserted verbatim; only row values go through placeholders.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

PLACEHOLDER = "?"
ON_DUPLICATE = " ON DUPLICATE KEY UPDATE "


def build_insert(
    source: str,
    fields: Sequence[str],
    rows: Sequence[Sequence[Any]],
    on_duplicate: str | None = None,
) -> tuple[str, list[Any]]:
    """Build a multi-row INSERT and its row-major bound values.

    Each row gets one placeholder per field. Rows whose length differs
    from ``fields`` are not rejected; the database reports the mismatch.
    """
    group = "(" + ",".join(PLACEHOLDER for _ in fields) + ")"
    values: list[Any] = []
    groups: list[str] = []
    for row in rows:
        values.extend(row)
        groups.append(group)

    sql = "INSERT INTO " + source + " (" + ",".join(fields) + ") VALUES " + ",".join(groups)
    if on_duplicate is not None:
        sql += ON_DUPLICATE + on_duplicate
    return sql, values


def build_select(source: str, fields: str, where: str | None = None) -> str:
    """Build ``SELECT <fields> FROM <source>[ WHERE <where>];``."""
    sql = "SELECT " + fields + " FROM " + source
    if where is not None:
        sql += " WHERE " + where
    return sql + ";"
