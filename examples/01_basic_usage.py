"""
Example 01: Basic Mapper Usage

Creates a table, batch-inserts rows, loads them back and shows the
reconnect after close. Runs against a temporary SQLite file; point
MAPPER_DB_* at a MySQL server and use from_settings(get_settings()) instead
for the real thing.
"""

import tempfile
from pathlib import Path

from sql_mapper import ConnectionConfig, StdLogger, configure_logging, get_settings, new
from sql_mapper.mapping import rows_to_dicts


def main():
    configure_logging(level=get_settings().log_level)

    db_path = Path(tempfile.mkdtemp()) / "shop.db"
    config = ConnectionConfig(driver="sqlite", database=str(db_path))
    mapper = new(config, source="items", logger=StdLogger())

    print("=== Basic Mapper Usage ===\n")

    # First call connects lazily
    mapper.exec("CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT, qty INTEGER)")

    # One INSERT with three placeholder groups
    mapper.insert_batch(
        ["id", "name", "qty"],
        [[1, "bolt", 100], [2, "nut", 250], [3, "washer", 75]],
    )
    mapper.insert(["id", "name", "qty"], [4, "screw", 40])

    rows = rows_to_dicts(mapper.load("items", "id, name, qty", "qty >= 75"))
    print(f"load result ({len(rows)} rows):")
    for row in rows:
        print(f"  - {row['name']}: {row['qty']}")
    print()

    mapper.close()

    # Connection is gone; the next call opens a new one
    count = mapper.query("SELECT COUNT(*) AS n FROM items").fetchone()["n"]
    print(f"after reconnect: {count} items\n")

    mapper.close()
    db_path.unlink()


if __name__ == "__main__":
    main()
