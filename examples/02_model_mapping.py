"""
Example 02: Model Mapping

Uses ModelMapper as the Mapper's build_collection so load_collection
returns dataclasses instead of raw cursors.
"""

import tempfile
from dataclasses import dataclass
from pathlib import Path

from sql_mapper import ConnectionConfig, ModelMapper, new


@dataclass
class Item:
    id: int
    name: str
    qty: int


def main():
    db_path = Path(tempfile.mkdtemp()) / "shop.db"
    config = ConnectionConfig(driver="sqlite", database=str(db_path))

    with new(config, source="items", build_collection=ModelMapper(Item)) as mapper:
        mapper.exec("CREATE TABLE items (id INTEGER PRIMARY KEY, name TEXT, qty INTEGER)")
        mapper.insert_batch(["id", "name", "qty"], [[1, "bolt", 100], [2, "nut", 250]])

        print("=== Model Mapping ===\n")
        for item in mapper.load_collection("items", "id, name, qty"):
            print(f"  - {item}")

    db_path.unlink()


if __name__ == "__main__":
    main()
