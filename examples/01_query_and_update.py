"""
Example 01: Query and Update

This example loads rows into records, changes one field and saves it back.
Only the changed column is written.
"""

import logging
import sqlite3
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from row_record import DATETIME_SENTINEL, ConnectionConfig, Database, Record


@dataclass
class Person(Record, primary_key="Id"):
    Id: int = 0
    FirstName: str | None = None
    LastName: str | None = None
    UpdatedAt: datetime = DATETIME_SENTINEL


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("""
        CREATE TABLE person (
            id INTEGER PRIMARY KEY,
            first_name TEXT,
            last_name TEXT,
            updated_at TEXT
        )
    """)
    conn.execute("INSERT INTO person (id, first_name, last_name) VALUES (1, 'Pat', 'Smith')")
    conn.commit()
    conn.close()

    config = ConnectionConfig(driver="sqlite", database=db_path, pool_size=1)

    print("=== Query and Update ===\n")

    with Database.from_config(config) as db:
        person = db.query_one(Person, "select * from person where id = :id", {"id": 1})
        print(f"Loaded: {person}")

        person.LastName = "O'Brien"
        statement = db.generator.generate_update(person)
        print(f"Generated: {statement}")
        print(f"Rows affected: {person.save(db)}\n")

        # Nothing changed since load: no statement is sent
        reloaded = db.query_one(Person, "select * from person where id = 1")
        print(f"Reloaded: {reloaded}")
        print(f"Rows affected by unchanged save: {db.save(reloaded)}\n")

        # New records are inserted with every column
        db.save(Person(Id=2, FirstName="Lee", UpdatedAt=datetime.now()))
        for row in db.query(Person):
            print(f"  - {row.Id}: {row.FirstName} {row.LastName}")

    Path(db_path).unlink()


if __name__ == "__main__":
    main()
