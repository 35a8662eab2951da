"""
Example 02: Async Support

This example runs the same load/change/save cycle through AsyncDatabase with
parameterized statements.
"""

import asyncio
import sqlite3
import tempfile
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from row_record import AsyncDatabase, ConnectionConfig, Record, key


@dataclass
class OrderLine(Record):
    OrderId: int = key(default=0)
    LineNo: int = key(default=0)
    Qty: Decimal = Decimal(0)


async def main():
    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()

    conn = sqlite3.connect(db_path)
    conn.execute("CREATE TABLE order_line (order_id INTEGER, line_no INTEGER, qty NUMERIC)")
    conn.execute("INSERT INTO order_line VALUES (10, 1, 2), (10, 2, 5)")
    conn.commit()
    conn.close()

    config = ConnectionConfig(
        driver="sqlite", database=db_path, pool_size=1, parameterized=True
    )

    print("=== Async Support ===\n")

    async with AsyncDatabase.from_config(config) as db:
        lines = await db.query(OrderLine)
        print(f"Loaded {len(lines)} lines")

        lines[1].Qty = Decimal("7")
        statement = db.generator.generate_update(lines[1])
        print(f"Generated: {statement} {statement.params}")
        await db.save(lines[1])

        await db.delete(lines[0])

        totals = await db.query_one(
            OrderLine, "select count(*) as count, max(qty) as max from order_line"
        )
        print(f"Remaining lines: {totals.count}, largest quantity: {totals.max}")

    Path(db_path).unlink()


if __name__ == "__main__":
    asyncio.run(main())
