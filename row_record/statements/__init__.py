"""Statement layer - INSERT/UPDATE/DELETE generation from record state."""

from __future__ import annotations

from row_record.statements.dialect import ANSI, ORACLE, Dialect
from row_record.statements.generator import Statement, StatementGenerator
from row_record.statements.literals import encode_literal

__all__ = [
    "Dialect",
    "ANSI",
    "ORACLE",
    "Statement",
    "StatementGenerator",
    "encode_literal",
]
