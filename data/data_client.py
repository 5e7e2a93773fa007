from __future__ import annotations

import sqlite3
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator

from core.app_logging import get_exception_logger, trace
from utils.formatting import now_iso

_exc_logger = get_exception_logger()


TABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "customers": ("id", "name", "phone", "company", "created_at"),
    "Contract": (
        "Contract_Number",
        "Customer Name",
        "customer_id",
        "Ad Type",
        "Start Date",
        "End Date",
        "Total Rent",
        "status",
        "Phone",
        "created_at",
    ),
    "billboards": ("id", "name", "location", "size", "image"),
    "contract_billboards": ("contract_number", "billboard_id"),
    "customer_payments": (
        "id",
        "customer_id",
        "customer_name",
        "contract_number",
        "amount",
        "method",
        "reference",
        "notes",
        "paid_at",
        "entry_type",
        "created_at",
    ),
}

# Tables whose primary key is generated on insert when missing
GENERATED_KEYS = {"customers": "id", "billboards": "id", "customer_payments": "id"}
TIMESTAMPED_TABLES = {"customers", "Contract", "customer_payments"}


class DataClientError(Exception):
    """A failed query. Carried inside ``QueryResult.error``, never raised to callers."""


@dataclass
class QueryResult:
    data: Any = None
    error: DataClientError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _quote_ident(name: str) -> str:
    return '"' + str(name).replace('"', '""') + '"'


def _casefold(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).casefold()


class DataClient:
    """
    Row-oriented client over the billboard store.

    Mirrors the hosted-store query builder the console was written against::

        client.table("customer_payments").select("*").eq("customer_id", cid).order("paid_at", desc=True).execute()

    Every ``execute()`` opens its own SQLite connection, so a client can be
    shared between the Tk thread and background loaders.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path, timeout=10)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self.connection() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS customers (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL CHECK (LENGTH(TRIM(name)) > 0),
                    phone TEXT,
                    company TEXT,
                    created_at TEXT
                );

                CREATE TABLE IF NOT EXISTS "Contract" (
                    "Contract_Number" TEXT PRIMARY KEY,
                    "Customer Name" TEXT,
                    customer_id TEXT,
                    "Ad Type" TEXT,
                    "Start Date" TEXT,
                    "End Date" TEXT,
                    "Total Rent" NUMERIC,
                    status TEXT,
                    "Phone" TEXT,
                    created_at TEXT
                );

                CREATE TABLE IF NOT EXISTS billboards (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    location TEXT,
                    size TEXT,
                    image TEXT
                );

                CREATE TABLE IF NOT EXISTS contract_billboards (
                    contract_number TEXT NOT NULL,
                    billboard_id TEXT NOT NULL,
                    PRIMARY KEY (contract_number, billboard_id),
                    FOREIGN KEY (contract_number) REFERENCES "Contract"("Contract_Number") ON DELETE CASCADE,
                    FOREIGN KEY (billboard_id) REFERENCES billboards(id) ON DELETE CASCADE
                );

                CREATE TABLE IF NOT EXISTS customer_payments (
                    id TEXT PRIMARY KEY,
                    customer_id TEXT,
                    customer_name TEXT NOT NULL,
                    contract_number TEXT,
                    amount REAL,
                    method TEXT,
                    reference TEXT,
                    notes TEXT,
                    paid_at TEXT,
                    entry_type TEXT,
                    created_at TEXT
                );

                CREATE INDEX IF NOT EXISTS idx_payments_customer_id ON customer_payments(customer_id);
                CREATE INDEX IF NOT EXISTS idx_payments_paid_at ON customer_payments(paid_at);
                CREATE INDEX IF NOT EXISTS idx_contract_customer_id ON "Contract"(customer_id);
                """
            )

    def table(self, name: str) -> "TableQuery":
        return TableQuery(self, name)


class TableQuery:
    """Chainable query against one table. Nothing touches the store until ``execute()``."""

    def __init__(self, client: DataClient, table: str):
        self._client = client
        self._table = table
        self._op = "select"
        self._columns = "*"
        self._payload: list[dict[str, Any]] | dict[str, Any] | None = None
        self._filters: list[tuple[str, str, Any]] = []
        self._order: list[tuple[str, bool]] = []
        self._limit: int | None = None
        self._cardinality: str | None = None

    def __repr__(self) -> str:
        return f"<TableQuery {self._op} {self._table} filters={self._filters} order={self._order} limit={self._limit}>"

    # -- builders -----------------------------------------------------------

    def select(self, columns: str = "*") -> "TableQuery":
        # After insert/update, select() only asks for the written rows back
        if self._op == "select":
            self._columns = columns
        return self

    def insert(self, payload: dict[str, Any] | list[dict[str, Any]]) -> "TableQuery":
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload: dict[str, Any]) -> "TableQuery":
        self._op = "update"
        self._payload = payload
        return self

    def delete(self) -> "TableQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "TableQuery":
        self._filters.append((column, "eq", value))
        return self

    def ilike(self, column: str, pattern: str) -> "TableQuery":
        self._filters.append((column, "ilike", pattern))
        return self

    def order(self, column: str, desc: bool = False) -> "TableQuery":
        self._order.append((column, desc))
        return self

    def limit(self, count: int) -> "TableQuery":
        self._limit = int(count)
        return self

    def single(self) -> "TableQuery":
        self._cardinality = "single"
        return self

    def maybe_single(self) -> "TableQuery":
        self._cardinality = "maybe_single"
        return self

    # -- execution ----------------------------------------------------------

    @trace
    def execute(self) -> QueryResult:
        try:
            self._check_columns()
            with self._client.connection() as conn:
                if self._op == "insert":
                    rows = self._run_insert(conn)
                elif self._op == "update":
                    rows = self._run_update(conn)
                elif self._op == "delete":
                    rows = self._run_delete(conn)
                else:
                    rows = self._run_select(conn)
            return QueryResult(data=self._shape(rows))
        except (sqlite3.Error, DataClientError) as exc:
            _exc_logger.warning(f"Query failed on {self._table} ({self._op}): {exc}")
            error = exc if isinstance(exc, DataClientError) else DataClientError(str(exc))
            return QueryResult(data=None, error=error)

    def _columns_for_table(self) -> tuple[str, ...]:
        columns = TABLE_COLUMNS.get(self._table)
        if columns is None:
            raise DataClientError(f"Unknown table: {self._table}")
        return columns

    def _check_columns(self) -> None:
        known = self._columns_for_table()
        names = [c for c, _op, _v in self._filters] + [c for c, _d in self._order]
        if self._op == "select" and self._columns.strip() != "*":
            names.extend(c.strip() for c in self._columns.split(","))
        for payload_row in self._payload_rows():
            names.extend(payload_row.keys())
        unknown = sorted({n for n in names if n not in known})
        if unknown:
            raise DataClientError(f"Unknown column(s) on {self._table}: {', '.join(unknown)}")

    def _payload_rows(self) -> list[dict[str, Any]]:
        if self._payload is None:
            return []
        if isinstance(self._payload, dict):
            return [self._payload]
        return list(self._payload)

    def _where(self) -> tuple[str, list[Any]]:
        clauses: list[str] = []
        params: list[Any] = []
        for column, op, value in self._filters:
            ident = _quote_ident(column)
            if op == "eq":
                if value is None:
                    clauses.append(f"{ident} IS NULL")
                    continue
                clauses.append(f"{ident} = ?")
            else:
                clauses.append(f"casefold({ident}) LIKE casefold(?)")
            params.append(value)
        if not clauses:
            return "", params
        return " WHERE " + " AND ".join(clauses), params

    def _run_select(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        if self._columns.strip() == "*":
            cols = "*"
        else:
            cols = ", ".join(_quote_ident(c.strip()) for c in self._columns.split(","))
        where, params = self._where()
        query = f"SELECT {cols} FROM {_quote_ident(self._table)}{where}"
        if self._order:
            query += " ORDER BY " + ", ".join(
                f"{_quote_ident(c)} {'DESC' if desc else 'ASC'}" for c, desc in self._order
            )
        if self._limit is not None:
            query += " LIMIT ?"
            params.append(self._limit)
        return [dict(row) for row in conn.execute(query, params).fetchall()]

    def _run_insert(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        rows = self._payload_rows()
        if not rows:
            raise DataClientError("Nothing to insert")
        key = GENERATED_KEYS.get(self._table)
        inserted: list[dict[str, Any]] = []
        for payload_row in rows:
            row = dict(payload_row)
            if key and not row.get(key):
                row[key] = str(uuid.uuid4())
            if self._table in TIMESTAMPED_TABLES and not row.get("created_at"):
                row["created_at"] = now_iso()
            cols = ", ".join(_quote_ident(c) for c in row)
            placeholders = ", ".join("?" for _ in row)
            conn.execute(
                f"INSERT INTO {_quote_ident(self._table)} ({cols}) VALUES ({placeholders})",
                tuple(row.values()),
            )
            inserted.append(row)
        return inserted

    def _run_update(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        if not self._filters:
            raise DataClientError("Refusing to update without a filter")
        payload = self._payload_rows()[0] if self._payload_rows() else {}
        if not payload:
            raise DataClientError("Nothing to update")
        where, params = self._where()
        assignments = ", ".join(f"{_quote_ident(c)} = ?" for c in payload)
        conn.execute(
            f"UPDATE {_quote_ident(self._table)} SET {assignments}{where}",
            [*payload.values(), *params],
        )
        return [dict(row) for row in conn.execute(f"SELECT * FROM {_quote_ident(self._table)}{where}", params)]

    def _run_delete(self, conn: sqlite3.Connection) -> list[dict[str, Any]]:
        if not self._filters:
            raise DataClientError("Refusing to delete without a filter")
        where, params = self._where()
        deleted = [dict(row) for row in conn.execute(f"SELECT * FROM {_quote_ident(self._table)}{where}", params)]
        conn.execute(f"DELETE FROM {_quote_ident(self._table)}{where}", params)
        return deleted

    def _shape(self, rows: list[dict[str, Any]]) -> Any:
        if self._cardinality is None:
            return rows
        if len(rows) > 1:
            raise DataClientError(f"Expected a single row from {self._table}, got {len(rows)}")
        if not rows:
            if self._cardinality == "single":
                raise DataClientError(f"Expected a single row from {self._table}, got 0")
            return None
        return rows[0]
