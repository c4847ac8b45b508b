from typing import Any

import psycopg
from psycopg import errors
from psycopg.rows import dict_row

from invoice_dashboard.analyst.models import AnalystRecord
from invoice_dashboard.database.connection import get_connection
from invoice_dashboard.database.exceptions import (
    InvoiceNotFoundError,
    StorageConflictError,
    StorageFailureError,
)
from invoice_dashboard.database.models import InvoiceRecord, StoredInvoice
from invoice_dashboard.logging.logger import Log

_INVOICE_COLUMNS = "id, user_id, vendor, invoice_id, amount, date, raw_text, created_at"


def _to_float(value: Any) -> float:
    return float(value) if value is not None else 0.0


def _row_to_invoice(row: dict[str, Any]) -> StoredInvoice:
    return StoredInvoice(
        id=row["id"],
        user_id=row["user_id"],
        vendor=row["vendor"],
        invoice_id=row["invoice_id"],
        amount=_to_float(row["amount"]),
        date=row["date"],
        raw_text=row["raw_text"],
        created_at=row["created_at"],
    )


class InvoiceRepository:
    """Database operations for the invoices table. Every query is user-scoped."""

    def insert(self, record: InvoiceRecord) -> StoredInvoice:
        """Insert a reviewed invoice and return the stored row.

        Raises:
            StorageConflictError: if the user already saved this invoice_id.
            StorageFailureError: on any other database error.
        """
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO invoices (user_id, vendor, invoice_id, amount, date, raw_text)
                        VALUES (%s, %s, %s, %s, %s, %s)
                        RETURNING {_INVOICE_COLUMNS}
                        """,
                        (
                            record.user_id,
                            record.vendor,
                            record.invoice_id,
                            record.amount,
                            record.date,
                            record.raw_text,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except errors.UniqueViolation as exc:
            raise StorageConflictError(record.invoice_id) from exc
        except psycopg.Error as exc:
            raise StorageFailureError(f"Failed to save invoice: {exc}") from exc

        if row is None:
            raise StorageFailureError("Insert returned no row")
        Log.info(f"Saved invoice {record.invoice_id!r} for user {record.user_id}")
        return _row_to_invoice(row)

    def find_all(self, user_id: str) -> list[StoredInvoice]:
        """Every saved invoice of the user, newest first."""
        rows = self._fetch_all(
            f"""
            SELECT {_INVOICE_COLUMNS}
            FROM invoices
            WHERE user_id = %s
            ORDER BY created_at DESC
            """,
            (user_id,),
        )
        return [_row_to_invoice(row) for row in rows]

    def find_recent(self, user_id: str, limit: int) -> list[StoredInvoice]:
        """Most recently saved invoices, newest first."""
        rows = self._fetch_all(
            f"""
            SELECT {_INVOICE_COLUMNS}
            FROM invoices
            WHERE user_id = %s
            ORDER BY created_at DESC
            LIMIT %s
            """,
            (user_id, limit),
        )
        return [_row_to_invoice(row) for row in rows]

    def find_projection(
        self,
        user_id: str,
        *,
        since: str | None = None,
        vendor: str | None = None,
        limit: int | None = None,
    ) -> list[AnalystRecord]:
        """Vendor/date/amount projection with optional date and vendor filters.

        ``since`` is compared as an ISO date string (``date >= since``).
        """
        conditions = ["user_id = %s"]
        params: list[Any] = [user_id]
        if since is not None:
            conditions.append("date >= %s")
            params.append(since)
        if vendor is not None:
            conditions.append("vendor = %s")
            params.append(vendor)
        query = (
            "SELECT vendor, date, amount FROM invoices WHERE "
            + " AND ".join(conditions)
            + " ORDER BY created_at DESC"
        )
        if limit is not None:
            query += " LIMIT %s"
            params.append(limit)

        rows = self._fetch_all(query, tuple(params))
        return [
            AnalystRecord(vendor=row["vendor"], date=row["date"], amount=_to_float(row["amount"]))
            for row in rows
        ]

    def find_amounts(self, user_id: str) -> list[float]:
        rows = self._fetch_all("SELECT amount FROM invoices WHERE user_id = %s", (user_id,))
        return [_to_float(row["amount"]) for row in rows]

    def list_vendors(self, user_id: str) -> list[str]:
        """Distinct non-empty vendor names, sorted."""
        rows = self._fetch_all(
            """
            SELECT DISTINCT vendor
            FROM invoices
            WHERE user_id = %s AND vendor IS NOT NULL AND vendor <> ''
            ORDER BY vendor
            """,
            (user_id,),
        )
        return [row["vendor"] for row in rows]

    def delete(self, user_id: str, invoice_pk: int) -> None:
        """Delete one of the user's invoices by primary key.

        Raises:
            InvoiceNotFoundError: if the user owns no invoice with that id.
            StorageFailureError: on any database error.
        """
        deleted = self._execute_delete(
            "DELETE FROM invoices WHERE id = %s AND user_id = %s",
            (invoice_pk, user_id),
        )
        if deleted == 0:
            raise InvoiceNotFoundError(invoice_pk)
        Log.info(f"Deleted invoice {invoice_pk} for user {user_id}")

    def delete_all(self, user_id: str) -> int:
        """Delete every invoice of the user and return how many were removed."""
        deleted = self._execute_delete("DELETE FROM invoices WHERE user_id = %s", (user_id,))
        Log.info(f"Deleted {deleted} invoices for user {user_id}")
        return deleted

    @staticmethod
    def _fetch_all(query: str, params: tuple[Any, ...]) -> list[dict[str, Any]]:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(query, params)
                    return cur.fetchall()
        except psycopg.Error as exc:
            raise StorageFailureError(f"Failed to load invoices: {exc}") from exc

    @staticmethod
    def _execute_delete(query: str, params: tuple[Any, ...]) -> int:
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, params)
                    deleted = cur.rowcount
                conn.commit()
        except psycopg.Error as exc:
            raise StorageFailureError(f"Failed to delete invoices: {exc}") from exc
        return deleted
