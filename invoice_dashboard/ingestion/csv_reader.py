from invoice_dashboard.ingestion.base import BaseTextReader


class CsvTextReader(BaseTextReader):
    """Returns CSV content as-is. Rows are not parsed."""

    def read(self, data: bytes) -> str:
        # utf-8-sig drops a leading byte order mark, nothing else.
        return data.decode("utf-8-sig", errors="replace")
