# src/kubefree/exporters/csv_exporter.py
import csv
import io
from typing import Any, Iterable

import aiofiles

from .base_exporter import BaseExporter, Exportable


class CSVExporter(BaseExporter):
    FORMAT = "csv"
    DEFAULT_FILENAME = "kubefree-report.csv"

    async def export(self, data: Iterable[Exportable], path: str | None = None) -> str:
        """Export records to a CSV file. Returns path written.

        Columns follow the key order of the records. Missing values (None)
        are written as empty cells. An empty record list creates an empty file.
        """
        out_path = self.prepare_path(path)
        rows = self.to_records(data)

        if not rows:
            async with aiofiles.open(out_path, "w", encoding="utf-8"):
                pass
            return out_path

        headers = []
        for r in rows:
            for k in r.keys():
                if k not in headers:
                    headers.append(k)

        # csv writers are synchronous: build the content in memory, write it once.
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=headers)
        writer.writeheader()
        for r in rows:
            writer.writerow({k: self._sanitize_cell(v) for k, v in r.items()})

        async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
            await fh.write(output.getvalue())

        return out_path

    def _sanitize_cell(self, value: Any) -> Any:
        """
        Sanitize value to prevent CSV formula injection.
        If the value is a string starting with =, +, -, or @, prefix it with a single quote.
        """
        if isinstance(value, str) and value.startswith(("=", "+", "-", "@")):
            return f"'{value}"
        return value
