# src/kubefree/exporters/json_exporter.py
import json
from typing import Iterable

import aiofiles

from .base_exporter import BaseExporter, Exportable


class JSONExporter(BaseExporter):
    FORMAT = "json"
    DEFAULT_FILENAME = "kubefree-report.json"

    async def export(self, data: Iterable[Exportable], path: str | None = None) -> str:
        """Writes the records as one JSON array; missing values become null."""
        out_path = self.prepare_path(path)
        records = self.to_records(data)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(records, ensure_ascii=False, indent=2, default=str))
        return out_path
