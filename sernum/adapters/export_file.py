from __future__ import annotations

import os

from sernum.domain.ports import ExportSinkPort


class FileExportSink(ExportSinkPort):
    """Write exported bytes to a user-chosen path (desktop save dialog)."""

    def write(self, data: bytes, destination: str) -> str:
        if not destination:
            raise ValueError("No export destination given.")
        path = os.path.abspath(destination)
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
        return path
