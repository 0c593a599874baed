"""Share-style export: write to a temporary file and hand it to the OS.

Used where there is no save dialog. The file is written into a private temp
directory under the requested file name and passed to ``opener`` (by default
the platform handler: ``os.startfile`` on Windows, ``open`` on macOS,
``xdg-open`` elsewhere).
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
import tempfile
from typing import Callable, Optional

from sernum.domain.ports import ExportSinkPort

Opener = Callable[[str], None]


def can_open_with_platform() -> bool:
    if sys.platform.startswith("win"):
        return hasattr(os, "startfile")
    if sys.platform == "darwin":
        return True
    return shutil.which("xdg-open") is not None


def open_with_platform(path: str) -> None:
    """Open ``path`` using the platform default handler."""
    if sys.platform.startswith("win"):
        os.startfile(path)  # type: ignore[attr-defined]
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        opener = shutil.which("xdg-open")
        if not opener:
            raise RuntimeError("xdg-open not available")
        subprocess.Popen([opener, path])


class ShareExportSink(ExportSinkPort):
    def __init__(self, opener: Optional[Opener] = None, temp_dir: Optional[str] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._opener = opener or open_with_platform
        self._temp_dir = temp_dir
        self._share_dir: Optional[str] = None
        self._last_path: Optional[str] = None

    def _directory(self) -> str:
        if self._share_dir is None or not os.path.isdir(self._share_dir):
            self._share_dir = tempfile.mkdtemp(prefix="sernum-share-", dir=self._temp_dir)
        return self._share_dir

    def write(self, data: bytes, destination: str) -> str:
        name = os.path.basename(destination or "") or "export.csv"
        path = os.path.join(self._directory(), name)
        if self._last_path and self._last_path != path and os.path.exists(self._last_path):
            os.remove(self._last_path)
        with open(path, "wb") as f:
            f.write(data)
        self._last_path = path
        self._log.info("Sharing %s (%d bytes)", path, len(data))
        self._opener(path)
        return path

    def cleanup(self) -> None:
        """Remove the share directory and everything written into it."""
        if self._share_dir is not None:
            shutil.rmtree(self._share_dir, ignore_errors=True)
        self._share_dir = None
        self._last_path = None
