from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


class ReservationStore:
    """
    A single JSON document holding the whole reservation collection as a
    top-level array, pretty printed with 2-space indentation.
    """

    def __init__(self, path: Path):
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> Any:
        with self._path.open(encoding="utf-8") as f:
            return json.load(f)

    def write(self, records: list[dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        # Write to a sibling temp file first so a failed dump never truncates the document.
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records, f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
