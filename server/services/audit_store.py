"""
Detection audit stores.

Implementations of the DetectionAuditStore contract: in-memory (default,
local runs and tests), JSONL file (one record per line), and a no-op store.
Failures raised here are isolated by the detection orchestrator.
"""

import json
import threading
from pathlib import Path
from typing import List, Union

from retrieval.models.detection import DetectionAudit


class InMemoryAuditStore:
    """Keeps audit records in a list (newest last)."""

    def __init__(self):
        self._records: List[DetectionAudit] = []
        self._lock = threading.Lock()

    def save(self, record: DetectionAudit) -> None:
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> List[DetectionAudit]:
        with self._lock:
            return list(self._records)


class JsonlAuditStore:
    """Appends each audit record as one JSON line."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def save(self, record: DetectionAudit) -> None:
        line = json.dumps(record.model_dump(exclude_none=True))
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a") as f:
                f.write(line + "\n")


class NullAuditStore:
    """Discards audit records."""

    def save(self, record: DetectionAudit) -> None:
        pass
