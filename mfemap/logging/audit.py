from __future__ import annotations

import json
from pathlib import Path

from mfemap.core.metadata import RunRecord


class RunAuditLogger:
    """Appends one JSON line per pipeline stage run."""

    def __init__(self, root: str | Path = "outputs") -> None:
        self.root = Path(root)
        self.run_log_path = self.root / "run_log.jsonl"

    def write(self, record: RunRecord) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        with self.run_log_path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record.to_payload()) + "\n")

    def read(self) -> list[RunRecord]:
        if not self.run_log_path.exists():
            return []
        records: list[RunRecord] = []
        with self.run_log_path.open("r", encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                records.append(RunRecord(**json.loads(line)))
        return records
