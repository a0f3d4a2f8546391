"""Score ledger persistence (newline-delimited JSON, append-only)."""
import json
import os
import threading

from scoreboard.domain.errors import StoreError
from scoreboard.domain.score import ScoreEvent


class ScoreLedgerRepository:
    """File-based ledger. Every event is one JSON line; nothing is rewritten."""

    def __init__(self, data_path: str = "data/scores.jsonl"):
        self._data_path = data_path
        self._lock = threading.Lock()

    def append(self, event: ScoreEvent) -> None:
        line = json.dumps(event.to_dict(), ensure_ascii=False) + "\n"
        try:
            directory = os.path.dirname(self._data_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            # Lock guarantees no interleaved lines from concurrent workers.
            with self._lock:
                with open(self._data_path, "a", encoding="utf-8") as f:
                    f.write(line)
        except OSError as exc:
            raise StoreError(f"failed to append score event: {exc}") from exc
