"""JSON file helpers shared by the file-backed repositories."""
import json
import os

from scoreboard.domain.errors import StoreError


def read_json(path: str, default):
    """Load a JSON document. A missing file yields ``default``.

    A corrupt or unreadable file raises StoreError: an empty result would be
    indistinguishable from an empty store.
    """
    if not os.path.exists(path):
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        raise StoreError(f"failed to read {os.path.basename(path)}: {exc}") from exc


def write_json_atomic(path: str, data) -> None:
    """Write to a temp file then replace, so readers never see half a file."""
    try:
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except OSError as exc:
        raise StoreError(f"failed to write {os.path.basename(path)}: {exc}") from exc
