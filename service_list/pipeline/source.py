"""Source provider: the upstream export as a list of raw records."""

from __future__ import annotations

import json
from pathlib import Path

from service_list.common.errors import SourceReadError
from service_list.common.fs import read_json
from service_list.common.models import RawRecord


def source_path_for(config: dict, data_dir: Path) -> Path:
    path = Path(config["source"]["path"])
    if path.is_absolute():
        return path
    return data_dir / path


def _record_list(payload, records_key: str | None, path: Path) -> list:
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and records_key and isinstance(payload.get(records_key), list):
        return payload[records_key]
    raise SourceReadError(f"Expected a JSON array of services in {path}")


def load_raw_records(path: Path, *, records_key: str | None = None) -> list[RawRecord]:
    if not path.exists():
        raise SourceReadError(f"Missing source document: {path}")
    try:
        payload = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SourceReadError(f"Unreadable source document {path}: {exc}") from exc

    rows = _record_list(payload, records_key, path)
    return [RawRecord.from_dict(row if isinstance(row, dict) else {}) for row in rows]
