"""Sink: persist transformed services as a single JSON document."""

from __future__ import annotations

from pathlib import Path

from service_list.common.errors import WriteError
from service_list.common.fs import write_compact_json


def output_path_for(config: dict, data_dir: Path, language: str) -> Path:
    filename = config["output"]["filename_template"].format(language=language)
    return data_dir / "out" / filename


def write_services_json(path: Path, records: list[dict]) -> Path:
    try:
        write_compact_json(path, records)
    except OSError as exc:
        raise WriteError(f"Could not write services to {path}: {exc}") from exc
    return path
