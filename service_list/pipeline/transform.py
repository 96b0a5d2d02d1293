"""Transform stage: upstream export in, services-directory JSON out."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable

from service_list.common.errors import WriteError
from service_list.common.logging import log_event
from service_list.common.models import RawRecord, TransformOptions
from service_list.common.time_utils import elapsed_ms
from service_list.pipeline.export import output_path_for, write_services_json
from service_list.pipeline.source import load_raw_records, source_path_for
from service_list.records.assembler import assemble_record


def transform_services(
    records: Iterable[RawRecord],
    language: str,
    options: TransformOptions | None = None,
) -> list[dict]:
    # language is passed through; record content does not vary by language.
    options = options or TransformOptions()
    return [assemble_record(raw, options).to_dict() for raw in records]


def run_transform(config: dict, data_dir: Path, run_id: str, logger: logging.Logger) -> dict:
    started = time.monotonic()
    language = config["language"]
    source_path = source_path_for(config, data_dir)
    raw_records = load_raw_records(source_path, records_key=config["source"].get("records_key"))

    services = transform_services(
        raw_records,
        language,
        TransformOptions.from_config(config.get("transform")),
    )

    output_path = output_path_for(config, data_dir, language)
    write_failed = False
    try:
        write_services_json(output_path, services)
    except WriteError as exc:
        write_failed = True
        log_event(
            logger,
            str(exc),
            level=logging.ERROR,
            run_id=run_id,
            stage="transform",
            language=language,
            event="WRITE_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        if config["output"].get("fail_on_write_error", True):
            raise

    log_event(
        logger,
        "services transformed",
        run_id=run_id,
        stage="transform",
        language=language,
        source=str(source_path),
        event="TRANSFORMED",
        status="error" if write_failed else "ok",
        rows_in=len(raw_records),
        rows_out=0 if write_failed else len(services),
        duration_ms=elapsed_ms(started),
    )
    return {
        "language": language,
        "rows_in": len(raw_records),
        "rows_out": len(services),
        "output_path": str(output_path),
        "write_failed": write_failed,
        "services": services,
    }
