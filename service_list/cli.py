"""CLI entrypoint for the services-directory export."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from service_list.common.config_loader import load_config
from service_list.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS, STAGES
from service_list.common.errors import PipelineError
from service_list.common.ids import generate_run_id
from service_list.common.logging import build_logger, close_logger, log_event
from service_list.pipeline.reports import write_run_summary
from service_list.pipeline.transform import run_transform


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=[*STAGES, "all"])
    parser.add_argument("--language", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def execute_stage(stage: str, config: dict, data_dir: Path, run_id: str, logger: logging.Logger) -> dict:
    if stage == "transform":
        return run_transform(config, data_dir, run_id, logger)
    raise ValueError(f"Unknown stage: {stage}")


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    config_dir = Path(args.config_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    data_dir = Path(args.data_dir)

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)
    try:
        return _run_stages(args, logger, run_id, config_dir, overlay_config_dir, data_dir)
    finally:
        close_logger(logger)


def _run_stages(
    args: argparse.Namespace,
    logger: logging.Logger,
    run_id: str,
    config_dir: Path,
    overlay_config_dir: Path | None,
    data_dir: Path,
) -> int:
    try:
        config = load_config(config_dir, overlay_config_dir=overlay_config_dir, language=args.language)
    except PipelineError as exc:
        log_event(
            logger,
            f"invalid configuration: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            event="CONFIG_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL

    stages = STAGES if args.command == "all" else (args.command,)
    transform_result = None

    for stage in stages:
        log_event(logger, "stage start", run_id=run_id, stage=stage, event="STAGE_START", status="ok")
        try:
            result = execute_stage(stage, config, data_dir, run_id, logger)
        except PipelineError as exc:
            log_event(
                logger,
                f"stage failed: {exc}",
                level=logging.ERROR,
                run_id=run_id,
                stage=stage,
                language=config["language"],
                event="STAGE_FAIL",
                status="error",
                error_code=exc.error_code,
            )
            return EXIT_HARD_FAIL
        except Exception:
            logger.exception(
                "unexpected failure",
                extra={
                    "run_id": run_id,
                    "stage": stage,
                    "event": "STAGE_FAIL",
                    "status": "error",
                    "error_code": "UNEXPECTED_ERROR",
                },
            )
            return EXIT_HARD_FAIL
        if stage == "transform":
            transform_result = result
        log_event(logger, "stage end", run_id=run_id, stage=stage, event="STAGE_END", status="ok")

    if transform_result is not None:
        try:
            write_run_summary(data_dir, run_id=run_id, language=config["language"], result=transform_result)
        except OSError as exc:
            log_event(
                logger,
                f"run summary not written: {exc}",
                level=logging.WARNING,
                run_id=run_id,
                event="REPORT_FAIL",
                status="error",
            )
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
