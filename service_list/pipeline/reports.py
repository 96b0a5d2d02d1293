"""Run report aggregation."""

from __future__ import annotations

from pathlib import Path

from service_list.common.fs import write_json


def _service_counts(services: list[dict]) -> dict[str, int]:
    return {
        "records_out": len(services),
        "details": sum(len(service.get("details", [])) for service in services),
        "with_referral_required": sum(1 for service in services if service.get("referral", {}).get("required")),
        "with_hours": sum(1 for service in services if service.get("hours")),
    }


def write_run_summary(data_dir: Path, *, run_id: str, language: str, result: dict | None) -> Path:
    result = result or {}
    write_failed = bool(result.get("write_failed"))
    counts = {"records_in": int(result.get("rows_in", 0))}
    counts.update(_service_counts(result.get("services", [])))

    payload = {
        "run_id": run_id,
        "language": language,
        "status": "error" if write_failed or not result else "success",
        "counts": counts,
        "output_path": result.get("output_path"),
        "write_failed": write_failed,
    }
    summary_path = data_dir / "out" / "reports" / "run_summary.json"
    write_json(summary_path, payload)
    return summary_path
