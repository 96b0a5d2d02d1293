"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from service_list.common.errors import ConfigError

TOP_LEVEL_KEYS = {"language", "source", "output", "transform"}
SOURCE_KEYS = {"path", "records_key"}
OUTPUT_KEYS = {"filename_template", "fail_on_write_error"}
TRANSFORM_KEYS = {"only_selected_options", "accept_boolean_indicators"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_mapping(value: object, ctx: str) -> None:
    if not isinstance(value, dict):
        raise ConfigError(f"{ctx} must be a mapping")


def _assert_bool(value: object, ctx: str) -> None:
    if not isinstance(value, bool):
        raise ConfigError(f"{ctx} must be true or false")


def _validate_filename_template(template: object) -> None:
    if not isinstance(template, str) or "{language}" not in template:
        raise ConfigError("output.filename_template must be a string containing {language}")
    try:
        template.format(language="EN")
    except (IndexError, KeyError, ValueError) as exc:
        raise ConfigError(f"output.filename_template is not a valid template: {template}") from exc


def validate_service_list_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_mapping(cfg, "service_list config")
    _assert_required_keys(cfg, TOP_LEVEL_KEYS, "service_list config")
    _assert_no_unknown_keys(cfg, TOP_LEVEL_KEYS, "service_list config", allow_unknown)

    if not isinstance(cfg["language"], str) or not cfg["language"].strip():
        raise ConfigError("language must be a non-empty string")

    source = cfg["source"]
    _assert_mapping(source, "source")
    _assert_required_keys(source, {"path"}, "source")
    _assert_no_unknown_keys(source, SOURCE_KEYS, "source", allow_unknown)

    output = cfg["output"]
    _assert_mapping(output, "output")
    _assert_required_keys(output, {"filename_template"}, "output")
    _assert_no_unknown_keys(output, OUTPUT_KEYS, "output", allow_unknown)
    _validate_filename_template(output["filename_template"])
    if "fail_on_write_error" in output:
        _assert_bool(output["fail_on_write_error"], "output.fail_on_write_error")

    transform = cfg["transform"]
    _assert_mapping(transform, "transform")
    _assert_no_unknown_keys(transform, TRANSFORM_KEYS, "transform", allow_unknown)
    for key in TRANSFORM_KEYS & set(transform):
        _assert_bool(transform[key], f"transform.{key}")

    return cfg
