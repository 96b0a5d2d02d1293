from pathlib import Path

import pytest

from service_list.common.config_loader import load_config
from service_list.common.errors import ConfigError

REPO_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"

BASE_YAML = """language: EN
source:
  path: raw/services.json
  records_key: null
output:
  filename_template: services_{language}.json
  fail_on_write_error: true
transform:
  only_selected_options: false
  accept_boolean_indicators: false
"""


def _write_base(base: Path) -> None:
    base.mkdir()
    (base / "service_list.yml").write_text(BASE_YAML, encoding="utf-8")


def test_load_config_from_repo_config_dir():
    cfg = load_config(REPO_CONFIG_DIR)
    assert cfg["language"] == "EN"
    assert cfg["output"]["filename_template"] == "services_{language}.json"
    assert cfg["output"]["fail_on_write_error"] is True


def test_load_config_language_override(tmp_path: Path):
    _write_base(tmp_path / "base")
    cfg = load_config(tmp_path / "base", language="FR")
    assert cfg["language"] == "FR"


def test_load_config_applies_overlay_values(tmp_path: Path):
    base = tmp_path / "base"
    overlay = tmp_path / "overlay"
    _write_base(base)
    overlay.mkdir()
    (overlay / "service_list.yml").write_text(
        """source:
  records_key: features
transform:
  only_selected_options: true
""",
        encoding="utf-8",
    )

    cfg = load_config(base, overlay_config_dir=overlay)

    assert cfg["source"]["records_key"] == "features"
    assert cfg["source"]["path"] == "raw/services.json"
    assert cfg["transform"]["only_selected_options"] is True
    assert cfg["transform"]["accept_boolean_indicators"] is False


def test_load_config_ignores_empty_overlay_file(tmp_path: Path):
    base = tmp_path / "base"
    overlay = tmp_path / "overlay"
    _write_base(base)
    overlay.mkdir()
    (overlay / "service_list.yml").write_text("", encoding="utf-8")

    cfg = load_config(base, overlay_config_dir=overlay)

    assert cfg["transform"]["only_selected_options"] is False


def test_load_config_rejects_non_mapping_overlay(tmp_path: Path):
    base = tmp_path / "base"
    overlay = tmp_path / "overlay"
    _write_base(base)
    overlay.mkdir()
    (overlay / "service_list.yml").write_text("- one\n- two\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(base, overlay_config_dir=overlay)


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path)
