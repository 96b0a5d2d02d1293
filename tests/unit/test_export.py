from pathlib import Path

import pytest

from service_list.common.errors import WriteError
from service_list.pipeline.export import output_path_for, write_services_json


def test_output_path_for_formats_language(tmp_path: Path):
    config = {"output": {"filename_template": "services_{language}.json"}}
    assert output_path_for(config, tmp_path, "AR") == tmp_path / "out" / "services_AR.json"


def test_write_services_json_is_compact_utf8(tmp_path: Path):
    path = tmp_path / "out" / "services_EN.json"
    write_services_json(path, [{"id": 1, "region": "Zahlé"}])
    assert path.read_bytes() == '[{"id":1,"region":"Zahlé"}]'.encode("utf-8")


def test_write_services_json_wraps_os_errors(tmp_path: Path):
    blocker = tmp_path / "out"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(WriteError):
        write_services_json(blocker / "services_EN.json", [])
