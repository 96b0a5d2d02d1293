from pathlib import Path

import pytest

from service_list.common.errors import SourceReadError
from service_list.common.fs import write_compact_json
from service_list.pipeline.source import load_raw_records, source_path_for


def test_load_raw_records_from_array(tmp_path: Path):
    path = tmp_path / "services.json"
    write_compact_json(path, [{"id": 7, "geometry": {"type": "Point"}, "properties": {"partnerName": "IRC"}}])

    records = load_raw_records(path)

    assert len(records) == 1
    assert records[0].id == 7
    assert records[0].geometry == {"type": "Point"}
    assert records[0].properties == {"partnerName": "IRC"}


def test_load_raw_records_from_keyed_list(tmp_path: Path):
    path = tmp_path / "services.json"
    write_compact_json(path, {"type": "FeatureCollection", "features": [{"id": 1}, {"id": 2}]})

    records = load_raw_records(path, records_key="features")

    assert [record.id for record in records] == [1, 2]
    assert records[0].properties == {}


def test_load_raw_records_rejects_object_without_key(tmp_path: Path):
    path = tmp_path / "services.json"
    write_compact_json(path, {"features": []})
    with pytest.raises(SourceReadError):
        load_raw_records(path)


def test_load_raw_records_missing_file(tmp_path: Path):
    with pytest.raises(SourceReadError):
        load_raw_records(tmp_path / "absent.json")


def test_load_raw_records_invalid_json(tmp_path: Path):
    path = tmp_path / "services.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(SourceReadError):
        load_raw_records(path)


def test_source_path_for_relative_and_absolute(tmp_path: Path):
    assert source_path_for({"source": {"path": "raw/services.json"}}, tmp_path) == tmp_path / "raw" / "services.json"
    absolute = tmp_path / "elsewhere.json"
    assert source_path_for({"source": {"path": str(absolute)}}, Path("data")) == absolute
