import pytest

from catalog.loader import ExportLoadError, load_export, parse_export


def test_load_export_file(export_file):
    export = load_export(export_file)
    assert export.meta.source == "Eames Institute sample export"
    assert export.meta.exported_at == "2024-05-01T12:00:00Z"
    assert len(export.records) == 3


def test_bare_list_is_accepted():
    export = parse_export([{"object_id": "A"}])
    assert export.meta.source is None
    assert export.records == [{"object_id": "A"}]


@pytest.mark.parametrize("payload", [{"meta": {}}, "records", 3, {"records": ["not-an-object"]}])
def test_bad_payloads(payload):
    with pytest.raises(ExportLoadError):
        parse_export(payload)


def test_missing_and_malformed_files(tmp_path):
    with pytest.raises(ExportLoadError):
        load_export(tmp_path / "nope.json")
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(ExportLoadError):
        load_export(bad)
