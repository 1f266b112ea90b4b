from catalog.report import find_duplicates, field_stats, has_useful_data, main, shape_counts


def test_has_useful_data():
    assert not has_useful_data(None)
    assert not has_useful_data("")
    assert not has_useful_data([])
    assert not has_useful_data({"country": None, "region": ""})
    assert not has_useful_data([[], {}])
    assert has_useful_data(0)
    assert has_useful_data(False)
    assert has_useful_data({"country": "USA", "region": None})


def test_field_stats(sample_export):
    stats = {s.field_name: s for s in field_stats(sample_export["records"])}
    assert stats["object_id"].present == 3
    assert stats["object_id"].percentage == 100
    assert stats["object_id"].displayed
    assert stats["creator"].present == 2
    assert stats["legacy_code"].present == 1
    assert not stats["legacy_code"].displayed
    assert stats["geo"].samples == [{"country": "USA", "region": None}]


def test_stats_sorted_by_presence(sample_export):
    counts = [s.present for s in field_stats(sample_export["records"])]
    assert counts == sorted(counts, reverse=True)


def test_shape_counts(sample_export):
    assert shape_counts(sample_export["records"], "date") == {"object": 1, "number": 1, "string": 1}
    assert shape_counts(sample_export["records"], "creator") == {"array": 1, "string": 1, "empty-array": 1}


def test_find_duplicates():
    records = [
        {"object_id": "A", "title": "Chair", "flags": {"possible_duplicate": True}},
        {"object_id": "B", "title": "Chair"},
        {"object_id": "C", "title": "Table", "flags": {"possible_duplicate": False}},
    ]
    dups = find_duplicates(records)
    assert dups["flagged"] == ["A"]
    assert dups["title_groups"] == {"Chair": ["A", "B"]}


def test_cli(export_file, capsys):
    assert main([str(export_file), "--shapes", "creator"]) == 0
    out = capsys.readouterr().out
    assert "FIELD ANALYSIS REPORT" in out
    assert "legacy_code:" in out
    assert '"empty-array": 1' in out


def test_cli_missing_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_cli_works_without_module_docstring(export_file, monkeypatch, capsys):
    # docstrings are stripped under python -OO
    import catalog.report as report
    monkeypatch.setattr(report, "__doc__", None)
    assert main([str(export_file)]) == 0
    assert "FIELD ANALYSIS REPORT" in capsys.readouterr().out
