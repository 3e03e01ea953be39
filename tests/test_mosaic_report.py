from __future__ import annotations

import pytest

import mosaic_report


@pytest.fixture
def report(monkeypatch, assignment):
    monkeypatch.setattr(mosaic_report, "build_mosaic_grid", lambda debug=False: assignment)
    return mosaic_report


def test_parse_defaults():
    args = mosaic_report.parse_cli_args([])
    assert args.colour == []
    assert args.top == 5
    assert args.debug is False


def test_parse_repeated_colour_and_alias():
    args = mosaic_report.parse_cli_args(["--colour", "fff", "--color", "000", "--top", "2"])
    assert args.colour == ["fff", "000"]
    assert args.top == 2


def test_report_prints_summary_and_cells(report, assignment, capsys):
    assert report.main(["--colour", "F0A", "--top", "3"]) == 0
    out = capsys.readouterr().out
    assert "=== mosaic ===" in out
    assert "[grid] Size: 64  Colours: 4,096" in out
    assert "Tier vivid:" in out
    assert "Displaced:" in out
    assert "most displaced (top 3):" in out
    f0a = next(p.entry for p in assignment.placements if p.entry.hex3 == "f0a")
    assert f"f0a  #FF00AA  row={f0a.row}  col={f0a.col}" in out


def test_report_warns_on_bad_colour(report, capsys):
    assert report.main(["--colour", "xyz", "--top", "0"]) == 0
    out = capsys.readouterr().out
    assert "[warn] invalid hex3 colour 'xyz'" in out
    assert "most displaced" not in out


def test_report_logs_and_reraises_build_failure(monkeypatch, capsys):
    def boom(debug=False):
        raise RuntimeError("broken")

    monkeypatch.setattr(mosaic_report, "build_mosaic_grid", boom)
    with pytest.raises(RuntimeError):
        mosaic_report.main([])
    assert "[error] grid build failed: broken" in capsys.readouterr().err
