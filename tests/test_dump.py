import json

import pytest

from bench.core.config import settings


def test_dump_sections(bench, clock, capsys):
    bench.start()
    clock.advance(1.0)
    bench.mark("a")
    clock.advance(1.0)
    bench.stop()
    bench.stop()

    bench.dump(kill=False)
    out = json.loads(capsys.readouterr().out)

    assert set(out) == {"STATISTICS", "MARKS", "ERRORS"}
    assert out["STATISTICS"]["start"] == 1000.0
    assert out["STATISTICS"]["stop"] == 1002.0
    assert out["STATISTICS"]["mark_longest"]["id"] == "a"
    assert [m["id"] for m in out["MARKS"]] == ["a"]
    assert len(out["ERRORS"]) == 1


def test_dump_omits_mark_stats_without_marks(bench, clock, capsys):
    bench.start()
    clock.advance(0.5)
    bench.dump(kill=False)
    stats = json.loads(capsys.readouterr().out)["STATISTICS"]
    assert stats == {"start": 1000.0, "stop": None, "elapsed": 0.5}


def test_dump_before_start(bench, capsys):
    bench.dump(kill=False)
    out = json.loads(capsys.readouterr().out)
    assert out["STATISTICS"] is None
    assert out["MARKS"] == []
    assert out["ERRORS"] == ["Please call Bench.start() before calling Bench.get_stats()."]


def test_dump_kills_by_default(bench, capsys):
    bench.start()
    with pytest.raises(SystemExit) as exc_info:
        bench.dump()
    assert exc_info.value.code == 0
    assert "STATISTICS" in capsys.readouterr().out


def test_dump_kill_default_from_settings(bench, capsys, monkeypatch):
    monkeypatch.setattr(settings, "dump_kill", False)
    bench.start()
    bench.dump()
    assert "MARKS" in capsys.readouterr().out


def test_snapshot_aliases(bench):
    bench.start()
    snapshot = bench.snapshot()
    data = snapshot.model_dump(by_alias=True)
    assert list(data) == ["STATISTICS", "MARKS", "ERRORS"]
    assert snapshot.errors == []
