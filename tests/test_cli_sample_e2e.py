import json

import numpy as np

from _util_points import pairwise_min
from poissondisc.cli import main
from poissondisc.utils.logging import configure_logging


def test_cli_sample_writes_points(tmp_path, capsys):
    out = tmp_path / "pts.json"
    rc = main([
        "sample", "--width", "80", "--height", "40", "--min-distance", "4",
        "--seed", "1", "--start", "10", "10", "--out", str(out), "--print",
    ])
    assert rc == 0
    pts = json.loads(out.read_text())
    assert pts[0] == [10.0, 10.0]
    assert pairwise_min(pts) >= 4.0 - 1e-6
    printed = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert printed["count"] == len(pts)


def test_cli_config_file_and_disc_shape(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("sampler: {width: 40, height: 40, min_distance: 3}\n")
    out = tmp_path / "pts.json"
    rc = main(["sample", "--config", str(cfg), "--shape", "disc", "--seed", "0", "--out", str(out)])
    assert rc == 0
    P = np.asarray(json.loads(out.read_text()))
    assert np.all(np.hypot(P[:, 0] - 20.0, P[:, 1] - 20.0) <= 20.0 + 1e-9)


def test_cli_invalid_config(tmp_path, capsys):
    rc = main(["sample", "--min-distance", "-1", "--out", str(tmp_path / "x.json")])
    assert rc == 2
    assert "invalid configuration" in capsys.readouterr().err
    assert not (tmp_path / "x.json").exists()


def test_cli_malformed_yaml(tmp_path, capsys):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("sampler: {width: 10\n")
    rc = main(["sample", "--config", str(cfg), "--out", str(tmp_path / "x.json")])
    assert rc == 2
    assert "invalid YAML" in capsys.readouterr().err
    assert not (tmp_path / "x.json").exists()


def test_cli_debug_level_reaches_sampler_from_env(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("POISSONDISC_LOG_LEVEL", "DEBUG")
    try:
        rc = main([
            "sample", "--width", "20", "--height", "20", "--min-distance", "4",
            "--seed", "0", "--out", str(tmp_path / "pts.json"),
        ])
        out = capsys.readouterr().out
    finally:
        configure_logging(False)
    n = len(json.loads((tmp_path / "pts.json").read_text()))
    assert rc == 0
    assert "[DEBUG] poissondisc: seed (" in out
    assert f"{n} points on 20x20" in out
    assert f"[INFO] poissondisc.cli: sampled {n} points" in out


def test_cli_debug_level_from_config_json(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text(
        "sampler: {width: 20, height: 20, min_distance: 4}\n"
        "logging: {level: DEBUG, format: json}\n"
    )
    try:
        rc = main(["sample", "--config", str(cfg), "--seed", "0", "--out", str(tmp_path / "pts.json")])
        lines = capsys.readouterr().out.strip().splitlines()
    finally:
        configure_logging(False)
    assert rc == 0
    records = [json.loads(line) for line in lines]
    assert any(r["level"] == "DEBUG" and "points on 20x20" in r["msg"] for r in records)
    assert any(r["name"] == "poissondisc.cli" and r.get("count") for r in records)
