from pathlib import Path

import pytest

from poissondisc.config.loader import load_config, load_sampler_config, merge_layers
from poissondisc.types import NO_POINT, Point

REPO_CONFIGS = Path(__file__).resolve().parents[1] / "configs"


def test_defaults_without_file():
    cfg = load_config()
    assert cfg["sampler"]["max_attempts"] == 30
    assert cfg["logging"] == {"level": "WARNING", "format": "text"}


def test_file_then_overrides(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("sampler: {width: 50, height: 20, min_distance: 2.5}\nlogging: {level: debug}\n")
    cfg = load_config(p, overrides={"sampler": {"min_distance": 3.0}})
    assert cfg["sampler"]["width"] == 50.0
    assert cfg["sampler"]["min_distance"] == 3.0
    assert cfg["logging"]["level"] == "DEBUG"


def test_load_sampler_config_start(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("sampler:\n  width: 80\n  height: 40\n  min_distance: 4\n  start: [10, 10]\n")
    conf = load_sampler_config(p)
    assert conf.start == Point(10.0, 10.0)
    assert load_sampler_config(overrides={"sampler": {"start": None}}).start == NO_POINT


def test_repo_default_config():
    conf = load_sampler_config(REPO_CONFIGS / "default.yaml")
    assert (conf.width, conf.height, conf.min_distance) == (80.0, 40.0, 4.0)


def test_unexpected_top_level_key(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("render: {chars: '.'}\n")
    with pytest.raises(ValueError):
        load_config(p)
    with pytest.raises(ValueError):
        load_config(overrides={"typo": 1})


def test_non_mapping_yaml(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_config(p)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_schema_validation_error():
    with pytest.raises(ValueError) as exc:
        load_config(overrides={"sampler": {"min_distance": -1}})
    assert "min_distance" in str(exc.value)


def test_malformed_yaml_is_a_value_error(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("sampler: {width: 10\n")
    with pytest.raises(ValueError) as exc:
        load_config(p)
    assert "invalid YAML" in str(exc.value)


def test_merge_layers_leaves_inputs_untouched():
    base = {"sampler": {"width": 1.0, "height": 2.0, "start": [1.0, 1.0]}}
    top = {"sampler": {"width": 5.0, "start": None}, "logging": {"level": "INFO"}}
    out = merge_layers(base, None, top)
    assert out == {
        "sampler": {"width": 5.0, "height": 2.0, "start": None},
        "logging": {"level": "INFO"},
    }
    assert base == {"sampler": {"width": 1.0, "height": 2.0, "start": [1.0, 1.0]}}
    assert top["sampler"] == {"width": 5.0, "start": None}
    with pytest.raises(ValueError):
        merge_layers(base, {"render": {}})
