"""Configuration loader."""
from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .schema import Profile, SamplerConfig

__all__ = ["load_config", "load_sampler_config", "merge_layers", "read_yaml"]

_TOP_LEVEL_KEYS = {"sampler", "logging"}


def read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"config not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"invalid YAML at {path}: {e}") from e
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def _ensure_known_keys(d: Mapping[str, Any]) -> None:
    extra = set(d.keys()) - _TOP_LEVEL_KEYS
    if extra:
        raise ValueError(f"unexpected top-level keys: {sorted(extra)}")


def merge_layers(*layers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Merge config layers left to right; later layers win.

    Each layer may only hold the ``sampler``/``logging`` sections. Nested
    mappings are merged key by key, anything else (``start: null`` included)
    replaces the earlier value. The layers themselves are not modified.
    """
    out: Dict[str, Any] = {}
    for layer in layers:
        if not layer:
            continue
        _ensure_known_keys(layer)
        stack = [(out, layer)]
        while stack:
            dst, src = stack.pop()
            for k, v in src.items():
                if isinstance(v, Mapping) and isinstance(dst.get(k), dict):
                    stack.append((dst[k], v))
                else:
                    dst[k] = deepcopy(dict(v) if isinstance(v, Mapping) else v)
    return out


def load_config(
    path: str | Path | None = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Load and validate configuration.

    Layers are merged in order: model defaults, the YAML file at ``path``,
    then ``overrides``. Returns ``{"sampler": {...}, "logging": {...}}``.
    """
    data = read_yaml(path) if path is not None else None
    model = Profile.model_validate(merge_layers(data, overrides))
    return model.model_dump()


def load_sampler_config(
    path: str | Path | None = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> SamplerConfig:
    """Return the validated :class:`SamplerConfig` section."""
    return SamplerConfig.model_validate(load_config(path, overrides)["sampler"])
