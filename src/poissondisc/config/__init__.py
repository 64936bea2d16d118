"""Configuration models and loaders."""

from .loader import load_config, load_sampler_config
from .schema import LoggingConfig, Profile, SamplerConfig

__all__ = ["load_config", "load_sampler_config", "LoggingConfig", "Profile", "SamplerConfig"]
