"""Pydantic models for sampler and logging configuration."""
from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..types import NO_POINT, Point


class SamplerConfig(BaseModel):
    """Parameters of one Poisson-disc distribution.

    ``width``/``height`` bound the domain ``[0, width) x [0, height)``.
    ``min_distance`` is the smallest allowed distance between two points;
    points are never spawned further than twice that from their parent.
    ``max_attempts`` caps the candidates tried around each active point.
    ``start`` is the seed point; the default sentinel picks one at random.
    ``max_seed_attempts`` caps the random seed draws (``None`` = no cap).
    """

    width: float = Field(default=1.0, gt=0)
    height: float = Field(default=1.0, gt=0)
    min_distance: float = Field(default=0.05, gt=0)
    max_attempts: int = Field(default=30, ge=1)
    start: Point = NO_POINT
    max_seed_attempts: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("width", "height", "min_distance")
    @classmethod
    def _check_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("must be finite")
        return v

    @field_validator("start", mode="before")
    @classmethod
    def _start_sentinel(cls, v: Any) -> Any:
        return NO_POINT if v is None else v

    @model_validator(mode="after")
    def _check_start(self) -> "SamplerConfig":
        if self.start.is_set:
            x, y = self.start
            if not (0.0 <= x < self.width and 0.0 <= y < self.height):
                raise ValueError(
                    f"start ({x}, {y}) must lie in [0, {self.width}) x [0, {self.height})"
                )
        return self


class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["text", "json"] = "text"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


class Profile(BaseModel):
    """Top-level layout of a configuration file."""

    sampler: SamplerConfig = SamplerConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = ConfigDict(extra="forbid")


__all__ = ["SamplerConfig", "LoggingConfig", "Profile"]
