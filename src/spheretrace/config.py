"""Render settings and named quality presets."""

from dataclasses import dataclass, replace
from typing import Optional

# Samples per pixel and maximum bounce depth for each named quality level.
QUALITY_LEVELS = {
    "preview": {"samples": 4, "bounces": 8},
    "balanced": {"samples": 32, "bounces": 20},
    "high_quality": {"samples": 200, "bounces": 50},
}


@dataclass(frozen=True)
class RenderSettings:
    image_width: int = 400
    samples_per_pixel: int = 100
    max_depth: int = 50
    workers: Optional[int] = None
    use_bvh: bool = True

    def validate(self) -> "RenderSettings":
        if self.image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {self.image_width}")
        if self.samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        return self

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        """Settings for a named quality level; explicit non-None overrides win."""
        try:
            quality = QUALITY_LEVELS[name]
        except KeyError:
            raise ValueError(
                f"unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}") from None
        settings = cls(samples_per_pixel=quality["samples"], max_depth=quality["bounces"])
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(settings, **overrides)
