"""Request selectors for filters, patterns and mosaics.

Each request is a closed variant: an enum member for the parameterless
filters, and small frozen dataclasses for requests that carry arguments.
The engine dispatches on them with one if-chain per family.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Optional, Union

from .errors import InvalidSeedCount, UnsupportedFilter, UnsupportedPattern


def _normalize(name: str) -> str:
    return name.strip().lower().replace("-", "_").replace(" ", "_")


class FilterKind(Enum):
    BLUR = "blur"
    SHARPEN = "sharpen"
    SEPIA = "sepia"
    GREYSCALE = "greyscale"
    DITHER = "dither"

    @classmethod
    def parse(cls, name: Union[str, "FilterKind"]) -> "FilterKind":
        """Resolve a member, its value, or a case-insensitive name."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = _normalize(name)
            # "grayscale" is accepted as an alias
            if key == "grayscale":
                key = "greyscale"
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedFilter(f"Sorry, the filter {name!r} is not supported.")


class PatternKind(Enum):
    VERTICAL_RAINBOW = "vertical_rainbow"
    HORIZONTAL_RAINBOW = "horizontal_rainbow"
    CHECKERBOARD = "checkerboard"
    GREEK_FLAG = "greek_flag"
    FRENCH_FLAG = "french_flag"
    SWISS_FLAG = "swiss_flag"

    @classmethod
    def parse(cls, name: Union[str, "PatternKind"]) -> "PatternKind":
        """Resolve a member, its value, or a case-insensitive name."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            key = _normalize(name)
            for member in cls:
                if member.value == key:
                    return member
        raise UnsupportedPattern(f"Sorry, the pattern {name!r} is not supported.")


@dataclass(frozen=True)
class PatternRequest:
    """Pattern kind plus the requested height and width."""

    kind: PatternKind
    height: int
    width: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PatternKind.parse(self.kind))


@dataclass(frozen=True)
class MosaicRequest:
    """Seed count for a mosaic, plus an optional RNG seed for reproducibility."""

    seed_count: int
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.seed_count, bool) or not isinstance(self.seed_count, Integral) or self.seed_count < 1:
            raise InvalidSeedCount("Error: Not a valid number of seeds.")


Request = Union[FilterKind, PatternRequest, MosaicRequest]

__all__ = ["FilterKind", "PatternKind", "PatternRequest", "MosaicRequest", "Request"]
