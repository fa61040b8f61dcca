"""
Fixed-point configuration.

A ledger picks one integer width and one number of fractional decimal digits
for its amounts. `FixedPointConfig` captures that choice, validates that the
scale denominator is representable in the width, and applies the matching
kernel with the configured denominator.

Configs can be built directly, from a mapping, or from a YAML file:

    fixed_point:
      width: u64
      decimals: 7
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .errors import FixedPointConfigError
from .fixed_point import FixedPoint
from .i128 import I128_FIXED_POINT
from .u64 import U64_FIXED_POINT


DEFAULT_WIDTH = "i128"
DEFAULT_DECIMALS = 7

KERNELS: dict[str, FixedPoint] = {
    "i128": I128_FIXED_POINT,
    "u64": U64_FIXED_POINT,
}


def get_kernel(name: str) -> FixedPoint:
    """Return the contract implementation for a width name ("i128" or "u64")."""
    try:
        return KERNELS[name]
    except KeyError:
        raise FixedPointConfigError(f"unknown width: {name!r} (expected one of {sorted(KERNELS)})") from None


@dataclass(frozen=True)
class FixedPointConfig:
    width: str = DEFAULT_WIDTH
    decimals: int = DEFAULT_DECIMALS

    def __post_init__(self) -> None:
        if not isinstance(self.width, str):
            raise FixedPointConfigError("width must be a string")
        kernel = get_kernel(self.width)
        if not isinstance(self.decimals, int) or isinstance(self.decimals, bool):
            raise FixedPointConfigError("decimals must be an int")
        if self.decimals < 0:
            raise FixedPointConfigError("decimals must be non-negative")
        # 10**d >= 2**d, so nothing above `bits` decimals can fit the width.
        if self.decimals > kernel.width.bits or not kernel.width.contains(10**self.decimals):
            raise FixedPointConfigError(
                f"denominator 10**{self.decimals} does not fit in {kernel.width.name}"
            )

    @property
    def denominator(self) -> int:
        return 10**self.decimals

    @property
    def kernel(self) -> FixedPoint:
        return get_kernel(self.width)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FixedPointConfig":
        if not isinstance(data, Mapping):
            raise FixedPointConfigError("config must be a mapping")
        unknown = set(data) - {"width", "decimals"}
        if unknown:
            raise FixedPointConfigError(f"unknown config keys: {sorted(unknown)}")
        return cls(
            width=data.get("width", DEFAULT_WIDTH),
            decimals=data.get("decimals", DEFAULT_DECIMALS),
        )

    # Scaled-amount helpers: `x * y / denominator` and `x * denominator / y`.

    def mul_floor(self, x: int, y: int) -> Optional[int]:
        return self.kernel.fixed_mul_floor(x, y, self.denominator)

    def mul_ceil(self, x: int, y: int) -> Optional[int]:
        return self.kernel.fixed_mul_ceil(x, y, self.denominator)

    def div_floor(self, x: int, y: int) -> Optional[int]:
        return self.kernel.fixed_div_floor(x, y, self.denominator)

    def div_ceil(self, x: int, y: int) -> Optional[int]:
        return self.kernel.fixed_div_ceil(x, y, self.denominator)


def load_config(path: Union[str, Path]) -> FixedPointConfig:
    """
    Load a `FixedPointConfig` from a YAML file.

    The settings may sit at the top level or under a `fixed_point` key. An empty
    document yields the defaults.
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FixedPointConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return FixedPointConfig()
    if isinstance(data, Mapping) and "fixed_point" in data:
        data = data["fixed_point"] or {}
    return FixedPointConfig.from_mapping(data)
