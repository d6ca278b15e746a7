from dataclasses import dataclass
from typing import Optional

from ..errors import ConfigError

DIRECTION_ORDERS = ("rotate", "shuffle")


@dataclass
class MazeConfig:
    width: int = 20
    height: int = 10
    remove_percentage: float = 0.0
    num_rooms: int = 0
    room_size: int = 0
    seed: Optional[int] = None
    direction_order: str = "rotate"

    @classmethod
    def harp(cls, seed: Optional[int] = None) -> "MazeConfig":
        """Fixed 11x11 layout used by the harp lab maze game; overrides every other option."""
        width = height = 11
        return cls(
            width=width,
            height=height,
            remove_percentage=8.0,
            num_rooms=(width + height) // 4,
            room_size=2,
            seed=seed,
        )

    def validate(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ConfigError(f"maze dimensions must be at least 1x1 (got {self.width}x{self.height})", "dimensions")
        if self.num_rooms < 0 or self.room_size < 0:
            raise ConfigError("room count and room size must not be negative", "rooms")
        if self.room_size > self.height - 1 or self.room_size > self.width - 1:
            raise ConfigError("room size too large for maze", "room_size")
        if not 0.0 <= self.remove_percentage <= 100.0:
            raise ConfigError(f"remove percentage must be within 0-100 (got {self.remove_percentage})", "remove_percentage")
        if self.direction_order not in DIRECTION_ORDERS:
            raise ConfigError(f"unknown direction order {self.direction_order!r}", "direction_order")


__all__ = ["MazeConfig", "DIRECTION_ORDERS"]
