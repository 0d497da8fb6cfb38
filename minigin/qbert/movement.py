"""Timed movements: falls between two points and hops between grid cells."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Sequence

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
GridPos = tuple[int, int]
PositionConverter = Callable[[GridPos], Sequence[float]]


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def _vec3(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class FallType(Enum):
    SPAWNING = "spawning"
    """Straight down to the target."""
    DYING = "dying"
    """Along a direction, speeding up."""


class FallMovement:
    """A fall that completes after ``duration`` seconds."""

    def __init__(
        self, fall_type: FallType, duration: float = 1.0, acceleration: float = 9.8
    ) -> None:
        self._type = fall_type
        self._duration = duration
        self._acceleration = acceleration
        self._start: Vec3 = (0.0, 0.0, 0.0)
        self._target: Vec3 = (0.0, 0.0, 0.0)
        self._direction: Vec2 = (0.0, 1.0)
        self._progress = 0.0
        self._moving = False

    @property
    def direction(self) -> Vec2:
        return self._direction

    def start(self, start_world: Sequence[float], target_world: Sequence[float]) -> None:
        self._start = _vec3(start_world)
        self._target = _vec3(target_world)
        self._progress = 0.0
        self._moving = True

    def update(self, delta_time: float) -> bool:
        """Advance the fall; return True once it is complete or not running."""
        if not self._moving:
            return True
        self._progress = _clamp01(self._progress + delta_time / self._duration)
        return self._progress >= 1.0

    @property
    def current_position(self) -> Vec3:
        sx, sy, sz = self._start
        tx, ty, tz = self._target
        if self._type is FallType.SPAWNING:
            return (tx, _lerp(sy, ty, self._progress), tz)
        eased = self._progress * self._progress
        return (
            sx + self._direction[0] * eased * 200.0,
            sy + self._acceleration * eased * 100.0,
            sz,
        )

    def reset(self) -> None:
        self._progress = 0.0
        self._moving = False

    def set_direction(self, direction: Sequence[float]) -> None:
        """Fall along ``direction``; it is normalised and must not be zero."""
        x, y = (float(v) for v in direction)
        length = math.hypot(x, y)
        if length == 0.0:
            raise ValueError("fall direction must not be zero")
        self._direction = (x / length, y / length)


class JumpMovement:
    """An arched hop from one grid cell to another."""

    def __init__(
        self, converter: PositionConverter, duration: float = 0.5, height: float = 32.0
    ) -> None:
        self._converter = converter
        self._duration = duration
        self._height = height
        self._start_grid: GridPos = (0, 0)
        self._target_grid: GridPos = (0, 0)
        self._start_world: Vec3 = (0.0, 0.0, 0.0)
        self._target_world: Vec3 = (0.0, 0.0, 0.0)
        self._progress = 0.0
        self._moving = False

    def _to_world(self, grid: GridPos) -> Vec3:
        x, y = self._converter(grid)
        return (float(x), float(y), 0.0)

    def start(self, start_grid: Sequence[int], target_grid: Sequence[int]) -> None:
        self._start_grid = (int(start_grid[0]), int(start_grid[1]))
        self._target_grid = (int(target_grid[0]), int(target_grid[1]))
        self._start_world = self._to_world(self._start_grid)
        self._target_world = self._to_world(self._target_grid)
        self._progress = 0.0
        self._moving = True

    def update(self, delta_time: float) -> bool:
        """Advance the hop; return True once it has landed or is not running."""
        if not self._moving:
            return True
        self._progress = _clamp01(self._progress + delta_time / self._duration)
        if self._progress >= 1.0:
            self._moving = False
            return True
        return False

    @property
    def current_position(self) -> Vec3:
        t = self._progress
        lift = math.sin(t * math.pi) * self._height
        x = _lerp(self._start_world[0], self._target_world[0], t)
        y = _lerp(self._start_world[1], self._target_world[1], t)
        z = _lerp(self._start_world[2], self._target_world[2], t)
        return (x, y - lift, z)

    def reset(self) -> None:
        self._progress = 0.0
        self._moving = False

    def set_parameters(self, duration: float, height: float) -> None:
        self._duration = duration
        self._height = height

    @property
    def start_grid(self) -> GridPos:
        return self._start_grid

    @property
    def target_grid(self) -> GridPos:
        return self._target_grid