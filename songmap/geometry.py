"""Positions and small geometry helpers.

World coordinates are a square arena centred on the origin, with y pointing
up.  A position in a command is one of:

- ``Point(x, y)`` - a literal world position.
- ``PLAYER`` - the player's position, resolved by the game at spawn time.
- ``OffsetFrom(point)`` - ``point`` added to the player's position at spawn time.

All angles are in degrees.
"""

from __future__ import annotations

import dataclasses
import math
import typing


@dataclasses.dataclass(frozen=True)
class Point:

	"""
	A literal 2-D world position.
	"""

	x: float
	y: float

	def to_dict (self) -> typing.Dict[str, float]:
		return {"x": self.x, "y": self.y}


@dataclasses.dataclass(frozen=True)
class PlayerPosition:

	"""
	Symbolic token for the player's current position.
	"""

	def to_dict (self) -> str:
		return "player"


@dataclasses.dataclass(frozen=True)
class OffsetFrom:

	"""
	A position relative to the player, resolved when the object spawns.
	"""

	offset: Point

	def to_dict (self) -> typing.Dict[str, typing.Dict[str, float]]:
		return {"offset_from": self.offset.to_dict()}


PLAYER = PlayerPosition()

Position = typing.Union[Point, PlayerPosition, OffsetFrom]


def position_to_wire (position: Position) -> typing.Any:

	"""Render a position in the form the game reads."""

	if not isinstance(position, (Point, PlayerPosition, OffsetFrom)):
		raise TypeError(f"Not a position: {position!r}")

	return position.to_dict()


def lerp (a: float, b: float, t: float) -> float:

	"""Linear interpolation from a (t=0) to b (t=1). t is not clamped."""

	return a * (1.0 - t) + b * t


def lerp_pos (a: Point, b: Point, t: float) -> Point:

	"""Interpolate each axis of two points."""

	return Point(lerp(a.x, b.x, t), lerp(a.y, b.y, t))


def circle (center: Point, radius: float, angle: float) -> Point:

	"""Return the point at ``angle`` degrees on a circle about ``center``."""

	radians = math.radians(angle)

	return Point(
		center.x + math.cos(radians) * radius,
		center.y + math.sin(radians) * radius
	)


def circle_sector (num_sectors: int, num_per_sector: int, sector_size: float, sector_gap: float) -> typing.List[float]:

	"""
	Return angles laid out in sectors around a circle.

	Each sector holds ``num_per_sector`` angles spread evenly from the sector's
	start to ``sector_size`` degrees later, both edges included.  Consecutive
	sectors start ``sector_gap`` degrees apart.

	Parameters:
		num_sectors: Number of sectors
		num_per_sector: Number of angles in each sector
		sector_size: Angular width of each sector
		sector_gap: Angle between the starts of consecutive sectors

	Example:
		```python
		# One 60 degree fan of 7 bullets: 0, 10, 20, ... 60
		angles = songmap.geometry.circle_sector(1, 7, 60.0, 0.0)
		```
	"""

	if num_sectors < 0 or num_per_sector < 0:
		raise ValueError("Sector counts cannot be negative")

	angles: typing.List[float] = []
	start_angle = 0.0

	for _ in range(num_sectors):

		for j in range(num_per_sector):
			fraction = j / (num_per_sector - 1) if num_per_sector > 1 else 0.0
			angles.append(start_angle + sector_size * fraction)

		start_angle += sector_gap

	return angles
