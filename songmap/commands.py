"""Songmap commands.

Every command the game understands is a dataclass here.  Spawn commands
share two keyword-only fields:

- ``beat`` - absolute song time at which the command fires.
- ``enemygroup`` - the group the command targets.

Both default to ``None`` ("not specified").  The compiler fills them from the
marked beat and the session's current group only when they are ``None``, so
a spawner can pin either one explicitly.

The wire form (``to_dict()``) is a flat dict keyed by ``spawn_cmd``, the
format the game's level loader reads.  The two config commands (``Bpm`` and
``Skip``) have no ``spawn_cmd`` and no timing fields.
"""

import dataclasses
import typing

import songmap.constants
import songmap.geometry

Position = songmap.geometry.Position


class CommandError (ValueError):

	"""
	Raised when a command is missing a field it needs to be played.
	"""


@dataclasses.dataclass(kw_only=True)
class Command:

	"""
	Base class for all songmap commands.
	"""

	SPAWN_CMD: typing.ClassVar[typing.Optional[str]] = None
	REQUIRED: typing.ClassVar[typing.Tuple[str, ...]] = ()

	beat: typing.Optional[float] = None
	enemygroup: typing.Optional[int] = None

	def missing_fields (self) -> typing.List[str]:

		"""
		Return the names of required fields that are unset, timing fields included.
		"""

		names = list(self.REQUIRED)

		if self.SPAWN_CMD is not None:
			names += ["beat", "enemygroup"]

		return [name for name in names if getattr(self, name) is None]

	def validate (self) -> None:

		"""
		Raise ``CommandError`` if any required field is unset.
		"""

		missing = self.missing_fields()

		if missing:
			raise CommandError(f"{type(self).__name__} command is missing {', '.join(missing)}")

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""
		Render the command in the game's wire format.
		"""

		data: typing.Dict[str, typing.Any] = {}

		if self.SPAWN_CMD is not None:
			data["spawn_cmd"] = self.SPAWN_CMD

		for field in dataclasses.fields(self):

			value = getattr(self, field.name)

			if value is None:
				continue

			data[field.name] = _to_wire(value)

		return data


def _to_wire (value: typing.Any) -> typing.Any:

	if isinstance(value, (songmap.geometry.Point, songmap.geometry.PlayerPosition, songmap.geometry.OffsetFrom)):
		return songmap.geometry.position_to_wire(value)

	if isinstance(value, Durations):
		return dataclasses.asdict(value)

	return value


@dataclasses.dataclass
class Durations:

	"""
	Laser lifetime phases in beats: warning, damaging, fading.
	"""

	warmup: float
	active: float
	cooldown: float


# ─── Enemies ──────────────────────────────────────────────────────────────────


@dataclasses.dataclass
class Bullet (Command):

	"""A bullet travelling from ``start_pos`` to ``end_pos``."""

	SPAWN_CMD = "bullet"
	REQUIRED = ("start_pos", "end_pos")

	start_pos: typing.Optional[Position]
	end_pos: typing.Optional[Position]


@dataclasses.dataclass
class LaserAngle (Command):

	"""A laser through ``position`` at ``angle`` degrees."""

	SPAWN_CMD = "laser"
	REQUIRED = ("position", "angle")

	position: typing.Optional[Position]
	angle: typing.Optional[float]
	durations: typing.Optional[Durations] = None


@dataclasses.dataclass
class LaserPoints (Command):

	"""A laser through the points ``a`` and ``b``."""

	SPAWN_CMD = "laser"
	REQUIRED = ("a", "b")

	a: typing.Optional[Position]
	b: typing.Optional[Position]
	durations: typing.Optional[Durations] = None


@dataclasses.dataclass
class Bomb (Command):

	"""A circular bomb at ``pos``."""

	SPAWN_CMD = "bomb"
	REQUIRED = ("pos",)

	pos: typing.Optional[Position]


# ─── Group control ────────────────────────────────────────────────────────────


@dataclasses.dataclass
class SetRotationOn (Command):

	"""Rotate the group about ``rot_point`` from ``start_angle`` to ``end_angle`` over ``duration`` beats."""

	SPAWN_CMD = "set_rotation_on"
	REQUIRED = ("start_angle", "end_angle", "duration", "rot_point")

	start_angle: typing.Optional[float]
	end_angle: typing.Optional[float]
	duration: typing.Optional[float]
	rot_point: typing.Optional[Position]


@dataclasses.dataclass
class SetRotationOff (Command):

	SPAWN_CMD = "set_rotation_off"


@dataclasses.dataclass
class SetRender (Command):

	"""Show (``value=True``) or hide the group."""

	SPAWN_CMD = "set_render"
	REQUIRED = ("value",)

	value: typing.Optional[bool]


@dataclasses.dataclass
class SetFadeoutOn (Command):

	SPAWN_CMD = "set_fadeout_on"
	REQUIRED = ("color", "duration")

	color: typing.Optional[str] = songmap.constants.FADE_COLOR
	duration: typing.Optional[float] = None


@dataclasses.dataclass
class SetFadeoutOff (Command):

	SPAWN_CMD = "set_fadeout_off"


@dataclasses.dataclass
class SetHitbox (Command):

	"""Enable (``value=True``) or disable the group's hitboxes."""

	SPAWN_CMD = "set_hitbox"
	REQUIRED = ("value",)

	value: typing.Optional[bool]


@dataclasses.dataclass
class ClearEnemies (Command):

	"""Remove every object in the group."""

	SPAWN_CMD = "clear_enemies"


# ─── Config ───────────────────────────────────────────────────────────────────


@dataclasses.dataclass
class Bpm (Command):

	"""Song tempo in beats per minute."""

	REQUIRED = ("bpm",)

	bpm: typing.Optional[float]

	def to_dict (self) -> typing.Dict[str, typing.Any]:
		return {"bpm": self.bpm}


@dataclasses.dataclass
class Skip (Command):

	"""Beats of the song to skip before play starts."""

	REQUIRED = ("skip",)

	skip: typing.Optional[float]

	def to_dict (self) -> typing.Dict[str, typing.Any]:
		return {"skip": self.skip}
