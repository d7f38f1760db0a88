"""Spawners: turn marked beats into commands.

A spawner is any callable taking one :class:`~songmap.marked_beat.MarkedBeat`
and returning either ``One(command)`` or ``Many([command, ...])``.  The
compiler fills in ``beat`` and ``enemygroup`` on the returned commands where
the spawner left them unset.

Spawners used with ``compile_grouped()`` receive beats carrying
``midigroup_index``, ``midigroup_length`` and ``midigroup``, and an ``index``
that keeps counting across groups.

The factories below are dataclasses whose fields are their construction
parameters.  Build one, then hand it to the compiler:

    session.make_actions(
        songmap.marked_beat.every4(16.0),
        songmap.spawners.BulletLerp(BOTLEFT, ORIGIN, BOTRIGHT, ORIGIN)
    )

Spawners that draw random numbers take an ``rng`` (a ``random.Random``);
pass ``session.rng`` to make a whole songmap repeatable from one seed.
"""

import dataclasses
import random
import typing

import songmap.commands
import songmap.constants
import songmap.geometry
import songmap.marked_beat

Command = songmap.commands.Command
MarkedBeat = songmap.marked_beat.MarkedBeat
Point = songmap.geometry.Point


@dataclasses.dataclass(frozen=True)
class One:

	"""A spawner result holding a single command."""

	command: Command


@dataclasses.dataclass(frozen=True)
class Many:

	"""A spawner result holding an ordered list of commands."""

	commands: typing.Sequence[Command]


SpawnResult = typing.Union[One, Many, Command]
Spawner = typing.Callable[[MarkedBeat], SpawnResult]


def to_commands (result: SpawnResult) -> typing.List[Command]:

	"""
	Unwrap a spawner result into a list of commands.

	A bare command instance counts as ``One``.  Anything else, including plain
	lists and tuples, is rejected so a result is never guessed from its shape.
	"""

	if isinstance(result, One):
		commands = [result.command]

	elif isinstance(result, Many):
		commands = list(result.commands)

	elif isinstance(result, Command):
		commands = [result]

	else:
		raise TypeError(f"Spawner must return One, Many or a Command, got {type(result).__name__}")

	for command in commands:
		if not isinstance(command, Command):
			raise TypeError(f"Spawner produced a non-command value: {command!r}")

	return commands


def _require_pitch (marked_beat: MarkedBeat) -> float:

	if marked_beat.pitch is None:
		raise ValueError(f"Marked beat {marked_beat.index} at beat {marked_beat.beat} has no pitch")

	return marked_beat.pitch


def _pitch_coordinate (pitch: float) -> float:

	"""Map a normalised pitch onto the arena's width (0.0 -> -50, 1.0 -> 50)."""

	return (pitch - 0.5) * 2.0 * songmap.constants.ARENA_HALF_SIZE


# ─── Timed-range spawners ─────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True)
class BulletLerp:

	"""
	Bullets along a sweeping segment.

	At percent 0 the bullet flies ``start1 -> end1``, at percent 1 it flies
	``start2 -> end2``; in between both endpoints are interpolated.
	"""

	start1: Point
	end1: Point
	start2: Point
	end2: Point

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		t = marked_beat.percent

		return One(songmap.commands.Bullet(
			start_pos = songmap.geometry.lerp_pos(self.start1, self.start2, t),
			end_pos = songmap.geometry.lerp_pos(self.end1, self.end2, t)
		))


@dataclasses.dataclass(frozen=True)
class BulletPlayer:

	"""Bullets aimed at the player, fired alternately from the two top corners."""

	even: Point = songmap.constants.TOPLEFT
	odd: Point = songmap.constants.TOPRIGHT

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		origin = self.even if marked_beat.index % 2 == 0 else self.odd

		return One(songmap.commands.Bullet(start_pos=origin, end_pos=songmap.geometry.PLAYER))


@dataclasses.dataclass
class BombGrid:

	"""
	A bomb at a random whole-unit position inside a square about the origin.

	Every call draws a fresh position from ``rng``; the marked beat is ignored.
	"""

	bound: int = int(songmap.constants.ARENA_HALF_SIZE)
	rng: random.Random = dataclasses.field(default_factory=random.Random)

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		position = Point(
			float(self.rng.randint(-self.bound, self.bound)),
			float(self.rng.randint(-self.bound, self.bound))
		)

		return One(songmap.commands.Bomb(pos=position))


@dataclasses.dataclass(frozen=True)
class LaserCircle:

	"""A laser anchored at ``center`` whose angle sweeps with percent."""

	center: Point
	start_angle: float
	end_angle: float

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		angle = songmap.geometry.lerp(self.start_angle, self.end_angle, marked_beat.percent)

		return One(songmap.commands.LaserAngle(position=self.center, angle=angle))


@dataclasses.dataclass(frozen=True)
class LaserSolo:

	"""
	Three vertical lasers on one side of the arena, switching side every beat.

	Even indices fire on the right, odd indices on the left.
	"""

	xs: typing.Tuple[float, ...] = (50.0, 40.0, 30.0)
	angle: float = 90.0

	def __call__ (self, marked_beat: MarkedBeat) -> Many:

		side = 1.0 if marked_beat.index % 2 == 0 else -1.0

		return Many([
			songmap.commands.LaserAngle(position=Point(x * side, 0.0), angle=self.angle)
			for x in self.xs
		])


@dataclasses.dataclass(frozen=True)
class BulletCircleIn:

	"""Bullets flying from a circle into its centre, the start angle sweeping with percent."""

	center: Point
	radius: float
	start_angle: float
	end_angle: float

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		angle = songmap.geometry.lerp(self.start_angle, self.end_angle, marked_beat.percent)

		return One(songmap.commands.Bullet(
			start_pos = songmap.geometry.circle(self.center, self.radius, angle),
			end_pos = self.center
		))


DIAMOND = (
	Point(-60.0, 0.0),
	Point(0.0, 60.0),
	Point(60.0, 0.0),
	Point(0.0, -60.0),
)


@dataclasses.dataclass(frozen=True)
class LaserDiamond:

	"""
	Lasers tracing the edges of a diamond, one edge per beat.

	Beat ``i`` connects vertex ``step * i`` to vertex ``step * (i + 1)`` (mod 4),
	where ``step`` is 1 when ``clockwise`` and -1 otherwise.
	"""

	clockwise: bool = True
	vertices: typing.Tuple[Point, ...] = DIAMOND

	def edge (self, index: int) -> typing.Tuple[int, int]:

		"""Return the vertex numbers joined at sequence position ``index``."""

		step = 1 if self.clockwise else -1
		count = len(self.vertices)

		return (step * index) % count, (step * (index + 1)) % count

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		a, b = self.edge(marked_beat.index)

		return One(songmap.commands.LaserPoints(a=self.vertices[a], b=self.vertices[b]))


# ─── Pitch-driven spawners ────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True)
class TineAttack:

	"""
	Bullets whose lane follows pitch.

	The normalised pitch picks a coordinate on ``pitch_axis`` ("x" or "y"); the
	bullet flies along the other axis from ``start_coord`` to ``end_coord``.
	"""

	pitch_axis: str
	start_coord: float
	end_coord: float

	def __post_init__ (self) -> None:
		if self.pitch_axis not in ("x", "y"):
			raise ValueError(f"pitch_axis must be 'x' or 'y', got {self.pitch_axis!r}")

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		lane = _pitch_coordinate(_require_pitch(marked_beat))

		if self.pitch_axis == "x":
			start_pos = Point(lane, self.start_coord)
			end_pos = Point(lane, self.end_coord)
		else:
			start_pos = Point(self.start_coord, lane)
			end_pos = Point(self.end_coord, lane)

		return One(songmap.commands.Bullet(start_pos=start_pos, end_pos=end_pos))


@dataclasses.dataclass(frozen=True)
class LaserTineAttack:

	"""
	Lasers armed on each note that all fire together at ``firing_time``.

	Each laser crosses the arena diagonally at a lane picked by pitch.  It is
	scheduled at ``firing_time`` with a warmup of ``firing_time - beat``, so the
	warning appears on the note and every laser goes live at the same instant.
	"""

	firing_time: float
	active: float = 1.0
	cooldown: float = 1.0

	def __call__ (self, marked_beat: MarkedBeat) -> One:

		lane = _pitch_coordinate(_require_pitch(marked_beat))
		half = songmap.constants.ARENA_HALF_SIZE

		return One(songmap.commands.LaserPoints(
			a = Point(lane, half),
			b = Point(-lane, -half),
			durations = songmap.commands.Durations(
				warmup = self.firing_time - marked_beat.beat,
				active = self.active,
				cooldown = self.cooldown
			),
			beat = self.firing_time
		))


# ─── Grouped spawners ─────────────────────────────────────────────────────────


def sector_gap (group_length: int) -> float:

	"""Angle between the arms of a sector attack with ``group_length`` arms."""

	if group_length == 2:
		return 180.0

	if group_length == 3:
		return 120.0

	return 0.0


@dataclasses.dataclass
class CircleSectorAttack:

	"""
	A spinning multi-arm barrage choreographed over a note group.

	On the first note of a group one arm is built for every note in the group.
	Each arm is a fan of bullets on a ring around the player, aimed at the
	player, in its own enemy group (numbered from the running index of the note
	that will reveal it, plus ``group_base``).  Each arm also gets a rotation
	about the player that stops after ``rotation_duration`` beats, all in the
	same direction unless ``alternate`` flips every second arm.  The arms
	share one random base angle and are spread by :func:`sector_gap`.  Every arm
	but the first starts hidden.

	Each later note in the group reveals its own arm.

	Beats must come from ``compile_grouped()`` (or carry the midigroup fields).
	"""

	radius: float = 75.0
	bullets_per_sector: int = 7
	sector_size: float = 60.0
	rotation_angle: float = 60.0
	rotation_duration: float = 4.0
	group_base: int = 0
	alternate: bool = False
	rng: random.Random = dataclasses.field(default_factory=random.Random)

	def arm_group (self, index: int) -> int:

		"""Enemy group of the arm revealed by the note at running ``index``."""

		return self.group_base + index - 1

	def __call__ (self, marked_beat: MarkedBeat) -> typing.Union[One, Many]:

		if marked_beat.midigroup_index is None or marked_beat.midigroup_length is None:
			raise ValueError(f"Marked beat {marked_beat.index} at beat {marked_beat.beat} is not part of a note group")

		if marked_beat.midigroup_index != 0:
			return One(songmap.commands.SetRender(value=True, enemygroup=self.arm_group(marked_beat.index)))

		commands: typing.List[Command] = []
		base_angle = self.rng.random() * 360.0
		gap = sector_gap(marked_beat.midigroup_length)
		angles = songmap.geometry.circle_sector(1, self.bullets_per_sector, self.sector_size, 0.0)

		for j in range(marked_beat.midigroup_length):

			enemygroup = self.arm_group(marked_beat.index + j)
			sign = -1.0 if self.alternate and j % 2 == 1 else 1.0

			commands.append(songmap.commands.SetRotationOn(
				start_angle = 0.0,
				end_angle = sign * self.rotation_angle,
				duration = self.rotation_duration,
				rot_point = songmap.geometry.PLAYER,
				enemygroup = enemygroup
			))
			commands.append(songmap.commands.SetRotationOff(
				beat = marked_beat.beat + self.rotation_duration,
				enemygroup = enemygroup
			))

			arm_angle = base_angle + gap * j

			for angle in angles:
				start_pos = songmap.geometry.OffsetFrom(
					songmap.geometry.circle(songmap.constants.ORIGIN, self.radius, arm_angle + angle)
				)
				commands.append(songmap.commands.Bullet(
					start_pos = start_pos,
					end_pos = songmap.geometry.PLAYER,
					enemygroup = enemygroup
				))

			if j != 0:
				commands.append(songmap.commands.SetRender(value=False, enemygroup=enemygroup))

		return Many(commands)
