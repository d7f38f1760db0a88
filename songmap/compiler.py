"""Compile marked beats and spawners into a songmap.

The :class:`Songmap` is the append-only list of commands handed to the game.
A :class:`Session` pairs a songmap with the *current enemy group* - the group
stamped onto any command whose spawner did not choose one - and the random
source used by the level's spawners.

Sessions are values: ``with_group()`` returns a new session writing into the
same songmap, so a level reads top to bottom:

    chart = songmap.compiler.Session(songmap.compiler.Songmap(bpm=150.0))
    chart.make_actions(songmap.marked_beat.every4(16.0), spawner)

    drop = chart.with_group(1)
    drop.make_actions(kicks, songmap.spawners.BombGrid(rng=chart.rng))

Commands are appended in the order they are generated, not in time order;
the game sorts by ``beat`` when it loads the songmap.
"""

import dataclasses
import json
import logging
import random
import typing

import songmap.commands
import songmap.constants
import songmap.marked_beat
import songmap.spawners


logger = logging.getLogger(__name__)

Command = songmap.commands.Command
MarkedBeat = songmap.marked_beat.MarkedBeat


class Songmap:

	"""
	Ordered, append-only list of commands for one level.

	Opens with the tempo and lead-in skip config commands.
	"""

	def __init__ (self, bpm: float = songmap.constants.DEFAULT_BPM, skip: float = 0.0) -> None:

		if bpm <= 0:
			raise ValueError(f"BPM must be positive (got {bpm})")

		self.bpm = bpm
		self.skip = skip

		self._commands: typing.List[Command] = [
			songmap.commands.Bpm(bpm=bpm),
			songmap.commands.Skip(skip=skip),
		]

	def append (self, command: Command) -> None:

		"""
		Validate and append one command.
		"""

		command.validate()
		self._commands.append(command)

	@property
	def commands (self) -> typing.Tuple[Command, ...]:
		return tuple(self._commands)

	def spawn_commands (self) -> typing.List[Command]:

		"""Every command except the leading config commands."""

		return [command for command in self._commands if command.SPAWN_CMD is not None]

	def __len__ (self) -> int:
		return len(self._commands)

	def __iter__ (self) -> typing.Iterator[Command]:
		return iter(self._commands)

	def to_dicts (self) -> typing.List[typing.Dict[str, typing.Any]]:

		"""Render every command in the game's wire format."""

		return [command.to_dict() for command in self._commands]

	def save_json (self, path: str) -> None:

		"""Write the songmap to ``path`` as a JSON array."""

		with open(path, "w") as f:
			json.dump(self.to_dicts(), f, indent=2)

		logger.info(f"Saved {len(self._commands)} commands to {path}")


@dataclasses.dataclass(frozen=True)
class Session:

	"""
	The compilation context: target songmap, current enemy group and random source.

	Attributes:
		songmap: The songmap commands are appended to. Shared by every session
			derived with ``with_group()``.
		group: Enemy group stamped onto commands that do not name one.
		rng: Random source for the level's spawners. Seed it for repeatable output.
	"""

	songmap: Songmap
	group: int = 0
	rng: random.Random = dataclasses.field(default_factory=random.Random)

	def with_group (self, group: int) -> "Session":

		"""Return a session targeting ``group`` that writes into the same songmap."""

		return dataclasses.replace(self, group=group)

	def make_actions (self, marked_beats: typing.Iterable[MarkedBeat], spawner: songmap.spawners.Spawner) -> int:

		"""Shorthand for :func:`compile`."""

		return compile(self, marked_beats, spawner)

	def make_actions_grouped (self, groups: typing.Iterable[typing.Iterable[MarkedBeat]], spawner: songmap.spawners.Spawner) -> int:

		"""Shorthand for :func:`compile_grouped`."""

		return compile_grouped(self, groups, spawner)

	def add_action (self, command: Command, beat: typing.Optional[float] = None, group: typing.Optional[int] = None) -> None:

		"""Shorthand for :func:`add_action`."""

		add_action(self, command, beat=beat, group=group)


def _stamp (command: Command, beat: float, group: int) -> Command:

	"""Fill in beat and enemygroup where the command leaves them unset."""

	changes: typing.Dict[str, typing.Any] = {}

	if command.beat is None:
		changes["beat"] = beat

	if command.enemygroup is None:
		changes["enemygroup"] = group

	if not changes:
		return command

	return dataclasses.replace(command, **changes)


def _append_spawned (session: Session, marked_beat: MarkedBeat, spawner: songmap.spawners.Spawner) -> int:

	commands = songmap.spawners.to_commands(spawner(marked_beat))

	for command in commands:

		command = _stamp(command, marked_beat.beat, session.group)
		missing = command.missing_fields()

		if missing:
			raise songmap.commands.CommandError(
				f"{type(command).__name__} command from marked beat {marked_beat.index} "
				f"(beat {marked_beat.beat}) is missing {', '.join(missing)}"
			)

		session.songmap.append(command)

	return len(commands)


def compile (session: Session, marked_beats: typing.Iterable[MarkedBeat], spawner: songmap.spawners.Spawner) -> int:

	"""
	Run every marked beat through a spawner and append the results.

	Beats are renumbered with a dense 1-based ``index`` before the spawner sees
	them.  Each resulting command takes the marked beat's time as ``beat`` and
	the session's group as ``enemygroup`` unless the spawner set them.

	An exception from the spawner, or a command missing a required field,
	aborts the call.  Commands appended before the failure stay in the songmap.

	Returns:
		The number of commands appended.
	"""

	count = 0
	beats = 0

	for index, marked_beat in enumerate(marked_beats, start=1):
		marked_beat = dataclasses.replace(marked_beat, index=index)
		count += _append_spawned(session, marked_beat, spawner)
		beats += 1

	logger.debug(f"Compiled {count} commands from {beats} beats into group {session.group}")

	return count


def compile_grouped (session: Session, groups: typing.Iterable[typing.Iterable[MarkedBeat]], spawner: songmap.spawners.Spawner) -> int:

	"""
	Like :func:`compile` for a sequence of note groups.

	Each beat reaches the spawner with ``index`` counting across all groups,
	``midigroup_index`` (0-based position in its group), ``midigroup_length``
	and ``midigroup`` (0-based group number).

	Returns:
		The number of commands appended.
	"""

	count = 0
	index = 0
	group_count = 0

	for group_number, group in enumerate(groups):

		members = list(group)

		for position, marked_beat in enumerate(members):

			index += 1
			marked_beat = dataclasses.replace(
				marked_beat,
				index = index,
				midigroup_index = position,
				midigroup_length = len(members),
				midigroup = group_number
			)
			count += _append_spawned(session, marked_beat, spawner)

		group_count += 1

	logger.debug(f"Compiled {count} commands from {index} beats in {group_count} groups into group {session.group}")

	return count


def add_action (session: Session, command: Command, beat: typing.Optional[float] = None, group: typing.Optional[int] = None) -> None:

	"""
	Append one command directly.

	``beat`` and ``group`` overwrite the command's own fields when given.  When
	``group`` is omitted and the command names no group, the session's group is
	used.
	"""

	changes: typing.Dict[str, typing.Any] = {}

	if beat is not None:
		changes["beat"] = beat

	if group is not None:
		changes["enemygroup"] = group
	elif command.enemygroup is None and command.SPAWN_CMD is not None:
		changes["enemygroup"] = session.group

	if changes:
		command = dataclasses.replace(command, **changes)

	session.songmap.append(command)
