"""Multi-command templates for group lifecycle changes."""

import logging
import typing

import songmap.commands
import songmap.compiler
import songmap.geometry


logger = logging.getLogger(__name__)


def fadeout_clear (session: songmap.compiler.Session, time: float, group: int, fade_duration: float) -> None:

	"""
	Fade out a group, then clear it.

	At ``time`` the group starts fading and loses its hitboxes.  At
	``time + fade_duration`` the fade is switched off, hitboxes come back and
	the group is cleared.

	The clear removes everything in the group at that moment, including
	objects spawned into it during the fade.  Move new spawns to another group
	(``session.with_group()``) if they should survive.
	"""

	if fade_duration < 0:
		raise ValueError(f"Fade duration cannot be negative (got {fade_duration})")

	end = time + fade_duration

	songmap.compiler.add_action(session, songmap.commands.SetFadeoutOn(duration=fade_duration), beat=time, group=group)
	songmap.compiler.add_action(session, songmap.commands.SetHitbox(value=False), beat=time, group=group)

	songmap.compiler.add_action(session, songmap.commands.SetFadeoutOff(), beat=end, group=group)
	songmap.compiler.add_action(session, songmap.commands.SetHitbox(value=True), beat=end, group=group)
	songmap.compiler.add_action(session, songmap.commands.ClearEnemies(), beat=end, group=group)

	logger.debug(f"Fadeout of group {group} from beat {time} to {end}")


def rotation (
	session: songmap.compiler.Session,
	start: float,
	duration: float,
	start_angle: float,
	end_angle: float,
	rot_point: songmap.geometry.Position,
	group: typing.Optional[int] = None
) -> None:

	"""
	Rotate a group for ``duration`` beats, then stop the rotation.

	Parameters:
		session: Target session; its group is used when ``group`` is omitted
		start: Beat the rotation begins
		duration: Length of the rotation in beats
		start_angle: Rotation at ``start`` in degrees
		end_angle: Rotation at ``start + duration`` in degrees
		rot_point: Centre of rotation
		group: Enemy group to rotate
	"""

	if duration <= 0:
		raise ValueError(f"Rotation duration must be positive (got {duration})")

	rotate = songmap.commands.SetRotationOn(
		start_angle = start_angle,
		end_angle = end_angle,
		duration = duration,
		rot_point = rot_point
	)

	songmap.compiler.add_action(session, rotate, beat=start, group=group)
	songmap.compiler.add_action(session, songmap.commands.SetRotationOff(), beat=start + duration, group=group)


def blink (session: songmap.compiler.Session, hide_at: float, show_at: float, group: typing.Optional[int] = None) -> None:

	"""Hide a group at ``hide_at`` and show it again at ``show_at``."""

	if show_at < hide_at:
		raise ValueError(f"show_at ({show_at}) must not be before hide_at ({hide_at})")

	songmap.compiler.add_action(session, songmap.commands.SetRender(value=False), beat=hide_at, group=group)
	songmap.compiler.add_action(session, songmap.commands.SetRender(value=True), beat=show_at, group=group)
