"""The "square" level.

Build with:

	python -m songmap examples/square.py --config examples/config.yaml

The MIDI clips are read from ``resources/`` next to this file.
"""

import os

import songmap.constants as pos
import songmap.macros
import songmap.marked_beat
import songmap.midi_import
import songmap.sequence_utils
import songmap.spawners

BPM = 150.0
RESOURCES = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources")


def measure (n: float) -> float:
	return n * pos.BEATS_PER_MEASURE


def clip (name: str, at_measure: float, normalize: bool = False):

	beats = songmap.midi_import.import_notes(os.path.join(RESOURCES, name), BPM)

	if normalize:
		beats = songmap.sequence_utils.normalize_pitch(beats)

	return songmap.sequence_utils.add_offset(beats, measure(at_measure))


def build (session) -> None:

	# Measures 4 - 15: sweeping bullet lines
	session.make_actions(songmap.marked_beat.every4(measure(4)), songmap.spawners.BulletLerp(pos.BOTLEFT, pos.ORIGIN, pos.BOTRIGHT, pos.ORIGIN))
	session.make_actions(songmap.marked_beat.every4(measure(4)), songmap.spawners.BulletLerp(pos.TOPRIGHT, pos.ORIGIN, pos.TOPLEFT, pos.ORIGIN))

	session.make_actions(songmap.marked_beat.every2(measure(8)), songmap.spawners.BulletLerp(pos.TOPLEFT, pos.ORIGIN, pos.BOTLEFT, pos.ORIGIN))
	session.make_actions(songmap.marked_beat.every2(measure(8)), songmap.spawners.BulletLerp(pos.BOTRIGHT, pos.ORIGIN, pos.TOPRIGHT, pos.ORIGIN))

	offbeats = songmap.marked_beat.generate(measure(12), 16.0, 2.0, offset=1.0)
	session.make_actions(songmap.marked_beat.every2(measure(12)), songmap.spawners.BulletLerp(pos.TOPRIGHT, pos.TOPLEFT, pos.BOTRIGHT, pos.BOTLEFT))
	session.make_actions(offbeats, songmap.spawners.BulletLerp(pos.BOTLEFT, pos.BOTRIGHT, pos.TOPLEFT, pos.TOPRIGHT))

	# Measures 16 - 19: build-up
	session.make_actions(clip("buildup1main2.mid", 16), songmap.spawners.BulletPlayer())

	# Drop
	songmap.macros.fadeout_clear(session, measure(20), group=0, fade_duration=1.0)
	drop = session.with_group(1)

	drop.make_actions(clip("kick1simple.mid", 20), songmap.spawners.BombGrid(rng=session.rng))
	drop.make_actions(clip("drop1kick1.mid", 20), songmap.spawners.LaserCircle(pos.ORIGIN, 0.0, -360.0 * 1.1))
	drop.make_actions(clip("drop1kick2.mid", 26), songmap.spawners.LaserCircle(pos.ORIGIN, 0.0, 360.0 * 0.6))

	# Instant triple laser
	songmap.macros.blink(drop, 103.0, 104.0)
	session.with_group(0).make_actions(clip("kick1solo.mid", 20), songmap.spawners.LaserSolo())

	# Measures 28 - 35
	songmap.macros.fadeout_clear(session, measure(28), group=1, fade_duration=1.0)

	melody = session.with_group(2)
	melody.make_actions(clip("mainsimpleadd.mid", 28), songmap.spawners.BulletCircleIn(pos.ORIGIN, 60.0, 0.0, -360.0 * 3.1))
	melody.make_actions(clip("mainsimpleadd.mid", 32), songmap.spawners.BulletCircleIn(pos.ORIGIN, 60.0, 60.0, 360.0 * 3.1))

	diamond = session.with_group(3)
	diamond.make_actions(clip("drop1kick3.mid", 28), songmap.spawners.LaserDiamond(clockwise=True))
	diamond.make_actions(clip("drop1kick4.mid", 32), songmap.spawners.LaserDiamond(clockwise=False))
	songmap.macros.rotation(diamond, measure(28), 16.0, 0.0, 90.0, pos.ORIGIN)
	songmap.macros.rotation(diamond, measure(32), 16.0, 90.0, 0.0, pos.ORIGIN)

	# Measures 36 - 43: break
	songmap.macros.fadeout_clear(session, measure(36), group=2, fade_duration=1.0)
	songmap.macros.fadeout_clear(session, measure(36), group=3, fade_duration=1.0)

	breakkick = songmap.sequence_utils.add_offset(
		songmap.midi_import.import_notes_grouped(os.path.join(RESOURCES, "break1kickgrouped.mid"), BPM),
		measure(36)
	)
	session.make_actions_grouped(breakkick, songmap.spawners.CircleSectorAttack(group_base=100, rng=session.rng))

	# Measures 44 - 54: tines
	session.make_actions(clip("break1tine1.mid", 44, normalize=True), songmap.spawners.TineAttack("y", -50.0, 50.0))
	session.make_actions(clip("break1tine2.mid", 48, normalize=True), songmap.spawners.TineAttack("y", 50.0, -50.0))
	session.make_actions(clip("break1tine3.mid", 52, normalize=True), songmap.spawners.TineAttack("x", 50.0, -50.0))

	songmap.macros.fadeout_clear(session, measure(55), group=0, fade_duration=1.0)

	# Measure 55: every tine laser fires at once
	session.with_group(1).make_actions(clip("break1tinesolo.mid", 55, normalize=True), songmap.spawners.LaserTineAttack(firing_time=224.0))
