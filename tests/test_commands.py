import pytest

import songmap.commands
import songmap.geometry

Point = songmap.geometry.Point


def test_bullet_to_dict () -> None:

	"""Spawn commands render with spawn_cmd and their set fields."""

	bullet = songmap.commands.Bullet(Point(0.0, 50.0), songmap.geometry.PLAYER, beat=4.0, enemygroup=1)

	assert bullet.to_dict() == {
		"spawn_cmd": "bullet",
		"start_pos": {"x": 0.0, "y": 50.0},
		"end_pos": "player",
		"beat": 4.0,
		"enemygroup": 1,
	}


def test_laser_forms_share_spawn_cmd () -> None:

	"""Angle and two-point lasers are both 'laser' on the wire."""

	angle = songmap.commands.LaserAngle(position=Point(0.0, 0.0), angle=45.0)
	points = songmap.commands.LaserPoints(a=Point(0.0, 0.0), b=Point(1.0, 1.0))

	assert angle.to_dict()["spawn_cmd"] == "laser"
	assert points.to_dict()["spawn_cmd"] == "laser"
	assert "durations" not in points.to_dict()


def test_laser_durations_to_dict () -> None:

	"""Durations render as a nested dict."""

	laser = songmap.commands.LaserPoints(
		a = Point(0.0, 50.0),
		b = Point(0.0, -50.0),
		durations = songmap.commands.Durations(warmup=3.0, active=1.0, cooldown=1.0)
	)

	assert laser.to_dict()["durations"] == {"warmup": 3.0, "active": 1.0, "cooldown": 1.0}


def test_false_values_are_kept () -> None:

	"""A False flag is a value, not an unset field."""

	hide = songmap.commands.SetRender(value=False, beat=1.0, enemygroup=0)

	assert hide.to_dict()["value"] is False
	assert hide.missing_fields() == []


def test_missing_fields_include_timing () -> None:

	"""Unset beat and enemygroup count as missing for spawn commands."""

	bullet = songmap.commands.Bullet(Point(0.0, 0.0), None)

	assert bullet.missing_fields() == ["end_pos", "beat", "enemygroup"]


def test_validate_raises_command_error () -> None:

	"""validate names the missing fields."""

	with pytest.raises(songmap.commands.CommandError, match="angle"):
		songmap.commands.LaserAngle(position=Point(0.0, 0.0), angle=None, beat=0.0, enemygroup=0).validate()


def test_command_error_is_value_error () -> None:

	"""Callers catching ValueError also catch CommandError."""

	assert issubclass(songmap.commands.CommandError, ValueError)


def test_fadeout_on_default_color () -> None:

	"""Fades go to transparent unless told otherwise."""

	fade = songmap.commands.SetFadeoutOn(duration=1.0)

	assert fade.color == "transparent"


def test_config_commands () -> None:

	"""Config commands carry no spawn_cmd and no timing."""

	assert songmap.commands.Bpm(bpm=150.0).to_dict() == {"bpm": 150.0}
	assert songmap.commands.Skip(skip=160.0).to_dict() == {"skip": 160.0}
	assert songmap.commands.Bpm(bpm=150.0).missing_fields() == []


def test_rotation_on_to_dict () -> None:

	"""Rotation commands render their rotation point."""

	rotate = songmap.commands.SetRotationOn(0.0, 90.0, 16.0, Point(0.0, 0.0), beat=112.0, enemygroup=3)

	assert rotate.to_dict() == {
		"spawn_cmd": "set_rotation_on",
		"start_angle": 0.0,
		"end_angle": 90.0,
		"duration": 16.0,
		"rot_point": {"x": 0.0, "y": 0.0},
		"beat": 112.0,
		"enemygroup": 3,
	}
