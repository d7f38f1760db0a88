"""Shared constants.

The arena is 100 x 100 world units centred on the origin, so the corners sit
at +/-50 on each axis:

- `ORIGIN` - the centre of the arena
- `TOPLEFT`, `TOPRIGHT`, `BOTLEFT`, `BOTRIGHT` - the four corners

Beat splitter presets cover four measures of 4/4 (`DEFAULT_SPLIT_DURATION`
beats).
"""

import songmap.geometry

ORIGIN = songmap.geometry.Point(0.0, 0.0)
TOPLEFT = songmap.geometry.Point(-50.0, 50.0)
BOTLEFT = songmap.geometry.Point(-50.0, -50.0)
TOPRIGHT = songmap.geometry.Point(50.0, 50.0)
BOTRIGHT = songmap.geometry.Point(50.0, -50.0)

ARENA_HALF_SIZE = 50.0

BEATS_PER_MEASURE = 4.0
DEFAULT_SPLIT_DURATION = 4.0 * BEATS_PER_MEASURE

DEFAULT_BPM = 150.0

# Fade colour sent with set_fadeout_on
FADE_COLOR = "transparent"
