import dataclasses
import typing

import songmap.constants


@dataclasses.dataclass(frozen=True)
class MarkedBeat:

	"""
	One scheduled instant in a song.

	Attributes:
		beat: Song time in beats.
		percent: Progress through the generating range. Usually in [0, 1] but
			an offset can push it outside.
		pitch: Optional note pitch (MIDI note number, or [0, 1] once normalised).
		index: 1-based position within its sequence.
		midigroup_index: 0-based position within its note group (grouped only).
		midigroup_length: Number of notes in its note group (grouped only).
		midigroup: 0-based number of its note group (grouped only).
	"""

	beat: float
	percent: float
	pitch: typing.Optional[float] = None
	index: int = 1
	midigroup_index: typing.Optional[int] = None
	midigroup_length: typing.Optional[int] = None
	midigroup: typing.Optional[int] = None


def generate (start: float, duration: float, frequency: float, offset: float = 0.0, delay: float = 0.0) -> typing.List[MarkedBeat]:

	"""
	Split a range of time into evenly spaced marked beats.

	A step value starts at ``start`` and advances by ``frequency`` while it is
	less than ``duration`` past ``start``.  Each step emits a beat at
	``step + delay + offset`` with percent ``(step + offset - start) / duration``.

	``offset`` moves both the beat and the percent, ``delay`` moves only the
	beat.  Neither changes how many beats are produced, so with a non-zero
	offset or delay the first beat is not at ``start`` and percent may leave
	[0, 1].

	Parameters:
		start: Beat at which stepping begins
		duration: Length of the range in beats
		frequency: Beats between consecutive marked beats (must be positive)
		offset: Shift applied to beat and percent
		delay: Shift applied to beat only

	Example:
		```python
		# Off-beat eighths across four measures
		beats = songmap.marked_beat.generate(48.0, 16.0, 2.0, offset=1.0)
		```
	"""

	if frequency <= 0:
		raise ValueError(f"Frequency must be positive (got {frequency})")

	if duration <= 0:
		return []

	marked_beats: typing.List[MarkedBeat] = []
	this_beat = start

	# Accumulated, so a frequency like 0.1 can fit one more step than the exact division suggests.
	while duration > this_beat - start:

		marked_beats.append(MarkedBeat(
			beat = this_beat + delay + offset,
			percent = (this_beat + offset - start) / duration,
			index = len(marked_beats) + 1
		))

		this_beat += frequency

	return marked_beats


def every4 (start: float) -> typing.List[MarkedBeat]:

	"""One marked beat per measure for four measures."""

	return generate(start, songmap.constants.DEFAULT_SPLIT_DURATION, 4.0)


def every2 (start: float) -> typing.List[MarkedBeat]:

	"""Two marked beats per measure for four measures."""

	return generate(start, songmap.constants.DEFAULT_SPLIT_DURATION, 2.0)


def every1 (start: float) -> typing.List[MarkedBeat]:

	"""Every beat for four measures."""

	return generate(start, songmap.constants.DEFAULT_SPLIT_DURATION, 1.0)
