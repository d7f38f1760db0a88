import dataclasses
import typing

import songmap.marked_beat

MarkedBeat = songmap.marked_beat.MarkedBeat

BeatSequence = typing.Sequence[MarkedBeat]
GroupedSequence = typing.Sequence[typing.Sequence[MarkedBeat]]


def normalize_pitch (marked_beats: BeatSequence) -> typing.List[MarkedBeat]:

	"""
	Rescale the pitches of a sequence into [0, 1].

	The lowest pitch present maps to 0.0 and the highest to 1.0.  Beats without
	a pitch are passed through unchanged.  If fewer than two distinct pitches
	are present the sequence is returned as an unmodified copy.

	The argument is never mutated.

	Example:
		```python
		tines = songmap.sequence_utils.normalize_pitch(
			songmap.midi_import.import_notes("tine.mid", 150.0)
		)
		```
	"""

	pitches = [marked_beat.pitch for marked_beat in marked_beats if marked_beat.pitch is not None]

	if len(set(pitches)) <= 1:
		return list(marked_beats)

	low = min(pitches)
	high = max(pitches)

	return [
		marked_beat if marked_beat.pitch is None
		else dataclasses.replace(marked_beat, pitch=(marked_beat.pitch - low) / (high - low))
		for marked_beat in marked_beats
	]


@typing.overload
def add_offset (marked_beats: BeatSequence, offset: float) -> typing.List[MarkedBeat]: ...

@typing.overload
def add_offset (marked_beats: GroupedSequence, offset: float) -> typing.List[typing.List[MarkedBeat]]: ...

def add_offset (marked_beats: typing.Any, offset: float) -> typing.Any:

	"""
	Shift every beat of a flat or grouped sequence by ``offset`` beats.

	Percent and all other fields are kept.  Returns a new sequence, the
	argument is never mutated.
	"""

	result: typing.List[typing.Any] = []

	for item in marked_beats:

		if isinstance(item, MarkedBeat):
			result.append(dataclasses.replace(item, beat=item.beat + offset))

		else:
			result.append([dataclasses.replace(marked_beat, beat=marked_beat.beat + offset) for marked_beat in item])

	return result


def flatten_groups (groups: GroupedSequence) -> typing.List[MarkedBeat]:

	"""Concatenate a grouped sequence into one flat sequence, in order."""

	return [marked_beat for group in groups for marked_beat in group]
