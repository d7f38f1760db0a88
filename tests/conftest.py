import random
import typing

import mido
import pytest

import songmap.compiler


@pytest.fixture
def session () -> songmap.compiler.Session:

	"""A session on an empty songmap with a fixed seed."""

	return songmap.compiler.Session(songmap.compiler.Songmap(bpm=150.0), rng=random.Random(1))


# (start_beat, length_beats, note)
NoteSpec = typing.Tuple[float, float, int]


def write_midi_file (path: str, notes: typing.List[NoteSpec], ticks_per_beat: int = 480, bpm: typing.Optional[float] = None, length_beats: typing.Optional[float] = None) -> str:

	"""
	Write a single-track MIDI file containing the given notes.
	"""

	events: typing.List[typing.Tuple[int, mido.Message]] = []

	for start, length, note in notes:
		events.append((int(start * ticks_per_beat), mido.Message('note_on', note=note, velocity=100)))
		events.append((int((start + length) * ticks_per_beat), mido.Message('note_off', note=note, velocity=0)))

	# Note-offs sort before note-ons at the same tick.
	events.sort(key=lambda item: (item[0], item[1].type == 'note_on'))

	mid = mido.MidiFile(type=1, ticks_per_beat=ticks_per_beat)
	track = mido.MidiTrack()
	mid.tracks.append(track)

	if bpm is not None:
		track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm), time=0))

	last = 0

	for tick, message in events:
		track.append(message.copy(time=tick - last))
		last = tick

	end = int(length_beats * ticks_per_beat) if length_beats is not None else last
	track.append(mido.MetaMessage('end_of_track', time=max(0, end - last)))

	mid.save(path)

	return path


@pytest.fixture
def write_midi (tmp_path: typing.Any) -> typing.Callable[..., str]:

	"""Factory fixture writing MIDI files into the test's temp directory."""

	counter = iter(range(1000))

	def _write (notes: typing.List[NoteSpec], **kwargs: typing.Any) -> str:
		return write_midi_file(str(tmp_path / f"clip_{next(counter)}.mid"), notes, **kwargs)

	return _write
