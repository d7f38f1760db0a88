"""Read note timing from Standard MIDI Files.

Notes become :class:`~songmap.marked_beat.MarkedBeat` values with the MIDI
note number as ``pitch``.  All tracks are merged, so a type 1 file with a
separate tempo track works the same as a single-track file.

Beat times come from MIDI ticks divided by the file's ticks per beat, which
keeps the note grid of the clip regardless of tempo.  With
``follow_tempo_map=True`` the file's tempo changes are honoured instead: note
times are converted to seconds and then to beats of the song at
``tempo_bpm``.

Percent is the note's position through the clip (start of the file to the end
of its longest track).
"""

import dataclasses
import logging
import typing

import mido

import songmap.marked_beat


logger = logging.getLogger(__name__)

MarkedBeat = songmap.marked_beat.MarkedBeat

# MIDI files without a set_tempo event play at 120 BPM.
DEFAULT_MIDI_TEMPO = mido.bpm2tempo(120)


@dataclasses.dataclass
class MidiNote:

	"""
	A note read from a MIDI file, timed in song beats.
	"""

	start: float
	end: float
	pitch: int
	channel: int


def read_notes (path: str, tempo_bpm: float, follow_tempo_map: bool = False) -> typing.Tuple[typing.List[MidiNote], float]:

	"""
	Read every note in a MIDI file.

	Returns:
		The notes sorted by start time then pitch, and the clip length in beats.
	"""

	if tempo_bpm <= 0:
		raise ValueError(f"Tempo must be positive (got {tempo_bpm})")

	midi_file = mido.MidiFile(path)
	ticks_per_beat = midi_file.ticks_per_beat

	tick = 0
	seconds = 0.0
	tempo = DEFAULT_MIDI_TEMPO

	def to_beats () -> float:
		if follow_tempo_map:
			return seconds * tempo_bpm / 60.0
		return tick / ticks_per_beat

	held: typing.Dict[typing.Tuple[int, int], typing.List[float]] = {}
	notes: typing.List[MidiNote] = []

	for message in mido.merge_tracks(midi_file.tracks):

		tick += message.time
		seconds += mido.tick2second(message.time, ticks_per_beat, tempo)

		if message.type == "set_tempo":
			tempo = message.tempo

		elif message.type == "note_on" and message.velocity > 0:
			held.setdefault((message.channel, message.note), []).append(to_beats())

		elif message.type in ("note_off", "note_on"):

			starts = held.get((message.channel, message.note))

			# A note-off with no matching note-on is ignored.
			if starts:
				notes.append(MidiNote(start=starts.pop(0), end=to_beats(), pitch=message.note, channel=message.channel))

	length = to_beats()

	for (channel, pitch), starts in held.items():
		for start in starts:
			notes.append(MidiNote(start=start, end=length, pitch=pitch, channel=channel))

	notes.sort(key=lambda note: (note.start, note.pitch))

	return notes, length


def _mark (notes: typing.List[MidiNote], length: float) -> typing.List[MarkedBeat]:

	return [
		MarkedBeat(
			beat = note.start,
			percent = note.start / length if length > 0 else 0.0,
			pitch = float(note.pitch),
			index = index
		)
		for index, note in enumerate(notes, start=1)
	]


def import_notes (path: str, tempo_bpm: float, follow_tempo_map: bool = False) -> typing.List[MarkedBeat]:

	"""
	Import the notes of a MIDI file as marked beats, one per note.

	Parameters:
		path: Path to a Standard MIDI File
		tempo_bpm: Song tempo, used when ``follow_tempo_map`` is set
		follow_tempo_map: Convert through the file's tempo map instead of
			reading beats straight off the tick grid

	Example:
		```python
		kicks = songmap.sequence_utils.add_offset(
			songmap.midi_import.import_notes("kick.mid", 150.0), 80.0
		)
		```
	"""

	notes, length = read_notes(path, tempo_bpm, follow_tempo_map)

	logger.info(f"Imported {len(notes)} notes from {path}")

	return _mark(notes, length)


def group_notes (notes: typing.List[MidiNote], gap: float = 0.0) -> typing.List[typing.List[MidiNote]]:

	"""
	Split sorted notes into groups of chords and connected runs.

	A note joins the current group if it starts no more than ``gap`` beats
	after the latest end of the notes already in the group.
	"""

	if gap < 0:
		raise ValueError(f"Gap cannot be negative (got {gap})")

	groups: typing.List[typing.List[MidiNote]] = []
	group_end = 0.0

	for note in notes:

		if groups and note.start <= group_end + gap:
			groups[-1].append(note)
			group_end = max(group_end, note.end)

		else:
			groups.append([note])
			group_end = note.end

	return groups


def import_notes_grouped (path: str, tempo_bpm: float, gap: float = 0.0, follow_tempo_map: bool = False) -> typing.List[typing.List[MarkedBeat]]:

	"""
	Import the notes of a MIDI file as marked beats grouped by :func:`group_notes`.

	Indices count across all groups.  Pass the result to
	``compile_grouped()``, which adds the group position fields.
	"""

	notes, length = read_notes(path, tempo_bpm, follow_tempo_map)
	marked = iter(_mark(notes, length))

	groups = [[next(marked) for _ in group] for group in group_notes(notes, gap)]

	logger.info(f"Imported {len(notes)} notes in {len(groups)} groups from {path}")

	return groups
