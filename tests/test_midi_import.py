import pytest

import songmap.midi_import


def test_import_notes_reads_beats_and_pitch (write_midi) -> None:

	"""One marked beat per note, timed in beats, pitched by note number."""

	path = write_midi([(0.0, 0.5, 60), (1.0, 0.5, 64), (2.5, 0.5, 67)], length_beats=4.0)

	beats = songmap.midi_import.import_notes(path, 150.0)

	assert [b.beat for b in beats] == [0.0, 1.0, 2.5]
	assert [b.pitch for b in beats] == [60.0, 64.0, 67.0]
	assert [b.index for b in beats] == [1, 2, 3]


def test_import_notes_percent_over_clip (write_midi) -> None:

	"""Percent is the note's position through the clip."""

	path = write_midi([(0.0, 1.0, 60), (2.0, 1.0, 60)], length_beats=4.0)

	beats = songmap.midi_import.import_notes(path, 150.0)

	assert [b.percent for b in beats] == [0.0, 0.5]


def test_import_notes_chords_sorted_by_pitch (write_midi) -> None:

	"""Simultaneous notes come out lowest first."""

	path = write_midi([(0.0, 1.0, 67), (0.0, 1.0, 60), (0.0, 1.0, 64)])

	beats = songmap.midi_import.import_notes(path, 150.0)

	assert [b.pitch for b in beats] == [60.0, 64.0, 67.0]
	assert all(b.beat == 0.0 for b in beats)


def test_import_notes_ignores_ticks_per_beat (write_midi) -> None:

	"""Beat times do not depend on file resolution."""

	path = write_midi([(1.0, 0.5, 60), (3.0, 0.5, 62)], ticks_per_beat=96)

	assert [b.beat for b in songmap.midi_import.import_notes(path, 150.0)] == [1.0, 3.0]


def test_import_notes_follow_tempo_map (write_midi) -> None:

	"""With the tempo map, file time is rescaled to the song tempo."""

	# A beat at 120 BPM lasts 0.5s; at 150 BPM that is 1.25 beats.
	path = write_midi([(0.0, 0.5, 60), (2.0, 0.5, 60)], bpm=120.0)

	beats = songmap.midi_import.import_notes(path, 150.0, follow_tempo_map=True)

	assert beats[1].beat == pytest.approx(2.5)


def test_import_notes_rejects_bad_tempo (write_midi) -> None:

	"""Tempo must be positive."""

	path = write_midi([(0.0, 1.0, 60)])

	with pytest.raises(ValueError):
		songmap.midi_import.import_notes(path, 0.0)


def test_import_notes_missing_file (tmp_path) -> None:

	"""A missing file raises instead of returning nothing."""

	with pytest.raises(OSError):
		songmap.midi_import.import_notes(str(tmp_path / "missing.mid"), 150.0)


def test_import_notes_empty_clip (write_midi) -> None:

	"""A file without notes imports as an empty sequence."""

	assert songmap.midi_import.import_notes(write_midi([]), 150.0) == []


def test_import_notes_grouped_chords_and_runs (write_midi) -> None:

	"""Overlapping and touching notes group; a gap starts a new group."""

	path = write_midi([
		(0.0, 1.0, 60), (0.0, 1.0, 64),		# chord
		(2.0, 0.5, 60), (2.5, 0.5, 62), (3.0, 0.5, 64),	# legato run
		(5.0, 0.5, 60),						# single
	])

	groups = songmap.midi_import.import_notes_grouped(path, 150.0)

	assert [[b.beat for b in group] for group in groups] == [[0.0, 0.0], [2.0, 2.5, 3.0], [5.0]]
	assert [b.index for group in groups for b in group] == [1, 2, 3, 4, 5, 6]


def test_import_notes_grouped_gap (write_midi) -> None:

	"""A gap tolerance joins nearby staccato notes."""

	path = write_midi([(0.0, 0.25, 60), (0.5, 0.25, 60), (3.0, 0.25, 60)])

	assert len(songmap.midi_import.import_notes_grouped(path, 150.0)) == 3
	assert len(songmap.midi_import.import_notes_grouped(path, 150.0, gap=0.25)) == 2


def test_group_notes_rejects_negative_gap () -> None:

	"""Negative gaps are meaningless."""

	with pytest.raises(ValueError):
		songmap.midi_import.group_notes([], gap=-1.0)
