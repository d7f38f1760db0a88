import songmap.marked_beat
import songmap.sequence_utils

MarkedBeat = songmap.marked_beat.MarkedBeat


def _pitched (*pitches) -> list:
	return [MarkedBeat(beat=float(i), percent=i / 10.0, pitch=p, index=i + 1) for i, p in enumerate(pitches)]


# --- normalize_pitch ---


def test_normalize_pitch_rescales_to_unit_range () -> None:

	"""Lowest pitch maps to 0, highest to 1, others in between."""

	result = songmap.sequence_utils.normalize_pitch(_pitched(60.0, 64.0, 68.0))

	assert [b.pitch for b in result] == [0.0, 0.5, 1.0]


def test_normalize_pitch_keeps_other_fields () -> None:

	"""Only pitch changes; order and other fields survive."""

	source = _pitched(60.0, 72.0)
	result = songmap.sequence_utils.normalize_pitch(source)

	assert [(b.beat, b.percent, b.index) for b in result] == [(b.beat, b.percent, b.index) for b in source]


def test_normalize_pitch_does_not_mutate () -> None:

	"""The input sequence is left as it was."""

	source = _pitched(60.0, 72.0)
	songmap.sequence_utils.normalize_pitch(source)

	assert [b.pitch for b in source] == [60.0, 72.0]


def test_normalize_pitch_skips_missing_pitch () -> None:

	"""Beats without pitch are neither counted nor changed."""

	result = songmap.sequence_utils.normalize_pitch(_pitched(60.0, None, 70.0))

	assert [b.pitch for b in result] == [0.0, None, 1.0]


def test_normalize_pitch_single_value_is_unchanged () -> None:

	"""All-equal pitches pass through untouched."""

	source = _pitched(64.0, 64.0, 64.0)

	assert songmap.sequence_utils.normalize_pitch(source) == source


def test_normalize_pitch_empty () -> None:

	"""Empty in, empty out."""

	assert songmap.sequence_utils.normalize_pitch([]) == []


def test_normalize_pitch_is_idempotent_on_unit_range () -> None:

	"""A sequence already spanning exactly [0, 1] is unchanged."""

	source = _pitched(0.0, 0.25, 1.0)

	assert songmap.sequence_utils.normalize_pitch(source) == source


# --- add_offset ---


def test_add_offset_shifts_beats () -> None:

	"""Beats move by the offset, percent stays."""

	source = songmap.marked_beat.every4(0.0)
	result = songmap.sequence_utils.add_offset(source, 80.0)

	assert [b.beat for b in result] == [80.0, 84.0, 88.0, 92.0]
	assert [b.percent for b in result] == [b.percent for b in source]
	assert source[0].beat == 0.0


def test_add_offset_grouped () -> None:

	"""Grouped sequences keep their grouping."""

	groups = [_pitched(60.0, 62.0), _pitched(64.0)]
	result = songmap.sequence_utils.add_offset(groups, 10.0)

	assert [[b.beat for b in group] for group in result] == [[10.0, 11.0], [10.0]]


def test_flatten_groups () -> None:

	"""Groups are concatenated in order."""

	a = _pitched(60.0, 62.0)
	b = _pitched(64.0)

	assert songmap.sequence_utils.flatten_groups([a, b]) == a + b
