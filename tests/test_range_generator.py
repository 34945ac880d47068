"""Tests for range parsing, expansion and filename rendering."""

import samplenames.range_generator
import samplenames.session


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def test_parse_range () -> None:

	spec = samplenames.range_generator.parse_range("C3-C4-Bass")

	assert spec == samplenames.range_generator.RangeSpec("C3", "C4", "Bass")


def test_parse_range_allows_spaces_and_lowercase () -> None:

	"""Whitespace around the hyphens is ignored and note letters are upper-cased."""

	spec = samplenames.range_generator.parse_range("  c3 -  f#4 - Soft Pad  ")

	assert spec == samplenames.range_generator.RangeSpec("C3", "F#4", "Soft Pad")


def test_parse_range_keeps_hyphens_in_label () -> None:

	spec = samplenames.range_generator.parse_range("A0-C8-Grand-Piano")

	assert spec is not None
	assert spec.label == "Grand-Piano"


def test_parse_range_rejects_other_text () -> None:

	for text in ["", "C3-C4", "C3-C4-", "Bass", "H3-C4-Bass", "C3 C4 Bass", "C٣-C٤-Bass"]:
		assert samplenames.range_generator.parse_range(text) is None, text


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------

def test_expand_one_octave_inclusive () -> None:

	"""C3 to C4 is thirteen notes, both ends included."""

	notes = samplenames.range_generator.expand_range(samplenames.range_generator.RangeSpec("C3", "C4", "Bass"))

	assert len(notes) == 13
	assert notes[0] == "C3"
	assert notes[1] == "C#3"
	assert notes[-1] == "C4"


def test_expand_uses_sharps_for_flat_endpoints () -> None:

	notes = samplenames.range_generator.expand_range(samplenames.range_generator.RangeSpec("Db3", "Eb3", "x"))

	assert notes == ["C#3", "D3", "D#3"]


def test_expand_reversed_range_is_empty () -> None:

	notes = samplenames.range_generator.expand_range(samplenames.range_generator.RangeSpec("C4", "C3", "Bass"))

	assert notes == []


def test_expand_single_note () -> None:

	notes = samplenames.range_generator.expand_range(samplenames.range_generator.RangeSpec("A4", "A4", "x"))

	assert notes == ["A4"]


def test_expand_unreadable_endpoint_is_empty () -> None:

	"""Upper-cased flats such as DB3 are not notes."""

	notes = samplenames.range_generator.expand_range(samplenames.range_generator.RangeSpec("DB3", "C4", "x"))

	assert notes == []


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def test_render_default_settings () -> None:

	filenames = samplenames.range_generator.render_filenames(
		["C3", "C#3"],
		samplenames.session.GeneratorSettings(),
		"Bass",
	)

	assert filenames == ["048-C3-Bass", "049-C#3-Bass"]


def test_render_without_label () -> None:

	filenames = samplenames.range_generator.render_filenames(["C3"], samplenames.session.GeneratorSettings(), "")

	assert filenames == ["048-C3"]


def test_render_flats () -> None:

	settings = samplenames.session.GeneratorSettings(use_flats=True)
	filenames = samplenames.range_generator.render_filenames(["C#3", "D#3"], settings, "Keys")

	assert filenames == ["049-Db3-Keys", "051-Eb3-Keys"]


def test_render_zero_pads_low_notes () -> None:

	filenames = samplenames.range_generator.render_filenames(["C0"], samplenames.session.GeneratorSettings(), "Sub")

	assert filenames == ["012-C0-Sub"]


def test_disabled_class_is_omitted () -> None:

	"""Disabling C# drops C#3 but keeps its neighbours."""

	settings = samplenames.session.toggle_note_class(samplenames.session.GeneratorSettings(), "C#")
	result = samplenames.range_generator.generate_range("C3-D3-Lead", settings)

	assert result.filenames == ["048-C3-Lead", "050-D3-Lead"]
	assert result.disabled == 1
	assert result.total == 3


def test_transpose_shifts_midi_and_octave () -> None:

	plain = samplenames.range_generator.generate_range("C3-C3-Lead").filenames
	up = samplenames.range_generator.generate_range(
		"C3-C3-Lead",
		samplenames.session.GeneratorSettings(transpose=1),
	).filenames

	assert plain == ["048-C3-Lead"]
	assert up == ["060-C4-Lead"]


def test_transpose_down () -> None:

	settings = samplenames.session.GeneratorSettings(transpose=-2)
	result = samplenames.range_generator.generate_range("C3-C3-Lead", settings)

	assert result.filenames == ["024-C1-Lead"]


def test_disabled_filter_uses_untransposed_note () -> None:

	"""With a transpose, the filter still matches the note as written in the range."""

	settings = samplenames.session.GeneratorSettings(transpose=1, disabled_classes=frozenset({"C#"}))
	result = samplenames.range_generator.generate_range("C3-D3-Lead", settings)

	assert result.filenames == ["060-C4-Lead", "062-D4-Lead"]


def test_flats_do_not_change_disabled_matching () -> None:

	"""Disabled classes are sharp-spelled and still apply when rendering flats."""

	settings = samplenames.session.GeneratorSettings(use_flats=True, disabled_classes=frozenset({"D#"}))
	result = samplenames.range_generator.generate_range("D3-E3-Keys", settings)

	assert result.filenames == ["050-D3-Keys", "052-E3-Keys"]


# ---------------------------------------------------------------------------
# Result states
# ---------------------------------------------------------------------------

def test_empty_input_state () -> None:

	result = samplenames.range_generator.generate_range("   ")

	assert result.filenames == []
	assert result.status == samplenames.range_generator.STATUS_EMPTY_INPUT
	assert samplenames.range_generator.describe_range(result) == ""


def test_unparsable_state () -> None:

	for text in ["not a range", "C4-C3-Bass"]:
		result = samplenames.range_generator.generate_range(text)
		assert result.filenames == []
		assert result.status == samplenames.range_generator.STATUS_UNPARSABLE
		assert samplenames.range_generator.describe_range(result) == "Enter a range like C3-C4-Bass"


def test_all_disabled_state () -> None:

	settings = samplenames.session.GeneratorSettings(disabled_classes=frozenset({"C", "C#"}))
	result = samplenames.range_generator.generate_range("C3-C#3-Bass", settings)

	assert result.filenames == []
	assert result.status == samplenames.range_generator.STATUS_ALL_DISABLED
	assert samplenames.range_generator.describe_range(result) == "All notes disabled for this range"


def test_describe_counts () -> None:

	result = samplenames.range_generator.generate_range("C3-C4-Bass")
	assert samplenames.range_generator.describe_range(result) == "13 notes"

	settings = samplenames.session.GeneratorSettings(disabled_classes=frozenset({"C#", "D#"}))
	result = samplenames.range_generator.generate_range("C3-C4-Bass", settings)
	assert samplenames.range_generator.describe_range(result) == "11 notes (2 disabled)"


def test_full_octave_output () -> None:

	result = samplenames.range_generator.generate_range("C3-C4-Bass")

	assert result.status == samplenames.range_generator.STATUS_OK
	assert result.label == "Bass"
	assert result.filenames[0] == "048-C3-Bass"
	assert result.filenames[6] == "054-F#3-Bass"
	assert result.filenames[-1] == "060-C4-Bass"
