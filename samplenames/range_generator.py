"""Range-based sample filename generation.

A range is written ``"<start>-<end>-<label>"``, e.g. ``"C3-C4-Bass"``.  Every
semitone from start to end (inclusive) becomes one filename of the form
``"<3-digit MIDI>-<note><octave>-<label>"``::

	048-C3-Bass
	049-C#3-Bass
	...
	060-C4-Bass

The transpose offset, enharmonic spelling and disabled note classes come from
a :class:`~samplenames.session.GeneratorSettings` value.  Disabled classes are
matched against the note *before* transposition.

Zero results come in three flavours that a caller may want to report
differently, exposed as ``RangeResult.status``:

- ``STATUS_EMPTY_INPUT`` - nothing was entered.
- ``STATUS_UNPARSABLE`` - something was entered but it is not a usable range.
- ``STATUS_ALL_DISABLED`` - the range is valid but every note is disabled.
"""

import dataclasses
import logging
import re
import typing

import samplenames.pitch
import samplenames.session


logger = logging.getLogger(__name__)


STATUS_OK = "ok"
STATUS_EMPTY_INPUT = "empty_input"
STATUS_UNPARSABLE = "unparsable"
STATUS_ALL_DISABLED = "all_disabled"

_RANGE_PATTERN = re.compile(r"^([A-G][#b]?[0-9]+)\s*-\s*([A-G][#b]?[0-9]+)\s*-\s*(.+)$", re.IGNORECASE)


@dataclasses.dataclass(frozen=True)
class RangeSpec:

	"""
	A parsed range line.
	"""

	start_note: str
	end_note: str
	label: str


@dataclasses.dataclass
class RangeResult:

	"""
	Outcome of :func:`generate_range`.

	Attributes:
		filenames: Generated filenames, in ascending pitch order.
		label: The label parsed from the input (empty if nothing parsed).
		total: Number of notes in the expanded range, before filtering.
		disabled: Number of notes left out because their class is disabled.
		status: One of the ``STATUS_*`` constants.
	"""

	filenames: typing.List[str]
	label: str = ""
	total: int = 0
	disabled: int = 0
	status: str = STATUS_OK


def parse_range (text: str) -> typing.Optional[RangeSpec]:

	"""Parse a ``"<start>-<end>-<label>"`` line.

	Note letters are matched case-insensitively and upper-cased, so ``"c3"``
	reads as ``"C3"``.  Returns ``None`` when the line is not a range.

	Example:
		```python
		parse_range("C3 - C4 - Bass")  # → RangeSpec("C3", "C4", "Bass")
		parse_range("hello")           # → None
		```
	"""

	match = _RANGE_PATTERN.match(text.strip())

	if match is None:
		return None

	start_note, end_note, label = match.groups()

	return RangeSpec(start_note.upper(), end_note.upper(), label.strip())


def expand_range (spec: RangeSpec) -> typing.List[str]:

	"""Return every note from start to end inclusive, spelled with sharps.

	An unreadable endpoint or a start above the end gives an empty list.
	"""

	start = samplenames.pitch.note_to_midi(spec.start_note)
	end = samplenames.pitch.note_to_midi(spec.end_note)

	if start is None or end is None or start > end:
		logger.debug(f"Unusable range {spec.start_note}-{spec.end_note}")
		return []

	return [samplenames.pitch.midi_to_note(midi) for midi in range(start, end + 1)]


def render_filenames (
	notes: typing.Sequence[str],
	settings: samplenames.session.GeneratorSettings,
	label: str = "",
) -> typing.List[str]:

	"""Turn expanded notes into filenames, applying transpose and the note filter.

	Parameters:
		notes: Sharp-spelled notes, as returned by :func:`expand_range`.
		settings: Transpose offset, spelling and disabled note classes.
		label: Appended as ``-<label>`` when not empty.

	Returns:
		One filename per enabled note, in input order.
	"""

	offset = settings.transpose * 12
	filenames: typing.List[str] = []

	for note in notes:

		midi = samplenames.pitch.note_to_midi(note)

		if midi is None:
			continue

		base_class = samplenames.pitch.note_class(note)

		if base_class is None or base_class in settings.disabled_classes:
			continue

		transposed = midi + offset
		name = f"{samplenames.pitch.pad_midi(transposed)}-{samplenames.pitch.midi_to_note(transposed, settings.use_flats)}"

		filenames.append(f"{name}-{label}" if label else name)

	return filenames


def generate_range (
	text: str,
	settings: typing.Optional[samplenames.session.GeneratorSettings] = None,
) -> RangeResult:

	"""Parse, expand and render a range line in one step.

	Parameters:
		text: Raw input, e.g. ``"C3-C4-Bass"``.
		settings: Generator settings (defaults: no transpose, sharps, all
			notes enabled).

	Returns:
		A :class:`RangeResult`.  Never raises for malformed input.

	Example:
		```python
		settings = GeneratorSettings(disabled_classes=frozenset({"C#"}))
		generate_range("C3-D3-Lead", settings).filenames
		# → ["048-C3-Lead", "050-D3-Lead"]
		```
	"""

	if settings is None:
		settings = samplenames.session.GeneratorSettings()

	if not text.strip():
		return RangeResult([], status=STATUS_EMPTY_INPUT)

	spec = parse_range(text)

	if spec is None:
		return RangeResult([], status=STATUS_UNPARSABLE)

	notes = expand_range(spec)

	if not notes:
		return RangeResult([], status=STATUS_UNPARSABLE)

	filenames = render_filenames(notes, settings, spec.label)
	status = STATUS_OK if filenames else STATUS_ALL_DISABLED

	return RangeResult(
		filenames = filenames,
		label = spec.label,
		total = len(notes),
		disabled = len(notes) - len(filenames),
		status = status,
	)


def describe_range (result: RangeResult) -> str:

	"""Summarise a result for display - a note count or the reason there is none."""

	if result.status == STATUS_EMPTY_INPUT:
		return ""

	if result.status == STATUS_UNPARSABLE:
		return "Enter a range like C3-C4-Bass"

	if result.status == STATUS_ALL_DISABLED:
		return "All notes disabled for this range"

	summary = f"{len(result.filenames)} notes"

	if result.disabled > 0:
		summary += f" ({result.disabled} disabled)"

	return summary
