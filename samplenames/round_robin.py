"""Round-robin renumbering of existing sample filenames.

Alternate takes of the same sound usually differ only in a trailing ID, e.g.
``Kick-A.wav`` and ``Kick-B.wav``.  :func:`normalize_filenames` groups such
files under a shared *core base* and renumbers each group ``_RR1``,
``_RR2``, ...::

	Kick-A.wav   →  Kick_RR1
	Kick-B.wav   →  Kick_RR2
	Snare-X.wav  →  Snare_RR1

Each extraction step is a separate function.  When its pattern does not
match, the input comes back unchanged.

- :func:`strip_extension` - ``.wav``, ``.aif``, ``.aiff``, ``.mp3``, ``.flac``
  (any case).
- :func:`strip_round_robin` - a previous ``_RR<n>`` suffix.
- :func:`strip_unique_id` - a trailing ``-<UPPERCASE/DIGITS>`` token.
- :func:`extract_note_token` - a ``-<note>-`` token such as ``-F#5-``, used for
  the optional MIDI prefix.
"""

import dataclasses
import functools
import logging
import re
import typing

import pyuca

import samplenames.pitch


logger = logging.getLogger(__name__)


AUDIO_EXTENSIONS: typing.Tuple[str, ...] = ("wav", "aif", "mp3", "flac", "aiff")

_EXTENSION_PATTERN = re.compile(r"\.(" + "|".join(AUDIO_EXTENSIONS) + r")$", re.IGNORECASE)
_ROUND_ROBIN_PATTERN = re.compile(r"_RR\d+$", re.ASCII)
_UNIQUE_ID_PATTERN = re.compile(r"-[A-Z0-9]+$")
_NOTE_TOKEN_PATTERN = re.compile(r"-([A-G][#b]?\d+)-", re.ASCII)


@dataclasses.dataclass(frozen=True)
class FilenameParts:

	"""
	A filename broken into the pieces used for grouping.

	Attributes:
		original: The filename as given (whitespace stripped).
		extension: The removed audio extension including the dot, or ``""``.
		base: ``original`` without the extension.
		base_no_rr: ``base`` without a round-robin suffix.
		core_base: ``base_no_rr`` without a trailing unique-ID token - the
			grouping key.
	"""

	original: str
	extension: str
	base: str
	base_no_rr: str
	core_base: str


def strip_extension (filename: str) -> typing.Tuple[str, str]:

	"""Split a known audio extension off the end of a filename.

	Returns:
		``(base, extension)``; ``extension`` is ``""`` when none was found.
	"""

	match = _EXTENSION_PATTERN.search(filename)

	if match is None:
		return filename, ""

	return filename[:match.start()], match.group(0)


def strip_round_robin (base: str) -> str:

	"""Remove a trailing ``_RR<digits>`` suffix."""

	return _ROUND_ROBIN_PATTERN.sub("", base)


def strip_unique_id (base: str) -> str:

	"""Remove a trailing ``-<A-Z0-9>`` token (case-sensitive)."""

	return _UNIQUE_ID_PATTERN.sub("", base)


def extract_note_token (base: str) -> typing.Optional[str]:

	"""Return the first note token surrounded by hyphens, e.g. ``"A#4"`` in ``"Pad-A#4-soft"``."""

	match = _NOTE_TOKEN_PATTERN.search(base)

	return match.group(1) if match else None


def split_filename (filename: str) -> FilenameParts:

	original = filename.strip()
	base, extension = strip_extension(original)
	base_no_rr = strip_round_robin(base)

	return FilenameParts(
		original = original,
		extension = extension,
		base = base,
		base_no_rr = base_no_rr,
		core_base = strip_unique_id(base_no_rr),
	)


@functools.lru_cache(maxsize=None)
def _collator () -> pyuca.Collator:

	return pyuca.Collator()


def sort_key (filename: str) -> typing.Tuple[int, ...]:

	"""Ordering key for filenames within a group.

	Uses the Unicode Collation Algorithm default table, the same order as a
	root-locale comparison: punctuation before digits before letters
	(``_`` < ``-`` < ``.``), case compared only after the letters match, and
	lowercase before uppercase.
	"""

	return _collator().sort_key(filename)


def group_filenames (lines: typing.Iterable[str]) -> typing.Dict[str, typing.List[FilenameParts]]:

	"""Group filenames by core base.

	Blank lines are dropped.  Groups keep the order in which their first
	member appeared, and each group is sorted with :func:`sort_key`.
	"""

	groups: typing.Dict[str, typing.List[FilenameParts]] = {}

	for line in lines:

		if not line.strip():
			continue

		parts = split_filename(line)
		groups.setdefault(parts.core_base, []).append(parts)

	for members in groups.values():
		members.sort(key=lambda parts: sort_key(parts.original))

	return groups


def midi_prefix (parts: FilenameParts) -> str:

	"""Return ``"<3-digit MIDI>_"`` for the note token in a filename, or ``""``."""

	token = extract_note_token(parts.base_no_rr)

	if token is None:
		return ""

	midi = samplenames.pitch.note_to_midi(token)

	if midi is None:
		logger.debug(f"Note token {token!r} in {parts.original!r} is not a note")
		return ""

	return f"{samplenames.pitch.pad_midi(midi)}_"


def normalize_filenames (lines: typing.Iterable[str], add_midi_prefix: bool = False) -> typing.List[str]:

	"""Renumber filenames as round-robin groups.

	Parameters:
		lines: Raw filenames, one per item.  Surrounding whitespace is
			ignored and blank items are skipped.
		add_midi_prefix: Prefix each result with ``"<MIDI>_"`` when a
			``-<note>-`` token is found and decodes.

	Returns:
		``"<core>_RR<n>"`` names, group by group in first-seen order, each
		group in sorted order with ``n`` counting from 1.

	Example:
		```python
		normalize_filenames(["Kick-A.wav", "Kick-B.wav", "Kick-A.wav"])
		# → ["Kick_RR1", "Kick_RR2", "Kick_RR3"]

		normalize_filenames(["060-C4-Snare_RR1.wav"], add_midi_prefix=True)
		# → ["060_060-C4-Snare_RR1"]
		```
	"""

	result: typing.List[str] = []

	for core_base, members in group_filenames(lines).items():

		for index, parts in enumerate(members, 1):

			name = f"{core_base}_RR{index}"

			if add_midi_prefix:
				name = midi_prefix(parts) + name

			result.append(name)

	logger.debug(f"Normalized {len(result)} filenames")

	return result


def describe_conversion (names: typing.Sequence[str]) -> str:

	"""Summarise a normalization result for display."""

	if not names:
		return "No valid audio files found"

	return f"{len(names)} file{'' if len(names) == 1 else 's'}"
