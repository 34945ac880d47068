"""Generator settings - transpose offset, enharmonic spelling and disabled notes.

A :class:`GeneratorSettings` value is immutable.  Every toggle returns a new
value, so a range can be regenerated from ``(text, settings)`` alone:

```python
settings = samplenames.session.GeneratorSettings()
settings = samplenames.session.toggle_note_class(settings, "C#")
settings = samplenames.session.transpose_up(settings)

result = samplenames.range_generator.generate_range("C3-D3-Lead", settings)
```
"""

import dataclasses
import logging
import typing

import samplenames.pitch


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GeneratorSettings:

	"""
	Settings read by the range generator at generation time.

	Attributes:
		transpose: Octave offset applied to every generated note (signed).
		use_flats: Spell accidentals with flats instead of sharps.
		disabled_classes: Sharp-spelled note classes (e.g. ``"F#"``) to
			leave out of the generated range.
	"""

	transpose: int = 0
	use_flats: bool = False
	disabled_classes: typing.FrozenSet[str] = frozenset()

	def __post_init__ (self) -> None:

		for name in self.disabled_classes:
			_validate_note_class(name)


def _validate_note_class (name: str) -> None:

	if name not in samplenames.pitch.SHARP_NOTE_NAMES:
		raise ValueError(
			f"Unknown note class: {name!r}. Expected one of {', '.join(samplenames.pitch.SHARP_NOTE_NAMES)}."
		)


def toggle_note_class (settings: GeneratorSettings, name: str) -> GeneratorSettings:

	"""Disable an enabled note class, or re-enable a disabled one.

	Parameters:
		settings: Current settings.
		name: Sharp-spelled note class, e.g. ``"C"`` or ``"A#"``.

	Raises:
		ValueError: If ``name`` is not one of the twelve sharp note classes.
	"""

	_validate_note_class(name)

	if name in settings.disabled_classes:
		disabled = settings.disabled_classes - {name}
		logger.debug(f"Enabled note class {name}")
	else:
		disabled = settings.disabled_classes | {name}
		logger.debug(f"Disabled note class {name}")

	return dataclasses.replace(settings, disabled_classes=frozenset(disabled))


def is_enabled (settings: GeneratorSettings, name: str) -> bool:

	"""Return True if notes of this class will be generated."""

	return name not in settings.disabled_classes


def transpose_up (settings: GeneratorSettings) -> GeneratorSettings:

	"""Raise the transpose offset by one octave."""

	return dataclasses.replace(settings, transpose=settings.transpose + 1)


def transpose_down (settings: GeneratorSettings) -> GeneratorSettings:

	"""Lower the transpose offset by one octave."""

	return dataclasses.replace(settings, transpose=settings.transpose - 1)


def set_use_flats (settings: GeneratorSettings, use_flats: bool) -> GeneratorSettings:

	return dataclasses.replace(settings, use_flats=use_flats)


def format_transpose (offset: int) -> str:

	"""Format an octave offset for display - ``"+1"``, ``"0"``, ``"-2"``."""

	return f"+{offset}" if offset > 0 else str(offset)


def settings_from_config (config: typing.Optional[typing.Dict[str, typing.Any]]) -> GeneratorSettings:

	"""Build settings from the ``generator`` section of a config mapping.

	Recognised keys are ``transpose``, ``use_flats`` and ``disabled_notes``.
	Missing keys fall back to the defaults.

	Raises:
		ValueError: If the section is not a mapping, ``disabled_notes`` is
			not a list, or it names an unknown note class.
	"""

	section = config_section(config, "generator")
	disabled = section.get("disabled_notes") or []

	if not isinstance(disabled, list):
		raise ValueError(f"Config 'generator.disabled_notes' must be a list, got {disabled!r}")

	return GeneratorSettings(
		transpose = int(section.get("transpose", 0)),
		use_flats = bool(section.get("use_flats", False)),
		disabled_classes = frozenset(disabled),
	)


def config_section (config: typing.Optional[typing.Dict[str, typing.Any]], name: str) -> typing.Dict[str, typing.Any]:

	"""Return a named section of a config mapping, or an empty dict if it is absent.

	Raises:
		ValueError: If the section is present but is not a mapping.
	"""

	section = (config or {}).get(name) or {}

	if not isinstance(section, dict):
		raise ValueError(f"Config section {name!r} must be a mapping, got {section!r}")

	return section
