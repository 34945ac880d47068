import argparse
import dataclasses
import logging
import os
import sys
import typing

import yaml

import samplenames.export
import samplenames.range_generator
import samplenames.round_robin
import samplenames.session


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "samplenames.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping")

	return config


def build_parser () -> argparse.ArgumentParser:

	parser = argparse.ArgumentParser(prog="samplenames", description="Generate and normalize sample filenames")
	parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help=f"YAML config file (default: {DEFAULT_CONFIG_PATH})")
	parser.add_argument("--verbose", action="store_true", help="Log debug output")

	commands = parser.add_subparsers(dest="command", required=True)

	generate = commands.add_parser("generate", help="Generate filenames for a note range, e.g. C3-C4-Bass")
	generate.add_argument("range", help="Range as <start>-<end>-<label>")
	generate.add_argument("--transpose", type=int, default=None, help="Octave offset (overrides config)")
	generate.add_argument("--flats", action=argparse.BooleanOptionalAction, default=None, help="Spell accidentals with flats (overrides config)")
	generate.add_argument("--disable", nargs="+", default=[], metavar="NOTE", help="Note classes to leave out, e.g. C# F#")
	generate.add_argument("--output", help=f"Write to a text file (e.g. {samplenames.export.GENERATED_FILENAME})")

	convert = commands.add_parser("convert", help="Renumber existing filenames as round-robin groups")
	convert.add_argument("file", nargs="?", help="File with one filename per line (default: stdin)")
	convert.add_argument("--midi-prefix", action=argparse.BooleanOptionalAction, default=None, help="Prefix names with the MIDI number of their note token (overrides config)")
	convert.add_argument("--output", help=f"Write to a text file (e.g. {samplenames.export.CONVERTED_FILENAME})")

	return parser


def _emit (names: typing.List[str], output: typing.Optional[str]) -> None:

	if output:
		samplenames.export.write_filenames(names, output)
	elif names:
		print(samplenames.export.join_filenames(names))


def run_generate (args: argparse.Namespace, config: dict) -> None:

	settings = samplenames.session.settings_from_config(config)

	if args.transpose is not None:
		settings = dataclasses.replace(settings, transpose=args.transpose)

	if args.flats is not None:
		settings = samplenames.session.set_use_flats(settings, args.flats)

	for name in args.disable:
		if samplenames.session.is_enabled(settings, name):
			settings = samplenames.session.toggle_note_class(settings, name)

	logger.debug(f"Transpose {samplenames.session.format_transpose(settings.transpose)}, flats={settings.use_flats}")

	result = samplenames.range_generator.generate_range(args.range, settings)
	summary = samplenames.range_generator.describe_range(result)

	if summary:
		logger.info(summary)

	_emit(result.filenames, args.output)


def run_convert (args: argparse.Namespace, config: dict) -> None:

	add_midi_prefix = bool(samplenames.session.config_section(config, "converter").get("add_midi_prefix", False))

	if args.midi_prefix is not None:
		add_midi_prefix = args.midi_prefix

	if args.file:
		with open(args.file, "r", encoding="utf-8") as f:
			lines = f.read().splitlines()
	else:
		lines = sys.stdin.read().splitlines()

	if not any(line.strip() for line in lines):
		logger.info("No filenames given")
		return

	names = samplenames.round_robin.normalize_filenames(lines, add_midi_prefix)
	logger.info(samplenames.round_robin.describe_conversion(names))

	_emit(names, args.output)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Command-line entry point. Returns the process exit status.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	try:
		config = load_config(args.config)

		if args.command == "generate":
			run_generate(args, config)
		else:
			run_convert(args, config)

	except yaml.YAMLError as e:
		logger.error(f"Invalid config file {args.config}: {e}")
		return 1

	except ValueError as e:
		logger.error(str(e))
		return 1

	except OSError as e:
		logger.error(f"File error: {e}")
		return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
