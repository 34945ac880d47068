"""Plain-text export of filename lists.

The only format is one filename per line, joined with ``\\n``, with no
trailing newline and no quoting.
"""

import logging
import os
import typing


logger = logging.getLogger(__name__)


GENERATED_FILENAME = "audio-files.txt"
CONVERTED_FILENAME = "converted-audio-files.txt"


def join_filenames (names: typing.Iterable[str]) -> str:

	return "\n".join(names)


def write_filenames (names: typing.Sequence[str], path: typing.Union[str, "os.PathLike[str]"]) -> bool:

	"""Write filenames to a text file.

	Parameters:
		names: Filenames to write.
		path: Destination file.

	Returns:
		True if the file was written, False if there was nothing to write
		(no file is created in that case).

	Raises:
		OSError: If the file cannot be written.
	"""

	if not names:
		logger.warning("No content to export")
		return False

	with open(path, "w", encoding="utf-8", newline="") as f:
		f.write(join_filenames(names))

	logger.info(f"Wrote {len(names)} filenames to {os.fspath(path)}")

	return True
