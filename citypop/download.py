"""Public entry points: generate a progression and hand it over as a file.

:func:`generate_and_download` writes the MIDI bytes to a temporary ``.mid``
file and returns a :class:`MidiDownload` describing it. The caller owns the
file and should call :meth:`MidiDownload.release` (or use a ``with`` block)
once it is no longer needed.

Example:
	```python
	import citypop

	with citypop.generate_and_download(citypop.GenerationOptions(style="ballad")) as download:
		print(download.filename)   # citypop-standard-ballad-1760720400000-72bpm.mid
		download.save("out")
	```
"""

import dataclasses
import logging
import os
import pathlib
import random
import tempfile
import typing

import citypop.composition
import citypop.options
import citypop.pattern


logger = logging.getLogger(__name__)


MIDI_MIME_TYPE = "audio/midi"


class GenerationError (Exception):

	"""Raised when a progression could not be generated or exported."""


@dataclasses.dataclass
class MidiDownload:

	"""
	A generated MIDI file exposed through a ``file://`` URL.
	"""

	url: str
	filename: str
	path: str
	data: bytes
	tempo: float
	mime_type: str = MIDI_MIME_TYPE

	def __enter__ (self) -> "MidiDownload":
		return self

	def __exit__ (self, *exc_info: typing.Any) -> None:
		self.release()


	@property
	def released (self) -> bool:
		return not os.path.exists(self.path)


	def release (self) -> None:

		"""Delete the backing file. Safe to call more than once."""

		try:
			os.remove(self.path)
			logger.debug(f"Released {self.url}")

		except FileNotFoundError:
			pass


	def save (self, directory: str = ".") -> str:

		"""Write a copy of the MIDI file into ``directory`` under :attr:`filename`.

		Returns:
			The path written.
		"""

		os.makedirs(directory, exist_ok=True)
		target = os.path.join(directory, self.filename)

		with open(target, "wb") as f:
			f.write(self.data)

		logger.info(f"Saved {target}")

		return target


def download_filename (piece: citypop.pattern.GeneratedPiece) -> str:

	"""Suggested filename: ``<name>-<rounded tempo>bpm.mid``."""

	return f"{piece.name}-{round(piece.tempo)}bpm.mid"


def generate (
	options: typing.Optional[citypop.options.GenerationOptions] = None,
	rng: typing.Optional[random.Random] = None
) -> citypop.pattern.GeneratedPiece:

	"""Generate a progression without writing anything to disk."""

	return citypop.composition.CityPopGenerator(options, rng=rng).generate()


def _write_temporary (piece: citypop.pattern.GeneratedPiece) -> MidiDownload:

	filename = download_filename(piece)

	with tempfile.NamedTemporaryFile(prefix=f"{piece.name}-", suffix=".mid", delete=False) as f:
		f.write(piece.data)
		path = f.name

	return MidiDownload(
		url = pathlib.Path(path).resolve().as_uri(),
		filename = filename,
		path = path,
		data = piece.data,
		tempo = piece.tempo
	)


def generate_and_download (
	options: typing.Optional[citypop.options.GenerationOptions] = None,
	rng: typing.Optional[random.Random] = None
) -> MidiDownload:

	"""Generate a progression and expose it as a downloadable file.

	Parameters:
		options: Era, style and artist influence.
		rng: Optional seeded random source for repeatable output.

	Returns:
		A :class:`MidiDownload` owned by the caller.

	Raises:
		GenerationError: If any step of generation or export fails.
	"""

	try:
		piece = generate(options, rng=rng)
		download = _write_temporary(piece)

	except Exception as e:
		logger.exception(f"Error generating MIDI: {e}")
		raise GenerationError("Failed to generate MIDI file") from e

	logger.info(f"Generated {download.filename} ({len(download.data)} bytes)")

	return download
