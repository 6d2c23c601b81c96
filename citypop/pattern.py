import dataclasses
import typing


@dataclasses.dataclass
class Note:

	"""
	A single note event, timed in seconds.
	"""

	pitch: int
	start: float
	duration: float
	velocity: float		# 0.0 - 1.0


@dataclasses.dataclass
class Chord:

	"""
	The notes emitted for one progression step.
	"""

	start: float
	root: int
	voicing_name: str
	notes: typing.List[Note] = dataclasses.field(default_factory=list)

	def pitches (self) -> typing.List[int]:

		"""Return the MIDI pitches of this chord in emission order."""

		return [note.pitch for note in self.notes]


@dataclasses.dataclass
class GeneratedPiece:

	"""
	A finished progression: encoded MIDI bytes plus the metadata used to name it.
	"""

	data: bytes
	tempo: float
	name: str
	chords: typing.List[Chord] = dataclasses.field(default_factory=list)

	def notes (self) -> typing.List[Note]:

		"""All notes of every chord, in emission order."""

		return [note for chord in self.chords for note in chord.notes]
