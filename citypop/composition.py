"""Progression generation from catalogs to MIDI bytes.

:class:`CityPopGenerator` walks a fixed eight-step progression. For each step it
picks a voicing, builds and spreads the chord, smooths it against the previous
chord, humanises timing and velocity, and finally hands every note to
:func:`citypop.midi_file.encode`.

All random decisions come from a single ``random.Random``. Passing a seeded
instance reproduces the same MIDI bytes; only the piece name depends on the
clock.

Example:
	```python
	import random

	import citypop.composition
	import citypop.options

	options = citypop.options.GenerationOptions(era="mid80s", style="fusion")
	piece = citypop.composition.CityPopGenerator(options, rng=random.Random(42)).generate()

	piece.tempo   # e.g. 104.3
	piece.name    # "citypop-mid80s-fusion-1760720400000"
	```
"""

import logging
import random
import time
import typing

import citypop.constants
import citypop.midi_file
import citypop.options
import citypop.pattern
import citypop.progressions
import citypop.styles
import citypop.tension
import citypop.voicing_catalog
import citypop.voicings


logger = logging.getLogger(__name__)


TRACK_NAME = "City Pop Chords"


def clamp_pitch (pitch: int) -> int:

	"""Clamp a pitch into the MIDI note range."""

	return max(citypop.constants.MIN_PITCH, min(citypop.constants.MAX_PITCH, pitch))


class CityPopGenerator:

	"""Builds one progression per :meth:`generate` call."""

	def __init__ (
		self,
		options: typing.Optional[citypop.options.GenerationOptions] = None,
		rng: typing.Optional[random.Random] = None,
		clock: typing.Callable[[], float] = time.time
	) -> None:

		"""
		Parameters:
			options: Era, style and artist influence (defaults to none set).
			rng: Random source. Supply a seeded instance for repeatable output.
			clock: Returns the current time in seconds; used only for the name.
		"""

		self.options = options or citypop.options.GenerationOptions()
		self.rng = rng or random.Random()
		self.clock = clock
		self.style = citypop.styles.get_style_settings(self.options.style_name)


	def choose_voicing (self) -> typing.Tuple[str, citypop.voicing_catalog.VoicingTemplate]:

		"""Pick a voicing matching the configured era and artist influence."""

		candidates = citypop.voicing_catalog.filter_voicings(
			era = self.options.era,
			artist = self.options.artist_influence
		)

		return self.rng.choice(candidates)


	def piece_name (self) -> str:

		"""Descriptive name with a millisecond timestamp token."""

		era = self.options.era or "standard"
		token = int(self.clock() * 1000)

		return f"citypop-{era}-{self.options.style_name}-{token}"


	def _humanise (self, pitches: typing.List[int], chord_start: float) -> typing.List[citypop.pattern.Note]:

		"""Turn pitches into notes with jittered timing and style velocity."""

		low, _ = self.style.velocity_range
		notes: typing.List[citypop.pattern.Note] = []

		for pitch in pitches:

			velocity = low + self.rng.uniform(0, self.style.velocity_span)
			start = chord_start + self.rng.uniform(-citypop.constants.NOTE_START_JITTER, citypop.constants.NOTE_START_JITTER)
			duration = citypop.constants.NOTE_DURATION + self.rng.uniform(-citypop.constants.NOTE_DURATION_JITTER, citypop.constants.NOTE_DURATION_JITTER)

			notes.append(citypop.pattern.Note(
				pitch = clamp_pitch(pitch),
				start = start,
				duration = duration,
				velocity = velocity / citypop.constants.MAX_VELOCITY
			))

		return notes


	def generate_chords (self, progression: citypop.progressions.ProgressionTemplate, tension_arc: typing.List[float]) -> typing.List[citypop.pattern.Chord]:

		"""Voice every step of the progression."""

		voice_leading = citypop.voicings.VoiceLeadingState()
		swing = self.style.swing_factor
		chords: typing.List[citypop.pattern.Chord] = []
		time_position = 0.0

		for step in range(citypop.constants.PROGRESSION_LENGTH):

			root = citypop.constants.BASE_ROOT + progression.root_at(step)
			voicing_name, template = self.choose_voicing()
			complexity = tension_arc[step] * progression.complexity_multiplier()

			pitches = citypop.voicings.build_voicing(root, template, complexity, step, self.options, self.rng)
			pitches = voice_leading.next(pitches)

			chord_start = time_position + self.rng.uniform(-swing / 2, swing / 2)

			chord = citypop.pattern.Chord(
				start = chord_start,
				root = root,
				voicing_name = voicing_name,
				notes = self._humanise(pitches, chord_start)
			)
			chords.append(chord)

			logger.debug(f"Step {step}: root={root} voicing={voicing_name} complexity={complexity:.2f} pitches={chord.pitches()}")

			time_position += citypop.constants.STEP_SECONDS

		return chords


	def generate (self) -> citypop.pattern.GeneratedPiece:

		"""Generate a complete progression and encode it as MIDI.

		Returns:
			A :class:`~citypop.pattern.GeneratedPiece` with the MIDI bytes,
			the chosen tempo, a descriptive name and the chords played.
		"""

		tempo = self.rng.uniform(*self.style.tempo_range)
		progression = citypop.progressions.choose_progression(self.options.style_name, self.rng)
		tension_arc = citypop.tension.generate_tension_arc(citypop.constants.PROGRESSION_LENGTH, self.rng)

		logger.info(f"Generating {self.options.style_name} progression {list(progression.roots)} at {tempo:.2f} BPM")

		chords = self.generate_chords(progression, tension_arc)

		notes = [note for chord in chords for note in chord.notes]
		data = citypop.midi_file.encode(tempo, notes, track_name=TRACK_NAME)

		return citypop.pattern.GeneratedPiece(
			data = data,
			tempo = tempo,
			name = self.piece_name(),
			chords = chords
		)
