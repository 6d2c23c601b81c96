"""Chord voicing construction and voice leading.

Turns a root note and a :class:`~citypop.voicing_catalog.VoicingTemplate` into
a concrete set of MIDI pitches, then nudges successive chords toward each
other so that the pad does not jump around the keyboard.

Example:
	```python
	import random

	import citypop.options
	import citypop.voicing_catalog
	import citypop.voicings

	rng = random.Random(1)
	options = citypop.options.GenerationOptions(era="mid80s")
	template = citypop.voicing_catalog.VOICINGS["maj9_13"]

	state = citypop.voicings.VoiceLeadingState()
	first = state.next(citypop.voicings.build_voicing(60, template, 0.8, 0, options, rng))
	second = state.next(citypop.voicings.build_voicing(65, template, 0.9, 1, options, rng))
	```
"""

import logging
import math
import random
import typing

import citypop.constants
import citypop.options
import citypop.spread
import citypop.voicing_catalog


logger = logging.getLogger(__name__)


# Chance that a tension roll lands, per era.
ERA_TENSION_PROBABILITY: typing.Dict[str, float] = {
	citypop.constants.ERA_70S: 0.5,
	citypop.constants.ERA_EARLY_80S: 0.7,
	citypop.constants.ERA_MID_80S: 0.9,
	citypop.constants.ERA_LATE_80S: 0.6,
}
DEFAULT_TENSION_PROBABILITY: float = 0.7

# Scaled by the step complexity; one chromatic alteration at most.
ALTERATION_PROBABILITY: float = 0.7

SEVENTIES_DROP_PROBABILITY: float = 0.3
MID_80S_LIFT_PROBABILITY: float = 0.4

# Largest jump (a perfect fifth) tolerated before a voice is moved an octave.
MAX_VOICE_MOVEMENT: int = 7


def _place_interval (root: int, interval: int, era: typing.Optional[str], rng: random.Random) -> int:

	"""Return ``root + interval`` with the era's octave jitter applied."""

	note = root + interval

	if era == citypop.constants.ERA_70S:
		if rng.random() < SEVENTIES_DROP_PROBABILITY:
			note -= citypop.constants.OCTAVE

	elif era == citypop.constants.ERA_MID_80S:
		if rng.random() < MID_80S_LIFT_PROBABILITY:
			note += citypop.constants.OCTAVE

	return note


def _bass_octave (era: typing.Optional[str], rng: random.Random) -> int:

	"""Distance below the root for the bass note."""

	if era == citypop.constants.ERA_70S:
		return 12

	if era == citypop.constants.ERA_MID_80S:
		return 24 if rng.random() < 0.5 else 12

	return 24 if rng.random() < 0.3 else 12


def apply_artist_colour (notes: typing.Set[int], root: int, artist: typing.Optional[str]) -> None:

	"""Add the signature notes of an artist influence to ``notes`` in place.

	- Tatsuro Yamashita: the raised 11th two octaves up (``root + 22``).
	- Mariya Takeuchi: every note above the octave is also doubled an octave
	  lower for a closer voicing.
	- Toshiki Kadomatsu: altered upper tensions ``root + 21`` and ``root + 15``.

	Any other artist leaves the notes untouched.
	"""

	if artist == citypop.constants.TATSURO_YAMASHITA:
		notes.add(root + 22)

	elif artist == citypop.constants.MARIYA_TAKEUCHI:
		for note in [n for n in notes if n > root + citypop.constants.OCTAVE]:
			notes.add(note - citypop.constants.OCTAVE)

	elif artist == citypop.constants.TOSHIKI_KADOMATSU:
		notes.add(root + 21)
		notes.add(root + 15)


def build_voicing (
	root: int,
	template: citypop.voicing_catalog.VoicingTemplate,
	complexity: float,
	position: int,
	options: citypop.options.GenerationOptions,
	rng: random.Random
) -> typing.List[int]:

	"""Expand a root and template into a spread chord.

	Parameters:
		root: MIDI note number of the chord root.
		template: Voicing shape to build from.
		complexity: Harmonic density for this step (0.0 to 1.0). Controls how
			many tension notes are attempted and how likely an alteration is.
		position: Step index within the progression.
		options: Active era, style and artist influence.
		rng: Random source.

	Returns:
		Ascending MIDI pitches from :func:`citypop.spread.spread_voicing`.
	"""

	era = options.era
	notes: typing.Set[int] = set()

	for interval in template.intervals:
		notes.add(_place_interval(root, interval, era, rng))

	tension_count = math.floor(complexity * (3 if era == citypop.constants.ERA_MID_80S else 2))
	tension_probability = ERA_TENSION_PROBABILITY.get(era, DEFAULT_TENSION_PROBABILITY)

	for _ in range(tension_count):
		if rng.random() < tension_probability:
			notes.add(root + rng.choice(template.tensions))

	if rng.random() < complexity * ALTERATION_PROBABILITY:
		notes.add(root + rng.choice(template.alterations))

	if template.artist_style is not None and template.artist_style == options.artist_influence:
		apply_artist_colour(notes, root, template.artist_style)

	notes.add(root - _bass_octave(era, rng))

	logger.debug(f"Voicing root={root} position={position}: {sorted(notes)}")

	return citypop.spread.spread_voicing(notes, position, options, rng)


def smooth_voice_leading (notes: typing.List[int], previous: typing.Optional[typing.List[int]]) -> typing.List[int]:

	"""Move notes that sit far from every note of the previous chord.

	For each note, the nearest previous note is found (the first one wins a
	tie). If it is more than a perfect fifth away the note moves an octave
	toward it. Order is preserved and nothing is removed.

	Parameters:
		notes: MIDI pitches of the new chord.
		previous: MIDI pitches of the previous chord, or ``None``/empty on the
			first step.

	Returns:
		New list of MIDI pitches

	Example:
		```python
		smooth_voice_leading([70], [60])  # [58]
		smooth_voice_leading([50], [60])  # [62]
		```
	"""

	if not previous:
		return list(notes)

	smoothed: typing.List[int] = []

	for note in notes:

		closest = previous[0]

		for candidate in previous[1:]:
			if abs(candidate - note) < abs(closest - note):
				closest = candidate

		if abs(closest - note) > MAX_VOICE_MOVEMENT:
			note += citypop.constants.OCTAVE if closest > note else -citypop.constants.OCTAVE

		smoothed.append(note)

	return smoothed


class VoiceLeadingState:

	"""Track the previous chord across progression steps.

	Example:
		```python
		state = VoiceLeadingState()
		state.next([48, 60, 64, 67])   # unchanged (no previous chord)
		state.next([53, 65, 69, 79])   # smoothed against the first chord
		```
	"""

	def __init__ (self) -> None:

		"""Start with no previous chord."""

		self.previous_notes: typing.List[int] = []

	def next (self, notes: typing.List[int]) -> typing.List[int]:

		"""Smooth ``notes`` against the previous chord and remember the result."""

		result = smooth_voice_leading(notes, self.previous_notes)
		self.previous_notes = result

		return result
