"""Register spreading for chord voicings.

Takes the unordered pitch set produced by the voicing builder and shapes it
into a playable chord: minimum spacing between neighbours, an optional octave
doubling, era and artist range shaping, a clamp into the comfortable piano
register, and extra upper notes that grow with the step position.

The spacing and clamp passes are single linear passes. A pitch nudged by one
pass can still violate the rule afterwards, and the position growth step
runs after the clamp, so a chord may reach above :data:`~citypop.constants.REGISTER_HIGH`.
"""

import random
import typing

import citypop.constants
import citypop.options


DOUBLING_PROBABILITY: float = 0.4
TATSURO_TOP_DOUBLE_PROBABILITY: float = 0.5


def min_spacing_for (style: str) -> int:

	"""Smallest allowed gap between adjacent notes for a style."""

	return 3 if style == citypop.constants.STYLE_BALLAD else 2


def max_spacing_for (style: str) -> int:

	"""Width above the lowest note that era and artist shaping allow."""

	return 24 if style == citypop.constants.STYLE_FUSION else 12


def enforce_min_spacing (spread: typing.List[int], min_spacing: int) -> typing.List[int]:

	"""Raise any note an octave when it sits too close to the note below.

	Expects ascending input. Works left to right in one pass, so a raised note
	is compared in its new position against the next one.
	"""

	result = list(spread)

	for i in range(1, len(result)):
		if result[i] - result[i - 1] < min_spacing:
			result[i] += citypop.constants.OCTAVE

	return result


def clamp_register (notes: typing.List[int]) -> typing.List[int]:

	"""Fold notes outside [36, 84] back by one octave (single pass)."""

	clamped: typing.List[int] = []

	for note in notes:

		if note < citypop.constants.REGISTER_LOW:
			clamped.append(note + citypop.constants.OCTAVE)

		elif note > citypop.constants.REGISTER_HIGH:
			clamped.append(note - citypop.constants.OCTAVE)

		else:
			clamped.append(note)

	return clamped


def _pull_down_above (spread: typing.List[int], threshold: float) -> typing.List[int]:

	"""Drop every note above ``threshold`` by an octave."""

	return [note - citypop.constants.OCTAVE if note > threshold else note for note in spread]


def spread_voicing (
	notes: typing.Iterable[int],
	position: int,
	options: citypop.options.GenerationOptions,
	rng: random.Random
) -> typing.List[int]:

	"""Arrange a pitch set across the register.

	Parameters:
		notes: Candidate MIDI pitches in any order.
		position: Step index within the progression (0-based).
		options: Active era, style and artist influence.
		rng: Random source for doubling and growth decisions.

	Returns:
		Ascending list of MIDI pitches (duplicates allowed).
	"""

	style = options.style_name
	max_spacing = max_spacing_for(style)

	spread = enforce_min_spacing(sorted(notes), min_spacing_for(style))

	if not spread:
		return spread

	# Octave doubling - fusion always thickens.
	if style == citypop.constants.STYLE_FUSION or rng.random() < DOUBLING_PROBABILITY:
		spread.append(rng.choice(spread) + citypop.constants.OCTAVE)

	if options.era == citypop.constants.ERA_MID_80S:
		spread = _pull_down_above(spread, spread[0] + max_spacing)

	elif options.era == citypop.constants.ERA_70S:
		spread = _pull_down_above(spread, spread[0] + max_spacing / 2)

	if options.artist_influence == citypop.constants.TATSURO_YAMASHITA:
		if rng.random() < TATSURO_TOP_DOUBLE_PROBABILITY:
			spread.append(max(spread) + citypop.constants.OCTAVE)

	elif options.artist_influence == citypop.constants.MARIYA_TAKEUCHI:
		spread = _pull_down_above(spread, spread[0] + max_spacing / 1.5)

	spread = clamp_register(spread)

	# Later steps grow upward, building tension through the progression.
	if position > 0 and rng.random() < position / citypop.constants.PROGRESSION_LENGTH:
		interval = citypop.constants.OCTAVE if rng.random() < 0.5 else 7
		spread.append(max(spread) + interval)

	return sorted(spread)
