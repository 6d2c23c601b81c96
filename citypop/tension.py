import math
import random
import typing


GOLDEN_RATIO: float = (1 + math.sqrt(5)) / 2

MIN_TENSION: float = 0.3
MAX_TENSION: float = 0.9
TENSION_NOISE: float = 0.1


def generate_tension_arc (length: int, rng: random.Random) -> typing.List[float]:

	"""
	Return a per-step harmonic density curve peaking at the golden section.

	The peak sits at ``floor(length / phi)``, roughly 62% through the piece.
	Each value is the linear hump ``0.5 + 0.4 * (1 - |i - peak| / (length / 2))``
	plus uniform noise of +/-0.1, clamped to [0.3, 0.9].
	"""

	if length < 0:
		raise ValueError("Length cannot be negative")

	peak = math.floor(length / GOLDEN_RATIO)
	half = length / 2

	arc: typing.List[float] = []

	for i in range(length):
		base = 0.5 + 0.4 * (1 - abs(i - peak) / half)
		noise = rng.uniform(-TENSION_NOISE, TENSION_NOISE)
		arc.append(max(MIN_TENSION, min(MAX_TENSION, base + noise)))

	return arc
