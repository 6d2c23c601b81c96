"""Root-sequence templates for city pop progressions.

Roots are semitone offsets from the key root (C = 60 in the generator).
Weights line up one-to-one with the roots and describe how strongly each step
anchors the progression. Complexity scales the tension arc when voicing the
chords; ``None`` leaves the arc unscaled.
"""

import dataclasses
import logging
import random
import typing

import citypop.constants


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class ProgressionTemplate:

	"""
	A repeating sequence of chord roots with a style tag.
	"""

	roots: typing.Tuple[int, ...]
	weights: typing.Tuple[float, ...]
	style: str
	complexity: typing.Optional[float] = None

	def __post_init__ (self) -> None:
		if not self.roots:
			raise ValueError("Progression needs at least one root")
		if len(self.roots) != len(self.weights):
			raise ValueError("Progression roots and weights must be the same length")
		if self.complexity is not None and (self.complexity < 0 or self.complexity > 1):
			raise ValueError("Progression complexity must be between 0 and 1")


	def complexity_multiplier (self) -> float:

		"""Scale factor applied to the tension arc (1.0 when unset)."""

		return 1.0 if self.complexity is None else self.complexity


	def root_at (self, step: int) -> int:

		"""Return the root offset for a step, cycling through the roots."""

		return self.roots[step % len(self.roots)]


PROGRESSIONS: typing.Tuple[ProgressionTemplate, ...] = (
	ProgressionTemplate(roots=(0, 5, 3, 4), weights=(1.0, 0.8, 0.7, 0.9), style=citypop.constants.STYLE_UPTEMPO, complexity=0.8),
	ProgressionTemplate(roots=(3, 4, 0, 5), weights=(0.8, 0.9, 1.0, 0.7), style=citypop.constants.STYLE_UPTEMPO, complexity=0.9),
	ProgressionTemplate(roots=(5, 4, 2, 9), weights=(1.0, 0.8, 0.9, 0.7), style=citypop.constants.STYLE_UPTEMPO),
	ProgressionTemplate(roots=(0, 5, 1, 4), weights=(1.0, 0.7, 0.8, 0.9), style=citypop.constants.STYLE_BALLAD, complexity=0.7),
	ProgressionTemplate(roots=(0, 9, 5, 7), weights=(1.0, 0.8, 0.9, 0.6), style=citypop.constants.STYLE_BALLAD, complexity=0.6),
	ProgressionTemplate(roots=(0, 2, 3, 4), weights=(1.0, 0.6, 0.8, 0.9), style=citypop.constants.STYLE_FUSION, complexity=1.0),
	ProgressionTemplate(roots=(2, 7, 0, 5), weights=(0.9, 1.0, 0.8, 0.7), style=citypop.constants.STYLE_FUSION, complexity=0.9),
)


def choose_progression (
	style: str,
	rng: random.Random,
	catalog: typing.Sequence[ProgressionTemplate] = PROGRESSIONS
) -> ProgressionTemplate:

	"""Pick a progression for a style uniformly at random.

	Falls back to the whole catalog if no template carries the style.
	"""

	candidates = [template for template in catalog if template.style == style]

	if not candidates:
		logger.warning(f"No progression tagged {style!r} - choosing from the full catalog")
		candidates = list(catalog)

	return rng.choice(candidates)
