"""Named chord voicing templates.

Each template describes a chord shape relative to its root: the core chord
intervals, the tensions that may be layered on top, chromatic alterations, a
broad category, a relative weight, and optional era and artist tags.

The catalog is immutable process-wide data. Use :func:`filter_voicings` to
narrow it to an era and/or artist influence before choosing a template.

Example:
	```python
	import citypop.voicing_catalog as catalog

	candidates = catalog.filter_voicings(era="mid80s", artist="Tatsuro Yamashita")
	# [("maj9_13", VoicingTemplate(...))]
	```
"""

import dataclasses
import logging
import types
import typing

import citypop.constants


logger = logging.getLogger(__name__)


CATEGORIES = ("citypop", "fusion", "jazz", "ballad")


@dataclasses.dataclass(frozen=True)
class VoicingTemplate:

	"""
	A chord voicing shape in semitones from the chord root.
	"""

	intervals: typing.Tuple[int, ...]
	tensions: typing.Tuple[int, ...]
	alterations: typing.Tuple[int, ...]
	category: str
	weight: float
	era: typing.Optional[str] = None
	artist_style: typing.Optional[str] = None

	def __post_init__ (self) -> None:
		if self.category not in CATEGORIES:
			raise ValueError(f"Unknown voicing category: {self.category!r}")
		if not (0 < self.weight <= 1):
			raise ValueError("Voicing weight must be in (0, 1]")
		if not self.intervals:
			raise ValueError("Voicing needs at least one interval")
		if not self.tensions:
			raise ValueError("Voicing needs at least one tension")
		if not self.alterations:
			raise ValueError("Voicing needs at least one alteration")
		if len(set(self.intervals)) != len(self.intervals):
			raise ValueError("Voicing intervals must be unique")


	def matches (self, era: typing.Optional[str] = None, artist: typing.Optional[str] = None) -> bool:

		"""Return True if this template carries the requested tags.

		A ``None`` argument places no constraint on that tag.
		"""

		if era is not None and self.era != era:
			return False

		if artist is not None and self.artist_style != artist:
			return False

		return True


VOICINGS: typing.Mapping[str, VoicingTemplate] = types.MappingProxyType({

	# Classic city pop colours
	"maj9": VoicingTemplate(
		intervals = (0, 4, 7, 11, 14),
		tensions = (9, 13),
		alterations = (8, 15),
		category = "citypop",
		weight = 1.0,
	),
	"maj7_13": VoicingTemplate(
		intervals = (0, 4, 7, 11, 21),
		tensions = (9, 13),
		alterations = (8, 15),
		category = "citypop",
		weight = 0.8,
	),
	"min11": VoicingTemplate(
		intervals = (0, 3, 7, 10, 14, 17),
		tensions = (15, 22),
		alterations = (8,),
		category = "citypop",
		weight = 0.7,
	),

	# 70s singer-songwriter shapes
	"min7_soft": VoicingTemplate(
		intervals = (0, 3, 7, 10),
		tensions = (14, 17),
		alterations = (8,),
		category = "ballad",
		weight = 0.7,
		era = citypop.constants.ERA_70S,
	),
	"maj6_9": VoicingTemplate(
		intervals = (0, 4, 9, 14),
		tensions = (11, 21),
		alterations = (15,),
		category = "ballad",
		weight = 0.6,
		era = citypop.constants.ERA_70S,
		artist_style = citypop.constants.MARIYA_TAKEUCHI,
	),

	# Early 80s
	"dom7alt": VoicingTemplate(
		intervals = (0, 4, 7, 10, 15),
		tensions = (8, 14),
		alterations = (9, 13),
		category = "fusion",
		weight = 0.5,
		era = citypop.constants.ERA_EARLY_80S,
	),
	"maj13": VoicingTemplate(
		intervals = (0, 4, 7, 11, 14, 21),
		tensions = (18,),
		alterations = (15,),
		category = "jazz",
		weight = 0.8,
		era = citypop.constants.ERA_EARLY_80S,
		artist_style = citypop.constants.TATSURO_YAMASHITA,
	),
	"dom9_sus4": VoicingTemplate(
		intervals = (0, 5, 7, 10, 14),
		tensions = (21, 17),
		alterations = (13, 15),
		category = "fusion",
		weight = 0.7,
		era = citypop.constants.ERA_EARLY_80S,
		artist_style = citypop.constants.TOSHIKI_KADOMATSU,
	),

	# Mid 80s
	"maj9_13": VoicingTemplate(
		intervals = (0, 4, 7, 11, 14, 21),
		tensions = (13, 15),
		alterations = (8, 22),
		category = "jazz",
		weight = 0.9,
		era = citypop.constants.ERA_MID_80S,
		artist_style = citypop.constants.TATSURO_YAMASHITA,
	),
	"maj7_sharp11": VoicingTemplate(
		intervals = (0, 4, 7, 11, 18),
		tensions = (14, 21),
		alterations = (15,),
		category = "citypop",
		weight = 0.8,
		era = citypop.constants.ERA_MID_80S,
		artist_style = citypop.constants.TOSHIKI_KADOMATSU,
	),

	# Late 80s
	"min9": VoicingTemplate(
		intervals = (0, 3, 7, 10, 14),
		tensions = (17, 21),
		alterations = (8,),
		category = "citypop",
		weight = 0.8,
		era = citypop.constants.ERA_LATE_80S,
	),
	"min9_13": VoicingTemplate(
		intervals = (0, 3, 7, 10, 14, 21),
		tensions = (15, 22),
		alterations = (8,),
		category = "jazz",
		weight = 0.6,
		era = citypop.constants.ERA_LATE_80S,
		artist_style = citypop.constants.MARIYA_TAKEUCHI,
	),
})


def filter_voicings (
	era: typing.Optional[str] = None,
	artist: typing.Optional[str] = None,
	catalog: typing.Optional[typing.Mapping[str, VoicingTemplate]] = None
) -> typing.List[typing.Tuple[str, VoicingTemplate]]:

	"""Return the catalog entries matching an era and artist influence.

	When nothing matches, the whole catalog is returned and a warning is
	logged, so callers always receive at least one candidate.

	Parameters:
		era: Required era tag, or ``None`` for any.
		artist: Required artist tag, or ``None`` for any.
		catalog: Catalog to search (defaults to :data:`VOICINGS`).

	Returns:
		``(name, template)`` pairs in catalog order.
	"""

	if catalog is None:
		catalog = VOICINGS

	matched = [(name, template) for name, template in catalog.items() if template.matches(era, artist)]

	if not matched:
		logger.warning(f"No voicing matches era={era!r} artist={artist!r} - using the full catalog")
		return list(catalog.items())

	return matched
