"""Per-style tempo, velocity and timing feel."""

import dataclasses
import types
import typing

import citypop.constants


@dataclasses.dataclass(frozen=True)
class StyleSettings:

	"""
	Performance ranges for one style.

	Parameters:
		tempo_range: ``(min, max)`` BPM written to the file header.
		velocity_range: ``(min, max)`` MIDI velocity for each note.
		swing_factor: Width in seconds of the random chord start offset.
	"""

	tempo_range: typing.Tuple[float, float]
	velocity_range: typing.Tuple[int, int]
	swing_factor: float

	def __post_init__ (self) -> None:
		if self.tempo_range[0] > self.tempo_range[1]:
			raise ValueError("Tempo range must be (min, max)")
		if self.velocity_range[0] > self.velocity_range[1]:
			raise ValueError("Velocity range must be (min, max)")
		if self.velocity_range[0] < 0 or self.velocity_range[1] > citypop.constants.MAX_VELOCITY:
			raise ValueError("Velocity range must lie within 0-127")


	@property
	def velocity_span (self) -> int:
		return self.velocity_range[1] - self.velocity_range[0]


STYLE_SETTINGS: typing.Mapping[str, StyleSettings] = types.MappingProxyType({
	citypop.constants.STYLE_BALLAD: StyleSettings(tempo_range=(65, 80), velocity_range=(60, 85), swing_factor=0.01),
	citypop.constants.STYLE_UPTEMPO: StyleSettings(tempo_range=(100, 120), velocity_range=(70, 100), swing_factor=0.02),
	citypop.constants.STYLE_FUSION: StyleSettings(tempo_range=(90, 115), velocity_range=(75, 110), swing_factor=0.03),
})


def get_style_settings (style: str) -> StyleSettings:

	"""Return the settings for a style name.

	Raises:
		ValueError: If the style is not recognised.
	"""

	if style not in STYLE_SETTINGS:
		raise ValueError(f"Unknown style: {style!r}. Expected one of {', '.join(citypop.constants.STYLES)}.")

	return STYLE_SETTINGS[style]
