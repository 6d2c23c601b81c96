"""Generation options and YAML configuration loading.

A configuration file looks like::

	generation:
	  era: mid80s
	  style: fusion
	  artist_influence: Tatsuro Yamashita
	  complexity: 0.7
	seed: 42
	output_dir: out
"""

import dataclasses
import logging
import os
import typing

import yaml

import citypop.constants


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GenerationOptions:

	"""User-facing knobs for one generation run. All fields are optional.

	Parameters:
		era: One of ``"70s"``, ``"early80s"``, ``"mid80s"``, ``"late80s"``.
		style: One of ``"ballad"``, ``"uptempo"``, ``"fusion"``. Unset means uptempo.
		artist_influence: Artist tag matched against the voicing catalog.
		complexity: Accepted for completeness (0.0 to 1.0). Harmonic density is
			driven by the tension arc and the progression's own complexity.
	"""

	era: typing.Optional[str] = None
	style: typing.Optional[str] = None
	artist_influence: typing.Optional[str] = None
	complexity: typing.Optional[float] = None

	def __post_init__ (self) -> None:

		if self.era is not None and self.era not in citypop.constants.ERAS:
			raise ValueError(f"Unknown era: {self.era!r}. Expected one of {', '.join(citypop.constants.ERAS)}.")

		if self.style is not None and self.style not in citypop.constants.STYLES:
			raise ValueError(f"Unknown style: {self.style!r}. Expected one of {', '.join(citypop.constants.STYLES)}.")

		if self.complexity is not None and (self.complexity < 0 or self.complexity > 1):
			raise ValueError("Complexity must be between 0 and 1")


	@property
	def style_name (self) -> str:

		"""The active style, defaulting to uptempo."""

		return self.style or citypop.constants.DEFAULT_STYLE


	@classmethod
	def from_dict (cls, data: typing.Optional[typing.Mapping[str, typing.Any]]) -> "GenerationOptions":

		"""Build options from a mapping, ignoring unknown keys."""

		if not data:
			return cls()

		if not isinstance(data, dict):
			raise ValueError(f"Generation options must be a mapping, got {type(data).__name__}")

		known = {field.name for field in dataclasses.fields(cls)}
		unknown = set(data) - known

		if unknown:
			logger.warning(f"Ignoring unknown generation options: {sorted(unknown)}")

		return cls(**{key: value for key, value in data.items() if key in known})


	def merged (self, **overrides: typing.Any) -> "GenerationOptions":

		"""Return a copy with every non-``None`` override applied."""

		changes = {key: value for key, value in overrides.items() if value is not None}

		return dataclasses.replace(self, **changes)


def load_config (config_path: str = "citypop.yaml") -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r") as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping, got {type(config).__name__}")

	return config


def load_options (config_path: str = "citypop.yaml") -> GenerationOptions:

	"""Load the ``generation`` section of a YAML config as options."""

	return GenerationOptions.from_dict(load_config(config_path).get("generation"))
