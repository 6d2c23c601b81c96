import logging
import pathlib

import pytest

import citypop.options


def test_defaults () -> None:

	"""Nothing set resolves to the uptempo style."""

	options = citypop.options.GenerationOptions()

	assert options.era is None
	assert options.style is None
	assert options.style_name == "uptempo"


def test_invalid_era () -> None:

	"""Unknown eras are rejected at construction."""

	with pytest.raises(ValueError, match="Unknown era"):
		citypop.options.GenerationOptions(era="90s")


def test_invalid_style () -> None:

	"""Unknown styles are rejected at construction."""

	with pytest.raises(ValueError, match="Unknown style"):
		citypop.options.GenerationOptions(style="polka")


def test_invalid_complexity () -> None:

	"""Complexity must lie in [0, 1]."""

	with pytest.raises(ValueError, match="Complexity"):
		citypop.options.GenerationOptions(complexity=1.5)


def test_free_form_artist () -> None:

	"""Any artist string is accepted; unknown names simply have no effect."""

	assert citypop.options.GenerationOptions(artist_influence="Anri").artist_influence == "Anri"


def test_from_dict_ignores_unknown_keys (caplog: pytest.LogCaptureFixture) -> None:

	"""Unknown keys are dropped with a warning."""

	with caplog.at_level(logging.WARNING, logger="citypop.options"):
		options = citypop.options.GenerationOptions.from_dict({"style": "fusion", "tempo": 120})

	assert options == citypop.options.GenerationOptions(style="fusion")
	assert "tempo" in caplog.text


def test_from_dict_empty () -> None:

	"""None or an empty mapping gives default options."""

	assert citypop.options.GenerationOptions.from_dict(None) == citypop.options.GenerationOptions()
	assert citypop.options.GenerationOptions.from_dict({}) == citypop.options.GenerationOptions()


def test_merged_skips_none () -> None:

	"""Only explicit overrides replace file values."""

	base = citypop.options.GenerationOptions(era="70s", style="ballad")
	merged = base.merged(era=None, style="fusion", artist_influence=None)

	assert merged == citypop.options.GenerationOptions(era="70s", style="fusion")


def test_merged_validates () -> None:

	"""Overrides are validated like constructor arguments."""

	with pytest.raises(ValueError):
		citypop.options.GenerationOptions().merged(era="1990s")


def test_load_config_missing_file (tmp_path: pathlib.Path, caplog: pytest.LogCaptureFixture) -> None:

	"""A missing config file yields an empty config and a warning."""

	with caplog.at_level(logging.WARNING, logger="citypop.options"):
		config = citypop.options.load_config(str(tmp_path / "missing.yaml"))

	assert config == {}
	assert "not found" in caplog.text


def test_load_config_empty_file (tmp_path: pathlib.Path) -> None:

	"""An empty YAML file is treated as no configuration."""

	path = tmp_path / "empty.yaml"
	path.write_text("")

	assert citypop.options.load_config(str(path)) == {}


@pytest.mark.parametrize("text", ["- era\n- style\n", "just a string\n", "42\n"])
def test_load_config_requires_mapping (tmp_path: pathlib.Path, text: str) -> None:

	"""A YAML document that is not a mapping is rejected."""

	path = tmp_path / "citypop.yaml"
	path.write_text(text)

	with pytest.raises(ValueError, match="must contain a mapping"):
		citypop.options.load_config(str(path))


@pytest.mark.parametrize("data", ["mid80s", ["era", "mid80s"], 3])
def test_from_dict_requires_mapping (data: object) -> None:

	"""A scalar or list generation section is rejected."""

	with pytest.raises(ValueError, match="must be a mapping"):
		citypop.options.GenerationOptions.from_dict(data)


def test_load_options (tmp_path: pathlib.Path) -> None:

	"""The generation section of a YAML file becomes options."""

	path = tmp_path / "citypop.yaml"
	path.write_text(
		"generation:\n"
		"  era: mid80s\n"
		"  style: fusion\n"
		"  artist_influence: Tatsuro Yamashita\n"
		"  complexity: 0.6\n"
		"seed: 9\n"
	)

	options = citypop.options.load_options(str(path))

	assert options == citypop.options.GenerationOptions(
		era = "mid80s",
		style = "fusion",
		artist_influence = "Tatsuro Yamashita",
		complexity = 0.6
	)
