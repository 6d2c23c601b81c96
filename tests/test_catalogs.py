import logging
import random

import pytest

import citypop.constants
import citypop.progressions
import citypop.styles
import citypop.voicing_catalog


# ---------------------------------------------------------------------------
# Voicing catalog
# ---------------------------------------------------------------------------

def test_catalog_templates_are_valid () -> None:

	"""Every template has a known category, a weight in (0, 1] and tensions."""

	for name, template in citypop.voicing_catalog.VOICINGS.items():
		assert template.category in citypop.voicing_catalog.CATEGORIES, name
		assert 0 < template.weight <= 1, name
		assert template.tensions, name
		assert template.era is None or template.era in citypop.constants.ERAS, name


def test_catalog_is_read_only () -> None:

	"""The shared catalog cannot be modified."""

	with pytest.raises(TypeError):
		citypop.voicing_catalog.VOICINGS["extra"] = citypop.voicing_catalog.VOICINGS["maj9"]  # type: ignore[index]


def test_filter_era_and_artist () -> None:

	"""Both tags must match when both are requested."""

	matched = citypop.voicing_catalog.filter_voicings(era="mid80s", artist="Tatsuro Yamashita")

	assert [name for name, _ in matched] == ["maj9_13"]


def test_filter_era_only () -> None:

	"""An era alone keeps every template tagged with it."""

	matched = citypop.voicing_catalog.filter_voicings(era="70s")

	assert [name for name, _ in matched] == ["min7_soft", "maj6_9"]


def test_filter_artist_only () -> None:

	"""An artist alone keeps that artist's templates across eras."""

	matched = citypop.voicing_catalog.filter_voicings(artist="Tatsuro Yamashita")

	assert [name for name, _ in matched] == ["maj13", "maj9_13"]


def test_filter_without_constraints () -> None:

	"""No constraints returns the full catalog in order."""

	matched = citypop.voicing_catalog.filter_voicings()

	assert [name for name, _ in matched] == list(citypop.voicing_catalog.VOICINGS)


def test_filter_falls_back_to_full_catalog (caplog: pytest.LogCaptureFixture) -> None:

	"""An empty match falls back to every template and logs a warning."""

	with caplog.at_level(logging.WARNING, logger="citypop.voicing_catalog"):
		matched = citypop.voicing_catalog.filter_voicings(era="70s", artist="Toshiki Kadomatsu")

	assert len(matched) == len(citypop.voicing_catalog.VOICINGS)
	assert "full catalog" in caplog.text


def test_every_era_has_templates () -> None:

	"""Each era filter finds its own templates without falling back."""

	for era in citypop.constants.ERAS:
		matched = citypop.voicing_catalog.filter_voicings(era=era)
		assert all(template.era == era for _, template in matched)


def test_invalid_template_rejected () -> None:

	"""Bad categories, weights, intervals and empty alteration sets raise ValueError."""

	with pytest.raises(ValueError, match="category"):
		citypop.voicing_catalog.VoicingTemplate(intervals=(0, 4), tensions=(9,), alterations=(8,), category="disco", weight=0.5)

	with pytest.raises(ValueError, match="weight"):
		citypop.voicing_catalog.VoicingTemplate(intervals=(0, 4), tensions=(9,), alterations=(8,), category="jazz", weight=0.0)

	with pytest.raises(ValueError, match="unique"):
		citypop.voicing_catalog.VoicingTemplate(intervals=(0, 4, 4), tensions=(9,), alterations=(8,), category="jazz", weight=0.5)

	with pytest.raises(ValueError, match="alteration"):
		citypop.voicing_catalog.VoicingTemplate(intervals=(0, 4), tensions=(9,), alterations=(), category="jazz", weight=0.5)


# ---------------------------------------------------------------------------
# Progression catalog
# ---------------------------------------------------------------------------

def test_every_style_has_a_progression () -> None:

	"""Each style can be served without falling back."""

	for style in citypop.constants.STYLES:
		assert any(template.style == style for template in citypop.progressions.PROGRESSIONS)


def test_choose_progression_matches_style () -> None:

	"""Chosen progressions carry the requested style."""

	rng = random.Random(3)

	for _ in range(20):
		assert citypop.progressions.choose_progression("ballad", rng).style == "ballad"


def test_choose_progression_fallback (caplog: pytest.LogCaptureFixture) -> None:

	"""An unmatched style chooses from the whole catalog."""

	catalog = (citypop.progressions.ProgressionTemplate(roots=(0, 5), weights=(1.0, 0.5), style="uptempo"),)

	with caplog.at_level(logging.WARNING, logger="citypop.progressions"):
		chosen = citypop.progressions.choose_progression("ballad", random.Random(0), catalog)

	assert chosen is catalog[0]
	assert "full catalog" in caplog.text


def test_root_at_cycles () -> None:

	"""Steps past the end of the root list wrap around."""

	template = citypop.progressions.ProgressionTemplate(roots=(0, 5, 3), weights=(1.0, 1.0, 1.0), style="uptempo")

	assert [template.root_at(step) for step in range(8)] == [0, 5, 3, 0, 5, 3, 0, 5]


def test_complexity_multiplier_defaults_to_one () -> None:

	"""Templates without a complexity leave the arc unscaled."""

	plain = citypop.progressions.ProgressionTemplate(roots=(0,), weights=(1.0,), style="uptempo")
	scaled = citypop.progressions.ProgressionTemplate(roots=(0,), weights=(1.0,), style="uptempo", complexity=0.7)

	assert plain.complexity_multiplier() == 1.0
	assert scaled.complexity_multiplier() == 0.7


def test_progression_weights_must_align () -> None:

	"""Roots and weights are paired one-to-one."""

	with pytest.raises(ValueError, match="same length"):
		citypop.progressions.ProgressionTemplate(roots=(0, 5), weights=(1.0,), style="uptempo")


# ---------------------------------------------------------------------------
# Style settings
# ---------------------------------------------------------------------------

def test_ballad_settings () -> None:

	"""Ballads are slow and soft."""

	settings = citypop.styles.get_style_settings("ballad")

	assert settings.tempo_range == (65, 80)
	assert settings.velocity_range == (60, 85)
	assert settings.velocity_span == 25


def test_every_style_has_settings () -> None:

	"""Each recognised style resolves."""

	for style in citypop.constants.STYLES:
		assert citypop.styles.get_style_settings(style).swing_factor > 0


def test_unknown_style_settings () -> None:

	"""Unknown styles raise ValueError."""

	with pytest.raises(ValueError, match="Unknown style"):
		citypop.styles.get_style_settings("polka")
