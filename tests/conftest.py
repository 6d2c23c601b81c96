import typing

import pytest

import citypop.options


class ScriptedRandom:

	"""Random source with scripted draws for exact assertions.

	``random()`` returns the queued values in order, then ``default`` forever.
	``uniform()`` is derived from ``random()`` the same way ``random.Random``
	does it, and ``choice()`` always picks the first element.
	"""

	def __init__ (self, values: typing.Sequence[float] = (), default: float = 0.0) -> None:

		"""Queue the scripted values."""

		self.values = list(values)
		self.default = default
		self.calls = 0

	def random (self) -> float:

		"""Return the next scripted value."""

		self.calls += 1

		if self.values:
			return self.values.pop(0)

		return self.default

	def uniform (self, a: float, b: float) -> float:

		"""Scale the next scripted value into [a, b]."""

		return a + (b - a) * self.random()

	def choice (self, seq: typing.Sequence[typing.Any]) -> typing.Any:

		"""Always return the first element."""

		return seq[0]


@pytest.fixture
def no_options () -> citypop.options.GenerationOptions:

	"""Options with nothing configured (uptempo, no era or artist)."""

	return citypop.options.GenerationOptions()


@pytest.fixture
def scripted () -> typing.Type[ScriptedRandom]:

	"""Factory for scripted random sources: ``scripted([0.1, 0.9], default=0.5)``."""

	return ScriptedRandom
