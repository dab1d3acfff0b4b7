from dataclasses import dataclass, field
from typing import Iterator

import pytest
from click.testing import CliRunner


@dataclass
class FixedRandomSource:
    """Replays ``values``, reduced modulo the requested bound, in a loop."""

    values: list[int]
    calls: list[int] = field(default_factory=list)
    _it: Iterator[int] = field(init=False)

    def __post_init__(self) -> None:
        self._it = iter(self.values)

    def randbelow(self, n: int) -> int:
        self.calls.append(n)
        try:
            value = next(self._it)
        except StopIteration:
            self._it = iter(self.values)
            value = next(self._it)
        return value % n


@pytest.fixture
def zero_rng() -> FixedRandomSource:
    return FixedRandomSource([0])


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    for var in (
        "PASSWORD_MASK_SPECIAL_ALPHABET",
        "PASSWORD_MASK_SECURE_RANDOM",
        "PASSWORD_MASK_DEFAULT_COUNT",
    ):
        monkeypatch.delenv(var, raising=False)
    return CliRunner()
