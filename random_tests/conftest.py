import pytest


class ScriptedNormalSource:
    """Replays a fixed list of variates, cycling when it runs out."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def standard_normal(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_source():
    return ScriptedNormalSource
