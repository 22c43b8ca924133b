import pytest

from lemonstand.models import Weather, PriceList


class ScriptedStream:
    """Stands in for RandomStream with pre-chosen draws."""

    def __init__(self, uniforms=(), normals=()):
        self.uniforms = list(uniforms)
        self.normals = list(normals)
        self.uniform_calls = 0

    def uniform(self, min_value=0.0, max_value=1.0):
        self.uniform_calls += 1
        u = self.uniforms.pop(0)
        return min_value + u * (max_value - min_value)

    def integer(self, min_value, max_value):
        return min(int(self.uniform(min_value, max_value + 1)), max_value)

    def normal(self, mean=0.0, stdev=1.0):
        return self.normals.pop(0)


@pytest.fixture
def mild():
    return Weather(kind='Mild', temperature=75)


@pytest.fixture
def flat_prices():
    return PriceList(lemon_price=0.05, sugar_price=0.07, ice_price=0.01, cup_price=0.02)


@pytest.fixture
def scripted():
    return ScriptedStream
