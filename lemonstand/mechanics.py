# lemonstand/mechanics.py
import math

from .config import (
    WEATHER_BUCKETS, PRICE_LEMON, PRICE_SUGAR, PRICE_ICE, PRICE_CUP, PRICE_DECIMALS,
    BASE_TRAFFIC, TRAFFIC_NOISE_STDEV, REFERENCE_PRICE, PRICE_ELASTICITY,
    WEATHER_INCLINATION_BASE, WEATHER_INCLINATION_SLOPE,
)
from .models import Weather, PriceList
from .rng import RandomStream


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def forecast_weather(rng: RandomStream) -> Weather:
    """
    One roll picks the weather bucket, a second picks the temperature
    inside that bucket's range.
    """
    roll = rng.uniform()
    for upper, kind, t_min, t_max in WEATHER_BUCKETS:
        if roll < upper:
            return Weather(kind=kind, temperature=rng.integer(t_min, t_max))
    # roll can land exactly on 1.0
    _, kind, t_min, t_max = WEATHER_BUCKETS[-1]
    return Weather(kind=kind, temperature=rng.integer(t_min, t_max))


def generate_prices(rng: RandomStream) -> PriceList:
    """Baseline supply prices with small daily variance."""
    def vary(base_and_spread):
        base, spread = base_and_spread
        return round(base * (1 + rng.uniform(-spread, spread)), PRICE_DECIMALS)

    # Draw order matters for reproducibility
    lemon = vary(PRICE_LEMON)
    sugar = vary(PRICE_SUGAR)
    ice = vary(PRICE_ICE)
    cup = vary(PRICE_CUP)
    return PriceList(lemon_price=lemon, sugar_price=sugar, ice_price=ice, cup_price=cup)


class DemandModel:
    """
    Demand approximating the classic game:
    - More customers when it's hot, fewer when it's cold or storming.
    - Higher prices reduce purchase probability.
    """

    def __init__(self, rng: RandomStream):
        self.rng = rng

    def customer_traffic(self, weather: Weather) -> int:
        noise = self.rng.normal(0, TRAFFIC_NOISE_STDEV)
        return max(0, round_half_up(BASE_TRAFFIC * weather.demand_boost() + noise))

    def buy_probability(self, price: float, weather: Weather) -> float:
        """Calibration: ~90% buy at $0.10 on a hot day, ~20% at $1.00."""
        x = (price / REFERENCE_PRICE) - 1  # 0 at the sweet spot
        try:
            p = 1 / (1 + math.exp(PRICE_ELASTICITY * x))
        except OverflowError:
            p = 0.0
        p = min(1.0, p * (WEATHER_INCLINATION_BASE + WEATHER_INCLINATION_SLOPE * weather.demand_boost()))
        return max(0.0, min(1.0, p))
