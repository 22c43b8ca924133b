# lemonstand/models.py
from typing import Literal, List, Mapping, Protocol, Union
from pydantic import BaseModel, ConfigDict, Field

from .config import (
    DEMAND_BOOST, FORECAST_TEXT, INITIAL_PRICE_PER_UNIT,
    LEMONS_PER_BATCH, SUGAR_PER_BATCH, ICE_PER_UNIT, UNITS_PER_BATCH,
)
from .inventory import ProductionState

WeatherKind = Literal['Cold', 'Mild', 'Hot', 'Storm']


class Weather(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: WeatherKind
    temperature: int  # Fahrenheit

    def demand_boost(self) -> float:
        """Demand multiplier driven by weather conditions."""
        return DEMAND_BOOST[self.kind]

    def forecast(self) -> str:
        return FORECAST_TEXT[self.kind]


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    lemons_per_batch: int = Field(default=LEMONS_PER_BATCH, ge=0)
    sugar_per_batch: int = Field(default=SUGAR_PER_BATCH, ge=0)
    ice_per_unit: int = Field(default=ICE_PER_UNIT, ge=0)
    units_per_batch: int = Field(default=UNITS_PER_BATCH, ge=1)


class PurchaseOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    lemons: int = Field(default=0, ge=0)
    sugar: int = Field(default=0, ge=0)
    ice: int = Field(default=0, ge=0)
    cups: int = Field(default=0, ge=0)


class PriceList(BaseModel):
    model_config = ConfigDict(frozen=True)

    lemon_price: float  # Per lemon
    sugar_price: float  # Per cup of sugar
    ice_price: float    # Per cube
    cup_price: float    # Per paper cup

    def cost_of(self, order: PurchaseOrder) -> float:
        return (order.lemons * self.lemon_price
                + order.sugar * self.sugar_price
                + order.ice * self.ice_price
                + order.cups * self.cup_price)


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    price_per_unit: float = Field(gt=0)
    order: PurchaseOrder = Field(default_factory=PurchaseOrder)
    recipe: Recipe = Field(default_factory=Recipe)


class Leftovers(BaseModel):
    model_config = ConfigDict(frozen=True)

    lemons: int
    sugar: int
    ice: int
    cups: int


class DayResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int
    weather: Weather
    prices: PriceList
    plan: DayPlan
    customers: int
    units_sold: int
    gross_revenue: float
    supply_cost: float
    net_profit: float
    leftover: Leftovers
    stocked_out: bool = False
    cash_after: float = 0.0


class StandState(BaseModel):
    cash: float
    recipe: Recipe = Field(default_factory=Recipe)
    price_per_unit: float = INITIAL_PRICE_PER_UNIT
    inventory: ProductionState = Field(default_factory=ProductionState)
    history: List[DayResult] = []


class DecisionPolicy(Protocol):
    """Chooses price, purchases and recipe for one day."""

    def __call__(self, state: StandState, weather: Weather,
                 prices: PriceList, day: int) -> Union[DayPlan, Mapping]:
        ...
