# lemonstand/baselines.py
import math
from .models import StandState, Weather, PriceList, PurchaseOrder, DayPlan, Recipe
from .inventory import ProductionState

DEMAND_HINT = {'Hot': 85, 'Mild': 60, 'Cold': 35, 'Storm': 15}


def units_supported(inventory: ProductionState, order: PurchaseOrder, recipe: Recipe) -> int:
    """How many units the stock after this order could pour."""
    cups = inventory.cups + order.cups
    ice = inventory.ice + order.ice
    ice_units = ice // recipe.ice_per_unit if recipe.ice_per_unit > 0 else cups
    lemon_batches = ((inventory.lemons + order.lemons) // recipe.lemons_per_batch
                     if recipe.lemons_per_batch > 0 else cups)
    sugar_batches = ((inventory.sugar + order.sugar) // recipe.sugar_per_batch
                     if recipe.sugar_per_batch > 0 else cups)
    batches = min(lemon_batches, sugar_batches)
    return min(cups, ice_units, batches * recipe.units_per_batch)


def buy_for_target(state: StandState, prices: PriceList, recipe: Recipe,
                   target_units: int) -> PurchaseOrder:
    """
    Buy the shortfall for target_units, most sales-limiting items first
    (cups, ice, lemons, sugar), never spending more than the stand has.
    """
    inv = state.inventory
    target_units = max(0, target_units)
    batches = math.ceil(target_units / recipe.units_per_batch)

    need_lemons = max(0, batches * recipe.lemons_per_batch - inv.lemons)
    need_sugar = max(0, batches * recipe.sugar_per_batch - inv.sugar)
    need_cups = max(0, target_units - inv.cups)
    need_ice = max(0, target_units * recipe.ice_per_unit - inv.ice)

    cash = state.cash

    def try_buy(unit_need, unit_price):
        nonlocal cash
        if unit_need <= 0:
            return 0
        if unit_price <= 0:
            return unit_need
        qty = max(0, min(unit_need, math.floor(cash / unit_price)))
        cash -= qty * unit_price
        return qty

    cups = try_buy(need_cups, prices.cup_price)
    ice = try_buy(need_ice, prices.ice_price)
    lemons = try_buy(need_lemons, prices.lemon_price)
    sugar = try_buy(need_sugar, prices.sugar_price)
    return PurchaseOrder(lemons=lemons, sugar=sugar, ice=ice, cups=cups)


class GreedyPolicy:
    """
    Simple adaptive policy:
    - Buys enough supplies to serve 80% of the weather's expected buyers.
    - Raises price after a predicted sell-out, nudges it down otherwise.
    """

    def __init__(self, target_service_level: float = 0.8,
                 min_price: float = 0.05, max_price: float = 1.25):
        self.target_service_level = target_service_level
        self.min_price = min_price
        self.max_price = max_price
        self.last_sold_out = False

    def plan_day(self, state: StandState, weather: Weather, prices: PriceList, day: int) -> DayPlan:
        price = state.price_per_unit
        if day > 1:
            if self.last_sold_out:
                price = round(price * 1.10, 2)
            else:
                price = round(price * 0.97, 2)
            price = max(self.min_price, min(self.max_price, price))

        desired_units = math.floor(DEMAND_HINT[weather.kind] * self.target_service_level)

        # Sweeter on cold days, icier on hot ones
        recipe = Recipe(
            lemons_per_batch=6,
            sugar_per_batch=5 if weather.kind == 'Cold' else 4,
            ice_per_unit=5 if weather.kind == 'Hot' else 4,
            units_per_batch=12,
        )

        order = buy_for_target(state, prices, recipe, desired_units)
        self.last_sold_out = units_supported(state.inventory, order, recipe) < desired_units

        return DayPlan(price_per_unit=price, order=order, recipe=recipe)

    def __call__(self, state, weather, prices, day):
        return self.plan_day(state, weather, prices, day)


class SteadyPolicy:
    """Fixed price, fixed recipe, restocks toward the same unit count every day."""

    def __init__(self, price: float = 0.25, units: int = 24, recipe: Recipe = None):
        self.price = price
        self.units = units
        self.recipe = recipe or Recipe()

    def __call__(self, state: StandState, weather: Weather, prices: PriceList, day: int) -> DayPlan:
        order = buy_for_target(state, prices, self.recipe, self.units)
        return DayPlan(price_per_unit=self.price, order=order, recipe=self.recipe)
