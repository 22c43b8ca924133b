# lemonstand/engine.py
import logging
from typing import Mapping, Optional, Tuple, Union

from .config import INITIAL_CASH, DEFAULT_SEED, CASH_TOLERANCE, ICE_SPOILAGE_FRACTION
from .exceptions import InsufficientFunds
from .mechanics import DemandModel, forecast_weather, generate_prices
from .models import (
    StandState, Weather, PriceList, DayPlan, DayResult, Leftovers, DecisionPolicy,
)
from .rng import RandomStream

logger = logging.getLogger(__name__)


class LemonadeStandEnv:
    def __init__(self, stand: Optional[StandState] = None, seed: int = DEFAULT_SEED,
                 rng: Optional[RandomStream] = None):
        self.seed = seed
        self.rng = rng if rng is not None else RandomStream(seed)
        self.market = DemandModel(self.rng)
        self.stand = stand if stand is not None else StandState(cash=INITIAL_CASH)

    @property
    def history(self) -> Tuple[DayResult, ...]:
        """Read-only view of committed days."""
        return tuple(self.stand.history)

    @property
    def next_day(self) -> int:
        return len(self.stand.history) + 1

    def forecast(self) -> Weather:
        """Generate a forecast (the player sees this before planning)."""
        return forecast_weather(self.rng)

    def prices(self, day: int) -> PriceList:
        """Random supply prices for the given day."""
        return generate_prices(self.rng)

    def run_days(self, days: int, policy: DecisionPolicy) -> Tuple[DayResult, ...]:
        """Simulate N days, asking the policy for a plan each morning."""
        start = self.next_day
        for day in range(start, start + days):
            weather = self.forecast()
            prices = self.prices(day)
            # Policy gets a snapshot so it cannot touch live state
            snapshot = self.stand.model_copy(deep=True)
            plan = policy(snapshot, weather, prices, day)
            self._execute_day(plan, day, weather, prices)
        return self.history

    def run_day_manual(self, day: int, plan: Union[DayPlan, Mapping],
                       weather: Optional[Weather] = None,
                       prices: Optional[PriceList] = None) -> DayResult:
        """
        Run one day from an externally supplied plan.
        Pin weather/prices to retry a day under the same conditions.
        """
        w = weather if weather is not None else self.forecast()
        p = prices if prices is not None else self.prices(day)
        return self._execute_day(plan, day, w, p)

    def _execute_day(self, plan: Union[DayPlan, Mapping], day: int,
                     weather: Weather, prices: PriceList) -> DayResult:
        if not isinstance(plan, DayPlan):
            plan = DayPlan.model_validate(plan)

        stand = self.stand
        inventory = stand.inventory

        # 1. Settlement
        supply_cost = prices.cost_of(plan.order)
        if supply_cost > stand.cash + CASH_TOLERANCE:
            logger.warning("Day %d: order costs $%.2f but only $%.2f available",
                           day, supply_cost, stand.cash)
            raise InsufficientFunds(day, supply_cost, stand.cash)

        stand.cash -= supply_cost
        order = plan.order
        inventory.add_supplies(order.lemons, order.sugar, order.ice, order.cups)
        stand.price_per_unit = plan.price_per_unit
        stand.recipe = plan.recipe

        # 2. Daytime: traffic & sales
        customers = self.market.customer_traffic(weather)
        p_buy = self.market.buy_probability(stand.price_per_unit, weather)
        units_sold = 0
        stocked_out = False
        for i in range(customers):
            if self.rng.uniform() <= p_buy:
                if not inventory.serve_one(stand.recipe):
                    # Stock-out ends sales for the rest of the day
                    stocked_out = True
                    logger.debug("Day %d: stock-out at customer %d of %d", day, i + 1, customers)
                    break
                units_sold += 1

        gross_revenue = units_sold * stand.price_per_unit
        stand.cash += gross_revenue

        # 3. Night: ice melts
        inventory.apply_spoilage(ICE_SPOILAGE_FRACTION)

        result = DayResult(
            day=day,
            weather=weather,
            prices=prices,
            plan=plan.model_copy(deep=True),
            customers=customers,
            units_sold=units_sold,
            gross_revenue=round(gross_revenue, 2),
            supply_cost=round(supply_cost, 2),
            net_profit=round(gross_revenue - supply_cost, 2),
            leftover=Leftovers(
                lemons=inventory.lemons,
                sugar=inventory.sugar,
                ice=inventory.ice,
                cups=inventory.cups,
            ),
            stocked_out=stocked_out,
            cash_after=round(stand.cash, 2),
        )
        stand.history.append(result)

        logger.info("Day %d: %s, %d customers, %d sold, net $%.2f",
                    day, weather.kind, customers, units_sold, result.net_profit)
        return result
