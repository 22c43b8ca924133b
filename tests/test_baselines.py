import pytest

from lemonstand.baselines import GreedyPolicy, SteadyPolicy, units_supported, buy_for_target
from lemonstand.engine import LemonadeStandEnv
from lemonstand.inventory import ProductionState
from lemonstand.models import StandState, Weather, PurchaseOrder, Recipe, DayPlan


def test_greedy_keeps_price_on_day_one(mild, flat_prices):
    plan = GreedyPolicy().plan_day(StandState(cash=100.0), mild, flat_prices, 1)
    assert isinstance(plan, DayPlan)
    assert plan.price_per_unit == 0.25
    assert plan.order == PurchaseOrder(lemons=24, sugar=16, ice=192, cups=48)


def test_greedy_nudges_price_down_when_stocked(mild, flat_prices):
    policy = GreedyPolicy()
    state = StandState(cash=100.0)
    policy.plan_day(state, mild, flat_prices, 1)
    assert not policy.last_sold_out
    plan = policy.plan_day(state, mild, flat_prices, 2)
    assert plan.price_per_unit == 0.24


def test_greedy_raises_price_after_predicted_sellout(mild, flat_prices):
    policy = GreedyPolicy()
    state = StandState(cash=0.0)
    first = policy.plan_day(state, mild, flat_prices, 1)
    assert first.order == PurchaseOrder()
    assert policy.last_sold_out
    plan = policy.plan_day(state, mild, flat_prices, 2)
    assert plan.price_per_unit == 0.28


def test_greedy_price_is_clamped(mild, flat_prices):
    policy = GreedyPolicy()
    policy.last_sold_out = True
    plan = policy.plan_day(StandState(cash=0.0, price_per_unit=1.25), mild, flat_prices, 2)
    assert plan.price_per_unit == 1.25


@pytest.mark.parametrize("kind, sugar, ice", [
    ('Cold', 5, 4),
    ('Hot', 4, 5),
    ('Storm', 4, 4),
])
def test_greedy_recipe_follows_weather(flat_prices, kind, sugar, ice):
    plan = GreedyPolicy()(StandState(cash=100.0), Weather(kind=kind, temperature=70), flat_prices, 1)
    assert plan.recipe.sugar_per_batch == sugar
    assert plan.recipe.ice_per_unit == ice


@pytest.mark.parametrize("cash", [0.0, 0.37, 1.0, 3.33])
def test_orders_never_exceed_cash(mild, flat_prices, cash):
    plan = GreedyPolicy()(StandState(cash=cash), mild, flat_prices, 1)
    assert flat_prices.cost_of(plan.order) <= cash + 1e-9


def test_buy_for_target_prioritises_cups(flat_prices):
    # 0.305 buys 15 cups and leaves too little for anything else
    order = buy_for_target(StandState(cash=0.305), flat_prices, Recipe(), 24)
    assert order.cups == 15
    assert (order.ice, order.lemons, order.sugar) == (0, 0, 0)


def test_buy_for_target_counts_existing_stock(flat_prices):
    state = StandState(cash=100.0)
    state.inventory.add_supplies(lemons=6, sugar=4, ice=40, cups=20)
    order = buy_for_target(state, flat_prices, Recipe(), 24)
    assert order == PurchaseOrder(lemons=6, sugar=4, ice=56, cups=4)


def test_steady_policy_restocks_to_target(mild, flat_prices):
    plan = SteadyPolicy(price=0.3, units=24)(StandState(cash=100.0), mild, flat_prices, 1)
    assert plan.price_per_unit == 0.3
    assert plan.order == PurchaseOrder(lemons=12, sugar=8, ice=96, cups=24)


def test_units_supported_ignores_active_batch():
    inv = ProductionState()
    inv.add_supplies(lemons=6, sugar=4, ice=100, cups=100)
    inv.try_brew_batch(Recipe())
    assert units_supported(inv, PurchaseOrder(), Recipe()) == 0
    assert units_supported(inv, PurchaseOrder(lemons=6, sugar=4), Recipe()) == 12
    assert units_supported(inv, PurchaseOrder(lemons=6, sugar=4), Recipe(ice_per_unit=10)) == 10


def test_buy_for_target_sizes_full_batches_despite_active_batch(flat_prices):
    state = StandState(cash=100.0)
    state.inventory.add_supplies(lemons=6, sugar=4, ice=4, cups=1)
    state.inventory.serve_one(Recipe())
    assert state.inventory.units_remaining == 11
    order = buy_for_target(state, flat_prices, Recipe(), 24)
    assert order == PurchaseOrder(lemons=12, sugar=8, ice=96, cups=24)


def test_greedy_reference_run_seed_2025():
    env = LemonadeStandEnv(StandState(cash=10.0), seed=2025)
    env.run_days(2, GreedyPolicy())
    day1, day2 = env.history

    assert day1.weather == Weather(kind='Cold', temperature=61)
    assert day1.plan.price_per_unit == 0.25
    assert day1.plan.recipe == Recipe(lemons_per_batch=6, sugar_per_batch=5,
                                      ice_per_unit=4, units_per_batch=12)
    assert day1.plan.order == PurchaseOrder(lemons=18, sugar=15, ice=112, cups=28)

    # Day 2 sizes three fresh batches even with units left in the current batch
    assert (day2.plan.order.lemons, day2.plan.order.sugar) == (18, 15)
