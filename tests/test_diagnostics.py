import pytest

from lemonstand.baselines import GreedyPolicy
from lemonstand.diagnostics import Diagnostics
from lemonstand.engine import LemonadeStandEnv
from lemonstand.models import StandState
from lemonstand.scorer import calculate_net_stand_value, total_profit


def test_net_stand_value_ignores_ice():
    state = StandState(cash=1.0)
    state.inventory.add_supplies(lemons=10, sugar=0, ice=500, cups=50)
    assert calculate_net_stand_value(state) == pytest.approx(2.5)


def test_total_profit_of_empty_history():
    assert total_profit([]) == 0


def test_empty_report():
    diag = Diagnostics("Greedy", 1)
    assert diag.classify_strategy() == "Unknown"
    report = diag.generate_report(StandState(cash=10.0))
    assert report['days_run'] == 0
    assert report['metrics']['sell_through'] == 0.0


def test_report_matches_history():
    env = LemonadeStandEnv(StandState(cash=10.0), seed=2025)
    diag = Diagnostics("Greedy", 2025)
    policy = GreedyPolicy()
    for _ in range(8):
        env.run_days(1, policy)
        diag.record_day(env.stand, env.history[-1])

    report = diag.generate_report(env.stand)
    assert report['days_run'] == 8
    assert report['total_profit'] == pytest.approx(total_profit(env.history))
    assert report['final_cash'] == round(env.stand.cash, 2)
    assert report['metrics']['units_sold'] == sum(r.units_sold for r in env.history)
    assert report['metrics']['stockout_days'] == sum(r.stocked_out for r in env.history)
    assert 0.0 <= report['metrics']['sell_through'] <= 1.0
    assert report['strategy'] in {
        "Premium Pricing", "Discounting", "Chronic Stock-Outs", "Adaptive Pricing", "Steady Operator",
    }
