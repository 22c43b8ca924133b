# main.py
import argparse
import logging
from lemonstand.engine import LemonadeStandEnv
from lemonstand.models import StandState, DayPlan, PurchaseOrder, Recipe
from lemonstand.exceptions import InsufficientFunds
from lemonstand.diagnostics import Diagnostics
from lemonstand.baselines import GreedyPolicy, SteadyPolicy
from lemonstand.config import INITIAL_CASH
from colorama import Fore, Style, init

init(autoreset=True)

POLICIES = {
    "Greedy": GreedyPolicy,
    "Steady": SteadyPolicy,
}


def print_day(r, cash):
    color = Fore.GREEN if r.net_profit >= 0 else Fore.RED
    print(f"{Fore.YELLOW}Day {r.day}: {r.weather.forecast()} ({r.weather.temperature}F) | "
          f"${r.plan.price_per_unit:.2f}/cup{Style.RESET_ALL}")
    o = r.plan.order
    print(f"  Bought: L={o.lemons}, S={o.sugar}c, I={o.ice}, C={o.cups}  (Cost ${r.supply_cost:.2f})")
    print(f"  Customers={r.customers}, Sold={r.units_sold}, Revenue=${r.gross_revenue:.2f}, "
          f"{color}Net=${r.net_profit:.2f}{Style.RESET_ALL}")
    if r.stocked_out:
        print(f"  {Fore.RED}CRITICAL: Sold out! Remaining customers turned away.{Style.RESET_ALL}")
    lo = r.leftover
    print(f"  Leftover: L={lo.lemons}, S={lo.sugar}, I={lo.ice}, C={lo.cups} | Cash ${cash:.2f}")


def run_simulation(policy_name="Greedy", seed=2025, total_days=10, cash=INITIAL_CASH, verbose=False):
    env = LemonadeStandEnv(StandState(cash=cash), seed=seed)
    policy = POLICIES[policy_name]()
    diagnostics = Diagnostics(policy_name, seed)

    if verbose:
        print(f"{Fore.CYAN}Lemonade Stand: {policy_name} policy, seed {seed}{Style.RESET_ALL}")

    for _ in range(total_days):
        try:
            env.run_days(1, policy)
        except InsufficientFunds as e:
            if verbose:
                print(f"{Fore.RED}{e}{Style.RESET_ALL}")
            break
        result = env.history[-1]
        diagnostics.record_day(env.stand, result)
        if verbose:
            print_day(result, result.cash_after)

    report = diagnostics.generate_report(env.stand)

    if verbose:
        print(f"\n{Fore.GREEN}Simulation Complete.{Style.RESET_ALL}")
        print(f"Final Cash: ${report['final_cash']:.2f}  "
              f"(Total Profit over {report['days_run']} days: ${report['total_profit']:.2f})")
        print("\n=== DIAGNOSTIC REPORT ===")
        print(f"Strategy: {report['strategy']}")
        print(f"Net Stand Value: ${report['net_stand_value']:.2f}")
        print(f"Stock-out Days: {report['metrics']['stockout_days']}")
        print(f"Sell-through: {report['metrics']['sell_through']:.0%}")
        print("=========================")

    return report


def run_baseline(seeds=(2025, 42, 101, 202, 303), total_days=30):
    print(f"{Fore.MAGENTA}=== STARTING BASELINE RUN ({total_days} days) ==={Style.RESET_ALL}")
    print(f"{'Seed':<10} | " + " | ".join(f"{name:<10}" for name in POLICIES))
    print("-" * 40)

    for seed in seeds:
        print(f"{seed:<10} | ", end="", flush=True)
        for name in POLICIES:
            report = run_simulation(name, seed=seed, total_days=total_days)
            nsv = report['net_stand_value']
            color = Fore.GREEN if nsv > INITIAL_CASH else Fore.RED
            print(f"{color}${nsv:,.2f}{Style.RESET_ALL}".ljust(22), end="")
        print()


def ask_number(prompt, default, min_value=0.0, max_value=float('inf')):
    while True:
        ans = input(f"{prompt} [default {default}]: ").strip()
        if ans == '':
            return default
        try:
            v = float(ans)
        except ValueError:
            v = None
        if v is not None and min_value <= v <= max_value:
            return v
        print(f"Please enter a number between {min_value} and {max_value}.")


def ask_yes_no(prompt, default=False):
    def_text = 'Y/n' if default else 'y/N'
    while True:
        ans = input(f"{prompt} [{def_text}]: ").strip().lower()
        if ans == '':
            return default
        if ans in ('y', 'yes'):
            return True
        if ans in ('n', 'no'):
            return False


def run_interactive(seed=2025):
    print(f"{Fore.CYAN}Lemonade Stand - Day-by-Day{Style.RESET_ALL}")
    starting_cash = ask_number("Starting cash ($)", INITIAL_CASH, 0)
    env = LemonadeStandEnv(StandState(cash=starting_cash), seed=seed)
    stand = env.stand

    day = 1
    weather, prices = None, None
    while True:
        # Keep the same conditions when retrying a failed order
        if weather is None:
            weather = env.forecast()
            prices = env.prices(day)

        print(f"\n{Fore.YELLOW}===== Day {day} ====={Style.RESET_ALL}")
        print(f"Forecast: {weather.forecast()} ({weather.temperature}F)")
        print(f"Prices - Lemons ${prices.lemon_price:.3f}, Sugar/cup ${prices.sugar_price:.3f}, "
              f"Ice/cube ${prices.ice_price:.3f}, Cups ${prices.cup_price:.3f}")

        recipe = stand.recipe
        print(f"Current recipe: {recipe.lemons_per_batch} lemons/batch, {recipe.sugar_per_batch} sugar/batch, "
              f"{recipe.ice_per_unit} ice/cup, {recipe.units_per_batch} cups/batch.")
        if ask_yes_no("Adjust recipe?", False):
            recipe = Recipe(
                lemons_per_batch=int(ask_number("Lemons per batch", recipe.lemons_per_batch, 1, 20)),
                sugar_per_batch=int(ask_number("Sugar cups per batch", recipe.sugar_per_batch, 0, 20)),
                ice_per_unit=int(ask_number("Ice cubes per cup", recipe.ice_per_unit, 0, 20)),
                units_per_batch=int(ask_number("Cups per batch", recipe.units_per_batch, 1, 25)),
            )

        price = ask_number("Set selling price per cup ($)", stand.price_per_unit, 0.01, 5)
        plan = DayPlan(
            price_per_unit=round(price, 2),
            order=PurchaseOrder(
                lemons=int(ask_number("Buy how many lemons?", 0)),
                sugar=int(ask_number("Buy how many cups of sugar?", 0)),
                ice=int(ask_number("Buy how many ice cubes?", 0)),
                cups=int(ask_number("Buy how many paper cups?", 0)),
            ),
            recipe=recipe,
        )

        try:
            result = env.run_day_manual(day, plan, weather, prices)
        except InsufficientFunds as e:
            print(f"{Fore.RED}Purchase error: {e}{Style.RESET_ALL}")
            if ask_yes_no("Try a different order?", True):
                continue
            break

        print_day(result, stand.cash)
        weather, prices = None, None
        if not ask_yes_no("Proceed to next day?", True):
            break
        day += 1

    print("Thanks for playing!")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Lemonade stand simulation")
    parser.add_argument("--single", action="store_true", help="Day-by-day report for one policy")
    parser.add_argument("--interactive", action="store_true", help="Play the stand yourself")
    parser.add_argument("--policy", default="Greedy", choices=sorted(POLICIES))
    parser.add_argument("--seed", type=int, default=2025)
    parser.add_argument("--days", type=int, default=10)
    parser.add_argument("--cash", type=float, default=INITIAL_CASH)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    if args.interactive:
        run_interactive(seed=args.seed)
    elif args.single:
        run_simulation(args.policy, seed=args.seed, total_days=args.days, cash=args.cash, verbose=True)
    else:
        run_baseline(total_days=args.days)
