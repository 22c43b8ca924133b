# lemonstand/scorer.py
from typing import Sequence
from .models import StandState, DayResult
from .config import PRICE_LEMON, PRICE_SUGAR, PRICE_CUP


def calculate_net_stand_value(state: StandState) -> float:
    """
    NSV = Cash + Stock_Value
    Stock is valued at baseline supply prices. Ice is left out since it
    melts overnight.
    """
    inv = state.inventory
    stock_value = (inv.lemons * PRICE_LEMON[0]
                   + inv.sugar * PRICE_SUGAR[0]
                   + inv.cups * PRICE_CUP[0])
    return round(state.cash + stock_value, 2)


def total_profit(history: Sequence[DayResult]) -> float:
    return round(sum(r.net_profit for r in history), 2)
