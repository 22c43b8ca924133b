# lemonstand/diagnostics.py
from typing import List, Dict, Any
import numpy as np
from .models import StandState, DayResult
from .config import REFERENCE_PRICE
from .scorer import calculate_net_stand_value


class Diagnostics:
    def __init__(self, policy_name: str, seed: int):
        self.policy_name = policy_name
        self.seed = seed

        # Tracking Data
        self.history: List[Dict[str, Any]] = []

        # Metrics
        self.stockout_days = 0
        self.price_changes = 0
        self._last_price = None

    def record_day(self, state: StandState, result: DayResult):
        """Record a single committed day"""
        price = result.plan.price_per_unit
        self.history.append({
            'day': result.day,
            'cash': state.cash,
            'customers': result.customers,
            'units_sold': result.units_sold,
            'net_profit': result.net_profit,
            'price': price,
            'weather': result.weather.kind,
        })

        if result.stocked_out:
            self.stockout_days += 1
        if self._last_price is not None and price != self._last_price:
            self.price_changes += 1
        self._last_price = price

    def classify_strategy(self) -> str:
        """Classify the policy's behaviour from its prices and stock-outs"""
        if not self.history:
            return "Unknown"

        avg_price = np.mean([d['price'] for d in self.history])
        stockout_rate = self.stockout_days / len(self.history)

        if avg_price > REFERENCE_PRICE * 1.5:
            return "Premium Pricing"
        elif avg_price < REFERENCE_PRICE * 0.6:
            return "Discounting"
        elif stockout_rate > 0.5:
            return "Chronic Stock-Outs"
        elif self.price_changes > len(self.history) * 0.5:
            return "Adaptive Pricing"
        else:
            return "Steady Operator"

    def generate_report(self, state: StandState) -> Dict[str, Any]:
        """Generate final diagnostic report"""
        customers = np.array([d['customers'] for d in self.history], dtype=float)
        sold = np.array([d['units_sold'] for d in self.history], dtype=float)
        total_customers = float(customers.sum()) if self.history else 0.0

        return {
            'policy': self.policy_name,
            'seed': self.seed,
            'strategy': self.classify_strategy(),
            'days_run': len(self.history),
            'final_cash': round(state.cash, 2),
            'net_stand_value': calculate_net_stand_value(state),
            'total_profit': round(float(np.sum([d['net_profit'] for d in self.history])), 2),
            'metrics': {
                'units_sold': int(sold.sum()) if self.history else 0,
                'mean_customers': float(customers.mean()) if self.history else 0.0,
                'stockout_days': self.stockout_days,
                'sell_through': float(sold.sum() / total_customers) if total_customers > 0 else 0.0,
            }
        }
