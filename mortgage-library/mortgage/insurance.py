"""Mortgage default insurance premium (tiered on the down payment ratio)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MIN_DOWN_PAYMENT_RATIO = 0.05
INSUFFICIENT_DOWN_PAYMENT = "Down payment must be at least 5% of property price."

# (minimum down payment ratio, premium rate on the borrowed amount), highest tier first.
PREMIUM_TIERS: tuple[tuple[float, float], ...] = (
    (0.20, 0.0),
    (0.15, 0.028),
    (0.10, 0.031),
    (0.05, 0.04),
)


@dataclass(frozen=True)
class Premium:
    """Insurance premium owed, and the tier rate that produced it."""

    amount: float
    rate: float


@dataclass(frozen=True)
class InsufficientDownPayment:
    """Down payment is below the insurable floor."""

    message: str = INSUFFICIENT_DOWN_PAYMENT


PremiumResult = Union[Premium, InsufficientDownPayment]


def premium_rate(down_payment_ratio: float) -> float:
    """Tier rate for a down payment ratio that is already at or above the floor."""
    for minimum, rate in PREMIUM_TIERS:
        if down_payment_ratio >= minimum:
            return rate
    raise ValueError(f"down payment ratio {down_payment_ratio} is below every tier")


def insurance_premium(property_price: float, down_payment: float) -> PremiumResult:
    """
    Premium = tier rate * (property_price - down_payment).
    Tiers are closed on the lower bound: exactly 5% is insurable, exactly 20% owes nothing.
    """
    ratio = down_payment / property_price
    if ratio < MIN_DOWN_PAYMENT_RATIO:
        return InsufficientDownPayment()
    rate = premium_rate(ratio)
    return Premium(amount=(property_price - down_payment) * rate, rate=rate)
