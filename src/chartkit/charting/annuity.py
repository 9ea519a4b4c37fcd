"""Annuity loan schedule as chart series.

Generates the period-by-period breakdown of an annuity loan (constant
instalment) and appends three series to a model:

 - "Remaining Debt": debt at the start of each period
 - "Interest": interest paid in each period
 - "Clearance": principal repaid in each period

Rates are percentages per year; ``periods_per_year`` is the payment
resolution (12 for monthly). The instalment is fixed from the initial
interest + repayment rate.
"""

from __future__ import annotations

import logging
import math
from typing import List, Union

from .base import ChartRenderer
from .model import ChartData

__all__ = ["annuity_series", "DEFAULT_MAX_PERIODS"]

log = logging.getLogger(__name__)

DEFAULT_MAX_PERIODS = 1200


def annuity_series(
    target: Union[ChartData, ChartRenderer],
    principal: float,
    interest_rate: float,
    repayment_rate: float,
    periods_per_year: float,
    *,
    max_periods: int = DEFAULT_MAX_PERIODS,
) -> int:
    """Append the annuity schedule series to ``target``; return the period count.

    Nothing is added (and 0 returned) when any of the four inputs is 0.
    Raises ValueError for negative or non-finite inputs, or when the
    instalment cannot pay off the loan within ``max_periods``.
    """
    data = target.data if isinstance(target, ChartRenderer) else target
    params = (principal, interest_rate, repayment_rate, periods_per_year)
    if not all(math.isfinite(p) for p in params):
        raise ValueError("annuity parameters must be finite numbers")
    if any(p == 0 for p in params):
        return 0
    if any(p < 0 for p in params):
        raise ValueError("annuity parameters must be positive")

    debt = float(principal)
    instalment = debt * (interest_rate + repayment_rate) / 100.0 / periods_per_year
    if instalment <= debt * interest_rate / 100.0 / periods_per_year:
        raise ValueError("instalment does not cover the interest; the loan never clears")

    remaining: List[float] = []
    interest: List[float] = []
    clearance: List[float] = []
    while debt > 0.0:
        if len(remaining) >= max_periods:
            raise ValueError(f"loan not cleared within {max_periods} periods")
        remaining.append(debt)
        period_interest = debt * interest_rate / 100.0 / periods_per_year
        period_clearance = instalment - period_interest
        debt -= period_clearance
        interest.append(period_interest)
        clearance.append(period_clearance)

    data.add_series("Remaining Debt", remaining)
    data.add_series("Interest", interest)
    data.add_series("Clearance", clearance)
    log.debug("annuity schedule: %d periods, instalment %.2f", len(remaining), instalment)
    return len(remaining)
