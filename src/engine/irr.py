"""IRR from the real roots of the net cash-flow polynomial.

Pure functions. No I/O.

A root v of sum(cf[t] * v**t) is a discount factor v = 1 / (1 + r),
so the rate is r = (1 - v) / v.
"""

import math


def select_discount_factor(real_roots) -> float:
    """First root in [0, 1), in the order given. 0.0 if there is none."""
    for root in real_roots:
        if 0 <= root < 1:
            return float(root)
    return 0.0


def discount_factor_to_irr(v: float) -> float:
    """Convert a discount factor to an IRR percentage.

    v == 0 is never a valid discount factor and yields NaN, as does any
    transform that is not finite.
    """
    if v == 0:
        return math.nan
    d = 1 - v
    if 1 - d == 0:
        return math.nan
    irr = d / (1 - d) * 100
    if not math.isfinite(irr):
        return math.nan
    return irr


def extract_irr(real_roots) -> float:
    """IRR percentage from a set of real roots; NaN when none is usable.

    Only the first root in [0, 1) is considered. Irregular cash flows can
    have several qualifying roots; the others are ignored.
    """
    return discount_factor_to_irr(select_discount_factor(real_roots))


def npv(rate: float, cash_flows) -> float:
    """Net present value at a periodic rate (0.10 = 10%).

    cash_flows[0] is undiscounted.
    """
    return sum(cf / (1 + rate) ** t for t, cf in enumerate(cash_flows))
