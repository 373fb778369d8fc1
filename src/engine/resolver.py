"""IRR resolver: orchestrates validation, root finding and rate extraction.

Flow: spending/income → net differences → real roots → discount factor → IRR
"""

import logging
import math

from src.models.cashflow import CashFlowSeries, IRRResult, ResultStatus
from src.engine.roots import (
    DEFAULT_IMAG_TOLERANCE,
    DecompositionError,
    LeadingCoefficientError,
    ShapeMismatchError,
    find_real_roots,
)
from src.engine.irr import discount_factor_to_irr, npv, select_discount_factor

logger = logging.getLogger(__name__)

NAN_ERROR = "IRR calculation resulted in NaN."


def resolve_irr(
    spending,
    income,
    tolerance: float | None = None,
    max_periods: int | None = None,
) -> IRRResult:
    """Compute the IRR of a spending/income series.

    Raises ValueError for invalid input (unequal lengths, fewer than two
    periods, non-finite amounts, more than max_periods, negative tolerance).
    Computational failures come back as a status-1 IRRResult instead.
    """
    series = CashFlowSeries(spending, income)
    if max_periods is not None and series.periods > max_periods:
        raise ValueError(f"Number of periods exceeds the limit of {max_periods}.")

    if tolerance is None:
        tolerance = DEFAULT_IMAG_TOLERANCE

    diff = series.differences()
    try:
        roots = find_real_roots(series.degree, diff, tolerance=tolerance)
    except (ShapeMismatchError, LeadingCoefficientError, DecompositionError) as e:
        logger.error("Root finding failed for %d periods: %s", series.periods, e)
        return IRRResult(status=ResultStatus.FAILED, error=str(e))

    v = select_discount_factor(roots)
    irr = discount_factor_to_irr(v)
    logger.debug("Real roots %s, selected discount factor %s", roots, v)

    if math.isnan(irr):
        return IRRResult(
            status=ResultStatus.FAILED,
            error=NAN_ERROR,
            undefined_rate=True,
            roots=roots,
            discount_factor=v,
        )

    residual = npv(irr / 100, diff)
    logger.debug("NPV at %.6f%%: %s", irr, residual)
    return IRRResult(
        status=ResultStatus.OK,
        irr=irr,
        roots=roots,
        discount_factor=v,
        npv_residual=residual,
    )
