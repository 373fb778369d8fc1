"""IRR routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.schemas import IRRRequest, IRRResponse
from src.api.deps import get_settings
from src.config import Settings
from src.engine.resolver import resolve_irr

logger = logging.getLogger(__name__)

router = APIRouter(tags=["irr"])


@router.get("/", response_class=PlainTextResponse)
async def ready():
    return "API ready to use!"


@router.post("/solve", response_model=IRRResponse)
def solve(req: IRRRequest, cfg: Settings = Depends(get_settings)):
    """Resolve the IRR of a spending/income series.

    400 for rejected or malformed series, 500 when root finding fails,
    200 otherwise (status 1 in the body when the rate is NaN).
    """
    logger.info(
        "Received request: %d spending, %d income periods",
        len(req.spending), len(req.income),
    )

    if req.code != cfg.request_code:
        logger.warning("Rejected request with code %r", req.code)
        raise HTTPException(status_code=400, detail="Your request is rejected.")

    try:
        result = resolve_irr(
            req.spending,
            req.income,
            tolerance=cfg.root_imag_tolerance,
            max_periods=cfg.max_periods,
        )
    except ValueError as e:
        logger.warning("Invalid cash-flow series: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    if result.ok:
        return IRRResponse(status=int(result.status), irr=result.irr)

    body = IRRResponse(status=int(result.status), error=result.error)
    if not result.undefined_rate:
        return JSONResponse(status_code=500, content=body.model_dump())
    return body
