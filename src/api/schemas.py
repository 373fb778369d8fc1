"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field


# ---- Request schemas ----

class IRRRequest(BaseModel):
    spending: list[float] = Field(..., description="Outflow per period, index 0 = today")
    income: list[float] = Field(..., description="Inflow per period, same length as spending")
    code: str = Field(..., description="Request code; must match the server's configured code")


# ---- Response schemas ----

class IRRResponse(BaseModel):
    status: int  # 0 = success, 1 = NaN rate or internal failure
    irr: float | None = None  # Percentage; null when undefined (NaN is not valid JSON)
    error: str = ""
