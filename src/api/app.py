"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config import settings
from src.api.routes import irr

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="IRR Resolver",
    description="Internal rate of return from spending and income series",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Origin", "Content-Type", "Accept"],
    expose_headers=["Content-Length"],
    max_age=12 * 60 * 60,
)

app.include_router(irr.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
