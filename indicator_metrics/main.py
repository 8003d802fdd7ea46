"""FastAPI application for the indicator metrics engine."""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from indicator_metrics import __version__
from indicator_metrics.config.settings import get_settings
from indicator_metrics.engine import MetricsEngine

settings = get_settings()

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Indicator Metrics API", version=__version__)

# CORS: allow the reporting dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

engine = MetricsEngine()


class ClassifyRequest(BaseModel):
    indicators: list[Any] = Field(default_factory=list)
    implementation_costs: dict[str, float] = Field(default_factory=dict)


class ClassifyResponse(BaseModel):
    results: dict[str, list[dict[str, Any]]]
    counts: dict[str, int]


class IndicatorRequest(BaseModel):
    indicator: dict[str, Any]
    implementation_cost: Optional[float] = None


class IndicatorResponse(BaseModel):
    category: Optional[str] = None
    metrics: Optional[dict[str, Any]] = None


@app.post("/api/metrics/classify", response_model=ClassifyResponse)
async def classify(body: ClassifyRequest):
    """Classify a batch of indicators and compute each one's metrics."""
    results = engine.classify(body.indicators, body.implementation_costs)
    logger.info("Classified %d indicators", len(body.indicators))
    return ClassifyResponse(
        results={code: [m.to_dict() for m in items] for code, items in results.items()},
        counts={code: len(items) for code, items in results.items()},
    )


@app.post("/api/metrics/indicator", response_model=IndicatorResponse)
async def calculate_indicator(body: IndicatorRequest):
    """Compute the metrics of a single indicator."""
    metrics = engine.calculate(body.indicator, implementation_cost=body.implementation_cost)
    if metrics is None:
        return IndicatorResponse()
    return IndicatorResponse(category=metrics.category.value, metrics=metrics.to_dict())


@app.get("/health")
async def health():
    return {"status": "ok"}
