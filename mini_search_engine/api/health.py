"""Health, statistics and metrics API endpoints."""

import time

import psutil
from fastapi import APIRouter, Depends, HTTPException

from ..config import get_settings
from ..core.engine import SearchEngine
from ..engine_instance import get_search_engine
from ..models.response import HealthResponse, MetricsResponse, StatsResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search engine service"
)
def health_check(engine: SearchEngine = Depends(get_search_engine)) -> HealthResponse:
    """
    Perform a health check on the search engine service.

    The engine is healthy if it can report its statistics.
    """
    dependencies = {"search_engine": "healthy"}

    try:
        engine.get_stats()
    except Exception:
        dependencies["search_engine"] = "unhealthy"

    status = "healthy" if all(
        state == "healthy" for state in dependencies.values()
    ) else "unhealthy"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        dependencies=dependencies
    )


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Index statistics",
    description="Number of indexed documents and distinct terms"
)
def get_stats(engine: SearchEngine = Depends(get_search_engine)) -> StatsResponse:
    """Get index and query statistics."""
    stats = engine.get_stats()
    return StatsResponse(
        document_count=stats["document_count"],
        unique_term_count=stats["unique_term_count"],
        total_queries=stats["total_queries"],
        zero_result_queries=stats["zero_result_queries"],
        average_execution_time_ms=stats["average_execution_time_ms"]
    )


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Query timing and process memory usage"
)
def get_metrics(engine: SearchEngine = Depends(get_search_engine)) -> MetricsResponse:
    """Get performance metrics for the search engine."""
    try:
        stats = engine.get_stats()
        memory_usage_mb = psutil.Process().memory_info().rss / (1024 * 1024)

        return MetricsResponse(
            total_queries=stats["total_queries"],
            average_response_time_ms=stats["average_execution_time_ms"],
            zero_result_rate=stats["zero_result_rate"],
            memory_usage_mb=memory_usage_mb
        )
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get metrics: {str(e)}"
        )
