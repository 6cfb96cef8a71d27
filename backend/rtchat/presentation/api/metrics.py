"""
Prometheus scrape endpoint.

GET /metrics → Prometheus text exposition of observability/metrics.py
"""

from fastapi import APIRouter, Response

from rtchat.observability.metrics import get_metrics_content

router = APIRouter(tags=["observability"])


@router.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)

