"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers (JSON:API endpoints, /cable websocket, /metrics)
- dependencies/: content negotiation and caller resolution
- realtime/: websocket adapter for the subscriber connection port
- errors.py: domain/framework errors → JSON:API error documents
"""
