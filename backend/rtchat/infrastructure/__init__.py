"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: In-memory store and repositories
- realtime/: Subscription registry
- scheduling/: asyncio background/deferred task scheduler
- security/: Bearer credential codecs (opaque, JWT)
"""
