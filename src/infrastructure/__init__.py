"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- persistence/: SQLAlchemy models, database lifecycle, repositories
  (SQL-backed and in-memory)
- concurrency/: Per-event admission lock serializing capacity decisions
- events/: In-memory event bus and the logging subscriber
- logging/: structlog console adapter
- security/: JWT access token validation

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
