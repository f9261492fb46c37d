"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy models, repositories, unit of work
- cache/: Redis adapter and response cache service
- security/: bcrypt password hashing, JWT tokens
- logging/: structlog console adapter
- spreadsheet/: openpyxl workbook reader

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
