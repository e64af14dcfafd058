"""
Notes API.

- core/: Configuration, logging, database, validation, error handling
- models/: SQLAlchemy models
- repositories/: Data access (persistence gateway)
- schemas/: Pydantic request/response schemas
- services/: Business logic
- api/: FastAPI routers
"""

__version__ = "0.1.0"
