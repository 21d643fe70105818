"""
Application package initializer.

The service is organised into ``core`` (configuration, logging,
errors, storage, authentication), ``schemas`` (pydantic records and
payloads), ``services`` (business rules) and ``api`` (versioned
FastAPI routers).
"""

from .main import app  # noqa: F401
