"""Services package.

Exposes stateless service classes and shared result types used by the
MCP handlers and the command line.
"""


# Base utilities
from .base import (
    ErrorCode,
    ServiceError,
    ServiceResult,
)

# Discovery
from .discovery import DiscoveredFiles, SourceFinder

# Services
from .doctests import DocTestService

__all__ = [
    # Base
    "ServiceResult",
    "ServiceError",
    "ErrorCode",
    # Discovery
    "SourceFinder",
    "DiscoveredFiles",
    # Services
    "DocTestService",
]
