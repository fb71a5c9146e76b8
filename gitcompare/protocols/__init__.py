"""Protocol interfaces for the application."""

from .git_manager_protocol import GitManagerProtocol
from .host_dialect_protocol import HostDialectProtocol

__all__ = ["GitManagerProtocol", "HostDialectProtocol"]
