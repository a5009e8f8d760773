"""Package manager registry.

This module exports the descriptor table and lookup helpers.
"""

from frontier.managers.registry import (
    MANAGERS,
    ManagerDescriptor,
    resolve_manager,
    supported_managers,
)

__all__ = ["MANAGERS", "ManagerDescriptor", "resolve_manager", "supported_managers"]
