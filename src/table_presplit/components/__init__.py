"""Admin client implementations."""

from .memory_admin import InMemoryAdmin

__all__ = ["InMemoryAdmin"]
