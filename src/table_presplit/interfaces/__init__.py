"""Protocols for external collaborators."""

from .admin import AdminClient

__all__ = ["AdminClient"]
