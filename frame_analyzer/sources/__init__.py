"""Trace payload sources."""

from .payload_session import PayloadSession

__all__ = ["PayloadSession"]
