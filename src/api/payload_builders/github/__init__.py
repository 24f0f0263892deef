"""Payload builders GitHub."""

from .dispatch import build_dispatch_request

__all__ = ["build_dispatch_request"]
