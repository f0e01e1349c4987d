"""Karaoke media delivery and shared-queue coordination server."""

__version__ = "1.0.0"
