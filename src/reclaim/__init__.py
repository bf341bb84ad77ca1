"""Reclaim: disk-space reclamation for Windows caches, logs and crash dumps."""

__version__ = "1.0.0"
