"""Shared helpers for Rack Pairing."""

from rackpairing.utils.logging import setup_logger

__all__ = ["setup_logger"]
