"""Concrete image engines."""

from .pillow_engine import PillowEngine

__all__ = ["PillowEngine"]
