"""Webhook simulator for local smoke testing."""

from .sim import Sim

__all__ = ["Sim"]
