"""Observability utilities for the interview scheduling service."""
from .logger import log_event

__all__ = ["log_event"]
