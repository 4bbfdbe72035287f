"""Configuration package for the interview scheduling service."""
from .catalog import (
    CatalogOption,
    DurationOption,
    InterviewerEntry,
    SchedulingCatalog,
    default_catalog,
    get_catalog,
    load_catalog,
    reset_catalog,
    resolve_interviewers,
)
from .registry import INVITE_KEY, bind_hook, bound_hook, get_hook, unbind_hook
from .settings import Settings, settings

__all__ = [
    "CatalogOption",
    "DurationOption",
    "InterviewerEntry",
    "SchedulingCatalog",
    "default_catalog",
    "get_catalog",
    "load_catalog",
    "reset_catalog",
    "resolve_interviewers",
    "INVITE_KEY",
    "bind_hook",
    "bound_hook",
    "get_hook",
    "unbind_hook",
    "Settings",
    "settings",
]
