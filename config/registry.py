"""Hook registry for collaborators the scheduler notifies but does not own.

The only hook today is the invite sender under ``INVITE_KEY``; it is called
as ``hook(session=..., action=...)`` after a slot is confirmed.
"""
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

Hook = Callable[..., Any]

INVITE_KEY = "hooks.send_invite"

_HOOKS: Dict[str, Hook] = {}


def bind_hook(key: str, fn: Hook) -> Optional[Hook]:
    """Bind ``fn`` under ``key`` and return the hook it replaced, if any.

    Raises:
        TypeError: If ``fn`` is not callable.
    """

    if not callable(fn):
        raise TypeError(f"Hook for {key} must be callable, got {type(fn).__name__}")
    previous = _HOOKS.get(key)
    _HOOKS[key] = fn
    return previous


def get_hook(key: str) -> Hook:
    """Return the hook bound under ``key``.

    Raises:
        KeyError: If nothing is bound; callers treat that as "notifications off".
    """

    try:
        return _HOOKS[key]
    except KeyError:
        raise KeyError(f"No hook bound for {key}") from None


def unbind_hook(key: str) -> None:
    _HOOKS.pop(key, None)


@contextmanager
def bound_hook(key: str, fn: Hook) -> Iterator[Hook]:
    """Bind ``fn`` for the duration of the block, then restore the previous hook."""

    previous = bind_hook(key, fn)
    try:
        yield fn
    finally:
        if previous is None:
            unbind_hook(key)
        else:
            _HOOKS[key] = previous
