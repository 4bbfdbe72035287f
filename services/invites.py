"""Invite dispatch through the notification hook."""
from __future__ import annotations

import logging

from config.registry import INVITE_KEY, get_hook
from observability.logger import log_event
from scheduling.models import InterviewSession

logger = logging.getLogger(__name__)


def send_invite(session: InterviewSession, action: str) -> bool:
    """Hand a freshly scheduled session to the bound invite sender.

    Returns ``False`` when no sender is bound or the sender failed; the
    scheduling change itself has already been committed by then.
    """

    try:
        hook = get_hook(INVITE_KEY)
    except KeyError:
        log_event("invite", session.id, invite="skipped", action=action)
        return False

    try:
        hook(session=session, action=action)
    except Exception:  # noqa: BLE001
        logger.exception("Invite sender failed for interview %s", session.id)
        log_event("invite", session.id, invite="failed", action=action)
        return False

    log_event("invite", session.id, invite="sent", action=action)
    return True


__all__ = ["send_invite"]
