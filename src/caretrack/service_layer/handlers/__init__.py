"""Service layer handlers."""

from collections.abc import Callable

from .caring_session_handlers import COMMAND_HANDLERS as SESSION_COMMAND_HANDLERS
from .patient_handlers import COMMAND_HANDLERS as PATIENT_COMMAND_HANDLERS

__all__ = ["COMMAND_HANDLERS"]

COMMAND_HANDLERS: dict[type, Callable[..., object]] = {
    **PATIENT_COMMAND_HANDLERS,
    **SESSION_COMMAND_HANDLERS,
}
