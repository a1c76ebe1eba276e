"""Message bus implementation for handling commands."""

import logging
import threading
from collections.abc import Callable

from caretrack.domain.errors import DomainError
from caretrack.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .errors import CommandError
from .results import CommandResult

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    Routes each command to its handler and returns the handler's result. It
    also logs dispatch and handler failures, and exposes the unit of work for
    convenience.

    Commands are handled one at a time: ``handle`` holds a lock for the whole
    dispatch, so a handler's check-then-commit sequence (e.g. the overlap check
    before adding a session) cannot interleave with another command.

    Args:
        uow: The unit of work injected into the handlers. It is also available
            here for convenience.
        command_handlers: A mapping of command types to their handlers.
            Handlers are callables that accept a single command argument and
            return a CommandResult. Additional dependencies (uow, patient list,
            ...) are injected via closures or other means.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., CommandResult]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers
        self._lock = threading.Lock()

    def handle(self, cmd: Command) -> CommandResult:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's result.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            with self._lock:
                try:
                    return handler(cmd)
                except (DomainError, CommandError) as e:
                    logger.info("Command %s rejected: %s", type(cmd).__name__, e)
                    raise
                except Exception:  # pylint: disable=broad-except
                    logger.exception(
                        "Exception handling command %s with handler %s",
                        cmd,
                        handler_name,
                    )
                    raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., CommandResult]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
