"""Bootstrap the message bus with handlers, unit of work and collaborators."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from caretrack import config
from caretrack.adapters.clock import SystemClock
from caretrack.adapters.db.engine import make_engine
from caretrack.adapters.id_generators import ULIDGenerator
from caretrack.adapters.unit_of_work import SqlAlchemyUnitOfWork
from caretrack.interfaces.unit_of_work import AbstractUnitOfWork
from caretrack.service_layer.handlers import COMMAND_HANDLERS
from caretrack.service_layer.messagebus import MessageBus
from caretrack.service_layer.patient_list import PatientListView

if TYPE_CHECKING:
    from caretrack.interfaces.clock import Clock
    from caretrack.interfaces.id_generator import IdGenerator
    from caretrack.service_layer.commands import Command

logger = logging.getLogger(__name__)


class SchemaOutOfDateError(Exception):
    """Raised when the database schema is behind the packaged migrations."""

    def __init__(self, current: str, head: str | None) -> None:
        super().__init__(
            f"Database schema is at {current} but the latest revision is {head}."
        )
        self.current = current
        self.head = head


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus
    patient_list: PatientListView
    clock: Clock


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: Mapping[type[Command], Callable[..., object]],
    *,
    patient_list: PatientListView | None = None,
    id_generator: IdGenerator | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies.

    Each handler receives only the dependencies its signature names, out of
    ``uow``, ``patient_list`` and ``id_generator``.
    """
    dependencies = {
        "uow": uow,
        "patient_list": patient_list if patient_list is not None else PatientListView(),
        "id_generator": id_generator if id_generator is not None else ULIDGenerator(),
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def ensure_schema(url: str) -> None:
    """Create the schema on a fresh database; refuse to run on a stale one.

    A database with no Alembic revision is upgraded to head automatically. A
    database at an older revision is left alone so the user can back it up
    and run ``caretrack db upgrade`` deliberately.

    Raises:
        SchemaOutOfDateError: If the database is behind the packaged head.
    """
    cfg = config.build_alembic_config(db_url=url)
    head = ScriptDirectory.from_config(cfg).get_current_head()
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            current = MigrationContext.configure(conn).get_current_revision()
    finally:
        engine.dispose()

    if current is None:
        logger.info("Initialising new database schema")
        command.upgrade(cfg, "head")
    elif current != head:
        raise SchemaOutOfDateError(current, head)


def bootstrap(url: str | None = None, clock: Clock | None = None) -> AppContainer:
    """Bootstrap the message bus with handlers and unit of work.

    Args:
        url: Database URL; defaults to :func:`caretrack.config.get_db_url`.
        clock: Source of "today" for date validation; defaults to the system clock.
    """
    url = url or config.get_db_url()
    ensure_schema(url)

    uow = build_write_uow(url)
    patient_list = PatientListView()
    message_bus = build_message_bus(
        uow,
        COMMAND_HANDLERS,
        patient_list=patient_list,
        id_generator=ULIDGenerator(),
    )

    return AppContainer(
        message_bus=message_bus,
        patient_list=patient_list,
        clock=clock or SystemClock(),
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return lambda message: handler(message, **deps)
