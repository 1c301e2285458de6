from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from plainpad.domain.dispatcher import initial_state, update
from plainpad.domain.errors import EditorError, FileIOError
from plainpad.domain.events import (
    Command,
    Event,
    FileOpened,
    FileSaved,
    LoadFile,
    PickAndLoad,
    SaveFile,
    Startup,
)
from plainpad.domain.interfaces import IMainView
from plainpad.domain.models import DocumentState
from plainpad.services.file_gateway import FileGateway

logger = logging.getLogger(__name__)


class MainPresenter:
    """
    Owns the document state and runs the update loop for the main window.

    `dispatch` is the only writer of state. Commands returned by the dispatcher
    become asyncio tasks on `loop`; when a task finishes, its outcome comes back
    through `dispatch` as a FileOpened/FileSaved event. Only one task may be in
    flight; the view is told to disable Open/Save while one runs.
    """

    def __init__(
        self,
        view: IMainView,
        gateway: FileGateway,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        state: DocumentState | None = None,
    ) -> None:
        self.view = view
        self.gateway = gateway
        self._loop = loop
        self._state = state or initial_state()
        self._pending: asyncio.Task | None = None

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._pending is not None

    def start(self, default_path: Path) -> None:
        self.dispatch(Startup(default_path))

    def dispatch(self, event: Event) -> None:
        transition = update(self._state, event)
        self._state = transition.state
        if transition.command is not None:
            self._schedule(transition.command)
        self.view.render(self._state)

    async def wait_idle(self) -> None:
        """Suspend until no file operation is in flight (completion already dispatched)."""
        while self._pending is not None:
            await asyncio.wait({self._pending})

    # ---------- internals ----------

    def _schedule(self, command: Command) -> None:
        if self._pending is not None:
            logger.warning("Ignoring %r: another file operation is still running", command)
            return

        job, to_event = self._job_for(command)
        loop = self._loop or asyncio.get_running_loop()
        task = loop.create_task(job)
        self._pending = task
        self.view.set_busy(True)
        task.add_done_callback(lambda t: self._complete(t, to_event))

    def _job_for(
        self, command: Command
    ) -> tuple[Coroutine[Any, Any, Any], Callable[[Any], Event]]:
        if isinstance(command, LoadFile):
            return self.gateway.load(command.path), FileOpened
        if isinstance(command, PickAndLoad):
            return self.gateway.pick_and_load(), FileOpened
        if isinstance(command, SaveFile):
            return (
                self.gateway.save(command.path, command.text),
                lambda result: FileSaved(result, command.generation),
            )
        raise TypeError(f"Unknown command: {command!r}")

    def _complete(self, task: asyncio.Task, to_event: Callable[[Any], Event]) -> None:
        self._pending = None
        self.view.set_busy(False)

        if task.cancelled():
            # only happens when the loop is torn down at exit
            logger.info("File operation cancelled")
            return

        exc = task.exception()
        if exc is None:
            result = task.result()
        elif isinstance(exc, EditorError):
            result = exc
        else:
            logger.error("Unexpected failure in file operation", exc_info=exc)
            result = FileIOError.from_exception(exc)
        self.dispatch(to_event(result))
