from __future__ import annotations

from dataclasses import dataclass, replace

from plainpad.domain.buffer import TextBuffer
from plainpad.domain.errors import DialogClosed, EditorError
from plainpad.domain.events import (
    Command,
    Edit,
    Event,
    FileOpened,
    FileSaved,
    LoadFile,
    New,
    OpenRequested,
    PickAndLoad,
    SaveFile,
    SaveRequested,
    Startup,
)
from plainpad.domain.models import DocumentState


@dataclass(frozen=True)
class Transition:
    state: DocumentState
    command: Command | None = None


def initial_state() -> DocumentState:
    return DocumentState()


def update(state: DocumentState, event: Event) -> Transition:
    """
    Pure state transition: (state, event) -> (next state, at most one command).

    Failed completions only ever touch `last_error`; a closed dialog leaves the
    state exactly as it was.
    """
    if isinstance(event, Edit):
        return Transition(replace(state, buffer=state.buffer.apply(event.action), last_error=None))

    if isinstance(event, New):
        return Transition(
            replace(
                state,
                current_path=None,
                buffer=TextBuffer(),
                generation=state.generation + 1,
            )
        )

    if isinstance(event, OpenRequested):
        return Transition(state, PickAndLoad())

    if isinstance(event, SaveRequested):
        return Transition(state, SaveFile(state.current_path, state.buffer.text, state.generation))

    if isinstance(event, Startup):
        return Transition(
            replace(state, current_path=None, buffer=TextBuffer()), LoadFile(event.default_path)
        )

    if isinstance(event, FileOpened):
        if isinstance(event.result, EditorError):
            return Transition(_failed(state, event.result))
        loaded = event.result
        return Transition(
            replace(
                state,
                current_path=loaded.path,
                buffer=TextBuffer.with_text(loaded.content),
                last_error=None,
                generation=state.generation + 1,
            )
        )

    if isinstance(event, FileSaved):
        if isinstance(event.result, EditorError):
            return Transition(_failed(state, event.result))
        if event.generation != state.generation:
            # document replaced by New or Open while the save ran
            return Transition(replace(state, last_error=None))
        return Transition(replace(state, current_path=event.result, last_error=None))

    raise TypeError(f"Unknown event: {event!r}")


def _failed(state: DocumentState, error: EditorError) -> DocumentState:
    if isinstance(error, DialogClosed):
        return state
    return replace(state, last_error=error)
