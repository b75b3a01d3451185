"""Host model and validation wiring for open EDL documents."""

from edlpy.workspace.collection import DiagnosticCollection
from edlpy.workspace.document import (
    EDL_LANGUAGE_ID,
    ConfigurationChangeEvent,
    DocumentChangeEvent,
    TextDocument,
)
from edlpy.workspace.events import EventEmitter, Listener, Subscription
from edlpy.workspace.host import WindowMessage, Workspace
from edlpy.workspace.linter import EdlLinter

__all__ = [
    "EDL_LANGUAGE_ID",
    "ConfigurationChangeEvent",
    "DiagnosticCollection",
    "DocumentChangeEvent",
    "EdlLinter",
    "EventEmitter",
    "Listener",
    "Subscription",
    "TextDocument",
    "WindowMessage",
    "Workspace",
]
