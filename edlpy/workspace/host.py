"""In-process model of the host editor: documents, configuration, commands."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import logging
from typing import Any, Literal, TypeAlias

from edlpy.settings import CONFIGURATION_SECTION, EdlSettings
from edlpy.workspace.document import (
    EDL_LANGUAGE_ID,
    ConfigurationChangeEvent,
    DocumentChangeEvent,
    TextDocument,
)
from edlpy.workspace.events import EventEmitter, Subscription

logger = logging.getLogger(__name__)

MessageLevel: TypeAlias = Literal["information", "warning", "error"]
CommandHandler: TypeAlias = Callable[[], object]


@dataclass(frozen=True, slots=True)
class WindowMessage:
    level: MessageLevel
    text: str


class Workspace:
    """Open documents plus the lifecycle events the language service listens to.

    Configuration is stored under full dotted keys such as `edl.linting.enabled`;
    nested mappings are flattened on the way in.
    """

    def __init__(self, configuration: Mapping[str, Any] | None = None) -> None:
        self._documents: dict[str, TextDocument] = {}
        self._configuration: dict[str, Any] = _flatten(configuration or {})
        _settings_from(self._configuration)
        self._commands: dict[str, CommandHandler] = {}
        self._active_uri: str | None = None
        self.messages: list[WindowMessage] = []

        self.on_did_open_text_document: EventEmitter[TextDocument] = EventEmitter()
        self.on_did_change_text_document: EventEmitter[DocumentChangeEvent] = EventEmitter()
        self.on_did_close_text_document: EventEmitter[TextDocument] = EventEmitter()
        self.on_did_change_configuration: EventEmitter[ConfigurationChangeEvent] = EventEmitter()

    @property
    def text_documents(self) -> tuple[TextDocument, ...]:
        return tuple(self._documents.values())

    @property
    def active_document(self) -> TextDocument | None:
        if self._active_uri is None:
            return None
        return self._documents.get(self._active_uri)

    def get_document(self, uri: str) -> TextDocument:
        document = self._documents.get(uri)
        if document is None:
            raise KeyError(f"Document `{uri}` is not open")
        return document

    def open_document(self, uri: str, text: str, language_id: str = EDL_LANGUAGE_ID) -> TextDocument:
        if uri in self._documents:
            raise ValueError(f"Document `{uri}` is already open")
        document = TextDocument(uri=uri, text=text, language_id=language_id)
        self._documents[uri] = document
        self._active_uri = uri
        self.on_did_open_text_document.fire(document)
        return document

    def change_document(self, uri: str, text: str) -> TextDocument:
        previous = self.get_document(uri)
        document = previous.with_text(text)
        self._documents[uri] = document
        self.on_did_change_text_document.fire(
            DocumentChangeEvent(document=document, previous_version=previous.version)
        )
        return document

    def close_document(self, uri: str) -> None:
        document = self._documents.pop(uri, None)
        if document is None:
            raise KeyError(f"Document `{uri}` is not open")
        if self._active_uri == uri:
            self._active_uri = None
        self.on_did_close_text_document.fire(document)

    def set_active_document(self, uri: str | None) -> None:
        if uri is not None:
            self.get_document(uri)
        self._active_uri = uri

    def get_configuration(self) -> EdlSettings:
        return _settings_from(self._configuration)

    def update_configuration(self, values: Mapping[str, Any]) -> None:
        """Merge `values` into the configuration and announce the keys whose value changed.

        Nested mappings are flattened to dotted keys. An update that would leave the
        `edl` section unreadable raises `ValueError` and is not applied.
        """
        updates = _flatten(values)
        candidate = {**self._configuration, **updates}
        _settings_from(candidate)
        changed = frozenset(key for key, value in updates.items() if self._configuration.get(key) != value)
        self._configuration = candidate
        if changed:
            self.on_did_change_configuration.fire(ConfigurationChangeEvent(changed_keys=changed))

    def register_command(self, name: str, handler: CommandHandler) -> Subscription:
        if name in self._commands:
            raise ValueError(f"Command `{name}` is already registered")
        self._commands[name] = handler
        return Subscription(lambda: self._commands.pop(name, None))

    def has_command(self, name: str) -> bool:
        return name in self._commands

    def execute_command(self, name: str) -> object:
        handler = self._commands.get(name)
        if handler is None:
            raise KeyError(f"Command `{name}` is not registered")
        return handler()

    def show_information_message(self, text: str) -> None:
        logger.info(text)
        self.messages.append(WindowMessage(level="information", text=text))

    def show_warning_message(self, text: str) -> None:
        logger.warning(text)
        self.messages.append(WindowMessage(level="warning", text=text))


def _flatten(values: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in values.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def _settings_from(configuration: Mapping[str, Any]) -> EdlSettings:
    prefix = f"{CONFIGURATION_SECTION}."
    section = {key[len(prefix) :]: value for key, value in configuration.items() if key.startswith(prefix)}
    return EdlSettings.from_mapping(section)
