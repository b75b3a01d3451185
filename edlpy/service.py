"""Language service activation: linter, command and configuration wiring."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import ExitStack
import logging
from types import TracebackType
from typing import TYPE_CHECKING, Final

from edlpy.language import CompletionItem, Hover, provide_completions, provide_hover
from edlpy.settings import CONFIGURATION_SECTION
from edlpy.text import TextPosition
from edlpy.workspace import ConfigurationChangeEvent, EdlLinter, Workspace

if TYPE_CHECKING:
    from edlpy.diagnostics import Diagnostic
    from edlpy.lint import LintRule

logger = logging.getLogger(__name__)

VALIDATE_FILE_COMMAND: Final[str] = "edl.validateFile"
VALIDATION_COMPLETED_MESSAGE: Final[str] = "EDL file validation completed!"
NO_EDL_DOCUMENT_MESSAGE: Final[str] = "Please open an EDL file to validate."


class EdlLanguageService:
    """Everything the host acquires on activation, released together on dispose."""

    def __init__(self, workspace: Workspace, *, rules: Sequence[LintRule] | None = None) -> None:
        self.workspace = workspace
        self._stack = ExitStack()
        try:
            self.linter = self._stack.enter_context(EdlLinter(workspace, rules=rules))
            command = workspace.register_command(VALIDATE_FILE_COMMAND, self.validate_active_document)
            self._stack.callback(command.dispose)
            configuration = workspace.on_did_change_configuration.subscribe(self._on_did_change_configuration)
            self._stack.callback(configuration.dispose)
        except BaseException:
            self._stack.close()
            raise
        logger.info("EDL language support is now active")

    @classmethod
    def activate(cls, workspace: Workspace, *, rules: Sequence[LintRule] | None = None) -> EdlLanguageService:
        return cls(workspace, rules=rules)

    def validate_active_document(self) -> tuple[Diagnostic, ...] | None:
        """Handler for `edl.validateFile`."""
        document = self.workspace.active_document
        if document is None or not document.is_edl:
            self.workspace.show_warning_message(NO_EDL_DOCUMENT_MESSAGE)
            return None
        diagnostics = self.linter.validate_document(document)
        self.workspace.show_information_message(VALIDATION_COMPLETED_MESSAGE)
        return diagnostics

    def diagnostics_for(self, uri: str) -> tuple[Diagnostic, ...]:
        return self.linter.collection.get(uri)

    def completions(self, uri: str, position: TextPosition) -> list[CompletionItem]:
        document = self.workspace.get_document(uri)
        if not document.is_edl:
            return []
        return provide_completions(document, position, self.workspace.get_configuration())

    def hover(self, uri: str, position: TextPosition) -> Hover | None:
        document = self.workspace.get_document(uri)
        if not document.is_edl:
            return None
        return provide_hover(document, position)

    def dispose(self) -> None:
        self._stack.close()
        logger.info("EDL language support is now deactivated")

    def __enter__(self) -> EdlLanguageService:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()

    def _on_did_change_configuration(self, event: ConfigurationChangeEvent) -> None:
        if event.affects_configuration(CONFIGURATION_SECTION):
            self.linter.update_configuration()
