"""Validation trigger: re-lints EDL documents on workspace events."""

from __future__ import annotations

from collections.abc import Sequence
from contextlib import ExitStack
import logging
from types import TracebackType
from typing import TYPE_CHECKING, TypeVar

from edlpy.lint import default_lint_rules, validate_lint_rules
from edlpy.pipeline import validate_document as _validate_document
from edlpy.workspace.collection import DiagnosticCollection
from edlpy.workspace.document import EDL_LANGUAGE_ID, DocumentChangeEvent, TextDocument
from edlpy.workspace.events import EventEmitter, Listener

if TYPE_CHECKING:
    from edlpy.diagnostics import Diagnostic
    from edlpy.lint import LintRule
    from edlpy.workspace.host import Workspace

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EdlLinter:
    """Owns the diagnostic collection and the document listeners feeding it.

    Listeners and the collection are released together by `dispose()`. If
    construction fails part-way, whatever was acquired is released before the
    error propagates.
    """

    def __init__(
        self,
        workspace: Workspace,
        *,
        rules: Sequence[LintRule] | None = None,
        collection: DiagnosticCollection | None = None,
    ) -> None:
        self._workspace = workspace
        self._rules = tuple(rules) if rules is not None else default_lint_rules()
        self._stack = ExitStack()
        try:
            validate_lint_rules(self._rules)
            self.collection = collection if collection is not None else DiagnosticCollection(EDL_LANGUAGE_ID)
            self._stack.callback(self.collection.dispose)
            self._listen(workspace.on_did_open_text_document, self._on_did_open)
            self._listen(workspace.on_did_change_text_document, self._on_did_change)
            self._listen(workspace.on_did_close_text_document, self._on_did_close)
            for document in workspace.text_documents:
                if document.is_edl:
                    self.validate_document(document)
        except BaseException:
            self._stack.close()
            raise

    def validate_document(self, document: TextDocument) -> tuple[Diagnostic, ...]:
        """Re-scan `document` and replace its stored diagnostics."""
        settings = self._workspace.get_configuration()
        diagnostics = _validate_document(document.uri, document.text, settings, rules=self._rules)
        self.collection.set(document.uri, diagnostics, version=document.version)
        return self.collection.get(document.uri)

    def update_configuration(self) -> None:
        """Re-validate every open EDL document after a settings change."""
        for document in self._workspace.text_documents:
            if document.is_edl:
                self.validate_document(document)

    def dispose(self) -> None:
        self._stack.close()

    def __enter__(self) -> EdlLinter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()

    def _listen(self, emitter: EventEmitter[T], listener: Listener[T]) -> None:
        subscription = emitter.subscribe(listener)
        self._stack.callback(subscription.dispose)

    def _on_did_open(self, document: TextDocument) -> None:
        if document.is_edl:
            self.validate_document(document)

    def _on_did_change(self, event: DocumentChangeEvent) -> None:
        if event.document.is_edl:
            logger.debug(
                "Document %s changed (v%d -> v%d)",
                event.document.uri,
                event.previous_version,
                event.document.version,
            )
            self.validate_document(event.document)

    def _on_did_close(self, document: TextDocument) -> None:
        self.collection.delete(document.uri)
