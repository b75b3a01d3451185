import pytest

from edlpy.diagnostics import Diagnostic
from edlpy.lint import LintConfidence, LintDomain
from edlpy.service import (
    NO_EDL_DOCUMENT_MESSAGE,
    VALIDATE_FILE_COMMAND,
    VALIDATION_COMPLETED_MESSAGE,
    EdlLanguageService,
)
from edlpy.text import TextPosition, TextRange
from edlpy.workspace import WindowMessage, Workspace

URI = "file:///machines/door.edl"


def test_activate_registers_validate_command() -> None:
    workspace = Workspace()

    service = EdlLanguageService.activate(workspace)

    assert workspace.has_command(VALIDATE_FILE_COMMAND)
    assert workspace.on_did_change_configuration.listener_count == 1
    service.dispose()


def test_validate_command_validates_active_edl_document() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "emit(null)")

    result = workspace.execute_command(VALIDATE_FILE_COMMAND)

    assert isinstance(result, tuple)
    assert [d.code for d in result] == ["missing-semicolon", "undefined-event"]
    assert workspace.messages[-1] == WindowMessage(level="information", text=VALIDATION_COMPLETED_MESSAGE)
    assert service.diagnostics_for(URI) == result


def test_validate_command_warns_without_edl_document() -> None:
    workspace = Workspace()
    EdlLanguageService.activate(workspace)

    assert workspace.execute_command(VALIDATE_FILE_COMMAND) is None

    workspace.open_document("file:///readme.md", "# notes", language_id="markdown")
    assert workspace.execute_command(VALIDATE_FILE_COMMAND) is None

    assert workspace.messages == [
        WindowMessage(level="warning", text=NO_EDL_DOCUMENT_MESSAGE),
        WindowMessage(level="warning", text=NO_EDL_DOCUMENT_MESSAGE),
    ]


def test_edl_configuration_change_rescans_open_documents() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "event Bad {")
    assert len(service.diagnostics_for(URI)) == 2

    workspace.update_configuration({"edl.linting.enabled": False})
    assert service.diagnostics_for(URI) == ()

    workspace.update_configuration({"edl.linting.enabled": True})
    assert [d.code for d in service.diagnostics_for(URI)] == ["missing-bracket", "invalid-event-name"]


def test_unrelated_configuration_change_does_not_rescan() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "event Bad")
    published: list[str] = []
    service.linter.collection.on_did_change_diagnostics.subscribe(published.append)

    workspace.update_configuration({"editor.tabSize": 4})

    assert published == []


def test_rejected_configuration_update_keeps_linting_alive() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "event Bad {")
    events: list[object] = []
    workspace.on_did_change_configuration.subscribe(events.append)

    with pytest.raises(ValueError, match="edl.linting.enabled"):
        workspace.update_configuration({"edl.linting.enabled": "no"})

    assert events == []
    assert workspace.get_configuration().linting_enabled is True
    workspace.change_document(URI, "state idle")
    assert service.diagnostics_for(URI) == ()
    workspace.change_document(URI, "event Bad {")
    assert [d.code for d in service.diagnostics_for(URI)] == ["missing-bracket", "invalid-event-name"]

def test_edit_sequence_depends_only_on_latest_text() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "event Bad {\nidle -> idle")

    workspace.change_document(URI, "state idle\n\t emit(null)")

    assert [(d.range.start.line, d.code) for d in service.diagnostics_for(URI)] == [
        (1, "missing-semicolon"),
        (1, "undefined-event"),
        (1, "mixed-indentation"),
    ]


def test_dispose_unregisters_everything() -> None:
    workspace = Workspace()
    with EdlLanguageService.activate(workspace) as service:
        workspace.open_document(URI, "event Bad")

    assert not workspace.has_command(VALIDATE_FILE_COMMAND)
    assert workspace.on_did_change_configuration.listener_count == 0
    assert workspace.on_did_open_text_document.listener_count == 0
    assert service.diagnostics_for(URI) == ()


class _ExplodingRule:
    code: str = "exploding-rule"
    name: str = "explodingRule"
    domain: LintDomain = "style"
    confidence: LintConfidence = "policy"

    def run(self, line: str, line_number: int) -> list[Diagnostic]:
        raise RuntimeError("boom")


def test_activation_failure_leaves_workspace_clean() -> None:
    workspace = Workspace()
    workspace.register_command(VALIDATE_FILE_COMMAND, lambda: None)

    with pytest.raises(ValueError, match="already registered"):
        EdlLanguageService.activate(workspace)

    assert workspace.on_did_open_text_document.listener_count == 0
    assert workspace.on_did_change_configuration.listener_count == 0


def test_activation_failure_during_initial_scan_releases_listeners() -> None:
    workspace = Workspace()
    workspace.open_document(URI, "state idle")

    with pytest.raises(RuntimeError, match="boom"):
        EdlLanguageService.activate(workspace, rules=(_ExplodingRule(),))

    assert not workspace.has_command(VALIDATE_FILE_COMMAND)
    assert workspace.on_did_change_text_document.listener_count == 0


def test_completions_respect_intellisense_setting() -> None:
    workspace = Workspace({"edl.intellisense.enabled": False})
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "event ")

    assert service.completions(URI, TextPosition(0, 6)) == []


def test_completions_include_context_snippets() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "event door_opened\nstate idle")

    labels = [item.label for item in service.completions(URI, TextPosition(0, 17))]
    assert "on_trigger" in labels
    assert "transition_to" not in labels

    labels = [item.label for item in service.completions(URI, TextPosition(1, 5))]
    assert "transition_to" in labels
    assert "on_trigger" not in labels


def test_hover_returns_documentation_for_builtin() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document(URI, "emit(user_login);")

    hover = service.hover(URI, TextPosition(0, 2))

    assert hover is not None
    assert hover.contents.startswith("**emit(event, data?)**")
    assert hover.range == TextRange.on_line(0, 0, 4)
    assert service.hover(URI, TextPosition(0, 8)) is None


def test_completion_and_hover_skip_non_edl_documents() -> None:
    workspace = Workspace()
    service = EdlLanguageService.activate(workspace)
    workspace.open_document("file:///notes.txt", "emit", language_id="plaintext")

    assert service.completions("file:///notes.txt", TextPosition(0, 4)) == []
    assert service.hover("file:///notes.txt", TextPosition(0, 1)) is None
