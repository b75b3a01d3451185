"""Centralized EDL source cases used across lint and workspace tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class EdlCase:
    name: str
    source: str
    expected_codes: tuple[str, ...] = ()


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


CLEAN_CASES: tuple[EdlCase, ...] = (
    EdlCase(name="plain_state_line", source="state idle"),
    EdlCase(name="lowercase_event_declaration", source="event user_login"),
    EdlCase(name="terminated_emit", source="emit(user_login);"),
    EdlCase(name="balanced_block_on_one_line", source="state idle { }"),
    EdlCase(name="transition_between_states", source="idle -> active"),
    EdlCase(name="empty_document", source=""),
    EdlCase(
        name="closed_machine",
        source=_dedent(
            """
            event door_opened;
            state closed { on door_opened -> open }
            emit(door_opened);
            """
        ),
    ),
)

LINE_CASES: tuple[EdlCase, ...] = (
    EdlCase(
        name="uppercase_event_opening_block",
        source="event User_Login {",
        expected_codes=("missing-bracket", "invalid-event-name"),
    ),
    EdlCase(
        name="emit_null_without_terminator",
        source="emit(null)",
        expected_codes=("missing-semicolon", "undefined-event"),
    ),
    EdlCase(name="self_transition", source="idle -> idle", expected_codes=("self-transition",)),
    EdlCase(name="long_line", source="a" * 130, expected_codes=("line-too-long",)),
    EdlCase(name="event_starting_with_digit", source="event 9lives", expected_codes=("invalid-event-name",)),
    EdlCase(name="unterminated_listen", source="  listen(user_login, on_login)", expected_codes=("missing-semicolon",)),
    EdlCase(name="spaced_schedule_call", source="schedule (cleanup, 3600)", expected_codes=("missing-semicolon",)),
    EdlCase(
        name="emit_undefined_placeholder",
        source="emit(undefined_event);",
        expected_codes=("undefined-event",),
    ),
    EdlCase(name="mixed_indentation", source="\t  state idle", expected_codes=("mixed-indentation",)),
    EdlCase(name="trailing_spaces", source="state idle  ", expected_codes=("trailing-whitespace",)),
    EdlCase(
        name="whitespace_only_mixed_line",
        source=" \t",
        expected_codes=("mixed-indentation", "trailing-whitespace"),
    ),
    EdlCase(name="two_unclosed_braces", source="state a { state b {", expected_codes=("missing-bracket",)),
)


def case_id(case: EdlCase) -> str:
    return case.name
