"""EDL keywords, built-ins and types with their documentation."""

from types import MappingProxyType
from typing import Final, Mapping

KEYWORDS: Final[tuple[str, ...]] = (
    "event",
    "trigger",
    "action",
    "condition",
    "state",
    "transition",
    "handler",
    "listener",
    "async",
    "sync",
    "parallel",
    "sequential",
    "priority",
    "timeout",
    "if",
    "else",
    "while",
    "for",
    "do",
    "break",
    "continue",
    "return",
    "switch",
    "case",
    "default",
    "import",
    "export",
    "module",
    "namespace",
    "use",
    "include",
)

BUILTIN_FUNCTIONS: Final[tuple[str, ...]] = (
    "emit",
    "listen",
    "schedule",
    "delay",
    "cancel",
    "log",
    "debug",
    "error",
    "warn",
    "info",
)

TYPES: Final[tuple[str, ...]] = (
    "int",
    "float",
    "string",
    "bool",
    "void",
    "any",
    "Event",
    "State",
    "Transition",
    "Handler",
    "Timer",
    "Queue",
    "Channel",
)

KEYWORD_DOCS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "event": "Defines an event that can be triggered in the system",
        "trigger": "Activates an event or condition",
        "action": "Defines an action to be executed",
        "condition": "Specifies a condition for event handling",
        "state": "Defines a state in a state machine",
        "transition": "Defines a transition between states",
        "handler": "Defines an event handler function",
        "listener": "Creates an event listener",
        "async": "Marks a function as asynchronous",
        "sync": "Marks a function as synchronous",
        "parallel": "Executes operations in parallel",
        "sequential": "Executes operations sequentially",
    }
)

FUNCTION_DOCS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "emit": "Emits an event to the system",
        "listen": "Listens for specific events",
        "schedule": "Schedules an event for future execution",
        "delay": "Delays execution for a specified time",
        "cancel": "Cancels a scheduled event",
        "log": "Logs a message",
        "debug": "Logs a debug message",
        "error": "Logs an error message",
        "warn": "Logs a warning message",
        "info": "Logs an info message",
    }
)

TYPE_DOCS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "Event": "Represents an event object",
        "State": "Represents a state in a state machine",
        "Transition": "Represents a state transition",
        "Handler": "Represents an event handler",
        "Timer": "Represents a timer object",
        "Queue": "Represents an event queue",
        "Channel": "Represents a communication channel",
    }
)

DEFAULT_KEYWORD_DOC: Final[str] = "EDL keyword"
DEFAULT_FUNCTION_DOC: Final[str] = "EDL built-in function"
DEFAULT_TYPE_DOC: Final[str] = "EDL type"

HOVER_DOCS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "event": (
            "**event** - Defines an event that can be triggered in the system\n\n"
            "```edl\nevent user_login {\n    user_id: string\n    timestamp: int\n}\n```"
        ),
        "trigger": "**trigger** - Activates an event or condition\n\n```edl\ntrigger user_login_event\n```",
        "state": "**state** - Defines a state in a state machine\n\n```edl\nstate idle {\n    on_event -> active\n}\n```",
        "transition": (
            "**transition** - Defines a transition between states\n\n"
            "```edl\ntransition idle -> active on user_input\n```"
        ),
        "emit": (
            "**emit(event, data?)** - Emits an event to the system\n\n"
            '```edl\nemit(user_login, { user_id: "123" })\n```'
        ),
        "listen": (
            "**listen(event, handler)** - Listens for specific events\n\n"
            "```edl\nlisten(user_login, handle_login)\n```"
        ),
        "schedule": (
            "**schedule(event, delay)** - Schedules an event for future execution\n\n"
            "```edl\nschedule(cleanup_event, 3600) // 1 hour delay\n```"
        ),
        "delay": (
            "**delay(milliseconds)** - Delays execution for a specified time\n\n"
            "```edl\ndelay(1000) // Wait 1 second\n```"
        ),
        "Event": "**Event** - Base type for all events in the system\n\nContains timestamp, type, and data properties",
        "State": "**State** - Represents a state in a state machine\n\nContains name, transitions, and handlers",
        "Handler": (
            "**Handler** - Function type for event handlers\n\n"
            "```edl\nHandler<EventType> = (event: EventType) -> void\n```"
        ),
        "->": "**->** - Event flow operator\n\nDefines the flow from one event to another",
        "=>": "**=>** - Function arrow operator\n\nUsed in lambda expressions and function definitions",
        "<-": "**<-** - Reverse flow operator\n\nDefines reverse event flow or data binding",
        "|>": "**|>** - Pipe operator\n\nPipes data through a series of transformations",
    }
)
