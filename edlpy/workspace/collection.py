"""Per-document diagnostic store."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from edlpy.diagnostics import Diagnostic
from edlpy.workspace.events import EventEmitter


class DiagnosticCollection:
    """Maps document uri to its current diagnostics.

    Every `set` replaces the whole list for that uri. Writes tagged with a
    document version older than the stored one are ignored.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._entries: dict[str, tuple[int | None, tuple[Diagnostic, ...]]] = {}
        self._disposed = False
        self.on_did_change_diagnostics: EventEmitter[str] = EventEmitter()

    def set(self, uri: str, diagnostics: Iterable[Diagnostic], *, version: int | None = None) -> bool:
        self._check_alive()
        current = self._entries.get(uri)
        if current is not None and version is not None and current[0] is not None and version < current[0]:
            return False
        self._entries[uri] = (version, tuple(diagnostics))
        self.on_did_change_diagnostics.fire(uri)
        return True

    def get(self, uri: str) -> tuple[Diagnostic, ...]:
        entry = self._entries.get(uri)
        return entry[1] if entry is not None else ()

    def version_of(self, uri: str) -> int | None:
        entry = self._entries.get(uri)
        return entry[0] if entry is not None else None

    def delete(self, uri: str) -> None:
        self._check_alive()
        if self._entries.pop(uri, None) is not None:
            self.on_did_change_diagnostics.fire(uri)

    def clear(self) -> None:
        uris = tuple(self._entries)
        self._entries.clear()
        for uri in uris:
            self.on_did_change_diagnostics.fire(uri)

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self.clear()
        self.on_did_change_diagnostics.dispose()
        self._disposed = True

    def __contains__(self, uri: object) -> bool:
        return uri in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def _check_alive(self) -> None:
        if self._disposed:
            raise RuntimeError(f"DiagnosticCollection `{self.name}` is disposed")
