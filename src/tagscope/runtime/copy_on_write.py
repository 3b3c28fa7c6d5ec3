"""
Copy-on-write mapping used for state inherited from ancestor elements.

A `CopyOnWriteDict` starts out aliased to a source mapping and reads straight
through to it. The first mutating call snapshots the source into a private
dict; from then on every read and write goes to that private copy and the
source is never consulted again. The source itself is never written to.

Only entries are isolated. A mutable value stored under a key is shared by
reference between parent and child until one side replaces the entry.
"""

from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional


class CopyOnWriteDict(MutableMapping[str, Any]):
    """
    A string-keyed mapping that shares its source until first written.

    Example:
        parent = {"theme": "dark"}
        child = CopyOnWriteDict(parent)

        child["theme"]           # "dark", read through to parent
        child["theme"] = "light"  # snapshot taken, parent untouched
        parent["theme"]          # still "dark"
    """

    __slots__ = ("_source", "_own")

    def __init__(self, source: Mapping[str, Any]) -> None:
        self._source = source
        self._own: Optional[Dict[str, Any]] = None

    @property
    def is_materialized(self) -> bool:
        """Return True once a mutation has given this mapping its own storage."""
        return self._own is not None

    @property
    def _read(self) -> Mapping[str, Any]:
        return self._own if self._own is not None else self._source

    @property
    def _write(self) -> Dict[str, Any]:
        if self._own is None:
            self._own = dict(self._source)
        return self._own

    def __getitem__(self, key: str) -> Any:
        return self._read[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._write[key] = value

    def __delitem__(self, key: str) -> None:
        del self._write[key]

    def __contains__(self, key: object) -> bool:
        return key in self._read

    def __iter__(self) -> Iterator[str]:
        return iter(self._read)

    def __len__(self) -> int:
        return len(self._read)

    def clear(self) -> None:
        self._write.clear()

    def __repr__(self) -> str:
        state = "materialized" if self.is_materialized else "aliased"
        return f"CopyOnWriteDict({dict(self._read)!r}, {state})"
