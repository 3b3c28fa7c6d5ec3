from typing import Dict, Iterator, MutableMapping, Tuple, TypeVar

from tagscope.runtime.exceptions import DuplicateAttributeError

V = TypeVar("V")


class AttributeDict(MutableMapping[str, V]):
    """
    An insertion-ordered mapping of attribute names with case-insensitive keys.

    Lookups, assignment and deletion ignore case (simple lowercasing, so
    "ß" and "SS" stay distinct). Enumeration yields names in
    the casing they were first inserted with; assigning to an existing name
    under a different casing replaces the value but keeps the original name.

    `add` is the strict insert used when recording attributes for an element:
    it refuses to overwrite and raises `DuplicateAttributeError` instead.
    """

    def __init__(self, tag_name: str | None = None) -> None:
        self._tag_name = tag_name
        # folded name -> (original name, value)
        self._entries: Dict[str, Tuple[str, V]] = {}

    @staticmethod
    def _fold(name: str) -> str:
        return name.lower()

    def add(self, name: str, value: V) -> None:
        """Insert a new attribute, failing if the name is already present."""
        key = self._fold(name)
        if key in self._entries:
            raise DuplicateAttributeError(name, self._tag_name)
        self._entries[key] = (name, value)

    def original_name(self, name: str) -> str:
        """Return the name as it was first inserted."""
        return self._entries[self._fold(name)][0]

    def __getitem__(self, name: str) -> V:
        if not isinstance(name, str):
            raise KeyError(name)
        return self._entries[self._fold(name)][1]

    def __setitem__(self, name: str, value: V) -> None:
        key = self._fold(name)
        existing = self._entries.get(key)
        self._entries[key] = (existing[0] if existing else name, value)

    def __delitem__(self, name: str) -> None:
        if not isinstance(name, str):
            raise KeyError(name)
        del self._entries[self._fold(name)]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._fold(name) in self._entries

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AttributeDict({dict(self.items())!r})"
