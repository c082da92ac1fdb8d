"""
Key-unique storage for parsed properties.
"""
from typing import Dict, ItemsView, Iterator, KeysView, Optional
from .line import Line


class PropertyStore:
    """
    Mapping from property key to its Line record.

    Keys are compared exactly (case-sensitive). Inserting an existing key
    replaces the whole record, value and line number alike.
    """
    def __init__(self):
        self._lines: Dict[str, Line] = {}

    def insert(self, key: str, value: str, line_number: int) -> Optional[Line]:
        """
        Stores a value under key, replacing any previous record.

        :param key: The property key.
        :param value: The property value.
        :param line_number: The line the key was defined on.
        :return: The replaced record, or None if the key was new.
        """
        previous = self._lines.get(key)
        self._lines[key] = Line(value=value, line_number=line_number)
        return previous

    def append(self, key: str, text: str) -> Line:
        """
        Extends the value stored under key. The line number is kept.

        :raises KeyError: If the key has not been inserted.
        """
        line = self._lines[key]
        line.value += text
        return line

    def get(self, key: str) -> Optional[Line]:
        return self._lines.get(key)

    def is_empty(self) -> bool:
        return not self._lines

    def keys(self) -> KeysView[str]:
        return self._lines.keys()

    def items(self) -> ItemsView[str, Line]:
        return self._lines.items()

    def to_dict(self) -> Dict[str, str]:
        """
        Returns a plain key to value dictionary.
        """
        return {key: line.value for key, line in self._lines.items()}

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, key: object) -> bool:
        return key in self._lines

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"PropertyStore({self.to_dict()!r})"
