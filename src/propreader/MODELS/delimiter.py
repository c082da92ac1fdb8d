"""
Delimiters separating a key from its value on a definition line.
"""
import re
from enum import Enum
from typing import Optional, Tuple

_WHITESPACE_RUN = re.compile(r'[ \t]+')


class Delimiter(str, Enum):
    """
    The rule used to split a definition line into key and value.
    Selected once per parsing session.
    """
    EQUALS = "equals"
    COLON = "colon"
    WHITESPACE = "whitespace"

    def split(self, text: str) -> Tuple[str, Optional[str]]:
        """
        Splits text at the first occurrence of this delimiter.

        :param text: The definition line, leading whitespace already removed.
        :return: (key part, value part); the value part is None when the
                 delimiter does not occur in the text.
        """
        if self is Delimiter.WHITESPACE:
            match = _WHITESPACE_RUN.search(text)
            if match is None:
                return text, None
            return text[:match.start()], text[match.end():]

        char = '=' if self is Delimiter.EQUALS else ':'
        index = text.find(char)
        if index == -1:
            return text, None
        return text[:index], text[index + 1:]
