# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Parser for Java-style .properties files.

Lines are processed one at a time, in file order. A line ending in an odd
number of backslashes continues onto the next physical line; an even number
is an escaped backslash run and is kept in the value.
"""
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from ..MODELS.delimiter import Delimiter
from ..MODELS.property_store import PropertyStore

logger = logging.getLogger(__name__)

COMMENT_CHARS = ('#', '!')

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


@dataclass(frozen=True)
class Idle:
    """No value is waiting for a continuation line."""


@dataclass(frozen=True)
class ContinuingKey:
    """The previous line continues; the next line extends this key's value."""
    key: str


ParseState = Union[Idle, ContinuingKey]

IDLE = Idle()


def count_trailing_backslashes(line: str) -> int:
    """
    Counts the consecutive backslashes at the very end of line.
    """
    return len(line) - len(line.rstrip('\\'))


def split_lines(content: str) -> List[str]:
    """
    Splits text on \\r\\n, \\r or \\n. A terminator at the very end does not
    produce an extra empty line.
    """
    lines = _LINE_BREAK.split(content)
    if lines and lines[-1] == '':
        lines.pop()
    return lines


class PropertyFileReader:
    """
    Line-by-line reader for property files.

    The parsed properties are collected in ``content``. The reader holds the
    state of one parsing session and must be fed lines strictly in order.
    """
    def __init__(self, delimiter: Delimiter = Delimiter.EQUALS):
        """
        Initializes the reader with an empty store.

        :param delimiter: The default delimiter for this session.
        """
        self.delimiter = Delimiter(delimiter)
        self.content = PropertyStore()
        self._state: ParseState = IDLE

    @property
    def pending_continuation(self) -> Optional[str]:
        """
        The key whose value expects a continuation line, if any.
        """
        if isinstance(self._state, ContinuingKey):
            return self._state.key
        return None

    @staticmethod
    def is_multiline(line: str) -> bool:
        """
        Returns True if line ends in an odd number of backslashes.
        """
        return count_trailing_backslashes(line) % 2 == 1

    def process_line(self, raw_line: str, line_number: int, delimiter: Optional[Delimiter] = None):
        """
        Processes one physical line.

        Args:
            raw_line (str): The line, without its line terminator.
            line_number (int): 1-based position of the line in the input.
            delimiter (Delimiter): Delimiter for definition lines. Defaults to
                the reader's delimiter.
        """
        if delimiter is None:
            delimiter = self.delimiter

        continues = self.is_multiline(raw_line)
        # Drop exactly one backslash, the continuation marker.
        body = raw_line[:-1] if continues else raw_line

        if isinstance(self._state, ContinuingKey):
            key = self._state.key
            fragment = body.lstrip()
            if not continues:
                fragment = fragment.rstrip()
            self.content.append(key, fragment)
            self._transition(key, continues, line_number)
            return

        stripped = raw_line.strip()
        if not stripped or stripped.startswith(COMMENT_CHARS):
            return

        key_part, value_part = delimiter.split(body.lstrip())
        key = key_part.strip()
        value = value_part.lstrip() if value_part is not None else ''
        if not continues:
            value = value.rstrip()

        previous = self.content.insert(key, value, line_number)
        if previous is not None:
            logger.debug(
                "Line %d: key %r overrides definition from line %d",
                line_number, key, previous.line_number,
            )
        self._transition(key, continues, line_number)

    def _transition(self, key: str, continues: bool, line_number: int):
        if continues:
            logger.debug("Line %d: value of %r continues on the next line", line_number, key)
            self._state = ContinuingKey(key)
        else:
            self._state = IDLE

    def finish(self) -> PropertyStore:
        """
        Ends the current session and returns the collected properties.

        A continuation still pending at this point is not closed in any
        special way; the value keeps what was accumulated so far.
        """
        if isinstance(self._state, ContinuingKey):
            logger.warning(
                "Input ended while the value of %r expected a continuation line",
                self._state.key,
            )
        self._state = IDLE
        return self.content

    def parse_lines(self, lines: Iterable[str], start: int = 1) -> PropertyStore:
        """
        Parses a sequence of lines into a fresh store.

        :param lines: Lines in file order; trailing line terminators are removed.
        :param start: Line number of the first line.
        :return: The parsed properties.
        """
        self.content = PropertyStore()
        self._state = IDLE
        for line_number, line in enumerate(lines, start):
            self.process_line(line.rstrip('\r\n'), line_number)
        return self.finish()

    def parse_from_string(self, content: str) -> PropertyStore:
        """
        Parses property definitions from a string.

        Args:
            content (str): Content of the property file.

        Returns:
            PropertyStore: The parsed properties.
        """
        return self.parse_lines(split_lines(content))

    def parse(self, properties_path: str, encoding: str = 'utf-8') -> PropertyStore:
        """
        Parses a property file from a path.

        Args:
            properties_path (str): Path to the property file.
            encoding (str): Text encoding of the file.

        Returns:
            PropertyStore: The parsed properties.
        """
        with open(properties_path, 'r', encoding=encoding) as f:
            content = f.read()
        return self.parse_from_string(content)
