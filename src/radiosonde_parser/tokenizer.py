"""
Splits TEMP report text into code groups.

.. changelog::
    .. versionadded:: 1.0
        Initial release of the module with core functionalities.
"""
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Pattern, Tuple, Union
__version__ = '1.0'

END_OF_MESSAGE = '='


def tokenize(text: str) -> Tuple[str, ...]:
    """Splits text on any run of whitespace into 5-character code groups.

    Blank lines disappear with the whitespace. A trailing end-of-message
    ``=`` is stripped from a group, and groups left empty are dropped.
    """
    groups = []
    for part in (text or '').split():
        part = part.rstrip(END_OF_MESSAGE)
        if part:
            groups.append(part)
    return tuple(groups)


@dataclass(frozen=True)
class GroupSequence:
    """Immutable, positional view over the groups of one report part.

    Decoders walk it with an integer cursor: each cluster decoder takes the
    current index and returns the index after the groups it consumed.
    """
    groups: Tuple[str, ...]

    @classmethod
    def from_text(cls, text: str, identifier: Optional[str] = None) -> "GroupSequence":
        """Tokenizes ``text``, starting at ``identifier`` when it appears after other text.

        Without the identifier every group is kept, and the part decoders still
        read the header by position: group 1 is then taken as YYGGI although it
        is really the station.
        """
        groups = tokenize(text)
        if identifier and identifier in groups:
            groups = groups[groups.index(identifier):]
        return cls(groups)

    def __len__(self) -> int:
        return len(self.groups)

    def __getitem__(self, index):
        return self.groups[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def get(self, index: int) -> Optional[str]:
        if 0 <= index < len(self.groups):
            return self.groups[index]
        return None

    def take(self, index: int, count: int) -> Optional[Tuple[str, ...]]:
        """Returns ``count`` groups starting at ``index``, or None if fewer remain."""
        if index < 0 or index + count > len(self.groups):
            return None
        return self.groups[index:index + count]

    def find(self, pattern: Union[str, Pattern], start: int = 0) -> int:
        """Index of the first group at or after ``start`` fully matching ``pattern``, else -1."""
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        for index in range(max(start, 0), len(self.groups)):
            if regex.fullmatch(self.groups[index]):
                return index
        return -1


def split_message_parts(text: str) -> Tuple[str, str]:
    """Separates a combined bulletin into its TTAA and TTBB text.

    A line containing ``TTAA`` or ``TTBB`` opens that part and following lines
    stay with it. Lines seen before either identifier belong to TTAA.

    :param text: Free-form bulletin text, possibly with both parts.
    :type text: str
    :return: A tuple (ttaa_text, ttbb_text); either may be empty.
    :rtype: tuple
    """
    ttaa_lines = []
    ttbb_lines = []
    current = ttaa_lines
    for line in (text or '').splitlines():
        if not line.strip():
            continue
        if 'TTAA' in line:
            current = ttaa_lines
        elif 'TTBB' in line:
            current = ttbb_lines
        current.append(line.strip())
    return '\n'.join(ttaa_lines), '\n'.join(ttbb_lines)
