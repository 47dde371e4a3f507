"""Operation records.

The translator lowers a program into an ordered list of these records. Each
describes one media action with fully evaluated arguments and knows nothing
about the concrete tool that will eventually carry it out; see
`vidlang.commands` for one mapping onto real command lines.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from vidlang.values import TimePosition


class OperationKind(str, Enum):
    """
    Enumeration of supported media operations.
    """
    PLAY = "play"
    PLAY_RANGE = "play_range"
    EXTRACT_FRAME = "extract_frame"
    CONCAT = "concat"
    EXTRACT_AUDIO = "extract_audio"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


@dataclass(frozen=True)
class Play:
    """Play a whole media file."""
    kind: ClassVar[OperationKind] = OperationKind.PLAY
    source: str


@dataclass(frozen=True)
class PlayRange:
    """Play the part of a media file between two time positions."""
    kind: ClassVar[OperationKind] = OperationKind.PLAY_RANGE
    source: str
    start: TimePosition
    end: TimePosition


@dataclass(frozen=True)
class ExtractFrame:
    """Write one numbered video frame to an image file."""
    kind: ClassVar[OperationKind] = OperationKind.EXTRACT_FRAME
    source: str
    frame_number: int
    destination: str


@dataclass(frozen=True)
class Concat:
    """Join two media files, one after the other."""
    kind: ClassVar[OperationKind] = OperationKind.CONCAT
    source_a: str
    source_b: str
    destination: str


@dataclass(frozen=True)
class ExtractAudio:
    """Write the audio between two time positions to a file."""
    kind: ClassVar[OperationKind] = OperationKind.EXTRACT_AUDIO
    source: str
    start: TimePosition
    end: TimePosition
    destination: str


Operation = Union[Play, PlayRange, ExtractFrame, Concat, ExtractAudio]


__all__ = [
    "Concat", "ExtractAudio", "ExtractFrame", "Operation", "OperationKind",
    "Play", "PlayRange",
]
