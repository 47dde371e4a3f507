"""Command rendering.

Maps operation records onto concrete command lines for an external
executor: ffmpeg for frame extraction, concatenation and audio extraction,
and VLC for playback. Nothing here starts a process; callers receive argv
lists they can hand to ``subprocess.run`` or print.

The binaries can be overridden with the ``VID_FFMPEG`` and ``VID_PLAYER``
environment variables.


File: commands.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import os
import shlex
from typing import Iterable, List

from vidlang import operations as ops
from vidlang.exceptions import UnknownOperationException


# Joins the first input's video/audio with the second's.
CONCAT_FILTER = "[0:v][0:a][1:v][1:a]concat=n=2:v=1:a=1[v][a]"


def ffmpeg_binary() -> str:
    """Return the ffmpeg executable, overridable with VID_FFMPEG."""
    return os.environ.get("VID_FFMPEG", "ffmpeg")


def player_binary() -> str:
    """Return the media player executable, overridable with VID_PLAYER."""
    return os.environ.get("VID_PLAYER", "vlc")


def render_command(op: ops.Operation) -> List[str]:
    """
    Build the argv for one operation.

    Parameters:
        op (Operation): The operation record.

    Returns:
        list[str]: the command line.

    Raises:
        UnknownOperationException: If ``op`` is not an operation record.
    """
    if isinstance(op, ops.Play):
        return [player_binary(), op.source]
    if isinstance(op, ops.PlayRange):
        return [
            player_binary(), op.source,
            "--start-time", str(op.start.total_seconds()),
            "--stop-time", str(op.end.total_seconds()),
        ]
    if isinstance(op, ops.ExtractFrame):
        return [
            ffmpeg_binary(), "-y",
            "-i", op.source,
            "-vf", f"select=eq(n\\,{op.frame_number})",
            "-vframes", "1",
            op.destination,
        ]
    if isinstance(op, ops.Concat):
        return [
            ffmpeg_binary(), "-y",
            "-i", op.source_a,
            "-i", op.source_b,
            "-filter_complex", CONCAT_FILTER,
            "-map", "[v]", "-map", "[a]",
            "-c:v", "libx264", "-c:a", "aac",
            op.destination,
        ]
    if isinstance(op, ops.ExtractAudio):
        return [
            ffmpeg_binary(), "-y",
            "-ss", str(op.start.total_seconds()),
            "-to", str(op.end.total_seconds()),
            "-i", op.source,
            "-sn", "-vn",
            op.destination,
        ]
    raise UnknownOperationException(type(op).__name__)


def render_commands(operations: Iterable[ops.Operation]) -> List[List[str]]:
    """
    Build the argv for each operation, in order.
    """
    return [render_command(op) for op in operations]


def format_command(argv: List[str]) -> str:
    """
    Quote an argv for display as a single shell line.
    """
    return shlex.join(argv)
