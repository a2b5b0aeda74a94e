"""Frame-by-frame value sequences with optional loop and release segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class FrameSequence:
    """A list of per-frame values with optional loop and release segments.

    Frames before ``release_sequence_start_index`` form the held part. That
    part either loops back to ``loop_start_index`` or holds its last frame.
    Frames from ``release_sequence_start_index`` on are played once the note
    is released. After the last of them the voice should retire.
    """

    SHOULD_RETIRE: ClassVar[int] = 65535

    sequence: list[int] = field(default_factory=list)
    is_looped: bool = False
    has_release: bool = False
    loop_start_index: int = 0
    release_sequence_start_index: int = 0

    def value_at(self, index: int) -> int:
        """Return the value at ``index``, or 0 when the index is out of range."""
        if 0 <= index < len(self.sequence):
            return self.sequence[index]
        return 0

    def next_index_of(self, current: int) -> int:
        """Return the frame that follows ``current``.

        Returns ``SHOULD_RETIRE`` once the release segment has run out.
        """
        if current < self.release_sequence_start_index:
            if current == self.release_sequence_start_index - 1:
                return self.loop_start_index if self.is_looped else current
            return current + 1

        if self.sequence and current >= len(self.sequence) - 1:
            return self.SHOULD_RETIRE
        return current + 1

    def is_in_release(self, index: int) -> bool:
        """Tell whether ``index`` lies in the release segment."""
        return index >= self.release_sequence_start_index