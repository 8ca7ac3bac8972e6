"""
Scripted input source - replays a fixed list of key codes.
"""

from collections import deque
from typing import Iterable, Optional

from .base import InputSource, KeyEvent, KEY_CODES


class ScriptedInput(InputSource):
    """
    Hands out pre-loaded key events one per poll, then reports no input.

    ``None`` entries in the script stand for a poll where no key was pressed.
    """

    def __init__(self, codes: Iterable[Optional[str]] = ()):
        self.pending = deque()
        for code in codes:
            self.push(code)
        self.polls = 0

    def push(self, code: Optional[str]):
        if code is not None and code not in KEY_CODES:
            raise ValueError(f"Unknown key code: {code!r}")
        self.pending.append(code)

    def poll(self, timeout: float = 0.0) -> Optional[KeyEvent]:
        self.polls += 1
        if not self.pending:
            return None
        code = self.pending.popleft()
        return KeyEvent(code) if code is not None else None
