"""
Base input source interface for the game engine.
"""

from typing import NamedTuple, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT

# Key codes carried by a KeyEvent. Directions reuse the move names.
QUIT = "QUIT"
OTHER = "OTHER"
KEY_CODES = {UP, DOWN, LEFT, RIGHT, QUIT, OTHER}


class KeyEvent(NamedTuple):
    """A single key press, already translated to a key code."""

    code: str
    raw: Optional[int] = None


class InputSource:
    """
    Base class/interface for where key presses come from.

    The game polls once per tick and expects an immediate answer when the
    timeout is zero.
    """

    def poll(self, timeout: float = 0.0) -> Optional[KeyEvent]:
        """
        Return the next pending key event, or None if nothing arrived.

        Args:
            timeout: seconds to wait for a key; 0 must not block

        Returns:
            A KeyEvent, or None when no key is pending
        """
        raise NotImplementedError
