"""
Input sources for the terminal snake.

This module contains the key-event abstraction and the implementations
that feed direction changes and quit requests into the game.
"""

from .base import InputSource, KeyEvent, QUIT, OTHER, KEY_CODES
from .scripted import ScriptedInput
from .keyboard import CursesKeyboard

__all__ = [
    'InputSource',
    'KeyEvent',
    'QUIT',
    'OTHER',
    'KEY_CODES',
    'ScriptedInput',
    'CursesKeyboard',
]
