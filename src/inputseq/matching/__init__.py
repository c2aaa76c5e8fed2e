"""Sequence matching (single-channel automaton, synchronised sets)."""
from .base import AccessibilityConfigurable, MatchableSequence, MatchProgress
from .factories import (
    gamepad_channel,
    gamepad_sequence,
    keyboard_channel,
    keyboard_sequence,
    keyboard_sequence_from_gamepad,
    multiplatform_sequence,
)
from .sequence import InputSequence
from .sequence_set import SequenceSet

__all__ = [
    "AccessibilityConfigurable",
    "MatchableSequence",
    "MatchProgress",
    "InputSequence",
    "SequenceSet",
    "keyboard_channel",
    "gamepad_channel",
    "keyboard_sequence",
    "keyboard_sequence_from_gamepad",
    "gamepad_sequence",
    "multiplatform_sequence",
]
