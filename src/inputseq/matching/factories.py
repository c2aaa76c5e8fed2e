"""Construction helpers for keyboard, gamepad and multi-platform sequences."""
from typing import Optional

from ..sources import BaseInputSource, Channel
from ..tokens import GAMEPAD_TO_KEY, GamepadControl, Key, gamepad_to_key
from .sequence import InputSequence
from .sequence_set import SequenceSet

KEYBOARD = "keyboard"
GAMEPAD = "gamepad"


def keyboard_channel(source: BaseInputSource) -> Channel:
    """Channel over the full keyboard token universe."""
    return Channel(name=KEYBOARD, source=source, tokens=frozenset(Key))


def gamepad_channel(source: BaseInputSource) -> Channel:
    """Channel over the full gamepad token universe."""
    return Channel(name=GAMEPAD, source=source, tokens=frozenset(GamepadControl))


def keyboard_sequence(
    source: BaseInputSource,
    *keys: Key,
    auto_reset: Optional[bool] = None,
    trace: Optional[bool] = None,
    gamepad_source: Optional[BaseInputSource] = None
) -> InputSequence:
    """Create a keyboard sequence.

    If gamepad_source is given, gamepad presses also count as wrong input
    unless the pressed control is bound to the expected key.
    """
    watch = ()
    if gamepad_source is not None:
        watch = (
            Channel(
                name=GAMEPAD,
                source=gamepad_source,
                tokens=frozenset(GamepadControl),
                aliases=dict(GAMEPAD_TO_KEY),
            ),
        )
    return InputSequence(
        [Key(k) for k in keys],
        keyboard_channel(source),
        auto_reset=auto_reset,
        trace=trace,
        watch=watch,
    )


def keyboard_sequence_from_gamepad(
    source: BaseInputSource,
    *controls: GamepadControl,
    auto_reset: Optional[bool] = None,
    trace: Optional[bool] = None,
    gamepad_source: Optional[BaseInputSource] = None
) -> InputSequence:
    """Create a keyboard sequence from gamepad controls via GAMEPAD_TO_KEY."""
    return keyboard_sequence(
        source,
        *(gamepad_to_key(c) for c in controls),
        auto_reset=auto_reset,
        trace=trace,
        gamepad_source=gamepad_source,
    )


def gamepad_sequence(
    source: BaseInputSource,
    *controls: GamepadControl,
    auto_reset: Optional[bool] = None,
    trace: Optional[bool] = None
) -> InputSequence:
    """Create a gamepad sequence."""
    return InputSequence(
        [GamepadControl(c) for c in controls],
        gamepad_channel(source),
        auto_reset=auto_reset,
        trace=trace,
    )


def multiplatform_sequence(*sequences: InputSequence, trace: Optional[bool] = None) -> SequenceSet:
    """Bundle per-device sequences of the same gesture into one set."""
    return SequenceSet(*sequences, trace=trace)

