"""inputseq - ordered input sequence recognition across input channels.

Architecture:
- sources: input source contract, edge-triggered stepped source, channels
- tokens: keyboard and gamepad token universes
- matching: single-channel automaton, synchronised sequence sets
"""
from .config import Config, get_config
from .exceptions import InputSequenceError, InputSourceError, SequenceConfigurationError
from .logging_config import logger, setup_logger
from .matching import (
    AccessibilityConfigurable,
    InputSequence,
    MatchableSequence,
    SequenceSet,
    gamepad_channel,
    gamepad_sequence,
    keyboard_channel,
    keyboard_sequence,
    keyboard_sequence_from_gamepad,
    multiplatform_sequence,
)
from .sources import BaseInputSource, Channel, ChannelState, SteppedInputSource
from .tokens import GAMEPAD_TO_KEY, GamepadControl, Key, gamepad_to_key

__version__ = "1.0.0"

__all__ = [
    # Config
    "Config",
    "get_config",
    # Logging
    "logger",
    "setup_logger",
    # Sources
    "BaseInputSource",
    "Channel",
    "ChannelState",
    "SteppedInputSource",
    # Tokens
    "Key",
    "GamepadControl",
    "GAMEPAD_TO_KEY",
    "gamepad_to_key",
    # Matching
    "AccessibilityConfigurable",
    "MatchableSequence",
    "InputSequence",
    "SequenceSet",
    "keyboard_channel",
    "gamepad_channel",
    "keyboard_sequence",
    "keyboard_sequence_from_gamepad",
    "gamepad_sequence",
    "multiplatform_sequence",
    # Exceptions
    "InputSequenceError",
    "SequenceConfigurationError",
    "InputSourceError",
]
