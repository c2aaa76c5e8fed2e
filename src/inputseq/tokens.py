"""Token universes for the built-in keyboard and gamepad channels."""
from enum import Enum
from typing import Dict


class Key(str, Enum):
    """Keyboard tokens."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    ESCAPE = "escape"
    TAB = "tab"
    BACKSPACE = "backspace"
    LEFT_SHIFT = "left_shift"
    RIGHT_SHIFT = "right_shift"
    LEFT_CTRL = "left_ctrl"
    RIGHT_CTRL = "right_ctrl"
    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    DIGIT_0 = "0"
    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"


class GamepadControl(str, Enum):
    """Gamepad tokens, named by position rather than vendor label."""
    BUTTON_SOUTH = "button_south"
    BUTTON_EAST = "button_east"
    BUTTON_WEST = "button_west"
    BUTTON_NORTH = "button_north"
    LEFT_SHOULDER = "left_shoulder"
    RIGHT_SHOULDER = "right_shoulder"
    LEFT_TRIGGER = "left_trigger"
    RIGHT_TRIGGER = "right_trigger"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"
    START = "start"
    SELECT = "select"


# Default keyboard binding for each gamepad control
GAMEPAD_TO_KEY: Dict[GamepadControl, Key] = {
    GamepadControl.BUTTON_SOUTH: Key.SPACE,
    GamepadControl.BUTTON_EAST: Key.ESCAPE,
    GamepadControl.BUTTON_WEST: Key.E,
    GamepadControl.BUTTON_NORTH: Key.Q,
    GamepadControl.LEFT_SHOULDER: Key.LEFT_SHIFT,
    GamepadControl.RIGHT_SHOULDER: Key.RIGHT_SHIFT,
    GamepadControl.LEFT_TRIGGER: Key.LEFT_CTRL,
    GamepadControl.RIGHT_TRIGGER: Key.RIGHT_CTRL,
    GamepadControl.DPAD_UP: Key.UP,
    GamepadControl.DPAD_DOWN: Key.DOWN,
    GamepadControl.DPAD_LEFT: Key.LEFT,
    GamepadControl.DPAD_RIGHT: Key.RIGHT,
    GamepadControl.START: Key.ENTER,
    GamepadControl.SELECT: Key.TAB,
}


def gamepad_to_key(control: GamepadControl) -> Key:
    """Return the keyboard key bound to a gamepad control."""
    return GAMEPAD_TO_KEY[GamepadControl(control)]


def parse_key(name: str) -> Key:
    """Parse a key from its enum name or value, case-insensitively.

    Raises:
        ValueError: if the name matches no key
    """
    cleaned = name.strip()
    try:
        return Key[cleaned.upper()]
    except KeyError:
        return Key(cleaned.lower())
