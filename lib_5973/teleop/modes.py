# ------------------------------------------------------------------------ #
#      o-o      o                o                                         #
#     /         |                |                                         #
#    O     o  o O-o  o-o o-o     |  oo o--o o-o o-o                        #
#     \    |  | |  | |-' |   \   o | | |  |  /   /                         #
#      o-o o--O o-o  o-o o    o-o  o-o-o--O o-o o-o                        #
#             |                           |                                #
#          o--o                        o--o                                #
#                        o--o      o         o                             #
#                        |   |     |         |  o                          #
#                        O-Oo  o-o O-o  o-o -o-    o-o o-o                 #
#                        |  \  | | |  | | |  |  | |     \                  #
#                        o   o o-o o-o  o-o  o  |  o-o o-o                 #
#                                                                          #
#    Jemison High School - Huntsville Alabama                              #
# ------------------------------------------------------------------------ #

from dataclasses import dataclass
from enum import Enum, IntEnum, unique

from wpimath.units import seconds

from lib_5973.constants import BUTTON_DELAY, DEFAULT_DEADBAND, HEADING_CORRECTION_GAIN, SAFE_MODE_HOLD_TIME, \
    SPEED_NORMAL, SPEED_SAFE, TURN_DEADBAND


@unique
class AxisInput(Enum):
    """Analog driver inputs, each read as a value in [-1.0..1.0]"""
    FORWARD = "forward"
    STRAFE = "strafe"
    TURN = "turn"


@unique
class GestureInput(Enum):
    """Digital driver inputs (buttons or button combos)"""
    TOGGLE_SAFE = "safe"
    TOGGLE_FIELD = "field"
    TOGGLE_GOAL = "goal"
    RESET_HEADING = "reset-heading"


@unique
class OrientationMode(IntEnum):
    """
    Reference frame that rotation commands are interpreted in.
    """
    FIELD = 1
    ROBOT = 2
    GOAL = 3

    @property
    def label(self) -> str:
        return {OrientationMode.FIELD: "Field Oriented",
                OrientationMode.ROBOT: "Robot POV",
                OrientationMode.GOAL: "Goal Oriented"}[self]


@dataclass(frozen=True)
class DriveIntents:
    """Shaped operator intents for one control cycle"""
    forward: float = 0.0
    strafe: float = 0.0
    rotation: float = 0.0


@dataclass(frozen=True)
class DriveCommand:
    """The single drive request handed to the drive subsystem each cycle"""
    forward: float
    strafe: float
    rotation: float
    field_relative: bool


@dataclass(frozen=True)
class TeleopConfig:
    """
    Construction time configuration for the teleop drive. Fixed for the life
    of the command.
    """
    deadband: float = DEFAULT_DEADBAND
    speed_normal: float = SPEED_NORMAL
    speed_safe: float = SPEED_SAFE
    safe_hold_time: seconds = SAFE_MODE_HOLD_TIME
    button_delay: seconds = BUTTON_DELAY
    turn_deadband: float = TURN_DEADBAND
    heading_gain: float = HEADING_CORRECTION_GAIN

    def __post_init__(self):
        for name in ("deadband", "turn_deadband"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"{name}={value} must be in the range [0.0..1.0)")

        for name in ("speed_normal", "speed_safe", "safe_hold_time", "button_delay"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"{name}={value} is not positive")
