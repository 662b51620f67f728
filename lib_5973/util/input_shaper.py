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

from typing import Mapping

from wpimath import applyDeadband

from lib_5973.constants import TURN_DEADBAND
from lib_5973.teleop.modes import AxisInput, DriveIntents


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def shape(raw: float, deadband: float, scale: float) -> float:
    """
    Deadband a raw joystick axis reading, scale it, and clamp it to [-1.0..1.0].

    Values inside the deadband become zero, values outside of it are rescaled so the
    output is continuous at the deadband edge and still reaches full scale.
    """
    return clamp(applyDeadband(raw, deadband) * scale)


def shape_intents(axes: Mapping[AxisInput, float], deadband: float, scale: float,
                  turn_deadband: float = TURN_DEADBAND) -> DriveIntents:
    """
    Shape all three drive axes. Strafe and turn are inverted so that left and
    counter-clockwise are positive (WPILib convention).
    """
    return DriveIntents(forward=shape(axes[AxisInput.FORWARD], deadband, scale),
                        strafe=-shape(axes[AxisInput.STRAFE], deadband, scale),
                        rotation=-shape(axes[AxisInput.TURN], turn_deadband, scale))
