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

from typing import Callable, Optional

from wpimath.units import degrees

from lib_5973.constants import ROTATION_EPSILON


class HeadingHold:
    """
    Proportional heading hold. Swerve modules never track perfectly, so the robot
    slowly yaws while driving straight. While the driver is translating without
    asking for rotation we remember the heading and return a rotation bias that
    pulls us back to it.
    """
    def __init__(self, angle: Callable[[], degrees]):
        self._angle = angle
        self._target: Optional[degrees] = None

    @property
    def target(self) -> Optional[degrees]:
        return self._target

    def reset(self) -> None:
        self._target = None

    def correction(self, gain: float, forward: float, strafe: float, rotation: float) -> float:
        angle = self._angle()

        if abs(rotation) > ROTATION_EPSILON or (forward == 0.0 and strafe == 0.0):
            # Driver is turning (or we are not moving). Follow the gyro
            self._target = angle
            return 0.0

        if self._target is None:
            self._target = angle

        return gain * (angle - self._target)
