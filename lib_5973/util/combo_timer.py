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

import logging
from enum import Enum, unique
from typing import Callable, Optional

from wpilib import Timer
from wpimath.units import seconds

logger = logging.getLogger(__name__)


@unique
class ComboState(Enum):
    IDLE = "idle"
    TIMING = "timing"
    FIRED = "fired"


class ComboTimer:
    """
    A 'combo' is a button (or set of buttons) that must be held for some amount of time
    before it does anything. This keeps a bumped button from changing how the robot
    drives in the middle of a match.

    Each call to update() is one control cycle. The first cycle the condition is true
    only records the start time. Once the condition has been held for the hold time,
    update() returns True exactly once. The timer re-arms when the condition goes false.
    """
    def __init__(self, name: str, hold_time: seconds,
                 condition: Optional[Callable[[], bool]] = None,
                 clock: Callable[[], seconds] = Timer.getFPGATimestamp):

        assert hold_time >= 0, f"hold_time={hold_time} is not positive"

        self.name = name
        self._hold_time = hold_time
        self._condition = condition
        self._clock = clock

        self._start_time: Optional[seconds] = None
        self._consumed = False

    @property
    def hold_time(self) -> seconds:
        return self._hold_time

    @property
    def state(self) -> ComboState:
        if self._start_time is None:
            return ComboState.IDLE

        return ComboState.FIRED if self._consumed else ComboState.TIMING

    def elapsed(self) -> seconds:
        """Time the condition has been held, zero if idle"""
        if self._start_time is None:
            return 0.0

        return self._clock() - self._start_time

    def reset(self) -> None:
        self._start_time = None
        self._consumed = False

    def update(self, held: Optional[bool] = None) -> bool:
        """
        Run one cycle of the timer.

        :param held: Current hold condition. If not provided, the condition supplier
                     given at construction is called.
        :returns: True on the one cycle the hold time is reached
        """
        if held is None:
            if self._condition is None:
                raise ValueError(f"Combo '{self.name}' has no condition supplier")

            held = self._condition()

        if not held:
            self.reset()
            return False

        if self._start_time is None:
            self._start_time = self._clock()
            return False

        if self._consumed or self.elapsed() < self._hold_time:
            return False

        self._consumed = True
        logger.debug(f"Combo '{self.name}' fired after {self.elapsed():.2f} s")
        return True
