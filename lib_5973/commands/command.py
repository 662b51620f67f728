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
from typing import Callable, Optional

from commands2 import Command, Subsystem
from wpilib import SmartDashboard, Timer
from wpimath.units import seconds

logger = logging.getLogger(__name__)


class BaseCommand(Command):
    """
    Base Command class for Team 5973 robotics
    """
    def __init__(self, subsystem: Optional[Subsystem] = None,
                 clock: Callable[[], seconds] = Timer.getFPGATimestamp):
        super().__init__()
        self.setName(self.get_class_name())

        if subsystem is not None:
            if not isinstance(subsystem, Subsystem):
                raise ValueError(f"subsystem must be a Subsystem, got {type(subsystem).__name__}")

            self.addRequirements(subsystem)

        self._clock = clock
        self._start_time: seconds = 0.0

    @classmethod
    def get_class_name(cls) -> str:
        return cls.__name__

    def initialize(self) -> None:
        """
        Called just before this Command runs the first time
        """
        self._start_time = round(self._clock(), 2)
        logger.info(f"{self.getName()}: Started at {self._start_time}")

        SmartDashboard.putString(f"command/{self.getName()}", "running")
        SmartDashboard.putString("alert", f"** Started {self.getName()} at {self._start_time:2.2f} s **")

    def end(self, interrupted: bool) -> None:
        """
        The action to take when the command ends. Called when either the command finishes normally, or
        when it interrupted/canceled.

        Do not schedule commands here that share requirements with this command. Use :meth:`.andThen` instead.

        :param interrupted: whether the command was interrupted/canceled
        """
        end_time = self._clock()
        message = f"{self.getName()}: {'Interrupted' if interrupted else 'Ended'} at {end_time:.1f} s after {end_time - self._start_time:.1f} s"
        logger.info(message)

        SmartDashboard.putString("alert", f"** {message} **")
        SmartDashboard.putString(f"command/{self.getName()}", f"{'interrupted' if interrupted else 'ended'}")
