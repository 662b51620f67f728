#!/usr/bin/env python3
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
import sys
from typing import Optional

import commands2
from wpilib import DriverStation, LiveWindow

import constants
from robotcontainer import RobotContainer

# Setup Logging
logger = logging.getLogger(__name__)


class MyRobot(commands2.TimedCommandRobot):
    """
    Our default robot class

    Command v2 robots are encouraged to inherit from TimedCommandRobot, which
    has an implementation of robotPeriodic which runs the scheduler for you
    """
    def __init__(self):
        super().__init__()

        self._counter = 0  # Updated on each periodic call. Can be used to logging/smartdashboard updates
        self._container: Optional[RobotContainer] = None
        self.match_started = False  # Set true on Autonomous or Teleop init

    @property
    def container(self) -> RobotContainer:
        return self._container

    @property
    def counter(self) -> int:
        return self._counter

    def robotInit(self) -> None:
        """
        This function is run when the robot is first started up and should be used for any
        initialization code.
        """
        logger.info("robotInit: entry")
        super().robotInit()

        LiveWindow.disableAllTelemetry()
        self._logging_init()

        version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        logger.info(f"Python: {version}")

        # Instantiate our RobotContainer. This will create the subsystems and install the
        # default teleop drive command.
        self._container = RobotContainer(self)

        logger.info("robotInit: exit")

    def _logging_init(self):
        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                logging.getLogger().setLevel(logging.ERROR)  # Python logging
                logging.getLogger("wpilib").setLevel(logging.ERROR)
                logging.getLogger("commands2").setLevel(logging.ERROR)
                logging.getLogger("lib_5973").setLevel(logging.WARNING)

            case constants.RobotModes.SIMULATION:
                DriverStation.silenceJoystickConnectionWarning(True)
                logging.getLogger().setLevel(logging.INFO)  # Python logging
                logging.getLogger("wpilib").setLevel(logging.DEBUG)
                logging.getLogger("commands2").setLevel(logging.DEBUG)
                logging.getLogger("lib_5973").setLevel(logging.INFO)

    def robotPeriodic(self) -> None:
        """
        Periodic code for all modes should go here. The command scheduler (run by our base
        class) calls the default drive command every cycle.

        Default period is 20 mS.
        """
        super().robotPeriodic()
        self._counter += 1

    def autonomousInit(self) -> None:
        self.match_started = True
        self._container.set_start_time()

    def teleopInit(self) -> None:
        self.match_started = True
        self._container.set_start_time()

    def disabledInit(self) -> None:
        self._container.robot_drive.stop()

    def testInit(self) -> None:
        commands2.CommandScheduler.getInstance().cancelAll()
