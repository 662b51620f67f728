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
from typing import Callable, Mapping, Optional

from commands2 import Subsystem
from wpilib import SmartDashboard, Timer
from wpiutil import SendableBuilder
from wpimath.units import seconds

from lib_5973.commands.command import BaseCommand
from lib_5973.constants import DASHBOARD_UPDATE_DIVISOR
from lib_5973.teleop.composer import compose
from lib_5973.teleop.interfaces import TeleopDrive, VisionTarget
from lib_5973.teleop.mode_arbiter import ModeArbiter
from lib_5973.teleop.modes import AxisInput, DriveCommand, GestureInput, OrientationMode, TeleopConfig
from lib_5973.util.input_shaper import shape_intents

logger = logging.getLogger(__name__)


class SwerveDriveDefaultCommand(BaseCommand):
    """
    Default teleop command for the swerve drive.

    Every cycle the joystick axes are deadbanded and scaled (safe mode drives slower),
    the button combos are checked for orientation mode changes, and a single drive
    request goes out to the drivetrain:

        Robot POV       rotation = turn - heading correction,   robot relative
        Field Oriented  rotation = turn - heading correction,   field relative
        Goal Oriented   rotation = turn - camera steering,      field relative
    """
    def __init__(self, drivetrain: TeleopDrive | Subsystem,
                 vision: VisionTarget,
                 axis_map: Mapping[AxisInput, Callable[[], float]],
                 button_map: Mapping[GestureInput, Callable[[], bool]],
                 config: Optional[TeleopConfig] = None,
                 clock: Callable[[], seconds] = Timer.getFPGATimestamp,
                 notify: Optional[Callable[[str], None]] = None):

        super().__init__(drivetrain, clock)

        missing = [axis.name for axis in AxisInput if axis not in axis_map]
        if missing:
            raise ValueError(f"No axis supplied for: {', '.join(missing)}")

        self._drivetrain = drivetrain
        self._vision = vision
        self._axis_map = axis_map
        self._config = config or TeleopConfig()

        self._arbiter = ModeArbiter(button_map, drivetrain, vision,
                                    config=self._config,
                                    clock=clock,
                                    notify=notify or self._alert)

        self._last_command: Optional[DriveCommand] = None
        self._counter = 0

    @property
    def arbiter(self) -> ModeArbiter:
        return self._arbiter

    @property
    def mode(self) -> OrientationMode:
        return self._arbiter.mode

    @property
    def safe_mode(self) -> bool:
        return self._arbiter.safe_mode

    @property
    def heading_correction(self) -> float:
        return self._arbiter.state.heading_correction

    @property
    def last_command(self) -> Optional[DriveCommand]:
        return self._last_command

    @staticmethod
    def _alert(message: str) -> None:
        logger.warning(message)
        SmartDashboard.putString("alert", f"** {message} **")

    def axis(self, axis: AxisInput) -> float:
        return self._axis_map[axis]()

    def execute(self) -> None:
        """
        The main body of a command. Called repeatedly while the command is scheduled.
        """
        # Speed and heading correction use the modes as they were coming into this cycle
        intents = shape_intents({axis: self.axis(axis) for axis in AxisInput},
                                self._config.deadband,
                                self._arbiter.speed_scale,
                                turn_deadband=self._config.turn_deadband)

        self._arbiter.update_heading_correction(intents)
        self._arbiter.update()

        state = self._arbiter.state
        command = compose(state.mode, intents, state.heading_correction, self._vision.steering_correction)

        self._drivetrain.apply_drive_command(command)
        self._last_command = command

        self._counter += 1
        self.dashboard_periodic()

    def isFinished(self) -> bool:
        return False  # Default command, runs until interrupted

    def end(self, interrupted: bool) -> None:
        self._drivetrain.stop()

        super().end(interrupted)

    def dashboard_periodic(self) -> None:
        if self._counter % DASHBOARD_UPDATE_DIVISOR == 0:
            SmartDashboard.putString("Drive/mode", self.mode.label)
            SmartDashboard.putBoolean("Drive/safe-mode", self.safe_mode)
            SmartDashboard.putNumber("Drive/heading-correction", self.heading_correction)

    def initSendable(self, builder: SendableBuilder) -> None:
        super().initSendable(builder)

        builder.addStringProperty("mode", lambda: self.mode.label, lambda _value: None)
        builder.addBooleanProperty("safe-mode", lambda: self.safe_mode, lambda _value: None)
        builder.addDoubleProperty("yaw-correction", lambda: self.heading_correction, lambda _value: None)
