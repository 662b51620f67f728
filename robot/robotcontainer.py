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
import time
from typing import Callable, Dict, List

from commands2 import Subsystem
from commands2.button import CommandXboxController
from wpilib import SmartDashboard

import constants
from lib_5973.commands.drivetrain.swerve_drive_default import SwerveDriveDefaultCommand
from lib_5973.subsystems.limelight_camera import LimelightCamera
from lib_5973.teleop.modes import AxisInput, GestureInput, TeleopConfig
from subsystems.swervedrive.drivesubsystem import DriveSubsystem

logger = logging.getLogger(__name__)


class RobotContainer:
    """
    This class is where the bulk of the robot should be declared. Since Command-based is a
    "declarative" paradigm, very little robot logic should actually be handled in the :class:`.Robot`
    periodic methods (other than the scheduler calls). Instead, the structure of the robot (including
    subsystems, commands, and button mappings) should be declared here.
    """
    def __init__(self, robot: 'MyRobot') -> None:
        logger.debug("*** called container __init__")
        self.start_time = time.time()
        self.robot = robot

        # The driver's controller
        self.driver_controller = CommandXboxController(constants.DRIVER_CONTROLLER_PORT)

        ##########################################
        # Subsystem Initialization
        #
        self.subsystems: List[Subsystem] = []

        self.robot_drive = DriveSubsystem()
        self.subsystems.append(self.robot_drive)

        self.limelight = LimelightCamera(constants.LIMELIGHT_NAME,
                                         kp=constants.LIMELIGHT_X_KP,
                                         ki=constants.LIMELIGHT_X_KI,
                                         kd=constants.LIMELIGHT_X_KD)
        self.subsystems.append(self.limelight)

        ########################################################
        # Configure the default drive command and its button combos
        self.drive_config = TeleopConfig(deadband=constants.JOYSTICK_DEADBAND,
                                         speed_normal=constants.DRIVE_SPEED_NORMAL,
                                         speed_safe=constants.DRIVE_SPEED_SAFE,
                                         safe_hold_time=constants.SAFE_MODE_HOLD_TIME,
                                         button_delay=constants.FIELD_GOAL_TOGGLE_DELAY)

        self.drive_command = self.configure_button_bindings_xbox(self.driver_controller)

        for subsystem in self.subsystems:
            if hasattr(subsystem, "dashboard_initialize") and callable(getattr(subsystem,
                                                                               "dashboard_initialize")):
                subsystem.dashboard_initialize()

        SmartDashboard.putData("Drive Command", self.drive_command)

    def get_elapsed_time(self) -> float:
        """
        Called when we want to know the start/elapsed time for status and debug messages
        """
        return time.time() - self.start_time

    def set_start_time(self) -> None:  # call in teleopInit and autonomousInit in the robot
        self.start_time = time.time()

    @staticmethod
    def axis_map(controller: CommandXboxController) -> Dict[AxisInput, Callable[[], float]]:
        """
        Xbox sticks read negative when pushed forward, so forward is flipped here. The
        teleop command flips strafe and turn itself.
        """
        return {
            AxisInput.FORWARD: lambda: -controller.getLeftY(),
            AxisInput.STRAFE: controller.getLeftX,
            AxisInput.TURN: controller.getRightX,
        }

    @staticmethod
    def button_map(controller: CommandXboxController) -> Dict[GestureInput, Callable[[], bool]]:
        hid = controller.getHID()
        return {
            GestureInput.TOGGLE_SAFE: lambda: hid.getBackButton() and hid.getStartButton(),
            GestureInput.TOGGLE_FIELD: hid.getXButton,
            GestureInput.TOGGLE_GOAL: hid.getYButton,
            GestureInput.RESET_HEADING: hid.getLeftBumperButton,
        }

    def configure_button_bindings_xbox(self, controller: CommandXboxController) -> SwerveDriveDefaultCommand:
        """
        Driver controller:

        LS == Left Stick    - Robot direction on field. Fwd, Back, Left, Right
        RS == Right Stick   - Robot rotation  <- Counter Clockwise  -> Clockwise

        LB == Left Bumper   - Zero the gyro (while held)

        X == X Button (Left)   - Hold to toggle Field Oriented / Robot POV
        Y == Y Button (Top)    - Hold to toggle Goal Oriented / Field Oriented (needs a camera target)

        Back + Start (held 3 seconds) - Toggle safe mode (slow)
        """
        drive_command = SwerveDriveDefaultCommand(self.robot_drive,
                                                  self.limelight,
                                                  self.axis_map(controller),
                                                  self.button_map(controller),
                                                  config=self.drive_config)

        self.robot_drive.setDefaultCommand(drive_command)
        return drive_command
