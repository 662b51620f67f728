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
from typing import Optional

from commands2 import Subsystem
from wpilib import AnalogGyro, SmartDashboard
from wpimath.geometry import Rotation2d
from wpimath.kinematics import ChassisSpeeds
from wpimath.units import degrees, meters_per_second, radians_per_second

from constants import DASHBOARD_UPDATE_DIVISOR, GYRO_ANALOG_CHANNEL, GYRO_REVERSED, MAX_ANGULAR_SPEED, MAX_SPEED
from lib_5973.teleop.modes import DriveCommand
from lib_5973.util.heading_hold import HeadingHold

logger = logging.getLogger(__name__)


class DriveSubsystem(Subsystem):
    """
    Teleop facing side of the swerve drivetrain.

    Takes the normalized [-1.0..1.0] drive request from the default drive command and
    turns it into robot relative chassis speeds. The module level (motor) control
    consumes 'chassis_speeds' and is not part of this subsystem.
    """
    def __init__(self, gyro: Optional[AnalogGyro] = None,
                 max_speed: meters_per_second = MAX_SPEED,
                 max_angular_rate: radians_per_second = MAX_ANGULAR_SPEED,
                 gyro_reversed: bool = GYRO_REVERSED) -> None:
        super().__init__()

        self._gyro = gyro if gyro is not None else AnalogGyro(GYRO_ANALOG_CHANNEL)
        self._gyro_reversed = gyro_reversed

        self._max_speed = max_speed
        self._max_angular_rate = max_angular_rate

        self._heading_hold = HeadingHold(self.get_angle)

        self._chassis_speeds = ChassisSpeeds()
        self._last_command: Optional[DriveCommand] = None
        self._counter = 0

    @property
    def heading(self) -> Rotation2d:
        return Rotation2d.fromDegrees(self.get_angle())

    @property
    def chassis_speeds(self) -> ChassisSpeeds:
        """Robot relative speeds most recently requested"""
        return self._chassis_speeds

    @property
    def last_command(self) -> Optional[DriveCommand]:
        return self._last_command

    def get_angle(self) -> degrees:
        angle = self._gyro.getAngle()
        return -angle if self._gyro_reversed else angle

    def apply_drive_command(self, command: DriveCommand) -> None:
        """
        Drive with a normalized request. Forward/strafe are fractions of max speed and
        rotation is a fraction of the max angular rate.
        """
        x_speed = command.forward * self._max_speed
        y_speed = command.strafe * self._max_speed
        rotation = command.rotation * self._max_angular_rate

        if command.field_relative:
            self._chassis_speeds = ChassisSpeeds.fromFieldRelativeSpeeds(x_speed, y_speed, rotation, self.heading)
        else:
            self._chassis_speeds = ChassisSpeeds(x_speed, y_speed, rotation)

        self._last_command = command

    def heading_hold_correction(self, gain: float, forward: float, strafe: float, rotation: float) -> float:
        return self._heading_hold.correction(gain, forward, strafe, rotation)

    def reset_heading_reference(self) -> None:
        self._gyro.reset()
        self._heading_hold.reset()

    def stop(self) -> None:
        self._chassis_speeds = ChassisSpeeds()
        self._last_command = None

    def dashboard_initialize(self) -> None:
        SmartDashboard.putNumber("Drivetrain/max-speed", self._max_speed)

    def dashboard_periodic(self) -> None:
        SmartDashboard.putNumber("Drivetrain/heading", self.get_angle())
        SmartDashboard.putNumber("Drivetrain/vx", self._chassis_speeds.vx)
        SmartDashboard.putNumber("Drivetrain/vy", self._chassis_speeds.vy)
        SmartDashboard.putNumber("Drivetrain/omega", self._chassis_speeds.omega)

    def periodic(self) -> None:
        self._counter += 1

        if self._counter % DASHBOARD_UPDATE_DIVISOR == 0:
            self.dashboard_periodic()
