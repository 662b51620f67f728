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

import pytest

from lib_5973.teleop.modes import DriveCommand
from subsystems.swervedrive.drivesubsystem import DriveSubsystem


class FakeGyro:
    def __init__(self):
        self.angle = 0.0
        self.resets = 0

    def getAngle(self) -> float:
        return self.angle

    def reset(self) -> None:
        self.angle = 0.0
        self.resets += 1


@pytest.fixture
def gyro() -> FakeGyro:
    return FakeGyro()


@pytest.fixture
def robot_drive(gyro) -> DriveSubsystem:
    return DriveSubsystem(gyro=gyro, max_speed=4.0, max_angular_rate=2.0)


def test_robot_relative(robot_drive):
    robot_drive.apply_drive_command(DriveCommand(0.5, -0.25, 0.5, False))

    speeds = robot_drive.chassis_speeds
    assert speeds.vx == pytest.approx(2.0)
    assert speeds.vy == pytest.approx(-1.0)
    assert speeds.omega == pytest.approx(1.0)


def test_field_relative_uses_heading(robot_drive, gyro):
    """
    Facing 90 degrees (left), driving 'up field' is driving to the robot's right
    """
    gyro.angle = 90.0
    robot_drive.apply_drive_command(DriveCommand(0.5, 0.0, 0.0, True))

    speeds = robot_drive.chassis_speeds
    assert speeds.vx == pytest.approx(0.0, abs=1e-9)
    assert speeds.vy == pytest.approx(-2.0)


def test_field_relative_at_zero_heading(robot_drive):
    robot_drive.apply_drive_command(DriveCommand(0.5, 0.25, -0.5, True))

    speeds = robot_drive.chassis_speeds
    assert speeds.vx == pytest.approx(2.0)
    assert speeds.vy == pytest.approx(1.0)
    assert speeds.omega == pytest.approx(-1.0)


def test_reversed_gyro(gyro):
    gyro.angle = 30.0
    robot_drive = DriveSubsystem(gyro=gyro, gyro_reversed=True)

    assert robot_drive.get_angle() == -30.0
    assert robot_drive.heading.degrees() == pytest.approx(-30.0)


def test_heading_hold(robot_drive, gyro):
    gyro.angle = 5.0
    assert robot_drive.heading_hold_correction(0.004, 0.5, 0.0, 0.0) == 0.0

    gyro.angle = 15.0
    assert robot_drive.heading_hold_correction(0.004, 0.5, 0.0, 0.0) == pytest.approx(0.04)


def test_reset_heading_reference(robot_drive, gyro):
    gyro.angle = 5.0
    robot_drive.heading_hold_correction(0.004, 0.5, 0.0, 0.0)
    gyro.angle = 15.0

    robot_drive.reset_heading_reference()

    assert gyro.resets == 1
    assert robot_drive.heading_hold_correction(0.004, 0.5, 0.0, 0.0) == 0.0


def test_stop(robot_drive):
    robot_drive.apply_drive_command(DriveCommand(0.5, 0.5, 0.5, False))
    robot_drive.stop()

    speeds = robot_drive.chassis_speeds
    assert (speeds.vx, speeds.vy, speeds.omega) == (0.0, 0.0, 0.0)
    assert robot_drive.last_command is None
