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
#
# Constants for source in this subdirectory will go here

from enum import Enum

from wpilib import RobotBase
from wpimath.units import meters_per_second, radians_per_second, rotationsToRadians, seconds

from lib_5973.constants import *


class RobotModes(Enum):
    """Enum for robot modes."""
    REAL = 1
    SIMULATION = 2


ROBOT_MODE = RobotModes.REAL if RobotBase.isReal() else RobotModes.SIMULATION

###############################################################################
# Driver station
DRIVER_CONTROLLER_PORT = 0

# Joystick Deadband
JOYSTICK_DEADBAND = 0.1

# Speed scaling applied to the joysticks in normal and safe mode
DRIVE_SPEED_NORMAL = 0.8
DRIVE_SPEED_SAFE = 0.3

# How long the field/goal mode buttons must be held to toggle
FIELD_GOAL_TOGGLE_DELAY: seconds = 0.25

#################################################################
# Drive subsystem related constants
MAX_SPEED: meters_per_second = 4.5  # TODO: Measure this
MAX_ANGULAR_SPEED: radians_per_second = rotationsToRadians(0.75)  # TODO: Measure this

GYRO_ANALOG_CHANNEL = 0
GYRO_REVERSED = False  # (affects field-relative driving)

#################################################################
# Vision
LIMELIGHT_NAME = "limelight"

# Steering PID on the target 'tx' offset (degrees) while goal oriented
LIMELIGHT_X_KP = 0.02
LIMELIGHT_X_KI = 0.0
LIMELIGHT_X_KD = 0.001
