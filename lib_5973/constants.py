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
# Commonly used teleop constants not found in existing wpilib modules

from wpimath.units import seconds

# The period is available from robot.getPeriod() and the following provides
# a default value in case it returns 0 or None
DEFAULT_ROBOT_FREQUENCY = 1.0 / 50

######################################################################
# Input shaping
DEFAULT_DEADBAND = 0.1
TURN_DEADBAND = 0.1  # Turn axis always uses this, regardless of drive deadband

SPEED_NORMAL = 1.0
SPEED_SAFE = 0.35

######################################################################
# Combo (button hold) timing
SAFE_MODE_HOLD_TIME: seconds = 3.0
BUTTON_DELAY: seconds = 0.0  # Shared by the field and goal toggles

######################################################################
# Heading hold
HEADING_CORRECTION_GAIN = 0.004
ROTATION_EPSILON = 1.0e-3  # Rotation intents smaller than this count as 'not turning'

######################################################################
# Telemetry
DASHBOARD_UPDATE_DIVISOR = 10
