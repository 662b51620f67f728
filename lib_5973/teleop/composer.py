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

from typing import Callable

from lib_5973.teleop.modes import DriveCommand, DriveIntents, OrientationMode


def compose(mode: OrientationMode, intents: DriveIntents, heading_correction: float,
            steering_correction: Callable[[], float]) -> DriveCommand:
    """
    Build this cycle's drive command.

    The camera steering correction is only read in goal mode. Anything that is not
    ROBOT or GOAL drives field oriented, so a bad mode value never stops the robot.
    """
    match mode:
        case OrientationMode.ROBOT:
            return DriveCommand(intents.forward, intents.strafe, intents.rotation - heading_correction, False)

        case OrientationMode.GOAL:
            return DriveCommand(intents.forward, intents.strafe, intents.rotation - steering_correction(), True)

        case _:
            return DriveCommand(intents.forward, intents.strafe, intents.rotation - heading_correction, True)
