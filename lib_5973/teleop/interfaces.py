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
# What the teleop drive needs from the rest of the robot. Anything with these
# methods will do, the subsystems do not need to inherit from these.

from typing import Protocol

from lib_5973.teleop.modes import DriveCommand


class TeleopDrive(Protocol):
    def apply_drive_command(self, command: DriveCommand) -> None:
        """Drive with the shaped (normalized) request for this cycle"""
        ...

    def heading_hold_correction(self, gain: float, forward: float, strafe: float, rotation: float) -> float:
        """Rotation bias needed to hold the current heading (zero if none needed)"""
        ...

    def reset_heading_reference(self) -> None:
        """Zero the gyro and forget any heading being held"""
        ...

    def stop(self) -> None:
        ...


class VisionTarget(Protocol):
    def is_target_valid(self) -> bool:
        ...

    def steering_correction(self) -> float:
        """Rotation needed to center the target"""
        ...
