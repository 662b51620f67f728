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

from typing import List

import pytest
from commands2 import Subsystem

from lib_5973.teleop.modes import AxisInput, DriveCommand, GestureInput


class FakeClock:
    """Stands in for the FPGA timestamp so tests control time exactly"""
    def __init__(self, start: float = 10.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> None:
        self.now += dt


class FakeDrive(Subsystem):
    def __init__(self, correction: float = 0.0):
        super().__init__()
        self.correction = correction
        self.commands: List[DriveCommand] = []
        self.correction_calls = []
        self.resets = 0
        self.stopped = False

    def apply_drive_command(self, command: DriveCommand) -> None:
        self.commands.append(command)

    def heading_hold_correction(self, gain: float, forward: float, strafe: float, rotation: float) -> float:
        self.correction_calls.append((gain, forward, strafe, rotation))
        return self.correction

    def reset_heading_reference(self) -> None:
        self.resets += 1

    def stop(self) -> None:
        self.stopped = True


class FakeVision:
    def __init__(self, valid: bool = True, steering: float = 0.0):
        self.valid = valid
        self.steering = steering
        self.steering_calls = 0

    def is_target_valid(self) -> bool:
        return self.valid

    def steering_correction(self) -> float:
        self.steering_calls += 1
        return self.steering


class DriverControls:
    """Joystick axes and buttons that tests can set between cycles"""
    def __init__(self):
        self.axes = {axis: 0.0 for axis in AxisInput}
        self.buttons = {gesture: False for gesture in GestureInput}

    def axis_map(self):
        return {axis: (lambda axis=axis: self.axes[axis]) for axis in AxisInput}

    def button_map(self):
        return {gesture: (lambda gesture=gesture: self.buttons[gesture]) for gesture in GestureInput}


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def drive() -> FakeDrive:
    return FakeDrive()


@pytest.fixture
def vision() -> FakeVision:
    return FakeVision()


@pytest.fixture
def controls() -> DriverControls:
    return DriverControls()


@pytest.fixture
def notices() -> List[str]:
    return []
