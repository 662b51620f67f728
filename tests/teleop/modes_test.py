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

from lib_5973.teleop.modes import OrientationMode, TeleopConfig


def test_default_config():
    config = TeleopConfig()

    assert config.safe_hold_time == 3.0
    assert config.turn_deadband == 0.1
    assert config.heading_gain == 0.004


@pytest.mark.parametrize("kwargs", [{"deadband": -0.1},
                                    {"deadband": 1.0},
                                    {"turn_deadband": 1.5},
                                    {"speed_normal": -1.0},
                                    {"speed_safe": -0.5},
                                    {"safe_hold_time": -3.0},
                                    {"button_delay": -0.25}])
def test_bad_config(kwargs):
    with pytest.raises(ValueError):
        TeleopConfig(**kwargs)


def test_mode_labels():
    assert OrientationMode.FIELD.label == "Field Oriented"
    assert OrientationMode.ROBOT.label == "Robot POV"
    assert OrientationMode.GOAL.label == "Goal Oriented"
