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

from lib_5973.teleop.modes import AxisInput
from lib_5973.util.input_shaper import clamp, shape, shape_intents


@pytest.mark.parametrize("raw", [0.0, 0.05, -0.05, 0.099, -0.099])
def test_inside_deadband_is_zero(raw):
    assert shape(raw, 0.1, 1.0) == 0.0
    assert shape(raw, 0.1, 0.3) == 0.0


@pytest.mark.parametrize("scale", [0.0, 0.3, 1.0, 2.5])
@pytest.mark.parametrize("raw", [-1.0, -0.7, -0.1, 0.0, 0.2, 0.65, 1.0])
def test_output_is_bounded(raw, scale):
    assert -1.0 <= shape(raw, 0.1, scale) <= 1.0


def test_deadband_rescales_remaining_range():
    """
    Outside of the deadband, the output should start at zero and still reach full
    scale at full stick.
    """
    assert shape(1.0, 0.1, 1.0) == pytest.approx(1.0)
    assert shape(-1.0, 0.1, 1.0) == pytest.approx(-1.0)
    assert shape(0.55, 0.1, 1.0) == pytest.approx(0.5)
    assert shape(-0.55, 0.1, 1.0) == pytest.approx(-0.5)
    assert shape(0.101, 0.1, 1.0) == pytest.approx(0.0, abs=0.01)


def test_scale_and_clamp():
    assert shape(0.55, 0.1, 0.5) == pytest.approx(0.25)
    assert shape(0.9, 0.1, 2.0) == 1.0
    assert shape(-0.9, 0.1, 2.0) == -1.0
    assert clamp(3.0) == 1.0
    assert clamp(-3.0) == -1.0


def test_strafe_and_turn_are_inverted():
    axes = {AxisInput.FORWARD: 0.55, AxisInput.STRAFE: 0.55, AxisInput.TURN: 0.55}
    intents = shape_intents(axes, 0.1, 1.0)

    assert intents.forward == pytest.approx(0.5)
    assert intents.strafe == pytest.approx(-0.5)
    assert intents.rotation == pytest.approx(-0.5)


def test_turn_uses_its_own_deadband():
    """
    Even with a large drive deadband, the turn axis only ignores the first 10%
    """
    axes = {AxisInput.FORWARD: 0.2, AxisInput.STRAFE: 0.2, AxisInput.TURN: 0.2}
    intents = shape_intents(axes, 0.3, 1.0)

    assert intents.forward == 0.0
    assert intents.strafe == 0.0
    assert intents.rotation == pytest.approx(-0.1 / 0.9)
