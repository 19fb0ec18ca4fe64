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

import math

import pytest

from robotcontainer import SPEED_LIMITS, valid_speed_scale


@pytest.mark.parametrize("label, scale", SPEED_LIMITS.items())
def test_limiter_choices_are_valid(label, scale):
    assert valid_speed_scale(scale) == scale


@pytest.mark.parametrize("scale", [None, 0.0, -0.5, 1.5, math.nan, "50%"])
def test_invalid_limit_runs_full_speed(scale):
    assert valid_speed_scale(scale) == 1.0


def test_limit_of_one_is_full_speed():
    assert valid_speed_scale(1) == 1.0
