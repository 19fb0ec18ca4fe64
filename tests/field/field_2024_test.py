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

from field.field_2024 import BLUE_PASS_LOCATION, RED_PASS_LOCATION, SPEAKER_WALL_OFFSET, SPEAKER_Y, CrescendoField


@pytest.fixture(scope="module")
def field() -> CrescendoField:
    return CrescendoField()


def test_speaker_locations(field):
    blue = field.speaker_location(False)
    red = field.speaker_location(True)

    assert blue.x == pytest.approx(SPEAKER_WALL_OFFSET)
    assert red.x == pytest.approx(field.field_length - SPEAKER_WALL_OFFSET)
    assert blue.y == red.y == pytest.approx(SPEAKER_Y)


def test_pass_locations(field):
    assert field.pass_location(False) == BLUE_PASS_LOCATION
    assert field.pass_location(True) == RED_PASS_LOCATION


def test_start_pose_faces_speaker(field):
    for is_red in (False, True):
        pose = field.start_pose(is_red)
        to_speaker = field.speaker_location(is_red) - pose.translation()

        assert to_speaker.angle().cos() == pytest.approx(pose.rotation().cos())
        assert to_speaker.angle().sin() == pytest.approx(pose.rotation().sin(), abs=1e-9)


def test_landmarks_on_field(field):
    for is_red in (False, True):
        for location in (field.speaker_location(is_red), field.pass_location(is_red)):
            assert 0.0 < location.x < field.field_length
            assert 0.0 < location.y < field.field_width
