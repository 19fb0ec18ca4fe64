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
#   2024 - Crescendo      (All measurements are in metric units)

import logging

from robotpy_apriltag import AprilTagField
from wpimath.geometry import Pose2d, Rotation2d, Translation2d
from wpimath.units import inchesToMeters, meters

from lib_6107.util.field import Field

# Setup Logging
logger = logging.getLogger(__name__)

FIELD_X_SIZE: meters = 16.54  # Field Length
FIELD_Y_SIZE: meters = 8.21  # Field Width

# Aim point at the speaker opening, 3 inches in from the alliance wall
SPEAKER_WALL_OFFSET: meters = inchesToMeters(3.0)
SPEAKER_Y: meters = 5.5

# Lob passes go into the corner near our own amp
BLUE_PASS_LOCATION = Translation2d(0.62, 7.33)
RED_PASS_LOCATION = Translation2d(15.83, 7.53)

# Robot center when the bumpers touch the subwoofer
SUBWOOFER_START_X: meters = 1.35


class CrescendoField(Field):
    """
    Crescendo field landmarks for BLUE/RED alliances.

    The blue speaker is on the x=0 wall, the red speaker on the opposite
    wall. Red locations are the blue ones mirrored across the center line,
    except the pass corners which were measured on the practice field.
    """
    tag_field = AprilTagField.k2024Crescendo
    tag_file = "2024-crescendo.json"

    @property
    def field_length(self) -> meters:
        return super().field_length or FIELD_X_SIZE

    @property
    def field_width(self) -> meters:
        return super().field_width or FIELD_Y_SIZE

    def speaker_location(self, is_red_alliance: bool) -> Translation2d:
        if is_red_alliance:
            return Translation2d(self.field_length - SPEAKER_WALL_OFFSET, SPEAKER_Y)

        return Translation2d(SPEAKER_WALL_OFFSET, SPEAKER_Y)

    def pass_location(self, is_red_alliance: bool) -> Translation2d:
        return RED_PASS_LOCATION if is_red_alliance else BLUE_PASS_LOCATION


    def start_pose(self, is_red_alliance: bool) -> Pose2d:
        """
        Bumpers against the front of our subwoofer, facing the speaker
        """
        if is_red_alliance:
            return Pose2d(self.field_length - SUBWOOFER_START_X, SPEAKER_Y, Rotation2d.fromDegrees(0.0))

        return Pose2d(SUBWOOFER_START_X, SPEAKER_Y, Rotation2d.fromDegrees(180.0))
