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

import logging
import os
from typing import Optional

from robotpy_apriltag import AprilTagField, AprilTagFieldLayout
from wpilib import getDeployDirectory
from wpimath.units import meters

# Setup Logging
logger = logging.getLogger(__name__)


class Field:
    """
    Base class for a season's playing field.

    When looking at the playing field, the origin is 0,0 (bottom left corner in landscape
    mode) with the Blue alliance wall on the left (lowest x-coordinate).

    The AprilTag layout comes from the robotpy-apriltag library first. If that fails,
    a JSON copy under 'deploy/fields/apriltags' is tried.

    All values are in meters
    """
    tag_field: Optional[AprilTagField] = None
    tag_file: str = ""

    def __init__(self):
        self._layout: Optional[AprilTagFieldLayout] = self._load_layout()

    @property
    def layout(self) -> Optional[AprilTagFieldLayout]:
        return self._layout

    @property
    def field_length(self) -> meters:
        """
        x maximum
        """
        return self._layout.getFieldLength() if self._layout else 0

    @property
    def field_width(self) -> meters:
        """
        y maximum
        """
        return self._layout.getFieldWidth() if self._layout else 0

    def _load_layout(self) -> Optional[AprilTagFieldLayout]:
        if self.tag_field is not None:
            try:
                layout = AprilTagFieldLayout.loadField(self.tag_field)
                logger.info(f"AprilTagLayout loaded for field {self.tag_field}")
                return layout

            except Exception as e:
                logger.warning(f"AprilTagLayout for {self.tag_field} not available from library: {e}")

        file_path = os.path.join(getDeployDirectory(), "fields", "apriltags", self.tag_file)

        if self.tag_file and os.access(file_path, os.R_OK):
            try:
                layout = AprilTagFieldLayout(file_path)
                logger.info(f"AprilTagLayout loaded from {file_path}")
                return layout

            except Exception as e:
                logger.warning(f"AprilTag JSON {file_path} is not valid: {e}")
        else:
            logger.warning(f"AprilTag JSON {file_path} does not exist or is not accessible")

        return None
