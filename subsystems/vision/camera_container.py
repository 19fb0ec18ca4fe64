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

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from photonlibpy.targeting.photonPipelineResult import PhotonPipelineResult
from wpimath.geometry import Pose2d
from wpimath.units import milliseconds


@dataclass
class TargetData:
    """
    Fiducial IDs one camera reported this loop
    """
    ids: List[int] = field(default_factory=list)
    camera_name: str = ""


class CameraContainer(ABC):
    """
    One or more cameras that report AprilTag targets and a robot pose estimate
    """
    @abstractmethod
    def get_filtered_result(self) -> PhotonPipelineResult:
        """
        Latest pipeline result with unreliable targets removed
        """

    @abstractmethod
    def get_estimated_pose(self) -> Optional[Pose2d]:
        """
        Robot pose estimated from the filtered targets, None when no estimate is available
        """

    @property
    @abstractmethod
    def latency(self) -> milliseconds:
        pass

    @abstractmethod
    def has_targets(self) -> bool:
        pass

    @abstractmethod
    def target_count(self) -> int:
        pass

    @abstractmethod
    def get_target_data(self) -> List[TargetData]:
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        pass
