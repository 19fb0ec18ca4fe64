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

import dataclasses
import logging
from typing import List, Optional, Sequence

from photonlibpy import PhotonCamera, PhotonPoseEstimator, PoseStrategy
from photonlibpy.estimatedRobotPose import EstimatedRobotPose
from photonlibpy.targeting.photonPipelineResult import PhotonPipelineResult
from photonlibpy.targeting.photonTrackedTarget import PhotonTrackedTarget
from robotpy_apriltag import AprilTagFieldLayout
from wpimath.geometry import Pose2d, Transform3d
from wpimath.units import meters, milliseconds

import constants
from subsystems.vision.camera_container import CameraContainer, TargetData

logger = logging.getLogger(__name__)


def filter_targets(targets: Sequence[PhotonTrackedTarget],
                   max_ambiguity: float = constants.MAX_TARGET_AMBIGUITY,
                   max_distance: meters = constants.MAX_TARGET_DISTANCE) -> List[PhotonTrackedTarget]:
    """
    Drop targets whose pose is too ambiguous or that are too far in front of (or
    behind) the camera. Limits are inclusive, so a target exactly at a limit is kept.
    """
    return [target for target in targets
            if target.getPoseAmbiguity() <= max_ambiguity
            and abs(target.getBestCameraToTarget().x) <= max_distance]


class SoloCameraContainer(CameraContainer):
    """
    A single PhotonVision camera and its pose estimator.

    The estimator uses the multi-tag solve done on the coprocessor and falls back
    to the lowest ambiguity single tag when only one tag survives the filter.
    """
    def __init__(self, name: str, robot_to_camera: Transform3d, layout: AprilTagFieldLayout,
                 label: Optional[str] = None):
        self._camera = PhotonCamera(name)
        self._label = label or name

        self._estimator = PhotonPoseEstimator(layout,
                                              PoseStrategy.MULTI_TAG_PNP_ON_COPROCESSOR,
                                              self._camera,
                                              robot_to_camera)
        self._estimator.multiTagFallbackStrategy = PoseStrategy.LOWEST_AMBIGUITY

        # The estimator returns None when handed the same frame twice
        self._last_timestamp: Optional[float] = None
        self._last_estimate: Optional[EstimatedRobotPose] = None

    @property
    def name(self) -> str:
        return self._camera.getName()

    @property
    def label(self) -> str:
        return self._label

    def get_filtered_result(self) -> PhotonPipelineResult:
        result = self._camera.getLatestResult()
        targets = filter_targets(result.getTargets())

        # The coprocessor multi-tag solve is only trusted if it used none of the rejected tags
        multitag = result.multitagResult
        if multitag is not None:
            kept_ids = {target.getFiducialId() for target in targets}
            if not set(multitag.fiducialIDsUsed) <= kept_ids:
                multitag = None

        return dataclasses.replace(result, targets=targets, multitagResult=multitag)

    def estimated_robot_pose(self, result: Optional[PhotonPipelineResult] = None) -> Optional[EstimatedRobotPose]:
        """
        Vendor pose estimate, with timestamp and the targets used, or None
        """
        if result is None:
            result = self.get_filtered_result()

        if not result.hasTargets():
            return None

        timestamp = result.getTimestampSeconds()
        if timestamp != self._last_timestamp:
            self._last_timestamp = timestamp
            self._last_estimate = self._estimator.update(result)

        return self._last_estimate

    def get_estimated_pose(self) -> Optional[Pose2d]:
        estimate = self.estimated_robot_pose()

        return estimate.estimatedPose.toPose2d() if estimate is not None else None

    @property
    def latency(self) -> milliseconds:
        return self.get_filtered_result().getLatencyMillis()

    def has_targets(self) -> bool:
        return self.get_filtered_result().hasTargets()

    def target_count(self) -> int:
        return len(self.get_filtered_result().getTargets())

    def get_target_data(self) -> List[TargetData]:
        return [self.target_data(self.get_filtered_result())]

    def target_data(self, result: PhotonPipelineResult) -> TargetData:
        return TargetData([target.getFiducialId() for target in result.getTargets()], self.name)

    def is_connected(self) -> bool:
        return self._camera.isConnected()
