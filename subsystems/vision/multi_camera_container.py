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
from typing import List, Optional, Sequence, Tuple

from commands2 import Subsystem
from pykit.logger import Logger
from wpilib import Alert, SmartDashboard
from wpimath.geometry import Pose2d

from subsystems.vision.camera_container import TargetData
from subsystems.vision.solo_camera_container import SoloCameraContainer

logger = logging.getLogger(__name__)


class MultiCameraContainer(Subsystem):
    """
    Runs every camera once per loop and feeds each pose estimate into the drive
    pose estimator with the timestamp of the frame it came from.
    """
    def __init__(self, container: 'RobotContainer', drive: 'Drive', *cameras: SoloCameraContainer):
        super().__init__()
        self.setName("Vision")

        self._container = container
        self._drive = drive
        self._cameras = cameras

        self._disconnected_alerts = [Alert(f"Vision camera {camera.label} is disconnected",
                                           Alert.AlertType.kWarning) for camera in cameras]
        self._target_data: List[TargetData] = []
        self._estimates: List[Tuple[int, Pose2d]] = []

    @property
    def cameras(self) -> Sequence[SoloCameraContainer]:
        return self._cameras

    def periodic(self) -> None:
        target_data: List[TargetData] = []
        accepted_poses: List[Pose2d] = []
        estimates: List[Tuple[int, Pose2d]] = []

        for camera, alert in zip(self._cameras, self._disconnected_alerts):
            connected = camera.is_connected()
            alert.set(not connected)

            if not connected:
                continue

            result = camera.get_filtered_result()
            target_data.append(camera.target_data(result))

            estimate = camera.estimated_robot_pose(result)
            Logger.recordOutput(f"Vision/{camera.label}/TargetCount", len(result.getTargets()))

            if estimate is None:
                continue

            pose = estimate.estimatedPose.toPose2d()
            self._drive.add_vision_measurement(pose, estimate.timestampSeconds)

            accepted_poses.append(pose)
            estimates.append((len(result.getTargets()), pose))
            Logger.recordOutput(f"Vision/{camera.label}/RobotPose", pose)

        self._target_data = target_data
        self._estimates = estimates
        Logger.recordOutput("Vision/AcceptedPoses", accepted_poses)

        # Update SmartDashboard for this subsystem at a rate slower than the period
        counter = self._container.robot.counter
        if counter % 50 == 0:
            self.dashboard_periodic()

    def dashboard_periodic(self) -> None:
        SmartDashboard.putNumber("Vision/target count", self.target_count())
        SmartDashboard.putBoolean("Vision/has targets", self.has_targets())
        SmartDashboard.putString("Vision/targets", ", ".join(f"{data.camera_name}: {data.ids}"
                                                             for data in self._target_data))

        for camera in self._cameras:
            SmartDashboard.putNumber(f"Vision/{camera.label}/latency ms", camera.latency)

    def get_estimated_pose(self) -> Optional[Pose2d]:
        """
        The pose estimate from the camera that saw the most targets this loop
        """
        if not self._estimates:
            return None

        return max(self._estimates, key=lambda estimate: estimate[0])[1]

    def has_targets(self) -> bool:
        return any(data.ids for data in self._target_data)

    def target_count(self) -> int:
        return sum(len(data.ids) for data in self._target_data)

    def get_target_data(self) -> List[TargetData]:
        return list(self._target_data)

    def is_connected(self) -> bool:
        return all(camera.is_connected() for camera in self._cameras)
