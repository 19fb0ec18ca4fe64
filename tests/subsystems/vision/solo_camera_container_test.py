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

from dataclasses import dataclass
from types import SimpleNamespace
from typing import List, Optional

import pytest
from photonlibpy.targeting.multiTargetPNPResult import MultiTargetPNPResult
from photonlibpy.targeting.photonPipelineResult import PhotonPipelineMetadata, PhotonPipelineResult
from photonlibpy.targeting.photonTrackedTarget import PhotonTrackedTarget
from robotpy_apriltag import AprilTagField, AprilTagFieldLayout
from wpimath.geometry import Pose2d, Pose3d, Rotation2d, Rotation3d, Transform3d, Translation3d

from subsystems.vision.camera_container import TargetData
from subsystems.vision.solo_camera_container import SoloCameraContainer, filter_targets


@dataclass
class FakeTarget:
    """
    Just enough of a PhotonTrackedTarget for the filter
    """
    fiducialId: int
    ambiguity: float
    distance: float

    def getPoseAmbiguity(self) -> float:
        return self.ambiguity

    def getBestCameraToTarget(self) -> Transform3d:
        return Transform3d(Translation3d(self.distance, 0.25, 0.5), Rotation3d())


def test_keeps_good_targets():
    targets = [FakeTarget(1, 0.05, 2.0), FakeTarget(2, 0.1, 4.0)]

    assert filter_targets(targets) == targets


def test_drops_ambiguous_targets():
    targets = [FakeTarget(1, 0.05, 2.0), FakeTarget(2, 0.21, 2.0), FakeTarget(3, 0.9, 1.0)]

    assert [t.fiducialId for t in filter_targets(targets)] == [1]


def test_drops_distant_targets():
    targets = [FakeTarget(1, 0.05, 5.6), FakeTarget(2, 0.05, -6.0), FakeTarget(3, 0.05, -3.0)]

    assert [t.fiducialId for t in filter_targets(targets)] == [3]


def test_limits_are_inclusive():
    targets = [FakeTarget(7, 0.2, 5.5), FakeTarget(8, 0.2, -5.5)]

    assert [t.fiducialId for t in filter_targets(targets)] == [7, 8]


def test_order_is_preserved():
    targets = [FakeTarget(index, 0.01 * index, float(index)) for index in range(5, 0, -1)]

    assert [t.fiducialId for t in filter_targets(targets)] == [5, 4, 3, 2, 1]


def test_custom_limits():
    targets = [FakeTarget(1, 0.3, 2.0), FakeTarget(2, 0.05, 7.0)]

    assert [t.fiducialId for t in filter_targets(targets, max_ambiguity=0.5, max_distance=3.0)] == [1]


def test_empty():
    assert filter_targets([]) == []


def test_target_data():
    data = TargetData([3, 4], "FrontLeft")

    assert data.ids == [3, 4]
    assert data.camera_name == "FrontLeft"
    assert data == TargetData([3, 4], "FrontLeft")


@pytest.mark.parametrize("ambiguity", [0.2000001, 1.0])
def test_just_over_ambiguity(ambiguity):
    assert filter_targets([FakeTarget(1, ambiguity, 1.0)]) == []


def tag(fiducial_id: int, ambiguity: float = 0.05, distance: float = 2.0) -> PhotonTrackedTarget:
    return PhotonTrackedTarget(fiducialId=fiducial_id,
                               poseAmbiguity=ambiguity,
                               bestCameraToTarget=Transform3d(Translation3d(distance, 0.0, 0.5), Rotation3d()))


def frame(targets: List[PhotonTrackedTarget], capture_us: int = 1_000_000,
          multitag: Optional[MultiTargetPNPResult] = None) -> PhotonPipelineResult:
    metadata = PhotonPipelineMetadata(captureTimestampMicros=capture_us,
                                      publishTimestampMicros=capture_us + 5_000,
                                      sequenceID=capture_us // 1000)
    return PhotonPipelineResult(ntReceiveTimestampMicros=capture_us + 10_000,
                                targets=targets,
                                metadata=metadata,
                                multitagResult=multitag)


class FakeEstimator:
    """
    Acts like PhotonPoseEstimator.update(): one estimate per frame timestamp
    """
    def __init__(self, pose: Pose2d):
        self.pose = pose
        self.calls = 0
        self._last_timestamp = None

    def update(self, result: PhotonPipelineResult):
        self.calls += 1
        timestamp = result.getTimestampSeconds()
        if timestamp == self._last_timestamp:
            return None

        self._last_timestamp = timestamp
        return SimpleNamespace(estimatedPose=Pose3d(self.pose), timestampSeconds=timestamp,
                               targetsUsed=result.getTargets())


@pytest.fixture
def latest() -> dict:
    """
    What the camera reports next, tests swap in new frames
    """
    return {"result": frame([])}


@pytest.fixture
def camera(monkeypatch, latest) -> SoloCameraContainer:
    layout = AprilTagFieldLayout.loadField(AprilTagField.k2024Crescendo)
    solo = SoloCameraContainer("front_left_test", Transform3d(), layout, label="front-left")

    monkeypatch.setattr(solo._camera, "getLatestResult", lambda: latest["result"])
    return solo


def test_filtered_result_keeps_timing(camera, latest):
    raw = frame([tag(7), tag(8, ambiguity=0.5)], capture_us=2_000_000)
    latest["result"] = raw

    result = camera.get_filtered_result()

    assert [target.getFiducialId() for target in result.getTargets()] == [7]
    assert result.getTimestampSeconds() == pytest.approx(raw.getTimestampSeconds())
    assert result.metadata == raw.metadata
    assert result.ntReceiveTimestampMicros == raw.ntReceiveTimestampMicros


def test_multitag_dropped_when_it_used_rejected_tag(camera, latest):
    multitag = MultiTargetPNPResult(fiducialIDsUsed=[7, 8])
    latest["result"] = frame([tag(7), tag(8, distance=6.0)], multitag=multitag)

    assert camera.get_filtered_result().multitagResult is None


def test_multitag_kept_when_all_tags_survive(camera, latest):
    multitag = MultiTargetPNPResult(fiducialIDsUsed=[7, 8])
    latest["result"] = frame([tag(7), tag(8)], multitag=multitag)

    assert camera.get_filtered_result().multitagResult == multitag


def test_no_estimate_without_targets(camera, latest):
    estimator = FakeEstimator(Pose2d())
    camera._estimator = estimator

    assert camera.estimated_robot_pose() is None
    assert camera.get_estimated_pose() is None

    # Every target filtered out is the same as none seen
    latest["result"] = frame([tag(7, ambiguity=0.9)])
    assert camera.estimated_robot_pose() is None
    assert estimator.calls == 0


def test_estimate_repeats_for_same_frame(camera, latest):
    pose = Pose2d(1.4, 5.5, Rotation2d.fromDegrees(180))
    estimator = FakeEstimator(pose)
    camera._estimator = estimator
    latest["result"] = frame([tag(7)])

    first = camera.estimated_robot_pose(camera.get_filtered_result())

    assert first is not None
    assert camera.estimated_robot_pose(camera.get_filtered_result()) is first
    assert camera.get_estimated_pose() == pose
    assert estimator.calls == 1


def test_new_frame_gets_new_estimate(camera, latest):
    estimator = FakeEstimator(Pose2d(1.4, 5.5, Rotation2d()))
    camera._estimator = estimator

    latest["result"] = frame([tag(7)], capture_us=1_000_000)
    first = camera.estimated_robot_pose()

    latest["result"] = frame([tag(7)], capture_us=1_020_000)
    second = camera.estimated_robot_pose()

    assert estimator.calls == 2
    assert second is not None
    assert second is not first
    assert second.timestampSeconds > first.timestampSeconds


def test_target_data_from_result(camera, latest):
    latest["result"] = frame([tag(4), tag(7)])

    assert camera.get_target_data() == [TargetData([4, 7], "front_left_test")]
    assert camera.target_count() == 2
    assert camera.has_targets()
    assert camera.label == "front-left"
