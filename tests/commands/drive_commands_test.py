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
from typing import List

import pytest
from commands2 import Subsystem
from wpimath.geometry import Pose2d, Rotation2d, Translation2d
from wpimath.kinematics import ChassisSpeeds

import commands.drive_commands as drive_commands
from commands.drive_commands import aim_heading, joystick_drive, linear_velocity, square_input


def test_deadband():
    assert linear_velocity(0.05, 0.05, False) == Translation2d()
    assert linear_velocity(0.0, 0.0, True) == Translation2d()


def test_full_stick():
    velocity = linear_velocity(1.0, 0.0, False)

    assert velocity.x == pytest.approx(1.0)
    assert velocity.y == pytest.approx(0.0)


def test_inputs_are_squared():
    # 0.55 after the 0.1 deadband rescales to 0.5
    velocity = linear_velocity(0.0, 0.55, False)

    assert velocity.norm() == pytest.approx(0.25)
    assert velocity.angle().degrees() == pytest.approx(90.0)


def test_red_alliance_is_flipped():
    blue = linear_velocity(0.6, 0.3, False)
    red = linear_velocity(0.6, 0.3, True)

    assert red.x == pytest.approx(-blue.x)
    assert red.y == pytest.approx(-blue.y)


def test_aim_heading():
    robot = Translation2d(3.0, 5.5)

    assert aim_heading(robot, Translation2d(0.0, 5.5)).degrees() == pytest.approx(180.0)
    assert aim_heading(robot, Translation2d(6.0, 5.5)).degrees() == pytest.approx(0.0)
    assert aim_heading(robot, Translation2d(4.0, 6.5)).radians() == pytest.approx(math.pi / 4)


def test_square_input_keeps_sign():
    assert square_input(0.5) == pytest.approx(0.25)
    assert square_input(-0.5) == pytest.approx(-0.25)
    assert square_input(0.0) == 0.0


class FakeDrive(Subsystem):
    max_linear_speed = 4.0
    max_angular_speed = 10.0

    def __init__(self, pose: Pose2d):
        super().__init__()
        self.pose = pose
        self.speeds: List[ChassisSpeeds] = []

    @property
    def rotation(self) -> Rotation2d:
        return self.pose.rotation()

    def run_velocity(self, speeds: ChassisSpeeds) -> None:
        self.speeds.append(speeds)


class FakeField:
    def __init__(self):
        self.requests = []

    def speaker_location(self, is_red: bool) -> Translation2d:
        self.requests.append(("speaker", is_red))
        return Translation2d(16.5, 5.5) if is_red else Translation2d(0.0, 5.5)

    def pass_location(self, is_red: bool) -> Translation2d:
        self.requests.append(("pass", is_red))
        return Translation2d(13.5, 8.5) if is_red else Translation2d(3.0, 8.5)


@pytest.fixture
def blue(monkeypatch):
    monkeypatch.setattr(drive_commands, "is_red_alliance", lambda: False)


def run_once(drive: FakeDrive, field: FakeField, x=0.0, y=0.0, omega=0.0, point=False, speaker=False,
             scale=1.0) -> ChassisSpeeds:
    command = joystick_drive(drive, field, lambda: x, lambda: y, lambda: omega,
                             lambda: point, lambda: speaker, speed_scale=lambda: scale)
    command.initialize()
    command.execute()

    return drive.speeds[-1]


def test_stick_rotation_without_override(blue):
    drive = FakeDrive(Pose2d(3.0, 5.5, Rotation2d()))

    speeds = run_once(drive, FakeField(), omega=1.0, scale=0.5)

    assert speeds.omega == pytest.approx(0.5 * FakeDrive.max_angular_speed)


def test_speaker_override_turns_toward_speaker(blue):
    # Facing up the field with the speaker straight behind on the left
    drive = FakeDrive(Pose2d(3.0, 5.5, Rotation2d.fromDegrees(90.0)))
    field = FakeField()

    speeds = run_once(drive, field, omega=-1.0, speaker=True)

    assert field.requests == [("speaker", False)]
    assert speeds.omega > 0.0


def test_override_ignores_stick(blue):
    # Already facing the speaker, so no turn even with full stick
    drive = FakeDrive(Pose2d(3.0, 5.5, Rotation2d.fromDegrees(180.0)))

    speeds = run_once(drive, FakeField(), omega=1.0, speaker=True)

    assert speeds.omega == pytest.approx(0.0, abs=1e-6)


def test_pass_override_wins(blue):
    # Pass corner is straight ahead, the speaker is behind
    drive = FakeDrive(Pose2d(3.0, 5.5, Rotation2d.fromDegrees(90.0)))
    field = FakeField()

    speeds = run_once(drive, field, point=True, speaker=True)

    assert field.requests == [("pass", False)]
    assert speeds.omega == pytest.approx(0.0, abs=1e-6)


def test_red_alliance_targets(monkeypatch):
    monkeypatch.setattr(drive_commands, "is_red_alliance", lambda: True)
    drive = FakeDrive(Pose2d(14.0, 5.5, Rotation2d()))
    field = FakeField()

    speeds = run_once(drive, field, x=1.0, speaker=True)

    assert field.requests == [("speaker", True)]
    assert speeds.omega == pytest.approx(0.0, abs=1e-6)
    # Full stick drives toward the red driver station
    assert speeds.vx == pytest.approx(-FakeDrive.max_linear_speed)
