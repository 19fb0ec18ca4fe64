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
# Field relative joystick driving with optional heading override. Started from the
# AdvantageKit 2024 swerve template and extended to aim at the speaker or pass corner.

import math
from typing import Callable, Optional

from commands2 import Command, cmd
from wpilib import DriverStation
from wpimath import applyDeadband
from wpimath.controller import PIDController
from wpimath.geometry import Rotation2d, Translation2d
from wpimath.kinematics import ChassisSpeeds

import constants
from field.field_2024 import CrescendoField

DEADBAND = constants.JOYSTICK_DEADBAND


def is_red_alliance() -> bool:
    return DriverStation.getAlliance() == DriverStation.Alliance.kRed


def linear_velocity(x: float, y: float, is_red: bool) -> Translation2d:
    """
    Joystick (x, y) to a field relative velocity as a fraction of max speed. The
    magnitude is deadbanded then squared. The red alliance drives from the other
    end of the field so its direction is flipped.
    """
    magnitude = applyDeadband(math.hypot(x, y), DEADBAND)
    if magnitude == 0.0:
        return Translation2d()

    direction = Rotation2d(-x, -y) if is_red else Rotation2d(x, y)
    magnitude = magnitude * magnitude

    return Translation2d(magnitude, direction)


def aim_heading(robot: Translation2d, target: Translation2d) -> Rotation2d:
    """
    Heading that points the front of the robot at 'target'
    """
    return (target - robot).angle()


def square_input(value: float) -> float:
    return math.copysign(value * value, value)


def joystick_drive(drive: 'Drive', field: CrescendoField,
                   x_supplier: Callable[[], float],
                   y_supplier: Callable[[], float],
                   omega_supplier: Callable[[], float],
                   point_supplier: Callable[[], bool],
                   speaker_supplier: Callable[[], bool],
                   aim_pid: Optional[PIDController] = None,
                   speed_scale: Callable[[], float] = lambda: 1.0) -> Command:
    """
    Field relative drive command using two joysticks (controlling linear and angular
    velocities). While 'point_supplier' is true the heading is taken over to face the
    pass corner, while 'speaker_supplier' is true it faces our speaker.

    'speed_scale' is read every loop so the dashboard speed limiter takes effect
    without rebuilding the command.
    """
    if aim_pid is None:
        aim_pid = PIDController(*constants.AIM_PID_GAINS)

    aim_pid.enableContinuousInput(-math.pi, math.pi)

    def run() -> None:
        is_red = is_red_alliance()
        linear = linear_velocity(x_supplier(), y_supplier(), is_red)

        target: Optional[Translation2d] = None
        if point_supplier():
            target = field.pass_location(is_red)
        elif speaker_supplier():
            target = field.speaker_location(is_red)

        if target is not None:
            pose = drive.pose
            heading = aim_heading(pose.translation(), target)
            omega = aim_pid.calculate(pose.rotation().radians(), heading.radians())
            omega = max(-1.0, min(1.0, omega))
        else:
            aim_pid.reset()
            omega = applyDeadband(omega_supplier(), DEADBAND)

        omega = square_input(omega)
        scale = speed_scale()

        drive.run_velocity(ChassisSpeeds.fromFieldRelativeSpeeds(linear.x * drive.max_linear_speed * scale,
                                                                 linear.y * drive.max_linear_speed * scale,
                                                                 omega * drive.max_angular_speed * scale,
                                                                 drive.rotation))

    return cmd.run(run, drive).withName("JoystickDrive")
