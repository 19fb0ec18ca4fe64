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
# Constants for the robot project go here. Field landmarks live in field/field_2024.py
# and the per-module swerve calibration table lives with the module I/O layer.

import math
import os
from enum import Enum, IntEnum, unique

from wpilib import RobotBase
from wpimath.geometry import Rotation3d, Transform3d, Translation3d
from wpimath.units import degreesToRadians, feetToMeters, inchesToMeters, meters, meters_per_second, \
    radians_per_second, seconds

from lib_6107.constants import *


class RobotModes(Enum):
    """Enum for robot modes."""
    REAL = 1
    SIMULATION = 2
    REPLAY = 3


SIM_MODE = (
    RobotModes.REPLAY if "LOG_PATH" in os.environ and os.environ["LOG_PATH"] != ""
    else RobotModes.SIMULATION
)
ROBOT_MODE = RobotModes.REAL if RobotBase.isReal() else SIM_MODE

###############################################################################
# Operator interface
DRIVER_CONTROLLER_PORT = 0
OPERATOR_CONTROLLER_PORT = 1

# Joystick Deadband
JOYSTICK_DEADBAND = 0.1

#################################################################
# Drive subsystem related constants
#
# Chassis is square. Track width is measured between the module centers.

TRACK_WIDTH_X: meters = inchesToMeters(25.0)
TRACK_WIDTH_Y: meters = inchesToMeters(25.0)
DRIVE_BASE_RADIUS: meters = math.hypot(TRACK_WIDTH_X / 2.0, TRACK_WIDTH_Y / 2.0)

WHEEL_RADIUS: meters = inchesToMeters(2.0)

MAX_LINEAR_SPEED: meters_per_second = feetToMeters(14.5)
MAX_ANGULAR_SPEED: radians_per_second = MAX_LINEAR_SPEED / DRIVE_BASE_RADIUS

# Heading override PID used when the driver asks to point at the speaker or pass target
AIM_PID_GAINS = (1.1, 0.01, 0.1)

# Hold time on motor brakes when disabled
WHEEL_LOCK_TIME: seconds = 3


@unique
class SwerveModuleType(Enum):
    XS = "XS"                 # TalonFX drive, brushed TalonSRX steer, CANcoder
    TALONFX = "TalonFX"       # TalonFX drive and steer, CANcoder


SWERVE_MODULE_TYPE = SwerveModuleType.XS

# CAN bus names. The drive motors and encoders are wired on the CANivore, the
# brushed steer motors and the mechanism controllers on the roboRIO bus
SWERVE_CANBUS = "Swerve"
RIO_CANBUS = ""

#################################################################
# Device IDs


@unique
class DeviceID(IntEnum):
    # Drivetrain (CANivore unless noted)
    DRIVETRAIN_LEFT_FRONT_DRIVING_ID = 1
    DRIVETRAIN_RIGHT_FRONT_DRIVING_ID = 2
    DRIVETRAIN_LEFT_REAR_DRIVING_ID = 3
    DRIVETRAIN_RIGHT_REAR_DRIVING_ID = 4

    DRIVETRAIN_LEFT_FRONT_TURNING_ID = 11      # roboRIO bus
    DRIVETRAIN_RIGHT_FRONT_TURNING_ID = 12     # roboRIO bus
    DRIVETRAIN_LEFT_REAR_TURNING_ID = 13       # roboRIO bus
    DRIVETRAIN_RIGHT_REAR_TURNING_ID = 14      # roboRIO bus

    DRIVETRAIN_LEFT_FRONT_ENCODER_ID = 21
    DRIVETRAIN_RIGHT_FRONT_ENCODER_ID = 22
    DRIVETRAIN_LEFT_REAR_ENCODER_ID = 23
    DRIVETRAIN_RIGHT_REAR_ENCODER_ID = 24

    GYRO_DEVICE_ID = 25

    # Shooter (TalonFX, roboRIO bus)
    SHOOTER_TOP_ID = 31
    SHOOTER_BOTTOM_ID = 32
    SHOOTER_PIVOT_ID = 33
    CLIMBER_ID = 34

    # Note path (SparkMax, roboRIO bus)
    INTAKE_ID = 41
    HANDLER_ID = 42
    FEEDER_ID = 43


# Digital inputs
INTAKE_LIMIT_DIO_CHANNEL = 0

#################################################################
# Shooter
SHOOTER_RPM_TOLERANCE = 150.0
SHOOTER_ANGLE_TOLERANCE = 1.5           # degrees

# Pivot limits, degrees above horizontal. The stow position rests on the hard stop
SHOOTER_MIN_ANGLE = -50.0
SHOOTER_MAX_ANGLE = 90.0
SHOOTER_STOW_ANGLE = SHOOTER_MIN_ANGLE

# Fixed shots: (top RPM, bottom RPM, pivot degrees)
SPEAKER_SHOT = (3500.0, 3500.0, -42.0)      # Bumpers against the subwoofer
AMP_SHOT = (900.0, 600.0, 84.0)
AUTO_LINE_SHOT = (4200.0, 4200.0, -31.0)
STAGE_SHOT = (4800.0, 4800.0, -26.0)
WING_SHOT = (5400.0, 5400.0, -21.0)
PASS_SHOT = (3800.0, 3800.0, -35.0)

# Auto aim lookup, indexed by distance (meters) from the speaker aim point
AUTO_AIM_DISTANCES = (1.3, 2.0, 3.0, 4.0, 5.0, 6.0)
AUTO_AIM_ANGLES = (-42.0, -33.0, -27.0, -23.0, -21.0, -20.0)
AUTO_AIM_RPMS = (3500.0, 4000.0, 4500.0, 5000.0, 5400.0, 5700.0)

# Note path outputs, percent
INTAKE_OUTPUT = 1.0
HANDLER_INTAKE_OUTPUT = 0.5
FEED_OUTPUT = 1.0
OUTTAKE_OUTPUT = -0.6

#################################################################################
# Camera configurations
#
# Transforms are robot-to-camera. All four PhotonVision cameras sit on the
# corners of the frame, 9 inches up and pitched 20 degrees upward.

_CAMERA_PITCH = degreesToRadians(-20.0)

FRONT_LEFT_CAMERA_INFO = {
    "Label"    : "front-left",
    "Name"     : "FrontLeft",
    "Transform": Transform3d(Translation3d(x=inchesToMeters(10.5), y=inchesToMeters(10.5), z=inchesToMeters(9.0)),
                             Rotation3d(0.0, _CAMERA_PITCH, degreesToRadians(45.0))),
}

FRONT_RIGHT_CAMERA_INFO = {
    "Label"    : "front-right",
    "Name"     : "FrontRight",
    "Transform": Transform3d(Translation3d(x=inchesToMeters(10.5), y=inchesToMeters(-10.5), z=inchesToMeters(9.0)),
                             Rotation3d(0.0, _CAMERA_PITCH, degreesToRadians(-45.0))),
}

BACK_RIGHT_CAMERA_INFO = {
    "Label"    : "back-right",
    "Name"     : "BackRight",
    "Transform": Transform3d(Translation3d(x=inchesToMeters(-10.5), y=inchesToMeters(-10.5), z=inchesToMeters(9.0)),
                             Rotation3d(0.0, _CAMERA_PITCH, degreesToRadians(-135.0))),
}

BACK_LEFT_CAMERA_INFO = {
    "Label"    : "back-left",
    "Name"     : "BackLeft",
    "Transform": Transform3d(Translation3d(x=inchesToMeters(-10.5), y=inchesToMeters(10.5), z=inchesToMeters(9.0)),
                             Rotation3d(0.0, _CAMERA_PITCH, degreesToRadians(135.0))),
}

CAMERA_INFOS = (FRONT_LEFT_CAMERA_INFO, FRONT_RIGHT_CAMERA_INFO, BACK_RIGHT_CAMERA_INFO, BACK_LEFT_CAMERA_INFO)

# Vision target filter limits. Tune these until the estimate behaves
MAX_TARGET_AMBIGUITY = 0.2
MAX_TARGET_DISTANCE: meters = 5.5
