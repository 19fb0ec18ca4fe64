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
from dataclasses import dataclass
from typing import Tuple

from pykit.autolog import autolog
from wpimath.units import amperes, radians, radians_per_second, volts

import constants
from constants import DeviceID

"""
ModuleIO provides the per-module swerve hardware interface. The base class is
the no-op implementation used for log replay. Its inputs are logged so
AdvantageScope replay and simulation see the same data as the real robot.

To calibrate the absolute encoder offsets, point the modules straight (such that
forward motion on the drive motor will propel the robot forward) and copy the
reported values from the absolute encoders using AdvantageScope. These values
are logged under "/Drive/Module<N>/turn_absolute_position"
"""


@dataclass(frozen=True)
class ModuleConfig:
    name: str
    drive_motor_id: int
    drive_canbus: str
    turn_motor_id: int
    turn_canbus: str
    encoder_id: int
    encoder_canbus: str
    absolute_encoder_offset: radians


MODULE_CONFIGS: Tuple[ModuleConfig, ...] = (
    ModuleConfig("FrontLeft",
                 DeviceID.DRIVETRAIN_LEFT_FRONT_DRIVING_ID, constants.SWERVE_CANBUS,
                 DeviceID.DRIVETRAIN_LEFT_FRONT_TURNING_ID, constants.RIO_CANBUS,
                 DeviceID.DRIVETRAIN_LEFT_FRONT_ENCODER_ID, constants.SWERVE_CANBUS,
                 -1.358),
    ModuleConfig("FrontRight",
                 DeviceID.DRIVETRAIN_RIGHT_FRONT_DRIVING_ID, constants.SWERVE_CANBUS,
                 DeviceID.DRIVETRAIN_RIGHT_FRONT_TURNING_ID, constants.RIO_CANBUS,
                 DeviceID.DRIVETRAIN_RIGHT_FRONT_ENCODER_ID, constants.SWERVE_CANBUS,
                 2.324 + math.pi),
    ModuleConfig("BackLeft",
                 DeviceID.DRIVETRAIN_LEFT_REAR_DRIVING_ID, constants.SWERVE_CANBUS,
                 DeviceID.DRIVETRAIN_LEFT_REAR_TURNING_ID, constants.RIO_CANBUS,
                 DeviceID.DRIVETRAIN_LEFT_REAR_ENCODER_ID, constants.SWERVE_CANBUS,
                 0.851),
    ModuleConfig("BackRight",
                 DeviceID.DRIVETRAIN_RIGHT_REAR_DRIVING_ID, constants.SWERVE_CANBUS,
                 DeviceID.DRIVETRAIN_RIGHT_REAR_TURNING_ID, constants.RIO_CANBUS,
                 DeviceID.DRIVETRAIN_RIGHT_REAR_ENCODER_ID, constants.SWERVE_CANBUS,
                 1.578 + math.pi),
)


def module_config(index: int) -> ModuleConfig:
    """
    Calibration for module 'index'. Modules are numbered FL, FR, BL, BR.

    :raises ValueError: if index is not 0..3
    """
    if not isinstance(index, int) or not 0 <= index < len(MODULE_CONFIGS):
        raise ValueError(f"Invalid module index: {index}")

    return MODULE_CONFIGS[index]


class ModuleIO:
    # When True the hardware closes the drive velocity and turn position loops itself
    # and 'Module' sends setpoints instead of voltages
    device_closed_loop: bool = False

    @autolog
    @dataclass
    class ModuleIOInputs:
        drive_position: radians = 0.0
        drive_velocity: radians_per_second = 0.0
        drive_applied: volts = 0.0
        drive_current: amperes = 0.0

        turn_absolute_position: radians = 0.0
        turn_position: radians = 0.0
        turn_velocity: radians_per_second = 0.0
        turn_applied: volts = 0.0
        turn_current: amperes = 0.0

        turn_error: radians = 0.0

    def update_inputs(self, inputs: ModuleIOInputs) -> None:
        pass

    def set_drive_voltage(self, voltage: volts) -> None:
        pass

    def set_drive_velocity(self, velocity: radians_per_second) -> None:
        """
        Closed loop wheel velocity, only used when 'device_closed_loop' is set
        """

    def set_turn_voltage(self, voltage: volts) -> None:
        pass

    def set_turn_position(self, angle: radians) -> None:
        """
        Closed loop module angle, only used when 'device_closed_loop' is set
        """

    def set_drive_brake_mode(self, enable: bool) -> None:
        pass

    def set_turn_brake_mode(self, enable: bool) -> None:
        pass
