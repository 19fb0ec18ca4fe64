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
import math
from typing import Optional

from pykit.logger import Logger
from wpimath.controller import PIDController, SimpleMotorFeedforwardRadians
from wpimath.geometry import Rotation2d
from wpimath.kinematics import SwerveModulePosition, SwerveModuleState
from wpimath.units import meters, meters_per_second, radians_per_second, volts

import constants
from constants import RobotModes
from subsystems.drive.module_io import ModuleIO
from subsystems.drive.module_io_sim import DRIVE_KV as SIM_DRIVE_KV

logger = logging.getLogger(__name__)

# (feedforward kS, kV), drive (kP, kI, kD), turn (kP, kI, kD)
REAL_GAINS = ((0.1, 0.13), (0.05, 0.0, 0.0), (7.0, 0.0, 0.0))
SIM_GAINS = ((0.0, SIM_DRIVE_KV), (0.1, 0.0, 0.0), (10.0, 0.0, 0.0))


class Module:
    """
    One swerve module. Closes the drive velocity and turn position loops here unless the
    module hardware runs them itself ('ModuleIO.device_closed_loop').
    """
    def __init__(self, io: ModuleIO, index: int):
        self._io = io
        self._index = index
        self._inputs = ModuleIO.ModuleIOInputs()

        # Replay uses the real robot gains so the logged outputs match
        feedforward, drive_gains, turn_gains = SIM_GAINS if constants.ROBOT_MODE == RobotModes.SIMULATION \
            else REAL_GAINS

        self._drive_feedforward = SimpleMotorFeedforwardRadians(*feedforward)
        self._drive_feedback = PIDController(*drive_gains)
        self._turn_feedback = PIDController(*turn_gains)
        self._turn_feedback.enableContinuousInput(-math.pi, math.pi)

        self._angle_setpoint: Optional[Rotation2d] = None     # Setpoint for closed loop control, None for open loop
        self._speed_setpoint: Optional[meters_per_second] = None
        self._turn_relative_offset: Optional[Rotation2d] = None

        self.set_brake_mode(True)

    @property
    def inputs(self) -> ModuleIO.ModuleIOInputs:
        return self._inputs

    def update_inputs(self) -> None:
        """
        Update inputs without running the rest of the periodic logic. Called by the
        drive subsystem so all module inputs are read before any are processed.
        """
        self._io.update_inputs(self._inputs)

    def periodic(self) -> None:
        Logger.processInputs(f"Drive/Module{self._index}", self._inputs)

        # On first cycle, reset relative turn encoder. Wait until absolute angle is nonzero
        # in case it wasn't initialized yet
        if self._turn_relative_offset is None and self._inputs.turn_absolute_position != 0.0:
            self._turn_relative_offset = Rotation2d(self._inputs.turn_absolute_position) - \
                Rotation2d(self._inputs.turn_position)

        if self._angle_setpoint is None:
            return

        angle = self.angle

        if self._io.device_closed_loop:
            self._io.set_turn_position(self._angle_setpoint.radians())
        else:
            self._io.set_turn_voltage(self._turn_feedback.calculate(angle.radians(),
                                                                    self._angle_setpoint.radians()))

        if self._speed_setpoint is None:
            return

        # Scale velocity based on turn error. When the module is turned sideways
        # to the setpoint, its wheel contributes nothing in the requested direction.
        error = (self._angle_setpoint - angle).radians()
        adjusted_speed = self._speed_setpoint * math.cos(error)
        velocity: radians_per_second = adjusted_speed / constants.WHEEL_RADIUS

        if self._io.device_closed_loop:
            self._io.set_drive_velocity(velocity)
        else:
            self._io.set_drive_voltage(self._drive_feedforward.calculate(velocity) +
                                       self._drive_feedback.calculate(self._inputs.drive_velocity, velocity))

    def run_setpoint(self, state: SwerveModuleState) -> SwerveModuleState:
        """
        Runs the module with the specified setpoint state. Returns the optimized state.
        """
        optimized = SwerveModuleState(state.speed, state.angle)
        optimized.optimize(self.angle)

        self._angle_setpoint = optimized.angle
        self._speed_setpoint = optimized.speed

        return optimized

    def run_characterization(self, voltage: volts) -> None:
        """
        Runs the module with the specified voltage while controlling to zero degrees
        """
        self._angle_setpoint = Rotation2d()
        self._speed_setpoint = None

        self._io.set_drive_voltage(voltage)

    def stop(self) -> None:
        self._io.set_turn_voltage(0.0)
        self._io.set_drive_voltage(0.0)

        # Disable closed loop control for turn and drive
        self._angle_setpoint = None
        self._speed_setpoint = None

    def set_brake_mode(self, enabled: bool) -> None:
        self._io.set_drive_brake_mode(enabled)
        self._io.set_turn_brake_mode(enabled)

    @property
    def angle(self) -> Rotation2d:
        """
        Current turn angle of the module
        """
        if self._turn_relative_offset is None:
            return Rotation2d()

        return Rotation2d(self._inputs.turn_position) + self._turn_relative_offset

    @property
    def position_meters(self) -> meters:
        return self._inputs.drive_position * constants.WHEEL_RADIUS

    @property
    def velocity(self) -> meters_per_second:
        return self._inputs.drive_velocity * constants.WHEEL_RADIUS

    @property
    def position(self) -> SwerveModulePosition:
        return SwerveModulePosition(self.position_meters, self.angle)

    @property
    def state(self) -> SwerveModuleState:
        return SwerveModuleState(self.velocity, self.angle)

    @property
    def characterization_velocity(self) -> radians_per_second:
        return self._inputs.drive_velocity
