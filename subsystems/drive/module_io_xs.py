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

import phoenix5
from phoenix6 import BaseStatusSignal, StatusSignal
from phoenix6.controls import VelocityTorqueCurrentFOC, VoltageOut
from phoenix6.hardware import CANcoder, TalonFX
from wpimath.controller import PIDController
from wpimath.units import radians, radians_per_second, rotationsToRadians, volts

import constants
from lib_6107.util.phoenix6_signals import Phoenix6Signals
from subsystems.drive.module_io import ModuleIO, module_config
from subsystems.drive.module_io_talonfx import (ODOMETRY_FREQUENCY, STATUS_FREQUENCY, apply_drive_brake_mode,
                                                configure_cancoder, configure_drive_talon)

logger = logging.getLogger(__name__)

# Gear ratios for WCP Swerve XS X2 14t
DRIVE_GEAR_RATIO = 4.71
TURN_GEAR_RATIO = 41.25

# Untuned. Output is volts for an error in radians
TURN_PID_GAINS = (0.1, 0.0, 0.0)


class ModuleIOXS(ModuleIO):
    """
    Module IO for the WCP Swerve XS: TalonFX drive motor, brushed motor on a
    TalonSRX for steering, and a CANcoder on the steering shaft.

    The drive motors and encoders are on the CANivore, the steer controllers on
    the roboRIO bus. The TalonSRX has no sensor wired to it, so the module angle
    loop runs here on the CANcoder absolute position.
    """
    device_closed_loop = True
    turn_inverted = True

    def __init__(self, index: int):
        super().__init__()
        config = module_config(index)
        self.name = config.name

        self._drive_talon = TalonFX(config.drive_motor_id, config.drive_canbus)
        self._turn_talon = phoenix5.TalonSRX(config.turn_motor_id)
        self._cancoder = CANcoder(config.encoder_id, config.encoder_canbus)

        self._turn_pid = PIDController(*TURN_PID_GAINS)
        self._turn_pid.enableContinuousInput(-constants.HALF_TURN, constants.HALF_TURN)

        configure_drive_talon(self._drive_talon)
        self.set_drive_brake_mode(True)

        turn_config = phoenix5.TalonSRXConfiguration()
        turn_config.peakCurrentLimit = 30
        turn_config.voltageCompSaturation = constants.NOMINAL_BATTERY_VOLTAGE
        self._turn_talon.configAllSettings(turn_config)
        self._turn_talon.setInverted(self.turn_inverted)
        self.set_turn_brake_mode(True)

        configure_cancoder(self._cancoder, config.absolute_encoder_offset)

        self._drive_position: StatusSignal = self._drive_talon.get_position()
        self._drive_velocity: StatusSignal = self._drive_talon.get_velocity()
        self._drive_applied: StatusSignal = self._drive_talon.get_motor_voltage()
        self._drive_current: StatusSignal = self._drive_talon.get_stator_current()

        self._turn_absolute_position: StatusSignal = self._cancoder.get_absolute_position()
        self._turn_velocity: StatusSignal = self._cancoder.get_velocity()

        BaseStatusSignal.set_update_frequency_for_all(ODOMETRY_FREQUENCY,
                                                      self._drive_position,
                                                      self._turn_absolute_position)
        BaseStatusSignal.set_update_frequency_for_all(STATUS_FREQUENCY,
                                                      self._drive_velocity,
                                                      self._drive_applied,
                                                      self._drive_current,
                                                      self._turn_velocity)
        self._drive_talon.optimize_bus_utilization()
        self._cancoder.optimize_bus_utilization()

        Phoenix6Signals.register_signals(self._drive_position,
                                         self._drive_velocity,
                                         self._drive_applied,
                                         self._drive_current,
                                         self._turn_absolute_position,
                                         self._turn_velocity,
                                         canbus=config.drive_canbus)

        logger.info(f"{self.name}: Swerve XS module ready")

    def update_inputs(self, inputs: ModuleIO.ModuleIOInputs) -> None:
        inputs.drive_position = rotationsToRadians(self._drive_position.value) / DRIVE_GEAR_RATIO
        inputs.drive_velocity = rotationsToRadians(self._drive_velocity.value) / DRIVE_GEAR_RATIO
        inputs.drive_applied = self._drive_applied.value
        inputs.drive_current = self._drive_current.value

        # The CANcoder sits on the steering shaft, so its absolute position is the module angle
        inputs.turn_absolute_position = rotationsToRadians(self._turn_absolute_position.value)
        inputs.turn_position = inputs.turn_absolute_position
        inputs.turn_velocity = rotationsToRadians(self._turn_velocity.value)
        inputs.turn_applied = self._turn_talon.getMotorOutputVoltage()
        inputs.turn_current = self._turn_talon.getStatorCurrent()

        inputs.turn_error = self._turn_pid.getPositionError()

    def set_drive_voltage(self, voltage: volts) -> None:
        self._drive_talon.set_control(VoltageOut(voltage))

    def set_drive_velocity(self, velocity: radians_per_second) -> None:
        motor_rps = velocity / constants.RADIANS_PER_REVOLUTION * DRIVE_GEAR_RATIO
        self._drive_talon.set_control(VelocityTorqueCurrentFOC(motor_rps).with_slot(0))

    def set_turn_position(self, angle: radians) -> None:
        measured = rotationsToRadians(self._turn_absolute_position.value)
        self.set_turn_voltage(self._turn_pid.calculate(measured, angle))

    def set_turn_voltage(self, voltage: volts) -> None:
        self._turn_talon.set(phoenix5.TalonSRXControlMode.PercentOutput,
                             voltage / constants.NOMINAL_BATTERY_VOLTAGE)

    def set_drive_brake_mode(self, enable: bool) -> None:
        apply_drive_brake_mode(self._drive_talon, enable)

    def set_turn_brake_mode(self, enable: bool) -> None:
        self._turn_talon.setNeutralMode(phoenix5.NeutralMode.Brake if enable else phoenix5.NeutralMode.Coast)
