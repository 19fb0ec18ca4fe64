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

from phoenix6 import BaseStatusSignal, StatusSignal
from phoenix6.configs import CANcoderConfiguration, MotorOutputConfigs, TalonFXConfiguration
from phoenix6.controls import VelocityTorqueCurrentFOC, VoltageOut
from phoenix6.hardware import CANcoder, TalonFX
from phoenix6.signals import InvertedValue, NeutralModeValue
from wpimath.units import radians, radians_per_second, rotationsToRadians, volts

import constants
from lib_6107.util.phoenix6_signals import Phoenix6Signals
from subsystems.drive.module_io import ModuleIO, module_config

logger = logging.getLogger(__name__)

# Gear ratios for SDS MK4i L2
DRIVE_GEAR_RATIO = 6.75
TURN_GEAR_RATIO = 150.0 / 7.0

ODOMETRY_FREQUENCY = 230.0  # Hz
STATUS_FREQUENCY = 80.0  # Hz


def configure_drive_talon(talon: TalonFX) -> None:
    """
    Drive motor configuration shared by every module that drives with a TalonFX
    """
    talon.configurator.apply(TalonFXConfiguration())

    config = TalonFXConfiguration()
    config.current_limits.stator_current_limit_enable = True
    config.motor_output.neutral_mode = NeutralModeValue.BRAKE
    config.voltage.peak_forward_voltage = constants.NOMINAL_BATTERY_VOLTAGE
    config.voltage.peak_reverse_voltage = -constants.NOMINAL_BATTERY_VOLTAGE

    config.slot0.k_v = 0.0
    config.slot0.k_s = 0.0
    config.slot0.k_p = 2.0
    config.slot0.k_i = 0.0
    config.slot0.k_d = 0.0

    config.torque_current.peak_forward_torque_current = 70.0
    config.torque_current.peak_reverse_torque_current = -70.0
    config.closed_loop_ramps.torque_closed_loop_ramp_period = 0.02

    talon.configurator.apply(config)


def apply_drive_brake_mode(talon: TalonFX, enable: bool) -> None:
    config = MotorOutputConfigs()
    config.inverted = InvertedValue.COUNTER_CLOCKWISE_POSITIVE
    config.neutral_mode = NeutralModeValue.BRAKE if enable else NeutralModeValue.COAST

    talon.configurator.apply(config)


def configure_cancoder(encoder: CANcoder, offset: radians) -> None:
    config = CANcoderConfiguration()
    config.magnet_sensor.magnet_offset = -offset / constants.RADIANS_PER_REVOLUTION

    encoder.configurator.apply(config)


class ModuleIOTalonFX(ModuleIO):
    """
    Module IO implementation for Talon FX drive motor controller, Talon FX turn motor
    controller, and CANcoder
    """
    turn_inverted = True

    def __init__(self, index: int):
        super().__init__()
        config = module_config(index)
        self.name = config.name

        self._drive_talon = TalonFX(config.drive_motor_id, config.drive_canbus)
        self._turn_talon = TalonFX(config.turn_motor_id, config.turn_canbus)
        self._cancoder = CANcoder(config.encoder_id, config.encoder_canbus)

        configure_drive_talon(self._drive_talon)
        self.set_drive_brake_mode(True)

        self._turn_talon.configurator.apply(TalonFXConfiguration())
        turn_config = TalonFXConfiguration()
        turn_config.current_limits.supply_current_limit = 30.0
        turn_config.current_limits.supply_current_limit_enable = True
        self._turn_talon.configurator.apply(turn_config)
        self.set_turn_brake_mode(True)

        configure_cancoder(self._cancoder, config.absolute_encoder_offset)

        self._drive_position: StatusSignal = self._drive_talon.get_position()
        self._drive_velocity: StatusSignal = self._drive_talon.get_velocity()
        self._drive_applied: StatusSignal = self._drive_talon.get_motor_voltage()
        self._drive_current: StatusSignal = self._drive_talon.get_stator_current()

        self._turn_absolute_position: StatusSignal = self._cancoder.get_absolute_position()
        self._turn_position: StatusSignal = self._turn_talon.get_position()
        self._turn_velocity: StatusSignal = self._turn_talon.get_velocity()
        self._turn_applied: StatusSignal = self._turn_talon.get_motor_voltage()
        self._turn_current: StatusSignal = self._turn_talon.get_stator_current()

        # Odometry signals run faster
        BaseStatusSignal.set_update_frequency_for_all(ODOMETRY_FREQUENCY,
                                                      self._drive_position,
                                                      self._turn_position)
        BaseStatusSignal.set_update_frequency_for_all(STATUS_FREQUENCY,
                                                      self._drive_velocity,
                                                      self._drive_applied,
                                                      self._drive_current,
                                                      self._turn_absolute_position,
                                                      self._turn_velocity,
                                                      self._turn_applied,
                                                      self._turn_current)
        self._drive_talon.optimize_bus_utilization()
        self._turn_talon.optimize_bus_utilization()
        self._cancoder.optimize_bus_utilization()

        Phoenix6Signals.register_signals(self._drive_position,
                                         self._drive_velocity,
                                         self._drive_applied,
                                         self._drive_current,
                                         canbus=config.drive_canbus)
        Phoenix6Signals.register_signals(self._turn_position,
                                         self._turn_velocity,
                                         self._turn_applied,
                                         self._turn_current,
                                         canbus=config.turn_canbus)
        Phoenix6Signals.register_signals(self._turn_absolute_position,
                                         canbus=config.encoder_canbus)

        logger.info(f"{self.name}: TalonFX module on '{config.drive_canbus}' ready")

    def update_inputs(self, inputs: ModuleIO.ModuleIOInputs) -> None:
        inputs.drive_position = rotationsToRadians(self._drive_position.value) / DRIVE_GEAR_RATIO
        inputs.drive_velocity = rotationsToRadians(self._drive_velocity.value) / DRIVE_GEAR_RATIO
        inputs.drive_applied = self._drive_applied.value
        inputs.drive_current = self._drive_current.value

        inputs.turn_absolute_position = rotationsToRadians(self._turn_absolute_position.value)
        inputs.turn_position = rotationsToRadians(self._turn_position.value) / TURN_GEAR_RATIO
        inputs.turn_velocity = rotationsToRadians(self._turn_velocity.value) / TURN_GEAR_RATIO
        inputs.turn_applied = self._turn_applied.value
        inputs.turn_current = self._turn_current.value

    def set_drive_voltage(self, voltage: volts) -> None:
        self._drive_talon.set_control(VoltageOut(voltage))

    def set_drive_velocity(self, velocity: radians_per_second) -> None:
        motor_rps = velocity / constants.RADIANS_PER_REVOLUTION * DRIVE_GEAR_RATIO
        self._drive_talon.set_control(VelocityTorqueCurrentFOC(motor_rps).with_slot(0))

    def set_turn_voltage(self, voltage: volts) -> None:
        self._turn_talon.set_control(VoltageOut(voltage))

    def set_drive_brake_mode(self, enable: bool) -> None:
        apply_drive_brake_mode(self._drive_talon, enable)

    def set_turn_brake_mode(self, enable: bool) -> None:
        config = MotorOutputConfigs()
        config.inverted = InvertedValue.CLOCKWISE_POSITIVE if self.turn_inverted \
            else InvertedValue.COUNTER_CLOCKWISE_POSITIVE
        config.neutral_mode = NeutralModeValue.BRAKE if enable else NeutralModeValue.COAST

        self._turn_talon.configurator.apply(config)
