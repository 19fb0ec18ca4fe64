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
from phoenix6.configs import TalonFXConfiguration
from phoenix6.controls import DutyCycleOut, PositionVoltage, VelocityVoltage
from phoenix6.hardware import TalonFX
from phoenix6.signals import GravityTypeValue, NeutralModeValue
from rev import PersistMode, ResetMode, SparkBase, SparkBaseConfig, SparkMax
from wpilib import DigitalInput
from wpimath.units import degrees, revolutions_per_minute

import constants
from constants import DeviceID
from lib_6107.util.phoenix6_signals import Phoenix6Signals
from subsystems.shooter.shooter_io import ShooterIO

logger = logging.getLogger(__name__)

PIVOT_GEAR_RATIO = 200.0
FLYWHEEL_GEAR_RATIO = 2.0


class ShooterHardware(ShooterIO):
    """
    Competition shooter: Kraken flywheels, Falcon pivot and climber on the roboRIO
    CAN bus, NEO intake and handler plus a NEO 550 feeder on SparkMax controllers,
    and a beam break at the top of the handler.
    """
    def __init__(self):
        self._top = TalonFX(DeviceID.SHOOTER_TOP_ID, constants.RIO_CANBUS)
        self._bottom = TalonFX(DeviceID.SHOOTER_BOTTOM_ID, constants.RIO_CANBUS)
        self._pivot = TalonFX(DeviceID.SHOOTER_PIVOT_ID, constants.RIO_CANBUS)
        self._climber = TalonFX(DeviceID.CLIMBER_ID, constants.RIO_CANBUS)

        self._top.configurator.apply(self._flywheel_config())
        self._bottom.configurator.apply(self._flywheel_config())
        self._pivot.configurator.apply(self._pivot_config())
        self._climber.configurator.apply(self._climber_config())

        # Pivot rests on its hard stop at power up
        self._pivot.set_position(constants.SHOOTER_STOW_ANGLE / constants.DEGREES_PER_REVOLUTION)

        self._intake = SparkMax(DeviceID.INTAKE_ID, SparkBase.MotorType.kBrushless)
        self._handler = SparkMax(DeviceID.HANDLER_ID, SparkBase.MotorType.kBrushless)
        self._feeder = SparkMax(DeviceID.FEEDER_ID, SparkBase.MotorType.kBrushless)

        for spark, inverted in ((self._intake, False), (self._handler, True), (self._feeder, False)):
            spark.configure(self._spark_config(inverted),
                            ResetMode.kResetSafeParameters,
                            PersistMode.kPersistParameters)

        self._intake_limit = DigitalInput(constants.INTAKE_LIMIT_DIO_CHANNEL)

        self._top_velocity: StatusSignal = self._top.get_velocity()
        self._bottom_velocity: StatusSignal = self._bottom.get_velocity()
        self._pivot_position: StatusSignal = self._pivot.get_position()
        self._pivot_velocity: StatusSignal = self._pivot.get_velocity()

        BaseStatusSignal.set_update_frequency_for_all(50.0,
                                                      self._top_velocity,
                                                      self._bottom_velocity,
                                                      self._pivot_position,
                                                      self._pivot_velocity)
        Phoenix6Signals.register_signals(self._top_velocity,
                                         self._bottom_velocity,
                                         self._pivot_position,
                                         self._pivot_velocity,
                                         canbus=constants.RIO_CANBUS)

        self._top_request = VelocityVoltage(0).with_slot(0)
        self._bottom_request = VelocityVoltage(0).with_slot(0)
        self._pivot_request = PositionVoltage(0).with_slot(0)
        self._climb_request = DutyCycleOut(0)

    @staticmethod
    def _flywheel_config() -> TalonFXConfiguration:
        config = TalonFXConfiguration()
        config.motor_output.neutral_mode = NeutralModeValue.COAST
        config.feedback.sensor_to_mechanism_ratio = FLYWHEEL_GEAR_RATIO
        config.current_limits.stator_current_limit = 80.0
        config.current_limits.stator_current_limit_enable = True
        config.slot0.k_s = 0.15
        config.slot0.k_v = 0.24
        config.slot0.k_p = 0.3
        return config

    @staticmethod
    def _pivot_config() -> TalonFXConfiguration:
        config = TalonFXConfiguration()
        config.motor_output.neutral_mode = NeutralModeValue.BRAKE
        config.feedback.sensor_to_mechanism_ratio = PIVOT_GEAR_RATIO
        config.current_limits.stator_current_limit = 40.0
        config.current_limits.stator_current_limit_enable = True
        config.slot0.k_p = 60.0
        config.slot0.k_d = 0.5
        config.slot0.k_g = 0.25
        config.slot0.gravity_type = GravityTypeValue.ARM_COSINE
        config.software_limit_switch.forward_soft_limit_enable = True
        config.software_limit_switch.forward_soft_limit_threshold = \
            constants.SHOOTER_MAX_ANGLE / constants.DEGREES_PER_REVOLUTION
        config.software_limit_switch.reverse_soft_limit_enable = True
        config.software_limit_switch.reverse_soft_limit_threshold = \
            constants.SHOOTER_MIN_ANGLE / constants.DEGREES_PER_REVOLUTION
        return config

    @staticmethod
    def _climber_config() -> TalonFXConfiguration:
        config = TalonFXConfiguration()
        config.motor_output.neutral_mode = NeutralModeValue.BRAKE
        config.current_limits.stator_current_limit = 60.0
        config.current_limits.stator_current_limit_enable = True
        return config

    @staticmethod
    def _spark_config(inverted: bool) -> SparkBaseConfig:
        config = SparkBaseConfig()
        config.inverted(inverted)
        config.setIdleMode(SparkBaseConfig.IdleMode.kBrake)
        config.smartCurrentLimit(30)
        config.voltageCompensation(constants.NOMINAL_BATTERY_VOLTAGE)
        return config

    def update_inputs(self, inputs: ShooterIO.ShooterIOInputs) -> None:
        inputs.top_velocity = self._top_velocity.value * constants.SECONDS_PER_MINUTE
        inputs.bottom_velocity = self._bottom_velocity.value * constants.SECONDS_PER_MINUTE

        inputs.handler_velocity = self._handler.getEncoder().getVelocity()
        inputs.feeder_velocity = self._feeder.getEncoder().getVelocity()
        inputs.intake_velocity = self._intake.getEncoder().getVelocity()

        inputs.angle_position = self._pivot_position.value * constants.DEGREES_PER_REVOLUTION
        inputs.angle_velocity = self._pivot_velocity.value * constants.SECONDS_PER_MINUTE

        inputs.intake_limit = self._intake_limit.get()

    def set_motors(self, top_velocity: revolutions_per_minute, bottom_velocity: revolutions_per_minute,
                   handler: float, angle: degrees, intake: float, feeder: float,
                   limit_off: bool, climb: float) -> None:
        self._top.set_control(self._top_request.with_velocity(top_velocity / constants.SECONDS_PER_MINUTE))
        self._bottom.set_control(self._bottom_request.with_velocity(bottom_velocity / constants.SECONDS_PER_MINUTE))
        self._pivot.set_control(self._pivot_request.with_position(angle / constants.DEGREES_PER_REVOLUTION))
        self._climber.set_control(self._climb_request.with_output(climb))

        self._intake.set(intake)
        self._handler.set(handler)
        self._feeder.set(feeder)
