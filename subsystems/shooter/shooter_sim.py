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

from wpilib.simulation import FlywheelSim, SingleJointedArmSim
from wpimath.controller import ArmFeedforward, PIDController, SimpleMotorFeedforwardRadians
from wpimath.system.plant import DCMotor, LinearSystemId
from wpimath.units import (degrees, degreesToRadians, inchesToMeters, radiansToDegrees,
                           radiansPerSecondToRotationsPerMinute, revolutions_per_minute, seconds)

import constants
from subsystems.shooter.shooter_io import ShooterIO

LOOP_PERIOD = constants.DEFAULT_ROBOT_PERIOD

# Time a note spends on the rollers picking up, or leaving through the feeder
NOTE_INTAKE_TIME: seconds = 0.5
NOTE_FEED_TIME: seconds = 0.2


def _flywheel(motor: DCMotor, gearing: float, moi: float) -> FlywheelSim:
    return FlywheelSim(LinearSystemId.flywheelSystem(motor, moi, gearing), motor)


class ShooterSim(ShooterIO):
    """
    Physics sim of the shooter. The pivot is based off the Anderson layout at 200:1

    A note shows up at the beam break once the intake and handler have pulled for
    NOTE_INTAKE_TIME and is gone after the feeder pushes it for NOTE_FEED_TIME or the
    note path runs backwards for NOTE_INTAKE_TIME.
    """
    def __init__(self):
        self._pivot = SingleJointedArmSim(DCMotor.falcon500(1), 200.0, 0.7480059831487,
                                          inchesToMeters(21.729),
                                          degreesToRadians(constants.SHOOTER_MIN_ANGLE),
                                          degreesToRadians(constants.SHOOTER_MAX_ANGLE),
                                          True,
                                          degreesToRadians(constants.SHOOTER_STOW_ANGLE))

        self._intake = _flywheel(DCMotor.NEO(1), 5.0, 0.004)
        self._handler = _flywheel(DCMotor.NEO(1), 5.0, 0.04)
        self._feeder = _flywheel(DCMotor.NEO550(1), 15.0, 0.04)
        self._top = _flywheel(DCMotor.krakenX60(1), 2.0, 0.004)
        self._bottom = _flywheel(DCMotor.krakenX60(1), 2.0, 0.004)

        # Pivot loop runs in degrees
        self._angle_pid = PIDController(0.2, 0.0, 0.0)
        self._angle_pid.enableContinuousInput(-180.0, 180.0)
        self._angle_feedforward = ArmFeedforward(0.0, 0.0405, 8.0)

        # Wheel loops run in RPM
        self._top_pid = PIDController(0.01, 0.0, 0.0)
        self._bottom_pid = PIDController(0.01, 0.0, 0.0)
        self._top_feedforward = SimpleMotorFeedforwardRadians(0.010, 0.003876)
        self._bottom_feedforward = SimpleMotorFeedforwardRadians(0.010, 0.003876)

        self._has_note = False
        self._note_timer: seconds = 0.0
        self._note_outputs = (0.0, 0.0, 0.0)     # intake, handler, feeder

    def update_inputs(self, inputs: ShooterIO.ShooterIOInputs) -> None:
        for sim in (self._pivot, self._intake, self._handler, self._feeder, self._top, self._bottom):
            sim.update(LOOP_PERIOD)

        inputs.top_velocity = self._top.getAngularVelocityRPM()
        inputs.bottom_velocity = self._bottom.getAngularVelocityRPM()

        inputs.handler_velocity = self._handler.getAngularVelocityRPM()
        inputs.feeder_velocity = self._feeder.getAngularVelocityRPM()
        inputs.intake_velocity = self._intake.getAngularVelocityRPM()

        inputs.angle_position = radiansToDegrees(self._pivot.getAngleRads())
        inputs.angle_velocity = radiansPerSecondToRotationsPerMinute(self._pivot.getVelocityRadPerSec())

        self._update_note()
        inputs.intake_limit = not self._has_note

    def _update_note(self) -> None:
        intake, handler, feeder = self._note_outputs

        if self._has_note:
            moving = feeder > 0.0 or handler < 0.0
            limit = NOTE_FEED_TIME if feeder > 0.0 else NOTE_INTAKE_TIME
        else:
            moving = intake > 0.0 and handler > 0.0
            limit = NOTE_INTAKE_TIME

        self._note_timer = self._note_timer + LOOP_PERIOD if moving else 0.0

        if self._note_timer >= limit - 1e-9:
            self._has_note = not self._has_note
            self._note_timer = 0.0

    def set_motors(self, top_velocity: revolutions_per_minute, bottom_velocity: revolutions_per_minute,
                   handler: float, angle: degrees, intake: float, feeder: float,
                   limit_off: bool, climb: float) -> None:
        current_angle = self._pivot.getAngleRads()
        target_angle = degreesToRadians(angle)

        self._pivot.setInputVoltage(self._clamp(
            self._angle_feedforward.calculate(target_angle, target_angle - current_angle) +
            self._angle_pid.calculate(radiansToDegrees(current_angle), angle)))

        self._top.setInputVoltage(self._clamp(
            self._top_feedforward.calculate(top_velocity) +
            self._top_pid.calculate(self._top.getAngularVelocityRPM(), top_velocity)))

        self._bottom.setInputVoltage(self._clamp(
            self._bottom_feedforward.calculate(bottom_velocity) +
            self._bottom_pid.calculate(self._bottom.getAngularVelocityRPM(), bottom_velocity)))

        self._intake.setInputVoltage(self._clamp(intake * constants.NOMINAL_BATTERY_VOLTAGE))
        self._feeder.setInputVoltage(self._clamp(feeder * constants.NOMINAL_BATTERY_VOLTAGE))
        self._handler.setInputVoltage(self._clamp(handler * constants.NOMINAL_BATTERY_VOLTAGE))

        self._note_outputs = (intake, handler, feeder)

    @property
    def current_draw(self) -> float:
        return sum(abs(sim.getCurrentDraw()) for sim in (self._pivot, self._intake, self._handler,
                                                         self._feeder, self._top, self._bottom))

    @staticmethod
    def _clamp(voltage: float) -> float:
        limit = constants.NOMINAL_BATTERY_VOLTAGE
        return max(-limit, min(limit, voltage))
