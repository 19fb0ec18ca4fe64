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

import random

from wpilib.simulation import DCMotorSim
from wpimath.system.plant import DCMotor, LinearSystemId
from wpimath.units import volts

import constants
from subsystems.drive.module_io import ModuleIO, module_config
from subsystems.drive.module_io_xs import DRIVE_GEAR_RATIO, TURN_GEAR_RATIO

LOOP_PERIOD = constants.DEFAULT_ROBOT_PERIOD

DRIVE_MOI = 0.025  # kg m^2
TURN_MOI = 0.004

# Volts per rad/s of wheel speed for the simulated drive, from the motor model and gearing
DRIVE_KV = DRIVE_GEAR_RATIO / DCMotor.krakenX60(1).Kv


class ModuleIOSim(ModuleIO):
    """
    Physics sim implementation of module IO.

    Uses two flywheel-like DC motor sims for the drive and turn motors, with the
    absolute position initialized to a random value. The DC motor sims are not
    physically accurate, but provide a decent approximation for the behavior of
    the module.
    """
    def __init__(self, index: int):
        super().__init__()
        self.name = module_config(index).name

        drive_motor = DCMotor.krakenX60(1)
        turn_motor = DCMotor.falcon500(1)

        self._drive_sim = DCMotorSim(LinearSystemId.DCMotorSystem(drive_motor, DRIVE_MOI, DRIVE_GEAR_RATIO),
                                     drive_motor)
        self._turn_sim = DCMotorSim(LinearSystemId.DCMotorSystem(turn_motor, TURN_MOI, TURN_GEAR_RATIO),
                                    turn_motor)

        self._turn_absolute_initial_position = random.uniform(-constants.HALF_TURN, constants.HALF_TURN)
        self._drive_applied: volts = 0.0
        self._turn_applied: volts = 0.0

    def update_inputs(self, inputs: ModuleIO.ModuleIOInputs) -> None:
        self._drive_sim.update(LOOP_PERIOD)
        self._turn_sim.update(LOOP_PERIOD)

        inputs.drive_position = self._drive_sim.getAngularPosition()
        inputs.drive_velocity = self._drive_sim.getAngularVelocity()
        inputs.drive_applied = self._drive_applied
        inputs.drive_current = abs(self._drive_sim.getCurrentDraw())

        inputs.turn_absolute_position = self._turn_absolute_initial_position + self._turn_sim.getAngularPosition()
        inputs.turn_position = self._turn_sim.getAngularPosition()
        inputs.turn_velocity = self._turn_sim.getAngularVelocity()
        inputs.turn_applied = self._turn_applied
        inputs.turn_current = abs(self._turn_sim.getCurrentDraw())

    def set_drive_voltage(self, voltage: volts) -> None:
        self._drive_applied = self._clamp(voltage)
        self._drive_sim.setInputVoltage(self._drive_applied)

    def set_turn_voltage(self, voltage: volts) -> None:
        self._turn_applied = self._clamp(voltage)
        self._turn_sim.setInputVoltage(self._turn_applied)

    @staticmethod
    def _clamp(voltage: volts) -> volts:
        limit = constants.NOMINAL_BATTERY_VOLTAGE
        return max(-limit, min(limit, voltage))
