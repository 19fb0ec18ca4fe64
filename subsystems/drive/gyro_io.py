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

from dataclasses import dataclass

from phoenix6 import BaseStatusSignal, StatusSignal
from phoenix6.configs import Pigeon2Configuration
from phoenix6.hardware import Pigeon2
from pykit.autolog import autolog
from wpimath.units import degreesToRadians, radians, radians_per_second

import constants
from constants import DeviceID
from lib_6107.util.phoenix6_signals import Phoenix6Signals


class GyroIO:
    """
    Gyro hardware interface. The base class is the no-op replay implementation
    and reports a disconnected gyro.
    """
    @autolog
    @dataclass
    class GyroIOInputs:
        connected: bool = False
        yaw_position: radians = 0.0
        yaw_velocity: radians_per_second = 0.0

    def update_inputs(self, inputs: GyroIOInputs) -> None:
        pass


class GyroIOPigeon2(GyroIO):
    """
    IO implementation for the Pigeon 2 on the swerve CANivore
    """
    def __init__(self, device_id: int = DeviceID.GYRO_DEVICE_ID, canbus: str = constants.SWERVE_CANBUS):
        self._pigeon = Pigeon2(device_id, canbus)

        self._pigeon.configurator.apply(Pigeon2Configuration())
        self._pigeon.configurator.set_yaw(0.0)

        self._yaw: StatusSignal = self._pigeon.get_yaw()
        self._yaw_velocity: StatusSignal = self._pigeon.get_angular_velocity_z_world()

        self._yaw.set_update_frequency(100.0)
        self._yaw_velocity.set_update_frequency(100.0)
        self._pigeon.optimize_bus_utilization()

        Phoenix6Signals.register_signals(self._yaw, self._yaw_velocity, canbus=canbus)

    def update_inputs(self, inputs: GyroIO.GyroIOInputs) -> None:
        inputs.connected = BaseStatusSignal.is_all_good(self._yaw, self._yaw_velocity)
        inputs.yaw_position = degreesToRadians(self._yaw.value)
        inputs.yaw_velocity = degreesToRadians(self._yaw_velocity.value)
