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
# Drive characterization routines. Run them from the autonomous chooser with the
# robot on the carpet and plenty of room around it.

import logging
import math
from typing import Callable, List, Optional, Tuple

import numpy as np
from pykit.logger import Logger
from wpilib import Timer
from wpimath import angleModulus
from wpimath.filter import SlewRateLimiter
from wpimath.kinematics import ChassisSpeeds
from wpimath.units import meters, metersToInches, radians_per_second, seconds, volts

import constants
from lib_6107.commands.command import BaseCommand

logger = logging.getLogger(__name__)


def fit_feedforward(velocities: List[float], voltages: List[float]) -> Optional[Tuple[float, float, float]]:
    """
    Least squares fit of voltage = kS + kV * velocity.

    :returns: (kS, kV, R squared) or None if there is not enough data to fit
    """
    if len(velocities) < 2 or len(set(velocities)) < 2:
        return None

    x = np.asarray(velocities, dtype=float)
    y = np.asarray(voltages, dtype=float)
    k_v, k_s = np.polyfit(x, y, 1)

    residual = y - (k_s + k_v * x)
    total = y - y.mean()
    ss_total = float(np.dot(total, total))
    r_squared = 1.0 - float(np.dot(residual, residual)) / ss_total if ss_total > 0.0 else 1.0

    return float(k_s), float(k_v), r_squared


class FeedForwardCharacterization(BaseCommand):
    """
    Ramps the drive voltage slowly and fits kS and kV to the measured velocity
    """
    START_DELAY: seconds = 2.0
    RAMP_RATE = 0.1     # volts / second

    def __init__(self, container: 'RobotContainer', drive: 'Drive',
                 voltage_consumer: Callable[[volts], None],
                 velocity_supplier: Callable[[], radians_per_second]):
        super().__init__(container, drive)

        self._voltage_consumer = voltage_consumer
        self._velocity_supplier = velocity_supplier

        self._timer = Timer()
        self._velocities: List[float] = []
        self._voltages: List[float] = []

    def initialize(self) -> None:
        super().initialize()

        self._velocities.clear()
        self._voltages.clear()
        self._timer.reset()
        self._timer.start()

    def execute(self) -> None:
        elapsed = self._timer.get()

        if elapsed < self.START_DELAY:
            self._voltage_consumer(0.0)
            return

        voltage = (elapsed - self.START_DELAY) * self.RAMP_RATE
        self._voltage_consumer(voltage)

        self._velocities.append(self._velocity_supplier())
        self._voltages.append(voltage)

    def end(self, interrupted: bool) -> None:
        super().end(interrupted)

        self._voltage_consumer(0.0)
        self._timer.stop()

        fit = fit_feedforward(self._velocities, self._voltages)
        if fit is None:
            logger.warning("FF Characterization: not enough data")
            return

        k_s, k_v, r_squared = fit
        logger.info(f"FF Characterization Results: Count={len(self._velocities)} "
                    f"R2={r_squared:.5f} kS={k_s:.5f} kV={k_v:.5f}")

        Logger.recordOutput("Drive/FFCharacterization/kS", k_s)
        Logger.recordOutput("Drive/FFCharacterization/kV", k_v)

    def isFinished(self) -> bool:
        return False


def effective_wheel_radius(accumulated_yaw: float, wheel_travel: float,
                           drive_radius: meters = constants.DRIVE_BASE_RADIUS) -> meters:
    """
    Wheel radius that makes the wheel travel (radians) match the distance the
    modules covered while the robot spun 'accumulated_yaw' radians in place
    """
    if wheel_travel == 0.0:
        return 0.0

    return accumulated_yaw * drive_radius / wheel_travel


class WheelRadiusCharacterization(BaseCommand):
    """
    Spins the robot in place and compares the gyro rotation with how far the wheels
    turned. Needs at least one full revolution of data.
    """
    SPEED: radians_per_second = 1.0

    def __init__(self, container: 'RobotContainer', drive: 'Drive', direction: int = 1):
        super().__init__(container, drive)

        self._drive = drive
        self._direction = 1 if direction >= 0 else -1
        self._omega_limiter = SlewRateLimiter(1.0)

        self._last_yaw = 0.0
        self._accumulated_yaw = 0.0
        self._start_positions: List[float] = []
        self._effective_radius: meters = 0.0

    def _wheel_positions(self) -> List[float]:
        return [module.inputs.drive_position for module in self._drive.modules]

    def initialize(self) -> None:
        super().initialize()

        self._last_yaw = self._drive.raw_gyro_rotation.radians()
        self._accumulated_yaw = 0.0
        self._start_positions = self._wheel_positions()
        self._omega_limiter.reset(0.0)

    def execute(self) -> None:
        self._drive.run_velocity(ChassisSpeeds(0.0, 0.0,
                                               self._omega_limiter.calculate(self._direction * self.SPEED)))

        yaw = self._drive.raw_gyro_rotation.radians()
        self._accumulated_yaw += angleModulus(yaw - self._last_yaw)
        self._last_yaw = yaw

        wheel_travel = sum(abs(current - start) for current, start in zip(self._wheel_positions(),
                                                                           self._start_positions))
        wheel_travel /= len(self._start_positions)

        self._effective_radius = effective_wheel_radius(abs(self._accumulated_yaw), wheel_travel)

        Logger.recordOutput("Drive/RadiusCharacterization/DrivePosition", wheel_travel)
        Logger.recordOutput("Drive/RadiusCharacterization/AccumGyroYawRads", self._accumulated_yaw)
        Logger.recordOutput("Drive/RadiusCharacterization/CurrentWheelRadiusInches",
                            metersToInches(self._effective_radius))

    def end(self, interrupted: bool) -> None:
        super().end(interrupted)
        self._drive.stop()

        if abs(self._accumulated_yaw) <= math.tau:
            logger.warning("Wheel radius characterization: not enough data for characterization")
        else:
            logger.info(f"Effective Wheel Radius: {metersToInches(self._effective_radius):.3f} inches")

    def isFinished(self) -> bool:
        return False
