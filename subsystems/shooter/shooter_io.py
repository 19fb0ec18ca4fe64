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

from pykit.autolog import autolog
from wpimath.units import degrees, revolutions_per_minute


class ShooterIO:
    """
    Shooter, pivot, note path and climber hardware interface. The base class is
    the no-op replay implementation.

    Wheel setpoints are RPM, the pivot setpoint is degrees above horizontal, the
    note path and climber take percent output (-1..1).
    """
    @autolog
    @dataclass
    class ShooterIOInputs:
        top_velocity: revolutions_per_minute = 0.0
        bottom_velocity: revolutions_per_minute = 0.0

        handler_velocity: revolutions_per_minute = 0.0
        feeder_velocity: revolutions_per_minute = 0.0
        intake_velocity: revolutions_per_minute = 0.0

        angle_position: degrees = 0.0
        angle_velocity: revolutions_per_minute = 0.0

        # True while the beam break is clear (no note in the handler)
        intake_limit: bool = True

    @property
    def current_draw(self) -> float:
        """Total current in amps, only tracked in simulation"""
        return 0.0

    def update_inputs(self, inputs: ShooterIOInputs) -> None:
        pass

    def set_motors(self, top_velocity: revolutions_per_minute, bottom_velocity: revolutions_per_minute,
                   handler: float, angle: degrees, intake: float, feeder: float,
                   limit_off: bool, climb: float) -> None:
        pass
