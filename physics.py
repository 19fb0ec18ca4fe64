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
# pyfrc simulation hooks. The drive and shooter IO layers carry their own motor
# models, this only moves the robot on the simulated field and sags the battery.
#
# Documentation can be found at https://robotpy.readthedocs.io/projects/pyfrc/en/latest/physics.html

import logging

from pyfrc.physics.core import PhysicsInterface
from wpilib.simulation import BatterySim, RoboRioSim

from robot import MyRobot

logger = logging.getLogger(__name__)


class PhysicsEngine:
    """
    Simulates the swerve robot. Any objects created or manipulated in this file are
    for simulation purposes only.
    """
    def __init__(self, physics_controller: PhysicsInterface, robot: "MyRobot"):
        """
        Initialize the simulator. This method is called after the container and all
        subsystems have been initialized.

        :param physics_controller: `pyfrc.physics.core.Physics` object
                                   to communicate simulation effects to
        :param robot: your robot object
        """
        logger.info("PhysicsEngine.__init__: entry")

        self._physics_controller = physics_controller
        self._robot = robot

        robot.container.register_alliance_change_callback(self._alliance_change)
        self._alliance_change(robot.container.is_red_alliance, robot.container.alliance_location)

    def update_sim(self, now: float, tm_diff: float) -> None:
        """
        Called when the simulation parameters for the program need to be
        updated.

        :param now:     The current time as a float
        :param tm_diff: The amount of time that has passed since the last
                        time that this function was called
        """
        container = self._robot.container

        current_draw = container.drive.current_draw + container.shooter.current_draw
        RoboRioSim.setVInVoltage(BatterySim.calculate([current_draw]))

        self._physics_controller.field.setRobotPose(container.drive.pose)

    def _alliance_change(self, is_red: bool, _location: int) -> None:
        """
        Called whenever the alliance changes colors before the match begins
        """
        self._physics_controller.field.setRobotPose(self._robot.container.field.start_pose(is_red))
