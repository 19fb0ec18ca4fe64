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
import os

from commands2 import cmd
from pathplannerlib.auto import AutoBuilder, RobotConfig
from pathplannerlib.controller import PIDConstants, PPHolonomicDriveController
from pathplannerlib.logging import PathPlannerLogging
from pykit.logger import Logger
from wpilib import DriverStation, SendableChooser, getDeployDirectory

from commands.auto_aim import AutoAim
from commands.shot_commands import AutoLineShot, DoNothing, IntakeNote, Shoot, StageShot, WingShot
from subsystems.drive.drive import Drive

logger = logging.getLogger(__name__)

# Named commands the autos saved in the deploy directory call by name
NAMED_COMMANDS = (IntakeNote, Shoot, AutoLineShot, WingShot, DoNothing, StageShot, AutoAim)


def configure_auto_builder(drive: Drive, container: 'RobotContainer') -> SendableChooser:
    """
    Register the named commands and configure PathPlanner. Returns the autonomous
    chooser, which only holds 'Do Nothing' when PathPlanner has not been set up yet.
    """
    # Register named commands first
    register_named_commands(container)

    # Does pathplanner exist yet?
    file_path = os.path.join(getDeployDirectory(), 'pathplanner', 'settings.json')

    if os.path.isfile(file_path) and os.access(file_path, os.R_OK):
        config = RobotConfig.fromGUISettings()

        AutoBuilder.configure(drive.get_pose,                       # Supplier of current robot pose
                              drive.reset_pose,                     # Consumer for seeding pose against auto
                              drive.get_robot_relative_speeds,      # Supplier of current robot speeds
                              lambda speeds, _feedforwards: drive.run_velocity(speeds),
                              PPHolonomicDriveController(
                                  # PID constants for translation
                                  PIDConstants(5.0, 0.0, 0.0),
                                  # PID constants for rotation
                                  PIDConstants(5.0, 0.0, 0.0)
                              ),
                              config,
                              # Paths are drawn for the blue alliance and flipped for red
                              lambda: DriverStation.getAlliance() == DriverStation.Alliance.kRed,
                              drive)

        # PathPlanner and AdvantageScope integration
        PathPlannerLogging.setLogActivePathCallback(lambda poses: Logger.recordOutput("Odometry/Trajectory",
                                                                                      poses))
        PathPlannerLogging.setLogTargetPoseCallback(lambda pose: Logger.recordOutput("Odometry/TrajectorySetpoint",
                                                                                     pose))
        # Load in any Autonomous Commands into the chooser
        return AutoBuilder.buildAutoChooser()

    logger.error(f"PathPlanner settings {file_path} not found or is not readable")
    logger.error("Assuming this is an initial run to import Named Commands before creating first Paths/Autos")

    chooser = SendableChooser()
    chooser.setDefaultOption("None", cmd.none())
    return chooser


def register_named_commands(container: 'RobotContainer') -> None:
    for command in NAMED_COMMANDS:
        command.pathplanner_register(container)

