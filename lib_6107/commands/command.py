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
from typing import Optional

from commands2 import Command, Subsystem
from pathplannerlib.auto import NamedCommands
from wpilib import SmartDashboard

logger = logging.getLogger(__name__)


class BaseCommand(Command):
    """
    Base Command class for Team 6107 robotics

    Commands that can be launched from PathPlanner set the 'pathplanner_name' class
    attribute. That name is the contract with the autos saved in the deploy
    directory, so do not change it once an auto uses it.
    """
    pathplanner_name: Optional[str] = None

    def __init__(self, container: 'RobotContainer', *requirements: Subsystem):
        super().__init__()
        self.setName(self.get_class_name())

        self._container = container
        self._start_time: float = 0.0

        if requirements:
            self.addRequirements(*requirements)  # commandsv2 version of requirements

    @classmethod
    def get_class_name(cls) -> str:
        return cls.__name__

    @classmethod
    def pathplanner_register(cls, container: 'RobotContainer', *args, **kwargs) -> None:
        """
        Register an instance of this command with PathPlanner under its named-command
        name so autos can call it
        """
        if not cls.pathplanner_name:
            raise ValueError(f"{cls.get_class_name()} does not define a PathPlanner name")

        NamedCommands.registerCommand(cls.pathplanner_name, cls(container, *args, **kwargs))

    @property
    def container(self) -> 'RobotContainer':
        return self._container

    def initialize(self) -> None:
        """
        Called just before this Command runs the first time
        """
        self._start_time = round(self._container.get_elapsed_time(), 2)
        logger.info(f"{self.getName()}: Started at {self._start_time}")

        SmartDashboard.putString(f"command/{self.getName()}", "running")

    def end(self, interrupted: bool) -> None:
        """
        The action to take when the command ends. Called when either the command finishes normally, or
        when it interrupted/canceled.

        Do not schedule commands here that share requirements with this command. Use :meth:`.andThen` instead.

        :param interrupted: whether the command was interrupted/canceled
        """
        end_time = self._container.get_elapsed_time()
        message = f"{self.getName()}: {'Interrupted' if interrupted else 'Ended'} at {end_time:.1f} s " \
                  f"after {end_time - self._start_time:.1f} s"
        logger.info(message)

        SmartDashboard.putString("alert", f"** {message} **")
        SmartDashboard.putString(f"command/{self.getName()}", "interrupted" if interrupted else "ended")
