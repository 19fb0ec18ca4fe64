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
from typing import Any, Dict, Optional

from wpilib import Timer
from wpimath.units import seconds

from lib_6107.commands.command import BaseCommand

logger = logging.getLogger(__name__)


class PresetShot(BaseCommand):
    """
    Spin up for a shot and fire it.

    The feeder is enabled on any loop where the shooter grants launch permission.
    The first such loop starts the shot timer, and once the timer has run past
    FEED_DELAY the feeder stays on whether or not permission holds. The command
    finishes once the timer passes SHOT_DURATION.
    """
    FEED_DELAY: seconds = 0.1
    SHOT_DURATION: seconds = 1.0

    shot_controls: Dict[str, Any] = {}

    def __init__(self, container: 'RobotContainer', shooter: Optional['Shooter'] = None):
        shooter = shooter or container.shooter
        super().__init__(container, shooter)

        self._shooter = shooter
        self._shot_timer = Timer()
        self._feeding = False

    @property
    def feeding(self) -> bool:
        return self._feeding

    def initialize(self) -> None:
        super().initialize()

        self._shot_timer.stop()
        self._shot_timer.reset()
        self._feeding = False

    def execute(self) -> None:
        self._feeding = self._shooter.launch_permission or self._shot_timer.hasElapsed(self.FEED_DELAY)

        if self._feeding:
            self._shot_timer.start()

        self._shooter.advanced_shoot(feed=self._feeding, **self.shot_controls)

    def end(self, interrupted: bool) -> None:
        super().end(interrupted)

        self._shooter.stop()
        self._feeding = False

    def isFinished(self) -> bool:
        return self._shot_timer.get() > self.SHOT_DURATION


class Shoot(PresetShot):
    """
    Subwoofer shot
    """
    pathplanner_name = "shoot"
    shot_controls = {"speaker": True}


class AutoLineShot(PresetShot):
    pathplanner_name = "autoLineShot"
    shot_controls = {"line": True}


class WingShot(PresetShot):
    pathplanner_name = "WingShot"
    shot_controls = {"wing": True}


class StageShot(PresetShot):
    pathplanner_name = "StageShot"
    shot_controls = {"stage": True}


class IntakeNote(BaseCommand):
    """
    Run the intake until a note trips the beam break
    """
    pathplanner_name = "intake"

    def __init__(self, container: 'RobotContainer', shooter: Optional['Shooter'] = None):
        shooter = shooter or container.shooter
        super().__init__(container, shooter)

        self._shooter = shooter

    def execute(self) -> None:
        self._shooter.advanced_shoot(intake=True)

    def end(self, interrupted: bool) -> None:
        super().end(interrupted)
        self._shooter.stop()

    def isFinished(self) -> bool:
        return self._shooter.has_note


class DoNothing(BaseCommand):
    """
    Placeholder step for autos that only drive
    """
    pathplanner_name = "doNothing"

    def __init__(self, container: 'RobotContainer'):
        super().__init__(container)

    def isFinished(self) -> bool:
        return True
