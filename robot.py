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
import sys
from typing import Dict, Optional

import wpilib
from commands2 import Command, CommandScheduler
from phoenix6 import SignalLogger
# pykit & AdvantageScope support
from pykit.loggedrobot import LoggedRobot
from pykit.logger import Logger
from pykit.networktables.nt4Publisher import NT4Publisher
from pykit.wpilog.wpilogreader import WPILOGReader
from pykit.wpilog.wpilogwriter import WPILOGWriter
from wpilib import DriverStation, LiveWindow, Timer

import constants
from lib_6107.util.phoenix6_signals import Phoenix6Signals
from robotcontainer import RobotContainer
from version import VERSION

# Setup Logging
logger = logging.getLogger(__name__)


class MyRobot(LoggedRobot):
    """
    Our default robot class

    LoggedRobot does not run the command scheduler for us, robotPeriodic does that
    right after the CTRE status signals are refreshed.
    """
    def __init__(self):
        super().__init__()

        Logger.recordMetadata("Robot", type(self).__name__)
        Logger.recordMetadata("Team", "6107")
        Logger.recordMetadata("Year", "2024")
        Logger.recordMetadata("Version", VERSION)

        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                deploy_config = wpilib.deployinfo.getDeployData()

                if deploy_config is not None:
                    Logger.recordMetadata("Deploy Host", deploy_config.get("deploy-host", ""))
                    Logger.recordMetadata("Deploy User", deploy_config.get("deploy-user", ""))
                    Logger.recordMetadata("Deploy Date", deploy_config.get("deploy-date", ""))
                    Logger.recordMetadata("Git Hash", deploy_config.get("git-hash", ""))
                    Logger.recordMetadata("Git Branch", deploy_config.get("git-branch", ""))

                Logger.addDataReciever(NT4Publisher(True))
                Logger.addDataReciever(WPILOGWriter())

            case constants.RobotModes.SIMULATION:
                Logger.addDataReciever(NT4Publisher(True))

            case constants.RobotModes.REPLAY:
                #
                #  To run back a log file in replay mode, set the `LOG_PATH` environment variable
                #  and then run in simulation:
                #
                #    LOG_PATH=/path/to/log/file.wpilog robotpy sim
                #
                self.useTiming = False  # Run as fast as possible

                log_path = os.path.abspath(os.environ["LOG_PATH"])

                Logger.setReplaySource(WPILOGReader(log_path))
                Logger.addDataReciever(WPILOGWriter(log_path[:-7] + "_sim.wpilog"))

        Logger.start()

        self._counter = 0  # Updated on each periodic call. Used to throttle dashboard updates

        self._container: Optional[RobotContainer] = None
        self._autonomous_command: Optional[Command] = None

        self.disabled_timer = Timer()
        self.match_started = False  # Set true on Autonomous or Teleop init

    @property
    def container(self) -> RobotContainer:
        return self._container

    @property
    def counter(self) -> int:
        return self._counter

    def robotInit(self) -> None:
        """
        This function is run when the robot is first started up and should be used for any
        initialization code.
        """
        logger.info("robotInit: entry")
        super().robotInit()

        SignalLogger.enable_auto_logging(False)
        LiveWindow.disableAllTelemetry()

        self._logging_init()

        version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        logger.info(f"Python: {version}, Software Version: {VERSION}")

        command_count: Dict[str, int] = {}

        # Tracks active commands.
        def log_command(command: Command, active: bool) -> None:
            name = command.getName()
            count = command_count.get(name, 0) + (1 if active else -1)
            command_count[name] = count
            Logger.recordOutput(f"Commands/{name}", count > 0)

        scheduler = CommandScheduler.getInstance()

        scheduler.onCommandInitialize(lambda c: log_command(c, True))
        scheduler.onCommandFinish(lambda c: log_command(c, False))
        scheduler.onCommandInterrupt(lambda c: log_command(c, False))

        # Instantiate our RobotContainer. This will perform all our button bindings, and put our
        # autonomous chooser on the dashboard.
        self._container = RobotContainer(self)

        logger.info("robotInit: exit")

    @staticmethod
    def _logging_init() -> None:
        match constants.ROBOT_MODE:
            case constants.RobotModes.SIMULATION:
                DriverStation.silenceJoystickConnectionWarning(True)
                logger.setLevel(logging.INFO)
                logging.getLogger("wpilib").setLevel(logging.DEBUG)
                logging.getLogger("commands2").setLevel(logging.DEBUG)

            case _:
                logger.setLevel(logging.ERROR)
                logging.getLogger("wpilib").setLevel(logging.ERROR)
                logging.getLogger("commands2").setLevel(logging.ERROR)

    def robotPeriodic(self) -> None:
        """
        Periodic code for all modes. Default period is 20 mS.
        """
        Phoenix6Signals.refresh()

        CommandScheduler.getInstance().run()

        self._counter += 1

    def disabledInit(self) -> None:
        """
        Hold the brakes for a while so a robot that was moving comes to a stop, then
        release them so it can be pushed around the pits
        """
        logger.info("disabledInit: entry")
        super().disabledInit()

        for subsystem in self.container.subsystems:
            if hasattr(subsystem, "stop") and callable(getattr(subsystem, "stop")):
                subsystem.stop()

        self.container.drive.set_brake_mode(True)

        self.disabled_timer.reset()
        self.disabled_timer.start()

    def disabledPeriodic(self) -> None:
        if self.disabled_timer.hasElapsed(constants.WHEEL_LOCK_TIME):
            self.container.drive.set_brake_mode(False)
            self.disabled_timer.stop()
            self.disabled_timer.reset()

        # Validate who we are working for
        if not self.match_started:
            self.container.check_alliance()

    def disabledExit(self) -> None:
        super().disabledExit()
        self.disabled_timer.stop()
        self.disabled_timer.reset()

        self.container.drive.set_brake_mode(True)

    def autonomousInit(self) -> None:
        """
        Initialization code for autonomous mode should go here.
        """
        super().autonomousInit()
        logger.info("autonomousInit: entry")

        self.container.set_start_time()

        # Validate who we are working for. This may not be valid until autonomous or teleop init
        if not self.match_started:
            self.container.check_alliance()
            self.match_started = True

        self._autonomous_command = self.container.get_autonomous_command()

        if self._autonomous_command is not None:
            self._autonomous_command.schedule()

    def autonomousExit(self) -> None:
        super().autonomousExit()
        logger.info("autonomousExit: entry")

        if self._autonomous_command is not None:
            self._autonomous_command.cancel()

    def teleopInit(self) -> None:
        super().teleopInit()
        logger.debug("teleopInit: entry")

        self.container.set_start_time()

        # Stop what we are doing...
        if self._autonomous_command is not None:
            self._autonomous_command.cancel()

        if not self.match_started:
            self.container.check_alliance()
            self.match_started = True

    def testInit(self) -> None:
        super().testInit()
        CommandScheduler.getInstance().cancelAll()
