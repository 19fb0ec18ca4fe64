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

import pytest
from pyfrc.test_support.controller import TestController
from pykit.logger import Logger

import constants
import robot as robot_module
from robot import MyRobot


def test_robot_init_successful(control: TestController, robot: MyRobot):
    # run_robot will cause the robot to be initialized and robotInit to be called
    with control.run_robot():
        container = robot.container
        assert container is not None, "Robot Container not initialized"
        assert robot.disabled_timer is not None, "Robot disabled timer not initialized"

        # Container related
        assert container.field is not None
        assert container.drive is not None
        assert container.shooter is not None
        assert container.drive in container.subsystems
        assert container.shooter in container.subsystems
        assert container.speed_scale() == 1.0
        assert container.get_autonomous_command() is not None


def test_robot_runs_each_mode(control: TestController, robot: MyRobot):
    with control.run_robot():
        control.step_timing(seconds=0.5, autonomous=False, enabled=False)
        assert not robot.match_started

        control.step_timing(seconds=1.0, autonomous=True, enabled=True)
        assert robot.match_started

        control.step_timing(seconds=1.0, autonomous=False, enabled=True)
        assert robot.counter > 0


@pytest.fixture
def replay_mode(monkeypatch, tmp_path):
    monkeypatch.setattr(constants, "ROBOT_MODE", constants.RobotModes.REPLAY)
    monkeypatch.setenv("LOG_PATH", str(tmp_path / "match.wpilog"))
    monkeypatch.setattr(robot_module, "WPILOGReader", lambda path: path)
    monkeypatch.setattr(robot_module, "WPILOGWriter", lambda path: path)
    monkeypatch.setattr(Logger, "setReplaySource", lambda source: None)
    monkeypatch.setattr(Logger, "addDataReciever", lambda receiver: None)
    monkeypatch.setattr(Logger, "start", lambda: None)


def test_replay_runs_unthrottled(replay_mode):
    replay_robot = MyRobot()
    try:
        # LoggedRobot only skips its loop period wait when useTiming is cleared
        assert replay_robot.useTiming is False
    finally:
        replay_robot.endCompetition()
