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

from typing import List

import pytest
from commands2 import Subsystem

from commands.auto_aim import AutoAim
from commands.shot_commands import AutoLineShot, DoNothing, IntakeNote, PresetShot, Shoot, StageShot, WingShot


class FakeTimer:
    """
    Stand-in for wpilib.Timer that only moves when the test says so
    """
    def __init__(self):
        self.running = False
        self.elapsed = 0.0

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def reset(self) -> None:
        self.elapsed = 0.0

    def get(self) -> float:
        return self.elapsed

    def hasElapsed(self, period: float) -> bool:
        return self.elapsed >= period

    def advance(self, period: float) -> None:
        if self.running:
            self.elapsed += period


class FakeShooter(Subsystem):
    def __init__(self):
        super().__init__()
        self.launch_permission = False
        self.has_note = False
        self.calls: List[dict] = []
        self.stopped = 0

    def advanced_shoot(self, **controls) -> None:
        self.calls.append(controls)

    def stop(self) -> None:
        self.stopped += 1


class FakeContainer:
    def __init__(self):
        self.shooter = FakeShooter()

    @staticmethod
    def get_elapsed_time() -> float:
        return 0.0


@pytest.fixture
def container() -> FakeContainer:
    return FakeContainer()


def make_command(container, command_class=AutoAim):
    command = command_class(container)
    command._shot_timer = FakeTimer()
    command.initialize()
    return command


def test_requires_shooter(container):
    command = AutoAim(container)

    assert container.shooter in command.getRequirements()


def test_no_feed_without_permission(container):
    command = make_command(container)

    for _ in range(10):
        command.execute()
        command._shot_timer.advance(0.02)

    assert not command.feeding
    assert not command.isFinished()
    assert all(call == {"feed": False, "auto_aim": True} for call in container.shooter.calls)


def test_feeds_with_permission(container):
    command = make_command(container)
    container.shooter.launch_permission = True

    command.execute()

    assert command.feeding
    assert container.shooter.calls[-1] == {"feed": True, "auto_aim": True}


def test_timer_holds_feed_after_delay(container):
    command = make_command(container)
    shooter = container.shooter
    timer = command._shot_timer

    shooter.launch_permission = True
    command.execute()
    timer.advance(0.05)

    # Permission drops before the feed delay, feeding stops
    shooter.launch_permission = False
    command.execute()
    assert not command.feeding

    # Timer keeps running, once past the delay the feed stays on
    timer.advance(0.06)
    command.execute()
    assert command.feeding


def test_finishes_after_shot_duration(container):
    command = make_command(container)
    container.shooter.launch_permission = True

    elapsed = 0.0
    while not command.isFinished():
        command.execute()
        command._shot_timer.advance(0.02)
        elapsed += 0.02
        assert elapsed < 2.0, "Shot never finished"

    assert command._shot_timer.get() > PresetShot.SHOT_DURATION

    command.end(False)
    assert container.shooter.stopped == 1
    assert not command.feeding


def test_finish_boundary(container):
    command = make_command(container)
    command._shot_timer.elapsed = PresetShot.SHOT_DURATION

    assert not command.isFinished()

    command._shot_timer.elapsed = PresetShot.SHOT_DURATION + 0.001
    assert command.isFinished()


def test_initialize_resets(container):
    command = make_command(container)
    command._shot_timer.elapsed = 5.0

    command.initialize()

    assert command._shot_timer.get() == 0.0
    assert not command._shot_timer.running
    assert not command.feeding


@pytest.mark.parametrize("command_class, controls", [
    (Shoot, {"speaker": True}),
    (AutoLineShot, {"line": True}),
    (WingShot, {"wing": True}),
    (StageShot, {"stage": True}),
])
def test_preset_controls(container, command_class, controls):
    command = make_command(container, command_class)
    command.execute()

    assert container.shooter.calls[-1] == {"feed": False, **controls}


def test_intake_note(container):
    command = IntakeNote(container)
    command.initialize()
    command.execute()

    assert container.shooter.calls[-1] == {"intake": True}
    assert not command.isFinished()

    container.shooter.has_note = True
    assert command.isFinished()

    command.end(False)
    assert container.shooter.stopped == 1


def test_do_nothing(container):
    command = DoNothing(container)

    assert command.isFinished()
    assert not command.getRequirements()
