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

import math
from types import SimpleNamespace

import pytest
from pykit.logger import Logger
from wpimath.units import radians

import constants
from subsystems.drive.drive import Drive, module_translations
from subsystems.drive.gyro_io import GyroIO
from subsystems.drive.module_io import ModuleIO


class SpinningModuleIO(ModuleIO):
    """
    Module pointed along the circle around the robot center, as when spinning in place
    """
    def __init__(self, angle: radians):
        super().__init__()
        self.angle = angle
        self.drive_position: radians = 0.0

    def update_inputs(self, inputs: ModuleIO.ModuleIOInputs) -> None:
        inputs.turn_absolute_position = self.angle
        inputs.turn_position = self.angle
        inputs.drive_position = self.drive_position


class FakeGyroIO(GyroIO):
    def __init__(self, connected: bool, yaw: radians = 0.0):
        self.connected = connected
        self.yaw = yaw

    def update_inputs(self, inputs: GyroIO.GyroIOInputs) -> None:
        inputs.connected = self.connected
        inputs.yaw_position = self.yaw


@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    monkeypatch.setattr(Logger, "processInputs", lambda *args, **kwargs: None)
    monkeypatch.setattr(Logger, "recordOutput", lambda *args, **kwargs: None)


@pytest.fixture
def modules():
    return [SpinningModuleIO(translation.angle().radians() + math.pi / 2)
            for translation in module_translations()]


def make_drive(gyro_io: GyroIO, modules) -> Drive:
    container = SimpleNamespace(robot=SimpleNamespace(counter=1))
    return Drive(container, gyro_io, *modules)


def spin(modules, distance: float) -> None:
    for module in modules:
        module.drive_position += distance / constants.WHEEL_RADIUS


def test_heading_from_modules_without_gyro(modules):
    drive = make_drive(GyroIO(), modules)
    drive.periodic()
    assert drive.raw_gyro_rotation.radians() == pytest.approx(0.0)

    spin(modules, 0.1)
    drive.periodic()

    radius = module_translations()[0].norm()
    assert not drive.gyro_inputs.connected
    assert drive.raw_gyro_rotation.radians() == pytest.approx(0.1 / radius, rel=1e-3)


def test_heading_accumulates_without_gyro(modules):
    drive = make_drive(GyroIO(), modules)
    drive.periodic()

    for _ in range(4):
        spin(modules, 0.05)
        drive.periodic()

    radius = module_translations()[0].norm()
    assert drive.raw_gyro_rotation.radians() == pytest.approx(0.2 / radius, rel=1e-3)
    assert drive.pose.rotation().radians() == pytest.approx(0.2 / radius, rel=1e-3)


def test_connected_gyro_is_used(modules):
    drive = make_drive(FakeGyroIO(connected=True, yaw=0.5), modules)
    drive.periodic()

    spin(modules, 0.1)
    drive.periodic()

    assert drive.raw_gyro_rotation.radians() == pytest.approx(0.5)


def test_integration_continues_from_last_gyro_heading(modules):
    gyro = FakeGyroIO(connected=True, yaw=0.5)
    drive = make_drive(gyro, modules)
    drive.periodic()

    gyro.connected = False
    spin(modules, 0.1)
    drive.periodic()

    radius = module_translations()[0].norm()
    assert drive.raw_gyro_rotation.radians() == pytest.approx(0.5 + 0.1 / radius, rel=1e-3)
