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
from dataclasses import dataclass
from typing import Callable

import numpy as np
from commands2 import Command, Subsystem
from pykit.logger import Logger
from wpilib import SmartDashboard
from wpimath.units import degrees, meters, revolutions_per_minute

import constants
from subsystems.shooter.shooter_io import ShooterIO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShotSetpoint:
    top_velocity: revolutions_per_minute = 0.0
    bottom_velocity: revolutions_per_minute = 0.0
    angle: degrees = constants.SHOOTER_STOW_ANGLE

    @property
    def spinning(self) -> bool:
        return self.top_velocity != 0.0 or self.bottom_velocity != 0.0


STOW = ShotSetpoint()
SPEAKER = ShotSetpoint(*constants.SPEAKER_SHOT)
AMP = ShotSetpoint(*constants.AMP_SHOT)
AUTO_LINE = ShotSetpoint(*constants.AUTO_LINE_SHOT)
STAGE = ShotSetpoint(*constants.STAGE_SHOT)
WING = ShotSetpoint(*constants.WING_SHOT)
PASS = ShotSetpoint(*constants.PASS_SHOT)


def auto_aim_setpoint(distance: meters) -> ShotSetpoint:
    """
    Interpolated shot for the given distance to the speaker. Distances outside
    the table use the nearest entry.
    """
    angle = float(np.interp(distance, constants.AUTO_AIM_DISTANCES, constants.AUTO_AIM_ANGLES))
    rpm = float(np.interp(distance, constants.AUTO_AIM_DISTANCES, constants.AUTO_AIM_RPMS))

    return ShotSetpoint(rpm, rpm, angle)


class Shooter(Subsystem):
    """
    Shooter flywheels, pivot, the intake / handler / feeder note path, and the climber.

    Everything is driven through 'advanced_shoot', which is called every loop by
    whichever command owns the shooter. The shot selection has a fixed priority:
    auto aim, amp, wing, stage, auto line, pass, then the subwoofer shot. With none
    of those the pivot follows the manual angle if one is given, or stows. Feeding
    does not pick a shot, it pushes the note into whatever the wheels are doing.
    """
    def __init__(self, container: 'RobotContainer', io: ShooterIO,
                 speaker_distance: Callable[[], meters]):
        super().__init__()
        self.setName("Shooter")

        self._container = container
        self._io = io
        self._inputs = ShooterIO.ShooterIOInputs()
        self._speaker_distance = speaker_distance

        self._setpoint = STOW
        self._note_outputs = (0.0, 0.0, 0.0)    # intake, handler, feeder

    @property
    def inputs(self) -> ShooterIO.ShooterIOInputs:
        return self._inputs

    @property
    def setpoint(self) -> ShotSetpoint:
        return self._setpoint

    @property
    def current_draw(self) -> float:
        return self._io.current_draw

    @property
    def has_note(self) -> bool:
        return not self._inputs.intake_limit

    def periodic(self) -> None:
        self._io.update_inputs(self._inputs)
        Logger.processInputs("Shooter", self._inputs)

        Logger.recordOutput("Shooter/Setpoint/Top", self._setpoint.top_velocity)
        Logger.recordOutput("Shooter/Setpoint/Bottom", self._setpoint.bottom_velocity)
        Logger.recordOutput("Shooter/Setpoint/Angle", self._setpoint.angle)
        Logger.recordOutput("Shooter/Setpoint/Intake", self._note_outputs[0])
        Logger.recordOutput("Shooter/Setpoint/Handler", self._note_outputs[1])
        Logger.recordOutput("Shooter/Setpoint/Feeder", self._note_outputs[2])
        Logger.recordOutput("Shooter/LaunchPermission", self.launch_permission)

        # Update SmartDashboard for this subsystem at a rate slower than the period
        counter = self._container.robot.counter
        if counter % 100 == 0 or (counter % 19 == 0 and self._container.robot.isEnabled()):
            self.dashboard_periodic()

    def dashboard_periodic(self) -> None:
        SmartDashboard.putNumber("Shooter/top rpm", self._inputs.top_velocity)
        SmartDashboard.putNumber("Shooter/bottom rpm", self._inputs.bottom_velocity)
        SmartDashboard.putNumber("Shooter/angle", self._inputs.angle_position)
        SmartDashboard.putNumber("Shooter/angle goal", self._setpoint.angle)
        SmartDashboard.putBoolean("Shooter/has note", self.has_note)
        SmartDashboard.putBoolean("Shooter/launch permission", self.launch_permission)

    def _select_setpoint(self, auto_aim: bool, amp: bool, wing: bool, stage: bool, line: bool,
                         passing: bool, speaker: bool, manual_angle: degrees) -> ShotSetpoint:
        if auto_aim:
            return auto_aim_setpoint(self._speaker_distance())
        if amp:
            return AMP
        if wing:
            return WING
        if stage:
            return STAGE
        if line:
            return AUTO_LINE
        if passing:
            return PASS
        if speaker:
            return SPEAKER
        if manual_angle != 0.0:
            return ShotSetpoint(angle=manual_angle)

        return STOW

    def advanced_shoot(self, auto_aim: bool = False, amp: bool = False, wing: bool = False,
                       stage: bool = False, line: bool = False, intake: bool = False,
                       outtake: bool = False, feed: bool = False, manual_angle: degrees = 0.0,
                       passing: bool = False, limit_off: bool = False, climb: float = 0.0,
                       speaker: bool = False) -> None:
        """
        Drive every shooter mechanism for this loop.

        :param auto_aim:     Wheel speed and pivot angle from the distance to our speaker
        :param amp:          Amp preset
        :param wing:         Wing line preset
        :param stage:        Stage (podium) preset
        :param line:         Auto line preset
        :param intake:       Run the intake and handler until a note reaches the beam break
        :param outtake:      Reverse the whole note path
        :param feed:         Push the note into the flywheels
        :param manual_angle: Pivot angle used when no preset is selected, 0 for none
        :param passing:      Lob pass preset
        :param limit_off:    Ignore the beam break while intaking
        :param climb:        Climber output, -1..1
        :param speaker:      Subwoofer preset
        """
        setpoint = self._select_setpoint(auto_aim, amp, wing, stage, line, passing, speaker, manual_angle)
        angle = max(constants.SHOOTER_MIN_ANGLE, min(constants.SHOOTER_MAX_ANGLE, setpoint.angle))

        if angle != setpoint.angle:
            logger.debug(f"Shooter angle {setpoint.angle} clamped to {angle}")
            setpoint = ShotSetpoint(setpoint.top_velocity, setpoint.bottom_velocity, angle)

        intake_output = handler_output = feeder_output = 0.0

        if outtake:
            intake_output = handler_output = feeder_output = constants.OUTTAKE_OUTPUT

        elif intake and (limit_off or not self.has_note):
            intake_output = constants.INTAKE_OUTPUT
            handler_output = constants.HANDLER_INTAKE_OUTPUT

        if feed and not outtake:
            handler_output = feeder_output = constants.FEED_OUTPUT

        self._setpoint = setpoint
        self._note_outputs = (intake_output, handler_output, feeder_output)

        self._io.set_motors(setpoint.top_velocity, setpoint.bottom_velocity, handler_output, setpoint.angle,
                            intake_output, feeder_output, limit_off, max(-1.0, min(1.0, climb)))

    def stop(self) -> None:
        """
        Wheels and note path off, pivot stowed
        """
        self.advanced_shoot()

    @property
    def launch_permission(self) -> bool:
        """
        True once the flywheels are spinning at the requested speed and the pivot is at
        its requested angle
        """
        if not self._setpoint.spinning:
            return False

        return (abs(self._inputs.top_velocity - self._setpoint.top_velocity) <= constants.SHOOTER_RPM_TOLERANCE and
                abs(self._inputs.bottom_velocity - self._setpoint.bottom_velocity) <= constants.SHOOTER_RPM_TOLERANCE
                and abs(self._inputs.angle_position - self._setpoint.angle) <= constants.SHOOTER_ANGLE_TOLERANCE)

    def run_shot(self, **controls) -> Command:
        """
        Command that calls 'advanced_shoot' with the given controls every loop and
        stops the shooter when it ends. Intended for button bindings.
        """
        return self.runEnd(lambda: self.advanced_shoot(**controls), self.stop)
