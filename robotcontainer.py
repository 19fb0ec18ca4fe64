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
import time
from typing import Callable, List, Optional

from commands2 import Command, Subsystem, cmd
from commands2.button import CommandXboxController
from wpilib import DriverStation, RobotBase, SendableChooser, SmartDashboard
from wpimath import applyDeadband
from wpimath.geometry import Pose2d, Rotation2d
from wpimath.units import meters

import constants
from commands.autonomous import pathplanner
from commands.characterization import FeedForwardCharacterization, WheelRadiusCharacterization
from commands.drive_commands import joystick_drive
from field.field_2024 import CrescendoField
from subsystems.drive.drive import Drive
from subsystems.drive.gyro_io import GyroIO, GyroIOPigeon2
from subsystems.drive.module_io import ModuleIO
from subsystems.drive.module_io_sim import ModuleIOSim
from subsystems.drive.module_io_talonfx import ModuleIOTalonFX
from subsystems.drive.module_io_xs import ModuleIOXS
from subsystems.shooter.shooter import Shooter
from subsystems.shooter.shooter_hardware import ShooterHardware
from subsystems.shooter.shooter_io import ShooterIO
from subsystems.shooter.shooter_sim import ShooterSim
from subsystems.vision.multi_camera_container import MultiCameraContainer
from subsystems.vision.solo_camera_container import SoloCameraContainer

logger = logging.getLogger(__name__)

# Operator stick travel that counts as a trigger press
TRIGGER_THRESHOLD = 0.5

SPEED_LIMITS = {"25%": 0.25, "50%": 0.5, "75%": 0.75, "100%": 1.0}


def valid_speed_scale(scale: Optional[float]) -> float:
    """
    Drive speed scale from the limiter chooser. Anything outside (0, 1] runs at full speed.
    """
    if not isinstance(scale, (int, float)) or not 0.0 < scale <= 1.0:
        logger.warning(f"Invalid drive rate limit {scale}, using full speed")
        return 1.0

    return float(scale)


class RobotContainer:
    """
    This class is where the bulk of the robot should be declared. Since Command-based is a
    "declarative" paradigm, very little robot logic should actually be handled in the :class:`.Robot`
    periodic methods (other than the scheduler calls). Instead, the structure of the robot (including
    subsystems, commands, and button mappings) should be declared here.
    """
    def __init__(self, robot: 'MyRobot') -> None:
        self.robot = robot
        self.start_time = time.time()

        self.field = CrescendoField()

        self._is_red_alliance: bool = False
        self._alliance_location: int = 1  # Valid numbers are 1, 2, 3
        self._alliance_change_callbacks: List[Callable[[bool, int], None]] = []

        self.driver_controller = CommandXboxController(constants.DRIVER_CONTROLLER_PORT)
        self.operator_controller = CommandXboxController(constants.OPERATOR_CONTROLLER_PORT)

        # The robot's subsystems
        self.drive: Drive = self._create_drive()
        self.shooter = Shooter(self, self._create_shooter_io(), self.speaker_distance)
        self.vision: Optional[MultiCameraContainer] = self._create_vision()

        self.subsystems: List[Subsystem] = [self.drive, self.shooter]
        if self.vision is not None:
            self.subsystems.append(self.vision)

        # Named commands must be registered before any autos are built
        self._auto_chooser: SendableChooser = pathplanner.configure_auto_builder(self.drive, self)
        self.configure_additional_autos()

        self.configure_speed_limiter()

        self._configure_driver_button_bindings_xbox(self.driver_controller)
        self._configure_operator_button_bindings_xbox(self.operator_controller)

        self.register_alliance_change_callback(self._alliance_change)
        self.check_alliance()

        self.dashboard_initialize()

    def _create_drive(self) -> Drive:
        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                module_class = ModuleIOXS if constants.SWERVE_MODULE_TYPE == constants.SwerveModuleType.XS \
                    else ModuleIOTalonFX

                return Drive(self, GyroIOPigeon2(), *(module_class(index) for index in range(4)))

            case constants.RobotModes.SIMULATION:
                # No gyro in simulation, the heading is integrated from the module deltas
                return Drive(self, GyroIO(), *(ModuleIOSim(index) for index in range(4)))

            case _:
                # Replayed robot, the inputs come from the log
                return Drive(self, GyroIO(), *(ModuleIO() for _ in range(4)))

    @staticmethod
    def _create_shooter_io() -> ShooterIO:
        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                return ShooterHardware()

            case constants.RobotModes.SIMULATION:
                return ShooterSim()

            case _:
                return ShooterIO()

    def _create_vision(self) -> Optional[MultiCameraContainer]:
        if constants.ROBOT_MODE == constants.RobotModes.REPLAY:
            return None

        layout = self.field.layout
        if layout is None:
            logger.error("No AprilTag field layout available, vision pose estimation is disabled")
            return None

        cameras = [SoloCameraContainer(info["Name"], info["Transform"], layout, label=info["Label"])
                   for info in constants.CAMERA_INFOS]

        return MultiCameraContainer(self, self.drive, *cameras)

    def speaker_distance(self) -> meters:
        """
        Distance from the robot center to our speaker aim point
        """
        target = self.field.speaker_location(self.is_red_alliance)
        return self.drive.pose.translation().distance(target)

    @property
    def alliance_location(self) -> int:
        """
        Alliance location (1, 2, or 3). This value does not change once the match
        has started.
        """
        return self._alliance_location

    @property
    def is_red_alliance(self) -> bool:
        """
        Are we in the red alliance?
        """
        return self._is_red_alliance

    def check_alliance(self) -> None:
        """
        Support alliance changes up until we start the competition. Default is the blue
        alliance and this function is called during 'disabled_periodic' and at the init functions
        for both the Autonomous and Teleop stages.

        Once 'match_started' is True, we are locked into the alliance.
        """
        if self.robot.match_started:
            return

        # Note that if 'None' is returned for the alliance, we assume Blue
        is_red = DriverStation.getAlliance() == DriverStation.Alliance.kRed
        location = DriverStation.getLocation()

        if location not in (1, 2, 3):
            if location is not None:
                logger.error(f"Invalid alliance location value: {location}")

            location = self._alliance_location

        if self._is_red_alliance != is_red or self._alliance_location != location:
            self._is_red_alliance = is_red
            self._alliance_location = location

            for callback in self._alliance_change_callbacks:
                callback(is_red, location)

    def register_alliance_change_callback(self, callback: Callable[[bool, int], None]) -> None:
        """
        For subsystems and objects that need to know about alliance changes before the
        match begins.
        """
        self._alliance_change_callbacks.append(callback)

    def _alliance_change(self, is_red: bool, location: int) -> None:
        logger.info(f"Alliance is now {'RED' if is_red else 'BLUE'}, location {location}")

        # In simulation, park the robot against our subwoofer so the aim code has a sane pose
        if RobotBase.isSimulation():
            self.drive.pose = self.field.start_pose(is_red)

    def set_start_time(self) -> None:  # call in teleopInit and autonomousInit in the robot
        self.start_time = time.time()

    def get_elapsed_time(self) -> float:
        """
        Called when we want to know the start/elapsed time for status and debug messages
        """
        return time.time() - self.start_time

    def _configure_driver_button_bindings_xbox(self, controller: CommandXboxController) -> None:
        """
        Driver controller

        LS == Left Stick    - Field relative translation
        RS == Right Stick   - Rotation (X axis)

        LB == Left Bumper   - Point at our speaker while held
        RB == Right Bumper  - Point at the pass corner while held

        X == X Button (Left)   - Lock the wheels in an X
        B == B Button (Right)  - Reset the heading to face downfield (works while disabled)
        Y == Y Button (Top)    - Run the intake while held
        """
        # Note that X is defined as forward according to WPILib convention,
        # and Y is defined as to the left according to WPILib convention.
        self.drive.setDefaultCommand(
            joystick_drive(self.drive, self.field,
                           lambda: -controller.getLeftY(),
                           lambda: -controller.getLeftX(),
                           lambda: -controller.getRightX(),
                           lambda: controller.getHID().getRightBumper(),
                           lambda: controller.getHID().getLeftBumper(),
                           speed_scale=self.speed_scale))

        controller.x().onTrue(cmd.runOnce(self.drive.stop_with_x, self.drive))
        controller.b().onTrue(cmd.runOnce(self._reset_heading, self.drive).ignoringDisable(True))
        controller.y().whileTrue(self.shooter.run_shot(intake=True))

    def _reset_heading(self) -> None:
        """
        Keep the position, face away from our alliance wall
        """
        heading = Rotation2d.fromDegrees(180.0 if self.is_red_alliance else 0.0)

        self.drive.pose = Pose2d(self.drive.pose.translation(), heading)

    def _configure_operator_button_bindings_xbox(self, controller: CommandXboxController) -> None:
        """
        Operator controller. The shooter default command reads the whole controller
        every loop and passes it to 'advanced_shoot'.

        LS == Left Stick (Y)   - Climber
        RS == Right Stick (Y)  - Manual pivot angle

        LB == Left Bumper      - Pass shot
        RB == Right Bumper     - Feed the note into the shooter

        LT == Left Trigger     - Intake (stops when the beam break sees a note)
        RT == Right Trigger    - Auto aim at our speaker

        A == A Button (Bottom) - Amp shot
        B == B Button (Right)  - Auto line shot
        X == X Button (Left)   - Stage shot
        Y == Y Button (Top)    - Wing shot

        Back                   - Outtake
        Start                  - Ignore the intake beam break
        D-Pad Up               - Subwoofer (speaker) shot
        """
        hid = controller.getHID()

        def operate() -> None:
            manual = applyDeadband(-hid.getRightY(), constants.JOYSTICK_DEADBAND)

            self.shooter.advanced_shoot(auto_aim=hid.getRightTriggerAxis() > TRIGGER_THRESHOLD,
                                        amp=hid.getAButton(),
                                        wing=hid.getYButton(),
                                        stage=hid.getXButton(),
                                        line=hid.getBButton(),
                                        intake=hid.getLeftTriggerAxis() > TRIGGER_THRESHOLD,
                                        outtake=hid.getBackButton(),
                                        feed=hid.getRightBumper(),
                                        manual_angle=manual * constants.SHOOTER_MAX_ANGLE,
                                        passing=hid.getLeftBumper(),
                                        limit_off=hid.getStartButton(),
                                        climb=applyDeadband(-hid.getLeftY(), constants.JOYSTICK_DEADBAND),
                                        speaker=hid.getPOV() == 0)

        self.shooter.setDefaultCommand(cmd.run(operate, self.shooter).withName("OperatorShooter"))

    def configure_speed_limiter(self) -> None:
        """
        Overall speed limitation scaling factor
        """
        self._limit_chooser = SendableChooser()

        for label, value in SPEED_LIMITS.items():
            if value == 1.0:
                self._limit_chooser.setDefaultOption(label, value)
            else:
                self._limit_chooser.addOption(label, value)

        SmartDashboard.putData("Drive rate limiter", self._limit_chooser)

    def speed_scale(self) -> float:
        return valid_speed_scale(self._limit_chooser.getSelected())

    def configure_additional_autos(self) -> None:
        """
        Characterization routines that are not PathPlanner autos
        """
        self._auto_chooser.addOption("Drive FF Characterization",
                                     FeedForwardCharacterization(self, self.drive,
                                                                 self.drive.run_characterization_volts,
                                                                 lambda: self.drive.characterization_velocity))

        self._auto_chooser.addOption("Wheel Radius Calibration", WheelRadiusCharacterization(self, self.drive))

        SmartDashboard.putData("Chosen Auto", self._auto_chooser)

    def get_autonomous_command(self) -> Optional[Command]:
        """
        :returns: the command to run in autonomous
        """
        return self._auto_chooser.getSelected()

    def dashboard_initialize(self) -> None:
        for subsystem in self.subsystems:
            if hasattr(subsystem, "dashboard_initialize") and callable(getattr(subsystem, "dashboard_initialize")):
                subsystem.dashboard_initialize()
