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
from typing import List, Tuple

from commands2 import Subsystem
from pykit.autolog import autolog_output, autologgable_output
from pykit.logger import Logger
from wpilib import DriverStation, Field2d, SmartDashboard
from wpimath.estimator import SwerveDrive4PoseEstimator
from wpimath.geometry import Pose2d, Rotation2d, Translation2d, Twist2d
from wpimath.kinematics import ChassisSpeeds, SwerveDrive4Kinematics, SwerveModulePosition, SwerveModuleState
from wpimath.units import meters_per_second, radians_per_second, seconds, volts

import constants
from subsystems.drive.gyro_io import GyroIO
from subsystems.drive.module import Module
from subsystems.drive.module_io import ModuleIO

logger = logging.getLogger(__name__)

SwerveModulePositions = Tuple[SwerveModulePosition, SwerveModulePosition, SwerveModulePosition, SwerveModulePosition]
SwerveModuleStates = Tuple[SwerveModuleState, SwerveModuleState, SwerveModuleState, SwerveModuleState]


def module_translations() -> Tuple[Translation2d, Translation2d, Translation2d, Translation2d]:
    """
    Module locations relative to the robot center, in FL, FR, BL, BR order
    """
    x = constants.TRACK_WIDTH_X / 2.0
    y = constants.TRACK_WIDTH_Y / 2.0

    return (Translation2d(x, y),
            Translation2d(x, -y),
            Translation2d(-x, y),
            Translation2d(-x, -y))


@autologgable_output
class Drive(Subsystem):
    """
    Swerve drive with pose estimation.

    Odometry comes from the module positions and the gyro. If the gyro drops off the
    bus, the heading is integrated from the module deltas instead so the pose does
    not freeze. Vision measurements are fused into the same pose estimator.
    """
    def __init__(self, container: 'RobotContainer', gyro_io: GyroIO,
                 fl_io: ModuleIO, fr_io: ModuleIO, bl_io: ModuleIO, br_io: ModuleIO):
        super().__init__()
        self.setName("Drive")

        self._container = container
        self._gyro_io = gyro_io
        self._gyro_inputs = GyroIO.GyroIOInputs()

        self._modules: List[Module] = [Module(io, index) for index, io in enumerate((fl_io, fr_io, bl_io, br_io))]

        self._kinematics = SwerveDrive4Kinematics(*module_translations())
        self._raw_gyro_rotation = Rotation2d()
        self._last_module_positions: SwerveModulePositions = self.get_module_positions()

        self._pose_estimator = SwerveDrive4PoseEstimator(self._kinematics,
                                                         self._raw_gyro_rotation,
                                                         self._last_module_positions,
                                                         Pose2d())
        self._field = Field2d()

    @property
    def kinematics(self) -> SwerveDrive4Kinematics:
        return self._kinematics

    @property
    def modules(self) -> List[Module]:
        return self._modules

    @property
    def raw_gyro_rotation(self) -> Rotation2d:
        """
        Gyro heading, or the heading integrated from the modules when the gyro is disconnected
        """
        return self._raw_gyro_rotation

    @property
    def gyro_inputs(self) -> GyroIO.GyroIOInputs:
        return self._gyro_inputs

    def periodic(self) -> None:
        self._gyro_io.update_inputs(self._gyro_inputs)
        Logger.processInputs("Drive/Gyro", self._gyro_inputs)

        for module in self._modules:
            module.update_inputs()

        for module in self._modules:
            module.periodic()

        # Stop moving when disabled
        if DriverStation.isDisabled():
            for module in self._modules:
                module.stop()

            # Log empty setpoint states when disabled
            Logger.recordOutput("SwerveStates/Setpoints", [])
            Logger.recordOutput("SwerveStates/SetpointsOptimized", [])

        self._update_odometry()

        # Update SmartDashboard for this subsystem at a rate slower than the period
        counter = self._container.robot.counter
        if counter % 100 == 0 or (counter % 17 == 0 and DriverStation.isEnabled()):
            self.dashboard_periodic()

    def _update_odometry(self) -> None:
        module_positions = self.get_module_positions()
        module_deltas = tuple(SwerveModulePosition(current.distance - last.distance, current.angle)
                              for current, last in zip(module_positions, self._last_module_positions))
        self._last_module_positions = module_positions

        if self._gyro_inputs.connected:
            # Use the real gyro angle
            self._raw_gyro_rotation = Rotation2d(self._gyro_inputs.yaw_position)
        else:
            # Use the angle delta from the kinematics and module deltas
            twist: Twist2d = self._kinematics.toTwist2d(module_deltas)
            self._raw_gyro_rotation = self._raw_gyro_rotation + Rotation2d(twist.dtheta)

        self._pose_estimator.update(self._raw_gyro_rotation, module_positions)

    def dashboard_initialize(self) -> None:
        SmartDashboard.putData("Field", self._field)

    def dashboard_periodic(self) -> None:
        pose = self.pose
        self._field.setRobotPose(pose)

        SmartDashboard.putNumber("Drivetrain/x", pose.x)
        SmartDashboard.putNumber("Drivetrain/y", pose.y)
        SmartDashboard.putNumber("Drivetrain/heading", pose.rotation().degrees())
        SmartDashboard.putBoolean("Drivetrain/gyro connected", self._gyro_inputs.connected)

    def run_velocity(self, speeds: ChassisSpeeds) -> None:
        """
        Runs the drive at the desired robot-relative velocity
        """
        # Calculate module setpoints
        discrete_speeds = ChassisSpeeds.discretize(speeds, constants.DEFAULT_ROBOT_PERIOD)
        setpoint_states = self._kinematics.toSwerveModuleStates(discrete_speeds)
        setpoint_states = self._kinematics.desaturateWheelSpeeds(setpoint_states, constants.MAX_LINEAR_SPEED)

        # Send setpoints to modules
        optimized_states = [module.run_setpoint(state) for module, state in zip(self._modules, setpoint_states)]

        # Log setpoint states
        Logger.recordOutput("SwerveStates/Setpoints", list(setpoint_states))
        Logger.recordOutput("SwerveStates/SetpointsOptimized", optimized_states)

    def stop(self) -> None:
        self.run_velocity(ChassisSpeeds())

    def stop_with_x(self) -> None:
        """
        Stops the drive and turns the modules to an X arrangement to resist movement.
        The modules will return to their normal orientations the next time a nonzero
        velocity is requested.
        """
        for module, translation in zip(self._modules, module_translations()):
            module.run_setpoint(SwerveModuleState(0.0, translation.angle()))

    def run_characterization_volts(self, voltage: volts) -> None:
        for module in self._modules:
            module.run_characterization(voltage)

    @property
    def characterization_velocity(self) -> radians_per_second:
        """
        Average drive velocity in radians/sec
        """
        return sum(module.characterization_velocity for module in self._modules) / len(self._modules)

    @autolog_output(key="SwerveStates/Measured")
    def get_module_states(self) -> List[SwerveModuleState]:
        return [module.state for module in self._modules]

    def get_module_positions(self) -> SwerveModulePositions:
        return tuple(module.position for module in self._modules)

    @autolog_output(key="Odometry/Robot")
    def get_pose(self) -> Pose2d:
        return self._pose_estimator.getEstimatedPosition()

    @property
    def pose(self) -> Pose2d:
        return self.get_pose()

    @pose.setter
    def pose(self, pose: Pose2d) -> None:
        self._pose_estimator.resetPosition(self._raw_gyro_rotation, self.get_module_positions(), pose)

    def reset_pose(self, pose: Pose2d) -> None:
        self.pose = pose

    @property
    def rotation(self) -> Rotation2d:
        return self.pose.rotation()

    def get_robot_relative_speeds(self) -> ChassisSpeeds:
        return self._kinematics.toChassisSpeeds(tuple(self.get_module_states()))

    def add_vision_measurement(self, vision_pose: Pose2d, timestamp: seconds) -> None:
        """
        Adds a vision measurement to the pose estimator.

        :param vision_pose: The pose of the robot as measured by the vision camera
        :param timestamp:   The timestamp of the vision measurement in seconds
        """
        self._pose_estimator.addVisionMeasurement(vision_pose, timestamp)

    def set_brake_mode(self, enabled: bool) -> None:
        for module in self._modules:
            module.set_brake_mode(enabled)

    @property
    def max_linear_speed(self) -> meters_per_second:
        return constants.MAX_LINEAR_SPEED

    @property
    def max_angular_speed(self) -> radians_per_second:
        return constants.MAX_ANGULAR_SPEED

    @property
    def current_draw(self) -> float:
        return sum(module.inputs.drive_current + module.inputs.turn_current for module in self._modules)
