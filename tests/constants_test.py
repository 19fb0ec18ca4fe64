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

from collections import defaultdict

import constants
from subsystems.drive.module_io import MODULE_CONFIGS


def test_no_duplicate_can_bus_ids():
    """
    Run through the swerve calibration and the mechanism IDs and make sure no two
    devices on the same CAN bus share an ID
    """
    bus_ids = defaultdict(list)

    for config in MODULE_CONFIGS:
        bus_ids[config.drive_canbus].append(int(config.drive_motor_id))
        bus_ids[config.turn_canbus].append(int(config.turn_motor_id))
        bus_ids[config.encoder_canbus].append(int(config.encoder_id))

    bus_ids[constants.SWERVE_CANBUS].append(int(constants.DeviceID.GYRO_DEVICE_ID))

    for device in (constants.DeviceID.SHOOTER_TOP_ID, constants.DeviceID.SHOOTER_BOTTOM_ID,
                   constants.DeviceID.SHOOTER_PIVOT_ID, constants.DeviceID.CLIMBER_ID,
                   constants.DeviceID.INTAKE_ID, constants.DeviceID.HANDLER_ID, constants.DeviceID.FEEDER_ID):
        bus_ids[constants.RIO_CANBUS].append(int(device))

    for bus, ids in bus_ids.items():
        assert len(ids) == len(set(ids)), f"Duplicate IDs on bus '{bus}': {sorted(ids)}"


def test_camera_infos():
    labels = [info["Label"] for info in constants.CAMERA_INFOS]
    names = [info["Name"] for info in constants.CAMERA_INFOS]

    assert len(constants.CAMERA_INFOS) == 4
    assert len(set(labels)) == len(labels)
    assert len(set(names)) == len(names)


def test_shot_presets_within_pivot_range():
    for preset in (constants.SPEAKER_SHOT, constants.AMP_SHOT, constants.AUTO_LINE_SHOT,
                   constants.STAGE_SHOT, constants.WING_SHOT, constants.PASS_SHOT):
        assert constants.SHOOTER_MIN_ANGLE <= preset[2] <= constants.SHOOTER_MAX_ANGLE


def test_auto_aim_table_is_sorted():
    distances = list(constants.AUTO_AIM_DISTANCES)

    assert distances == sorted(distances)
    assert len(constants.AUTO_AIM_ANGLES) == len(distances)
    assert len(constants.AUTO_AIM_RPMS) == len(distances)
