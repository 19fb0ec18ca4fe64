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
#
# Commonly used constants not found in existing wpilib modules

from math import pi, tau

# The period is available from robot.getPeriod() and the following provides
# a default value in case it returns 0 or None
DEFAULT_ROBOT_PERIOD = 1.0 / 50

######################################################################
# Math
RADIANS_PER_REVOLUTION = tau
DEGREES_PER_REVOLUTION = 360.0
RADIANS_PER_DEGREE = RADIANS_PER_REVOLUTION / DEGREES_PER_REVOLUTION
HALF_TURN = pi

SECONDS_PER_MINUTE = 60.0

######################################################################
# Electrical
NOMINAL_BATTERY_VOLTAGE = 12.0
