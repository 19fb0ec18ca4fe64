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
from typing import Dict, List

from phoenix6 import BaseStatusSignal, StatusCode

logger = logging.getLogger(__name__)


class Phoenix6Signals:
    """
    Batch refresh of CTRE status signals

    Each device adapter registers the signals it reads every loop. The robot
    refreshes all of them once at the top of robotPeriodic, one call per CAN bus,
    so that the module and shooter 'update_inputs' calls only read cached values.
    """
    _signals: Dict[str, List[BaseStatusSignal]] = {}

    @classmethod
    def register_signals(cls, *signals: BaseStatusSignal, canbus: str = "") -> None:
        bus_signals = cls._signals.setdefault(canbus, [])

        for signal in signals:
            if any(signal is existing for existing in bus_signals):
                logger.warning(f"Signal {signal.name} already registered on bus '{canbus}'")
                continue

            bus_signals.append(signal)

    @classmethod
    def refresh(cls) -> StatusCode:
        """
        Refresh every registered signal. Returns the first failing status code seen,
        or OK if every bus refreshed cleanly.
        """
        result = StatusCode.OK

        for canbus, signals in cls._signals.items():
            if not signals:
                continue

            status = BaseStatusSignal.refresh_all(*signals)
            if not status.is_ok() and result.is_ok():
                logger.debug(f"Status refresh on bus '{canbus}' returned {status}")
                result = status

        return result
