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
from pyfrc.test_support.pytest_plugin import PyFrcPlugin

PYFRC_FIXTURES = {"control", "robot"}


def pytest_collection_modifyitems(config, items):
    """
    The robot fixtures come from the plugin 'robotpy test' installs. Under a bare
    pytest run the tests that need them are skipped instead of erroring.
    """
    if any(isinstance(plugin, PyFrcPlugin) for plugin in config.pluginmanager.get_plugins()):
        return

    skip = pytest.mark.skip(reason="needs the pyfrc plugin, run with 'robotpy test'")

    for item in items:
        if PYFRC_FIXTURES & set(getattr(item, "fixturenames", ())):
            item.add_marker(skip)
