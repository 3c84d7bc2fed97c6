#===========================================================================
#
# MQTT input/output classes
#
#===========================================================================
# flake8: noqa

__doc__ = """MQTT input and output classes.

This module contains the classes that handle input and output MQTT messages.
Each Nest device type has an MQTT class which acts as the SyncHost for the
device handler.  It publishes the handler output as MQTT messages and turns
input MQTT messages into snapshots and refresh commands.
"""

#===========================================================================

from .Mqtt import Mqtt
from .MsgTemplate import MsgTemplate
from .SmokeDetector import SmokeDetector
