#===========================================================================
#
# Network link management
#
#===========================================================================
# flake8: noqa

__doc__ = """Network package

This package handles the connection to the MQTT broker.  The paho-mqtt
network loop supports delayed connections (so the broker doesn't have to be
available right away) and automatic reconnections if the link gets closed.
"""

#===========================================================================

from .Mqtt import Mqtt
