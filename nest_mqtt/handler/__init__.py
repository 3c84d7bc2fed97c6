#===========================================================================
#
# Nest device handlers
#
#===========================================================================
# flake8: noqa

__doc__ = """Nest device handlers.

A handler converts the snapshots of one Nest device type to channel states
and pushes them to a SyncHost.  Handlers have no MQTT dependencies - the
host interface is the only thing they talk to.
"""

#===========================================================================

from .Base import Base
from .SmokeDetector import SmokeDetector
from .SyncHost import SyncHost
