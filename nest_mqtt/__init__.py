#===========================================================================
#
# Nest-MQTT bridge Python package
#
#===========================================================================
# flake8: noqa

__doc__ = """Nest <-> MQTT bridge package

Maps Nest smoke detector data onto per-channel MQTT state topics.
"""

from .const import __version__

#===========================================================================

from . import cmd_line
from . import config
from . import handler
from . import log
from . import mqtt
from . import nest
from . import network
from . import state

from .Channel import Channel
from .errors import Error, NestDataError
