#===========================================================================
#
# Nest device data
#
#===========================================================================
# flake8: noqa

__doc__ = """Nest device data classes.

Each Nest device type has an immutable snapshot class that holds one reading
of the device state as reported by the Nest API.
"""

#===========================================================================

from .SmokeDetector import (AlarmState, BatteryHealth, SmokeDetector,
                            UiColorState)
