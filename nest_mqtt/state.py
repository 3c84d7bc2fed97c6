#===========================================================================
#
# Channel state, thing status, and command types.
#
#===========================================================================
import datetime
import enum


#===========================================================================
class UnDef(enum.Enum):
    """Undefined state type.

    Channels with no known value report UNDEF instead of None so the host
    always has something to display.
    """
    UNDEF = "UNDEF"

    def __str__(self):
        return self.value


UNDEF = UnDef.UNDEF


#===========================================================================
class OnOff(enum.Enum):
    """On/off state type used by the switch-like channels."""
    ON = "ON"
    OFF = "OFF"

    def __str__(self):
        return self.value

    @staticmethod
    def from_bool(is_on):
        """Convert a boolean to an OnOff value.

        Args:
          is_on (bool):  True for on, False for off.

        Returns:
          OnOff:  Returns ON or OFF.
        """
        return OnOff.ON if is_on else OnOff.OFF


#===========================================================================
class ThingStatus(enum.Enum):
    """Connectivity status of a device as seen by the host."""
    UNINITIALIZED = "uninitialized"
    UNKNOWN = "unknown"
    ONLINE = "online"
    OFFLINE = "offline"

    def __str__(self):
        return self.value

    @staticmethod
    def from_online(is_online):
        """Convert a tri-state online flag to a status.

        Args:
          is_online (bool):  True, False, or None if not known.

        Returns:
          ThingStatus:  UNKNOWN for None, ONLINE for True, OFFLINE for False.
        """
        if is_online is None:
            return ThingStatus.UNKNOWN

        return ThingStatus.ONLINE if is_online else ThingStatus.OFFLINE


#===========================================================================
class RefreshType(enum.Enum):
    """Command asking for the current state to be re-published."""
    REFRESH = "REFRESH"

    def __str__(self):
        return self.value


REFRESH = RefreshType.REFRESH


#===========================================================================
def as_string_or_undef(value):
    """Convert an optional string-like value to a string state.

    Enumerations are converted using their value.

    Args:
      value:  The value to convert or None.

    Returns:
      Returns the string state or UNDEF if the input is None.
    """
    if value is None:
        return UNDEF
    elif isinstance(value, enum.Enum):
        return str(value.value)

    return str(value)


#===========================================================================
def as_datetime_or_undef(value):
    """Convert an optional time stamp to a date-time state.

    Args:
      value (datetime.datetime):  The time stamp or None.

    Returns:
      Returns the date time or UNDEF if the input is None.
    """
    if value is None:
        return UNDEF

    assert isinstance(value, datetime.datetime)
    return value


#===========================================================================
def as_on_off_or_undef(value):
    """Convert an optional boolean to an on/off state.

    Args:
      value (bool):  The flag or None.

    Returns:
      Returns OnOff.ON, OnOff.OFF, or UNDEF if the input is None.
    """
    if value is None:
        return UNDEF

    return OnOff.from_bool(value)


#===========================================================================
def to_str(state):
    """Render a state as text for publishing.

    Args:
      state:  The state to render.

    Returns:
      str:  Returns the text form of the state.
    """
    if isinstance(state, datetime.datetime):
        return state.isoformat()
    elif isinstance(state, enum.Enum):
        return str(state.value)

    return str(state)

#===========================================================================
