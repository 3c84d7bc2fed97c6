#===========================================================================
#
# Nest smoke + CO alarm device data
#
#===========================================================================
import collections
import datetime
import enum
from ..errors import NestDataError


#===========================================================================
class AlarmState(enum.Enum):
    """Smoke and CO alarm states reported by the Nest API."""
    OK = "ok"
    WARNING = "warning"
    EMERGENCY = "emergency"


class BatteryHealth(enum.Enum):
    """Battery health reported by the Nest API."""
    OK = "ok"
    REPLACE = "replace"


class UiColorState(enum.Enum):
    """Color of the device ring light."""
    GRAY = "gray"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


#===========================================================================
# Field names in the order they're stored.  These match the Nest API keys.
FIELDS = [
    "device_id",
    "name",
    "name_long",
    "structure_id",
    "where_id",
    "co_alarm_state",
    "smoke_alarm_state",
    "battery_health",
    "is_manual_test_active",
    "last_manual_test_time",
    "last_connection",
    "ui_color_state",
    "software_version",
    "is_online",
    ]

_Data = collections.namedtuple("_Data", FIELDS, defaults=(None,) * len(FIELDS))


class SmokeDetector(_Data):
    """Nest smoke detector state snapshot.

    This is an immutable point in time reading of a Nest Protect device.
    Every field is optional and None means the value is not known.  Two
    snapshots with the same field values compare equal.

    Fields:
      device_id (str):  Nest device ID.
      name (str):  Short display name.
      name_long (str):  Long display name.
      structure_id (str):  ID of the structure (home) the device is in.
      where_id (str):  ID of the location in the structure.
      co_alarm_state (AlarmState):  Carbon monoxide alarm state.
      smoke_alarm_state (AlarmState):  Smoke alarm state.
      battery_health (BatteryHealth):  Battery health.
      is_manual_test_active (bool):  True if a manual test is running.
      last_manual_test_time (datetime):  Time of the last manual test.
      last_connection (datetime):  Time of the last cloud connection.
      ui_color_state (UiColorState):  Ring light color.
      software_version (str):  Device software version.
      is_online (bool):  True if online, False if offline, None if unknown.
    """
    __slots__ = ()

    #-----------------------------------------------------------------------
    @classmethod
    def from_json(cls, data):
        """Create a snapshot from a decoded Nest API object.

        Unknown keys are ignored.  Missing and null keys are stored as None.

        Args:
          data (dict):  The smoke_co_alarms device object from the Nest API.

        Raises:
          NestDataError if a value can't be converted.

        Returns:
          SmokeDetector:  Returns the new snapshot.
        """
        if not isinstance(data, dict):
            raise NestDataError("Smoke detector data must be an object, "
                                "got %s" % type(data).__name__)

        kwargs = {}
        for field in FIELDS:
            value = data.get(field, None)
            if value is None:
                continue

            convert = _converters.get(field, _to_str)
            kwargs[field] = convert(field, value)

        return cls(**kwargs)

    #-----------------------------------------------------------------------
    def __str__(self):
        return "SmokeDetector %s (%s)" % (self.device_id, self.name)

    #-----------------------------------------------------------------------


#===========================================================================
def _to_str(field, value):
    return str(value)


def _to_bool(field, value):
    if not isinstance(value, bool):
        raise NestDataError("Invalid boolean for %s: %r" % (field, value))

    return value


def _to_datetime(field, value):
    """Convert a Nest ISO-8601 time stamp to a time zone aware datetime.

    Nest uses a 'Z' suffix (2017-02-02T20:53:05.338Z) which older versions of
    fromisoformat() don't accept, so replace it with the explicit offset.
    """
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        stamp = datetime.datetime.fromisoformat(text)
    except ValueError:
        raise NestDataError("Invalid time stamp for %s: %r" % (field, value))

    # Nest times are UTC.
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=datetime.timezone.utc)

    return stamp


def _enum_converter(enum_cls):
    def convert(field, value):
        try:
            return enum_cls(str(value).lower())
        except ValueError:
            raise NestDataError("Invalid %s value for %s: %r.  Valid values "
                                "are %s" % (enum_cls.__name__, field, value,
                                            [i.value for i in enum_cls]))
    return convert


_converters = {
    "co_alarm_state" : _enum_converter(AlarmState),
    "smoke_alarm_state" : _enum_converter(AlarmState),
    "battery_health" : _enum_converter(BatteryHealth),
    "ui_color_state" : _enum_converter(UiColorState),
    "is_manual_test_active" : _to_bool,
    "is_online" : _to_bool,
    "last_manual_test_time" : _to_datetime,
    "last_connection" : _to_datetime,
    }

#===========================================================================
