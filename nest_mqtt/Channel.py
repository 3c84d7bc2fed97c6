#===========================================================================
#
# Smoke detector channel enumeration
#
#===========================================================================
import enum


class Channel(enum.Enum):
    """Smoke detector channel identifiers.

    This is the fixed set of data points a smoke detector exposes to the
    host.  The values are the identifiers used in topics and config files.
    """
    CO_ALARM_STATE = "co_alarm_state"
    LAST_CONNECTION = "last_connection"
    LAST_MANUAL_TEST_TIME = "last_manual_test_time"
    LOW_BATTERY = "low_battery"
    MANUAL_TEST_ACTIVE = "manual_test_active"
    SMOKE_ALARM_STATE = "smoke_alarm_state"
    UI_COLOR_STATE = "ui_color_state"

    def __str__(self):
        return self.value

    #-----------------------------------------------------------------------
    @staticmethod
    def find(text):
        """Find a channel from its identifier.

        Args:
          text (str):  The channel identifier.  Case and surrounding white
               space are ignored.

        Returns:
          Channel:  Returns the matching channel or None if the input is
          not a known channel.
        """
        if isinstance(text, Channel):
            return text

        try:
            return Channel(str(text).strip().lower())
        except ValueError:
            return None

    #-----------------------------------------------------------------------
