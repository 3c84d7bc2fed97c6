#===========================================================================
#
# Smoke detector handler
#
#===========================================================================
from .. import log
from .. import state as St
from ..Channel import Channel
from ..nest import BatteryHealth
from ..nest import SmokeDetector as SmokeDetectorData
from .Base import Base

LOG = log.get_logger()

# Host property the device software version is stored in.
PROPERTY_FIRMWARE_VERSION = "firmware_version"


class SmokeDetector(Base):
    """Nest smoke detector handler.

    This maps a nest.SmokeDetector snapshot onto the smoke detector channels.
    None of the channels are writable so the only command it responds to
    is REFRESH, which re-publishes the cached state of a channel.
    """
    channels = list(Channel)

    def __init__(self, host):
        """Constructor

        Args:
          host (SyncHost):  The host to push states to.
        """
        super().__init__(host, SmokeDetectorData)

    #-----------------------------------------------------------------------
    def get_channel_state(self, channel, snapshot):
        """Resolve the state of a channel for a snapshot.

        Unknown channels are logged and return UNDEF.

        Args:
          channel (Channel):  The channel to resolve.
          snapshot (nest.SmokeDetector):  The snapshot to read.

        Returns:
          Returns the channel state.  Absent values are UNDEF.
        """
        if channel == Channel.CO_ALARM_STATE:
            return St.as_string_or_undef(snapshot.co_alarm_state)

        elif channel == Channel.LAST_CONNECTION:
            return St.as_datetime_or_undef(snapshot.last_connection)

        elif channel == Channel.LAST_MANUAL_TEST_TIME:
            return St.as_datetime_or_undef(snapshot.last_manual_test_time)

        elif channel == Channel.LOW_BATTERY:
            # Unknown battery health is not the same as a good battery.
            health = snapshot.battery_health
            if health is None:
                return St.UNDEF
            return St.OnOff.from_bool(health == BatteryHealth.REPLACE)

        elif channel == Channel.MANUAL_TEST_ACTIVE:
            return St.as_on_off_or_undef(snapshot.is_manual_test_active)

        elif channel == Channel.SMOKE_ALARM_STATE:
            return St.as_string_or_undef(snapshot.smoke_alarm_state)

        elif channel == Channel.UI_COLOR_STATE:
            return St.as_string_or_undef(snapshot.ui_color_state)

        LOG.error("Unsupported smoke detector channel '%s'", channel)
        return St.UNDEF

    #-----------------------------------------------------------------------
    def handle_command(self, channel, command):
        """Handle a command sent to a channel.

        Only REFRESH of a linked channel does anything.  If there is a
        cached snapshot, the channel state is resolved from it and pushed
        to the host.

        Args:
          channel (Channel):  The channel the command is for.
          command:  The command to process.
        """
        if command != St.REFRESH:
            LOG.debug("Smoke detector %s ignoring command %s on %s",
                      self.label, command, channel)
            return

        if not self.host.is_linked(channel):
            LOG.debug("Smoke detector %s refresh %s - channel not linked",
                      self.label, channel)
            return

        last = self.get_last_update()
        if last is None:
            LOG.debug("Smoke detector %s refresh %s - no data yet",
                      self.label, channel)
            return

        self.update_state(channel, self.get_channel_state(channel, last))

    #-----------------------------------------------------------------------
    def update(self, old, new):
        """Reconcile the host with a new snapshot.

        Args:
          old (nest.SmokeDetector):  The previous snapshot or None.
          new (nest.SmokeDetector):  The new snapshot.
        """
        LOG.debug("Updating smoke detector %s", self.label)

        self.update_linked_channels(old, new)
        self.update_property(PROPERTY_FIRMWARE_VERSION, new.software_version)

        status = St.ThingStatus.from_online(new.is_online)
        if status != self.host.status:
            LOG.info("Smoke detector %s status %s", self.label, status)
            self.update_status(status)

    #-----------------------------------------------------------------------
