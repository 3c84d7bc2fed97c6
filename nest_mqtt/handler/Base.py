#===========================================================================
#
# Generic Nest device handler
#
#===========================================================================
from .. import log
from ..state import ThingStatus

LOG = log.get_logger()


class Base:
    """Base class for Nest device handlers.

    A handler sits between the upstream sync layer that delivers device
    snapshots and a SyncHost that displays channel states.  It caches the
    most recent snapshot so refresh commands can be answered without
    talking to the device.

    Derived classes are per device type and must implement:

    - channels:  Class attribute with the iterable of channels the device
      type has.
    - get_channel_state(channel, snapshot)
    - handle_command(channel, command)
    - update(old, new)
    """
    channels = []

    def __init__(self, host, snapshot_cls):
        """Constructor

        Args:
          host (SyncHost):  The host to push states to.
          snapshot_cls:  The snapshot class this handler accepts.
        """
        self.host = host
        self.snapshot_cls = snapshot_cls

        # Most recent snapshot or None if nothing has arrived yet.
        self._last_update = None

    #-----------------------------------------------------------------------
    @property
    def label(self):
        """Return a label for the device to use in log messages."""
        if self._last_update is not None and self._last_update.device_id:
            return self._last_update.device_id

        return getattr(self.host, "device_id", None) or "<unknown>"

    #-----------------------------------------------------------------------
    def initialize(self):
        """Mark the device status as known to be unknown.

        This is called once by the host when the handler is created.
        """
        self.host.update_status(ThingStatus.UNKNOWN)

    #-----------------------------------------------------------------------
    def get_last_update(self):
        """Return the most recent snapshot or None if there isn't one."""
        return self._last_update

    #-----------------------------------------------------------------------
    def on_new_data(self, snapshot):
        """Process a new snapshot from the upstream sync layer.

        The snapshot becomes the cached last update and update() is called
        with the previous and new snapshots.

        Args:
          snapshot:  The new snapshot.  It must be of the handler's snapshot
                     class or it is ignored.
        """
        if not isinstance(snapshot, self.snapshot_cls):
            LOG.error("%s handler for %s ignoring data of type %s",
                      self.snapshot_cls.__name__, self.label,
                      type(snapshot).__name__)
            return

        old = self._last_update
        self._last_update = snapshot
        self.update(old, snapshot)

    #-----------------------------------------------------------------------
    def update_linked_channels(self, old, new):
        """Push the states of linked channels that changed.

        Every channel is pushed when there is no previous snapshot.

        Args:
          old:  The previous snapshot or None.
          new:  The new snapshot.
        """
        for channel in self.channels:
            if not self.host.is_linked(channel):
                continue

            state = self.get_channel_state(channel, new)
            if old is None or state != self.get_channel_state(channel, old):
                LOG.debug("%s channel %s changed to %s", self.label, channel,
                          state)
                self.update_state(channel, state)

    #-----------------------------------------------------------------------
    def update_state(self, channel, state):
        """Push a channel state to the host."""
        self.host.update_state(channel, state)

    #-----------------------------------------------------------------------
    def update_status(self, status):
        """Push a status to the host."""
        self.host.update_status(status)

    #-----------------------------------------------------------------------
    def update_property(self, name, value):
        """Push a device property to the host."""
        self.host.update_property(name, value)

    #-----------------------------------------------------------------------
    def get_channel_state(self, channel, snapshot):
        """Resolve the state of a channel for a snapshot.

        Args:
          channel (Channel):  The channel to resolve.
          snapshot:  The snapshot to read.

        Returns:
          Returns the channel state.  Unknown values are UNDEF.
        """
        raise NotImplementedError("%s.get_channel_state() is not implemented"
                                  % self.__class__.__name__)

    #-----------------------------------------------------------------------
    def handle_command(self, channel, command):
        """Handle a command sent to a channel.

        Args:
          channel (Channel):  The channel the command is for.
          command:  The command (state.REFRESH or a new value).
        """
        raise NotImplementedError("%s.handle_command() is not implemented"
                                  % self.__class__.__name__)

    #-----------------------------------------------------------------------
    def update(self, old, new):
        """Reconcile the host with a new snapshot.

        Args:
          old:  The previous snapshot or None.
          new:  The new snapshot.
        """
        raise NotImplementedError("%s.update() is not implemented"
                                  % self.__class__.__name__)

    #-----------------------------------------------------------------------
