#===========================================================================
#
# Device sync host interface
#
#===========================================================================
import abc


class SyncHost(abc.ABC):
    """Interface to the host that displays device state.

    A device handler pushes channel states, connectivity status, and device
    properties through this interface.  The host owns the record of the
    current status so the handler can avoid sending duplicate status
    changes.

    Implementations must set the status attribute.  It should start as
    ThingStatus.UNINITIALIZED.
    """
    status = None

    #-----------------------------------------------------------------------
    @abc.abstractmethod
    def update_state(self, channel, state):
        """Push a new channel state.

        Args:
          channel (Channel):  The channel that changed.
          state:  The new state.  Never None - unknown values are UNDEF.
        """

    #-----------------------------------------------------------------------
    @abc.abstractmethod
    def update_status(self, status):
        """Push and record a new connectivity status.

        Args:
          status (ThingStatus):  The new status.
        """

    #-----------------------------------------------------------------------
    @abc.abstractmethod
    def update_property(self, name, value):
        """Set a device property.

        Args:
          name (str):  The property name.
          value (str):  The property value.  None removes the property.
        """

    #-----------------------------------------------------------------------
    def is_linked(self, channel):
        """Return True if the host wants updates for a channel.

        Args:
          channel (Channel):  The channel to check.

        Returns:
          bool:  Defaults to True for every channel.
        """
        return True

    #-----------------------------------------------------------------------
