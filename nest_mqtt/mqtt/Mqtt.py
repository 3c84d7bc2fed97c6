#===========================================================================
#
# MQTT main interface
#
#===========================================================================
from .. import log

LOG = log.get_logger()


class Mqtt:
    """Main MQTT interface class.

    This class owns the MQTT device objects and the network link to the
    broker.  Low level MQTT is handled by the network.Mqtt class which calls
    handle_connected() when the broker connection changes.  Once connected,
    each MQTT device subscribes to its input topics.

    The exact format of the output topics and payloads is controlled by the
    configuration file and the individual devices.
    """
    def __init__(self, mqtt_link):
        """Constructor

        Args:
          mqtt_link (network.Mqtt):  The network MQTT link to use for
                    communicating with the MQTT broker.
        """
        self.link = mqtt_link
        self.link.connected_callback = self.handle_connected

        # Map of Nest device ID to MQTT device.
        self.devices = {}

        # MQTT message parameters.  These get loaded via the config.
        self.qos = 1
        self.retain = True

        # Loaded config object.
        self._config = None

    #-----------------------------------------------------------------------
    def load_config(self, data):
        """Load a configuration dictionary.

        This should be the mqtt key in the configuration data.  Key inputs
        are:

        - broker:    (str) The broker host to connect to.
        - port:      (int) Thr broker port to connect to.
        - username:  (str) Optional user name to log in with.
        - password:  (str) Optional password to log in with.
        - keep_alive: (int) Keep alive interval in seconds.

        - qos:         (int) QOS level to use for sent messages (Default 1).
        - retain:      (bool) Retain sent messages (Default True)
        - smoke_detector: (dict) Smoke detector topic and payload templates.

        Args:
          data (dict):  Configuration data to load.
        """
        # Pass connection data to the MQTT link.  This will configure the
        # connection to the broker.
        self.link.load_config(data)

        self.qos = data.get('qos', self.qos)
        self.retain = data.get('retain', self.retain)

        # Save the config for later passing to devices when they are created.
        self._config = data

        for device in self.devices.values():
            device.load_config(data, self.qos)

    #-----------------------------------------------------------------------
    def add(self, device):
        """Add an MQTT device.

        The device is configured with the current config and subscribed if
        the broker is already connected.

        Args:
          device:  The MQTT device object (e.g. mqtt.SmokeDetector).  It
                   must have a device_id attribute.

        Raises:
          ValueError if a device with the same ID already exists.
        """
        if device.device_id in self.devices:
            raise ValueError("Duplicate Nest device ID '%s'" %
                             device.device_id)

        if self._config:
            device.load_config(self._config, self.qos)

        self.devices[device.device_id] = device
        device.initialize()

        if self.link.connected:
            device.subscribe(self.link, self.qos)

        LOG.info("MQTT added Nest device %s", device.label)

    #-----------------------------------------------------------------------
    def find(self, device_id):
        """Find an MQTT device by its Nest device ID.

        Args:
          device_id (str):  The Nest device ID.

        Returns:
          Returns the MQTT device or None if it's not found.
        """
        return self.devices.get(device_id, None)

    #-----------------------------------------------------------------------
    def publish(self, topic, payload, qos=None, retain=None):
        """Publish a message out.

        Args:
          topic (str):  The MQTT topic to publish with.
          payload (str):  The MQTT payload to send.
          qos (int):  None to use the class QOS. Otherwise the QOS level
              to use.
          retain (bool):  None to use the class retain flag.  Otherwise
                 the retain flag to use.
        """
        qos = self.qos if qos is None else qos
        retain = self.retain if retain is None else retain

        # Pass the message to the network link.
        self.link.publish(topic, payload, qos, retain)

    #-----------------------------------------------------------------------
    def close(self):
        """Close the MQTT link.
        """
        self._shutdown()
        self.link.close()

    #-----------------------------------------------------------------------
    def handle_connected(self, link, connected):
        """MQTT (dis)connection callback.

        This is called when the low level MQTT client connects to the broker.
        After the connection, we'll subscribe to our topics.

        Args:
          link (network.Mqtt):  The MQTT network link.
          connected (bool):  True if connected, False if disconnected.
        """
        if connected:
            self._startup()

    #-----------------------------------------------------------------------
    def _startup(self):
        """Tell all the MQTT devices to subscribe to their input topics.
        """
        for device in self.devices.values():
            device.subscribe(self.link, self.qos)

    #-----------------------------------------------------------------------
    def _shutdown(self):
        """Unsubscribe from all the device topics.
        """
        if not self.link.connected:
            return

        for device in self.devices.values():
            device.unsubscribe(self.link)

    #-----------------------------------------------------------------------
