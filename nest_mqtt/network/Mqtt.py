#===========================================================================
#
# Network link to an MQTT client class
#
#===========================================================================
import paho.mqtt.client as paho
from .. import log
from ..log import CLIENT_LEVEL

LOG = log.get_logger(__name__)


class Mqtt:
    """MQTT client link.

    This class wraps the paho-mqtt client.  It runs the paho network loop
    which handles delayed connecting (if the broker is down) and automatic
    reconnects.

    When the broker connection is made, the connected callback is called
    so the MQTT manager can subscribe to its topics.  Incoming messages are
    passed to the callback supplied to subscribe() for the topic.

    Input fields can be set via the constructor or by loading a configuration
    file (see load_config for details).
    """
    def __init__(self, host="127.0.0.1", port=1883, id=None,
                 reconnect_dt=10):
        """Construct an MQTT client.

        This will not actually connect to the broker until connect() or
        run() is called.

        Args:
          host (str):  The broker host to connect to.
          port (int):  The broker port to connect to.
          id (str):  Optional connection ID to send.  If not set,
             'nest-mqtt' is used.
          reconnect_dt (int):  Maximum time in seconds between reconnection
                       attempts if the broker is unavailable.
        """
        self.host = host
        self.port = port
        self.connected = False
        self.id = id if id is not None else "nest-mqtt"
        self.keep_alive = 30

        # Called as func(link, connected) when the broker connection
        # changes.
        self.connected_callback = None

        self._reconnect_dt = reconnect_dt
        self._running = False

        # Create the MQTT client and set the callbacks to our methods.
        self.client = paho.Client(paho.CallbackAPIVersion.VERSION2,
                                  client_id=self.id, clean_session=False)
        self.client.on_connect = self._on_connect
        self.client.on_disconnect = self._on_disconnect
        self.client.on_message = self._on_message
        self.client.on_log = self._on_log

    #-----------------------------------------------------------------------
    def load_config(self, config):
        """Load a configuration dictionary.

        Configuration inputs will override any set in the constructor.

        The input configuration dictionary can contain:
        - broker (str):  The broker host to connect to.
        - port (int):  The broker port to connect to.
        - username (str):  Optional user name to log in with.
        - password (str):  Optional password to log in with.
        - keep_alive (int):  Keep alive interval in seconds.

        Args:
          config (dict):  Configuration data to load.
        """
        assert not self.connected

        self.host = config.get('broker', self.host)
        self.port = config.get('port', self.port)
        self.keep_alive = config.get("keep_alive", self.keep_alive)

        username = config.get('username', None)
        if username is not None:
            password = config.get('password', None)
            self.client.username_pw_set(username, password)

    #-----------------------------------------------------------------------
    def publish(self, topic, payload, qos=0, retain=False):
        """Publish an MQTT message.

        Arg:
          topic (str):  The topic to publish with.
          payload (str/bytes):  The payload to send for the message.
          qos (int): The MQTT QOS level to use (0, 1, or 2).
          retain (bool):  True to mark the message as retained.
        """
        self.client.publish(topic, payload, qos, retain)

        LOG.debug("MQTT publish %s %s qos=%s ret=%s", topic, payload, qos,
                  retain)

    #-----------------------------------------------------------------------
    def subscribe(self, topic, qos=0, callback=None):
        """Subscribe the client to a topic.

        If a callback is supplied, then that callback will be used for all
        messages that match the input topic.  The callback signature is:
          func(client, user_data, message)

        Args:
          topic (str):  The topic to subscribe to.
          qos (int): The quality of service level to use (0,1,2).
          callback:  Optional message callback.
        """
        self.client.subscribe(topic, qos)

        if callback:
            self.client.message_callback_add(topic, callback)

        LOG.debug("MQTT subscribe %s qos=%s", topic, qos)

    #-----------------------------------------------------------------------
    def unsubscribe(self, topic):
        """Unsubscribe the client from a topic.

        Args:
          topic (str):  The topic to unsubscribe from.
        """
        self.client.unsubscribe(topic)
        self.client.message_callback_remove(topic)

        LOG.debug("MQTT unsubscribe %s", topic)

    #-----------------------------------------------------------------------
    def connect(self):
        """Connect to the MQTT broker.

        Returns:
          bool:  Returns True if the connection was successful or False it
          it failed.
        """
        try:
            self.client.connect(self.host, self.port,
                                keepalive=self.keep_alive)
        except OSError:
            LOG.exception("MQTT connection error to %s %s", self.host,
                          self.port)
            return False

        LOG.info("MQTT device opened %s %s with keepalive=%s", self.host,
                 self.port, self.keep_alive)
        return True

    #-----------------------------------------------------------------------
    def run(self):
        """Run the network loop.

        This blocks until close() is called.  The connection is retried
        until the broker is available and re-made if it's dropped.
        """
        LOG.info("MQTT starting network loop for %s %s", self.host,
                 self.port)

        self.client.reconnect_delay_set(1, self._reconnect_dt)
        self.client.connect_async(self.host, self.port,
                                  keepalive=self.keep_alive)
        self._running = True
        try:
            self.client.loop_forever(retry_first_connection=True)
        finally:
            self._running = False

    #-----------------------------------------------------------------------
    def close(self):
        """Close the link and stop the network loop.

        If the network loop isn't running (it was interrupted), the
        queued packets and the disconnect are written out directly.
        """
        LOG.info("MQTT device closing %s %s", self.host, self.port)

        self.client.disconnect()
        if not self._running:
            self.client.loop_write()

    #-----------------------------------------------------------------------
    def _on_connect(self, client, data, flags, reason_code, properties=None):
        """MQTT connection callback.

        This is called by the MQTT client once the connection has occurred.

        Args:
          client (paho.Client):  The paho mqtt client (self.client).
          data:  Optional user data (unused).
          flags:  Connection flags.
          reason_code:  The paho ReasonCode of the connection.
          properties:  MQTT v5 properties (unused).
        """
        if reason_code.is_failure:
            LOG.error("MQTT connection refused %s %s %s", self.host, self.port,
                      reason_code)
            return

        LOG.info("MQTT connected %s %s", self.host, self.port)
        self.connected = True
        if self.connected_callback:
            self.connected_callback(self, True)

    #-----------------------------------------------------------------------
    def _on_disconnect(self, client, data, flags, reason_code,
                       properties=None):
        """MQTT disconnection callback.

        This is called by the MQTT client when the connection is dropped.

        Args:
          client (paho.Client):  The paho mqtt client (self.client).
          data:  Optional user data (unused).
          flags:  Disconnect flags.
          reason_code:  The paho ReasonCode of the disconnection.
          properties:  MQTT v5 properties (unused).
        """
        LOG.info("MQTT disconnection %s %s %s", self.host, self.port,
                 reason_code)

        self.connected = False
        if self.connected_callback:
            self.connected_callback(self, False)

    #-----------------------------------------------------------------------
    def _on_message(self, client, data, message):
        """MQTT message callback for topics with no specific callback.

        Args:
          client (paho.Client):  The paho mqtt client (self.client).
          data:  Optional user data (unused).
          message:  MQTT message - has attrs: topic, payload, qos, retain.
        """
        LOG.warning("MQTT unhandled message %s %s", message.topic,
                    message.payload)

    #-----------------------------------------------------------------------
    def _on_log(self, client, data, level, buf):
        """MQTT client logging callback

        Args:
          client (paho.Client):  The paho mqtt client (self.client).
          data:  Optional user data (unused).
          level (int):  Logging level.
          buf (str):  The message to log.
        """
        LOG.log(CLIENT_LEVEL, buf)

    #-----------------------------------------------------------------------
    def __str__(self):
        return "MQTT %s:%d" % (self.host, self.port)

    #-----------------------------------------------------------------------
