#===========================================================================
#
# MQTT Nest smoke detector device
#
#===========================================================================
import json
from .. import handler
from .. import log
from .. import state as St
from ..Channel import Channel
from ..errors import NestDataError
from ..nest import SmokeDetector as SmokeDetectorData
from .MsgTemplate import MsgTemplate

LOG = log.get_logger()


class SmokeDetector(handler.SyncHost):
    """MQTT interface to a Nest smoke detector.

    This class is the host for a handler.SmokeDetector object.  Channel
    states, status changes, and properties pushed by the handler are
    published as MQTT messages.

    Device snapshots arrive as Nest JSON objects on the data topic and are
    passed to the handler.  A message on the refresh topic re-publishes the
    cached state of one channel (payload is the channel id) or of all
    linked channels (empty payload or 'all').
    """
    def __init__(self, mqtt, device_id, name=None, channels=None):
        """Constructor

        Args:
          mqtt (mqtt.Mqtt):  The MQTT main interface.
          device_id (str):  The Nest device ID.
          name (str):  Nice alias name to use for the device.
          channels (list):  Channel objects or identifiers to publish.  None
                   to publish every channel.

        Raises:
          ValueError if one of the channels is unknown.
        """
        self.mqtt = mqtt
        self.device_id = device_id
        self.name = name

        if channels is None:
            self.channels = set(Channel)
        else:
            self.channels = set()
            for text in channels:
                channel = Channel.find(text)
                if channel is None:
                    raise ValueError("Unknown smoke detector channel '%s'.  "
                                     "Valid channels are %s" %
                                     (text, [str(i) for i in Channel]))
                self.channels.add(channel)

        self.status = St.ThingStatus.UNINITIALIZED
        self.properties = {}

        # Set up the default templates for the MQTT messages and payloads.
        self.msg_state = MsgTemplate(
            topic='nest/{{device_id}}/{{channel}}',
            payload='{{state}}')
        self.msg_status = MsgTemplate(
            topic='nest/{{device_id}}/status',
            payload='{{status}}')
        self.msg_property = MsgTemplate(
            topic='nest/{{device_id}}/property/{{property}}',
            payload='{{value}}')

        # Input topics.  Only the topic part of these is used.
        self.msg_data = MsgTemplate(topic='nest/{{device_id}}/data')
        self.msg_refresh = MsgTemplate(topic='nest/{{device_id}}/refresh')

        # Topics we're currently subscribed to.
        self._data_topic = None
        self._refresh_topic = None

        self.handler = handler.SmokeDetector(self)

    #-----------------------------------------------------------------------
    @property
    def label(self):
        """Return a name to use in log messages."""
        if self.name:
            return "%s (%s)" % (self.device_id, self.name)

        return self.device_id

    #-----------------------------------------------------------------------
    def load_config(self, config, qos=None):
        """Load values from a configuration data object.

        Args:
          config (dict):  The mqtt configuration dictionary to load from.
                 The object config is stored in config['smoke_detector'].
          qos (int):  The default quality of service level to use.
        """
        data = config.get("smoke_detector", None)
        if not data:
            return

        self.msg_state.load_config(data, 'state_topic', 'state_payload', qos)
        self.msg_status.load_config(data, 'status_topic', 'status_payload',
                                    qos)
        self.msg_property.load_config(data, 'property_topic',
                                      'property_payload', qos)
        self.msg_data.load_config(data, 'data_topic', qos=qos)
        self.msg_refresh.load_config(data, 'refresh_topic', qos=qos)

    #-----------------------------------------------------------------------
    def initialize(self):
        """Initialize the handler.

        This marks the device status as unknown.  Call this after
        load_config() so the status is published with the configured
        templates.
        """
        self.handler.initialize()

    #-----------------------------------------------------------------------
    def subscribe(self, link, qos):
        """Subscribe to the data and refresh topics.

        The current status and properties are published again since the
        broker may not have received them before the connection was made.

        Args:
          link (network.Mqtt):  The MQTT network client to use.
          qos (int):  The quality of service to use.
        """
        data = self.template_data()

        self._data_topic = self.msg_data.render_topic(data)
        if self._data_topic:
            link.subscribe(self._data_topic, qos, self.handle_data)

        self._refresh_topic = self.msg_refresh.render_topic(data)
        if self._refresh_topic:
            link.subscribe(self._refresh_topic, qos, self.handle_refresh)

        if self.status != St.ThingStatus.UNINITIALIZED:
            self.msg_status.publish(self.mqtt, self.template_data(
                status=self.status))
        for name, value in sorted(self.properties.items()):
            self.msg_property.publish(self.mqtt, self.template_data(
                property=name, value=value))

    #-----------------------------------------------------------------------
    def unsubscribe(self, link):
        """Unsubscribe to any MQTT topics the object was subscribed to.

        Args:
          link (network.Mqtt):  The MQTT network client to use.
        """
        if self._data_topic:
            link.unsubscribe(self._data_topic)
            self._data_topic = None

        if self._refresh_topic:
            link.unsubscribe(self._refresh_topic)
            self._refresh_topic = None

    #-----------------------------------------------------------------------
    def template_data(self, channel=None, state=None, status=None,
                      property=None, value=None):
        """Create the Jinja templating data variables for the messages.

        Only the inputs that are set are added to the data.

        Args:
          channel (Channel):  The channel being published.
          state:  The channel state.
          status (ThingStatus):  The device status.
          property (str):  The property name.
          value (str):  The property value.

        Returns:
          dict:  Returns a dict with the variables available for templating.
        """
        data = {
            "device_id" : self.device_id,
            "name" : self.name if self.name else self.device_id,
            }

        if channel is not None:
            data["channel"] = str(channel)
        if state is not None:
            data["state"] = St.to_str(state)
        if status is not None:
            data["status"] = str(status)
        if property is not None:
            data["property"] = property
            data["value"] = "" if value is None else str(value)

        return data

    #-----------------------------------------------------------------------
    def is_linked(self, channel):
        """Return True if the channel is published."""
        return channel in self.channels

    #-----------------------------------------------------------------------
    def update_state(self, channel, state):
        """Publish a channel state.

        Args:
          channel (Channel):  The channel that changed.
          state:  The new channel state.
        """
        LOG.info("MQTT smoke detector %s %s = %s", self.label, channel,
                 St.to_str(state))

        data = self.template_data(channel=channel, state=state)
        self.msg_state.publish(self.mqtt, data)

    #-----------------------------------------------------------------------
    def update_status(self, status):
        """Record and publish the device status.

        Args:
          status (ThingStatus):  The new status.
        """
        LOG.info("MQTT smoke detector %s status %s", self.label, status)
        self.status = status

        data = self.template_data(status=status)
        self.msg_status.publish(self.mqtt, data)

    #-----------------------------------------------------------------------
    def update_property(self, name, value):
        """Publish a device property if it changed.

        A value of None removes the property.  None and empty values are
        published as an empty payload which clears the retained message.

        Args:
          name (str):  The property name.
          value (str):  The property value or None.
        """
        if value is None:
            if name not in self.properties:
                return
            del self.properties[name]
        else:
            if self.properties.get(name, None) == value:
                return
            self.properties[name] = value

        LOG.info("MQTT smoke detector %s property %s = %s", self.label, name,
                 value)
        data = self.template_data(property=name, value=value)
        self.msg_property.publish(self.mqtt, data, allow_empty=True)

    #-----------------------------------------------------------------------
    def handle_data(self, client, userdata, message):
        """Device data message callback.

        Decodes the Nest JSON payload and passes the snapshot to the
        handler.  Bad payloads are logged and dropped.

        Args:
          client (paho.Client):  The paho mqtt client (self.link).
          userdata:  Optional user data (unused).
          message:  MQTT message - has attrs: topic, payload, qos, retain.
        """
        LOG.debug("MQTT smoke detector %s data %s", self.label,
                  message.payload)

        try:
            data = json.loads(message.payload.decode("utf-8"))
            snapshot = SmokeDetectorData.from_json(data)
        except (ValueError, RecursionError):
            LOG.error("Invalid JSON data for smoke detector %s: %s",
                      self.label, message.payload)
            return
        except NestDataError as e:
            LOG.error("Invalid smoke detector %s data: %s", self.label, e)
            return

        if snapshot.device_id is not None and \
           snapshot.device_id != self.device_id:
            LOG.error("Smoke detector %s ignoring data for device %s",
                      self.label, snapshot.device_id)
            return

        self.handler.on_new_data(snapshot)

    #-----------------------------------------------------------------------
    def handle_refresh(self, client, userdata, message):
        """Refresh message callback.

        The payload is the channel identifier to refresh.  An empty payload
        or 'all' refreshes every linked channel.

        Args:
          client (paho.Client):  The paho mqtt client (self.link).
          userdata:  Optional user data (unused).
          message:  MQTT message - has attrs: topic, payload, qos, retain.
        """
        try:
            text = message.payload.decode("utf-8").strip().lower()
        except UnicodeDecodeError:
            LOG.error("Invalid refresh payload for smoke detector %s: %s",
                      self.label, message.payload)
            return

        if text in ("", "all"):
            channels = [i for i in Channel if self.is_linked(i)]
        else:
            channel = Channel.find(text)
            if channel is None:
                LOG.error("Unknown smoke detector channel '%s' in refresh "
                          "for %s", text, self.label)
                return
            if not self.is_linked(channel):
                LOG.error("Smoke detector %s channel %s is not published",
                          self.label, channel)
                return
            channels = [channel]

        LOG.info("MQTT smoke detector %s refresh %s", self.label,
                 [str(i) for i in channels])
        for channel in channels:
            self.handler.handle_command(channel, St.REFRESH)

    #-----------------------------------------------------------------------
