#===========================================================================
#
# MQTT topic and payload template
#
#===========================================================================
import jinja2
from .. import log

LOG = log.get_logger()


class MsgTemplate:
    """MQTT message template helper.

    This class stores a topic and payload jinja2 template for use in
    formatting outgoing MQTT messages and building input topics.
    """

    @staticmethod
    def clean_topic(topic):
        """Clean up input topics

        This removes any trailing '/' characters and strips whitespace
        from the ends.

        Arg:
          topic (str):  The input topic.

        Returns:
          str: Returns the cleaned topic.
        """
        topic = topic.strip()
        while topic.endswith("/"):
            topic = topic[:-1].strip()

        return topic

    #-----------------------------------------------------------------------
    def __init__(self, topic, payload=None, qos=0, retain=None):
        """Constructor

        Args:
          topic (str):  The topic template to use.
          payload (str):  The payload template to use.  None for input
                  topics which only need the topic.
          qos (int):  Quality of service to use when publishing.
          retain (bool):  None to use the MQTT class retain flag.  Otherwise
                 the retain flag to use.
        """
        self.qos = qos
        self.retain = retain

        # Keep the original string around for better log and error messages.
        self.topic_str = None
        self.topic = None
        self.payload_str = None
        self.payload = None

        self._set_topic(topic)
        self._set_payload(payload)

    #-----------------------------------------------------------------------
    def load_config(self, config, topic, payload=None, qos=None):
        """Load templates from a configuration file.

        If the topic or payload doesn't exist in the config, the value from
        the constructor is used.

        Args:
          config (dict):  The configuration dictionary to load from.
          topic (str):  The name of the topic field in the config dict.
          payload (str):  The name of the payload field in the config dict.
                  None to keep the current payload.
          qos (int):  Quality of service to use when publishing.  If None, use
                      the constructor value.
        """
        if qos is not None:
            self.qos = qos

        template = config.get(topic, None)
        if template is not None:
            self._set_topic(template)

        if payload is not None:
            template = config.get(payload, None)
            if template is not None:
                self._set_payload(template)

    #-----------------------------------------------------------------------
    def render_topic(self, data, silent=False):
        """Render the topic template.

        Args:
          data (dict):  Data dictionary with template variables to pass to the
               jinja template.
          silent (bool) True to silence error logs.

        Returns:
          str:  Returns the rendered topic.  This may be None if the
          topic is not set or rendering fails.
        """
        topic = self._render(self.topic_str, self.topic, data, silent)
        return None if topic is None else self.clean_topic(topic)

    #-----------------------------------------------------------------------
    def render_payload(self, data, silent=False):
        """Render the payload template.

        Args:
          data (dict):  Data dictionary with template variables to pass to the
               jinja template.
          silent (bool) True to silence error logs.

        Returns:
          str:  Returns the rendered payload.  This may be None if the
          payload is not set or rendering fails.
        """
        return self._render(self.payload_str, self.payload, data, silent)

    #-----------------------------------------------------------------------
    def publish(self, mqtt, data, retain=None, allow_empty=False):
        """Publish a message.

        If either the topic or payload fails to render, nothing is done.

        Args:
          mqtt (Mqtt):  The MQTT client to publish to.
          data (dict):  Data dictionary with template variables to pass to the
               jinja templates.
          retain (bool):  None to use the class retain flag.  Otherwise
                 the retain flag to use.
          allow_empty (bool):  True to publish an empty payload.  This is
                      used to clear retained messages.

        Returns:
          bool:  Returns True if a message was published.
        """
        topic = self.render_topic(data)
        payload = self.render_payload(data)
        retain = retain if retain is not None else self.retain

        if not topic or payload is None:
            return False

        if not payload and not allow_empty:
            return False

        mqtt.publish(topic, payload, self.qos, retain)
        return True

    #-----------------------------------------------------------------------
    def _set_topic(self, template):
        self.topic_str = template
        self.topic = None if template is None else jinja2.Template(template)

    #-----------------------------------------------------------------------
    def _set_payload(self, template):
        self.payload_str = template
        self.payload = None if template is None else \
            jinja2.Template(template)

    #-----------------------------------------------------------------------
    def _render(self, raw, template, data, silent=False):
        """Render a template and return None if it fails.

        Args:
          raw (str):  Raw template string - used in logging errors.
          template:  The Jinja template object to use.
          data (dict):  The data dictionary to pass to the template.
          silent (bool):  True to silence error logs.

        Returns:
          str:  Returns the rendered value or None if if fails.
        """
        if template is None:
            return None

        try:
            return template.render(data)
        except (jinja2.TemplateError, TypeError, ValueError):
            if not silent:
                LOG.exception("Error rendering template '%s' with data: %s",
                              raw, data)
            return None

    #-----------------------------------------------------------------------
