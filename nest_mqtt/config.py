#===========================================================================
#
# Configuration file utilities.
#
#===========================================================================

__doc__ = """Configuration file utilities
"""

#===========================================================================
import os.path
import jinja2
import yaml
from cerberus import Validator
from cerberus.errors import BasicErrorHandler
from . import mqtt
from .Channel import Channel

# Configuration file input description to class map.
devices = {
    # Key is the list name in the nest config section.  Value is tuple of
    # (class, **kwargs) of the MQTT class to use and any extra keyword args
    # to pass to the constructor.
    'smoke_detectors' : (mqtt.SmokeDetector, {}),
    }


#===========================================================================
def validate(path):
    """Validates the configuration file against the defined schema

    Args:
      path:  The file to load

    Returns:
      string: the failure message text or an empty string if no errors
    """
    with open(path, "r") as f:
        document = yaml.load(f, Loader)

    return validate_file(document, 'config-schema.yaml', 'configuration')


#===========================================================================
def validate_file(document, schema_file, name):
    """Validate a yaml document against a schema in the data directory.

    Args:
      document (dict):  The loaded document to check.
      schema_file (str):  The schema file name in the data directory.
      name (str):  Description of the document for the error message.

    Returns:
      (str): An error message string, or an empty string if no errors.
    """
    basepath = os.path.dirname(__file__)
    schema_file_path = os.path.join(basepath, 'data', schema_file)
    with open(schema_file_path, "r") as f:
        schema = yaml.load(f, Loader=yaml.SafeLoader)

    v = NestValidator(schema, error_handler=MetaErrorHandler(schema=schema))
    if v.validate(document if document is not None else {}):
        return ""

    return """
                 ------- Validation Error -------
An error occured while trying to validate your %s file.  Please
review the errors below and fix the error.  Nest-MQTT cannot run until this
error is fixed.

""" % (name) + parse_validation_errors(v.errors)


#===========================================================================
def parse_validation_errors(errors, indent=0):
    """Create a nice presentation of the errors for the user.

    The error list looks a lot like the yaml document.  Walking it here
    allows multiline error messages with nice indentations.

    Args:
      errors (dict):  The cerberus errors dictionary.
      indent (int):  Number of spaces to indent by.

    Returns:
      str:  Returns the formatted errors.
    """
    error_msg = ""
    for key in errors.keys():
        error_msg += " " * indent + str(key) + ": \n"
        for item in errors[key]:
            if isinstance(item, dict):
                error_msg += parse_validation_errors(item, indent=indent + 2)
            else:
                item = item.replace("\n", "\n  " + " " * (indent + 2))
                error_msg += " " * (indent) + "- " + str(item) + "\n"
    return error_msg


#===========================================================================
def load(path):
    """Load the configuration file.

    Args:
      path:  The file to load

    Returns:
      dict: Returns the configuration dictionary.
    """
    with open(path, "r") as f:
        return yaml.load(f, Loader)


#===========================================================================
def apply(config, mqtt_handler):
    """Apply the configuration to the main MQTT object.

    The MQTT config is loaded first so the devices pick up the templates
    when they're created.

    Args:
      config:  The configuration dictionary.
      mqtt_handler (mqtt.Mqtt):  The main MQTT handler.
    """
    mqtt_handler.load_config(config['mqtt'])

    nest = config.get('nest', None) or {}
    for key, entries in nest.items():
        cls, kwargs = find(key)
        for entry in entries or []:
            device = cls(mqtt_handler, entry['id'], name=entry.get('name'),
                         channels=entry.get('channels'), **kwargs)
            mqtt_handler.add(device)


#===========================================================================
def find(name):
    """Find a device class from a description.

    Valid inputs are defined in the config.devices dictionary.

    Raises:
      Exception if the input device is unknown.

    Args:
      name (str):  The device type name.

    Returns:
      Returns a tuple of the device class to use for the input and
      any extra keyword args to pass to the device class constructor.
    """
    dev = devices.get(name.lower(), None)
    if not dev:
        raise Exception("Unknown device type '%s'.  Valid types are "
                        "%s." % (name, list(devices.keys())))

    return dev


#===========================================================================
# YAML multi-file loading helper.  Original code is from here:
# https://davidchall.github.io/yaml-includes.html (with no license so I'm
# assuming it's in the public domain).
class Loader(yaml.SafeLoader):
    def __init__(self, file):
        """Constructor

        Args:
          file (file):  File like object to read from.
        """
        super().__init__(file)
        self._base_dir = os.path.split(getattr(file, "name", ""))[0]

    #-----------------------------------------------------------------------
    def include(self, node):
        """!include file command.  Supports:

        foo: !include file.yaml
        foo: !include [file1.yaml, file2.yaml]

        Args:
          node:  The YAML node to load.
        """
        if isinstance(node, yaml.ScalarNode):
            return self._load_file(self.construct_scalar(node))

        elif isinstance(node, yaml.SequenceNode):
            result = []
            for include_file in self.construct_sequence(node):
                result += self._load_file(include_file)
            return result

        msg = ("Error: unrecognized node type in !include statement: %s"
               % str(node))
        raise yaml.constructor.ConstructorError(msg)

    #-----------------------------------------------------------------------
    def _load_file(self, filename):
        """Read the requested file.

        Args:
          filename (str):  The file name to load relative to this file.
        """
        path = os.path.join(self._base_dir, filename)
        with open(path, 'r') as f:
            return yaml.load(f, Loader)

    #-----------------------------------------------------------------------


Loader.add_constructor('!include', Loader.include)


#===========================================================================
class MetaErrorHandler(BasicErrorHandler):
    """Error handler that supports custom failure messages.

    When a rule fails, the meta keyword of each schema level on the failed
    path is searched for a key named after the failed rule with "_error"
    appended.  The most specific message found replaces the standard one.
    For example:

    mqtt:
      schema:
        port:
          min: 1
          meta:
            min_error: The broker port must be positive.
    """
    def __init__(self, schema=None, tree=None):
        self.schema = schema
        super().__init__(tree)

    def _format_message(self, field, error):
        error_msg = self._find_meta_error(error.schema_path)
        if error_msg is not None:
            return error_msg

        return super()._format_message(field, error)

    def _find_meta_error(self, error_path):
        """Return the most specific meta error message or None."""
        schema_part = self.schema
        error_msg = None
        for i, error_key in enumerate(error_path):
            if isinstance(schema_part, dict):
                schema_part = schema_part.get(error_key, None)
            elif isinstance(schema_part, list) and isinstance(error_key, int):
                schema_part = schema_part[error_key]
            else:
                break

            if isinstance(schema_part, dict):
                meta = schema_part.get('meta', None)
                if isinstance(meta, dict):
                    rule = error_path[-1]
                    msg = meta.get("%s_error" % rule, None)
                    if isinstance(msg, str):
                        error_msg = msg

        return error_msg


#===========================================================================
class NestValidator(Validator):
    """Adds check_with functions to validate specific settings.
    """
    def _check_with_valid_template(self, field, value):
        """Test whether the value is a valid jinja template."""
        try:
            jinja2.Template(value)
        except jinja2.TemplateSyntaxError as e:
            self._error(field, "Invalid template: %s" % e)

    def _check_with_valid_channel(self, field, value):
        """Test whether the value is a smoke detector channel identifier."""
        if Channel.find(value) is None:
            self._error(field, "Unknown channel '%s'.  Valid channels are: "
                        "%s" % (value, ", ".join(str(i) for i in Channel)))

#===========================================================================
