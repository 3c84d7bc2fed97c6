#===========================================================================
#
# Logging utilities
#
#===========================================================================
import logging
import logging.handlers

# Very low level used for the paho client chatter.  Turn on level 5 at the
# top level to see what is happening inside the MQTT client.
CLIENT_LEVEL = 5
logging.addLevelName(CLIENT_LEVEL, "CLIENT")

# Root name of the package logger.  Module loggers hang off of this one.
ROOT = "nest_mqtt"


#===========================================================================
def get_logger(name=ROOT):
    """Get a logger object to use.

    Names outside of the package hierarchy are placed under the package
    logger so a single initialize() call configures all of them.

    Args:
      name (str):  The name of the logging object.

    Returns:
      The requested logging object.
    """
    if name != ROOT and not name.startswith(ROOT + "."):
        name = "%s.%s" % (ROOT, name)

    return logging.getLogger(name)


#===========================================================================
def initialize(level=None, screen=None, file=None, config=None):
    """Initialize the logging settings.

    Args:
      level (int):  The logging level to set.
      screen (bool):  True to turn on logging to the screen.  False to turn it
             off.  If None, the default of True is used.
      file (str): File to log to or None to skip.
      config:  Config object to read logging information from.  This read from
               the yaml file and the 'logging' key is extracted to configure
               the inputs.
    """
    # Direct inputs win over the config file values.
    if config:
        data = config.get("logging", {})

        if level is None:
            level = data.get("level", None)
        if screen is None:
            screen = data.get("screen", None)
        if file is None:
            file = data.get("file", None)

    level = level if level is not None else logging.INFO
    screen = bool(screen) if screen is not None else True

    log_obj = get_logger()
    log_obj.setLevel(level)

    # Calling initialize twice should not double up the output.
    for handler in list(log_obj.handlers):
        log_obj.removeHandler(handler)

    fmt = '%(asctime)s %(levelname)s %(module)s: %(message)s'
    datefmt = '%Y-%m-%d %H:%M:%S'
    formatter = logging.Formatter(fmt, datefmt)

    if screen:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        log_obj.addHandler(handler)

    if file:
        # Use a watched file handler - that way LINUX system log
        # rotation works properly.
        handler = logging.handlers.WatchedFileHandler(file)
        handler.setFormatter(formatter)
        log_obj.addHandler(handler)

#===========================================================================
