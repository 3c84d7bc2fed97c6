#===========================================================================
#
# Start the main server
#
#===========================================================================
from .. import config
from .. import log
from .. import mqtt
from .. import network


def start(args, cfg):
    """Main start command

    This will start the main Nest<->MQTT bridge and not return until the
    network loop stops.

    Args:
      args:  The command line arguments.
      cfg:   The configuration dictionary.
    """
    # Always log to the screen if a file isn't active.
    if not args.log:
        args.log_screen = True

    # Initialize the logging system either using the command line
    # inputs or the config file.  If these vars are None, then the
    # config file logging data is used.
    log.initialize(args.level, args.log_screen, args.log, config=cfg)

    mqtt_link = network.Mqtt()
    mqtt_handler = mqtt.Mqtt(mqtt_link)

    # Load the configuration data into the objects.  This creates the
    # devices.
    config.apply(cfg, mqtt_handler)

    try:
        mqtt_link.run()
    except KeyboardInterrupt:
        mqtt_handler.close()
