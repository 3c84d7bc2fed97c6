#===========================================================================
#
# Command line parsing and main entry point.
#
#===========================================================================
import argparse
import sys
from .. import config
from . import start
from ..const import __version__


def parse_args(args):
    """Input is command line arguments w/o arg[0]
    """
    prog_description = """Bridge Nest smoke detector data to MQTT.  Nest
                       device data received on the data topic is converted
                       to one MQTT state topic per channel along with a
                       device status and firmware version."""
    p = argparse.ArgumentParser(prog="nest-mqtt",
                                description=prog_description)
    p.add_argument('-v', '--version', action='version', version='%(prog)s ' +
                   __version__)
    p.add_argument("config", metavar="config.yaml", help="Configuration "
                   "file to use.")
    sub = p.add_subparsers(title="commands",
                           description="See %(prog)s config.yaml <command> -h"
                                       " for specific command help.",
                           metavar="command")
    sub.required = True

    #---------------------------------------
    # START command
    sp = sub.add_parser("start", help="Start the Nest<->MQTT server.",
                        description="Start the Nest<->MQTT server.")
    sp.add_argument("-l", "--log", metavar="log_file",
                    help="Logging file to use.")
    sp.add_argument("-ls", "--log-screen", action="store_true",
                    help="Log to the screen")
    sp.add_argument("--level", metavar="log_level", type=int,
                    help="Logging level to use.  10=debug, 20=info,"
                    "30=warn, 40=error, 50=critical")
    sp.set_defaults(func=start.start)

    #---------------------------------------
    # VALIDATE command
    sp = sub.add_parser("validate", help="Check the configuration file.",
                        description="Check the configuration file and exit.")
    sp.set_defaults(func=validate)

    return p.parse_args(args)


#===========================================================================
def validate(args, cfg):
    """Validate command.  main() has already checked the file by now."""
    print("%s is valid" % args.config)
    return 0


#===========================================================================
def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # Validate the configuration file
    val_errors = config.validate(args.config)
    if val_errors != "":
        return val_errors

    # Load the configuration file.
    cfg = config.load(args.config)

    return args.func(args, cfg)

#===========================================================================
