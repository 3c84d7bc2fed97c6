#===========================================================================
#
# Nest-MQTT command line module
#
#===========================================================================
# flake8: noqa

__doc__ = """Command line parsing and execution.

This package parses the command line arguments and starts the main server.
"""

#===========================================================================
from .main import main
