#===========================================================================
#
# Common code test helpers.  These are common classes used by multiple tests.
#
#===========================================================================
# flake8: noqa
from .Data import Data
from . import main
from . import network
