#===========================================================================
#
# Nest-MQTT Constants File
#
#===========================================================================
""" Constants File

Holds the version so it can be imported throughout the code without
causing a cyclic import.
"""

__version__ = "0.1.0"

#===========================================================================
