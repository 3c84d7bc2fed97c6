#===========================================================================
#
# Package exceptions
#
#===========================================================================


class Error(Exception):
    """Base class for all nest_mqtt errors."""


#===========================================================================
class NestDataError(Error):
    """Nest device data could not be converted.

    Raised when a Nest API payload has a value that can't be turned into the
    snapshot field type (unknown enumeration text, malformed time stamp,
    etc).
    """

#===========================================================================
