class DumpSwitchError(Exception):
    """Base class for errors raised by dumpswitch."""


class InvalidArgument(DumpSwitchError, ValueError):
    """Raised when a required argument is empty or out of range."""

    def __init__(self, argument, message=None):
        self.argument = argument
        if message is None:
            message = "Missing %s: a haystack, old domain and new domain are required." % (
                argument.replace('_', ' '),)
        super().__init__(message)


class InvalidUrl(DumpSwitchError, ValueError):
    """Raised when a URL given on the command line doesn't look like one."""

    def __init__(self, name, url):
        self.name = name
        self.url = url
        super().__init__("%s is invalid: %s" % (name, url))


class ConfigError(DumpSwitchError):
    """Raised when the sites config can't be read or is incomplete."""
