"""Move database dumps containing PHP serialized data between domains."""

from dumpswitch.errors import ConfigError, DumpSwitchError, InvalidArgument, InvalidUrl
from dumpswitch.guess import guess_old_domain
from dumpswitch.migrate import MigrationRequest, MigrationResult, migrate

__version__ = '0.1.0'

__all__ = [
    'ConfigError',
    'DumpSwitchError',
    'InvalidArgument',
    'InvalidUrl',
    'MigrationRequest',
    'MigrationResult',
    'guess_old_domain',
    'migrate',
]
