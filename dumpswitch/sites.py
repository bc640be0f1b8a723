"""Batch migration of several dumps described in an INI file.

Each section is one site::

    [site1]
    old_domain = old.example.com
    new_domain = new.example.com
    database_file = db.sql
    # optional, defaults to db.sql_modified.sql
    output_file = db-live.sql

Relative paths are resolved against the directory holding the config file.
"""

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path

from dumpswitch.errors import ConfigError
from dumpswitch.migrate import migrate

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ('old_domain', 'new_domain', 'database_file')


@dataclass
class Site:
    name: str
    old_domain: str
    new_domain: str
    database_file: Path
    output_file: Path | None = None


def read_dump(path):
    # newline='' keeps \r\n and friends untouched, surrogateescape keeps bytes that aren't UTF-8.
    with open(path, 'r', encoding='utf-8', errors='surrogateescape', newline='') as fd:
        return fd.read()


def write_dump(path, text):
    with open(path, 'w', encoding='utf-8', errors='surrogateescape', newline='') as fd:
        fd.write(text)


def load_sites(path):
    """Read the sites from the INI file at ``path``."""
    path = Path(path)
    parser = configparser.ConfigParser(interpolation=None)

    try:
        with open(path, encoding='utf-8') as fd:
            parser.read_file(fd)
    except OSError as e:
        raise ConfigError("Can't read sites config %s: %s" % (path, e.strerror)) from e
    except configparser.Error as e:
        raise ConfigError("Invalid sites config %s: %s" % (path, e)) from e

    base = path.parent
    sites = []

    for name in parser.sections():
        section = parser[name]

        missing = [key for key in REQUIRED_KEYS if not section.get(key, '').strip()]
        if missing:
            raise ConfigError("Site %s is missing %s" % (name, ', '.join(missing)))

        output_file = section.get('output_file', '').strip()

        sites.append(Site(
            name=name,
            old_domain=section['old_domain'].strip(),
            new_domain=section['new_domain'].strip(),
            database_file=base / section['database_file'].strip(),
            output_file=base / output_file if output_file else None,
        ))

    if not sites:
        raise ConfigError("No sites configured in %s" % path)

    return sites


def output_path(site):
    if site.output_file is not None:
        return Path(site.output_file)
    return Path(str(site.database_file) + '_modified.sql')


def switch_site(site, length_unit='bytes'):
    """Migrate one site's dump and write the result next to it.

    Returns the MigrationResult, or None when the site keeps its domain.
    """
    if site.old_domain == site.new_domain:
        logger.info("Skipping %s, old and new domain are both %s", site.name, site.old_domain)
        return None

    logger.debug("Reading %s", site.database_file)
    db_content = read_dump(site.database_file)

    result = migrate(db_content, site.old_domain, site.new_domain, length_unit)

    logger.debug("%s: %d serialized, %d other replacements, length delta %d",
                 site.name, result.serialized_replacement_count,
                 result.plain_replacement_count, result.domain_length_delta)

    out = output_path(site)
    write_dump(out, result.rewritten_text)
    logger.info("New database for %s is in %s", site.name, out)

    return result
