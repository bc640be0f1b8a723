"""Guess the domain a WordPress dump currently points at.

WordPress keeps it in ``wp_options``::

    INSERT INTO `wp_options` VALUES (1,'siteurl','http://old.example.com','yes');

This is a plain pattern match, not a parse of the dump.  The result is a best
guess: it may be empty, or wrong for dumps that store the option differently,
so callers should show it to the user rather than trust it.
"""

import re

siteurl_matcher = re.compile(r'''(['"])siteurl\\?\1[^'"]+(['"])([^'"\\]+)\\?\2''')


def guess_old_domain(text):
    """Return the ``siteurl`` value found in ``text``, or ``''``."""
    if not isinstance(text, str):
        return ''

    match = siteurl_matcher.search(text)

    if not match:
        return ''

    return match.group(3)
