"""Rewrite domains inside PHP serialized strings.

A serialized string looks like ``s:22:"http://old.example.com";``.  The
number is the length of the content, so when the domain inside changes the
length has to be recomputed or ``unserialize()`` rejects the whole value.
Dumps produced by mysqldump escape the quotes (``s:22:\\"...\\";``); both
forms are recognised.

Matching is done one physical line at a time, a field never spans a line
break.
"""

import re

from dumpswitch.errors import InvalidArgument
from dumpswitch.patterns import domain_matcher

LENGTH_UNITS = ('bytes', 'chars')

line_break_matcher = re.compile(r'(\r\n|\n\r|\n|\r)')

# s:<len>:<quote><content><same quote>;
serialized_matcher = re.compile(r'''s:(\d+):(\\?["'])(.*?)\2;''', re.IGNORECASE)

# \" \n \\ ... inside an escaped SQL string, each one byte once unescaped
escape_sequence_matcher = re.compile(r'\\(.)', re.DOTALL)


def split_lines(text):
    """Split ``text`` on line breaks, keeping each break as its own element."""
    return line_break_matcher.split(text)


def check_length_unit(length_unit):
    if length_unit not in LENGTH_UNITS:
        raise InvalidArgument('length_unit', "Unknown length unit: %r" % (length_unit,))


def content_length(content, length_unit='bytes', escaped=False):
    """Length PHP will see for ``content``.

    With ``escaped`` the content sits inside an SQL string literal and PHP
    only gets it after the backslash escapes are undone, so those are
    collapsed before counting bytes.  ``chars`` counts the text as written.
    """
    check_length_unit(length_unit)

    if length_unit == 'chars':
        return len(content)

    if escaped:
        content = escape_sequence_matcher.sub(r'\1', content)

    try:
        # surrogateescape keeps undecodable input bytes at one byte each.
        return len(content.encode('utf-8', 'surrogateescape'))
    except UnicodeEncodeError:
        return len(content.encode('utf-8', 'surrogatepass'))


def rewrite_serialized(text, old_domain, new_domain, length_unit='bytes'):
    """Replace ``old_domain`` inside serialized strings of ``text``.

    Returns the rewritten text and the number of serialized fields changed.
    Fields that don't contain the old domain are left exactly as they are.
    """
    check_length_unit(length_unit)

    old_site_matcher = domain_matcher(old_domain)
    count = 0

    def replace(match):
        nonlocal count

        quote = match.group(2)
        content = match.group(3)

        if not old_site_matcher.search(content):
            return match.group(0)

        count += 1
        content = old_site_matcher.sub(lambda m: new_domain, content)
        length = content_length(content, length_unit, escaped=quote.startswith('\\'))

        return 's:%d:%s%s%s;' % (length, quote, content, quote)

    lines = split_lines(text)

    for i, line in enumerate(lines):
        lines[i] = serialized_matcher.sub(replace, line)

    return ''.join(lines), count
