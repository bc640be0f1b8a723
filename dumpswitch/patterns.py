import re


# Characters that have a meaning inside a regular expression.  The backslash
# goes first so the escapes added for the others are not escaped again.
SPECIALS = ('\\', '/', '.', '*', '+', '?', '|', '(', ')', '[', ']', '{', '}', '^', '$')


def escape_pattern(text):
    """Return ``text`` escaped for use as a literal inside a regex."""
    for special in SPECIALS:
        text = text.replace(special, '\\' + special)
    return text


def domain_matcher(domain):
    """Compile a case-insensitive matcher for the literal ``domain``."""
    return re.compile(escape_pattern(domain), re.IGNORECASE)
