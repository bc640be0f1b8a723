from dumpswitch.patterns import domain_matcher


def rewrite_plain(text, old_domain, new_domain):
    """Replace every remaining ``old_domain`` in ``text``, ignoring case.

    Meant to run after the serialized pass: anything left is plain text such
    as URLs in post content or unserialized option values.  Returns the new
    text and the number of occurrences replaced.
    """
    return domain_matcher(old_domain).subn(lambda m: new_domain, text)
