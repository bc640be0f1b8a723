import re

from dumpswitch.errors import InvalidUrl

# https://gist.github.com/dperini/729294
url_matcher = re.compile(
    r'^(?:(?:(?:https?|ftp):)?//)'
    r'(?:\S+(?::\S*)?@)?'
    r'(?:'
    # private and loopback networks are rejected
    r'(?!(?:10|127)(?:\.\d{1,3}){3})'
    r'(?!(?:169\.254|192\.168)(?:\.\d{1,3}){2})'
    r'(?!172\.(?:1[6-9]|2\d|3[0-1])(?:\.\d{1,3}){2})'
    r'(?:[1-9]\d?|1\d\d|2[01]\d|22[0-3])'
    r'(?:\.(?:1?\d{1,2}|2[0-4]\d|25[0-5])){2}'
    r'(?:\.(?:[1-9]\d?|1\d\d|2[0-4]\d|25[0-4]))'
    r'|'
    r'(?:(?:[a-z0-9\u00a1-\uffff][a-z0-9\u00a1-\uffff_-]{0,62})?[a-z0-9\u00a1-\uffff]\.)+'
    r'(?:[a-z\u00a1-\uffff]{2,}\.?)'
    r')'
    r'(?::\d{2,5})?'
    r'(?:[/?#]\S*)?$',
    re.IGNORECASE,
)


def is_valid_url(url):
    return bool(url) and url_matcher.match(url) is not None


def check_url(url, name='URL'):
    if not is_valid_url(url):
        raise InvalidUrl(name, url)
    return url
