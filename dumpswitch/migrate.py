"""Move a dump from one domain to another."""

from dataclasses import dataclass

from dumpswitch.errors import InvalidArgument
from dumpswitch.plain import rewrite_plain
from dumpswitch.serialized import rewrite_serialized


@dataclass(frozen=True)
class MigrationRequest:
    haystack: str
    old_domain: str
    new_domain: str

    def __post_init__(self):
        for name in ('haystack', 'old_domain', 'new_domain'):
            if not getattr(self, name):
                raise InvalidArgument(name)


@dataclass(frozen=True)
class MigrationResult:
    rewritten_text: str
    old_domain: str
    new_domain: str
    serialized_replacement_count: int
    plain_replacement_count: int
    # len(new_domain) - len(old_domain), for reporting only.
    domain_length_delta: int
    changed: bool = False

    @property
    def total_replacement_count(self):
        return self.serialized_replacement_count + self.plain_replacement_count


def migrate(haystack, old_domain, new_domain, length_unit='bytes'):
    """Replace ``old_domain`` with ``new_domain`` throughout ``haystack``.

    Serialized strings are rewritten first so their lengths can be fixed
    while the old domain is still intact.  Whatever is left afterwards is
    replaced as plain text.

    Raises InvalidArgument if any of the three strings is empty.
    """
    request = MigrationRequest(haystack, old_domain, new_domain)

    delta = len(request.new_domain) - len(request.old_domain)

    text, serialized_count = rewrite_serialized(
        request.haystack, request.old_domain, request.new_domain, length_unit)
    text, plain_count = rewrite_plain(text, request.old_domain, request.new_domain)

    return MigrationResult(
        rewritten_text=text,
        old_domain=request.old_domain,
        new_domain=request.new_domain,
        serialized_replacement_count=serialized_count,
        plain_replacement_count=plain_count,
        domain_length_delta=delta,
        changed=text != request.haystack,
    )
