import functools
import re
from dataclasses import dataclass, field

from advisory_ids.identifiers.date import YEAR_MAX, YEAR_MIN
from advisory_ids.identifiers.kind import Kind

# Placeholder advisory name: shouldn't be used until an ID is assigned
PLACEHOLDER = "RUSTSEC-0000-0000"

U32_MAX = 2**32 - 1

_INTEGER = re.compile(r"\+?[0-9]+")

_URL_TEMPLATES = {
    Kind.RUSTSEC: "https://rustsec.org/advisories/{}",
    Kind.CVE: "https://cve.mitre.org/cgi-bin/cvename.cgi?name={}",
    Kind.GHSA: "https://github.com/advisories/{}",
    Kind.TALOS: "https://www.talosintelligence.com/reports/{}",
}


class AdvisoryIdError(ValueError):
    message = "invalid advisory ID: {}"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(self.message.format(identifier))


class MalformedYearError(AdvisoryIdError):
    message = "malformed year in advisory ID: {}"


class YearOutOfRangeError(MalformedYearError):
    message = "out-of-range year in advisory ID: {}"


class IncompleteIdentifierError(AdvisoryIdError):
    message = "incomplete advisory ID: {}"


class MalformedIdentifierError(AdvisoryIdError):
    message = "malformed advisory ID: {}"


def _parse_u32(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None

    value = int(text)
    if value > U32_MAX:
        return None
    return value


def _parse_year(advisory_id: str) -> int:
    # the first component is the prefix the kind was detected from
    _, year_part, *rest = advisory_id.split("-")

    year = _parse_u32(year_part)
    if year is None:
        raise MalformedYearError(advisory_id)

    if not YEAR_MIN <= year <= YEAR_MAX:
        raise YearOutOfRangeError(advisory_id)

    if not rest:
        raise IncompleteIdentifierError(advisory_id)

    if _parse_u32(rest[0]) is None:
        raise MalformedIdentifierError(advisory_id)

    if len(rest) > 1:
        raise MalformedIdentifierError(advisory_id)

    return year


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class AdvisoryId:
    """An identifier for an individual security advisory.

    Constructing an ``AdvisoryId`` validates ``raw``: RUSTSEC, CVE and TALOS
    identifiers must look like ``<PREFIX>-<year>-<number>`` with a year in
    ``YEAR_MIN..YEAR_MAX``. Any other string is accepted as is. With no
    argument the ``RUSTSEC-0000-0000`` placeholder is returned.

    Equality and hashing only consider the raw text.
    """

    raw: str = PLACEHOLDER
    kind: Kind = field(init=False, compare=False)
    year: int | None = field(init=False, compare=False)

    def __post_init__(self):
        if self.raw == PLACEHOLDER:
            kind, year = Kind.RUSTSEC, None
        else:
            kind = Kind.detect(self.raw)
            year = _parse_year(self.raw) if kind.is_year_bearing else None

        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "year", year)

    def __str__(self) -> str:
        return self.raw

    def __lt__(self, other: "AdvisoryId") -> bool:
        if not isinstance(other, AdvisoryId):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self) -> tuple[int, bool, int, str]:
        return (self.kind.rank, self.year is not None, self.year or 0, self.raw)

    def as_str(self) -> str:
        return self.raw

    @property
    def is_placeholder(self) -> bool:
        return self.raw == PLACEHOLDER

    @property
    def is_rustsec(self) -> bool:
        return self.kind == Kind.RUSTSEC

    @property
    def is_cve(self) -> bool:
        return self.kind == Kind.CVE

    @property
    def is_ghsa(self) -> bool:
        return self.kind == Kind.GHSA

    @property
    def is_talos(self) -> bool:
        return self.kind == Kind.TALOS

    @property
    def is_other(self) -> bool:
        return self.kind == Kind.OTHER

    @property
    def numerical_part(self) -> int | None:
        """The number on the right side of the identifier, if there is one."""
        if self.is_placeholder:
            return None
        return _parse_u32(self.raw.rsplit("-", 1)[-1])

    @property
    def url(self) -> str | None:
        """A web page with more information on this advisory, if one is known."""
        if self.is_placeholder:
            return None

        template = _URL_TEMPLATES.get(self.kind)
        if template is None:
            return None
        return template.format(self.raw)


def parse(advisory_id: str) -> AdvisoryId:
    return AdvisoryId(advisory_id)
