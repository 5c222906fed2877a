import enum

# Checked in order, first match wins
_PREFIXES = (
    ("RUSTSEC-", "rustsec"),
    ("CVE-", "cve"),
    ("TALOS-", "talos"),
    ("GHSA-", "ghsa"),
)


class Kind(enum.StrEnum):
    """Known kinds of advisory identifiers.

    New schemes may be added over time, so callers should always keep a
    fallback branch when dispatching on a kind.
    """

    RUSTSEC = enum.auto()
    CVE = enum.auto()
    GHSA = enum.auto()
    TALOS = enum.auto()
    OTHER = enum.auto()

    @classmethod
    def detect(cls, raw: str) -> "Kind":
        for prefix, kind in _PREFIXES:
            if raw.startswith(prefix):
                return cls(kind)
        return cls.OTHER

    @property
    def is_year_bearing(self) -> bool:
        return self in (Kind.RUSTSEC, Kind.CVE, Kind.TALOS)

    @property
    def rank(self) -> int:
        return _ORDER.index(self)


_ORDER = tuple(Kind)
