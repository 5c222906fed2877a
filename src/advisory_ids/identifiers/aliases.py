import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from advisory_ids.identifiers.advisory_id import AdvisoryId
from advisory_ids.identifiers.kind import Kind


@dataclass(frozen=True)
class Aliases:
    rustsec: list[AdvisoryId] = field(default_factory=list)
    cve: list[AdvisoryId] = field(default_factory=list)
    ghsa: list[AdvisoryId] = field(default_factory=list)
    talos: list[AdvisoryId] = field(default_factory=list)
    other: list[AdvisoryId] = field(default_factory=list)

    @classmethod
    def from_list(cls, aliases: list[str]):
        return cls.from_ids(AdvisoryId(a) for a in aliases if a)

    @classmethod
    def from_ids(cls, ids: Iterable[AdvisoryId]):
        buckets: dict[Kind, set[AdvisoryId]] = {k: set() for k in Kind}

        for advisory_id in ids:
            logging.trace(f"Grouping {advisory_id} under {advisory_id.kind}")
            buckets[advisory_id.kind].add(advisory_id)

        return cls(**{str(k): sorted(v) for k, v in buckets.items()})

    def to_list(self, exclude: set[str] | None = None) -> list[str]:
        if exclude is None:
            exclude = set()

        result = []
        for alias_key, aliases in self.__dict__.items():
            if alias_key in exclude:
                continue

            result.extend(str(a) for a in aliases)
        return result

    def all(self) -> list[AdvisoryId]:
        return sorted(a for aliases in self.__dict__.values() for a in aliases)
