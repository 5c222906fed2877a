from advisory_ids.identifiers.advisory_id import (
    PLACEHOLDER,
    AdvisoryId,
    AdvisoryIdError,
    IncompleteIdentifierError,
    MalformedIdentifierError,
    MalformedYearError,
    YearOutOfRangeError,
    parse,
)
from advisory_ids.identifiers.kind import Kind

__all__ = [
    "PLACEHOLDER",
    "AdvisoryId",
    "AdvisoryIdError",
    "IncompleteIdentifierError",
    "Kind",
    "MalformedIdentifierError",
    "MalformedYearError",
    "YearOutOfRangeError",
    "parse",
]
