# modules/qa_utils.py
from typing import Iterable, List

from property_formatter.modules.field_extractor import FIELD_NAMES, SENTINELS, PropertyRecord


def missing_fields(record: PropertyRecord) -> List[str]:
    """
    Fields still holding their sentinel ("N/A", or "Other" for area); these need review.
    """
    data = record.as_dict()
    return [k for k in FIELD_NAMES if data[k] == SENTINELS[k]]


def completeness(record: PropertyRecord) -> float:
    return round(1 - len(missing_fields(record)) / len(FIELD_NAMES), 3)


def incomplete_count(records: Iterable[PropertyRecord], min_completeness: float = 0.5) -> int:
    return sum(1 for r in records if completeness(r) < min_completeness)
