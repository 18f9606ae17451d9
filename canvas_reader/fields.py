"""
Field projection helpers for loosely-shaped Canvas JSON.

Only used where the payload shape is not known up front, such as the detail
record behind a module item.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

Record = Dict[str, Any]


def extract_fields(candidates: Iterable[str], data: Union[Record, List[Record], None]):
    """
    Keep the top-level pairs of a record whose key is one of candidates.

    Order follows the record, not the candidates. Nested values are returned
    as-is and never searched. A list of records is filtered record by record.

    Examples:
        >>> extract_fields(["title", "body"], {"id": 1, "body": "x", "title": "T"})
        {'body': 'x', 'title': 'T'}
    """
    wanted = set(candidates)
    if data is None:
        return {}
    if isinstance(data, list):
        return [extract_fields(wanted, record) for record in data]
    return {key: value for key, value in data.items() if key in wanted}


def first_field(candidates: Iterable[str], record: Optional[Record], default: Any = None) -> Any:
    """Value of the first candidate (in candidate order) present and non-empty in record."""
    if not record:
        return default
    candidates = list(candidates)
    found = extract_fields(candidates, record)
    for key in candidates:
        if found.get(key):
            return found[key]
    return default


def find_by(records: Optional[List[Record]], field: str, value: Any) -> Optional[Record]:
    """First record whose field equals value, or None."""
    for record in records or []:
        if record.get(field) == value:
            return record
    return None
