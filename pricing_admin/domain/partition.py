"""
Discriminator-keyed partitioning of flat record lists
"""

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Iterable, List, Optional, Sequence, TypeVar

R = TypeVar("R")
V = TypeVar("V")


@dataclass(frozen=True)
class Bucket(Generic[R, V]):
    """
    One section of a partition

    Attributes:
        name: bucket key in the result
        matches: discriminator deciding whether a record belongs here
        decode: record -> view row
        default: rows used when no record matches (never empty for editors)
    """

    name: str
    matches: Callable[[R], bool]
    decode: Callable[[R], V]
    default: Callable[[], List[V]]


def partition(records: Iterable[R], buckets: Sequence[Bucket]) -> Dict[str, list]:
    """
    Split records into buckets, preserving input order within each bucket.

    A bucket with at least one match replaces its default entirely; an empty
    bucket keeps its default rows. Records matching no bucket are ignored.
    """
    records = list(records)
    result: Dict[str, list] = {}

    for bucket in buckets:
        rows = [bucket.decode(record) for record in records if bucket.matches(record)]
        result[bucket.name] = rows if rows else bucket.default()

    return result


def reconstruct(
    sections: Sequence[Sequence[V]], encoders: Sequence[Callable[[V], Optional[R]]]
) -> List[R]:
    """
    Re-encode view sections into one flat list.

    encoders[i] is applied to every row of sections[i]; rows it maps to None
    are dropped.
    """
    records: List[R] = []
    for rows, encode in zip(sections, encoders):
        for row in rows:
            record = encode(row)
            if record is not None:
                records.append(record)
    return records
