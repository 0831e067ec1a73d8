"""Data model for a KML Document, the root of the model tree.

A Document owns its placemarks in insertion order. That order is the
only ordering: nothing is sorted or de-duplicated, and it is preserved
verbatim when the document is written.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass, field

from tiny_kml.models.placemark import Placemark


@dataclass(slots=True)
class Document(MutableSequence[Placemark]):
    """A named collection of placemarks.

    Behaves as a mutable sequence of ``Placemark``.

    Attributes:
        name: Document name. Empty when absent from the source.
        description: Document description. Empty when absent.
        placemarks: Owned placemarks in document order.
    """

    name: str = ""
    description: str = ""
    placemarks: list[Placemark] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.placemarks = list(self.placemarks)

    def __getitem__(self, index: int) -> Placemark:  # type: ignore[override]
        return self.placemarks[index]

    def __setitem__(self, index: int, value: Placemark) -> None:  # type: ignore[override]
        self.placemarks[index] = value

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        del self.placemarks[index]

    def __len__(self) -> int:
        return len(self.placemarks)

    def __iter__(self) -> Iterator[Placemark]:
        return iter(self.placemarks)

    def insert(self, index: int, value: Placemark) -> None:
        self.placemarks.insert(index, value)

    def clear(self) -> None:
        self.placemarks.clear()
