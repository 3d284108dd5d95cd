"""Basic data structures."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class Point:
    """A junction box position. Its identity is its index in the input."""

    x: int
    y: int
    z: int

    def coordinates(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.z


class Edge(NamedTuple):
    """Candidate connection between two points, ``left < right``."""

    distance: int
    left: int
    right: int

    @property
    def pair(self) -> Tuple[int, int]:
        return self.left, self.right


class ConnectKind(enum.Enum):
    CREATED = "created"
    EXTENDED = "extended"
    MERGED = "merged"
    UNCHANGED = "unchanged"


@dataclass
class Connection:
    """Outcome of :meth:`ClusterForest.connect`.

    ``cluster`` is the live member list of the slot that changed, or ``None``
    when nothing changed.
    """

    kind: ConnectKind
    slot: Optional[int] = None
    cluster: Optional[List[int]] = None

    @property
    def merged(self) -> bool:
        """True when an existing circuit gained members."""
        return self.kind in (ConnectKind.EXTENDED, ConnectKind.MERGED)

    @property
    def size(self) -> int:
        return len(self.cluster) if self.cluster is not None else 0


@dataclass
class ClusterForest:
    """Partition of point indices into circuits stored in stable slots.

    Slots are never compacted: a slot absorbed by a merge stays in the arena
    as an empty list so every other slot index keeps its meaning.
    """

    size: int
    slots: List[List[int]] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self._slot_of: List[Optional[int]] = [None] * self.size

    def connect(self, point_a: int, point_b: int) -> Connection:
        assert 0 <= point_a < self.size, f"point index {point_a} out of range"
        assert 0 <= point_b < self.size, f"point index {point_b} out of range"
        assert point_a != point_b, f"cannot connect point {point_a} to itself"

        slot_a = self._slot_of[point_a]
        slot_b = self._slot_of[point_b]

        if slot_a is None and slot_b is None:
            slot = len(self.slots)
            self.slots.append([point_a, point_b])
            self._slot_of[point_a] = slot
            self._slot_of[point_b] = slot
            return Connection(ConnectKind.CREATED, slot, self.slots[slot])

        if slot_a is None or slot_b is None:
            slot = slot_a if slot_a is not None else slot_b
            newcomer = point_a if slot_a is None else point_b
            self.slots[slot].append(newcomer)
            self._slot_of[newcomer] = slot
            return Connection(ConnectKind.EXTENDED, slot, self.slots[slot])

        if slot_a == slot_b:
            return Connection(ConnectKind.UNCHANGED)

        survivor, absorbed = min(slot_a, slot_b), max(slot_a, slot_b)
        moved = self.slots[absorbed]
        self.slots[survivor].extend(moved)
        for point in moved:
            self._slot_of[point] = survivor
        self.slots[absorbed] = []
        return Connection(ConnectKind.MERGED, survivor, self.slots[survivor])

    def slot_of(self, point: int) -> Optional[int]:
        return self._slot_of[point]

    def cluster_of(self, point: int) -> Optional[List[int]]:
        slot = self._slot_of[point]
        if slot is None:
            return None
        return self.slots[slot]

    def clusters(self) -> List[List[int]]:
        """Non-empty circuits in slot order."""
        return [members for members in self.slots if members]

    def sizes(self) -> List[int]:
        return [len(members) for members in self.clusters()]

    @property
    def slot_count(self) -> int:
        return len(self.slots)

    @property
    def member_count(self) -> int:
        return sum(len(members) for members in self.slots)

    def is_complete(self) -> bool:
        return self.size > 0 and any(len(members) == self.size for members in self.slots)

    def __len__(self) -> int:
        return len(self.clusters())

    def check_invariants(self) -> None:
        """Raise ``AssertionError`` on the first inconsistency found."""

        seen: dict[int, int] = {}
        for slot, members in enumerate(self.slots):
            for point in members:
                if point in seen:
                    raise AssertionError(f"point {point} appears in slots {seen[point]} and {slot}")
                seen[point] = slot
                if self._slot_of[point] != slot:
                    raise AssertionError(
                        f"point {point} is stored in slot {slot} but mapped to {self._slot_of[point]}"
                    )
        for point, slot in enumerate(self._slot_of):
            if slot is not None and point not in seen:
                raise AssertionError(f"point {point} is mapped to slot {slot} but missing from it")
