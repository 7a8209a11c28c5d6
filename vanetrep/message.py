"""Message carried between vehicles, and the coordinate type it uses."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coord:
    """A point in three-dimensional space, in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def distance(self, other: Coord) -> float:
        """Euclidean distance between this point and ``other``."""
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"


@dataclass
class ReputationMessage:
    """A DENM-style frame that carries the sender's reputation value.

    ``timestamp`` is the simulation time at which the frame was stamped;
    ``name`` and ``kind`` identify the frame as an event.
    """

    demo_data: str = ""
    sender_address: int = -1
    serial: int = 0
    reputation_value: float = 0.0
    signature: str = ""
    location: str = ""
    sender_position: Coord = field(default_factory=Coord)
    certificate: str = ""
    ca_public_key: str = ""
    timestamp: float = 0.0
    name: str | None = None
    kind: int = 0

    def dup(self) -> ReputationMessage:
        """Return an independent copy of this message."""
        return dataclasses.replace(self)