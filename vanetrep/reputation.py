"""Reputation knowledge a vehicle holds about the other vehicles."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

UNKNOWN_SCORE = -1.0
"""Score reported for a node that the table does not know."""

_FIELD_COUNT = 5


@dataclass
class NodeState:
    """What is known about one vehicle.

    ``malicious`` is the node's true nature; ``attacker`` marks it as one
    that launches a Sybil attack.
    """

    node_id: int
    score: float
    attacker: bool = False
    valid_certificate: bool = False
    malicious: bool = False
    likelihood_malicious: float = 0.0
    likelihood_honest: float = 0.0


def _parse_flag(token: str) -> bool:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"expected 0 or 1, got {token!r}") from None
    if value not in (0, 1):
        raise ValueError(f"expected 0 or 1, got {token!r}")
    return value == 1


def parse_reputation_line(line: str) -> NodeState:
    """Parse one line of a reputation file.

    A line holds five whitespace-separated fields: node id, score, a
    status flag, a certificate-validity flag and a second status flag.
    The second status flag supersedes the first and sets both the
    attacker and the malicious marks. Extra fields are ignored.
    """
    tokens = line.split()
    if len(tokens) < _FIELD_COUNT:
        raise ValueError(
            f"reputation line needs {_FIELD_COUNT} fields, got {len(tokens)}: {line!r}"
        )
    id_text, score_text, first_status, cert_text, status_text = tokens[:_FIELD_COUNT]
    try:
        node_id = int(id_text)
    except ValueError:
        raise ValueError(f"invalid node id {id_text!r}") from None
    try:
        score = float(score_text)
    except ValueError:
        raise ValueError(f"invalid score {score_text!r}") from None
    _parse_flag(first_status)
    valid_certificate = _parse_flag(cert_text)
    status = _parse_flag(status_text)
    return NodeState(
        node_id=node_id,
        score=score,
        attacker=status,
        valid_certificate=valid_certificate,
        malicious=status,
    )


@dataclass
class ReputationTable:
    """Ordered collection of node states; the first entry for an id wins."""

    nodes: list[NodeState] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ReputationTable:
        """Build a table from reputation-file lines, skipping blank ones."""
        return cls([parse_reputation_line(line) for line in lines if line.strip()])

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> ReputationTable:
        """Read a reputation file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_lines(handle)

    def __iter__(self) -> Iterator[NodeState]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return any(node.node_id == node_id for node in self.nodes)

    def get(self, node_id: int) -> NodeState | None:
        """State of ``node_id``, or None if the node is unknown."""
        return next((node for node in self.nodes if node.node_id == node_id), None)

    def score_of(self, node_id: int) -> float:
        """Reputation score of ``node_id``, or -1.0 if the node is unknown."""
        node = self.get(node_id)
        return UNKNOWN_SCORE if node is None else node.score

    def update(self, node_id: int, score: float) -> None:
        """Set the score of ``node_id``, adding an honest entry if it is unknown."""
        node = self.get(node_id)
        if node is None:
            self.nodes.append(NodeState(node_id=node_id, score=score))
        else:
            node.score = score

    def is_honest(self, node_id: int) -> bool:
        """Whether ``node_id`` is known and not malicious."""
        node = self.get(node_id)
        return node is not None and not node.malicious

    def certificate_valid(self, node_id: int) -> bool:
        """Whether ``node_id`` is known and holds a valid certificate."""
        node = self.get(node_id)
        return node is not None and node.valid_certificate