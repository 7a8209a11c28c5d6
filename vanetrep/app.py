"""Vehicle application that filters warning messages by sender reputation."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import NamedTuple, Union

from vanetrep.message import ReputationMessage
from vanetrep.metrics import DecisionStats
from vanetrep.reputation import ReputationTable

ACCIDENT_TEXT = "Accident ahead, change route."
CLEAR_TEXT = "No accident, road is clear."
DETOUR_ROUTE = "-28822164#4"

SEND_DENM = "SendDENMMessage"
SYBIL_ATTACK_START = "SybilAttackStart"
SYBIL_ATTACK_END = "SybilAttackEnd"

SYBIL_ID_FLOOR = 100
SYBIL_ID_OFFSET = 500
SYBIL_IDENTITIES = 5
SYBIL_SCORE_PENALTY = 0.1

DENM_INTERVAL = 60.0
RELAY_INTERVAL = 1.0
RELAY_LIMIT = 3
FORWARD_DELAY = 2.0
FORWARD_JITTER = (0.01, 0.2)
STANDSTILL_SPEED = 1.0
STANDSTILL_TIME = 20.0

Event = Union[str, ReputationMessage]


def is_sybil_sender(node_id: int) -> bool:
    """Whether a sender address lies in the range used by Sybil identities."""
    return node_id >= SYBIL_ID_FLOOR


@dataclass
class AppConfig:
    """Parameters of one vehicle's application."""

    threshold_score: float = 0.5
    has_accident: bool = False
    mrv: float = 0.0
    attack_start: float = 0.0
    attack_duration: float = 0.0
    seed: int | None = None


class Decision(enum.Enum):
    """Outcome of judging one received message."""

    TRUE_POSITIVE = "true_positive"
    FALSE_POSITIVE = "false_positive"
    TRUE_NEGATIVE = "true_negative"
    FALSE_NEGATIVE = "false_negative"
    SYBIL = "sybil"


class ScheduledEvent(NamedTuple):
    """An event the application asked to receive at a later time."""

    time: float
    event: Event


class ReputationApp:
    """One vehicle: sends warnings, judges received ones and relays them.

    Messages handed to the radio are collected in ``sent``; events the
    application wants delivered back to itself are collected in
    ``scheduled`` and are fed in through :meth:`handle_self_message`.
    """

    def __init__(self, node_id: int, config: AppConfig, table: ReputationTable) -> None:
        self.node_id = node_id
        self.config = config
        self.table = table
        self.stats = DecisionStats()
        self.sent: list[ReputationMessage] = []
        self.scheduled: list[ScheduledEvent] = []
        self.route_changes: list[str] = []
        self.route_change_requested = False
        self.accident_detected = False
        self.sent_message = False
        self.last_drove_at = 0.0
        self._rng = random.Random(config.seed)

        own = table.get(node_id)
        self.attacker = own.attacker if own is not None else False
        self.score = own.score if own is not None else None

        self._schedule(0.0, SEND_DENM)
        if self.attacker:
            self._schedule(config.attack_start, SYBIL_ATTACK_START)

    def _schedule(self, time: float, event: Event) -> None:
        self.scheduled.append(ScheduledEvent(time, event))

    def _send(self, message: ReputationMessage) -> None:
        self.sent.append(message)

    def on_message(self, message: ReputationMessage, now: float, road_id: str) -> Decision:
        """Judge a received message and act on it; ``road_id`` is where this vehicle is."""
        sender = message.sender_address
        self.stats.messages_received += 1

        if is_sybil_sender(sender):
            self.stats.invalid_messages_received += 1
            return Decision.SYBIL

        sender_score = self.table.score_of(sender)
        certificate_valid = self.table.certificate_valid(sender)
        honest = self.table.is_honest(sender)

        if sender_score >= self.config.threshold_score and certificate_valid:
            self.table.update(sender, sender_score)
            if honest:
                self.stats.true_positive += 1
                self.stats.correct_decisions += 1
                self._forward(message, now)
                if road_id == message.demo_data:
                    self._change_route(message.demo_data)
                return Decision.TRUE_POSITIVE
            self.stats.false_positive += 1
            self._forward(message, now)
            self.stats.forwarded_messages += 1
            return Decision.FALSE_POSITIVE

        self.stats.invalid_messages_received += 1
        if honest:
            self.stats.false_negative += 1
            return Decision.FALSE_NEGATIVE
        self.stats.true_negative += 1
        return Decision.TRUE_NEGATIVE

    def _forward(self, message: ReputationMessage, now: float) -> None:
        if self.sent_message:
            return
        self.sent_message = True
        relayed = message.dup()
        relayed.serial = 2
        relayed.sender_address = self.node_id
        relayed.timestamp = now
        self._schedule(now + FORWARD_DELAY + self._rng.uniform(*FORWARD_JITTER), relayed)
        self.stats.forwarded_messages += 1
        self.stats.valid_messages_received += 1

    def _change_route(self, accident_route: str) -> None:
        self.route_changes.append(accident_route)
        self.route_change_requested = True

    def send_denm(self, now: float) -> ReputationMessage:
        """Broadcast this vehicle's warning and return it."""
        text = ACCIDENT_TEXT if self.table.is_honest(self.node_id) else CLEAR_TEXT
        message = ReputationMessage(
            demo_data=text,
            sender_address=self.node_id,
            timestamp=now,
            reputation_value=self.table.score_of(self.node_id),
        )
        self._send(message)
        self.sent_message = True
        self.stats.messages_sent += 1
        return message

    def simulate_sybil_attack(self, now: float) -> list[ReputationMessage]:
        """Send false warnings under forged identities, losing reputation for each."""
        messages = []
        for offset in range(SYBIL_IDENTITIES):
            message = ReputationMessage(
                demo_data=CLEAR_TEXT,
                sender_address=self.node_id + SYBIL_ID_OFFSET + offset,
                timestamp=now,
            )
            self._send(message)
            score = max(self.table.score_of(self.node_id) - SYBIL_SCORE_PENALTY, 0.0)
            self.table.update(self.node_id, score)
            self.stats.messages_sent += 1
            messages.append(message)
        return messages

    def handle_self_message(self, event: Event, now: float) -> None:
        """Process an event that was scheduled for ``now``."""
        if isinstance(event, ReputationMessage):
            self._send(event.dup())
            event.serial += 1
            if event.serial < RELAY_LIMIT:
                self._schedule(now + RELAY_INTERVAL, event)
        elif event == SYBIL_ATTACK_START:
            self.simulate_sybil_attack(now)
            self._schedule(now + self.config.attack_duration, SYBIL_ATTACK_END)
        elif event == SYBIL_ATTACK_END:
            pass
        elif event == SEND_DENM:
            self.send_denm(now)
            self._schedule(now + DENM_INTERVAL, SEND_DENM)
        else:
            raise ValueError(f"unknown self event: {event!r}")

    def position_update(self, now: float, speed: float) -> bool:
        """React to a new position; returns True if an accident was reported."""
        if (
            speed < STANDSTILL_SPEED
            and now - self.last_drove_at >= STANDSTILL_TIME
            and self.config.has_accident
        ):
            self.accident_detected = True
            self.send_denm(now)
            return True
        self.last_drove_at = now
        return False

    def finish(self) -> list[tuple[str, float]]:
        """Scalar results of the run."""
        return self.stats.summary()