"""Counters kept by a vehicle and the scalar results derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Rates(NamedTuple):
    """Classification rates derived from decision counts."""

    precision: float
    recall: float
    specificity: float
    f1_score: float


def compute_rates(tp: float, fp: float, tn: float, fn: float) -> Rates:
    """Precision, recall, specificity and F1 score; a rate with no data is 0."""
    precision = tp / (tp + fp) if tp + fp > 0 else 0.0
    recall = tp / (tp + fn) if tp + fn > 0 else 0.0
    specificity = tn / (tn + fp) if tn + fp > 0 else 0.0
    if precision + recall > 0:
        f1_score = 2 * (precision * recall) / (precision + recall)
    else:
        f1_score = 0.0
    return Rates(precision, recall, specificity, f1_score)


@dataclass
class DecisionStats:
    """Message and decision counters collected during a run."""

    messages_sent: int = 0
    messages_received: int = 0
    valid_messages_received: int = 0
    invalid_messages_received: int = 0
    forwarded_messages: int = 0
    response_time: float = 0.0
    correct_decisions: int = 0
    true_positive: int = 0
    false_positive: int = 0
    true_negative: int = 0
    false_negative: int = 0
    high_rep_count: int = 0
    low_rep_count: int = 0

    def summary(self) -> list[tuple[str, float]]:
        """Named scalar results, in the order they are recorded.

        Some names occur twice; the later entry is the one reported last.
        """
        received = self.messages_received
        results: list[tuple[str, float]] = [
            ("MessagesSent", self.messages_sent),
            ("MessagesReceived", received),
            ("ValidMessagesReceived", self.valid_messages_received),
            ("InvalidMessagesReceived", self.invalid_messages_received),
            ("ForwardedMessages", self.forwarded_messages),
        ]
        if received > 0:
            results.append(("AveragePropagationDelay", self.response_time / received))

        tp = float(self.true_positive)
        fp = float(self.false_positive)
        tn = float(self.true_negative)
        fn = float(self.false_negative)
        rates = compute_rates(tp, fp, tn, fn)
        results += [
            ("TruePositive", tp),
            ("FalsePositive", fp),
            ("TrueNegative", tn),
            ("FalseNegative", fn),
            ("Precision", rates.precision),
            ("Recall (Sensitivity)", rates.recall),
            ("Specificity", rates.specificity),
            ("F1 Score", rates.f1_score),
        ]
        if received > 0:
            results.append(("AverageResponseTime", self.response_time / received))
            results.append(("DecisionAccuracy", self.correct_decisions / received))
        results += [
            ("TruePositive", self.correct_decisions),
            ("FalseNegative", received - self.correct_decisions),
            ("HighReputationMessages", self.high_rep_count),
            ("LowReputationMessages", self.low_rep_count),
        ]
        return results