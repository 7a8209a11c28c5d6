# vanetrep

A reputation-based trust model for vehicle-to-vehicle hazard warnings.
Each vehicle keeps a table of known nodes with their reputation score,
certificate validity and honesty status. It judges every incoming DENM
(hazard warning) message by its sender: it accepts and relays it, or
it rejects it. Each judgement is counted as a true/false
positive/negative, and the counts are turned into precision, recall,
specificity and F1 score at the end of a run.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reputation file

A reputation file has one line per node. Each line has five
whitespace-separated fields:

```
<node id> <score> <status> <certificate valid> <status>
```

The flags are written as `0` or `1`. The last field marks the node as
malicious and as a Sybil attacker. The first status field must be a
valid flag, but its value is not used. Blank lines are skipped and extra
fields are ignored. A malformed line raises `ValueError`.

```python
from vanetrep.reputation import ReputationTable, parse_reputation_line

table = ReputationTable.load("reputation.txt")   # OSError if it cannot be opened
node = parse_reputation_line("3 0.8 0 1 0")
```

`ReputationTable` (module `vanetrep.reputation`) holds `NodeState`
entries in order. When an id appears more than once, the first entry is
used. It provides the following:

- `get(node_id)` returns the state, or `None`.
- `score_of(node_id)` returns the score, or `-1.0` for an unknown node.
- `update(node_id, score)` sets the score. For an unknown node it first
  adds an honest entry.
- `is_honest(node_id)` and `certificate_valid(node_id)` both return
  `False` for an unknown node.
- `ReputationTable.from_lines(lines)` builds a table from lines of text.
  The table also supports `len`, iteration and `in` (by node id).

## The vehicle application

```python
from vanetrep.app import AppConfig, ReputationApp
from vanetrep.message import ReputationMessage
from vanetrep.reputation import ReputationTable

table = ReputationTable.load("reputation.txt")
app = ReputationApp(node_id=3, config=AppConfig(threshold_score=0.5, seed=1), table=table)

msg = ReputationMessage(demo_data="edge-7", sender_address=1)
decision = app.on_message(msg, now=12.0, road_id="edge-7")
print(decision)          # a vanetrep.app.Decision

print(app.finish())      # list of (name, value) scalars
```

`AppConfig` has these fields: `threshold_score`, `has_accident`, `mrv`,
`attack_start`, `attack_duration` and `seed`. The `seed` value seeds the
forwarding jitter.

`ReputationApp.on_message(message, now, road_id)` returns a `Decision`:

- A sender id of 100 or more (`is_sybil_sender`) is rejected at once as
  `Decision.SYBIL`.
- A sender whose score is at least `threshold_score` and whose
  certificate is valid is accepted. If the sender is honest the result is
  `TRUE_POSITIVE`. If the sender is malicious it is `FALSE_POSITIVE`.
  An accepted message is relayed only once per vehicle. No relay happens
  if the vehicle has already sent a message. The relay copy gets serial
  2, the vehicle's own id and the current time, and is scheduled
  2 s + uniform(0.01, 0.2) s later.
- For an honest sender whose message is accepted, when `road_id` equals
  the message's `demo_data`, a route change is recorded in
  `app.route_changes`.
- Any other sender is rejected. An honest sender gives `FALSE_NEGATIVE`
  and a malicious one gives `TRUE_NEGATIVE`.

The application also drives the sending side:

- `send_denm(now)` broadcasts this vehicle's warning. An honest node
  sends "Accident ahead, change route."; a malicious one sends
  "No accident, road is clear.". The warning carries the node's own
  score.
- `simulate_sybil_attack(now)` sends five "road is clear" messages under
  the forged ids `node_id + 500 … node_id + 504`. Each one lowers the
  node's own score by 0.1, with a floor of 0.
- `position_update(now, speed)` reports an accident with `send_denm`
  and returns `True` when all of these hold: the speed is below 1, the
  vehicle has stood still for at least 20 s, and `has_accident` is set.
- `handle_self_message(event, now)` processes a scheduled event. The
  event is either a message (resent until its serial reaches 3, once per
  second) or one of the names `"SendDENMMessage"` (repeats every 60 s),
  `"SybilAttackStart"` or `"SybilAttackEnd"`. Any other name raises
  `ValueError`.

Messages handed to the radio are collected in `app.sent`. Events the
application wants delivered back to itself are collected in
`app.scheduled` as `(time, event)` pairs. On creation, the application
schedules a DENM at time 0. If the node is an attacker, it also
schedules the attack start at `attack_start`.

## Metrics

`vanetrep.metrics.compute_rates(tp, fp, tn, fn)` returns precision,
recall, specificity and F1 score as a named tuple. A rate whose
denominator is zero is `0.0`. `DecisionStats` holds a vehicle's
counters. `DecisionStats.summary()` (also returned by
`ReputationApp.finish()`) lists the reported scalars in order. The names
`TruePositive` and `FalseNegative` appear twice: first from the decision
counts, then from the correct-decision count.

## Messages and fields

`vanetrep.message.ReputationMessage` is a dataclass with `dup()` for an
independent copy. `Coord` is a 3-D point with `distance(other)`.

`vanetrep.fields` describes the message fields by their wire names
(`demoData`, `senderAddress`, …). It provides the following:

- `field_names()` lists the names.
- `find_field(name)` returns the position of a field.
- `field_type(name)` returns the type string of a field.
- `is_editable(name)` says whether a field can be set.
- `field_value_as_string(message, name)` reads a field as text.
- `set_field_from_string(message, name, value)` sets a field from text.

An unknown name raises `KeyError`. Setting a read-only field
(`senderAddress`, `senderPosition`), or a value that does not parse,
raises `ValueError`.

## What this package does not do

There is no radio, no mobility or traffic model and no event loop. The
caller delivers messages to `on_message` and feeds the entries of
`scheduled` back through `handle_self_message`. Route changes are
recorded only and are never applied to a vehicle. Certificates are not
checked cryptographically: their validity comes from the reputation
file. There is no command-line tool.