"""
State diff computation for efficient updates.

Snapshots are never mutated, so any two of them can be compared after the
fact, e.g. to replay a game as a stream of patches.
"""

import copy
from typing import Any, Dict, List, Optional, Sequence

from .ids import PlayerId
from .models import GameState
from .serialization import sanitize_state

Op = Dict[str, Any]

TOP_LEVEL_FIELDS = [
    "phase", "round_number", "turn", "revolution_active", "last_play",
    "discard_pile", "scores",
]

PLAYER_FIELDS = [
    "name", "seat", "role", "role_label", "finishing_position", "passed",
    "connection", "hand_count",
]

# Ops on these paths change the whole picture for a client.
FULL_STATE_PATHS = ("/phase", "/history")


def _changed_fields(old: Dict[str, Any], new: Dict[str, Any], fields: Sequence[str], prefix: str) -> List[Op]:
    return [
        {"op": "replace", "path": f"{prefix}/{name}", "value": new.get(name)}
        for name in fields
        if old.get(name) != new.get(name)
    ]


def _history_ops(old_history: List[Any], new_history: List[Any]) -> List[Op]:
    """History is most recent first, so normally only a head of new plays appears."""
    added = len(new_history) - len(old_history)
    if added > 0 and new_history[added:] == old_history:
        return [{"op": "add", "path": "/new_plays", "value": new_history[:added]}]
    if new_history != old_history:
        return [{"op": "replace", "path": "/history", "value": new_history}]
    return []


def _player_ops(old_players: Dict[str, Any], new_players: Dict[str, Any]) -> List[Op]:
    ops: List[Op] = []
    for key in sorted(old_players.keys() | new_players.keys()):
        before = old_players.get(key)
        after = new_players.get(key)
        path = f"/players/{key}"
        if before is None:
            ops.append({"op": "add", "path": path, "value": after})
        elif after is None:
            ops.append({"op": "remove", "path": path})
        elif before != after:
            fields = PLAYER_FIELDS
            if "hand" in before or "hand" in after:
                fields = PLAYER_FIELDS + ["hand"]
            ops.extend(_changed_fields(before, after, fields, path))
    return ops


def compute_diff(
    old_state: Optional[GameState],
    new_state: GameState,
    viewer_id: Optional[PlayerId] = None
) -> List[Op]:
    """
    Compute a JSON Patch-style diff between two states.

    Args:
        old_state: Previous game state, None for the first one sent
        new_state: New game state
        viewer_id: ID of the player viewing the state

    Returns:
        List of patch operations
    """
    if old_state is None:
        return []

    before = sanitize_state(old_state, viewer_id)
    after = sanitize_state(new_state, viewer_id)

    return (
        _changed_fields(before, after, TOP_LEVEL_FIELDS, "")
        + _history_ops(before["history"], after["history"])
        + _player_ops(before["players"], after["players"])
    )


def apply_diff(state: Dict[str, Any], ops: List[Op]) -> Dict[str, Any]:
    """
    Apply a diff to a sanitized state dictionary.

    ``/new_plays`` prepends to the history; everything else is a plain
    replace, add or remove at its path. The input is left untouched.
    """
    patched = copy.deepcopy(state)

    for op in ops:
        keys = [key for key in op["path"].split("/") if key]
        if keys == ["new_plays"]:
            patched["history"] = op["value"] + patched.get("history", [])
            continue
        if not keys:
            continue

        if op["op"] in ("replace", "add"):
            parent = _walk(patched, keys[:-1], create=True)
            parent[keys[-1]] = op.get("value")
        elif op["op"] == "remove":
            parent = _walk(patched, keys[:-1], create=False)
            if parent is not None:
                parent.pop(keys[-1], None)
        else:
            raise ValueError(f"Unknown patch operation: {op['op']}")

    return patched


def _walk(obj: Dict[str, Any], keys: List[str], create: bool) -> Optional[Dict[str, Any]]:
    """Follow ``keys`` into nested dicts, creating missing levels if asked."""
    current = obj
    for key in keys:
        if key not in current:
            if not create:
                return None
            current[key] = {}
        current = current[key]
    return current


def should_send_full_state(ops: List[Op], threshold: int = 10) -> bool:
    """Whether a full state is cheaper to send than this diff."""
    return len(ops) > threshold or any(op["path"] in FULL_STATE_PATHS for op in ops)
