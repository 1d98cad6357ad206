from __future__ import annotations

from typing import Any, Dict, List, Optional

from plan_mail.config.constants import DAY_EXERCISE_KEYS, DAY_TITLE_KEYS, NAME_KEYS, PLAN_KEYS


def _lookup(source: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = source.get(key)
        if value not in (None, ""):
            return value
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _split_lines(value: Any) -> List[str]:
    """Split a free-text field on line breaks; empty values give no lines."""
    text = _as_text(value)
    if not text:
        return []
    return [line.rstrip("\r") for line in text.split("\n")]


def extract_email(payload: dict[str, Any]) -> Optional[str]:
    email = payload.get("email")
    if email is None:
        return None
    email = _as_text(email).strip()
    return email or None


def extract_plan(payload: dict[str, Any]) -> Any:
    return _lookup(payload, *PLAN_KEYS)


def extract_display_name(payload: dict[str, Any]) -> Optional[str]:
    answers = payload.get("answers")
    name = None
    if isinstance(answers, dict):
        name = _lookup(answers, "name")
    if name is None:
        name = _lookup(payload, *NAME_KEYS)
    if name is None:
        return None
    name = _as_text(name).strip()
    return name or None


def day_title(day: Any) -> str:
    if not isinstance(day, dict):
        return _as_text(day)
    return _as_text(_lookup(day, *DAY_TITLE_KEYS))


def day_exercises(day: Any) -> List[Any]:
    if not isinstance(day, dict):
        return []
    exercises = _lookup(day, *DAY_EXERCISE_KEYS)
    if not isinstance(exercises, list):
        return []
    return exercises


def exercise_fields(exercise: Any) -> Dict[str, str]:
    if not isinstance(exercise, dict):
        return {"name": _as_text(exercise), "sets": "", "reps": "", "time": "", "how_to": ""}
    return {
        "name": _as_text(exercise.get("name")),
        "sets": _as_text(exercise.get("sets")),
        "reps": _as_text(exercise.get("reps")),
        "time": _as_text(exercise.get("time")),
        "how_to": _as_text(exercise.get("howTo")),
    }
