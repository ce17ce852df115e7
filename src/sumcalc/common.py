"""Shared helpers for the sumcalc CLI."""

from __future__ import annotations

import datetime as dt
import json
import math
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG = Path("config") / "sumcalc.yaml"


def now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def parse_number(raw: str) -> int | float:
    text = (raw or "").strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"not a number: {raw}") from None
    # inf and nan have no JSON representation
    if not math.isfinite(value):
        raise ValueError(f"not a number: {raw}")
    return value


def load_config(root: Path, path: Path | None = None) -> dict[str, Any]:
    """Read the YAML config, falling back to defaults when the default file is absent."""
    config: dict[str, Any] = {"events": {"enabled": False, "state_dir": "state"}}
    if path is None:
        path = root / DEFAULT_CONFIG
        if not path.exists():
            return config
    elif not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"{path} is invalid: {exc}") from exc
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ValueError(f"{path} is invalid")
    events = data.get("events", {})
    if events is None:
        events = {}
    if not isinstance(events, dict):
        raise ValueError("events must be a map")
    if "enabled" in events:
        if not isinstance(events["enabled"], bool):
            raise ValueError("events.enabled must be a boolean")
        config["events"]["enabled"] = events["enabled"]
    if events.get("state_dir"):
        config["events"]["state_dir"] = str(events["state_dir"])
    return config


def check_run_id(run_id: str) -> str:
    if not run_id or run_id in {".", ".."} or "/" in run_id or "\\" in run_id:
        raise ValueError(f"invalid run id: {run_id!r}")
    return run_id


def ensure_event_log(state_dir: Path, run_id: str) -> Path:
    path = state_dir / "runs" / check_run_id(run_id) / "events.jsonl"
    path.parent.mkdir(parents=True, exist_ok=True)
    if not path.exists():
        path.write_text("", encoding="utf-8")
    return path


def append_event(state_dir: Path, run_id: str, payload: dict[str, Any]) -> None:
    log_path = ensure_event_log(state_dir, run_id)
    record = {"timestamp": now_iso(), **payload}
    with log_path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(record, ensure_ascii=False) + "\n")
