"""Command line entry point: add two numbers and print the result as JSON."""

from __future__ import annotations

import argparse
import datetime as dt
import json
from pathlib import Path

from .common import append_event, check_run_id, load_config, parse_number
from .math_ops import sum as sum_


def fail(msg: str) -> int:
    print(json.dumps({"ok": False, "error": msg}, ensure_ascii=False))
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sumcalc", description="Add two numbers.")
    parser.add_argument("a", help="first operand")
    parser.add_argument("b", help="second operand")
    parser.add_argument("--config", default="", help="YAML config path (default: config/sumcalc.yaml)")
    parser.add_argument("--run-id", default=dt.datetime.now().strftime("%Y%m%d-%H%M%S"))
    parser.add_argument("--output", default="")
    args = parser.parse_args(argv)

    root = Path.cwd()
    try:
        config = load_config(root, Path(args.config) if args.config else None)
    except (OSError, ValueError) as exc:
        return fail(str(exc))

    try:
        a = parse_number(args.a)
        b = parse_number(args.b)
        if config["events"]["enabled"]:
            check_run_id(args.run_id)
    except ValueError as exc:
        return fail(str(exc))

    payload = {"ok": True, "a": a, "b": b, "sum": sum_(a, b)}
    try:
        line = json.dumps(payload, ensure_ascii=False, allow_nan=False)
    except ValueError:
        return fail(f"sum is not finite: {args.a} + {args.b}")

    try:
        if args.output:
            out_path = Path(args.output)
            out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        if config["events"]["enabled"]:
            state_dir = Path(config["events"]["state_dir"])
            if not state_dir.is_absolute():
                state_dir = root / state_dir
            append_event(state_dir, args.run_id, {"type": "sum", "run_id": args.run_id, "a": a, "b": b, "sum": payload["sum"]})
    except OSError as exc:
        return fail(str(exc))
    print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
