"""Command-line entry point for the duration estimator."""

from __future__ import annotations

import argparse
import pathlib

from cli.app import load_inputs_file, run_cli, show_estimate
from core.calculator import calculate_estimate
from core.presets import DEFAULT_PRESET_ID, get_preset
from core.rules import clamp_input


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Optimistic construction duration estimator")
    parser.add_argument("--preset", help="Preset id from data/presets.json (e.g. optimistic)")
    parser.add_argument("--inputs", help="Path to an exported inputs file (JSON)")
    parser.add_argument("--no-prompt", action="store_true", help="Print the estimate once and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    initial = None
    try:
        if args.inputs:
            initial = load_inputs_file(pathlib.Path(args.inputs).expanduser().resolve())
        elif args.preset:
            initial = get_preset(args.preset).inputs
        if initial is not None:
            calculate_estimate(clamp_input(initial))
    except (OSError, ValueError) as e:
        parser.error(str(e))

    if args.no_prompt:
        show_estimate(clamp_input(initial or get_preset(DEFAULT_PRESET_ID).inputs))
        return

    run_cli(initial, prompt_fields=initial is None)


if __name__ == "__main__":  # pragma: no cover
    main()
