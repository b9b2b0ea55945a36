"""Train a tiny sigmoid network and animate every step in the terminal."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

from asciinet.core.entropy import EntropyUnavailableError
from asciinet.core.network import Network
from asciinet.data import DEFAULT_CONFIG, DEFAULT_TRAINER, default_samples
from asciinet.reporting import AsciiRenderer, CsvSink, JsonlSink
from asciinet.training import Trainer, TrainerConfig


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--epochs",
        type=int,
        default=DEFAULT_TRAINER.epochs,
        help="Number of passes over the training set",
    )
    parser.add_argument(
        "--frame-delay",
        type=float,
        default=DEFAULT_TRAINER.frame_delay,
        help="Seconds to pause after each sample (doubled after each epoch)",
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Train headless without drawing the network",
    )
    parser.add_argument("--metrics", type=Path, help="Write per-epoch loss as JSONL")
    parser.add_argument("--metrics-csv", type=Path, help="Write per-epoch loss as CSV")
    return parser.parse_args(argv)


def _format_result(result) -> str:
    payload = {"steps": result.steps, "final_loss": result.final_loss}
    return json.dumps(payload, sort_keys=True)


def main(argv: Iterable[str] | None = None) -> None:
    args = parse_args(argv)
    try:
        trainer_cfg = TrainerConfig(epochs=args.epochs, frame_delay=args.frame_delay)
    except ValueError as exc:
        raise SystemExit(str(exc)) from None

    try:
        network = Network(DEFAULT_CONFIG)
    except EntropyUnavailableError as exc:
        raise SystemExit(f"network initialisation failed: {exc}") from exc

    callbacks: list[object] = []
    if not args.no_render:
        callbacks.append(AsciiRenderer())
    if args.metrics:
        callbacks.append(JsonlSink(args.metrics))
    if args.metrics_csv:
        callbacks.append(CsvSink(args.metrics_csv))

    trainer = Trainer(network, default_samples(), trainer_cfg, callbacks=callbacks)
    result = trainer.run()
    print(_format_result(result))


if __name__ == "__main__":
    main()
