from __future__ import annotations

import argparse
import logging
import time
from collections import Counter
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from snapper.datasets import load_snapper_dataset
from snapper.logging_config import LEVEL_NAMES, configure_logging
from snapper.matching import Scan, TargetScanner

logger = logging.getLogger("snapper.scan")


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scan a snapper image for every target at every offset.")
    parser.add_argument(
        "--dataset",
        type=str,
        choices=("challenge", "strict"),
        default="challenge",
        help="Named preset controlling default paths and confidence.",
    )
    parser.add_argument(
        "--data-root",
        type=Path,
        default=None,
        help="Root directory containing image/ and targets/ folders. Defaults depend on --dataset.",
    )
    parser.add_argument(
        "--image-name",
        type=str,
        default=None,
        help="Snapper image filename inside image/. Auto-detected when a single file is present.",
    )
    parser.add_argument(
        "--minimum-confidence",
        type=float,
        default=None,
        help="Fraction of occupied target cells that must match (0-1). Defaults depend on --dataset.",
    )
    parser.add_argument(
        "--blank-character",
        type=str,
        default=" ",
        help="Character treated as empty background in target files.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="File that mirrors everything printed to the console. Defaults depend on --dataset.",
    )
    parser.add_argument(
        "--only-found",
        action="store_true",
        help="Report only the offsets where a target was found.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=LEVEL_NAMES,
        help="Logging level for console and log file.",
    )
    return parser.parse_args()


def report(scan: Scan, only_found: bool) -> None:
    if scan.target_found or not only_found:
        logger.info(scan.summary())


def run() -> None:
    args = parse_arguments()
    dataset_defaults = {
        "challenge": {
            "root": Path("data/snapper"),
            "minimum_confidence": 0.7,
            "log_file": Path("artifacts/scan_results.txt"),
        },
        "strict": {
            "root": Path("data/snapper"),
            "minimum_confidence": 1.0,
            "log_file": Path("artifacts/scan_results_strict.txt"),
        },
    }

    defaults = dataset_defaults[args.dataset]
    data_root = Path(args.data_root) if args.data_root else defaults["root"]
    minimum_confidence = (
        args.minimum_confidence if args.minimum_confidence is not None else defaults["minimum_confidence"]
    )
    log_file = args.log_file if args.log_file is not None else defaults["log_file"]

    configure_logging(level=args.log_level, log_file=log_file)

    dataset = load_snapper_dataset(
        root=data_root,
        image_name=args.image_name,
        blank_character=args.blank_character,
    )
    scanner = TargetScanner(minimum_confidence=minimum_confidence)

    logger.info("%s: %s", dataset.image.name, dataset.image.dimensions)
    found: Counter[str] = Counter()
    scanned = 0
    start = time.perf_counter()

    for target in dataset.targets:
        for horizontal, vertical in scanner.valid_offsets(dataset.image, target):
            scan = scanner.scan(dataset.image, target, horizontal, vertical)
            scanned += 1
            if scan.target_found:
                found[target.name] += 1
            report(scan, args.only_found)

    duration_ms = (time.perf_counter() - start) * 1000.0

    logger.info("")
    logger.info("Summary")
    logger.info("-" * 72)
    logger.info("Windows scanned    : %d", scanned)
    logger.info("Minimum confidence : %.0f%%", 100 * minimum_confidence)
    for target in dataset.targets:
        logger.info("%-18s : %d found", target.name, found[target.name])
    logger.info("Elapsed (ms)       : %.2f", duration_ms)


if __name__ == "__main__":
    run()
