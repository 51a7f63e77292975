"""Command line entry point: load the data, train and report accuracy."""

from __future__ import annotations

import argparse
import sys

from incomelogit.data import DatasetError, load_and_preprocess_dataset, split_data
from incomelogit.model import TrainingError, train_and_tune_model

DEFAULT_DATA_PATH = "adult/adult.data"
DEFAULT_TEST_SIZE = 0.2


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="incomelogit",
        description="Train a logistic regression income classifier.",
    )
    parser.add_argument("data_path", nargs="?", default=DEFAULT_DATA_PATH,
                        help="header-less CSV dataset (default: %(default)s)")
    parser.add_argument("--test-size", type=float, default=DEFAULT_TEST_SIZE,
                        help="fraction of rows held out for testing (default: %(default)s)")
    return parser


def main(argv=None) -> int:
    """Run training and print the best training accuracy."""
    args = _parser().parse_args(argv)
    try:
        features, labels = load_and_preprocess_dataset(args.data_path)
        train_features, train_labels, _, _ = split_data(features, labels, args.test_size)
        _, best_accuracy = train_and_tune_model(train_features, train_labels)
    except (OSError, DatasetError, TrainingError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Model trained successfully!")
    print(f"Best Training Accuracy: {best_accuracy * 100.0:.2f}%")
    return 0


if __name__ == "__main__":
    sys.exit(main())