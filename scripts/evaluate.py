#!/usr/bin/env python3
"""
Evaluation script for multi-label predictions.

This script scores a prediction matrix against ground truth:
1. Load ground truth labels (a dataset CSV or a plain label matrix CSV)
2. Load predictions (binary labels or real-valued scores, same columns)
3. Compute all metrics (example-based, ranking, macro/micro)
4. Print a summary and per-label table
5. Optionally save the metrics to JSON

Usage:
    python scripts/evaluate.py --targets data/emotions-test.csv --label-amount 6 \
        --predictions predictions.csv
    python scripts/evaluate.py --targets labels.csv --predictions scores.csv --threshold 0.4
    python scripts/evaluate.py --help

Arguments:
    --targets: CSV with ground truth (labels selected with the label options)
    --predictions: CSV with one column per label, same row order as targets
    --config: Path to configuration file (optional)
    --threshold: Classification threshold (default: from config, 0.5)
    --metrics: Subset of metrics to compute
    --output: JSON file to write the metrics to
"""

import argparse
import logging
import sys
from pathlib import Path

import pandas as pd

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from labelscope.data.dataset import MultiLabelDataset
from labelscope.evaluation.metrics import (
    ALL_METRICS,
    compute_per_label_metrics,
    evaluate_dataset,
)
from labelscope.exceptions import LabelscopeError
from labelscope.utils.config import (
    DEFAULT_CONFIG,
    get_config_value,
    load_config,
    setup_logging,
    validate_config,
)
from labelscope.utils.reporting import format_metrics, save_json

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Evaluate multi-label predictions against ground truth',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument(
        '--targets',
        type=str,
        required=True,
        help='CSV file with the ground truth'
    )

    parser.add_argument(
        '--predictions',
        type=str,
        required=True,
        help='CSV file with one prediction column per label'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to configuration file'
    )

    labels = parser.add_argument_group('label selection (ground truth CSV)')
    labels.add_argument('--label-indices', type=int, nargs='+', default=None,
                        help='0-based positions of the label columns')
    labels.add_argument('--label-names', type=str, nargs='+', default=None,
                        help='Names of the label columns')
    labels.add_argument('--label-amount', type=int, default=None,
                        help='Number of trailing columns that are labels')
    labels.add_argument('--label-file', type=str, default=None,
                        help='File listing the label names')

    parser.add_argument(
        '--threshold',
        type=float,
        default=None,
        help='Classification threshold for scores (overrides config)'
    )

    parser.add_argument(
        '--metrics',
        type=str,
        nargs='+',
        default=None,
        choices=list(ALL_METRICS),
        help='Metrics to compute (default: all)'
    )

    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='JSON file to save the metrics to'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        help='Logging level (overrides config)'
    )

    return parser.parse_args(argv)


def main(argv=None):
    """Main evaluation function."""
    args = parse_args(argv)

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    validate_config(config)
    setup_logging(config, level=args.log_level)

    threshold = args.threshold
    if threshold is None:
        threshold = get_config_value(config, 'evaluation.threshold', 0.5)
    metrics = args.metrics or get_config_value(config, 'evaluation.metrics')

    label_options = {
        'label_indices': args.label_indices,
        'label_names': args.label_names,
        'label_amount': args.label_amount,
        'label_file': args.label_file,
    }
    try:
        # With no label option, every column of the targets file is a label
        if all(value is None for value in label_options.values()):
            label_options['label_indices'] = list(
                range(len(pd.read_csv(args.targets, nrows=0).columns))
            )

        dataset = MultiLabelDataset.from_csv(args.targets, **label_options)
        predictions = pd.read_csv(args.predictions)
        result = evaluate_dataset(
            dataset, predictions.to_numpy(), metrics=metrics, threshold=threshold
        )
        per_label = compute_per_label_metrics(
            dataset.label_matrix,
            predictions.to_numpy(),
            label_names=dataset.label_names,
            threshold=threshold,
        )
    except (LabelscopeError, FileNotFoundError) as e:
        logger.error(f"Evaluation failed: {e}")
        return 1

    print(format_metrics(result))
    print("\nPER-LABEL METRICS")
    print(per_label.to_string(float_format=lambda v: f"{v:.4f}"))

    if args.output:
        path = save_json(
            {
                'targets': str(args.targets),
                'predictions': str(args.predictions),
                'threshold': threshold,
                'binary_predictions': result.binary_predictions,
                'metrics': dict(result),
                'errors': dict(result.errors),
                'excluded_labels': dict(result.excluded_labels),
                'per_label_metrics': per_label,
            },
            args.output,
        )
        logger.info(f"Metrics saved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
