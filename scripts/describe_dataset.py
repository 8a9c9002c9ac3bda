#!/usr/bin/env python3
"""
Describe a multi-label dataset.

Loads a dataset (a CSV file, or a named dataset from the configuration),
prints its measures, label statistics and rarest labelsets, and optionally
saves everything to JSON.

Usage:
    python scripts/describe_dataset.py --csv data/emotions.csv --label-amount 6
    python scripts/describe_dataset.py --config config.yaml --dataset emotions
    python scripts/describe_dataset.py --csv data/yeast.csv --relation "yeast: -C -14" --output yeast.json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from labelscope.data.catalog import DatasetCatalog
from labelscope.data.dataset import MultiLabelDataset
from labelscope.exceptions import LabelscopeError
from labelscope.utils.config import (
    DEFAULT_CONFIG,
    load_config,
    setup_logging,
    validate_config,
)
from labelscope.utils.reporting import dataset_report, format_measures, save_json

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Compute label statistics of a multi-label dataset',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--csv', type=str, help='CSV file with the dataset')
    source.add_argument('--dataset', type=str,
                        help='Name of a dataset listed in the configuration')

    parser.add_argument('--config', type=str, default=None,
                        help='Path to configuration file')
    parser.add_argument('--label-indices', type=int, nargs='+', default=None,
                        help='0-based positions of the label columns')
    parser.add_argument('--label-names', type=str, nargs='+', default=None,
                        help='Names of the label columns')
    parser.add_argument('--label-amount', type=int, default=None,
                        help='Number of trailing columns that are labels')
    parser.add_argument('--label-file', type=str, default=None,
                        help='File listing the label names')
    parser.add_argument('--relation', type=str, default=None,
                        help="Relation header with a '-C n' label hint")
    parser.add_argument('--top', type=int, default=10,
                        help='Number of labelsets to print')
    parser.add_argument('--output', type=str, default=None,
                        help='JSON file to save the description to')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (overrides config)')

    return parser.parse_args(argv)


def load_dataset(args, config) -> MultiLabelDataset:
    """Load the dataset selected on the command line."""
    if args.dataset:
        base_dir = Path(args.config).parent if args.config else Path.cwd()
        catalog = DatasetCatalog.from_config(config, base_dir=base_dir)
        return catalog.load(args.dataset)

    return MultiLabelDataset.from_csv(
        args.csv,
        label_indices=args.label_indices,
        label_names=args.label_names,
        label_amount=args.label_amount,
        label_file=args.label_file,
        header_hint=args.relation,
    )


def main(argv=None):
    """Main function."""
    args = parse_args(argv)

    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    validate_config(config)
    setup_logging(config, level=args.log_level)

    try:
        dataset = load_dataset(args, config)
    except (LabelscopeError, FileNotFoundError) as e:
        logger.error(f"Could not load dataset: {e}")
        return 1

    print(format_measures(dataset))

    print("\nLABELS")
    print(dataset.labels_frame().to_string(float_format=lambda v: f"{v:.4f}"))

    print(f"\nRAREST {args.top} LABELSETS")
    print(dataset.labelsets_frame().head(args.top).to_string(index=False))

    if args.output:
        path = save_json(dataset_report(dataset), args.output)
        logger.info(f"Description saved to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
