"""Shared fixtures for the labelscope test suite."""

import logging

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def toy_frame():
    """Four instances, two input attributes and three labels (a, b, c)."""
    return pd.DataFrame(
        {
            "length": [1.0, 2.5, 3.0, 4.5],
            "source": ["web", "news", "web", "blog"],
            "a": [1, 1, 0, 0],
            "b": [0, 1, 1, 1],
            "c": [0, 0, 0, 1],
        }
    )


@pytest.fixture
def imbalanced_frame():
    """100 instances: label A active in 90, label B in 10, always together with A."""
    a = np.array([1] * 90 + [0] * 10)
    b = np.array([1] * 10 + [0] * 90)
    return pd.DataFrame({"x": np.arange(100, dtype=float), "A": a, "B": b})


@pytest.fixture
def bipartition_case():
    targets = np.array([[1, 1, 0], [0, 0, 0], [1, 0, 0]])
    predictions = np.array([[1, 0, 0], [0, 0, 0], [0, 1, 0]])
    return targets, predictions


@pytest.fixture
def ranking_case():
    targets = np.array([[1, 0, 0], [0, 1, 1]])
    scores = np.array([[0.9, 0.5, 0.1], [0.8, 0.6, 0.7]])
    return targets, scores


@pytest.fixture
def label_case():
    targets = np.array([[1, 0], [0, 1], [1, 1], [0, 0]])
    predictions = np.array([[1, 0], [0, 0], [1, 1], [1, 0]])
    return targets, predictions


@pytest.fixture
def restore_root_logger():
    """Undo the root logger changes made by setup_logging."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
