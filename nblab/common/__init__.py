"""Shared helpers for nblab estimators."""

from .validation import (
    as_feature_matrix,
    as_label_vector,
    check_prediction_rows,
    check_training_set,
)

__all__ = [
    'as_feature_matrix',
    'as_label_vector',
    'check_prediction_rows',
    'check_training_set',
]
