"""
Input checks shared by the fit and predict entry points.

Rows may be a pandas DataFrame, a numpy ndarray or a list of sequences; labels
may be a pandas Series, a single-column DataFrame, a numpy ndarray or a list.
Everything is converted to numpy before any estimation happens.
"""
import numpy as np
import pandas as pd

from ..exceptions import (
    EmptyInputError,
    FeatureWidthError,
    LengthMismatchError,
    MissingLabelError,
    NonFiniteInputError,
    RaggedRowsError,
    UnseenFeatureIndexError,
)


def _row_widths(rows):
    widths = []
    for i, row in enumerate(rows):
        if np.ndim(row) != 1:
            raise ValueError(
                f"Each row must be a 1D sequence of feature values, row {i} has {np.ndim(row)} dimensions")
        widths.append(len(row))
    return widths


def as_feature_matrix(X) -> np.ndarray:
    """Convert rows to a 2D float64 array, rejecting ragged or non-finite input."""
    if isinstance(X, pd.DataFrame):
        arr = X.to_numpy(dtype=np.float64)
    elif isinstance(X, np.ndarray) and X.dtype != object:
        if X.ndim != 2:
            raise ValueError(
                f"X must be 2D (n_samples, n_features), got shape {X.shape}")
        arr = X.astype(np.float64)
    elif isinstance(X, (list, tuple, np.ndarray)):
        widths = _row_widths(X)
        if len(set(widths)) > 1:
            raise RaggedRowsError(
                f"All rows must have the same number of features, got widths {sorted(set(widths))}")
        arr = np.array([np.asarray(row, dtype=np.float64) for row in X], dtype=np.float64)
        if arr.ndim != 2:
            arr = arr.reshape(len(widths), 0)
    else:
        raise TypeError(
            f"X must be a pandas DataFrame, a numpy ndarray or a list of rows. Got {type(X)} instead.")

    if not np.isfinite(arr).all():
        raise NonFiniteInputError("Input data contains NaN or Inf values.")
    return arr


def as_label_vector(y) -> np.ndarray:
    """
    Convert labels to a 1D array. A single-column DataFrame is accepted.

    Lists mixing label types stay an object array so every label keeps its
    own type instead of being coerced to a common string dtype.
    """
    if isinstance(y, pd.DataFrame):
        if y.shape[1] != 1:
            raise ValueError(
                f"y must hold a single column of labels, got {y.shape[1]} columns")
        arr = y.iloc[:, 0].to_numpy()
    elif isinstance(y, pd.Series):
        arr = y.to_numpy()
    elif isinstance(y, (list, tuple, np.ndarray)):
        arr = y if isinstance(y, np.ndarray) else np.asarray(y, dtype=object)
        if arr.ndim == 2 and arr.shape[1] == 1:
            arr = arr.ravel()
        if arr.ndim != 1:
            raise ValueError(f"y must be 1D (n_samples,), got shape {arr.shape}")
        if not isinstance(y, np.ndarray) and len({type(label) for label in arr}) == 1:
            arr = np.asarray(arr.tolist())
    else:
        raise TypeError(
            f"y must be a pandas Series, a numpy ndarray or a list of labels. Got {type(y)} instead.")

    if pd.isna(arr).any():
        raise MissingLabelError("Labels must not contain missing values (NaN or None).")
    return arr


def check_training_set(X, y):
    """
    Validate a (rows, labels) pair handed to ``fit``.

    :return: tuple ``(X, y)`` with X a float64 array of shape (N, d) and y an
        array of shape (N,)
    :raises EmptyInputError: no rows, no labels, or rows without features
    :raises LengthMismatchError: ``len(X) != len(y)``
    :raises RaggedRowsError: rows of different widths
    :raises NonFiniteInputError: NaN or Inf among the feature values
    :raises MissingLabelError: NaN or None among the labels
    """
    if X is None or y is None or len(X) == 0 or len(y) == 0:
        raise EmptyInputError("Input data X and y must not be empty.")
    if len(X) != len(y):
        raise LengthMismatchError(
            f"X and y must have the same number of samples, got {len(X)} rows and {len(y)} labels")

    X = as_feature_matrix(X)
    y = as_label_vector(y)
    if X.shape[1] == 0:
        raise EmptyInputError("Rows must contain at least one feature.")
    return X, y


def check_prediction_rows(X, n_features):
    """
    Validate rows handed to ``predict`` against the fit-time width.

    An empty row collection is valid and yields an array of shape (0, d).
    """
    if X is None:
        raise TypeError("X must not be None.")
    if len(X) == 0:
        return np.empty((0, n_features), dtype=np.float64)

    X = as_feature_matrix(X)
    if X.shape[1] > n_features:
        raise UnseenFeatureIndexError(
            f"Rows have {X.shape[1]} features but the model was fitted on {n_features}; "
            f"feature indices {n_features}..{X.shape[1] - 1} were never seen")
    if X.shape[1] < n_features:
        raise FeatureWidthError(
            f"Rows have {X.shape[1]} features but the model was fitted on {n_features}")
    return X
