import numpy as np

from ..exceptions import UnorderableLabelsError


def estimate_class_priors(y):
    """
    Estimate P(class) from label frequencies.

    Parameters:
        y (np.ndarray): Label vector (n_samples,), must not be empty.
    Returns:
        tuple: ``(classes, class_count, class_prior)`` where ``classes`` holds
        the distinct labels sorted ascending, ``class_count`` the number of rows
        per label and ``class_prior`` the share of rows per label.
    Raises:
        UnorderableLabelsError: If the labels cannot be compared with each other.
    """
    try:
        classes, counts = np.unique(y, return_counts=True)
    except TypeError as exc:
        raise UnorderableLabelsError(
            f"Labels must be mutually orderable to fix the class order: {exc}") from exc
    class_count = counts.astype(np.float64)
    class_prior = class_count / class_count.sum()
    return classes, class_count, class_prior
