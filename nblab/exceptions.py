"""
Exceptions raised by nblab estimators.

Every error derives from ``NaiveBayesError`` which is itself a ``ValueError``,
so code that guards estimator calls with ``except ValueError`` keeps working.
"""


class NaiveBayesError(ValueError):
    """Base class for invalid input detected at the fit/predict boundary."""


class EmptyInputError(NaiveBayesError):
    """fit was called without any rows or without any labels."""


class LengthMismatchError(NaiveBayesError):
    """The number of rows differs from the number of labels."""


class RaggedRowsError(NaiveBayesError):
    """Feature rows do not all have the same width."""


class FeatureWidthError(NaiveBayesError):
    """Rows passed to a fitted model do not match the fit-time width."""


class UnseenFeatureIndexError(FeatureWidthError):
    """Rows reference feature indices the model never saw during fit."""


class InvalidSmoothingError(NaiveBayesError):
    """The smoothing constant ``alpha`` is negative or not a number."""


class NonFiniteInputError(NaiveBayesError):
    """Feature rows contain NaN or infinite values."""


class NegativeFeatureValueError(NaiveBayesError):
    """Count-like features passed to a multinomial fit contain negative values."""


class MissingLabelError(NaiveBayesError):
    """Labels contain missing values (NaN or None)."""


class UnorderableLabelsError(NaiveBayesError):
    """Labels cannot be sorted into a canonical class order."""
