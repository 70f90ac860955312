"""
nblab: Naive Bayes classifiers with a fit-before-predict lifecycle.

``MultinomialNB`` and ``GaussianNB`` only hold hyperparameters and expose
``fit``; ``fit`` returns a separate, read-only fitted model that exposes
``predict``.
"""
from .exceptions import (
    EmptyInputError,
    FeatureWidthError,
    InvalidSmoothingError,
    LengthMismatchError,
    MissingLabelError,
    NaiveBayesError,
    NegativeFeatureValueError,
    NonFiniteInputError,
    RaggedRowsError,
    UnorderableLabelsError,
    UnseenFeatureIndexError,
)
from .naive_bayes import (
    FittedGaussianNB,
    FittedMultinomialNB,
    GaussianNB,
    MultinomialNB,
)

__version__ = "0.1.0"

__all__ = [
    'EmptyInputError',
    'FeatureWidthError',
    'FittedGaussianNB',
    'FittedMultinomialNB',
    'GaussianNB',
    'InvalidSmoothingError',
    'LengthMismatchError',
    'MissingLabelError',
    'MultinomialNB',
    'NaiveBayesError',
    'NegativeFeatureValueError',
    'NonFiniteInputError',
    'RaggedRowsError',
    'UnorderableLabelsError',
    'UnseenFeatureIndexError',
]
