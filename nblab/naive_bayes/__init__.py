"""Naive Bayes module for machine learning algorithms."""

from ._naive_bayes import (
    EPSILON,
    FittedGaussianNB,
    FittedMultinomialNB,
    GaussianNB,
    MultinomialNB,
)
from ._priors import estimate_class_priors

__all__ = [
    'EPSILON',
    'FittedGaussianNB',
    'FittedMultinomialNB',
    'GaussianNB',
    'MultinomialNB',
    'estimate_class_priors',
]
