# pylint: disable=missing-docstring
from abc import abstractmethod
from typing import Any

import numpy as np


# pylint: disable=invalid-name line-too-long
class BaseEstimator:
    """
    Common parameter access for unfitted estimators and fitted models.

    Learned attributes follow the trailing-underscore convention (``classes_``,
    ``feature_prob_``); everything else that is public is a hyperparameter.
    """

    def get_params(self, mode: str = "all") -> Any:
        """
        Get parameters for this estimator.

        :param mode: Specifies which parameters to return. Options are:
            - "all": Return all parameters.
            - "trainable": Return only learned parameters (e.g., class priors).
            - "non_trainable": Return only configuration (e.g., smoothing).
        :return: Dictionary of parameter names mapped to their values.
        """
        params = {k: v for k, v in vars(self).items() if not k.startswith("_")}
        if mode == "all":
            return params
        if mode == "trainable":
            return {k: v for k, v in params.items() if k.endswith("_")}
        if mode == "non_trainable":
            return {k: v for k, v in params.items() if not k.endswith("_")}

        raise ValueError(
            f"Invalid mode '{mode}'. Choose from 'all', 'trainable', or 'non_trainable'."
        )


class BaseUnfitClassifier(BaseEstimator):
    """
    An estimator that only knows its hyperparameters.

    It exposes ``fit`` and nothing that scores data. ``fit`` never mutates the
    estimator; it returns a separate fitted model, so the same estimator can be
    fitted again and each call starts from scratch.
    """

    @abstractmethod
    def fit(self, X: Any, y: Any) -> "BaseClassifier":
        """
        :param X: array-like of shape (N, d) with N being the number of samples and d being the number of feature dimensions
        :param y: array-like of shape (N,) holding one class label per sample
        :return: a fitted model exposing ``predict``
        """
        raise NotImplementedError


class BaseClassifier(BaseEstimator):
    """A fitted model. It exposes ``predict`` and has no ``fit``."""

    @abstractmethod
    def predict(self, X: Any) -> np.ndarray:
        """
        :param X: array-like of shape (N, d)
        :return: np array of shape (N,) with one label per row
        """
        raise NotImplementedError

    def score(self, X: Any, y: Any) -> float:
        """
        :param X: array-like of shape (N, d) with N being the number of samples and d being the number of feature dimensions
        :param y: array-like of shape (N,) with the true label of each sample
        :return: accuracy
        """
        y_pred = self.predict(X)
        return float(np.mean(y_pred == np.asarray(y).ravel()))
