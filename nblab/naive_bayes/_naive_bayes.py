import numbers
import warnings
from abc import abstractmethod
from dataclasses import dataclass, fields

import numpy as np

from ..base import BaseClassifier, BaseUnfitClassifier
from ..common.validation import check_prediction_rows, check_training_set
from ..exceptions import InvalidSmoothingError, NegativeFeatureValueError
from ._priors import estimate_class_priors

# Additive floor applied before every logarithm and to Gaussian variances.
EPSILON = 1e-9


def _readonly_copy(arr):
    arr = np.array(arr, copy=True)
    arr.setflags(write=False)
    return arr


def _log_gaussian_pdf(X, mean, var):
    """
    Compute log Gaussian PDF for X given mean and variance.

    Zero variances are floored at EPSILON so constant training features still
    give a finite density: a sharp peak at the mean and a very negative (but
    finite) log-density everywhere else.
    """
    # X: (n_samples, n_features), mean/var: (n_features,)
    var = var + EPSILON
    return -0.5 * np.log(2. * np.pi * var) - ((X - mean) ** 2) / (2. * var)


class _BaseFittedNB(BaseClassifier):
    """
    Shared scoring for fitted Naive Bayes models.

    Subclasses provide ``_joint_log_likelihood``; classes are kept sorted
    ascending, so when two classes reach the same score ``np.argmax`` returns
    the one whose label sorts first.
    """

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, np.ndarray):
                object.__setattr__(self, f.name, _readonly_copy(value))

    def __repr__(self):
        return (f"{type(self).__name__}(classes={self.classes_.tolist()}, "
                f"n_features_in={self.n_features_in_})")

    @abstractmethod
    def _joint_log_likelihood(self, X):
        raise NotImplementedError

    @property
    def class_priors(self):
        """Mapping from class label to its prior probability."""
        return dict(zip(self.classes_.tolist(), self.class_prior_.tolist()))

    def predict_joint_log_proba(self, X):
        """
        Return the unnormalized log-score of each class for input X.
        Parameters:
            X (array-like): Feature matrix (n_samples, n_features)
        Returns:
            np.ndarray: Log-scores (n_samples, n_classes), always finite.
        """
        X = check_prediction_rows(X, self.n_features_in_)
        with np.errstate(over='ignore'):
            jll = self._joint_log_likelihood(X)
        # Overflowing squared distances or counts end up as -inf and are
        # clamped to the most negative float. Classes that all overflow on a
        # row tie there, and the first label in sorted order wins.
        return np.nan_to_num(jll, neginf=np.finfo(np.float64).min,
                             posinf=np.finfo(np.float64).max)

    def predict_log_proba(self, X):
        """
        Return normalized log-probabilities for each class for input X.
        Parameters:
            X (array-like): Feature matrix (n_samples, n_features)
        Returns:
            np.ndarray: Log-probabilities (n_samples, n_classes)
        """
        jll = self.predict_joint_log_proba(X)
        if jll.shape[0] == 0:
            return jll
        shift = jll.max(axis=1, keepdims=True)
        log_norm = shift + np.log(np.exp(jll - shift).sum(axis=1, keepdims=True))
        return jll - log_norm

    def predict_proba(self, X):
        """
        Return probabilities for each class for input X.
        Parameters:
            X (array-like): Feature matrix (n_samples, n_features)
        Returns:
            np.ndarray: Probabilities (n_samples, n_classes), rows sum to 1.
        """
        return np.exp(self.predict_log_proba(X))

    def predict(self, X):
        """
        Predict class labels for samples in X.
        Parameters:
            X (array-like): Feature matrix (n_samples, n_features)
        Returns:
            np.ndarray: Predicted class labels (n_samples,)
        """
        jll = self.predict_joint_log_proba(X)
        return self.classes_[np.argmax(jll, axis=1)]


class MultinomialNB(BaseUnfitClassifier):
    def __init__(self, alpha=1.0, verbose=False):
        """
        Initialize MultinomialNB.
        Parameters:
            alpha (float): Laplace smoothing parameter, must be >= 0.
            verbose (bool): Whether to print a summary after fitting.
        Raises:
            InvalidSmoothingError: If alpha is negative or not a finite number.
        """
        if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
            raise InvalidSmoothingError(f"alpha must be a real number, got {alpha!r}")
        if not np.isfinite(alpha) or alpha < 0:
            raise InvalidSmoothingError(f"alpha must be a finite value >= 0, got {alpha}")
        if alpha == 0:
            warnings.warn(
                "alpha=0 disables smoothing; features unseen in a class get "
                "zero probability for that class.", UserWarning, stacklevel=2)
        self.alpha = float(alpha)
        self.verbose = verbose

    def fit(self, X, y):
        """
        Fit the model using training data.
        Parameters:
            X (array-like): Feature matrix of non-negative counts (n_samples, n_features)
            y (array-like): Target vector (n_samples,)
        Returns:
            FittedMultinomialNB: A new fitted model; this estimator is left unchanged.
        Raises:
            EmptyInputError, LengthMismatchError, RaggedRowsError,
            NonFiniteInputError, NegativeFeatureValueError, MissingLabelError,
            UnorderableLabelsError
        """
        X, y = check_training_set(X, y)
        if (X < 0).any():
            raise NegativeFeatureValueError(
                "MultinomialNB expects count-like features; X contains negative values.")

        classes, class_count, class_prior = estimate_class_priors(y)
        n_features = X.shape[1]

        # Feature values act as pseudo-counts.
        feature_count = np.zeros((len(classes), n_features), dtype=np.float64)
        for idx, c in enumerate(classes):
            feature_count[idx, :] = X[y == c].sum(axis=0)

        # Compute smoothed likelihoods; an empty class with alpha=0 is 0/0 := 0
        smoothed_fc = feature_count + self.alpha
        smoothed_cc = smoothed_fc.sum(axis=1, keepdims=True)
        feature_prob = np.divide(smoothed_fc, smoothed_cc,
                                 out=np.zeros_like(smoothed_fc),
                                 where=smoothed_cc > 0)

        if self.verbose:
            print(f"MultinomialNB fitted on {X.shape[0]} samples, "
                  f"{len(classes)} classes, {n_features} features")

        return FittedMultinomialNB(
            alpha=self.alpha,
            classes_=classes,
            class_count_=class_count,
            class_prior_=class_prior,
            feature_count_=feature_count,
            feature_prob_=feature_prob,
            n_features_in_=n_features,
        )


@dataclass(frozen=True, eq=False, repr=False)
class FittedMultinomialNB(_BaseFittedNB):
    """
    Multinomial Naive Bayes parameters learned by ``MultinomialNB.fit``.

    Attributes:
        alpha (float): Smoothing constant used during fit.
        classes_ (np.ndarray): Class labels, sorted ascending (n_classes,)
        class_count_ (np.ndarray): Rows seen per class (n_classes,)
        class_prior_ (np.ndarray): P(class) (n_classes,)
        feature_count_ (np.ndarray): Summed feature values per class (n_classes, n_features)
        feature_prob_ (np.ndarray): Smoothed P(feature | class) (n_classes, n_features)
        n_features_in_ (int): Number of features seen during fit.
    """

    alpha: float
    classes_: np.ndarray
    class_count_: np.ndarray
    class_prior_: np.ndarray
    feature_count_: np.ndarray
    feature_prob_: np.ndarray
    n_features_in_: int

    @property
    def feature_probabilities(self):
        """Mapping from class label to {feature index: smoothed probability}."""
        return {
            label: dict(enumerate(row))
            for label, row in zip(self.classes_.tolist(), self.feature_prob_.tolist())
        }

    def _joint_log_likelihood(self, X):
        # Only strictly positive feature values contribute.
        counts = np.where(X > 0, X, 0.0)
        log_prob = np.log(self.feature_prob_ + EPSILON)
        log_prior = np.log(self.class_prior_ + EPSILON)
        return counts @ log_prob.T + log_prior


class GaussianNB(BaseUnfitClassifier):
    def __init__(self, verbose=False):
        """
        Initialize GaussianNB.
        Parameters:
            verbose (bool): Whether to print a summary after fitting.
        """
        self.verbose = verbose

    def fit(self, X, y):
        """
        Fit the model using training data.
        Parameters:
            X (array-like): Feature matrix (n_samples, n_features)
            y (array-like): Target vector (n_samples,)
        Returns:
            FittedGaussianNB: A new fitted model; this estimator is left unchanged.
        Raises:
            EmptyInputError, LengthMismatchError, RaggedRowsError, NonFiniteInputError,
            MissingLabelError, UnorderableLabelsError
        """
        X, y = check_training_set(X, y)
        classes, class_count, class_prior = estimate_class_priors(y)
        n_features = X.shape[1]

        theta = np.zeros((len(classes), n_features))
        var = np.zeros((len(classes), n_features))
        for idx, c in enumerate(classes):
            X_c = X[y == c]
            theta[idx, :] = X_c.mean(axis=0)
            var[idx, :] = X_c.var(axis=0)
            # Constant features get exactly their value and zero variance,
            # whatever rounding the mean picked up.
            constant = np.ptp(X_c, axis=0) == 0
            theta[idx, constant] = X_c[0, constant]
            var[idx, constant] = 0.0

        if self.verbose:
            n_constant = int((var == 0).sum())
            print(f"GaussianNB fitted on {X.shape[0]} samples, "
                  f"{len(classes)} classes, {n_features} features "
                  f"({n_constant} zero-variance class/feature pairs)")

        return FittedGaussianNB(
            classes_=classes,
            class_count_=class_count,
            class_prior_=class_prior,
            theta_=theta,
            var_=var,
            n_features_in_=n_features,
        )


@dataclass(frozen=True, eq=False, repr=False)
class FittedGaussianNB(_BaseFittedNB):
    """
    Gaussian Naive Bayes parameters learned by ``GaussianNB.fit``.

    Attributes:
        classes_ (np.ndarray): Class labels, sorted ascending (n_classes,)
        class_count_ (np.ndarray): Rows seen per class (n_classes,)
        class_prior_ (np.ndarray): P(class) (n_classes,)
        theta_ (np.ndarray): Per-class feature means (n_classes, n_features)
        var_ (np.ndarray): Per-class population variances (n_classes, n_features)
        n_features_in_ (int): Number of features seen during fit.
    """

    classes_: np.ndarray
    class_count_: np.ndarray
    class_prior_: np.ndarray
    theta_: np.ndarray
    var_: np.ndarray
    n_features_in_: int

    @property
    def sigma_(self):
        """Per-class population standard deviations (n_classes, n_features)."""
        return np.sqrt(self.var_)

    @property
    def parameters(self):
        """Mapping from class label to a list of (mean, std) pairs, one per feature."""
        return {
            label: list(zip(mean, std))
            for label, mean, std in zip(self.classes_.tolist(),
                                        self.theta_.tolist(),
                                        self.sigma_.tolist())
        }

    def _joint_log_likelihood(self, X):
        log_probs = []
        for idx in range(len(self.classes_)):
            log_prior = np.log(self.class_prior_[idx] + EPSILON)
            log_likelihood = _log_gaussian_pdf(X, self.theta_[idx], self.var_[idx]).sum(axis=1)
            log_probs.append(log_prior + log_likelihood)
        return np.vstack(log_probs).T  # shape (n_samples, n_classes)
