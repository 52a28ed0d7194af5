"""
Evaluation metrics computed over full output/target vectors.

Classification metrics threshold outputs at 0 into {-1, +1} predictions and
expect targets in {-1, +1}.
"""

from collections import namedtuple

import numpy as np


EvalFunction = namedtuple('EvalFunction', ['name', 'evaluate'])


def _confusion(outputs, targets):
    """
    Count the confusion matrix cells of thresholded outputs.

    Returns:
        (tp, fp, fn, tn)
    """
    predicted = np.where(np.asarray(outputs, dtype=float) > 0, 1, -1)
    actual = np.asarray(targets)

    tp = int(np.sum((predicted == 1) & (actual == 1)))
    fp = int(np.sum((predicted == 1) & (actual == -1)))
    fn = int(np.sum((predicted == -1) & (actual == 1)))
    tn = int(np.sum((predicted == -1) & (actual == -1)))
    return tp, fp, fn, tn


def f1_score(outputs, targets) -> float:
    """Harmonic mean of precision and recall, stabilized by a 1e-10 epsilon."""
    epsilon = 1e-10
    tp, fp, fn, _ = _confusion(outputs, targets)

    precision = tp / (tp + fp + epsilon)
    recall = tp / (tp + fn + epsilon)
    return 2 * (precision * recall) / (precision + recall + epsilon)


def matthews_corrcoef(outputs, targets) -> float:
    """Matthews correlation coefficient; 0 when any confusion marginal is empty."""
    tp, fp, fn, tn = _confusion(outputs, targets)

    numerator = tp * tn - fp * fn
    denominator = np.sqrt(float((tp + fp) * (tp + fn) * (tn + fp) * (tn + fn)))
    return float(numerator / denominator) if denominator else 0.0


def r2_score(outputs, targets) -> float:
    """
    Coefficient of determination.

    Not stabilized: constant targets give a zero total sum of squares and the
    result is inf or nan.
    """
    outputs = np.asarray(outputs, dtype=np.float64)
    targets = np.asarray(targets, dtype=np.float64)

    ss_total = np.sum((targets - targets.mean()) ** 2)
    ss_residual = np.sum((targets - outputs) ** 2)
    return float(1 - ss_residual / ss_total)


def rmse(outputs, targets) -> float:
    """Root mean squared error."""
    outputs = np.asarray(outputs, dtype=np.float64)
    targets = np.asarray(targets, dtype=np.float64)
    return float(np.sqrt(np.mean((outputs - targets) ** 2)))


F1 = EvalFunction('f1', f1_score)
MATTHEWS_CORR_COEFF = EvalFunction('mcc', matthews_corrcoef)
R2 = EvalFunction('r2', r2_score)
RMSE = EvalFunction('rmse', rmse)
