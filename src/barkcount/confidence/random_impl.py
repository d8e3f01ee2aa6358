"""
Случайная модель уверенности, повторяющая эталонное поведение.

Выдает равномерное значение в [low, high); используется только явно,
например для сравнения с прежними результатами.
"""

from typing import Optional

import numpy as np

from barkcount.core.contract import IConfidenceModel


class RandomConfidenceModel(IConfidenceModel):
    """Уверенность из генератора numpy, не зависит от окна."""

    def __init__(
        self,
        low: float = 0.7,
        high: float = 1.0,
        rng: Optional[np.random.Generator] = None
    ):
        self.low = low
        self.high = high
        self.rng = rng if rng is not None else np.random.default_rng()

    def score(self, window: np.ndarray, rms: float) -> float:
        return float(self.rng.uniform(self.low, self.high))
