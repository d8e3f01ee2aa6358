"""
Детерминированная модель уверенности на основе RMS.

Уверенность растет линейно от порога до полной шкалы.
"""

import numpy as np

from barkcount.core.contract import IConfidenceModel


class RmsConfidenceModel(IConfidenceModel):
    """
    Линейно отображает энергию окна в диапазон [floor, 1.0].

    Окно ровно на пороге получает floor, окно с RMS 1.0 и выше получает 1.0.
    """

    def __init__(self, energy_threshold: float = 0.1, floor: float = 0.7):
        """
        Args:
            energy_threshold: Порог RMS, с которым работает сегментатор
            floor: Минимальная уверенность для окна, прошедшего порог
        """
        self.energy_threshold = energy_threshold
        self.floor = floor

    def score(self, window: np.ndarray, rms: float) -> float:
        headroom = max(1.0 - self.energy_threshold, 1e-6)
        scaled = self.floor + (1.0 - self.floor) * (rms - self.energy_threshold) / headroom
        return float(min(max(scaled, self.floor), 1.0))
