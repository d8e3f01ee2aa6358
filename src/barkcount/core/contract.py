from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Union

import numpy as np

from barkcount.core.dto import AudioSignal

AudioSource = Union[bytes, str, Path, BinaryIO]


class IAudioDecoder(ABC):
    """Интерфейс декодера аудио-контейнера в сырые сэмплы."""

    @abstractmethod
    def decode(self, source: AudioSource) -> AudioSignal:
        """
        Декодирует аудио в моно-сигнал (канал 0).

        Args:
            source: Байты файла, путь к файлу или бинарный файловый объект

        Returns:
            Декодированный сигнал с исходной частотой дискретизации

        Raises:
            DecodeError: если контейнер поврежден или кодек не поддерживается
        """
        pass


class IConfidenceModel(ABC):
    """Интерфейс модели, оценивающей уверенность детекции для громкого окна."""

    @abstractmethod
    def score(self, window: np.ndarray, rms: float) -> float:
        """
        Возвращает уверенность для окна, прошедшего энергетический порог.

        Args:
            window: Сэмплы окна после ресемплинга (numpy array, float32)
            rms: Среднеквадратичная энергия окна

        Returns:
            Уверенность в диапазоне [0.0, 1.0]
        """
        pass

    def prepare(self) -> None:
        """
        Однократная подготовка модели перед первым использованием.

        По умолчанию ничего не делает.
        """
