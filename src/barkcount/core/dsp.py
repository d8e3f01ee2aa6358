"""
Примитивы обработки сигнала: нарезка на окна, линейный ресемплинг, RMS.

Только вычисления над numpy-массивами, без состояния.
"""

from typing import Iterator, Tuple

import numpy as np


def chunk_size_for(chunk_duration: float, sample_rate: int) -> int:
    """Размер окна в сэмплах (не меньше одного сэмпла)."""
    return max(1, int(np.floor(chunk_duration * sample_rate)))


def iter_windows(samples: np.ndarray, chunk_size: int) -> Iterator[Tuple[int, np.ndarray]]:
    """
    Нарезает сигнал на смежные непересекающиеся окна.

    Последнее окно может быть короче chunk_size.

    Yields:
        Пары (индекс первого сэмпла окна, сэмплы окна)
    """
    for start in range(0, len(samples), chunk_size):
        yield start, samples[start:start + chunk_size]


def resample_linear(audio: np.ndarray, from_rate: int, to_rate: int) -> np.ndarray:
    """
    Линейный ресемплинг между соседними сэмплами.

    Для выходного индекса i исходная позиция s = i * (from_rate / to_rate);
    за пределами массива удерживается последний сэмпл.

    Args:
        audio: Исходные сэмплы
        from_rate: Исходная частота дискретизации
        to_rate: Целевая частота дискретизации

    Returns:
        Сэмплы на целевой частоте (float32)
    """
    if from_rate == to_rate or len(audio) == 0:
        return audio

    ratio = from_rate / to_rate
    new_length = int(np.floor(len(audio) / ratio + 0.5))
    if new_length == 0:
        return np.array([], dtype=np.float32)

    source = np.asarray(audio, dtype=np.float64)
    positions = np.arange(new_length) * ratio
    index = np.minimum(np.floor(positions).astype(np.int64), len(source) - 1)
    fraction = positions - index
    has_next = index + 1 < len(source)
    next_index = np.where(has_next, index + 1, index)

    interpolated = source[index] * (1.0 - fraction) + source[next_index] * fraction
    result = np.where(has_next, interpolated, source[index])
    return result.astype(np.float32)


def rms_energy(window: np.ndarray) -> float:
    """Среднеквадратичная энергия окна (0.0 для пустого окна)."""
    if len(window) == 0:
        return 0.0
    values = np.asarray(window, dtype=np.float64)
    return float(np.sqrt(np.mean(values * values)))
