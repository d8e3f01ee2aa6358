"""
BarkSegmenter - энергетическая сегментация сигнала на лаи.

Нарезка на окна -> ресемплинг окна -> порог RMS -> объединение близких детекций.
"""

import logging
from typing import List, Optional

from barkcount.config import SegmenterConfig
from barkcount.confidence.rms_impl import RmsConfidenceModel
from barkcount.core.contract import IConfidenceModel
from barkcount.core.dsp import chunk_size_for, iter_windows, resample_linear, rms_energy
from barkcount.core.dto import AudioSignal, Detection

logger = logging.getLogger(__name__)


class BarkSegmenter:
    """
    Сегментатор лая по энергии окон.

    Только читает сигнал; для корректного входа никогда не бросает исключений.
    """

    def __init__(
        self,
        config: Optional[SegmenterConfig] = None,
        confidence_model: Optional[IConfidenceModel] = None
    ):
        """
        Инициализация сегментатора.

        Args:
            config: Параметры сегментации (по умолчанию SegmenterConfig())
            confidence_model: Модель уверенности (по умолчанию RmsConfidenceModel
                с тем же порогом)
        """
        self.config = config or SegmenterConfig()
        self.confidence_model = confidence_model or RmsConfidenceModel(
            energy_threshold=self.config.energy_threshold
        )

    def detect_barks(self, signal: AudioSignal) -> List[Detection]:
        """
        Возвращает сырые детекции по окнам, по возрастанию времени.

        Args:
            signal: Моно-сигнал

        Returns:
            По одной детекции на каждое окно с RMS выше порога
        """
        cfg = self.config
        chunk_size = chunk_size_for(cfg.chunk_duration, signal.sample_rate)
        detections: List[Detection] = []

        for start, window in iter_windows(signal.samples, chunk_size):
            if cfg.resample:
                window = resample_linear(window, signal.sample_rate, cfg.target_sample_rate)
            rms = rms_energy(window)
            if rms <= cfg.energy_threshold:
                continue

            timestamp = start / signal.sample_rate
            confidence = self.confidence_model.score(window, rms)
            logger.debug("Loud window at %.3fs: rms=%.4f confidence=%.3f", timestamp, rms, confidence)
            detections.append(Detection(timestamp=timestamp, confidence=confidence))

        return detections

    @staticmethod
    def group_nearby_detections(detections: List[Detection], max_gap: float) -> List[Detection]:
        """
        Жадно объединяет детекции, отстоящие не дальше max_gap от текущей группы.

        Группу представляет одна детекция; следующая заменяет ее только при
        большей уверенности, время группы при этом не растягивается. Поэтому
        серия с маленькими шагами, но общей длиной больше max_gap от
        представителя, распадается на несколько групп.

        Args:
            detections: Детекции по возрастанию времени
            max_gap: Максимальный зазор в секундах

        Returns:
            Объединенные детекции в исходном порядке
        """
        if not detections:
            return []

        grouped: List[Detection] = []
        current = detections[0]

        for detection in detections[1:]:
            if detection.timestamp - current.timestamp <= max_gap:
                if detection.confidence > current.confidence:
                    current = detection
            else:
                grouped.append(current)
                current = detection

        grouped.append(current)
        return grouped

    def segment(self, signal: AudioSignal) -> List[Detection]:
        """Полный проход: детекция по окнам и объединение близких детекций."""
        raw = self.detect_barks(signal)
        grouped = self.group_nearby_detections(raw, self.config.merge_gap)
        logger.debug("Segmented %.2fs of audio: %d raw, %d grouped", signal.duration, len(raw), len(grouped))
        return grouped


def segment(
    signal: AudioSignal,
    chunk_duration: float = 1.0,
    merge_gap: float = 0.5,
    energy_threshold: float = 0.1
) -> List[Detection]:
    """Сегментирует сигнал с параметрами по умолчанию и RMS-уверенностью."""
    config = SegmenterConfig(
        chunk_duration=chunk_duration,
        merge_gap=merge_gap,
        energy_threshold=energy_threshold,
    )
    return BarkSegmenter(config).segment(signal)
