from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass(frozen=True, eq=False)
class AudioSignal:
    """
    Декодированный моно-сигнал.

    Attributes:
        samples: Сэмплы (numpy array, float32, примерно в диапазоне [-1, 1])
        sample_rate: Частота дискретизации в Гц
    """
    samples: np.ndarray
    sample_rate: int

    def __post_init__(self) -> None:
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        samples = np.array(self.samples, dtype=np.float32)
        if samples.ndim != 1:
            raise ValueError(f"samples must be 1-D, got shape {samples.shape}")
        samples.setflags(write=False)
        object.__setattr__(self, "samples", samples)

    def __len__(self) -> int:
        return len(self.samples)

    @property
    def duration(self) -> float:
        """Длительность сигнала в секундах."""
        return len(self.samples) / float(self.sample_rate)


@dataclass(frozen=True)
class Detection:
    """
    Одно обнаруженное гавканье.

    Attributes:
        timestamp: Начало окна с лаем в секундах от начала записи
        confidence: Уверенность детекции (0.0 - 1.0)
    """
    timestamp: float
    confidence: float


@dataclass
class BarkReport:
    """
    Итог обработки одного файла.

    Attributes:
        bark_count: Количество лаев после объединения близких детекций
        detections: Детекции по возрастанию времени
        file_name: Имя исходного файла, если известно
        duration: Длительность записи в секундах
        simulated: True, если результат сгенерирован демо-симулятором
    """
    bark_count: int
    detections: List[Detection] = field(default_factory=list)
    file_name: Optional[str] = None
    duration: float = 0.0
    simulated: bool = False

    @property
    def span(self) -> float:
        """Время между первым и последним лаем."""
        if len(self.detections) < 2:
            return 0.0
        return self.detections[-1].timestamp - self.detections[0].timestamp

    @property
    def average_interval(self) -> Optional[float]:
        """Средний интервал между соседними лаями (None, если лаев меньше двух)."""
        if len(self.detections) < 2:
            return None
        return self.span / (len(self.detections) - 1)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bark_count": self.bark_count,
            "detections": [
                {"timestamp": round(d.timestamp, 3), "confidence": round(d.confidence, 3)}
                for d in self.detections
            ],
            "file_name": self.file_name,
            "duration": round(self.duration, 3),
            "span": round(self.span, 3),
            "average_interval": (
                round(self.average_interval, 3) if self.average_interval is not None else None
            ),
            "simulated": self.simulated,
        }
