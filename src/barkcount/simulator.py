"""
Демо-симулятор результатов для офлайн-режима.

Не является частью алгоритма: выдает правдоподобный, но выдуманный результат.
Вызывается только явно (BarkCountSession(demo_fallback=True)).
"""

from typing import Optional

import numpy as np

from barkcount.core.dto import BarkReport, Detection


def simulate_bark_detection(
    rng: Optional[np.random.Generator] = None,
    duration: float = 10.0,
    file_name: Optional[str] = None
) -> BarkReport:
    """
    Генерирует от 1 до 8 случайных лаев.

    Args:
        rng: Генератор случайных чисел (для воспроизводимости)
        duration: Предполагаемая длительность записи в секундах
        file_name: Имя файла для отчета

    Returns:
        Отчет с флагом simulated=True, детекции по возрастанию времени
    """
    rng = rng if rng is not None else np.random.default_rng()
    bark_count = int(rng.integers(1, 9))

    timestamps = np.sort(rng.uniform(0.0, duration, size=bark_count))
    confidences = rng.uniform(0.6, 1.0, size=bark_count)

    detections = [
        Detection(timestamp=float(t), confidence=float(c))
        for t, c in zip(timestamps, confidences)
    ]
    return BarkReport(
        bark_count=bark_count,
        detections=detections,
        file_name=file_name,
        duration=duration,
        simulated=True,
    )
