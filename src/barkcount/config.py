"""
Конфигурация сегментатора.

Значения по умолчанию совпадают с исходным поведением счетчика лая;
сервис читает переопределения из переменных окружения BARKCOUNT_*.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "BARKCOUNT_"


class SegmenterConfig(BaseModel):
    """
    Параметры сегментации.

    Attributes:
        chunk_duration: Длина окна анализа в секундах
        merge_gap: Максимальный зазор для объединения соседних детекций, в секундах
        energy_threshold: Порог RMS, выше которого окно считается лаем
        target_sample_rate: Частота, к которой приводится каждое окно
        resample: Выполнять ли ресемплинг окон
    """
    chunk_duration: float = Field(1.0, gt=0)
    merge_gap: float = Field(0.5, ge=0)
    energy_threshold: float = Field(0.1, ge=0)
    target_sample_rate: int = Field(16000, gt=0)
    resample: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SegmenterConfig":
        """
        Собирает конфигурацию из переменных окружения.

        Неизвестные переменные игнорируются, отсутствующие берутся по умолчанию.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in ("chunk_duration", "merge_gap", "energy_threshold",
                     "target_sample_rate", "resample"):
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw
        return cls(**values)
