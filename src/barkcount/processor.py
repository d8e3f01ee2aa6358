"""
AudioProcessor - декодирование и сегментация одного файла.

Ленивая однократная инициализация модели уверенности с явным состоянием.
Ошибки не маскируются: DecodeError и ProcessingError уходят вызывающему.
"""

import asyncio
import logging
from enum import Enum
from typing import Optional

from barkcount.core.contract import AudioSource, IAudioDecoder
from barkcount.core.dto import AudioSignal, BarkReport
from barkcount.core.errors import BarkCountError, DecodeError, InitializationError, ProcessingError
from barkcount.decode.soundfile_impl import SoundfileDecoder
from barkcount.segmenter import BarkSegmenter

logger = logging.getLogger(__name__)


class InitState(Enum):
    """Состояние инициализации AudioProcessor."""
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


class AudioProcessor:
    """
    Обработчик аудио-файлов.

    Отвечает только за:
    - Однократную подготовку модели уверенности
    - Декодирование входа
    - Запуск сегментатора в рабочем потоке
    """

    def __init__(
        self,
        decoder: Optional[IAudioDecoder] = None,
        segmenter: Optional[BarkSegmenter] = None
    ):
        """
        Инициализация AudioProcessor.

        Args:
            decoder: Декодер аудио (по умолчанию SoundfileDecoder)
            segmenter: Сегментатор (по умолчанию BarkSegmenter с настройками по умолчанию)
        """
        self.decoder = decoder or SoundfileDecoder()
        self.segmenter = segmenter or BarkSegmenter()

        self.state = InitState.UNINITIALIZED
        self._init_error: Optional[BaseException] = None
        self._init_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """
        Готовит модель уверенности, если это еще не сделано.

        Raises:
            InitializationError: если подготовка провалилась сейчас или ранее
        """
        async with self._init_lock:
            if self.state == InitState.READY:
                return
            if self.state == InitState.FAILED:
                raise InitializationError(
                    f"Confidence model failed to initialize: {self._init_error}"
                ) from self._init_error

            try:
                await asyncio.to_thread(self.segmenter.confidence_model.prepare)
            except Exception as exc:
                self.state = InitState.FAILED
                self._init_error = exc
                logger.error("Confidence model initialization failed: %s", exc)
                raise InitializationError(f"Confidence model failed to initialize: {exc}") from exc

            self.state = InitState.READY
            logger.info("Audio processor ready (%s)", type(self.segmenter.confidence_model).__name__)

    async def process_audio(self, source: AudioSource, file_name: Optional[str] = None) -> BarkReport:
        """
        Считает лаи в аудио-файле.

        Args:
            source: Байты файла, путь или бинарный файловый объект
            file_name: Имя файла для отчета

        Returns:
            Отчет с количеством лаев и временной шкалой

        Raises:
            DecodeError: если вход не удалось декодировать
            ProcessingError: при сбое нарезки или детекции
        """
        if self.state != InitState.READY:
            await self.initialize()

        signal = await asyncio.to_thread(self._decode, source)
        report = await asyncio.to_thread(self._analyze, signal, file_name)

        logger.info(
            "Processed %s: %.2fs, %d bark(s)",
            file_name or "<audio>", report.duration, report.bark_count
        )
        return report

    def _decode(self, source: AudioSource) -> AudioSignal:
        try:
            return self.decoder.decode(source)
        except BarkCountError:
            raise
        except Exception as exc:
            raise DecodeError(f"Unable to decode audio: {exc}") from exc

    def _analyze(self, signal: AudioSignal, file_name: Optional[str]) -> BarkReport:
        try:
            detections = self.segmenter.segment(signal)
        except BarkCountError:
            raise
        except Exception as exc:
            raise ProcessingError(f"Bark detection failed: {exc}") from exc

        return BarkReport(
            bark_count=len(detections),
            detections=detections,
            file_name=file_name,
            duration=signal.duration,
        )
