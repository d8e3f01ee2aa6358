"""
BarkCountSession - машина состояний сеанса подсчета лая.

Только оркестрация: принимает файл, переключает состояния, вызывает AudioProcessor.
"""

import logging
from enum import Enum
from typing import Callable, Optional

import numpy as np

from barkcount.core.contract import AudioSource
from barkcount.core.dto import BarkReport
from barkcount.core.errors import BarkCountError
from barkcount.processor import AudioProcessor
from barkcount.simulator import simulate_bark_detection

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Состояния машины состояний BarkCountSession."""
    IDLE = "idle"
    PROCESSING = "processing"
    RESULTS = "results"
    ERROR = "error"


class BarkCountSession:
    """
    Сеанс подсчета лая для одного пользователя.

    Отвечает только за:
    - Управление состояниями (IDLE -> PROCESSING -> RESULTS | ERROR)
    - Хранение последнего отчета или сообщения об ошибке
    - Вызов callback с результатом
    """

    def __init__(
        self,
        processor: Optional[AudioProcessor] = None,
        on_result: Optional[Callable[[BarkReport], None]] = None,
        demo_fallback: bool = False,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Инициализация BarkCountSession.

        Args:
            processor: Обработчик аудио (по умолчанию AudioProcessor())
            on_result: Callback для обработки готового отчета
            demo_fallback: При ошибке показывать симулированный отчет (simulated=True)
            rng: Генератор случайных чисел для демо-симулятора
        """
        self.processor = processor or AudioProcessor()
        self.on_result = on_result
        self.demo_fallback = demo_fallback
        self.rng = rng

        self.state = SessionState.IDLE
        self.report: Optional[BarkReport] = None
        self.error: str = ""

    async def handle_file(self, source: AudioSource, file_name: Optional[str] = None) -> Optional[BarkReport]:
        """
        Обрабатывает выбранный пользователем файл.

        Args:
            source: Байты файла, путь или бинарный файловый объект
            file_name: Имя файла

        Returns:
            Отчет или None, если сеанс перешел в состояние ERROR
        """
        self.state = SessionState.PROCESSING
        self.report = None
        self.error = ""

        try:
            report = await self.processor.process_audio(source, file_name=file_name)
        except BarkCountError as exc:
            if not self.demo_fallback:
                logger.exception("Failed to process %s", file_name or "<audio>")
                self._fail(str(exc) or "Failed to process audio file")
                return None
            logger.warning("Processing %s failed (%s), showing simulated result", file_name or "<audio>", exc)
            report = simulate_bark_detection(rng=self.rng, file_name=file_name)
        except Exception as exc:
            logger.exception("Unexpected failure while processing %s", file_name or "<audio>")
            self._fail(str(exc) or "Failed to process audio file")
            return None

        self.report = report
        self.state = SessionState.RESULTS

        if self.on_result:
            self.on_result(report)
        return report

    def _fail(self, message: str) -> None:
        self.report = None
        self.error = message
        self.state = SessionState.ERROR

    def reset(self) -> None:
        """Сброс результатов и возврат в IDLE."""
        self.state = SessionState.IDLE
        self.report = None
        self.error = ""
