import logging
from typing import List, Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from pydantic import BaseModel

from barkcount.config import SegmenterConfig
from barkcount.core.errors import DecodeError, ProcessingError
from barkcount.processor import AudioProcessor
from barkcount.segmenter import BarkSegmenter

logger = logging.getLogger(__name__)


app = FastAPI(title="Bark Counter Service", description="Counts dog barks in uploaded audio")


class DetectionOut(BaseModel):
    timestamp: float
    confidence: float


class BarkReportOut(BaseModel):
    bark_count: int
    detections: List[DetectionOut]
    file_name: Optional[str] = None
    duration: float
    span: float
    average_interval: Optional[float] = None
    simulated: bool = False


def build_processor(config: Optional[SegmenterConfig] = None) -> AudioProcessor:
    """Собирает обработчик из конфигурации (по умолчанию из переменных окружения)."""
    config = config or SegmenterConfig.from_env()
    return AudioProcessor(segmenter=BarkSegmenter(config))


PROCESSOR = build_processor()


@app.post("/count", response_model=BarkReportOut)
async def count_barks(audio: UploadFile = File(...)):
    """
    Считает лаи в загруженном аудио-файле:
    - декодирует канал 0 с исходной частотой;
    - режет на окна и отбирает окна с энергией выше порога;
    - объединяет близкие детекции.

    Ошибки декодирования -> 422, ошибки обработки -> 500.
    """
    raw = await audio.read()
    try:
        report = await PROCESSOR.process_audio(raw, file_name=audio.filename)
    except DecodeError as exc:
        logger.warning("Rejected upload %s: %s", audio.filename, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ProcessingError as exc:
        logger.exception("Processing failed for %s", audio.filename)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return report.to_dict()


@app.get("/health")
async def health():
    return {"status": "ok", "initialized": PROCESSOR.state.value}
