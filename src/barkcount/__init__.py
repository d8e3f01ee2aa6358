"""
Bark Counter

Подсчет лая собак в аудиозаписи:
- Энергетическая сегментация по окнам (BarkSegmenter)
- Декодирование контейнеров через soundfile/librosa
- Сеанс с состояниями idle/processing/results/error (BarkCountSession)
"""

from barkcount.config import SegmenterConfig
from barkcount.core.contract import IAudioDecoder, IConfidenceModel
from barkcount.core.dto import AudioSignal, BarkReport, Detection
from barkcount.core.errors import BarkCountError, DecodeError, InitializationError, ProcessingError
from barkcount.segmenter import BarkSegmenter, segment
from barkcount.processor import AudioProcessor, InitState
from barkcount.manager import BarkCountSession, SessionState
from barkcount.simulator import simulate_bark_detection
from barkcount.confidence.rms_impl import RmsConfidenceModel
from barkcount.confidence.random_impl import RandomConfidenceModel
from barkcount.decode.soundfile_impl import SoundfileDecoder

__all__ = [
    'SegmenterConfig',
    'IAudioDecoder',
    'IConfidenceModel',
    'AudioSignal',
    'BarkReport',
    'Detection',
    'BarkCountError',
    'DecodeError',
    'InitializationError',
    'ProcessingError',
    'BarkSegmenter',
    'segment',
    'AudioProcessor',
    'InitState',
    'BarkCountSession',
    'SessionState',
    'simulate_bark_detection',
    'RmsConfidenceModel',
    'RandomConfidenceModel',
    'SoundfileDecoder',
]
