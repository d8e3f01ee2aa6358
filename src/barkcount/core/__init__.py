"""Core модуль с контрактами, DTO, ошибками и DSP-утилитами"""

from barkcount.core.contract import AudioSource, IAudioDecoder, IConfidenceModel
from barkcount.core.dto import AudioSignal, BarkReport, Detection
from barkcount.core.errors import BarkCountError, DecodeError, InitializationError, ProcessingError

__all__ = [
    'AudioSource',
    'IAudioDecoder',
    'IConfidenceModel',
    'AudioSignal',
    'BarkReport',
    'Detection',
    'BarkCountError',
    'DecodeError',
    'InitializationError',
    'ProcessingError',
]
