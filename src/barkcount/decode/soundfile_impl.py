"""
Реализация декодера на базе soundfile с запасным путем через librosa.

soundfile читает WAV/FLAC/OGG; MP3/M4A и прочее уходит в librosa (audioread).
"""

import logging
import os
import tempfile
from io import BytesIO
from pathlib import Path

import librosa
import numpy as np
import soundfile as sf

from barkcount.core.contract import AudioSource, IAudioDecoder
from barkcount.core.dto import AudioSignal
from barkcount.core.errors import DecodeError

logger = logging.getLogger(__name__)


class SoundfileDecoder(IAudioDecoder):
    """
    Декодер аудио-контейнеров в моно-сигнал.

    Берет только канал 0, частоту дискретизации не меняет.
    """

    def decode(self, source: AudioSource) -> AudioSignal:
        """
        Декодирует аудио в сигнал.

        Args:
            source: Байты файла, путь или бинарный файловый объект

        Returns:
            Сигнал канала 0 (float32) с исходной частотой

        Raises:
            DecodeError: если ни soundfile, ни librosa не смогли прочитать данные
        """
        if hasattr(source, "read"):
            try:
                source = source.read()
            except (OSError, ValueError) as exc:
                raise DecodeError(f"Unable to read audio stream: {exc}") from exc

        try:
            audio, sr = self._read_soundfile(source)
        except RuntimeError as exc:
            logger.warning("soundfile could not decode input (%s), falling back to librosa", exc)
            try:
                audio, sr = self._read_librosa(source)
            except Exception as fallback_exc:
                raise DecodeError(f"Unable to decode audio: {fallback_exc}") from fallback_exc

        return AudioSignal(samples=audio, sample_rate=int(sr))

    @staticmethod
    def _read_soundfile(source):
        if isinstance(source, (bytes, bytearray)):
            with BytesIO(source) as bio:
                audio, sr = sf.read(bio, dtype="float32", always_2d=True)
        else:
            audio, sr = sf.read(str(source), dtype="float32", always_2d=True)
        return audio[:, 0], sr

    @staticmethod
    def _read_librosa(source):
        if isinstance(source, (bytes, bytearray)):
            # audioread умеет работать только с путями
            fd, tmp_path = tempfile.mkstemp(suffix=".audio")
            try:
                with os.fdopen(fd, "wb") as tmp:
                    tmp.write(source)
                audio, sr = librosa.load(tmp_path, sr=None, mono=False)
            finally:
                os.unlink(tmp_path)
        else:
            audio, sr = librosa.load(str(Path(source)), sr=None, mono=False)

        if audio.ndim > 1:
            audio = audio[0]
        return np.asarray(audio, dtype=np.float32), sr
