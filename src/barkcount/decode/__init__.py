"""Декодеры аудио-контейнеров"""

from barkcount.decode.soundfile_impl import SoundfileDecoder

__all__ = ['SoundfileDecoder']
