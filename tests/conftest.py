"""Общие фикстуры и генераторы тестовых сигналов."""

import sys
from io import BytesIO
from pathlib import Path

import numpy as np
import pytest
import soundfile as sf

_src_path = Path(__file__).parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from barkcount.core.dto import AudioSignal  # noqa: E402


def make_signal(seconds, sample_rate=16000, loud_seconds=(), amplitude=0.5):
    """Тишина заданной длины с постоянной амплитудой в указанных секундах."""
    samples = np.zeros(int(seconds * sample_rate), dtype=np.float32)
    for second in loud_seconds:
        start = int(second * sample_rate)
        samples[start:start + sample_rate] = amplitude
    return AudioSignal(samples=samples, sample_rate=sample_rate)


def wav_bytes(samples, sample_rate):
    bio = BytesIO()
    sf.write(bio, samples, sample_rate, format="WAV", subtype="FLOAT")
    return bio.getvalue()


@pytest.fixture
def two_bark_signal():
    return make_signal(5, loud_seconds=(2, 4))


@pytest.fixture
def two_bark_wav(two_bark_signal):
    return wav_bytes(two_bark_signal.samples, two_bark_signal.sample_rate)
