import numpy as np
import pytest

from barkcount.core.dsp import chunk_size_for, iter_windows, resample_linear, rms_energy


@pytest.mark.parametrize("from_rate,to_rate", [(44100, 16000), (8000, 16000), (22050, 11025)])
def test_resample_constant_signal_stays_constant(from_rate, to_rate):
    audio = np.full(from_rate // 2, 0.3, dtype=np.float32)
    out = resample_linear(audio, from_rate, to_rate)
    assert len(out) > 0
    np.testing.assert_allclose(out, 0.3, rtol=1e-6)


def test_resample_same_rate_returns_input():
    audio = np.arange(10, dtype=np.float32)
    assert resample_linear(audio, 16000, 16000) is audio


def test_resample_output_length():
    audio = np.zeros(44100, dtype=np.float32)
    assert len(resample_linear(audio, 44100, 16000)) == 16000


def test_resample_interpolates_and_holds_last_sample():
    audio = np.array([0.0, 1.0, 2.0, 3.0], dtype=np.float32)
    out = resample_linear(audio, 1, 2)
    np.testing.assert_allclose(out, [0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.0])


def test_resample_empty_window():
    out = resample_linear(np.array([], dtype=np.float32), 44100, 16000)
    assert len(out) == 0


def test_rms_energy():
    assert rms_energy(np.array([], dtype=np.float32)) == 0.0
    assert rms_energy(np.full(100, 0.5, dtype=np.float32)) == pytest.approx(0.5)
    assert rms_energy(np.array([1.0, -1.0, 1.0, -1.0])) == pytest.approx(1.0)


def test_iter_windows_last_window_shorter():
    windows = list(iter_windows(np.arange(10), 4))
    assert [start for start, _ in windows] == [0, 4, 8]
    assert [len(w) for _, w in windows] == [4, 4, 2]


def test_chunk_size_for():
    assert chunk_size_for(1.0, 16000) == 16000
    assert chunk_size_for(0.5, 44100) == 22050
    assert chunk_size_for(1e-6, 8000) == 1
