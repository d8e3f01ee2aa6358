import numpy as np
import pytest

from barkcount.core.dto import AudioSignal, BarkReport, Detection


def test_audio_signal_duration_and_readonly():
    signal = AudioSignal(samples=np.zeros(24000), sample_rate=16000)
    assert signal.duration == pytest.approx(1.5)
    assert signal.samples.dtype == np.float32
    with pytest.raises(ValueError):
        signal.samples[0] = 1.0


@pytest.mark.parametrize("samples,rate", [
    (np.zeros(10), 0),
    (np.zeros((10, 2)), 16000),
])
def test_audio_signal_rejects_invalid(samples, rate):
    with pytest.raises(ValueError):
        AudioSignal(samples=samples, sample_rate=rate)


def test_report_view_values():
    report = BarkReport(
        bark_count=3,
        detections=[Detection(1.0, 0.8), Detection(2.5, 0.9), Detection(4.0, 0.75)],
        file_name="dog.wav",
        duration=5.0,
    )
    assert report.span == pytest.approx(3.0)
    assert report.average_interval == pytest.approx(1.5)

    data = report.to_dict()
    assert data["bark_count"] == 3
    assert data["detections"][1] == {"timestamp": 2.5, "confidence": 0.9}
    assert data["simulated"] is False


def test_report_with_single_detection():
    report = BarkReport(bark_count=1, detections=[Detection(2.0, 0.8)])
    assert report.span == 0.0
    assert report.average_interval is None
    assert report.to_dict()["average_interval"] is None
