import pytest

from barkcount.core.dto import BarkReport, Detection
from barkcount.formatting import format_detection, format_report, format_time


@pytest.mark.parametrize("seconds,expected", [
    (0.0, "0:00.00"),
    (2.0, "0:02.00"),
    (65.25, "1:05.25"),
    (125.5, "2:05.50"),
])
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


def test_format_detection_shows_percent():
    line = format_detection(1, Detection(65.25, 0.834))
    assert "1:05.25" in line
    assert "83% confident" in line


def test_format_report_includes_intervals():
    report = BarkReport(
        bark_count=2,
        detections=[Detection(2.0, 0.8), Detection(4.0, 0.9)],
        file_name="yard.wav",
        duration=5.0,
    )
    text = format_report(report)
    assert "0:02.00" in text and "0:04.00" in text
    assert "90% confident" in text
    assert "Средний интервал: 2.0s" in text
