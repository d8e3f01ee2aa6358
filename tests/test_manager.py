import asyncio

import numpy as np

from barkcount.core.contract import IAudioDecoder
from barkcount.core.errors import DecodeError
from barkcount.manager import BarkCountSession, SessionState
from barkcount.processor import AudioProcessor


class StaticDecoder(IAudioDecoder):
    def __init__(self, signal):
        self.signal = signal

    def decode(self, source):
        return self.signal


class BrokenDecoder(IAudioDecoder):
    def decode(self, source):
        raise DecodeError("Unable to decode audio: truncated file")


def test_successful_file_moves_to_results(two_bark_signal):
    received = []
    session = BarkCountSession(
        processor=AudioProcessor(decoder=StaticDecoder(two_bark_signal)),
        on_result=received.append,
    )
    assert session.state == SessionState.IDLE

    report = asyncio.run(session.handle_file(b"data", file_name="walk.wav"))

    assert session.state == SessionState.RESULTS
    assert session.report is report
    assert session.error == ""
    assert received == [report]
    assert report.bark_count == 2


def test_failure_moves_to_error():
    session = BarkCountSession(processor=AudioProcessor(decoder=BrokenDecoder()))

    report = asyncio.run(session.handle_file(b"data", file_name="broken.mp3"))

    assert report is None
    assert session.state == SessionState.ERROR
    assert "truncated file" in session.error
    assert session.report is None


def test_demo_fallback_marks_report_simulated():
    received = []
    session = BarkCountSession(
        processor=AudioProcessor(decoder=BrokenDecoder()),
        on_result=received.append,
        demo_fallback=True,
        rng=np.random.default_rng(3),
    )

    report = asyncio.run(session.handle_file(b"data", file_name="broken.mp3"))

    assert session.state == SessionState.RESULTS
    assert report.simulated is True
    assert 1 <= report.bark_count <= 8
    assert report.file_name == "broken.mp3"
    assert received == [report]


def test_reset_returns_to_idle(two_bark_signal):
    session = BarkCountSession(processor=AudioProcessor(decoder=BrokenDecoder()))
    asyncio.run(session.handle_file(b"data"))
    assert session.state == SessionState.ERROR

    session.reset()

    assert session.state == SessionState.IDLE
    assert session.report is None
    assert session.error == ""


class DiskFailureDecoder(IAudioDecoder):
    def decode(self, source):
        raise OSError("disk read failed")


class CrashingProcessor:
    async def process_audio(self, source, file_name=None):
        raise OSError("")


def test_untyped_decoder_failure_moves_to_error():
    session = BarkCountSession(processor=AudioProcessor(decoder=DiskFailureDecoder()))

    report = asyncio.run(session.handle_file(b"data", file_name="yard.wav"))

    assert report is None
    assert session.state == SessionState.ERROR
    assert "disk read failed" in session.error


def test_unexpected_exception_moves_to_error_and_clears_previous_report(two_bark_signal):
    session = BarkCountSession(processor=AudioProcessor(decoder=StaticDecoder(two_bark_signal)))
    asyncio.run(session.handle_file(b"data"))
    assert session.report is not None

    session.processor = CrashingProcessor()
    report = asyncio.run(session.handle_file(b"data"))

    assert report is None
    assert session.state == SessionState.ERROR
    assert session.error == "Failed to process audio file"
    assert session.report is None
