"""Форматирование отчета для вывода в консоль."""

from barkcount.core.dto import BarkReport, Detection


def format_time(seconds: float) -> str:
    """Время в виде m:ss.cc (сотые отбрасываются, не округляются)."""
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    centis = int((seconds % 1) * 100)
    return f"{mins}:{secs:02d}.{centis:02d}"


def format_detection(index: int, detection: Detection) -> str:
    confidence = int(round(detection.confidence * 100))
    return f"  #{index:<3} {format_time(detection.timestamp)}  {confidence}% confident"


def format_report(report: BarkReport) -> str:
    """Форматирует отчет в читаемый текст."""
    lines = [
        f"Файл: {report.file_name}",
        f"Длительность: {report.duration:.2f} секунд",
        f"Лаев: {report.bark_count}",
        "",
    ]
    for i, d in enumerate(report.detections, start=1):
        lines.append(format_detection(i, d))

    if report.bark_count > 1:
        lines.append("")
        lines.append(f"Интервал лая: {report.span:.1f}s")
        lines.append(f"Средний интервал: {report.average_interval:.1f}s")
    return "\n".join(lines)
