"""
Скрипт для подсчета лая в одном аудио файле.

Печатает временную шкалу лаев и сводку, как в окне результатов.
"""

import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from barkcount.config import SegmenterConfig
from barkcount.core.dto import BarkReport
from barkcount.core.errors import BarkCountError
from barkcount.formatting import format_report
from barkcount.processor import AudioProcessor
from barkcount.segmenter import BarkSegmenter


def count_single_file(audio_path: Path, config: SegmenterConfig) -> BarkReport:
    """
    Считает лаи в одном файле.

    Args:
        audio_path: Путь к аудио файлу
        config: Параметры сегментации
    """
    processor = AudioProcessor(segmenter=BarkSegmenter(config))
    report = asyncio.run(processor.process_audio(audio_path, file_name=audio_path.name))

    print("=" * 80)
    print("РЕЗУЛЬТАТЫ ПОДСЧЕТА:")
    print("=" * 80)
    print(format_report(report))
    return report


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(description="Подсчет лая в одном файле")
    parser.add_argument("audio_path", type=Path, help="Путь к аудио файлу")
    parser.add_argument("--chunk", type=float, default=1.0, help="Длина окна в секундах")
    parser.add_argument("--gap", type=float, default=0.5, help="Зазор объединения в секундах")
    parser.add_argument("--threshold", type=float, default=0.1, help="Порог RMS")

    args = parser.parse_args()

    if not args.audio_path.exists():
        print(f"Ошибка: файл не найден: {args.audio_path}")
        sys.exit(1)

    cfg = SegmenterConfig(
        chunk_duration=args.chunk,
        merge_gap=args.gap,
        energy_threshold=args.threshold,
    )
    try:
        count_single_file(args.audio_path, cfg)
    except BarkCountError as e:
        print(f"Ошибка: {e}")
        sys.exit(1)
