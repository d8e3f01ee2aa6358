"""
Скрипт для батч-подсчета лая во всех аудио файлах директории.

Сохраняет результаты по файлам в JSON и сводную статистику.
"""

import asyncio
import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from barkcount.config import SegmenterConfig
from barkcount.core.errors import BarkCountError
from barkcount.processor import AudioProcessor
from barkcount.segmenter import BarkSegmenter

AUDIO_EXTENSIONS = {'.wav', '.mp3', '.opus', '.flac', '.m4a', '.ogg'}


async def process_file(processor: AudioProcessor, audio_path: Path) -> Dict:
    """
    Обрабатывает один файл и возвращает метрики.

    Args:
        processor: Обработчик аудио
        audio_path: Путь к аудио файлу

    Returns:
        Словарь с результатами обработки
    """
    start_time = time.time()
    try:
        report = await processor.process_audio(audio_path, file_name=audio_path.name)
    except BarkCountError as e:
        return {
            "file": str(audio_path),
            "success": False,
            "error": str(e)
        }

    processing_time = time.time() - start_time
    result = report.to_dict()
    result.update({
        "file": str(audio_path),
        "processing_time": processing_time,
        "success": True,
        "error": None
    })
    return result


async def count_batch(files: List[Path], config: SegmenterConfig) -> List[Dict]:
    processor = AudioProcessor(segmenter=BarkSegmenter(config))
    results = []
    for audio_file in tqdm(files, desc="Обработка"):
        results.append(await process_file(processor, audio_file))
    return results


def run_batch(data_dir: Path, output_path: Path, max_files: Optional[int] = None) -> None:
    """
    Считает лаи во всех файлах директории.

    Args:
        data_dir: Директория с аудио файлами
        output_path: Куда сохранить JSON с результатами
        max_files: Максимальное количество файлов для обработки
    """
    audio_files = sorted(
        f for f in data_dir.rglob('*')
        if f.suffix.lower() in AUDIO_EXTENSIONS and f.is_file()
    )

    if not audio_files:
        print(f"Не найдено аудио файлов в {data_dir}")
        return

    if max_files:
        audio_files = audio_files[:max_files]

    print(f"Найдено файлов: {len(audio_files)}")
    results = asyncio.run(count_batch(audio_files, SegmenterConfig.from_env()))

    successful = [r for r in results if r["success"]]
    failed = [r for r in results if not r["success"]]

    print("\n" + "=" * 80)
    print("РЕЗУЛЬТАТЫ БАТЧ-ПОДСЧЕТА")
    print("=" * 80)
    print(f"Всего файлов: {len(results)}")
    print(f"Успешно обработано: {len(successful)}")
    print(f"Ошибок: {len(failed)}")

    if successful:
        total_duration = sum(r["duration"] for r in successful)
        total_barks = sum(r["bark_count"] for r in successful)
        avg_barks = np.mean([r["bark_count"] for r in successful])
        print(f"\nОбщая длительность аудио: {total_duration:.2f} секунд")
        print(f"Всего лаев: {total_barks}")
        print(f"Среднее число лаев на файл: {avg_barks:.2f}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(results, f, ensure_ascii=False, indent=2)

    print(f"\n✓ Результаты сохранены: {output_path}")


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(description="Батч-подсчет лая")
    parser.add_argument("data_dir", type=Path, help="Директория с аудио файлами")
    parser.add_argument("--output", type=Path, default=Path("bark_results.json"),
                        help="Путь к JSON с результатами")
    parser.add_argument("--max-files", type=int, help="Максимальное количество файлов")

    args = parser.parse_args()

    if not args.data_dir.exists():
        print(f"Ошибка: директория не найдена: {args.data_dir}")
        sys.exit(1)

    run_batch(args.data_dir, args.output, args.max_files)
