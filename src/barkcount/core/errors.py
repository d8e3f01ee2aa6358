"""Исключения пакета barkcount."""


class BarkCountError(Exception):
    """Базовое исключение для всех ошибок подсчета лая."""


class DecodeError(BarkCountError):
    """Входные данные не удалось декодировать в сэмплы."""


class ProcessingError(BarkCountError):
    """Непредвиденная ошибка при нарезке или детекции."""


class InitializationError(ProcessingError):
    """Модель уверенности не смогла подготовиться к работе."""
