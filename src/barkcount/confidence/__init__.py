"""Модели уверенности детекций"""

from barkcount.confidence.rms_impl import RmsConfidenceModel
from barkcount.confidence.random_impl import RandomConfidenceModel

__all__ = ['RmsConfidenceModel', 'RandomConfidenceModel']
