# gec_annotator/config.py
import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

# Определение базовых путей относительно корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = BASE_DIR / "config" / "annotator.yaml"


class AlignmentCosts(BaseModel):
    """
    Стоимости операций выравнивания.
    Замена = lemma + pos + char, где char: нормализованное расстояние Левенштейна (0..1).
    """
    insertion: float = Field(1.0, gt=0)
    deletion: float = Field(1.0, gt=0)
    lemma_mismatch: float = Field(0.499, ge=0)  # max замены строго меньше удаления + вставки
    open_pos_mismatch: float = Field(0.25, ge=0)  # ADJ/ADV/NOUN/VERB между собой
    pos_mismatch: float = Field(0.5, ge=0)
    transposition: float = Field(1.0, gt=0)  # За каждый токен окна сверх первого
    max_transposition_window: int = Field(5, ge=2)

    @property
    def max_substitution(self) -> float:
        return self.lemma_mismatch + max(self.open_pos_mismatch, self.pos_mismatch) + 1.0

    @model_validator(mode='after')
    def check_triangle(self):
        # Замена несвязанных токенов не должна стоить больше удаления + вставки,
        # иначе выравнивание распадается на пары D/I
        if self.max_substitution > self.insertion + self.deletion:
            raise ValueError(
                f"Max substitution cost {self.max_substitution} exceeds "
                f"insertion + deletion ({self.insertion + self.deletion})"
            )
        return self


class ClassifierThresholds(BaseModel):
    # Порог нормализованного расстояния для SPELL: frien -> friend (0.17) проходит, this -> these (0.4) нет
    spelling_max_distance: float = Field(0.34, gt=0, lt=1)


class AnnotatorConfig(BaseModel):
    alignment: AlignmentCosts = Field(default_factory=AlignmentCosts)
    classifier: ClassifierThresholds = Field(default_factory=ClassifierThresholds)


def load_config(path: Optional[Union[str, Path]] = None) -> AnnotatorConfig:
    """
    Загружает конфигурацию из YAML. Отсутствующие ключи получают значения по умолчанию.
    """
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.warning(f"Config {path} not found, using defaults")
        return AnnotatorConfig()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    logger.info(f"Loaded annotator config from {path}")
    return AnnotatorConfig.model_validate(data)
