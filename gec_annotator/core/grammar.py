# gec_annotator/core/grammar.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple

from .data_structures import Edit


class OperationType(str, Enum):
    MISSING = "M"
    UNNECESSARY = "U"
    REPLACEMENT = "R"

    @classmethod
    def of(cls, edit: Edit) -> "OperationType":
        """Тип операции выводится только из пустоты диапазонов и никогда не выбирается отдельно."""
        if edit.source_start == edit.source_end:
            return cls.MISSING
        if edit.target_start == edit.target_end:
            return cls.UNNECESSARY
        return cls.REPLACEMENT


class ErrorCategory(str, Enum):
    """Закрытая таксономия категорий. Значения совпадают с кодами M2."""
    NOUN = "NOUN"
    VERB = "VERB"
    ADJECTIVE = "ADJ"
    ADVERB = "ADV"
    DETERMINER = "DET"
    PREPOSITION = "PREP"
    CONJUNCTION = "CONJ"
    PRONOUN = "PRON"
    PARTICLE = "PART"
    CONTRACTION = "CONTR"
    PUNCTUATION = "PUNCT"
    ORTHOGRAPHY = "ORTH"
    SPELLING = "SPELL"
    WORD_ORDER = "WO"
    OTHER = "OTHER"

    # Морфологические уточнения
    NOUN_NUMBER = "NOUN:NUM"
    NOUN_POSSESSIVE = "NOUN:POSS"
    NOUN_INFLECTION = "NOUN:INFL"
    VERB_TENSE = "VERB:TENSE"
    VERB_FORM = "VERB:FORM"
    VERB_INFLECTION = "VERB:INFL"
    VERB_SUBJECT_AGREEMENT = "VERB:SVA"
    ADJECTIVE_FORM = "ADJ:FORM"

    NONE_OR_IGNORED = "UNK"


@dataclass(frozen=True)
class GrammaticalError:
    operation: OperationType
    category: ErrorCategory

    @property
    def is_none_or_ignored(self) -> bool:
        return self.category == ErrorCategory.NONE_OR_IGNORED

    @property
    def code(self) -> str:
        if self.is_none_or_ignored:
            return ErrorCategory.NONE_OR_IGNORED.value
        return f"{self.operation.value}:{self.category.value}"

    def __str__(self):
        return self.code


@dataclass(frozen=True)
class Annotation:
    """Правка, привязанная к своей ошибке. Равенство: те же диапазоны и та же категория."""
    edit: Edit
    error: GrammaticalError

    @classmethod
    def of(cls, edit: Edit, category: ErrorCategory) -> "Annotation":
        return cls(edit, GrammaticalError(OperationType.of(edit), category))

    @property
    def operation(self) -> OperationType:
        return self.error.operation

    @property
    def category(self) -> ErrorCategory:
        return self.error.category

    def as_tuple(self) -> Tuple[OperationType, ErrorCategory, Tuple[int, int], Tuple[int, int]]:
        return self.error.operation, self.error.category, self.edit.source_span, self.edit.target_span

    def to_dict(self) -> Dict[str, Any]:
        return {
            "operation": self.error.operation.value,
            "category": self.error.category.value,
            "code": self.error.code,
            "source_span": list(self.edit.source_span),
            "target_span": list(self.edit.target_span),
            "source_text": self.edit.source_text,
            "target_text": self.edit.target_text,
        }

    def to_m2(self, annotator_id: int = 0) -> str:
        """
        Строка правки в формате M2:
        A 3 3|||M:VERB:FORM|||to|||REQUIRED|||-NONE-|||0
        Пустая правка в M2 записывается как "-NONE-".
        """
        correction = self.edit.target_text if self.edit.target_tokens else "-NONE-"
        return (f"A {self.edit.source_start} {self.edit.source_end}|||{self.error.code}|||"
                f"{correction}|||REQUIRED|||-NONE-|||{annotator_id}")

    def __str__(self):
        return f"{self.error.code} {self.edit}"
