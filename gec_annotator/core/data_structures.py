# gec_annotator/core/data_structures.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Token(BaseModel):
    """
    Универсальная единица анализа, которую отдаёт внешний парсер.
    Ядро только читает токены и никогда их не мутирует.
    """
    model_config = ConfigDict(frozen=True)

    id: int  # 0-based index in sentence
    text: str  # Surface form
    whitespace: bool = True  # Trailing whitespace after the token
    lemma: str  # Normalized form
    pos: str  # UPOS (NOUN, VERB, etc.)
    tag: str = ""  # Fine-grained tag (Penn: VBZ, NNS, POS...)
    rel: str  # Dependency relation (nsubj, obj)
    head_id: int  # Index of the head token; root points at itself

    # Морфология в стиле UD: Number=Plur, Tense=Past ...
    feats: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode='after')
    def check_indices(self):
        if self.id < 0 or self.head_id < 0:
            raise ValueError(f"Invalid indices for token '{self.text}': id={self.id}, head_id={self.head_id}")
        return self

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def is_space(self) -> bool:
        return self.pos == "SPACE" or (bool(self.text) and self.text.isspace())

    def morph(self, name: str) -> Optional[str]:
        return self.feats.get(name)


class AlignOp(str, Enum):
    """Примитивная операция выравнивания."""
    MATCH = "M"
    SUBSTITUTE = "S"
    INSERT = "I"
    DELETE = "D"
    TRANSPOSE = "T"


@dataclass(frozen=True)
class Edit:
    """
    Пара полуоткрытых диапазонов [start, end) в исходном и целевом предложениях.
    Равенство структурное: сравниваются только границы диапазонов.
    Токены внутри диапазонов хранятся для правил слияния.
    """
    source_start: int
    source_end: int
    target_start: int
    target_end: int
    source_tokens: Tuple[Token, ...] = field(default=(), compare=False, repr=False)
    target_tokens: Tuple[Token, ...] = field(default=(), compare=False, repr=False)
    op: AlignOp = field(default=AlignOp.SUBSTITUTE, compare=False)

    @classmethod
    def between(
            cls,
            source: Sequence[Token],
            target: Sequence[Token],
            source_span: Tuple[int, int],
            target_span: Tuple[int, int],
            op: Optional[AlignOp] = None
    ) -> "Edit":
        """Собирает правку по диапазонам, вырезая токены из предложений."""
        s_start, s_end = source_span
        t_start, t_end = target_span
        if op is None:
            op = cls._structural_op(s_end - s_start, t_end - t_start)
        return cls(
            s_start, s_end, t_start, t_end,
            tuple(source[s_start:s_end]),
            tuple(target[t_start:t_end]),
            op
        )

    @staticmethod
    def _structural_op(source_len: int, target_len: int) -> AlignOp:
        if source_len == 0:
            return AlignOp.INSERT
        if target_len == 0:
            return AlignOp.DELETE
        return AlignOp.SUBSTITUTE

    @property
    def source_span(self) -> Tuple[int, int]:
        return self.source_start, self.source_end

    @property
    def target_span(self) -> Tuple[int, int]:
        return self.target_start, self.target_end

    @property
    def is_match(self) -> bool:
        return self.op == AlignOp.MATCH

    @property
    def source_text(self) -> str:
        return " ".join(t.text for t in self.source_tokens)

    @property
    def target_text(self) -> str:
        return " ".join(t.text for t in self.target_tokens)

    def precedes(self, other: "Edit") -> bool:
        """Правки непосредственно соседствуют: между ними нет ни одного совпавшего токена."""
        return self.source_end == other.source_start and self.target_end == other.target_start

    def merge(self, other: "Edit") -> "Edit":
        if not self.precedes(other):
            raise ValueError(f"Cannot merge non-adjacent edits {self} and {other}")

        op = AlignOp.TRANSPOSE if self.op == other.op == AlignOp.TRANSPOSE else self._structural_op(
            other.source_end - self.source_start, other.target_end - self.target_start
        )
        return Edit(
            self.source_start, other.source_end,
            self.target_start, other.target_end,
            self.source_tokens + other.source_tokens,
            self.target_tokens + other.target_tokens,
            op
        )

    def __str__(self):
        return (f"{self.op.value}[{self.source_start}:{self.source_end}]"
                f"'{self.source_text}' -> [{self.target_start}:{self.target_end}]'{self.target_text}'")


@dataclass
class Alignment:
    """
    Результат выравнивания: все операции пути (включая совпадения) и его стоимость.
    Операции покрывают оба предложения ровно один раз и по порядку.
    """
    source: List[Token]
    target: List[Token]
    operations: List[Edit]
    cost: float = 0.0

    @property
    def edits(self) -> List[Edit]:
        """Только несовпадающие операции: именно их сливает Merger."""
        return [op for op in self.operations if not op.is_match]

    @property
    def matches(self) -> List[Edit]:
        return [op for op in self.operations if op.is_match]
