import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Sequence, Set, Tuple

from gec_annotator.core.grammar import Annotation

logger = logging.getLogger(__name__)

EditKey = Tuple


@dataclass
class MetricsResult:
    precision: float
    recall: float
    f_score: float
    tp: int = 0
    fp: int = 0
    fn: int = 0


class MetricsCalculator:
    """
    Сравнивает правки системы с эталонными на уровне правок (как в M2-оценке).
    Правка считается совпавшей, если совпали оба диапазона (и код ошибки при typed=True).
    NoneOrIgnored в подсчёт не входит.
    """

    @staticmethod
    def _keys(annotations: Iterable[Annotation], typed: bool) -> Set[EditKey]:
        keys = set()
        for annotation in annotations:
            if annotation.error.is_none_or_ignored:
                continue
            key = (annotation.edit.source_span, annotation.edit.target_span)
            if typed:
                key += (annotation.error.code,)
            keys.add(key)
        return keys

    @staticmethod
    def f_beta(precision: float, recall: float, beta: float = 0.5) -> float:
        """F0.5 по умолчанию: точность важнее полноты."""
        denominator = beta * beta * precision + recall
        if denominator == 0:
            return 0.0
        return (1 + beta * beta) * precision * recall / denominator

    def calc_edit_metrics(
            self,
            hypothesis: Sequence[Annotation],
            gold: Sequence[Annotation],
            beta: float = 0.5,
            typed: bool = True
    ) -> MetricsResult:
        sys_set = self._keys(hypothesis, typed)
        gold_set = self._keys(gold, typed)

        tp = len(sys_set & gold_set)  # True Positives (совпали)
        fp = len(sys_set - gold_set)  # False Positives (лишние в системе)
        fn = len(gold_set - sys_set)  # False Negatives (пропущенные в системе)

        # Пустая система на пустом эталоне считается идеальной
        precision = tp / (tp + fp) if (tp + fp) > 0 else 1.0
        recall = tp / (tp + fn) if (tp + fn) > 0 else 1.0
        f_score = self.f_beta(precision, recall, beta)

        logger.debug(f"Edit metrics: TP={tp} FP={fp} FN={fn} P={precision:.3f} R={recall:.3f} F={f_score:.3f}")
        return MetricsResult(precision, recall, f_score, tp, fp, fn)

    def calc_category_breakdown(
            self,
            hypothesis: Sequence[Annotation],
            gold: Sequence[Annotation]
    ) -> Dict[str, Dict[str, int]]:
        """
        TP/FP/FN по кодам ошибок (R:VERB:TENSE, M:PUNCT ...).
        FP относится к коду системы, FN к коду эталона.
        """
        sys_set = self._keys(hypothesis, typed=True)
        gold_set = self._keys(gold, typed=True)

        tp = Counter(key[-1] for key in sys_set & gold_set)
        fp = Counter(key[-1] for key in sys_set - gold_set)
        fn = Counter(key[-1] for key in gold_set - sys_set)

        return {
            code: {"tp": tp[code], "fp": fp[code], "fn": fn[code]}
            for code in sorted(set(tp) | set(fp) | set(fn))
        }
