import logging
from typing import List, Optional, Sequence, Tuple

from gec_annotator.config import AlignmentCosts
from gec_annotator.constants import OPEN_POS
from gec_annotator.core.data_structures import AlignOp, Alignment, Edit, Token
from gec_annotator.utils import char_distance
from gec_annotator.validators import ensure_sentence

logger = logging.getLogger(__name__)


class TokenAligner:
    """
    Выравнивает два предложения взвешенным расстоянием Дамерау-Левенштейна.
    Стоимость замены зависит от леммы, части речи и посимвольной близости,
    поэтому морфологически близкие пары (dog -> dogs) выравниваются заменой,
    а не парой удаление + вставка.
    """

    def __init__(self, costs: Optional[AlignmentCosts] = None):
        self.costs = costs or AlignmentCosts()

    def align(self, source: Sequence[Token], target: Sequence[Token]) -> Alignment:
        ensure_sentence(source, "source")
        ensure_sentence(target, "target")

        n, m = len(source), len(target)
        width = m + 1

        # Плоские таблицы: стоимость, ход и окно перестановки на каждую клетку
        cost = [0.0] * ((n + 1) * width)
        move = [AlignOp.MATCH] * ((n + 1) * width)
        window = [1] * ((n + 1) * width)

        for i in range(1, n + 1):
            cost[i * width] = cost[(i - 1) * width] + self.costs.deletion
            move[i * width] = AlignOp.DELETE
        for j in range(1, m + 1):
            cost[j] = cost[j - 1] + self.costs.insertion
            move[j] = AlignOp.INSERT

        source_low = [t.lower for t in source]
        target_low = [t.lower for t in target]

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                cell = i * width + j
                diagonal = cell - width - 1

                if source[i - 1].text == target[j - 1].text:
                    cost[cell] = cost[diagonal]
                    move[cell] = AlignOp.MATCH
                    continue

                deletion = cost[cell - width] + self.costs.deletion
                insertion = cost[cell - 1] + self.costs.insertion
                substitution = cost[diagonal] + self.substitution_cost(source[i - 1], target[j - 1])
                transposition, k = self._transposition(cost, width, i, j, source_low, target_low)

                # Порядок кандидатов задаёт разрешение ничьих: T > S > I > D
                candidates = [
                    (transposition, AlignOp.TRANSPOSE),
                    (substitution, AlignOp.SUBSTITUTE),
                    (insertion, AlignOp.INSERT),
                    (deletion, AlignOp.DELETE),
                ]
                best_cost, best_move = candidates[0]
                for candidate_cost, candidate_move in candidates[1:]:
                    if candidate_cost < best_cost:
                        best_cost, best_move = candidate_cost, candidate_move

                cost[cell] = best_cost
                move[cell] = best_move
                if best_move == AlignOp.TRANSPOSE:
                    window[cell] = k

        operations = self._backtrace(source, target, move, window, width)
        total = cost[n * width + m]

        logger.debug(f"Aligned {n}x{m} tokens with cost {total:.3f}: "
                     f"{' '.join(op.op.value for op in operations)}")

        return Alignment(list(source), list(target), operations, total)

    def substitution_cost(self, a: Token, b: Token) -> float:
        """
        lemma + pos + char. Пары, отличающиеся только регистром, стоят 0.
        """
        if a.lower == b.lower:
            return 0.0

        lemma_cost = 0.0 if a.lemma == b.lemma else self.costs.lemma_mismatch

        if a.pos == b.pos:
            pos_cost = 0.0
        elif a.pos in OPEN_POS and b.pos in OPEN_POS:
            pos_cost = self.costs.open_pos_mismatch
        else:
            pos_cost = self.costs.pos_mismatch

        return lemma_cost + pos_cost + char_distance(a.text, b.text)

    def _transposition(
            self,
            cost: List[float],
            width: int,
            i: int,
            j: int,
            source_low: List[str],
            target_low: List[str]
    ) -> Tuple[float, int]:
        """
        Ищет окно из k+1 токенов, которые на обеих сторонах совпадают как мультимножества.
        Окно растёт назад по диагонали, пока диагональная стоимость продолжает меняться:
        совпавший токен обрывает поиск.
        """
        k = 1
        while i - k >= 1 and j - k >= 1 and k + 1 <= self.costs.max_transposition_window \
                and cost[(i - k + 1) * width + j - k + 1] != cost[(i - k) * width + j - k]:
            if sorted(source_low[i - k - 1:i]) == sorted(target_low[j - k - 1:j]):
                return cost[(i - k - 1) * width + j - k - 1] + k * self.costs.transposition, k + 1
            k += 1
        return float("inf"), 1

    @staticmethod
    def _backtrace(
            source: Sequence[Token],
            target: Sequence[Token],
            move: List[AlignOp],
            window: List[int],
            width: int
    ) -> List[Edit]:
        i, j = len(source), len(target)
        operations = []

        while i + j != 0:
            op = move[i * width + j]
            if op in (AlignOp.MATCH, AlignOp.SUBSTITUTE):
                span = (i - 1, i), (j - 1, j)
                i, j = i - 1, j - 1
            elif op == AlignOp.DELETE:
                span = (i - 1, i), (j, j)
                i -= 1
            elif op == AlignOp.INSERT:
                span = (i, i), (j - 1, j)
                j -= 1
            else:
                k = window[i * width + j]
                span = (i - k, i), (j - k, j)
                i, j = i - k, j - k
            operations.append(Edit.between(source, target, span[0], span[1], op))

        operations.reverse()
        return operations
