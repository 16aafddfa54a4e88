# gec_annotator/engines/conllu_engine.py
import logging
from typing import List

from conllu import parse

from gec_annotator.core.data_structures import Token
from gec_annotator.core.interfaces import BasePreprocessor

logger = logging.getLogger(__name__)


class ConlluPreprocessor(BasePreprocessor):
    """
    Превращает готовую разметку CoNLL-U в Токены.
    Удобен для тестов и для корпусов, уже прогнанных через внешний парсер.
    """

    def process(self, text: str) -> List[List[Token]]:
        output_sentences = []

        for sentence in parse(text):
            # Диапазоны многословных токенов (1-2) и пустые узлы (8.1) пропускаем
            words = [w for w in sentence if isinstance(w["id"], int)]
            positions = {w["id"]: idx for idx, w in enumerate(words)}

            converted_sent = []
            for idx, word in enumerate(words):
                misc = word.get("misc") or {}
                converted_sent.append(Token(
                    id=idx,
                    text=word["form"],
                    whitespace=misc.get("SpaceAfter") != "No",
                    lemma=word["lemma"] if word["lemma"] not in (None, "_") else word["form"].lower(),
                    pos=word["upos"] or "X",
                    tag=word["xpos"] or "",
                    rel=word["deprel"] or "dep",
                    head_id=self._parse_head_id(word["head"], idx, positions),
                    feats=dict(word["feats"] or {})
                ))

            output_sentences.append(converted_sent)

        logger.debug(f"Read {len(output_sentences)} sentences from CoNLL-U")
        return output_sentences

    @staticmethod
    def _parse_head_id(head, idx: int, positions: dict) -> int:
        """HEAD=0 (корень) указывает на сам токен, остальные переводятся в 0-based позиции."""
        if not head:
            return idx
        if head not in positions:
            logger.warning(f"HEAD {head} of token {idx} points outside the sentence, treating as root")
            return idx
        return positions[head]
