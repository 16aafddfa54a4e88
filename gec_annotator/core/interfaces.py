# gec_annotator/core/interfaces.py
from abc import ABC, abstractmethod
from typing import List
from .data_structures import Token

class BasePreprocessor(ABC):
    @abstractmethod
    def process(self, text: str) -> List[List[Token]]:
        """
        Принимает сырой текст.
        Возвращает список предложений, где каждое предложение есть список Токенов.
        """
        pass

    def parse(self, text: str) -> List[Token]:
        """
        Возвращает все предложения текста одной последовательностью.
        Индексы и ссылки на вершины сдвигаются, чтобы остаться сквозными.
        """
        sentences = self.process(text)
        if len(sentences) == 1:
            return sentences[0]

        tokens = []
        for sentence in sentences:
            offset = len(tokens)
            for token in sentence:
                tokens.append(token.model_copy(update={
                    "id": token.id + offset,
                    "head_id": token.head_id + offset
                }))
        return tokens
