import logging
from typing import List, Optional, Sequence

from gec_annotator.alignment import TokenAligner
from gec_annotator.classification import TieredClassifier
from gec_annotator.config import AnnotatorConfig
from gec_annotator.core.data_structures import Alignment, Edit, Token
from gec_annotator.core.grammar import Annotation, GrammaticalError
from gec_annotator.core.interfaces import BasePreprocessor
from gec_annotator.merging import RuleMerger

logger = logging.getLogger(__name__)


class Annotator:
    """
    Главный класс-оркестратор.
    Выравнивание -> слияние -> классификация для пары разобранных предложений.
    Состояния между вызовами не хранит.
    """

    def __init__(self, config: Optional[AnnotatorConfig] = None, preprocessor: Optional[BasePreprocessor] = None):
        self.config = config or AnnotatorConfig()
        self.preprocessor = preprocessor

        logger.info(f"Initializing Annotator (preprocessor={type(preprocessor).__name__ if preprocessor else None})")

        self.aligner = TokenAligner(self.config.alignment)
        self.merger = RuleMerger()
        self.classifier = TieredClassifier(self.config.classifier)

    def align(self, source: Sequence[Token], target: Sequence[Token]) -> Alignment:
        return self.aligner.align(source, target)

    def merge(self, edits: Sequence[Edit]) -> List[Edit]:
        return self.merger.merge(edits)

    def classify(self, edit: Edit, source: Sequence[Token], target: Sequence[Token]) -> GrammaticalError:
        return self.classifier.classify(edit, source, target)

    def annotate(self, source: Sequence[Token], target: Sequence[Token]) -> List[Annotation]:
        """
        Полный цикл: возвращает классифицированные правки в порядке следования.
        Аннотации NoneOrIgnored не отфильтровываются.
        """
        alignment = self.align(source, target)
        edits = self.merge(alignment.edits)

        annotations = [Annotation(edit, self.classify(edit, source, target)) for edit in edits]

        if annotations:
            logger.debug(f"Annotated {len(annotations)} edits: {', '.join(str(a) for a in annotations)}")
        return annotations

    def parse(self, text: str) -> List[Token]:
        if self.preprocessor is None:
            raise RuntimeError("Annotator has no preprocessor configured, pass parsed tokens instead")
        return self.preprocessor.parse(text)

    def annotate_texts(self, source_text: str, target_text: str) -> List[Annotation]:
        return self.annotate(self.parse(source_text), self.parse(target_text))


_default_annotator: Optional[Annotator] = None


def _default() -> Annotator:
    global _default_annotator
    if _default_annotator is None:
        _default_annotator = Annotator()
    return _default_annotator


def align(source: Sequence[Token], target: Sequence[Token]) -> Alignment:
    return _default().align(source, target)


def merge(edits: Sequence[Edit]) -> List[Edit]:
    return _default().merge(edits)


def classify(edit: Edit, source: Sequence[Token], target: Sequence[Token]) -> GrammaticalError:
    return _default().classify(edit, source, target)


def annotate(source: Sequence[Token], target: Sequence[Token]) -> List[Annotation]:
    return _default().annotate(source, target)
