# gec_annotator/engines/spacy_engine.py
import logging
from typing import List

from gec_annotator.core.data_structures import Token
from gec_annotator.core.interfaces import BasePreprocessor

logger = logging.getLogger(__name__)


class SpacyPreprocessor(BasePreprocessor):
    """Обёртка над локальной моделью spaCy (ставится отдельно: pip install .[spacy])."""

    def __init__(self, model_name: str = "en_core_web_sm", nlp=None):
        if nlp is None:
            import spacy

            logger.info(f"Loading spaCy model '{model_name}'...")
            nlp = spacy.load(model_name)
        self.nlp = nlp

    def process(self, text: str) -> List[List[Token]]:
        doc = self.nlp(text)

        output_sentences = []
        for sent in doc.sents:
            start = sent.start
            converted_sent = []
            for s_token in sent:
                converted_sent.append(Token(
                    id=s_token.i - start,
                    text=s_token.text,
                    whitespace=bool(s_token.whitespace_),
                    lemma=s_token.lemma_ or s_token.lower_,
                    pos=s_token.pos_ or "X",
                    tag=s_token.tag_,
                    rel=s_token.dep_ or "dep",
                    head_id=s_token.head.i - start,
                    feats=s_token.morph.to_dict()
                ))
            output_sentences.append(converted_sent)

        return output_sentences
