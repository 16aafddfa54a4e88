from .conllu_engine import ConlluPreprocessor
from .spacy_engine import SpacyPreprocessor

__all__ = ["ConlluPreprocessor", "SpacyPreprocessor"]
