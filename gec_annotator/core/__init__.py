from .data_structures import Token, AlignOp, Edit, Alignment
from .grammar import OperationType, ErrorCategory, GrammaticalError, Annotation
from .interfaces import BasePreprocessor

__all__ = [
    "Token",
    "AlignOp",
    "Edit",
    "Alignment",
    "OperationType",
    "ErrorCategory",
    "GrammaticalError",
    "Annotation",
    "BasePreprocessor",
]
