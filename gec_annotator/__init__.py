from .config import AnnotatorConfig, load_config
from .core import Annotation, Edit, ErrorCategory, GrammaticalError, OperationType, Token
from .pipeline import Annotator, align, annotate, classify, merge
from .validators import MalformedInputError

__all__ = [
    "AnnotatorConfig",
    "load_config",
    "Annotation",
    "Edit",
    "ErrorCategory",
    "GrammaticalError",
    "OperationType",
    "Token",
    "Annotator",
    "align",
    "annotate",
    "classify",
    "merge",
    "MalformedInputError",
]
