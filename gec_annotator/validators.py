# gec_annotator/validators.py
import logging
from typing import List, Sequence

from gec_annotator.core.data_structures import Edit, Token

logger = logging.getLogger(__name__)


class MalformedInputError(ValueError):
    """Нарушение контракта на входе конвейера (ошибка интеграции, а не данных)."""

    def __init__(self, message: str, errors: List[str]):
        super().__init__(f"{message}: {'; '.join(errors)}")
        self.errors = errors


class ValidationResult:
    """DTO для результатов валидации."""

    def __init__(self, is_valid: bool, errors: List[str]):
        self.is_valid = is_valid
        self.errors = errors


class InputValidator:
    """
    Проверки структуры предложений и правок.
    Конвейер не восстанавливается после таких ошибок: они поднимаются сразу.
    """

    @staticmethod
    def validate_sentence(tokens: Sequence[Token]) -> ValidationResult:
        errors = []

        for position, token in enumerate(tokens):
            # Индексы идут подряд с нуля, без пропусков
            if token.id != position:
                errors.append(f"Token {position} '{token.text}': id {token.id} breaks the sequence")

            # HEAD ссылается на существующий токен
            if token.head_id >= len(tokens):
                errors.append(f"Token {position} '{token.text}': HEAD {token.head_id} is out of range")

        return ValidationResult(len(errors) == 0, errors)

    @staticmethod
    def validate_edit(edit: Edit, source: Sequence[Token], target: Sequence[Token]) -> ValidationResult:
        errors = []

        if not 0 <= edit.source_start <= edit.source_end <= len(source):
            errors.append(f"Source span {edit.source_span} is out of range for {len(source)} tokens")
        if not 0 <= edit.target_start <= edit.target_end <= len(target):
            errors.append(f"Target span {edit.target_span} is out of range for {len(target)} tokens")

        return ValidationResult(len(errors) == 0, errors)

    @staticmethod
    def validate_edits(edits: Sequence[Edit]) -> ValidationResult:
        """Правки упорядочены и не пересекаются ни в одном из предложений."""
        errors = []

        for edit in edits:
            if edit.source_start > edit.source_end or edit.target_start > edit.target_end:
                errors.append(f"Edit {edit} has an inverted span")
            if len(edit.source_tokens) != edit.source_end - edit.source_start or \
                    len(edit.target_tokens) != edit.target_end - edit.target_start:
                errors.append(f"Edit {edit} carries tokens that do not fit its spans")

        for prev, curr in zip(edits, edits[1:]):
            if curr.source_start < prev.source_end or curr.target_start < prev.target_end:
                errors.append(f"Edits {prev} and {curr} overlap or are out of order")

        return ValidationResult(len(errors) == 0, errors)


def ensure_sentence(tokens: Sequence[Token], side: str = "sentence") -> None:
    result = InputValidator.validate_sentence(tokens)
    if not result.is_valid:
        logger.error(f"Malformed {side}: {result.errors}")
        raise MalformedInputError(f"Malformed {side}", result.errors)


def ensure_edit(edit: Edit, source: Sequence[Token], target: Sequence[Token]) -> None:
    result = InputValidator.validate_edit(edit, source, target)
    if not result.is_valid:
        raise MalformedInputError("Malformed edit", result.errors)


def ensure_edits(edits: Sequence[Edit]) -> None:
    result = InputValidator.validate_edits(edits)
    if not result.is_valid:
        raise MalformedInputError("Malformed edit sequence", result.errors)
