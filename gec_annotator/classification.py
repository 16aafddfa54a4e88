import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, List, Optional, Sequence, Tuple

import networkx as nx

from gec_annotator.config import ClassifierThresholds
from gec_annotator.constants import AUX_DEPRELS, DEGREE_MODIFIERS
from gec_annotator.core.data_structures import Edit, Token
from gec_annotator.core.grammar import ErrorCategory, GrammaticalError, OperationType
from gec_annotator.utils import (
    apostrophe_form,
    build_dependency_graph,
    char_distance,
    coarse_category,
    find_subject,
    is_contraction,
    is_possessive,
    is_punct,
    joined_text,
    span_heads,
)
from gec_annotator.validators import ensure_edit, ensure_sentence

logger = logging.getLogger(__name__)

Tokens = Tuple[Token, ...]


@dataclass
class EditContext:
    """Всё, что нужно уровням классификации помимо токенов самой правки."""
    source: Sequence[Token]
    target: Sequence[Token]
    thresholds: ClassifierThresholds

    @cached_property
    def source_graph(self) -> nx.DiGraph:
        return build_dependency_graph(self.source)

    @cached_property
    def target_graph(self) -> nx.DiGraph:
        return build_dependency_graph(self.target)


Tier = Callable[[Tokens, Tokens, EditContext], Optional[ErrorCategory]]


# ========== ВСПОМОГАТЕЛЬНЫЕ ПРЕДИКАТЫ ==========

def is_infinitival_to(token: Token) -> bool:
    return token.lower == "to" and token.pos == "PART" and token.rel not in ("prep", "case")


def dominant_category(tokens: Sequence[Token]) -> Optional[str]:
    """
    Преобладающая грубая категория: общая для всех размеченных токенов,
    иначе общая для синтаксических вершин диапазона.
    [to, eat] -> VERB (вершина 'eat'), [not, always, good] -> None
    """
    categories = {coarse_category(t) for t in tokens} - {None}
    if len(categories) == 1:
        return categories.pop()

    head_categories = {coarse_category(t) for t in span_heads(tokens)} - {None}
    if len(head_categories) == 1:
        return head_categories.pop()
    return None


def _same_lemma(a: Token, b: Token) -> bool:
    return a.lemma.lower() == b.lemma.lower()


# ========== УРОВНИ ==========

def punctuation_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    sides = [side for side in (o, c) if side]
    if sides and all(is_punct(t) for side in sides for t in side):
        return ErrorCategory.PUNCTUATION
    return None


def orthography_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    # Только регистр и/или пробелы: Home -> home, friendsleeps -> friend sleeps
    if not o or not c:
        return None
    if joined_text(o) == joined_text(c):
        return ErrorCategory.ORTHOGRAPHY
    # wont -> wo n't; притяжательный маркер оставляем морфологии: rivers -> river 's
    if not any(is_possessive(t) for t in o + c) and \
            joined_text(o, strip_joiners=True) == joined_text(c, strip_joiners=True):
        return ErrorCategory.ORTHOGRAPHY
    return None


def spelling_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    if len(o) != 1 or len(c) != 1:
        return None
    a, b = o[0], c[0]
    if not (a.text.isalpha() and b.text.isalpha()):
        return None
    if coarse_category(a) is None or coarse_category(a) != coarse_category(b) or _same_lemma(a, b):
        return None
    if char_distance(a.text, b.text) < ctx.thresholds.spelling_max_distance:
        return ErrorCategory.SPELLING
    return None


def word_order_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    if len(o) < 2 or len(c) < 2:
        return None
    source_lemmas = [t.lemma.lower() for t in o]
    target_lemmas = [t.lemma.lower() for t in c]
    if sorted(source_lemmas) == sorted(target_lemmas) and source_lemmas != target_lemmas:
        return ErrorCategory.WORD_ORDER
    return None


def contraction_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    # Только 1:1 или одна сторона пуста: will -> wo n't сокращением не считается
    if o and c and (len(o) > 1 or len(c) > 1):
        return None
    source_fragments = {apostrophe_form(t.text) for t in o if is_contraction(t)}
    target_fragments = {apostrophe_form(t.text) for t in c if is_contraction(t)}
    if source_fragments != target_fragments:
        return ErrorCategory.CONTRACTION
    return None


def morphology_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    if not o or not c:
        return _one_sided_morphology(o or c)

    category = dominant_category(c)
    if category not in ("NOUN", "VERB", "ADJ"):
        return None
    # Морфология имеет смысл только для связанных сторон
    if not (_same_lemma(o[-1], c[-1]) or dominant_category(o) == category):
        return None

    if category == "NOUN":
        return _noun_morphology(o, c)
    if category == "VERB":
        if len(o) == len(c) == 1:
            return _verb_morphology(o[0], c[0], ctx)
        return _verb_group_morphology(o, c)
    return _adjective_morphology(o, c)


def part_of_speech_tier(o: Tokens, c: Tokens, ctx: EditContext) -> Optional[ErrorCategory]:
    # Для Missing и Replacement берём целевую сторону, для Unnecessary исходную
    category = dominant_category(c if c else o)
    if category is None:
        return None
    return ErrorCategory(category)


# ========== МОРФОЛОГИЯ ==========

def _one_sided_morphology(tokens: Tokens) -> Optional[ErrorCategory]:
    if len(tokens) == 1:
        if is_possessive(tokens[0]):
            return ErrorCategory.NOUN_POSSESSIVE
        # Инфинитивное to считается частью формы глагола: like go -> like to go
        if is_infinitival_to(tokens[0]):
            return ErrorCategory.VERB_FORM
    if all(t.rel in AUX_DEPRELS and coarse_category(t) == "VERB" for t in tokens):
        return ErrorCategory.VERB_TENSE
    return None


def _noun_morphology(o: Tokens, c: Tokens) -> Optional[ErrorCategory]:
    if any(is_possessive(t) for t in o) != any(is_possessive(t) for t in c):
        return ErrorCategory.NOUN_POSSESSIVE
    if len(o) != 1 or len(c) != 1 or not _same_lemma(o[0], c[0]):
        return None
    if o[0].morph("Number") != c[0].morph("Number"):
        return ErrorCategory.NOUN_NUMBER
    # childs -> children
    return ErrorCategory.NOUN_INFLECTION


def _agree(a: Token, b: Token) -> bool:
    """Лицо и число не противоречат друг другу там, где указаны у обоих."""
    for name in ("Person", "Number"):
        va, vb = a.morph(name), b.morph(name)
        if va and vb and va != vb:
            return False
    return True


def _verb_morphology(a: Token, b: Token, ctx: EditContext) -> Optional[ErrorCategory]:
    if not _same_lemma(a, b):
        return None

    finite = a.morph("VerbForm") == "Fin" and b.morph("VerbForm") == "Fin"
    same_tense = a.morph("Tense") == b.morph("Tense")

    # go -> went
    if finite and not same_tense and _agree(a, b):
        return ErrorCategory.VERB_TENSE

    # I has -> I have: согласование проверяем, только если у глагола есть подлежащее
    person_number_changed = any(a.morph(name) != b.morph(name) for name in ("Person", "Number"))
    if finite and same_tense and person_number_changed:
        subject = find_subject(b, ctx.target, ctx.target_graph) or find_subject(a, ctx.source, ctx.source_graph)
        if subject is not None:
            return ErrorCategory.VERB_SUBJECT_AGREEMENT

    # eat -> eating
    if a.morph("VerbForm") != b.morph("VerbForm"):
        return ErrorCategory.VERB_FORM

    # getted -> got
    return ErrorCategory.VERB_INFLECTION


def _verb_group_morphology(o: Tokens, c: Tokens) -> Optional[ErrorCategory]:
    if not _same_lemma(o[-1], c[-1]):
        return None
    if not all(coarse_category(t) in ("VERB", "PART") for t in o + c):
        return None
    # to eat -> eating; eat -> has eaten
    if any(is_infinitival_to(t) for t in o + c):
        return ErrorCategory.VERB_FORM
    return ErrorCategory.VERB_TENSE


def _adjective_morphology(o: Tokens, c: Tokens) -> Optional[ErrorCategory]:
    if len(o) == len(c) == 1:
        if _same_lemma(o[0], c[0]) and o[0].morph("Degree") != c[0].morph("Degree"):
            return ErrorCategory.ADJECTIVE_FORM
        return None

    # most small -> smallest, bigger -> more big
    for run, single in ((o, c), (c, o)):
        if len(run) == 2 and len(single) == 1 and run[0].lower in DEGREE_MODIFIERS and \
                _same_lemma(run[1], single[0]):
            return ErrorCategory.ADJECTIVE_FORM
    return None


class TieredClassifier:
    """
    Назначает правке (OperationType, ErrorCategory).
    Уровни проверяются строго по порядку, первый сработавший побеждает:
    поверхностные эвристики идут раньше рассуждений о частях речи,
    иначе чисто орфографическая правка была бы помечена, например, как VERB.
    """

    tiers: List[Tuple[str, Tier]] = [
        ("punctuation", punctuation_tier),
        ("orthography", orthography_tier),
        ("spelling", spelling_tier),
        ("word_order", word_order_tier),
        ("contraction", contraction_tier),
        ("morphology", morphology_tier),
        ("part_of_speech", part_of_speech_tier),
    ]

    def __init__(self, thresholds: Optional[ClassifierThresholds] = None):
        self.thresholds = thresholds or ClassifierThresholds()

    def classify(self, edit: Edit, source: Sequence[Token], target: Sequence[Token]) -> GrammaticalError:
        ensure_sentence(source, "source")
        ensure_sentence(target, "target")
        ensure_edit(edit, source, target)

        operation = OperationType.of(edit)
        o = tuple(source[edit.source_start:edit.source_end])
        c = tuple(target[edit.target_start:edit.target_end])

        ctx = EditContext(source, target, self.thresholds)
        category = self.categorize(o, c, ctx)

        logger.debug(f"Classified {edit} as {operation.value}:{category.value}")
        return GrammaticalError(operation, category)

    def categorize(self, o: Tokens, c: Tokens, ctx: EditContext) -> ErrorCategory:
        # Вырожденные правки: пусто, только пробелы, одинаковые строки
        if not o and not c:
            return ErrorCategory.NONE_OR_IGNORED
        o = tuple(t for t in o if not t.is_space)
        c = tuple(t for t in c if not t.is_space)
        if not o and not c:
            return ErrorCategory.NONE_OR_IGNORED
        if o and c and [t.text for t in o] == [t.text for t in c]:
            return ErrorCategory.NONE_OR_IGNORED

        # Совпадение последних токенов без учёта регистра: классифицируем без них.
        # [Because] -> [, because], [Doctor] -> [The doctor]
        if o and c and o[-1].lower == c[-1].lower and (len(o) > 1 or len(c) > 1):
            return self.categorize(o[:-1], c[:-1], ctx)

        for name, tier in self.tiers:
            category = tier(o, c, ctx)
            if category is not None:
                logger.debug(f"Tier '{name}' matched: {category.value}")
                return category

        return ErrorCategory.OTHER
