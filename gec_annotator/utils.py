import string
import unicodedata
from typing import Iterable, List, Optional, Sequence

import networkx as nx
from rapidfuzz.distance import Levenshtein

from gec_annotator.constants import (
    AUX_DEPRELS,
    COARSE_POS,
    CONTRACTIONS,
    COPULA_DEPRELS,
    POSSESSIVE_FORMS,
    POSSESSIVE_TAG,
    SUBJECT_DEPRELS,
    WORD_JOINERS,
)
from gec_annotator.core.data_structures import Token


def normalize_text(text: str) -> str:
    """
    Нормализация текста для сравнения:
    1. NFKC нормализация (для единообразия символов Unicode).
    2. Приведение к нижнему регистру.
    3. Удаление пробельных символов.
    """
    if not text:
        return ""
    text = unicodedata.normalize('NFKC', text)
    return "".join(text.lower().split())


def joined_text(tokens: Iterable[Token], strip_joiners: bool = False) -> str:
    """Склеивает поверхностные формы без пробелов: [friend, sleeps] -> 'friendsleeps'."""
    joined = normalize_text("".join(t.text for t in tokens))
    if strip_joiners:
        joined = joined.translate(str.maketrans("", "", WORD_JOINERS))
    return joined


def char_distance(a: str, b: str) -> float:
    """
    Нормализованное расстояние Левенштейна между формами в нижнем регистре.

    Returns:
        float: 0.0 для одинаковых строк, 1.0 для совсем разных.
    """
    return Levenshtein.normalized_distance(a.lower(), b.lower())


def is_punct(token: Token) -> bool:
    if token.pos == "PUNCT":
        return True
    if token.pos in COARSE_POS:
        return False
    return bool(token.text) and all(ch in string.punctuation or unicodedata.category(ch).startswith("P")
                                    for ch in token.text)


def is_content(token: Token) -> bool:
    return not token.is_space and not is_punct(token)


def coarse_category(token: Token) -> Optional[str]:
    return COARSE_POS.get(token.pos)


def apostrophe_form(text: str) -> str:
    return text.lower().replace("’", "'")


def is_possessive(token: Token) -> bool:
    return token.tag == POSSESSIVE_TAG or (apostrophe_form(token.text) in POSSESSIVE_FORMS and token.rel == "case")


def is_contraction(token: Token) -> bool:
    # Притяжательное 's выглядит как клитика, но это не сокращение
    return apostrophe_form(token.text) in CONTRACTIONS and not is_possessive(token)


def span_heads(tokens: Sequence[Token]) -> List[Token]:
    """Токены, чья вершина лежит вне диапазона (или корень предложения)."""
    ids = {t.id for t in tokens}
    return [t for t in tokens if t.head_id == t.id or t.head_id not in ids]


def build_dependency_graph(sentence: Sequence[Token]) -> nx.DiGraph:
    """
    Строит граф зависимостей: ребро head -> dependent с меткой rel.
    Корень (head_id == id) остаётся узлом без входящих рёбер.
    """
    g = nx.DiGraph()
    for t in sentence:
        g.add_node(t.id)
    for t in sentence:
        if t.head_id != t.id and t.head_id < len(sentence):
            g.add_edge(t.head_id, t.id, rel=t.rel)
    return g


def find_subject(token: Token, sentence: Sequence[Token], graph: Optional[nx.DiGraph] = None) -> Optional[Token]:
    """
    Подлежащее глагола. Для вспомогательного глагола и связки
    подлежащее висит на смысловом глаголе, поэтому поднимаемся к вершине.
    """
    if graph is None:
        graph = build_dependency_graph(sentence)
    if token.id not in graph:
        return None

    candidates = [token.id]
    if token.rel in AUX_DEPRELS or token.rel in COPULA_DEPRELS:
        candidates.append(token.head_id)

    for node in candidates:
        for child in sorted(graph.successors(node)):
            if graph.edges[node, child]["rel"] in SUBJECT_DEPRELS:
                return sentence[child]
    return None
