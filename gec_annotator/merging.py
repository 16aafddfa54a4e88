import logging
from typing import Callable, List, Optional, Sequence, Tuple

from gec_annotator.constants import DEGREE_MODIFIERS
from gec_annotator.core.data_structures import AlignOp, Edit, Token
from gec_annotator.utils import coarse_category, is_content, is_contraction, is_punct, joined_text
from gec_annotator.validators import ensure_edits

logger = logging.getLogger(__name__)

MergeRule = Callable[[Edit, Edit], bool]


def _punct_only(tokens: Sequence[Token]) -> bool:
    return bool(tokens) and all(is_punct(t) for t in tokens)


def _case_change(edit: Edit) -> bool:
    return len(edit.source_tokens) == len(edit.target_tokens) == 1 and \
        edit.source_tokens[0].lower == edit.target_tokens[0].lower


def attaches_punctuation(left: Edit, right: Edit) -> bool:
    """
    Правило 1: пунктуация прилипает к слову, регистр которого она меняет.
    [. Because] -> [, because]
    """
    for punct, word in ((left, right), (right, left)):
        sides = [s for s in (punct.source_tokens, punct.target_tokens) if s]
        if sides and all(_punct_only(s) for s in sides) and _case_change(word):
            return True
    return False


def _pure_kind(edit: Edit) -> Optional[str]:
    if not edit.source_tokens and edit.target_tokens:
        return "insert"
    if edit.source_tokens and not edit.target_tokens:
        return "delete"
    return None


def extends_run(left: Edit, right: Edit) -> bool:
    """
    Правило 1а: подряд идущие чистые вставки (или чистые удаления) образуют одну правку,
    если ни одна из них не состоит из одной пунктуации.
    [are] -> [Students are not always good .]: 'not always good' одной вставкой
    """
    kind = _pure_kind(left)
    if kind is None or kind != _pure_kind(right):
        return False
    return not any(_punct_only(e.source_tokens or e.target_tokens) for e in (left, right))


def _one_to_many(edit: Edit) -> Optional[Tuple[Tuple[Token, ...], Token]]:
    """Возвращает (многотокенная сторона, одиночный токен) или None."""
    if len(edit.source_tokens) == 1 and len(edit.target_tokens) > 1:
        return edit.target_tokens, edit.source_tokens[0]
    if len(edit.target_tokens) == 1 and len(edit.source_tokens) > 1:
        return edit.source_tokens, edit.target_tokens[0]
    return None


def _is_split_word(run: Sequence[Token], single: Token) -> bool:
    # friend sleeps -> friendsleeps, river 's -> rivers, wo n't -> wont
    return joined_text(run, strip_joiners=True) == joined_text([single], strip_joiners=True)


def _is_contracted_host(run: Sequence[Token], single: Token) -> bool:
    # will -> wo n't: форма-носитель той же леммы плюс клитика
    return len(run) == 2 and is_contraction(run[1]) and not is_contraction(run[0]) and \
        run[0].lemma.lower() == single.lemma.lower()


def _is_periphrastic_degree(run: Sequence[Token], single: Token) -> bool:
    # most small -> smallest
    return len(run) == 2 and run[0].lower in DEGREE_MODIFIERS and \
        coarse_category(run[1]) == "ADJ" and coarse_category(single) == "ADJ" and \
        run[1].lemma == single.lemma


def _is_verb_group(run: Sequence[Token], single: Token) -> bool:
    # consume -> to eat, ate -> has eaten
    categories = [coarse_category(t) for t in run]
    return coarse_category(single) == "VERB" and categories[-1] == "VERB" and \
        all(c in ("VERB", "PART") for c in categories)


def forms_unit(left: Edit, right: Edit) -> bool:
    """
    Правило 2: после слияния несколько токенов одной стороны образуют
    единицу, соответствующую одному токену другой стороны.
    """
    combined = left.merge(right)
    pair = _one_to_many(combined)
    if pair is None:
        return False
    run, single = pair
    return _is_split_word(run, single) or _is_contracted_host(run, single) or \
        _is_periphrastic_degree(run, single) or _is_verb_group(run, single)


def _shared_category(tokens: Sequence[Token]) -> Optional[str]:
    categories = {coarse_category(t) for t in tokens}
    if len(categories) == 1:
        return categories.pop()
    return None


def same_type(left: Edit, right: Edit) -> bool:
    """
    Правило 3: две перестановки подряд или две замены одной грубой категории
    хотя бы на одной стороне.
    """
    if left.op == right.op == AlignOp.TRANSPOSE:
        return True
    if not all((left.source_tokens, left.target_tokens, right.source_tokens, right.target_tokens)):
        return False
    if AlignOp.TRANSPOSE in (left.op, right.op):
        return False
    return _shared_category(left.source_tokens + right.source_tokens) is not None or \
        _shared_category(left.target_tokens + right.target_tokens) is not None


def _contentless(edit: Edit) -> bool:
    tokens = edit.source_tokens + edit.target_tokens
    return any(t.is_space for t in tokens) and not any(is_content(t) for t in tokens)


def absorbs_residue(left: Edit, right: Edit) -> bool:
    """Правило 4: правка только из пробелов не может стоять самостоятельно."""
    return _contentless(left) or _contentless(right)


class RuleMerger:
    """
    Сливает соседние атомарные правки в лингвистически цельные.
    Правила проверяются по порядку; после каждого слияния проход начинается заново,
    пока не будет достигнута неподвижная точка.
    """

    rules: List[Tuple[str, MergeRule]] = [
        ("punctuation", attaches_punctuation),
        ("run", extends_run),
        ("unit", forms_unit),
        ("same_type", same_type),
        ("residue", absorbs_residue),
    ]

    def merge(self, edits: Sequence[Edit]) -> List[Edit]:
        ensure_edits(edits)
        merged = [e for e in edits if not e.is_match]

        changed = True
        while changed:
            changed = False
            for index in range(len(merged) - 1):
                left, right = merged[index], merged[index + 1]
                if not left.precedes(right):
                    continue

                rule_name = self.first_rule(left, right)
                if rule_name is not None:
                    logger.debug(f"Merging {left} + {right} by rule '{rule_name}'")
                    merged[index:index + 2] = [left.merge(right)]
                    changed = True
                    break

        return merged

    def first_rule(self, left: Edit, right: Edit) -> Optional[str]:
        for name, rule in self.rules:
            if rule(left, right):
                return name
        return None
