# Открытые части речи: замена внутри этого класса дешевле при выравнивании
OPEN_POS = {"ADJ", "ADV", "NOUN", "VERB"}

# Отображение UPOS -> имя грубой категории (см. ErrorCategory)
# INTJ, NUM, SYM, X: редкие теги, дающие неинформативные категории
COARSE_POS = {
    "NOUN": "NOUN",
    "PROPN": "NOUN",
    "VERB": "VERB",
    "AUX": "VERB",
    "ADJ": "ADJ",
    "ADV": "ADV",
    "DET": "DET",
    "ADP": "PREP",
    "CCONJ": "CONJ",
    "SCONJ": "CONJ",
    "PRON": "PRON",
    "PART": "PART",
}

# Клитики-сокращения (английский)
CONTRACTIONS = {"'d", "'ll", "'m", "n't", "'re", "'s", "'ve"}

# Притяжательный маркер: Penn-тег POS
POSSESSIVE_TAG = "POS"
POSSESSIVE_FORMS = {"'s", "'", "’s", "’"}

# Аналитические степени сравнения: most beautiful -> more beautiful / prettiest
DEGREE_MODIFIERS = {"more", "most"}

# Вспомогательные глаголы и подлежащие по UD / ClearNLP
AUX_DEPRELS = {"aux", "aux:pass", "auxpass"}
SUBJECT_DEPRELS = {"nsubj", "nsubj:pass", "nsubjpass", "csubj", "csubjpass", "expl"}
COPULA_DEPRELS = {"cop"}

# Символы, которые не мешают считать два написания одним словом: sub-way, river's
WORD_JOINERS = "'-’"
