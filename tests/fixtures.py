"""
Разобранные предложения для тестов в духе вывода spaCy (en_core_web_sm).
Строка: FORM LEMMA UPOS XPOS FEATS HEAD DEPREL, HEAD 1-based, 0 означает корень.
"""
from gec_annotator.engines import ConlluPreprocessor

_preprocessor = ConlluPreprocessor()

PRON_I = "I I PRON PRP Case=Nom|Number=Sing|Person=1|PronType=Prs"


def conllu_block(rows: str) -> str:
    lines = []
    for idx, row in enumerate(rows.strip().splitlines(), 1):
        form, lemma, upos, xpos, feats, head, deprel = row.split()
        lines.append("\t".join([str(idx), form, lemma, upos, xpos, feats, head, deprel, "_", "_"]))
    return "\n".join(lines) + "\n\n"


def sentence(rows: str):
    return _preprocessor.parse(conllu_block(rows))


LIKE_CONSUME = sentence(f"""
{PRON_I} 2 nsubj
like like VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
consume consume VERB VB VerbForm=Inf 2 xcomp
food food NOUN NN Number=Sing 3 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

LIKE_TO_EAT = sentence(f"""
{PRON_I} 2 nsubj
like like VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
to to PART TO _ 4 aux
eat eat VERB VB VerbForm=Inf 2 xcomp
food food NOUN NN Number=Sing 4 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

AT_HOME_UPPER = sentence("""
My my PRON PRP$ Number=Sing|Person=1|Poss=Yes|PronType=Prs 2 poss
friend friend NOUN NN Number=Sing 3 nsubj
sleeps sleep VERB VBZ Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
at at ADP IN _ 3 prep
Home home NOUN NN Number=Sing 4 pobj
. . PUNCT . PunctType=Peri 3 punct
""")

AT_HOME = sentence("""
My my PRON PRP$ Number=Sing|Person=1|Poss=Yes|PronType=Prs 2 poss
friend friend NOUN NN Number=Sing 3 nsubj
sleeps sleep VERB VBZ Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
at at ADP IN _ 3 prep
home home NOUN NN Number=Sing 4 pobj
. . PUNCT . PunctType=Peri 3 punct
""")

FRIENDSLEEPS = sentence("""
My my PRON PRP$ Number=Sing|Person=1|Poss=Yes|PronType=Prs 2 poss
friendsleeps friendsleeps NOUN NN Number=Sing 0 ROOT
at at ADP IN _ 2 prep
home home NOUN NN Number=Sing 3 pobj
. . PUNCT . PunctType=Peri 2 punct
""")

FRIEN_SLEEPS = sentence("""
My my PRON PRP$ Number=Sing|Person=1|Poss=Yes|PronType=Prs 2 poss
frien frien NOUN NN Number=Sing 3 nsubj
sleeps sleep VERB VBZ Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
at at ADP IN _ 3 prep
home home NOUN NN Number=Sing 4 pobj
. . PUNCT . PunctType=Peri 3 punct
""")

DOG_IS_CUTE = sentence("""
This this DET DT Number=Sing|PronType=Dem 2 det
dog dog NOUN NN Number=Sing 3 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
cute cute ADJ JJ Degree=Pos 3 acomp
""")

IS_CUTE_DOG = sentence("""
This this PRON DT Number=Sing|PronType=Dem 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
cute cute ADJ JJ Degree=Pos 4 amod
dog dog NOUN NN Number=Sing 2 attr
""")

LIKE_GO = sentence(f"""
{PRON_I} 3 nsubj
would would AUX MD VerbForm=Fin 3 aux
like like VERB VB VerbForm=Inf 0 ROOT
go go VERB VB VerbForm=Inf 3 xcomp
home home ADV RB _ 4 advmod
please please INTJ UH _ 3 intj
! ! PUNCT . PunctType=Peri 3 punct
""")

LIKE_TO_GO = sentence(f"""
{PRON_I} 3 nsubj
would would AUX MD VerbForm=Fin 3 aux
like like VERB VB VerbForm=Inf 0 ROOT
to to PART TO _ 5 aux
go go VERB VB VerbForm=Inf 3 xcomp
home home ADV RB _ 5 advmod
please please INTJ UH _ 3 intj
! ! PUNCT . PunctType=Peri 3 punct
""")

RIVER_EDGE = sentence("""
It it PRON PRP Case=Nom|Gender=Neut|Number=Sing|Person=3|PronType=Prs 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
at at ADP IN _ 2 prep
the the DET DT Definite=Def|PronType=Art 6 det
river river NOUN NN Number=Sing 6 compound
edge edge NOUN NN Number=Sing 3 pobj
""")

RIVERS_EDGE = sentence("""
It it PRON PRP Case=Nom|Gender=Neut|Number=Sing|Person=3|PronType=Prs 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
at at ADP IN _ 2 prep
the the DET DT Definite=Def|PronType=Art 6 det
rivers river NOUN NNS Number=Plur 6 compound
edge edge NOUN NN Number=Sing 3 pobj
""")

RIVER_POSS_EDGE = sentence("""
It it PRON PRP Case=Nom|Gender=Neut|Number=Sing|Person=3|PronType=Prs 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
at at ADP IN _ 2 prep
the the DET DT Definite=Def|PronType=Art 5 det
river river NOUN NN Number=Sing 7 poss
's 's PART POS _ 5 case
edge edge NOUN NN Number=Sing 3 pobj
""")

VE_TO_GO = sentence(f"""
{PRON_I} 2 nsubj
've have VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
to to PART TO _ 4 aux
go go VERB VB VerbForm=Inf 2 xcomp
home home ADV RB _ 4 advmod
. . PUNCT . PunctType=Peri 2 punct
""")

HAVE_TO_GO = sentence(f"""
{PRON_I} 2 nsubj
have have VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
to to PART TO _ 4 aux
go go VERB VB VerbForm=Inf 2 xcomp
home home ADV RB _ 4 advmod
. . PUNCT . PunctType=Peri 2 punct
""")

WANT_IN_FLY = sentence(f"""
{PRON_I} 2 nsubj
want want VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
in in ADP IN _ 2 prep
fly fly NOUN NN Number=Sing 3 pobj
""")

WANT_TO_FLY = sentence(f"""
{PRON_I} 2 nsubj
want want VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
to to PART TO _ 4 aux
fly fly VERB VB VerbForm=Inf 2 xcomp
""")

BECAUSE_UPPER = sentence("""
Because because SCONJ IN _ 0 ROOT
""")

COMMA_BECAUSE = sentence("""
, , PUNCT , PunctType=Comm 2 punct
because because SCONJ IN _ 0 ROOT
""")

MOST_SMALL = sentence("""
This this PRON DT Number=Sing|PronType=Dem 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 6 det
most most ADV RBS Degree=Sup 5 advmod
small small ADJ JJ Degree=Pos 6 amod
computer computer NOUN NN Number=Sing 2 attr
. . PUNCT . PunctType=Peri 2 punct
""")

SMALLEST = sentence("""
This this PRON DT Number=Sing|PronType=Dem 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 5 det
smallest small ADJ JJS Degree=Sup 5 amod
computer computer NOUN NN Number=Sing 2 attr
. . PUNCT . PunctType=Peri 2 punct
""")

BIG_COMPUTER = sentence("""
This this PRON DT Number=Sing|PronType=Dem 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 5 det
big big ADJ JJ Degree=Pos 5 amod
computer computer NOUN NN Number=Sing 2 attr
. . PUNCT . PunctType=Peri 2 punct
""")

BIGGEST_COMPUTER = sentence("""
This this PRON DT Number=Sing|PronType=Dem 2 nsubj
is be AUX VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 5 det
biggest big ADJ JJS Degree=Sup 5 amod
computer computer NOUN NN Number=Sing 2 attr
. . PUNCT . PunctType=Peri 2 punct
""")

DOG_ARE_CUTE = sentence("""
Dog dog NOUN NN Number=Sing 2 nsubj
are be AUX VBP Mood=Ind|Tense=Pres|VerbForm=Fin 0 ROOT
cute cute ADJ JJ Degree=Pos 2 acomp
. . PUNCT . PunctType=Peri 2 punct
""")

DOGS_ARE_CUTE = sentence("""
dogs dog NOUN NNS Number=Plur 2 nsubj
are be AUX VBP Mood=Ind|Tense=Pres|VerbForm=Fin 0 ROOT
cute cute ADJ JJ Degree=Pos 2 acomp
. . PUNCT . PunctType=Peri 2 punct
""")

FIVE_CHILDS = sentence(f"""
{PRON_I} 2 nsubj
have have VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
five five NUM CD NumType=Card 4 nummod
childs child NOUN NNS Number=Plur 2 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

FIVE_CHILDREN = sentence(f"""
{PRON_I} 2 nsubj
have have VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
five five NUM CD NumType=Card 4 nummod
children child NOUN NNS Number=Plur 2 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

GO_YESTERDAY = sentence(f"""
{PRON_I} 2 nsubj
go go VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
to to PART TO _ 4 aux
see see VERB VB VerbForm=Inf 2 xcomp
him he PRON PRP Case=Acc|Gender=Masc|Number=Sing|Person=3|PronType=Prs 4 dobj
yesterday yesterday NOUN NN Number=Sing 2 npadvmod
. . PUNCT . PunctType=Peri 2 punct
""")

WENT_YESTERDAY = sentence(f"""
{PRON_I} 2 nsubj
went go VERB VBD Tense=Past|VerbForm=Fin 0 ROOT
to to PART TO _ 4 aux
see see VERB VB VerbForm=Inf 2 xcomp
him he PRON PRP Case=Acc|Gender=Masc|Number=Sing|Person=3|PronType=Prs 4 dobj
yesterday yesterday NOUN NN Number=Sing 2 npadvmod
. . PUNCT . PunctType=Peri 2 punct
""")

AM_EAT = sentence(f"""
{PRON_I} 3 nsubj
am be AUX VBP Mood=Ind|Number=Sing|Person=1|Tense=Pres|VerbForm=Fin 3 aux
eat eat VERB VB VerbForm=Inf 0 ROOT
dinner dinner NOUN NN Number=Sing 3 dobj
. . PUNCT . PunctType=Peri 3 punct
""")

AM_EATING = sentence(f"""
{PRON_I} 3 nsubj
am be AUX VBP Mood=Ind|Number=Sing|Person=1|Tense=Pres|VerbForm=Fin 3 aux
eating eat VERB VBG Aspect=Prog|Tense=Pres|VerbForm=Part 0 ROOT
dinner dinner NOUN NN Number=Sing 3 dobj
. . PUNCT . PunctType=Peri 3 punct
""")

MUST_TO_EAT = sentence(f"""
{PRON_I} 4 nsubj
must must AUX MD VerbForm=Fin 4 aux
to to PART TO _ 4 aux
eat eat VERB VB VerbForm=Inf 0 ROOT
now now ADV RB _ 4 advmod
. . PUNCT . PunctType=Peri 4 punct
""")

MUST_EAT = sentence(f"""
{PRON_I} 3 nsubj
must must AUX MD VerbForm=Fin 3 aux
eat eat VERB VB VerbForm=Inf 0 ROOT
now now ADV RB _ 3 advmod
. . PUNCT . PunctType=Peri 3 punct
""")

GETTED_MONEY = sentence(f"""
{PRON_I} 2 nsubj
getted get VERB VBD Tense=Past|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 4 det
money money NOUN NN Number=Sing 2 dobj
! ! PUNCT . PunctType=Peri 2 punct
""")

GOT_MONEY = sentence(f"""
{PRON_I} 2 nsubj
got get VERB VBD Tense=Past|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 4 det
money money NOUN NN Number=Sing 2 dobj
! ! PUNCT . PunctType=Peri 2 punct
""")

HAS_MONEY = sentence(f"""
{PRON_I} 2 nsubj
has have VERB VBZ Mood=Ind|Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 4 det
money money NOUN NN Number=Sing 2 dobj
! ! PUNCT . PunctType=Peri 2 punct
""")

HAVE_MONEY = sentence(f"""
{PRON_I} 2 nsubj
have have VERB VBP Mood=Ind|Tense=Pres|VerbForm=Fin 0 ROOT
the the DET DT Definite=Def|PronType=Art 4 det
money money NOUN NN Number=Sing 2 dobj
! ! PUNCT . PunctType=Peri 2 punct
""")

AWAITS_RESPONSE = sentence(f"""
{PRON_I} 2 nsubj
awaits await VERB VBZ Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
your your PRON PRP$ Person=2|Poss=Yes|PronType=Prs 4 poss
response response NOUN NN Number=Sing 2 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

AWAIT_RESPONSE = sentence(f"""
{PRON_I} 2 nsubj
await await VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
your your PRON PRP$ Person=2|Poss=Yes|PronType=Prs 4 poss
response response NOUN NN Number=Sing 2 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

MATT_LIKE = sentence("""
Matt Matt PROPN NNP Number=Sing 2 nsubj
like like VERB VBP Tense=Pres|VerbForm=Fin 0 ROOT
fish fish NOUN NN Number=Sing 2 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

MATT_LIKES = sentence("""
Matt Matt PROPN NNP Number=Sing 2 nsubj
likes like VERB VBZ Number=Sing|Person=3|Tense=Pres|VerbForm=Fin 0 ROOT
fish fish NOUN NN Number=Sing 2 dobj
. . PUNCT . PunctType=Peri 2 punct
""")

IF_I_WAS = sentence(f"""
If if SCONJ IN _ 3 mark
{PRON_I} 3 nsubj
was be AUX VBD Mood=Ind|Number=Sing|Person=1|Tense=Past|VerbForm=Fin 8 advcl
you you PRON PRP Case=Acc|Person=2|PronType=Prs 3 attr
, , PUNCT , PunctType=Comm 8 punct
{PRON_I} 8 nsubj
would would AUX MD VerbForm=Fin 8 aux
go go VERB VB VerbForm=Inf 0 ROOT
home home ADV RB _ 8 advmod
. . PUNCT . PunctType=Peri 8 punct
""")

IF_I_WERE = sentence(f"""
If if SCONJ IN _ 3 mark
{PRON_I} 3 nsubj
were be AUX VBD Mood=Ind|Tense=Past|VerbForm=Fin 8 advcl
you you PRON PRP Case=Acc|Person=2|PronType=Prs 3 attr
, , PUNCT , PunctType=Comm 8 punct
{PRON_I} 8 nsubj
would would AUX MD VerbForm=Fin 8 aux
go go VERB VB VerbForm=Inf 0 ROOT
home home ADV RB _ 8 advmod
. . PUNCT . PunctType=Peri 8 punct
""")

AM_I_EARLY = sentence("""
Am be AUX VBP Mood=Ind|Number=Sing|Person=1|Tense=Pres|VerbForm=Fin 0 ROOT
I I PRON PRP Case=Nom|Number=Sing|Person=1|PronType=Prs 1 nsubj
early early ADV RB _ 1 advmod
? ? PUNCT . PunctType=Peri 1 punct
""")

I_AM_NOT_EARLY = sentence(f"""
{PRON_I} 2 nsubj
am be AUX VBP Mood=Ind|Number=Sing|Person=1|Tense=Pres|VerbForm=Fin 0 ROOT
not not PART RB Polarity=Neg 2 neg
early early ADV RB _ 2 advmod
. . PUNCT . PunctType=Peri 2 punct
""")

ARE = sentence("""
are be AUX VBP Mood=Ind|Tense=Pres|VerbForm=Fin 0 ROOT
""")

STUDENTS_ARE_NOT_ALWAYS_GOOD = sentence("""
Students student NOUN NNS Number=Plur 2 nsubj
are be AUX VBP Mood=Ind|Tense=Pres|VerbForm=Fin 0 ROOT
not not PART RB Polarity=Neg 2 neg
always always ADV RB _ 5 advmod
good good ADJ JJ Degree=Pos 2 acomp
. . PUNCT . PunctType=Peri 2 punct
""")

WONT_DO = sentence(f"""
{PRON_I} 3 nsubj
wont wont AUX MD VerbForm=Fin 3 aux
do do VERB VB VerbForm=Inf 0 ROOT
that that PRON DT Number=Sing|PronType=Dem 3 dobj
. . PUNCT . PunctType=Peri 3 punct
""")

WO_NT_DO = sentence(f"""
{PRON_I} 4 nsubj
wo will AUX MD VerbForm=Fin 4 aux
n't not PART RB Polarity=Neg 4 neg
do do VERB VB VerbForm=Inf 0 ROOT
that that PRON DT Number=Sing|PronType=Dem 4 dobj
. . PUNCT . PunctType=Peri 4 punct
""")

THEY_WILL_DO = sentence("""
they they PRON PRP Case=Nom|Number=Plur|Person=3|PronType=Prs 3 nsubj
will will AUX MD VerbForm=Fin 3 aux
do do VERB VB VerbForm=Inf 0 ROOT
no no ADV RB _ 5 neg
more more ADV RBR Degree=Cmp 3 advmod
""")

THEY_WONT_DO = sentence("""
they they PRON PRP Case=Nom|Number=Plur|Person=3|PronType=Prs 4 nsubj
wo will AUX MD VerbForm=Fin 4 aux
n't not PART RB Polarity=Neg 4 neg
do do VERB VB VerbForm=Inf 0 ROOT
anymore anymore ADV RB _ 4 advmod
work work NOUN NN Number=Sing 4 dobj
""")
