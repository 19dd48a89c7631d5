# encoding: utf8
"""English display text for the tags the core hands back."""
from pokelegality.eggmoves import EMPTY

EGG_SOURCE_LABELS = {
    'NONE': u"Invalid: not an expected egg move.",
    'BASE': u"Base egg move.",
    'FATHER_EGG': u"Inherited egg move.",
    'PARENT_EGG': u"Inherited egg move.",
    'FATHER_TM': u"Inherited TM/HM move.",
    'PARENT_LEVEL_UP': u"Inherited move learned by level-up.",
    'TUTOR': u"Inherited tutor move.",
    'MAX': u"Any",
    'VOLT_TACKLE': u"Special non-relearn move.",
}

RATING_LABELS = {
    'MATCH': u"Match",
    'PARTIAL_MATCH': u"Partial match",
    'DEFERRED': u"Deferred",
    'DEFERRED_ERRORS': u"Deferred, with errors",
    'NONE': u"No match",
}


def egg_source_label(tag, generation):
    if tag == EMPTY:
        return u""
    return EGG_SOURCE_LABELS[tag.name]


def rating_label(rating):
    return RATING_LABELS[rating.name]
