"""Turn a source segment into a fallback question.

The rewrite is shallow: strip a leading question word, swap
pronouns for the nearest earlier noun-like word, drop the segment into a
template and patch up surface grammar. Agreement uses an "ends in s" rule
on the single preceding token, so words such as "analysis" or "species"
come out wrong.
"""
from __future__ import annotations

import re
from typing import Optional

from .templates import DEFAULT_TEMPLATE, Template, match_template

LEADING_INTERROGATIVE = re.compile(r"^(?:how|what|why|when|where|who)\s+", re.IGNORECASE)
TRAILING_PUNCTUATION = re.compile(r"[\s.,;:!?]+$")
PRONOUN = re.compile(r"\b(?:it|they|this|that|these)\b", re.IGNORECASE)
WORD = re.compile(r"[A-Za-z]+")
AUXILIARY = re.compile(r"\b(?:is|are|was|were|do|does)\b", re.IGNORECASE)
PRECEDING_TOKEN = re.compile(r"(\S+)\s*$")

# words never used as a pronoun's antecedent
NON_NOUNS = {
    # pronouns and determiners
    "it", "its", "they", "them", "their", "this", "that", "these", "those",
    "he", "she", "his", "her", "we", "our", "you", "your", "which", "who",
    "what", "the", "an",
    # conjunctions
    "and", "or", "but", "nor", "yet", "because", "although", "while",
    "whereas", "than", "then", "also", "not",
    # prepositions
    "in", "on", "at", "to", "for", "of", "with", "by", "from", "as", "into",
    "onto", "about", "over", "under", "between", "through", "during",
    # auxiliaries
    "is", "are", "was", "were", "be", "been", "being", "do", "does", "did",
    "has", "have", "had", "can", "could", "will", "would", "should", "may",
    "might", "must",
}

PLURAL_FORMS = {"is": "are", "are": "are", "was": "were", "were": "were", "do": "do", "does": "do"}
SINGULAR_FORMS = {"is": "is", "are": "is", "was": "was", "were": "was", "do": "does", "does": "does"}


def _is_noun_like(word: str) -> bool:
    return len(word) >= 3 and word.lower() not in NON_NOUNS


def find_antecedent(prefix: str) -> Optional[str]:
    """Return the nearest noun-like word in ``prefix``, scanning backward."""
    for word in reversed(WORD.findall(prefix)):
        if _is_noun_like(word):
            return word
    return None


def resolve_pronouns(text: str) -> str:
    """Replace it/they/this/that/these with their nearest antecedent.

    A pronoun with no usable word before it is left as it is.
    """

    def _replace(match: re.Match) -> str:
        return find_antecedent(text[: match.start()]) or match.group(0)

    return PRONOUN.sub(_replace, text)


def _is_plural(token: str) -> bool:
    token = token.lower()
    return token.endswith("s") and not token.endswith("ss")


def _agree(verb: str, previous: Optional[str]) -> str:
    if not previous:
        return verb
    forms = PLURAL_FORMS if _is_plural(previous) else SINGULAR_FORMS
    replacement = forms[verb.lower()]
    if verb[0].isupper():
        replacement = replacement.capitalize()
    return replacement


def _previous_token(prefix: str) -> Optional[str]:
    match = PRECEDING_TOKEN.search(prefix)
    if not match:
        return None
    token = re.sub(r"[^A-Za-z]", "", match.group(1))
    return token or None


def fix_grammar(question: str) -> str:
    """End with a single "?", align is/are-style verbs, capitalize."""
    question = question.strip().rstrip("?").rstrip() + "?"

    position = 0
    while True:
        match = AUXILIARY.search(question, position)
        if not match:
            break
        verb = _agree(match.group(0), _previous_token(question[: match.start()]))
        question = question[: match.start()] + verb + question[match.end():]
        position = match.start() + len(verb)

    return question[:1].upper() + question[1:]


def prepare_segment(segment: str) -> str:
    text = LEADING_INTERROGATIVE.sub("", segment.strip(), count=1)
    text = text[:1].lower() + text[1:]
    text = TRAILING_PUNCTUATION.sub("", text)
    return resolve_pronouns(text)


def synthesize_question(segment: str, template: Optional[Template] = None) -> str:
    """Rewrite ``segment`` as a question using ``template`` or the first match."""
    template = template or match_template(segment)
    text = prepare_segment(segment)
    draft = template.fill(text) or DEFAULT_TEMPLATE.fill(text)
    return fix_grammar(draft)
