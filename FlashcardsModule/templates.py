"""Question templates for the rule-based fallback generator.

Templates are tried in order and the first whose pattern matches a segment
wins; ``DEFAULT_TEMPLATE`` has no pattern and is the last resort. Forms with
two placeholders split the segment around the matched phrase.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Template:
    name: str
    form: str
    pattern: Optional[re.Pattern] = None

    @property
    def slots(self) -> int:
        return 2 if "{1}" in self.form else 1

    def matches(self, segment: str) -> bool:
        return self.pattern is None or bool(self.pattern.search(segment))

    def fill(self, text: str) -> Optional[str]:
        """Insert ``text`` into the form, or return ``None`` if it does not split."""
        if self.slots == 1:
            return self.form.format(text)
        parts = self.pattern.split(text, maxsplit=1) if self.pattern else []
        if len(parts) != 2:
            return None
        first, second = (p.strip(" ,;:") for p in parts)
        if not first or not second:
            return None
        return self.form.format(first, second)


TEMPLATES = (
    Template(
        "relationship",
        "What is the relationship between {0} and {1}?",
        re.compile(r"\s+(?:because|since|due to|as a result of)\s+", re.IGNORECASE),
    ),
    Template(
        "comparison",
        "How does {0} compare with {1}?",
        re.compile(r",?\s+(?:whereas|unlike|compared (?:to|with))\s+", re.IGNORECASE),
    ),
    Template(
        "process",
        "How does it happen that {0}?",
        re.compile(
            r"\b(?:process|steps?|stages?|converts?|transforms?|produces?|forms?)\b",
            re.IGNORECASE,
        ),
    ),
    Template(
        "application",
        "In practice, what follows from the fact that {0}?",
        re.compile(
            r"\b(?:used (?:to|for|in)|allows?|enables?|helps?|applied)\b",
            re.IGNORECASE,
        ),
    ),
    Template(
        "definition",
        "Which concept is described by the statement that {0}?",
        re.compile(
            r"\b(?:is|are) (?:a|an|the|defined as|called|known as)\b|\brefers? to\b|\bmeans\b",
            re.IGNORECASE,
        ),
    ),
)

DEFAULT_TEMPLATE = Template("general", "Why is it significant that {0}?")


def match_template(segment: str) -> Template:
    for template in TEMPLATES:
        if template.matches(segment):
            return template
    return DEFAULT_TEMPLATE
