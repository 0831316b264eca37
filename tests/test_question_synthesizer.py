import pytest
from FlashcardsModule.question_synthesizer import (
    fix_grammar,
    resolve_pronouns,
    synthesize_question,
)


def test_pronoun_replaced_by_nearest_noun_like_word():
    text = "Chlorophyll absorbs light and it drives photosynthesis"
    assert resolve_pronouns(text) == "Chlorophyll absorbs light and light drives photosynthesis"


def test_pronoun_match_is_case_insensitive():
    text = "Enzymes speed reactions and These lower energy barriers"
    assert resolve_pronouns(text) == "Enzymes speed reactions and reactions lower energy barriers"


def test_pronoun_without_antecedent_is_kept():
    assert resolve_pronouns("it rains often in the tropics") == "it rains often in the tropics"
    assert resolve_pronouns("This matters") == "This matters"


@pytest.mark.parametrize(
    "draft,expected",
    [
        ("why is it significant that cells divide??", "Why is it significant that cells divide?"),
        ("which concept are described by the statement", "Which concept is described by the statement?"),
        ("the enzymes is active", "The enzymes are active?"),
        ("the glass are full", "The glass is full?"),
        ("the cells Does divide", "The cells Do divide?"),
        ("is this right", "Is this right?"),
        # "ends in s" misreads irregular singulars
        ("the species is rare", "The species are rare?"),
        # only the token right before the verb counts, question words included
        ("the cells which are dividing", "The cells which is dividing?"),
        ("why are cells small", "Why is cells small?"),
    ],
)
def test_fix_grammar(draft, expected):
    assert fix_grammar(draft) == expected


def test_synthesize_relationship_question():
    segment = (
        "Photosynthesis allows plants to convert light into chemical energy "
        "because chlorophyll absorbs specific wavelengths."
    )
    assert synthesize_question(segment) == (
        "What is the relationship between photosynthesis allows plants to convert "
        "light into chemical energy and chlorophyll absorbs specific wavelengths?"
    )


def test_synthesize_strips_leading_interrogative():
    segment = "How enzymes lower the activation energy of a reaction."
    assert synthesize_question(segment) == (
        "Why is it significant that enzymes lower the activation energy of a reaction?"
    )


def test_synthesize_resolves_pronouns_then_fixes_agreement():
    segment = "Ribosomes read mRNA and they are found in the cytoplasm."
    assert synthesize_question(segment) == (
        "Why is it significant that ribosomes read mRNA and mRNA is found in the cytoplasm?"
    )


@pytest.mark.parametrize("segment", ["", "?", "What?!", "   "])
def test_synthesize_never_raises(segment):
    question = synthesize_question(segment)
    assert question.endswith("?")
    assert not question.endswith("??")
