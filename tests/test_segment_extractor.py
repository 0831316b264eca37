import pytest
from tools.segment_extractor import LEADING_CONNECTIVE, extract_segments


def test_splits_sentences_keeping_terminators():
    text = (
        "Mitochondria produce most of the cell's ATP. "
        "Ribosomes assemble proteins from amino acids!"
    )
    assert extract_segments(text) == [
        "Mitochondria produce most of the cell's ATP.",
        "Ribosomes assemble proteins from amino acids!",
    ]


def test_drops_short_segments():
    text = "Cells divide. Mitochondria produce most of the cell's ATP."
    assert extract_segments(text) == ["Mitochondria produce most of the cell's ATP."]


def test_drops_leading_connectives():
    text = (
        "However, enzymes lower the activation energy of reactions. "
        "Andromeda is the nearest large galaxy to the Milky Way."
    )
    assert extract_segments(text) == [
        "Andromeda is the nearest large galaxy to the Milky Way."
    ]


def test_long_sentence_is_split_into_clauses():
    text = (
        "The Krebs cycle takes place in the mitochondrial matrix, "
        "it releases carbon dioxide as a waste product; "
        "the cycle also regenerates oxaloacetate for the next turn."
    )
    segments = extract_segments(text)
    assert segments == [
        "The Krebs cycle takes place in the mitochondrial matrix",
        "it releases carbon dioxide as a waste product",
        "the cycle also regenerates oxaloacetate for the next turn.",
    ]


def test_split_on_dashes_drops_connective_clause():
    text = (
        "Glycolysis happens in the cytoplasm - it does not need oxygen at all "
        "— and it yields a small net gain of two ATP molecules per glucose molecule."
    )
    assert extract_segments(text) == [
        "Glycolysis happens in the cytoplasm",
        "it does not need oxygen at all",
    ]


def test_empty_text():
    assert extract_segments("") == []
    assert extract_segments(None) == []


@pytest.mark.parametrize(
    "text",
    [
        "Short. Also short. But this one starts with a connective word though.",
        "A" * 200 + ". " + "Water moves across membranes by osmosis.",
        "Proteins fold into shapes, and shapes determine function, "
        "which is why denatured enzymes stop working, even at normal temperatures, "
        "because their active sites are lost.",
    ],
)
def test_segments_respect_bounds(text):
    for segment in extract_segments(text):
        assert 20 <= len(segment) < 150
        assert not LEADING_CONNECTIVE.match(segment)
