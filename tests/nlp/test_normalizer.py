"""Tests for romanization variant normalization."""
import pytest
from kanadrill.nlp.normalizer import (
    canonical_romanization,
    expand_double_n,
    expand_long_vowels,
    expand_syllable_variants,
    expand_variants,
    is_romanization_match,
    normalize_base,
)


class TestRules:
    """Test the individual expansion rules."""

    def test_normalize_base(self):
        """Test lower-casing and trimming."""
        assert normalize_base("  ToKyo ") == "tokyo"

    def test_long_vowels(self):
        """Test macron vowels expand to their ASCII spellings."""
        assert expand_long_vowels("tō") == {"tō", "to", "tou", "toh", "too"}

    def test_long_vowels_every_occurrence(self):
        """Test all occurrences of a macron are replaced together."""
        variants = expand_long_vowels("tōkyō")
        assert "toukyou" in variants
        assert "tokyo" in variants

    def test_long_vowels_untouched(self):
        """Test strings without macrons are returned as-is."""
        assert expand_long_vowels("kana") == {"kana"}

    def test_syllable_variants(self):
        """Test Hepburn/Kunrei syllable groups."""
        assert expand_syllable_variants("shi") == {"shi", "si"}
        assert expand_syllable_variants("si") == {"si", "shi"}
        assert expand_syllable_variants("ji") == {"ji", "zi", "di"}
        assert "jitu" in expand_syllable_variants("jitsu")

    def test_double_n(self):
        """Test nn collapses and a final or pre-consonant n doubles."""
        assert "ona" in expand_double_n("onna")
        assert "kinn" in expand_double_n("kin")
        assert "dennki" in expand_double_n("denki")

    def test_double_n_before_vowel(self):
        """Test n before a vowel is left alone."""
        assert expand_double_n("kana") == {"kana"}


class TestExpandVariants:
    """Test the composed expansion."""

    def test_includes_base(self):
        """Test the normalized input is always a variant."""
        assert "shashin" in expand_variants("  SHASHIN ")

    def test_rules_compose(self):
        """Test forms that need two rules combined are reached."""
        variants = expand_variants("shō")
        assert "syou" in variants
        assert "syo" in variants

    def test_long_vowel_with_n(self):
        """Test long vowel and double-n combined."""
        assert "shinnbunn" in expand_variants("shinbun")
        assert "toukyou" in expand_variants("tōkyō")


class TestIsRomanizationMatch:
    """Test whole-word matching."""

    @pytest.mark.parametrize("answer,accepted", [
        ("toukyou", ["tōkyō"]),
        ("tokyo", ["tōkyō"]),
        ("si", ["shi"]),
        ("jitu", ["nichi", "jitsu"]),
        ("gakko", ["gakkō"]),
        ("dennki", ["denki"]),
        ("DENKI", ["denki"]),
        ("  denki  ", ["denki"]),
        ("syasin", ["shashin"]),
        ("ona", ["onna"]),
    ])
    def test_accepts_variants(self, answer, accepted):
        """Test spelling variants of an accepted reading match."""
        assert is_romanization_match(answer, accepted)

    @pytest.mark.parametrize("answer,accepted", [
        ("wrong", ["denki"]),
        ("ddenki", ["denki"]),
        ("ni", ["nichi", "jitsu"]),
        ("tenki", ["denki"]),
        ("kyoto", ["tōkyō"]),
    ])
    def test_rejects_unrelated(self, answer, accepted):
        """Test expansion never makes an unrelated answer match."""
        assert not is_romanization_match(answer, accepted)

    def test_exact_regression(self):
        """Test the plain answer still matches itself."""
        assert is_romanization_match("denki", ["denki"])

    def test_empty_answer(self):
        """Test empty and whitespace answers never match."""
        assert not is_romanization_match("", ["denki"])
        assert not is_romanization_match("   ", ["denki"])

    def test_no_accepted_answers(self):
        """Test an empty accepted list never matches."""
        assert not is_romanization_match("denki", [])

    @pytest.mark.parametrize("accepted", ["tōkyō", "shashin", "jitsu", "gakkō", "onna", "chūgakkō", "kyō"])
    def test_symmetry(self, accepted):
        """Test every generated variant is accepted for its source."""
        for variant in expand_variants(accepted):
            assert is_romanization_match(variant, [accepted]), variant


class TestCanonicalRomanization:
    """Test display-form canonicalization."""

    def test_long_vowels_to_macrons(self):
        """Test doubled vowels become macrons."""
        assert canonical_romanization("toukyou") == "tōkyō"

    def test_syllables_to_hepburn(self):
        """Test Kunrei syllables become Hepburn."""
        assert canonical_romanization("Si") == "shi"
        assert canonical_romanization("tu") == "tsu"
        assert canonical_romanization("hune") == "fune"
