"""Tests for alleles, genomes and goal profiles."""

from __future__ import annotations

import pytest

from genesolver import Allele, Genome, Profile, matches


class TestAllele:
    @pytest.mark.parametrize("allele", [Allele.G, Allele.Y, Allele.H])
    def test_dominant_class(self, allele: Allele) -> None:
        assert not allele.is_recessive

    @pytest.mark.parametrize("allele", [Allele.W, Allele.X])
    def test_recessive_class(self, allele: Allele) -> None:
        assert allele.is_recessive

    def test_closed_alphabet(self) -> None:
        assert [allele.value for allele in Allele] == ["G", "Y", "H", "W", "X"]
        with pytest.raises(ValueError):
            Allele("Q")


class TestGenome:
    def test_round_trips_through_string(self) -> None:
        genome = Genome.from_string("GYHWXG")
        assert str(genome) == "GYHWXG"
        assert genome[1] is Allele.Y
        assert list(genome) == [Allele.G, Allele.Y, Allele.H, Allele.W, Allele.X, Allele.G]

    def test_equality_and_hash_are_positional(self) -> None:
        assert Genome.from_string("GGYYHH") == Genome.from_string("GGYYHH")
        assert Genome.from_string("GGYYHH") != Genome.from_string("HHYYGG")
        pool = {Genome.from_string("GGYYHH"), Genome.from_string("GGYYHH"), Genome.from_string("HHYYGG")}
        assert len(pool) == 2

    @pytest.mark.parametrize("text", ["GGGGG", "GGGGGGG", ""])
    def test_rejects_wrong_length(self, text: str) -> None:
        with pytest.raises(ValueError):
            Genome.from_string(text)

    def test_is_immutable(self) -> None:
        genome = Genome.from_string("GGGGGG")
        with pytest.raises(AttributeError):
            genome.alleles = ()  # type: ignore[misc]

    def test_allele_counts_cover_every_symbol(self) -> None:
        counts = Genome.from_string("GGYWWW").allele_counts()
        assert counts == {Allele.G: 2, Allele.Y: 1, Allele.H: 0, Allele.W: 3, Allele.X: 0}


class TestProfile:
    def test_count_and_total(self) -> None:
        profile = Profile(g=2, y=2, w=2)
        assert profile.count(Allele.G) == 2
        assert profile.count(Allele.X) == 0
        assert profile.total == 6

    def test_from_counts(self) -> None:
        assert Profile.from_counts({Allele.H: 4, Allele.X: 2}) == Profile(h=4, x=2)


class TestMatches:
    def test_exact_counts_match(self) -> None:
        assert matches(Genome.from_string("GGYYHW"), Profile(g=2, y=2, h=1, w=1))

    def test_locus_order_is_irrelevant(self) -> None:
        profile = Profile(g=3, w=3)
        for text in ("GGGWWW", "WWWGGG", "GWGWGW", "WGGWWG"):
            assert matches(Genome.from_string(text), profile)

    @pytest.mark.parametrize("text", ["GGGWWX", "GGGGWW", "YYYWWW", "GGWWWW"])
    def test_any_count_difference_fails(self, text: str) -> None:
        assert not matches(Genome.from_string(text), Profile(g=3, w=3))
