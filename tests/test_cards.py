from tarot.cards import TAROT, Extra, MajorArcana, MinorArcana, OrientedCard, Rank, Suit, is_oriented


def test_standard_enumerations():
    assert len(Rank.standard()) == 14
    assert Rank.standard()[0] is Rank.ACE
    assert Rank.standard()[-1] is Rank.KING
    assert Suit.VOID not in Suit.standard()
    assert len(MajorArcana.standard()) == 22
    assert len(MajorArcana.variant()) == 5
    assert [arc.number for arc in MajorArcana.standard()] == list(range(22))


def test_rank_numbers():
    assert Rank.FIVE.number == 5
    assert Rank.ZERO.number == 0
    assert Rank.NINETY_NINE.number == 99
    assert Rank.ACE.number is None
    assert Rank.PROGENY.number is None


def test_minor_arcana_compare_by_value():
    assert MinorArcana(Rank.TWO, Suit.CUPS) == MinorArcana(Rank.TWO, Suit.CUPS)
    assert MinorArcana(Rank.TWO, Suit.CUPS) != MinorArcana(Rank.TWO, Suit.WANDS)
    assert len({MinorArcana(Rank.TWO, Suit.CUPS), MinorArcana(Rank.TWO, Suit.CUPS)}) == 1


def test_default_source():
    assert TAROT.ranks == Rank.standard()
    assert TAROT.void_suit is Suit.VOID
    assert TAROT.extras == (Extra.WHITE, Extra.BLACK)
    assert TAROT.minor(Rank.KING, Suit.SWORDS) == MinorArcana(Rank.KING, Suit.SWORDS)


def test_orientation():
    assert is_oriented(MajorArcana.TOWER)
    assert is_oriented(MinorArcana(Rank.FOUR, Suit.CUPS))
    assert not is_oriented(MinorArcana(Rank.QUEEN, Suit.VOID))
    assert not is_oriented(Extra.WHITE)


def test_oriented_card_orientation():
    assert is_oriented(OrientedCard(MajorArcana.TOWER, True))
    assert not is_oriented(OrientedCard(Extra.BLACK))
    assert OrientedCard(Extra.BLACK).turned_over() == OrientedCard(Extra.BLACK)
    assert OrientedCard(MajorArcana.SUN).turned_over().reversed
