import pytest

from hct_theme.variant import Variant


@pytest.mark.parametrize("text", ["tonal-spot", "tonal_spot", "TONAL_SPOT", "  Tonal-Spot "])
def test_parse_spellings(text):
    assert Variant.parse(text) is Variant.TONAL_SPOT


def test_parse_default_and_errors():
    assert Variant.parse(None, default=Variant.VIBRANT) is Variant.VIBRANT
    assert Variant.parse("", default=Variant.VIBRANT) is Variant.VIBRANT
    with pytest.raises(ValueError):
        Variant.parse(None)
    with pytest.raises(ValueError):
        Variant.parse("plaid")


def test_values_are_strings():
    assert Variant("fruit-salad") is Variant.FRUIT_SALAD
    assert Variant.FRUIT_SALAD == "fruit-salad"
