"""Weight calculator tests."""

from decimal import Decimal

from xbs_pudo.schemas import LineItem
from xbs_pudo.weight import MINIMUM_MASS_KG, item_mass, total_mass


def test_converts_grams_to_kilograms():
    assert total_mass([LineItem(grams=500, quantity=2)]) == Decimal("1")


def test_sums_all_items():
    items = [LineItem(grams=250, quantity=2), LineItem(grams=1500, quantity=1)]
    assert total_mass(items) == Decimal("2")


def test_light_order_gets_minimum():
    assert total_mass([LineItem(grams=10, quantity=1)]) == MINIMUM_MASS_KG
    assert MINIMUM_MASS_KG == Decimal("0.1")


def test_missing_values_count_as_zero():
    items = [LineItem(grams=None, quantity=3), LineItem(grams=800)]
    assert total_mass(items) == MINIMUM_MASS_KG


def test_empty_order_gets_minimum():
    assert total_mass([]) == MINIMUM_MASS_KG


def test_item_mass():
    assert item_mass(LineItem(grams=350, quantity=2)) == Decimal("0.7")


def test_fractional_grams_are_exact():
    items = [
        LineItem(grams="0.1", quantity=3),
        LineItem(grams=200, quantity=1),
    ]
    assert total_mass(items) == Decimal("0.2003")
