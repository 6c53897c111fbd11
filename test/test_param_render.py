"""Tests for single-parameter rendering and value typing."""

from __future__ import annotations

import sys
import unittest
from datetime import date
from decimal import Decimal
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CardSearch.search import (
    Color,
    Colors,
    CompareOp,
    Criterion,
    Currency,
    Devotion,
    Format,
    Multicolored,
    NumProperty,
    Param,
    Rarity,
    Regex,
    SetCode,
    ValueKind,
    artist,
    cheapest,
    cmc,
    color,
    devotion,
    eq,
    exact,
    format,
    gt,
    gte,
    in_rarity,
    lt,
    lte,
    name,
    ne,
    oracle_text,
    power,
    prop,
    rarity,
    set,
    usd,
)
from CardSearch.search.compare import Compare, compare_op_str
from CardSearch.search.functions import date as release_date


class TestCompareOp(unittest.TestCase):
    def test_symbols(self) -> None:
        self.assertEqual(CompareOp.EQUAL.symbol, ":")
        self.assertEqual(CompareOp.NOT_EQUAL.symbol, "!=")
        self.assertEqual(CompareOp.LESS.symbol, "<")
        self.assertEqual(CompareOp.LESS_OR_EQUAL.symbol, "<=")
        self.assertEqual(CompareOp.GREATER.symbol, ">")
        self.assertEqual(CompareOp.GREATER_OR_EQUAL.symbol, ">=")

    def test_equal_keeps_both_spellings(self) -> None:
        self.assertEqual(CompareOp.EQUAL.alt_symbol, "=")
        self.assertEqual(compare_op_str(CompareOp.EQUAL), ":")
        self.assertEqual(compare_op_str(CompareOp.EQUAL, strict_equal=True), "=")
        self.assertEqual(compare_op_str(None), ":")
        self.assertEqual(compare_op_str(CompareOp.LESS, strict_equal=True), "<")

    def test_nested_compare_rejected(self) -> None:
        with self.assertRaises(TypeError):
            Compare(CompareOp.LESS, eq(3))


class TestParamRender(unittest.TestCase):
    def test_criterion(self) -> None:
        self.assertEqual(str(prop(Criterion.IS_FIRST_PRINT)), "is:firstprint")
        self.assertEqual(Param.of_criterion(Criterion.HAS_WATERMARK).render(), "has:watermark")

    def test_exact_name(self) -> None:
        self.assertEqual(str(exact("Black Lotus")), '!"Black Lotus"')

    def test_value_forms(self) -> None:
        self.assertEqual(str(name("lightning")), 'name:"lightning"')
        self.assertEqual(str(cmc(4)), "cmc:4")
        self.assertEqual(str(rarity(Rarity.MYTHIC)), "rarity:mythic")
        self.assertEqual(str(format(Format.MODERN)), "format:modern")
        self.assertEqual(str(cheapest(Currency.EUR)), "cheapest:eur")
        self.assertEqual(str(artist("Rebecca Guay")), 'artist:"Rebecca Guay"')

    def test_indirection_keys_render_as_in(self) -> None:
        self.assertEqual(ValueKind.IN_RARITY.key, "in")
        self.assertEqual(str(in_rarity(Rarity.RARE)), "in:rare")

    def test_comparisons(self) -> None:
        self.assertEqual(str(cmc(gte(3))), "cmc>=3")
        self.assertEqual(str(cmc(lt(2))), "cmc<2")
        self.assertEqual(str(cmc(ne(5))), "cmc!=5")
        self.assertEqual(str(cmc(eq(2))), "cmc:2")
        self.assertEqual(str(rarity(gt(Rarity.UNCOMMON))), "rarity>uncommon")
        self.assertEqual(str(usd(lte(Decimal("0.50")))), "usd<=0.50")

    def test_cross_property_comparison(self) -> None:
        self.assertEqual(str(power(gt(NumProperty.TOUGHNESS))), "power>toughness")
        self.assertEqual(str(power(eq(NumProperty.TOUGHNESS))), "power:toughness")

    def test_float_values(self) -> None:
        self.assertEqual(str(cmc(3.0)), "cmc:3")
        self.assertEqual(str(cmc(2.5)), "cmc:2.5")

    def test_numbers_render_without_exponent(self) -> None:
        self.assertEqual(str(usd(lt(0.00001))), "usd<0.00001")
        self.assertEqual(str(usd(lt(Decimal("1E+2")))), "usd<100")
        self.assertEqual(str(usd(lt(1e20))), "usd<100000000000000000000")
        with self.assertRaises(ValueError):
            str(usd(lt(float("inf"))))

    def test_regex_not_quoted(self) -> None:
        self.assertEqual(str(oracle_text(Regex("^draw"))), "oracle:/^draw/")

    def test_quotes_pass_through(self) -> None:
        self.assertEqual(str(name('say "hi"')), 'name:"say "hi""')

    def test_colors(self) -> None:
        self.assertEqual(str(color(Color.RED)), "color:R")
        self.assertEqual(str(color(Colors.of([Color.GREEN, Color.WHITE, Color.BLUE]))), "color:WUG")
        self.assertEqual(str(color(Colors.colorless())), "color:C")
        self.assertEqual(str(color(Multicolored.MULTICOLORED)), "color:M")
        self.assertEqual(str(color(lte(Colors.of([Color.RED, Color.GREEN])))), "color<=RG")

    def test_set_and_date(self) -> None:
        self.assertEqual(str(set(SetCode("WAR"))), "set:war")
        self.assertEqual(str(release_date(gte(date(2019, 5, 3)))), "date>=2019-05-03")
        self.assertEqual(str(release_date(lt(SetCode("eld")))), "date<eld")

    def test_param_equality_is_structural(self) -> None:
        self.assertEqual(cmc(3).param, cmc(3).param)
        self.assertEqual(hash(cmc(3).param), hash(cmc(3).param))
        self.assertNotEqual(cmc(3).param, cmc(gte(3)).param)

    def test_empty_param_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Param().render()


class TestDevotion(unittest.TestCase):
    def test_monocolor(self) -> None:
        self.assertEqual(str(devotion(Devotion.monocolor(Color.GREEN, 3))), "devotion:{G}{G}{G}")

    def test_hybrid(self) -> None:
        self.assertEqual(str(devotion(Devotion.hybrid(Color.RED, Color.GREEN, 2))), "devotion:{R/G}{R/G}")

    def test_zero_count_renders_zero(self) -> None:
        self.assertEqual(str(devotion(Devotion.monocolor(Color.WHITE, 0))), "devotion:0")

    def test_comparison(self) -> None:
        self.assertEqual(str(devotion(gte(Devotion.monocolor(Color.BLACK, 2)))), "devotion>={B}{B}")

    def test_invalid_count(self) -> None:
        with self.assertRaises(ValueError):
            Devotion.monocolor(Color.GREEN, -1)
        with self.assertRaises(TypeError):
            Devotion.monocolor(Color.GREEN, True)

    def test_colors_must_be_color_members(self) -> None:
        with self.assertRaises(TypeError):
            Devotion("X", None, 2)
        with self.assertRaises(TypeError):
            Devotion.hybrid(Color.RED, "G", 1)


class TestValueTyping(unittest.TestCase):
    def test_wrong_enum_rejected(self) -> None:
        with self.assertRaises(TypeError):
            color(Rarity.RARE)
        with self.assertRaises(TypeError):
            rarity(Color.RED)

    def test_text_key_rejects_numbers(self) -> None:
        with self.assertRaises(TypeError):
            name(3)

    def test_numeric_key_rejects_text_and_bool(self) -> None:
        with self.assertRaises(TypeError):
            cmc("three")
        with self.assertRaises(TypeError):
            cmc(True)

    def test_comparison_on_unordered_key_rejected(self) -> None:
        with self.assertRaises(TypeError):
            name(gt("a"))
        with self.assertRaises(TypeError):
            format(gt(Format.MODERN))

    def test_compared_value_is_checked(self) -> None:
        with self.assertRaises(TypeError):
            cmc(gt("x"))

    def test_prop_and_exact_type_checks(self) -> None:
        with self.assertRaises(TypeError):
            prop("is:funny")
        with self.assertRaises(TypeError):
            exact(42)

    def test_colors_rejects_non_color_members(self) -> None:
        with self.assertRaises(TypeError):
            Colors.of(["X"])
        with self.assertRaises(TypeError):
            Colors.of([Color.RED, "G"])

    def test_set_code_validation(self) -> None:
        with self.assertRaises(ValueError):
            SetCode("not a set")


if __name__ == "__main__":
    unittest.main()
