"""Tests for boolean query compilation."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from CardSearch.search import (
    And,
    Criterion,
    Not,
    Or,
    Query,
    Rarity,
    all_of,
    any_of,
    as_search,
    cmc,
    name,
    not_,
    prop,
    rarity,
    type_line,
)


class TestQueryRender(unittest.TestCase):
    def test_conjunction_of_three(self) -> None:
        query = name("lightning") & name("helix") & cmc(2)
        self.assertEqual(query.render(), '(name:"lightning" AND name:"helix" AND cmc:2)')

    def test_conjunction_flattens_in_order(self) -> None:
        query = cmc(1).and_(cmc(2)).and_(cmc(3).and_(cmc(4)))
        self.assertIsInstance(query, And)
        self.assertEqual(len(query.children), 4)
        self.assertEqual(query.render(), "(cmc:1 AND cmc:2 AND cmc:3 AND cmc:4)")

    def test_mixed_nesting_keeps_groups(self) -> None:
        query = (rarity(Rarity.COMMON) | rarity(Rarity.UNCOMMON)) & type_line("goblin")
        self.assertEqual(query.render(), '((rarity:common OR rarity:uncommon) AND type:"goblin")')

    def test_single_child_group_has_no_parentheses(self) -> None:
        self.assertEqual(all_of(cmc(3)).render(), "cmc:3")
        self.assertEqual(any_of(name("bolt")).render(), 'name:"bolt"')

    def test_empty_group_renders_empty(self) -> None:
        self.assertEqual(And().render(), "")
        self.assertEqual(Or().render(), "")

    def test_negation(self) -> None:
        self.assertEqual((~prop(Criterion.IS_FUNNY)).render(), "-is:funny")
        self.assertEqual(not_(cmc(3)).render(), "-cmc:3")

    def test_negated_group_keeps_its_parentheses(self) -> None:
        query = not_(rarity(Rarity.COMMON) | rarity(Rarity.UNCOMMON))
        self.assertEqual(query.render(), "-(rarity:common OR rarity:uncommon)")

    def test_negated_single_child_group(self) -> None:
        self.assertEqual(Not(And((cmc(3),))).render(), "-cmc:3")

    def test_double_negation(self) -> None:
        self.assertEqual((~~cmc(3)).render(), "--cmc:3")

    def test_raw_text_children(self) -> None:
        query = Query.custom("t:goblin") & "c:r"
        self.assertEqual(query.render(), "(t:goblin AND c:r)")

    def test_criterion_coerced(self) -> None:
        self.assertEqual(all_of(Criterion.IS_FUNNY, cmc(0)).render(), "(is:funny AND cmc:0)")

    def test_invalid_child_rejected(self) -> None:
        with self.assertRaises(TypeError):
            all_of(cmc(1), 5)

    def test_render_is_repeatable(self) -> None:
        query = name("a") | name("b")
        self.assertEqual(query.render(), query.render())
        self.assertEqual(str(query), query.render())


class TestQueryString(unittest.TestCase):
    def test_encoded_once(self) -> None:
        query = cmc(4).and_(name("Yargle"))
        self.assertEqual(query.query_string(), "q=%28cmc%3A4+AND+name%3A%22Yargle%22%29")

    def test_query_pairs(self) -> None:
        self.assertEqual(cmc(4).query_pairs(), [("q", "cmc:4")])

    def test_raw_string_as_search(self) -> None:
        self.assertEqual(as_search("c:r cmc<=2").query_string(), "q=c%3Ar+cmc%3C%3D2")

    def test_as_search_rejects_other_types(self) -> None:
        with self.assertRaises(TypeError):
            as_search(42)


if __name__ == "__main__":
    unittest.main()
