"""
Tests for prisms and optionals

Tests cover:
1. Prism round-trip laws for Maybe, Either and hand-written prisms
2. Partial-match failure is data (Left / NOTHING), never an exception
3. Optional laws for list and dict indexing
4. modify_option / set_option and effectful updates
"""

import unittest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.dirname(__file__))

from optica import (
    PPrism, POptional, Getter, prism, prism_from_option, optional,
    Just, NOTHING, Left, Right, maybe_applicative,
)
from optica.std import either, maybe, sequence, mapping
from optic_laws import OpticLawsMixin


def canonical_int():
    """Prism[str, int] matching strings that are the canonical spelling of an int"""

    def parse(s):
        if s.lstrip("-").isdigit() and str(int(s)) == s:
            return Just(int(s))
        return NOTHING

    return prism_from_option(parse, str)


class TestPrismLaws(OpticLawsMixin, unittest.TestCase):

    def test_just_prism(self):
        self.assert_prism_laws(maybe.just(), [Just(1), NOTHING], [0, 42])

    def test_nothing_prism(self):
        self.assert_prism_laws(maybe.nothing(), [Just(1), NOTHING], [None])

    def test_either_prisms(self):
        sources = [Left("boom"), Right(3)]
        self.assert_prism_laws(either.right(), sources, [1, 2])
        self.assert_prism_laws(either.left(), sources, ["a", "b"])

    def test_hand_written_prism(self):
        self.assert_prism_laws(canonical_int(), ["42", "-7", "0", "abc", "007", ""], [5, -12])

    def test_prism_from_get_or_modify(self):
        positive = prism(lambda n: Right(n) if n > 0 else Left(n), lambda n: n)
        self.assert_prism_laws(positive, [3, -3, 0], [1, 9])


class TestPrismOperations(unittest.TestCase):

    def test_get_option_and_matching(self):
        p = canonical_int()
        self.assertEqual(p.get_option("12"), Just(12))
        self.assertEqual(p.get_option("twelve"), NOTHING)
        self.assertTrue(p.is_matching("12"))
        self.assertFalse(p.is_matching("twelve"))

    def test_get_or_modify_returns_source_on_miss(self):
        self.assertEqual(either.right().get_or_modify(Left("boom")), Left(Left("boom")))

    def test_modify_only_touches_matches(self):
        p = canonical_int()
        self.assertEqual(p.modify(lambda n: n + 1)("41"), "42")
        self.assertEqual(p.modify(lambda n: n + 1)("x"), "x")
        self.assertEqual(p.set(0)("x"), "x")

    def test_modify_option_reports_missing_target(self):
        r = either.right()
        self.assertEqual(r.modify_option(lambda n: n * 2)(Right(4)), Just(Right(8)))
        self.assertEqual(r.modify_option(lambda n: n * 2)(Left("e")), NOTHING)
        self.assertEqual(r.set_option(1)(Left("e")), NOTHING)

    def test_type_changing_modify(self):
        self.assertEqual(maybe.just().modify(str)(Just(5)), Just("5"))
        self.assertEqual(maybe.just().modify(str)(NOTHING), NOTHING)

    def test_re_is_a_getter(self):
        build = either.left().re()
        self.assertIsInstance(build, Getter)
        self.assertEqual(build.get("err"), Left("err"))

    def test_modify_f(self):
        r = either.right()

        def halve(n):
            return Just(n // 2) if n % 2 == 0 else NOTHING

        self.assertEqual(r.modify_f(maybe_applicative, halve)(Right(4)), Just(Right(2)))
        self.assertEqual(r.modify_f(maybe_applicative, halve)(Right(3)), NOTHING)
        # No target: the effect's pure, never a failure
        self.assertEqual(r.modify_f(maybe_applicative, halve)(Left("e")), Just(Left("e")))

    def test_prism_compose_prism(self):
        nested = maybe.just() >> either.right()
        self.assertIsInstance(nested, PPrism)
        self.assertEqual(nested.get_option(Just(Right(3))), Just(3))
        self.assertEqual(nested.get_option(Just(Left("e"))), NOTHING)
        self.assertEqual(nested.get_option(NOTHING), NOTHING)
        self.assertEqual(nested.reverse_get(4), Just(Right(4)))
        self.assertEqual(nested.modify(lambda n: n + 1)(Just(Left("e"))), Just(Left("e")))

    def test_as_optional(self):
        o = maybe.just().as_optional()
        self.assertIsInstance(o, POptional)
        self.assertEqual(o.set(2)(Just(1)), Just(2))
        self.assertEqual(o.set(2)(NOTHING), NOTHING)


class TestOptionalLaws(OpticLawsMixin, unittest.TestCase):

    def test_list_index(self):
        sources = [[1, 2, 3], [7], []]
        self.assert_optional_laws(sequence.index(1), sources, [0, 9])
        self.assert_optional_laws(sequence.head(), sources, [0])
        self.assert_optional_laws(sequence.last(), sources, [0])

    def test_dict_index(self):
        sources = [{"a": 1}, {"b": 2}, {}]
        self.assert_optional_laws(mapping.index("a"), sources, [5, 6])

    def test_composed_optionals(self):
        nested = mapping.index("xs") >> sequence.index(0)
        sources = [{"xs": [1, 2]}, {"xs": []}, {"ys": [1]}]
        self.assert_optional_laws(nested, sources, [10])


class TestOptionalOperations(unittest.TestCase):

    def test_get_option(self):
        self.assertEqual(sequence.index(1).get_option([1, 2, 3]), Just(2))
        self.assertEqual(sequence.index(5).get_option([1, 2, 3]), NOTHING)
        self.assertEqual(sequence.last().get_option([1, 2, 3]), Just(3))

    def test_set_is_a_noop_without_target(self):
        self.assertEqual(sequence.index(5).set(0)([1, 2]), [1, 2])
        self.assertEqual(mapping.index("a").set(1)({}), {})

    def test_set_does_not_mutate(self):
        xs = [1, 2, 3]
        self.assertEqual(sequence.index(0).set(9)(xs), [9, 2, 3])
        self.assertEqual(xs, [1, 2, 3])

    def test_modify_option(self):
        idx = sequence.index(0)
        self.assertEqual(idx.modify_option(lambda x: x * 2)([4]), Just([8]))
        self.assertEqual(idx.modify_option(lambda x: x * 2)([]), NOTHING)
        self.assertEqual(idx.set_option(1)([]), NOTHING)

    def test_hand_written_optional(self):
        even_head = optional(
            lambda xs: Just(xs[0]) if xs and xs[0] % 2 == 0 else NOTHING,
            lambda x, xs: [x] + xs[1:]
        )
        self.assertEqual(even_head.get_option([2, 3]), Just(2))
        self.assertEqual(even_head.get_option([1, 3]), NOTHING)
        self.assertEqual(even_head.modify(lambda x: x * 10)([2, 3]), [20, 3])
        self.assertEqual(even_head.count([1, 3]), 0)

    def test_as_traversal(self):
        t = sequence.index(1).as_traversal()
        self.assertEqual(t.get_all([1, 2, 3]), [2])
        self.assertEqual(t.modify(lambda x: -x)([1, 2, 3]), [1, -2, 3])


if __name__ == "__main__":
    unittest.main()
