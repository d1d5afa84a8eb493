"""
Tests for the value types, monoids and applicative effects

Tests cover:
1. Maybe / Either / Try behaviour
2. Monoid identities and the left bias of FirstMonoid
3. Applicative instances: ordering, short-circuiting, accumulation
4. Traverse instances
"""

import unittest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from optica import (
    Just, NOTHING, from_nullable, Left, Right, Success, Failure, attempt,
    ListMonoid, FirstMonoid, LastMonoid, SumMonoid, AllMonoid, AnyMonoid,
    ConstApplicative, ValidationApplicative,
    identity_applicative, maybe_applicative, either_applicative, list_applicative,
)
from optica.monoid import first_monoid, last_monoid, list_monoid
from optica.traverse import (
    list_traverse, tuple_traverse, dict_values_traverse,
    maybe_traverse, either_traverse, try_traverse,
)


class TestMaybe(unittest.TestCase):

    def test_just_and_nothing(self):
        self.assertTrue(Just(1).is_just)
        self.assertTrue(NOTHING.is_nothing)
        self.assertEqual(Just(1).map(lambda x: x + 1), Just(2))
        self.assertEqual(NOTHING.map(lambda x: x + 1), NOTHING)

    def test_present_none_is_not_nothing(self):
        """Just(None) still holds a value"""
        self.assertTrue(Just(None).is_just)
        self.assertNotEqual(Just(None), NOTHING)

    def test_from_nullable(self):
        self.assertEqual(from_nullable(3), Just(3))
        self.assertEqual(from_nullable(None), NOTHING)

    def test_or_else_is_left_biased(self):
        self.assertEqual(Just(1).or_else(Just(2)), Just(1))
        self.assertEqual(NOTHING.or_else(Just(2)), Just(2))

    def test_filter_and_get_or_else(self):
        self.assertEqual(Just(4).filter(lambda x: x > 5), NOTHING)
        self.assertEqual(NOTHING.get_or_else(0), 0)
        self.assertEqual(Just(4).to_list(), [4])
        self.assertEqual(NOTHING.to_list(), [])


class TestEither(unittest.TestCase):

    def test_right_biased_map(self):
        self.assertEqual(Right(2).map(lambda x: x * 10), Right(20))
        self.assertEqual(Left("e").map(lambda x: x * 10), Left("e"))

    def test_left_and_right_are_distinct(self):
        self.assertNotEqual(Left(1), Right(1))

    def test_left_map_bimap_swap(self):
        self.assertEqual(Left("e").left_map(str.upper), Left("E"))
        self.assertEqual(Right(1).bimap(str.upper, lambda x: -x), Right(-1))
        self.assertEqual(Left(1).swap(), Right(1))

    def test_to_maybe(self):
        self.assertEqual(Right(5).to_maybe(), Just(5))
        self.assertEqual(Left(5).to_maybe(), NOTHING)


class TestTry(unittest.TestCase):

    def test_attempt_captures_exceptions(self):
        outcome = attempt(int, "12")
        self.assertEqual(outcome, Success(12))

        failed = attempt(int, "twelve")
        self.assertTrue(failed.is_failure)
        self.assertIsInstance(failed.error, ValueError)

    def test_map_turns_exceptions_into_failure(self):
        outcome = Success(0).map(lambda x: 1 / x)
        self.assertTrue(outcome.is_failure)
        self.assertIsInstance(outcome.error, ZeroDivisionError)

    def test_conversions(self):
        error = KeyError("k")
        self.assertEqual(Success(1).to_maybe(), Just(1))
        self.assertEqual(Failure(error).to_maybe(), NOTHING)
        self.assertEqual(Failure(error).to_either(), Left(error))


class TestMonoids(unittest.TestCase):

    def test_identities(self):
        cases = [
            (ListMonoid(), [1, 2]),
            (FirstMonoid(), Just(1)),
            (LastMonoid(), Just(1)),
            (SumMonoid(), 7),
            (AllMonoid(), False),
            (AnyMonoid(), True),
        ]
        for monoid, value in cases:
            self.assertEqual(monoid.combine(monoid.empty(), value), value)
            self.assertEqual(monoid.combine(value, monoid.empty()), value)

    def test_first_keeps_left_most(self):
        """FirstMonoid is not commutative"""
        self.assertEqual(first_monoid.combine(Just(1), Just(2)), Just(1))
        self.assertEqual(first_monoid.combine(Just(2), Just(1)), Just(2))
        self.assertEqual(first_monoid.combine_all([NOTHING, Just(3), Just(4)]), Just(3))

    def test_last_keeps_right_most(self):
        self.assertEqual(last_monoid.combine_all([Just(3), Just(4), NOTHING]), Just(4))

    def test_list_combine_all_preserves_order(self):
        self.assertEqual(list_monoid.combine_all([[1], [2, 3], [], [4]]), [1, 2, 3, 4])

    def test_list_combine_all_does_not_mutate_inputs(self):
        chunks = [[1], [2, 3]]
        combined = list_monoid.combine_all(chunks)
        combined.append(4)
        self.assertEqual(chunks, [[1], [2, 3]])
        self.assertEqual(list_monoid.combine_all([]), [])


class TestApplicatives(unittest.TestCase):

    def test_identity(self):
        self.assertEqual(identity_applicative.pure(3), 3)
        self.assertEqual(identity_applicative.map_n([1, 2, 3], lambda a, b, c: a + b + c), 6)

    def test_map_n_with_no_effects(self):
        self.assertEqual(maybe_applicative.map_n([], lambda: "done"), Just("done"))

    def test_const_accumulates_left_to_right(self):
        const = ConstApplicative(list_monoid)
        self.assertEqual(const.pure("ignored"), [])
        self.assertEqual(const.map_n([[1], [2], [3]], lambda *xs: "ignored"), [1, 2, 3])

    def test_map_n_keeps_order_over_many_effects(self):
        effects = [Just(i) for i in range(1000)]
        self.assertEqual(maybe_applicative.sequence(effects), Just(list(range(1000))))
        self.assertEqual(identity_applicative.sequence(list(range(5))), [0, 1, 2, 3, 4])

    def test_const_combines_summaries_in_one_pass(self):
        class CountingListMonoid(ListMonoid):
            def __init__(self):
                self.pairwise = 0

            def combine(self, x, y):
                self.pairwise += 1
                return super().combine(x, y)

        monoid = CountingListMonoid()
        const = ConstApplicative(monoid)
        self.assertEqual(const.map_n([[i] for i in range(100)], lambda *xs: None), list(range(100)))
        self.assertEqual(monoid.pairwise, 0)

    def test_maybe_short_circuits(self):
        self.assertEqual(maybe_applicative.sequence([Just(1), Just(2)]), Just([1, 2]))
        self.assertEqual(maybe_applicative.sequence([Just(1), NOTHING]), NOTHING)

    def test_either_reports_first_failure(self):
        effects = [Right(1), Left("second"), Left("third")]
        self.assertEqual(either_applicative.sequence(effects), Left("second"))

    def test_validation_accumulates_in_order(self):
        validation = ValidationApplicative(list_monoid)
        effects = [Left(["a"]), Right(1), Left(["b"]), Left(["c"])]
        self.assertEqual(validation.sequence(effects), Left(["a", "b", "c"]))
        self.assertEqual(validation.sequence([Right(1), Right(2)]), Right([1, 2]))

    def test_list_produces_every_combination(self):
        self.assertEqual(
            list_applicative.combine2([1, 2], ["a", "b"]),
            [(1, "a"), (1, "b"), (2, "a"), (2, "b")]
        )


class TestTraverseInstances(unittest.TestCase):

    def double_if_positive(self, x):
        return Just(x * 2) if x > 0 else NOTHING

    def test_list_and_tuple(self):
        self.assertEqual(
            list_traverse.traverse(maybe_applicative, self.double_if_positive, [1, 2]),
            Just([2, 4])
        )
        self.assertEqual(
            tuple_traverse.traverse(maybe_applicative, self.double_if_positive, (1, -2)),
            NOTHING
        )

    def test_dict_values_keep_keys(self):
        self.assertEqual(
            dict_values_traverse.traverse(identity_applicative, str, {"a": 1, "b": 2}),
            {"a": "1", "b": "2"}
        )

    def test_variants_pass_through_the_empty_case(self):
        self.assertEqual(maybe_traverse.traverse(identity_applicative, str, NOTHING), NOTHING)
        self.assertEqual(either_traverse.traverse(identity_applicative, str, Left(1)), Left(1))
        self.assertEqual(try_traverse.traverse(identity_applicative, str, Success(1)), Success("1"))


if __name__ == "__main__":
    unittest.main()
