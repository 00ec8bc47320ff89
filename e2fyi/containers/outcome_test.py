"""Unit test for Outcome."""
import copy
import json
import pickle
import unittest

from unittest.mock import ANY, MagicMock

from e2fyi.containers.maybe import Absent, Present
from e2fyi.containers.errors import UnwrapFailureError, UnwrapSuccessError
from e2fyi.containers.outcome import Outcome, Failure, Success, failure, success


class OutcomeTest(unittest.TestCase):
    """TestCase for Outcome"""

    def test_constructors(self):
        self.assertEqual(Outcome.success(42), Success(42))
        self.assertEqual(Outcome.failure("e"), Failure("e"))
        self.assertEqual(success(42), Success(42))
        self.assertEqual(failure("e"), Failure("e"))
        self.assertNotEqual(Success("e"), Failure("e"))

    def test_predicates(self):
        self.assertTrue(success(42).is_success())
        self.assertFalse(success(42).is_failure())
        self.assertTrue(failure("e").is_failure())
        self.assertFalse(failure("e").is_success())

    def test_unwrap(self):
        self.assertEqual(Outcome.success(42).unwrap(), 42)

        with self.assertRaises(UnwrapFailureError) as ctx:
            Outcome.failure("e").unwrap()
        self.assertEqual(ctx.exception.error, "e")
        self.assertIsNone(ctx.exception.__cause__)

    def test_unwrap_chains_exception(self):
        expected_exception = ValueError("some value error.")

        with self.assertRaises(UnwrapFailureError) as ctx:
            failure(expected_exception).unwrap()
        self.assertIs(ctx.exception.error, expected_exception)
        self.assertIs(ctx.exception.__cause__, expected_exception)

    def test_unwrap_or(self):
        self.assertEqual(Outcome.success(42).unwrap_or(0), 42)
        self.assertEqual(Outcome.failure("e").unwrap_or(0), 0)

    def test_unwrap_or_else(self):
        func = MagicMock(return_value=0)

        self.assertEqual(success(42).unwrap_or_else(func), 42)
        func.assert_not_called()

        self.assertEqual(failure("e").unwrap_or_else(func), 0)
        func.assert_called_once_with("e")

    def test_unwrap_err(self):
        self.assertEqual(Outcome.failure("not found").unwrap_err(), "not found")

        with self.assertRaises(UnwrapSuccessError) as ctx:
            Outcome.success(42).unwrap_err()
        self.assertEqual(ctx.exception.value, 42)

    def test_map(self):
        self.assertEqual(success(42).map(lambda x: x * 2).unwrap(), 84)

        func = MagicMock()
        self.assertEqual(failure("e").map(func), Failure("e"))
        func.assert_not_called()

    def test_map_err(self):
        mapped = failure("not found").map_err(lambda e: "Error: %s" % e)
        self.assertEqual(mapped.unwrap_err(), "Error: not found")

        func = MagicMock()
        self.assertEqual(success(42).map_err(func), Success(42))
        func.assert_not_called()

    def test_flat_map(self):
        def parse_int(text: str) -> Outcome[int, str]:
            try:
                return success(int(text))
            except ValueError:
                return failure("not a number")

        self.assertEqual(success("42").flat_map(parse_int).unwrap(), 42)
        self.assertEqual(success("foo").flat_map(parse_int), Failure("not a number"))

        func = MagicMock()
        self.assertEqual(failure("first").flat_map(func), Failure("first"))
        func.assert_not_called()

    def test_match(self):
        on_success = MagicMock(return_value="ok")
        on_failure = MagicMock(return_value="err")

        self.assertEqual(success(1).match(success=on_success, failure=on_failure), "ok")
        on_success.assert_called_once_with(1)
        on_failure.assert_not_called()

        on_success.reset_mock()
        self.assertEqual(
            failure("e").match(success=on_success, failure=on_failure), "err"
        )
        on_failure.assert_called_once_with("e")
        on_success.assert_not_called()

    def test_from_throwable(self):
        parsed = Outcome.from_throwable(lambda: json.loads('{"ok": true}'))
        self.assertTrue(parsed.is_success())
        self.assertEqual(parsed.unwrap(), {"ok": True})

        invalid = Outcome.from_throwable(lambda: json.loads("invalid"))
        self.assertTrue(invalid.is_failure())
        self.assertIsInstance(invalid.unwrap_err(), json.JSONDecodeError)

    def test_from_throwable_calls_once(self):
        func = MagicMock(return_value="foo")
        self.assertEqual(Outcome.from_throwable(func), Success("foo"))
        func.assert_called_once_with()

    def test_from_throwable_does_not_capture_lazy_errors(self):
        def lazy():
            yield 1
            raise ValueError("raised while consuming")

        outcome = Outcome.from_throwable(lazy)
        self.assertTrue(outcome.is_success())
        with self.assertRaises(ValueError):
            list(outcome.unwrap())

    def test_from_throwable_exceptions(self):
        def raise_key_error():
            raise KeyError("foo")

        captured = Outcome.from_throwable(raise_key_error, exceptions=(KeyError,))
        self.assertIsInstance(captured.unwrap_err(), KeyError)

        with self.assertRaises(KeyError):
            Outcome.from_throwable(raise_key_error, exceptions=(ValueError,))

        def interrupt():
            raise KeyboardInterrupt()

        with self.assertRaises(KeyboardInterrupt):
            Outcome.from_throwable(interrupt)

    def test_combine(self):
        combined = Outcome.combine([success(1), success(2), success(3)])
        self.assertEqual(combined.unwrap(), [1, 2, 3])
        self.assertEqual(Outcome.combine([]), Success([]))

    def test_combine_short_circuits(self):
        combined = Outcome.combine([success(1), failure("oops"), failure("later")])
        self.assertEqual(combined.unwrap_err(), "oops")

        pulled = []

        def outcomes():
            for outcome in [success(1), failure("oops"), success(3)]:
                pulled.append(outcome)
                yield outcome

        self.assertEqual(Outcome.combine(outcomes()), Failure("oops"))
        self.assertEqual(pulled, [Success(1), Failure("oops")])

    def test_to_maybe(self):
        self.assertEqual(success(42).to_maybe(), Present(42))
        self.assertEqual(failure("e").to_maybe(), Absent())

    def test_dunder(self):
        self.assertTrue(success(None))
        self.assertFalse(failure("e"))
        self.assertEqual(repr(success(42)), "Success(42)")
        self.assertEqual(repr(failure("e")), "Failure('e')")
        self.assertEqual(success(42).value, 42)
        self.assertEqual(failure("e").error, "e")
        self.assertEqual(len({success(1), success(1), failure(1)}), 2)

    def test_immutable(self):
        outcome = failure("e")
        with self.assertRaises(AttributeError):
            outcome._error = "f"  # type: ignore  # pylint: disable=protected-access
        with self.assertRaises(AttributeError):
            del outcome._error  # type: ignore  # pylint: disable=protected-access
        self.assertEqual(outcome.unwrap_err(), "e")

    def test_copy_and_pickle(self):
        for outcome in [success(1), success([1]), failure("e"), failure(["e"])]:
            self.assertEqual(copy.copy(outcome), outcome)
            self.assertEqual(copy.deepcopy(outcome), outcome)
            self.assertEqual(pickle.loads(pickle.dumps(outcome)), outcome)

    def test_cannot_create_base(self):
        with self.assertRaises(TypeError):
            Outcome()  # type: ignore  # pylint: disable=abstract-class-instantiated

    def test_eq_defers_to_other_operand(self):
        self.assertEqual(success(1), ANY)
        self.assertEqual(failure("e"), ANY)
        self.assertNotEqual(success(1), 1)
        self.assertNotEqual(failure("e"), "e")
