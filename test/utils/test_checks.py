import io
import unittest

from rich.console import Console

from typehinter import (
    MISSING, CallSite, HinterOptions, TypeHinter, type_check,
    MissingArgumentError, InvalidArgumentTypeError)
import typehinter

class TestTypeCheck(unittest.TestCase):

    def setUp(self):
        self.hinter = TypeHinter()

    def test_valid_call(self):
        @type_check(str, (int, None), hinter=self.hinter)
        def create_user(name, age=None):
            return name, age

        self.assertEqual(create_user("Alice"), ("Alice", None))
        self.assertEqual(create_user("Alice", 42), ("Alice", 42))
        self.assertEqual(create_user(name="Alice", age=7), ("Alice", 7))

    def test_invalid_call(self):
        @type_check(str, (int, None), hinter=self.hinter)
        def create_user(name, age=None):
            return name, age

        with self.assertRaises(InvalidArgumentTypeError) as ctx:
            create_user("Alice", "42")
        error = ctx.exception
        self.assertEqual(error.index, 2)
        self.assertEqual(error.expected, ("number", "null"))
        self.assertEqual(
            error.call_site,
            CallSite(__name__, create_user.__qualname__))

    def test_missing_argument(self):
        @type_check((), hinter=self.hinter)
        def greet(name):
            return name

        with self.assertRaises(MissingArgumentError):
            greet()

    def test_optional_missing(self):
        @type_check(str, (int, MISSING), hinter=self.hinter)
        def create_user(name, age=MISSING):
            return name

        self.assertEqual(create_user("Alice"), "Alice")
        with self.assertRaises(InvalidArgumentTypeError):
            create_user("Alice", None)

    def test_lenient_calls_through(self):
        console = Console(
            file=io.StringIO(), width=200, log_time=False, log_path=False)
        hinter = TypeHinter(strict=False, console=console)

        @type_check(str, hinter=hinter)
        def greet(name):
            return f"Hello {name}"

        self.assertEqual(greet(42), "Hello 42")
        self.assertIn("Argument *1* is of type: _number_",
                      console.file.getvalue())

    def test_disabled(self):
        self.hinter.disable()

        @type_check(str, hinter=self.hinter)
        def greet(name):
            return name

        self.assertEqual(greet(42), 42)

    def test_does_not_touch_stored_call_site(self):
        self.hinter.set_call_site("user.py", "create_user")

        @type_check(str, hinter=self.hinter)
        def greet(name):
            return name

        greet("Alice")
        self.assertEqual(
            self.hinter.call_site, CallSite("user.py", "create_user"))

    def test_too_many_kinds(self):
        with self.assertRaises(ValueError):
            @type_check(str, int, hinter=self.hinter)
            def greet(name):
                return name

    def test_wraps(self):
        @type_check(str, hinter=self.hinter)
        def greet(name):
            """Greets someone."""
            return name

        self.assertEqual(greet.__name__, "greet")
        self.assertEqual(greet.__doc__, "Greets someone.")

    def test_method(self):
        hinter = self.hinter

        class Greeter:
            @type_check(str, hinter=hinter)
            def greet(self, name):
                return f"Hello {name}"

            @classmethod
            @type_check(str, hinter=hinter)
            def build(cls, name):
                return cls()

        greeter = Greeter()
        self.assertEqual(greeter.greet("Alice"), "Hello Alice")
        self.assertIsInstance(Greeter.build("Alice"), Greeter)
        with self.assertRaises(InvalidArgumentTypeError) as ctx:
            greeter.greet(42)
        self.assertEqual(ctx.exception.index, 1)
        self.assertEqual(ctx.exception.actual, "number")
        self.assertEqual(ctx.exception.call_site.callee,
                         Greeter.greet.__qualname__)

    def test_method_kinds_count_without_self(self):
        hinter = self.hinter
        with self.assertRaises(ValueError):
            class Greeter:
                @type_check(str, str, hinter=hinter)
                def greet(self, name):
                    return name

class TestTypeCheckDefaultHinter(unittest.TestCase):

    def tearDown(self):
        typehinter.hinter.configure(HinterOptions())
        typehinter.hinter.on_error = None
        typehinter.hinter.call_site = CallSite()

    def test_reports_through_shared_hinter(self):
        errors = []
        typehinter.hinter.on_error = errors.append

        @type_check(str)
        def greet(name):
            return name

        self.assertEqual(greet("Alice"), "Alice")
        with self.assertRaises(InvalidArgumentTypeError):
            greet(42)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].call_site,
                         CallSite(__name__, greet.__qualname__))
        # the decorator passes its call site explicitly
        self.assertEqual(typehinter.hinter.call_site, CallSite())

    def test_follows_shared_switches(self):
        @type_check(str)
        def greet(name):
            return name

        typehinter.hinter.disable()
        self.assertEqual(greet(42), 42)

if __name__ == "__main__":
    unittest.main()
