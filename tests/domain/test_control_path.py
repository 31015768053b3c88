import unittest

from src.ndview.domain.utils import MethodKey, create_path_builder


class TestCreatePathBuilder(unittest.TestCase):
    def setUp(self) -> None:
        # Fresh builder per test to avoid map-sharing across tests.
        self.decorator = create_path_builder("layout")

    def _make_class(self):
        class C:
            def __init__(self, layout):
                self.__layout = layout

            @property
            def layout(self):
                return self.__layout

            def foo(self, x: int) -> int:
                """Original foo docstring."""
                return -999

        return C

    def test_state_must_be_hashable(self) -> None:
        C = self._make_class()
        with self.assertRaises(TypeError) as ctx:
            self.decorator(C, C.foo, ["not-hashable"])

        self.assertIn("must be hashable", str(ctx.exception))

    def test_dispatch_selects_registered_control_path(self) -> None:
        C = self._make_class()

        @self.decorator(C, C.foo, "contiguous")
        def foo_contiguous(self, x: int) -> int:
            return x + 10

        @self.decorator(C, C.foo, "strided")
        def foo_strided(self, x: int) -> int:
            return x + 20

        self.assertEqual(C("contiguous").foo(1), 11)
        self.assertEqual(C("strided").foo(1), 21)

    def test_implementation_receives_instance(self) -> None:
        C = self._make_class()

        @self.decorator(C, C.foo, None)
        def foo_none(self, x: int):
            return self, x

        c = C(None)
        self.assertEqual(c.foo(3), (c, 3))

    def test_decorator_returns_implementation_unchanged(self) -> None:
        C = self._make_class()

        def impl(self, x):
            return x

        self.assertIs(self.decorator(C, C.foo, "a")(impl), impl)

    def test_missing_state_attribute_raises_not_implemented(self) -> None:
        class C:
            def foo(self, x: int) -> int:
                return x

        @self.decorator(C, C.foo, "a")
        def foo_a(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C().foo(1)

        self.assertIn("missing attribute", str(ctx.exception))
        self.assertIn("'layout'", str(ctx.exception))

    def test_missing_control_path_raises_not_implemented(self) -> None:
        C = self._make_class()

        @self.decorator(C, C.foo, "a")
        def foo_a(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError) as ctx:
            C("b").foo(1)

        self.assertIn("Missing control path", str(ctx.exception))
        self.assertIn("layout='b'", str(ctx.exception))

    def test_trap_exception_class_is_raised(self) -> None:
        class MissingPathError(Exception):
            pass

        C = self._make_class()

        @self.decorator(C, C.foo, "a", trap_exception=MissingPathError)
        def foo_a(self, x: int) -> int:
            return x + 1

        with self.assertRaises(MissingPathError):
            C("b").foo(1)

    def test_trap_callable_is_notified(self) -> None:
        calls = []
        C = self._make_class()

        @self.decorator(
            C, C.foo, "a", trap_exception=lambda m, s: calls.append((m.__name__, s))
        )
        def foo_a(self, x: int) -> int:
            return x + 1

        with self.assertRaises(NotImplementedError):
            C("b").foo(1)
        self.assertEqual(calls, [("foo", "b")])

    def test_wrapper_preserves_original_method_metadata(self) -> None:
        C = self._make_class()

        @self.decorator(C, C.foo, "a")
        def foo_a(self, x: int) -> int:
            """Implementation docstring."""
            return x

        self.assertEqual(C.foo.__name__, "foo")
        self.assertEqual(C.foo.__doc__, "Original foo docstring.")

    def test_two_builders_do_not_share_control_paths(self) -> None:
        other = create_path_builder("layout")
        C = self._make_class()

        @self.decorator(C, C.foo, "a")
        def foo_a(self, x: int) -> int:
            return 1

        @other(C, C.foo, "b")
        def foo_b(self, x: int) -> int:
            return 2

        # The wrapper installed last consults only its own builder.
        self.assertEqual(C("b").foo(0), 2)
        with self.assertRaises(NotImplementedError):
            C("a").foo(0)

    def test_method_key_fields(self) -> None:
        key = MethodKey("C", "foo", "a")
        self.assertEqual((key.ClassName, key.MethodName, key.StateVal), ("C", "foo", "a"))


if __name__ == "__main__":
    unittest.main()
