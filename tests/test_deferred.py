import unittest

from phat.deferred import Deferred, is_deferred, resolve


class TestDeferred(unittest.TestCase):
    def test_called_once(self):
        calls = []

        def _produce():
            calls.append(1)
            return ["a"]

        value = Deferred(_produce)
        self.assertEqual(value(), ["a"])
        self.assertIs(value(), value())
        self.assertEqual(calls, [1])

    def test_is_deferred(self):
        self.assertTrue(is_deferred(Deferred(lambda: 1)))
        self.assertTrue(is_deferred(lambda: 1))
        self.assertFalse(is_deferred(dict))
        self.assertFalse(is_deferred("x"))
        self.assertFalse(is_deferred(None))

    def test_resolve(self):
        self.assertEqual(resolve(Deferred(lambda: 1)), 1)
        self.assertEqual(resolve(lambda: "x"), "x")
        self.assertEqual(resolve("x"), "x")
        self.assertIs(resolve(dict), dict)

    def test_resolve_is_shallow(self):
        inner = Deferred(lambda: "x")
        self.assertIs(resolve(Deferred(lambda: inner)), inner)


if __name__ == "__main__":
    unittest.main()
