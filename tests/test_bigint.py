import unittest

from bigmath.bigint import BigInt
from bigmath.error import DivideByZero, ParseError, BigIntError


class TestConstruction(unittest.TestCase):

    def test_from_int_and_string(self):
        self.assertEqual(BigInt(42), BigInt('42'))
        self.assertEqual(BigInt(-42), BigInt('-42'))
        self.assertEqual(BigInt('+7'), 7)
        self.assertEqual(BigInt(), 0)
        self.assertEqual(BigInt(BigInt(5)), 5)

    def test_exact_value(self):
        digits = '123456789012345678901234567890123456789'
        self.assertEqual(BigInt(digits).to_string(), digits)
        self.assertEqual(str(BigInt('-' + digits)), '-' + digits)
        self.assertEqual(BigInt(digits).value, int(digits))

    def test_malformed_string(self):
        for bad in ('', '-', '12a', '1.5', ' 12', '0x10', '--1'):
            with self.assertRaises(ParseError):
                BigInt(bad)

    def test_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            BigInt('abc')
        with self.assertRaises(BigIntError):
            BigInt('abc')

    def test_wrong_type(self):
        with self.assertRaises(TypeError):
            BigInt(1.5)

    def test_immutable(self):
        num = BigInt(3)
        with self.assertRaises(AttributeError):
            num.foo = 4

    def test_repr(self):
        self.assertEqual(repr(BigInt(-12)), "BigInt('-12')")


class TestLongValues(unittest.TestCase):

    def test_parse_long_string(self):
        num = BigInt('7' * 5000)
        self.assertEqual(num.value, 7 * (10 ** 5000 - 1) // 9)
        self.assertEqual(BigInt('-' + '7' * 5000).value, -num.value)

    def test_to_string_long(self):
        self.assertEqual(BigInt('7' * 5000).to_string(), '7' * 5000)
        self.assertEqual(BigInt(-(10 ** 6000)).to_string(), '-1' + '0' * 6000)
        self.assertEqual(str(BigInt(10 ** 9000 + 1)), '1' + '0' * 8999 + '1')

    def test_round_trip_digits(self):
        digits = ''.join(str(i % 10) for i in range(1, 12346))
        self.assertEqual(BigInt(digits).to_string(), digits)
        self.assertEqual(BigInt('000' + digits).to_string(), digits)

    def test_long_malformed_string(self):
        with self.assertRaises(ParseError):
            BigInt('1' * 5000 + 'x')


class TestArithmetic(unittest.TestCase):

    def test_operators(self):
        a, b = BigInt(17), BigInt(5)
        self.assertEqual(a + b, 22)
        self.assertEqual(a - b, 12)
        self.assertEqual(a * b, 85)
        self.assertEqual(-a, -17)
        self.assertEqual(abs(BigInt(-3)), 3)

    def test_mixed_operands(self):
        self.assertEqual(BigInt(2) + 3, 5)
        self.assertEqual(3 + BigInt(2), 5)
        self.assertEqual(BigInt(2) * '10', 20)
        self.assertEqual(10 - BigInt(4), 6)
        self.assertEqual(10 / BigInt(4), 2)
        self.assertEqual(10 % BigInt(4), 2)

    def test_truncating_division(self):
        self.assertEqual(BigInt(7) / 2, 3)
        self.assertEqual(BigInt(-7) / 2, -3)
        self.assertEqual(BigInt(7) / -2, -3)
        self.assertEqual(BigInt(-7) / -2, 3)
        self.assertEqual(BigInt(-7) // 2, -3)

    def test_modulo_follows_dividend(self):
        self.assertEqual(BigInt(7) % 3, 1)
        self.assertEqual(BigInt(-7) % 3, -1)
        self.assertEqual(BigInt(7) % -3, 1)
        self.assertEqual(BigInt(-7) % -3, -1)

    def test_division_identity(self):
        for a in (-23, -7, 0, 5, 19):
            for b in (-4, -1, 3, 8):
                a_, b_ = BigInt(a), BigInt(b)
                self.assertEqual((a_ / b_) * b_ + a_ % b_, a_)

    def test_divide_by_zero(self):
        with self.assertRaises(DivideByZero):
            BigInt(1) / 0
        with self.assertRaises(DivideByZero):
            BigInt(1) % 0
        with self.assertRaises(ZeroDivisionError):
            BigInt(1) // BigInt(0)

    def test_power_operator(self):
        self.assertEqual(BigInt(3) ** 4, 81)
        self.assertEqual(BigInt(3) ** BigInt(4), 81)
        self.assertEqual(pow(BigInt(3), 4, 5), 1)

    def test_reflected_power(self):
        self.assertEqual(2 ** BigInt(10), 1024)
        self.assertIsInstance(2 ** BigInt(10), BigInt)
        self.assertEqual((-3) ** BigInt(3), -27)

    def test_in_place(self):
        num = BigInt(10)
        alias = num
        num /= 3
        self.assertEqual(num, 3)
        self.assertEqual(alias, 10)


class TestComparison(unittest.TestCase):

    def test_ordering(self):
        self.assertTrue(BigInt(-1) < 0 < BigInt(1))
        self.assertTrue(BigInt(5) >= 5)
        self.assertTrue(BigInt(5) <= '5')
        self.assertTrue(BigInt(6) > BigInt(5))
        self.assertNotEqual(BigInt(6), 5)
        self.assertEqual(sorted([BigInt(3), BigInt(-2), BigInt(1)]), [-2, 1, 3])

    def test_hash(self):
        self.assertEqual(hash(BigInt(99)), hash(99))
        self.assertEqual(len({BigInt(1), BigInt('1'), BigInt(2)}), 2)

    def test_strings_are_never_equal(self):
        self.assertFalse(BigInt(5) == '5')
        self.assertTrue(BigInt(5) != '5')
        self.assertFalse(BigInt(1) == 'abc')
        self.assertEqual(len({BigInt(5), '5'}), 2)
        self.assertEqual({BigInt(5): 'big'}.get('5'), None)

    def test_foreign_types(self):
        self.assertFalse(BigInt(1) == 1.0 + 0j)
        with self.assertRaises(TypeError):
            BigInt(1) < 1.5

    def test_index(self):
        self.assertEqual([0, 1, 2, 3][BigInt(2)], 2)
        self.assertEqual(int(BigInt('-9')), -9)
        self.assertFalse(BigInt(0))
        self.assertTrue(BigInt(-1))


if __name__ == '__main__':
    unittest.main()
