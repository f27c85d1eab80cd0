import unittest
import InputGenerator


class TestInputGenerator(unittest.TestCase):
    def testUniformDistribution(self):
        self.assertEqual(InputGenerator.UniformDistribution(0, 100, 5), [0, 25, 50, 75, 100])
        values = InputGenerator.UniformDistribution(1 << 64, 1 << 320, 7)
        self.assertEqual(values[0], 1 << 64)
        self.assertEqual(values[-1], 1 << 320)
        self.assertTrue(all(isinstance(value, int) for value in values))
        self.assertEqual(values, sorted(values))

    def testExponentialDistribution(self):
        values = InputGenerator.ExponentialDistribution(1 << 64, 1 << 128, 1.5)
        self.assertEqual(values[0], 1 << 64)
        self.assertTrue(all(isinstance(value, int) for value in values))
        self.assertTrue(all(lo < hi for lo, hi in zip(values[:-1], values[1:])))
        self.assertGreater(values[-1] * 1.5, 1 << 128)

    def testSignedDistribution(self):
        self.assertEqual(InputGenerator.SignedDistribution(-100, 200, 3), [-100, -50, 0, 100, 200])


if __name__ == '__main__':
    unittest.main()
