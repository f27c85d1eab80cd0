import unittest
import FixedPointMath


from common.constants import PRECISION
from common.constants import NUM_OF_EXP2_CONSTANTS
from common.functions import getExp2Constants
from common.functions import getScalingConstants


class TestAutoGenerate(unittest.TestCase):
    def testPrecision(self):
        self.assertEqual(PRECISION, FixedPointMath.PRECISION)
        self.assertEqual(NUM_OF_EXP2_CONSTANTS, len(FixedPointMath.EXP2_CONSTANTS))

    def testExp2Constants(self):
        exp2Constants = getExp2Constants(NUM_OF_EXP2_CONSTANTS)
        for n in range(NUM_OF_EXP2_CONSTANTS):
            self.assertEqual(exp2Constants[n], FixedPointMath.EXP2_CONSTANTS[n], '2 ^ (2 ^ -{}): generated {}, hardcoded {}'.format(n + 1, hex(exp2Constants[n]), hex(FixedPointMath.EXP2_CONSTANTS[n])))

    def testScalingConstants(self):
        for name, value in getScalingConstants().items():
            self.assertEqual(value, getattr(FixedPointMath, name), '{}: generated {}, hardcoded {}'.format(name, hex(value), hex(getattr(FixedPointMath, name))))


if __name__ == '__main__':
    unittest.main()
