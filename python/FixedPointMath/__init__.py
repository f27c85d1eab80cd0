ONE = 1

PRECISION = 64
EXTENDED_PRECISION = 192

'''
    The values below depend on PRECISION. If you choose to change it:
    Apply the same change in file 'PrintFixedPointConstants.py', run it and paste the results below.
'''
SCALE   = 0x10000000000000000
HALF    = 0x08000000000000000
MAX_NUM = 0xffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff

'''
    The values below depend on PRECISION. If you choose to change it:
    Apply the same change in file 'PrintScalingConstants.py', run it and paste the results below.
'''
LN2     = 0x0b17217f7d1cf79ab # floor(ln(2) * SCALE)
LN10    = 0x24d763776aaa2b05b # floor(ln(10) * SCALE)
LOG10_2 = 0x04d104d427de7fbcc # floor(log10(2) * SCALE)
LOG2E   = 0x171547652b82fe177 # floor(log2(e) * SCALE)

'''
    The admissible input range of 'exp2' and 'exp'.
    The upper bound of 'exp2' is 192 * SCALE, and the bounds of 'exp' are those of 'exp2' divided by log2(e).
'''
MIN_EXP2 = -0x3bcb71d551afc00000
MAX_EXP2 = +0xc00000000000000000
MIN_EXP  = -0x29724fe657ff700000
MAX_EXP  = +0x851591f9dd5b980000

'''
    Entry k approximates 2 ^ (2 ^ -(k + 1)) * SCALE, rounded down.
    The values below depend on PRECISION. If you choose to change it:
    Apply the same change in file 'PrintExp2Constants.py', run it and paste the results below.
'''
EXP2_CONSTANTS = (
    0x16a09e667f3bcc908, # 2 ^ (2 ^ -1)
    0x1306fe0a31b7152de, # 2 ^ (2 ^ -2)
    0x1172b83c7d517adcd, # 2 ^ (2 ^ -3)
    0x10b5586cf9890f629, # 2 ^ (2 ^ -4)
    0x1059b0d31585743ae, # 2 ^ (2 ^ -5)
    0x102c9a3e778060ee6, # 2 ^ (2 ^ -6)
    0x10163da9fb33356d8, # 2 ^ (2 ^ -7)
    0x100b1afa5abcbed61, # 2 ^ (2 ^ -8)
    0x10058c86da1c09ea1, # 2 ^ (2 ^ -9)
    0x1002c605e2e8cec50, # 2 ^ (2 ^ -10)
    0x100162f3904051fa1, # 2 ^ (2 ^ -11)
    0x1000b175effdc76ba, # 2 ^ (2 ^ -12)
    0x100058ba01fb9f96d, # 2 ^ (2 ^ -13)
    0x10002c5cc37da9491, # 2 ^ (2 ^ -14)
    0x1000162e525ee0547, # 2 ^ (2 ^ -15)
    0x10000b17255775c04, # 2 ^ (2 ^ -16)
    0x1000058b91b5bc9ae, # 2 ^ (2 ^ -17)
    0x100002c5c89d5ec6c, # 2 ^ (2 ^ -18)
    0x10000162e43f4f831, # 2 ^ (2 ^ -19)
    0x100000b1721bcfc99, # 2 ^ (2 ^ -20)
    0x10000058b90cf1e6d, # 2 ^ (2 ^ -21)
    0x1000002c5c863b73f, # 2 ^ (2 ^ -22)
    0x100000162e430e5a1, # 2 ^ (2 ^ -23)
    0x1000000b172183551, # 2 ^ (2 ^ -24)
    0x100000058b90c0b48, # 2 ^ (2 ^ -25)
    0x10000002c5c8601cc, # 2 ^ (2 ^ -26)
    0x1000000162e42fff0, # 2 ^ (2 ^ -27)
    0x10000000b17217fba, # 2 ^ (2 ^ -28)
    0x1000000058b90bfcd, # 2 ^ (2 ^ -29)
    0x100000002c5c85fe3, # 2 ^ (2 ^ -30)
    0x10000000162e42ff0, # 2 ^ (2 ^ -31)
    0x100000000b17217f8, # 2 ^ (2 ^ -32)
    0x10000000058b90bfb, # 2 ^ (2 ^ -33)
    0x1000000002c5c85fd, # 2 ^ (2 ^ -34)
    0x100000000162e42fe, # 2 ^ (2 ^ -35)
    0x1000000000b17217f, # 2 ^ (2 ^ -36)
    0x100000000058b90bf, # 2 ^ (2 ^ -37)
    0x10000000002c5c85f, # 2 ^ (2 ^ -38)
    0x1000000000162e42f, # 2 ^ (2 ^ -39)
    0x10000000000b17217, # 2 ^ (2 ^ -40)
    0x1000000000058b90b, # 2 ^ (2 ^ -41)
    0x100000000002c5c85, # 2 ^ (2 ^ -42)
    0x10000000000162e42, # 2 ^ (2 ^ -43)
    0x100000000000b1721, # 2 ^ (2 ^ -44)
    0x10000000000058b90, # 2 ^ (2 ^ -45)
    0x1000000000002c5c8, # 2 ^ (2 ^ -46)
    0x100000000000162e4, # 2 ^ (2 ^ -47)
    0x1000000000000b172, # 2 ^ (2 ^ -48)
    0x100000000000058b9, # 2 ^ (2 ^ -49)
    0x10000000000002c5c, # 2 ^ (2 ^ -50)
    0x1000000000000162e, # 2 ^ (2 ^ -51)
    0x10000000000000b17, # 2 ^ (2 ^ -52)
    0x1000000000000058b, # 2 ^ (2 ^ -53)
    0x100000000000002c5, # 2 ^ (2 ^ -54)
    0x10000000000000162, # 2 ^ (2 ^ -55)
    0x100000000000000b1, # 2 ^ (2 ^ -56)
    0x10000000000000058, # 2 ^ (2 ^ -57)
    0x1000000000000002c, # 2 ^ (2 ^ -58)
    0x10000000000000016, # 2 ^ (2 ^ -59)
    0x1000000000000000b, # 2 ^ (2 ^ -60)
    0x10000000000000005, # 2 ^ (2 ^ -61)
    0x10000000000000002, # 2 ^ (2 ^ -62)
    0x10000000000000001, # 2 ^ (2 ^ -63)
    0x10000000000000000, # 2 ^ (2 ^ -64)
)


class DomainError(ValueError):
    def __init__(self, function, value, condition):
        super().__init__('{}({}): the input must be {}'.format(function, value, condition))
        self.function  = function
        self.value     = value
        self.condition = condition


def requireRange(function, value, minimum, maximum):
    if not (minimum <= value <= maximum):
        raise DomainError(function, value, 'between {} and {}'.format(minimum, maximum))


'''
    Return the position of the highest set bit of the input, or 0 if the input is 0.
    - The input  is a value between 0 and 2 ^ 256 - 1
    - The output is a value between 0 and 255
'''
def mostSignificantBit(_x):
    requireRange('mostSignificantBit', _x, 0, (ONE << 256) - 1)

    res = 0

    # Exactly 8 iterations
    for s in [1 << (8 - 1 - k) for k in range(8)]:
        if (_x >= (ONE << s)):
            _x >>= s
            res += s

    return res

'''
    Return floor(log2(x / SCALE) * SCALE), where:
    - The input  is a value between SCALE and MAX_NUM
    - The output is a value between 0 and 256 * SCALE - 1
    This function asserts that the input is larger than or equal to SCALE, because the output would be negative otherwise.
'''
def log2(_x):
    requireRange('log2', _x, SCALE, MAX_NUM)

    # Compute the integer part of log2(x)
    count = mostSignificantBit(_x // SCALE)
    res = count * SCALE
    y = _x >> count # now 1 <= y < 2

    # If y == 1, then the fraction part of log2(x) is 0
    if (y == SCALE):
        return res

    # Compute the fraction part of log2(x), one bit per iteration
    for i in range(PRECISION):
        y = (y * y) // SCALE # now 1 <= y < 4
        if (y >= 2 * SCALE):
            y >>= 1 # now 1 <= y < 2
            res += SCALE >> (i + 1)

    return res

'''
    Return floor(log2(x / SCALE) * SCALE) * LN2 / SCALE, rounded down.
'''
def log(_x):
    return mul(log2(_x), LN2)

'''
    Return floor(log2(x / SCALE) * SCALE) * LOG10_2 / SCALE, rounded down.
'''
def log10(_x):
    return mul(log2(_x), LOG10_2)

'''
    Return an approximation of 2 ^ (x / SCALE) * SCALE, rounded down, where:
    - The input  is a value between MIN_EXP2 and MAX_EXP2
    - The output is a value between 18 and 2 ^ 256
    The result is accumulated with EXTENDED_PRECISION fractional bits, starting from 1/2 so that it never exceeds that width.
    Every set bit in the fractional part of the input multiplies the result by the corresponding entry in EXP2_CONSTANTS.
    The integer part of the input is applied at the end as a single shift.
'''
def exp2(_x):
    requireRange('exp2', _x, MIN_EXP2, MAX_EXP2)

    res = ONE << (EXTENDED_PRECISION - 1)

    for i in range(PRECISION):
        if (_x & (HALF >> i)):
            res = (res * EXP2_CONSTANTS[i]) >> PRECISION

    # The integer part is rounded towards negative infinity, so the fraction part above is never negative
    n = _x >> PRECISION

    return (res << (PRECISION + 1)) >> (EXTENDED_PRECISION - n)

'''
    Return an approximation of e ^ (x / SCALE) * SCALE, where:
    - The input  is a value between MIN_EXP and MAX_EXP
    - The output is a value between 18 and 2 ^ 256
'''
def exp(_x):
    requireRange('exp', _x, MIN_EXP, MAX_EXP)
    return exp2(mul(_x, LOG2E))

def sqrt(_x):
    return exp2(log2(_x) >> 1)

'''
    Return an approximation of (x / SCALE) ^ (1 / n) * SCALE.
    The degree is a plain integer, and a negative degree yields the reciprocal root.
'''
def root(_x, _n):
    if (_n == 0):
        raise DomainError('root', _n, 'non-zero')
    return exp2(log2(_x) // _n)

'''
    Return an approximation of (base / SCALE) ^ (exp / SCALE) * SCALE.
    The base must be in the domain of 'log2', and the product of the exponent and log2(base) must be in the domain of 'exp2'.
'''
def pow(_base, _exp):
    return exp2(mul(_exp, log2(_base)))

'''
    Return an approximation of (baseN / baseD) ^ (expN / expD) * SCALE.
    The base must not be smaller than 1.
'''
def power(_baseN, _baseD, _expN, _expD):
    return pow(div(_baseN, _baseD), div(_expN, _expD))

def mul(_x, _y):
    return (_x * _y) // SCALE

def div(_x, _y):
    if (_y == 0):
        raise DomainError('div', _y, 'non-zero')
    return (_x * SCALE) // _y
