from decimal import Decimal
from decimal import getcontext
from decimal import ROUND_FLOOR
from common.constants import PRECISION


getcontext().prec = 100


FIXED_1 = 1<<PRECISION


def ln(n):
    return Decimal(n).ln()


def log2(n):
    return ln(n)/ln(2)


def floor(d):
    return int(d.to_integral_exact(rounding=ROUND_FLOOR))


def getExp2Constants(numOfConstants):
    return [floor((ln(2)/2**n).exp()*FIXED_1) for n in range(1,numOfConstants+1)]


def getScalingConstants():
    return {
        'LN2'    :floor(ln(2)*FIXED_1),
        'LN10'   :floor(ln(10)*FIXED_1),
        'LOG10_2':floor(ln(2)/ln(10)*FIXED_1),
        'LOG2E'  :floor(FIXED_1/ln(2)),
    }
