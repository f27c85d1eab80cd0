from decimal import Decimal
from decimal import getcontext


getcontext().prec = 100 # 97 digits for a maximum of 2^320-1, and 3 more digits for after the decimal point


SCALE = Decimal(2**64)


def log2(x):
    x = Decimal(x)
    return (x/SCALE).ln()/Decimal(2).ln()*SCALE


def log(x):
    x = Decimal(x)
    return (x/SCALE).ln()*SCALE


def log10(x):
    x = Decimal(x)
    return (x/SCALE).log10()*SCALE


def exp2(x):
    x = Decimal(x)
    return 2**(x/SCALE)*SCALE


def exp(x):
    x = Decimal(x)
    return (x/SCALE).exp()*SCALE


def sqrt(x):
    x = Decimal(x)
    return (x/SCALE).sqrt()*SCALE


def root(x, n):
    x, n = [Decimal(value) for value in (x, n)]
    return (x/SCALE)**(1/n)*SCALE


def pow(base, exp):
    base, exp = [Decimal(value) for value in (base, exp)]
    return (base/SCALE)**(exp/SCALE)*SCALE


def power(baseN, baseD, expN, expD):
    baseN, baseD, expN, expD = [Decimal(value) for value in (baseN, baseD, expN, expD)]
    return (baseN/baseD)**(expN/expD)*SCALE
