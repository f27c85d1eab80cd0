import sys
import random
import FixedPointMath
import FixedPointNativePython


from decimal import Decimal


# The result may be slightly larger than the real value when the exponent is negative
MAXIMUM_EXCESS = Decimal('1e-15')


def powerTest(baseN, baseD, expN, expD):
    resultFixedPoint = FixedPointMath.power(baseN, baseD, expN, expD)
    resultNativePython = FixedPointNativePython.power(baseN, baseD, expN, expD)
    if resultFixedPoint > resultNativePython * (1 + MAXIMUM_EXCESS):
        error = ['Implementation Error:']
        error.append('baseN              = {}'.format(baseN             ))
        error.append('baseD              = {}'.format(baseD             ))
        error.append('expN               = {}'.format(expN              ))
        error.append('expD               = {}'.format(expD              ))
        error.append('resultFixedPoint   = {}'.format(resultFixedPoint  ))
        error.append('resultNativePython = {}'.format(resultNativePython))
        raise BaseException('\n'.join(error))
    return resultFixedPoint / resultNativePython


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))


worstAccuracy = 1
numOfFailures = 0


for n in range(size):
    baseN = random.randrange(2, 10 ** 26)
    baseD = random.randrange(1, baseN)
    expD  = random.randrange(1, 1000001)
    expN  = random.randrange(-expD, expD + 1)
    try:
        accuracy = powerTest(baseN, baseD, expN, expD)
        worstAccuracy = min(worstAccuracy, accuracy)
    except Exception as error:
        accuracy = 0
        numOfFailures += 1
    except BaseException as error:
        print(error)
        break
    print('Test #{}: accuracy = {:.24f}, worst accuracy = {:.24f}, num of failures = {}'.format(n, accuracy, worstAccuracy, numOfFailures))
