import sys
import random
import FixedPointMath
import FixedPointNativePython


from decimal import Decimal


# The input of 'exp' is rounded down after the conversion to base 2, which can make the result slightly larger than the real value when the input is negative
MAXIMUM_EXCESS = {'exp2': Decimal(0), 'exp': Decimal('1e-15')}


def expTest(functionName, x):
    resultFixedPoint = getattr(FixedPointMath, functionName)(x)
    resultNativePython = getattr(FixedPointNativePython, functionName)(x)
    if resultFixedPoint > resultNativePython * (1 + MAXIMUM_EXCESS[functionName]):
        error = ['Implementation Error:']
        error.append('function           = {}'.format(functionName))
        error.append('x                  = {}'.format(x))
        error.append('resultFixedPoint   = {}'.format(resultFixedPoint))
        error.append('resultNativePython = {}'.format(resultNativePython))
        raise BaseException('\n'.join(error))
    return resultFixedPoint / resultNativePython


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))


worstAccuracy = {'exp2': 1, 'exp': 1}
numOfFailures = 0


for n in range(size):
    functionName = random.choice(['exp2', 'exp'])
    if functionName == 'exp2':
        x = random.randrange(FixedPointMath.MIN_EXP2, FixedPointMath.MAX_EXP2 + 1)
    else:
        x = random.randrange(FixedPointMath.MIN_EXP, FixedPointMath.MAX_EXP + 1)
    try:
        accuracy = expTest(functionName, x)
        worstAccuracy[functionName] = min(worstAccuracy[functionName], accuracy)
    except Exception as error:
        accuracy = 0
        numOfFailures += 1
    except BaseException as error:
        print(error)
        break
    print('Test #{}: {} accuracy = {:.24f}, worst accuracy = {:.24f}, num of failures = {}'.format(n, functionName, accuracy, worstAccuracy[functionName], numOfFailures))
