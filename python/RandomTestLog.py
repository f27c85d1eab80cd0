import sys
import random
import FixedPointMath
import FixedPointNativePython


FUNCTION_NAMES = ['log2', 'log', 'log10']


def logTest(functionName, x):
    resultFixedPoint = getattr(FixedPointMath, functionName)(x)
    resultNativePython = getattr(FixedPointNativePython, functionName)(x)
    if resultFixedPoint > resultNativePython:
        error = ['Implementation Error:']
        error.append('function           = {}'.format(functionName))
        error.append('x                  = {}'.format(x))
        error.append('resultFixedPoint   = {}'.format(resultFixedPoint))
        error.append('resultNativePython = {}'.format(resultNativePython))
        raise BaseException('\n'.join(error))
    if resultNativePython == 0:
        return 1
    return resultFixedPoint / resultNativePython


size = int(sys.argv[1]) if len(sys.argv) > 1 else 0
if size == 0:
    size = int(input('How many test-cases would you like to execute? '))


worstAccuracy = {functionName: 1 for functionName in FUNCTION_NAMES}
numOfFailures = 0


for n in range(size):
    x = random.randrange(FixedPointMath.SCALE, FixedPointMath.SCALE << random.randrange(1, 257))
    try:
        accuracy = {functionName: logTest(functionName, x) for functionName in FUNCTION_NAMES}
        worstAccuracy = {functionName: min(worstAccuracy[functionName], accuracy[functionName]) for functionName in FUNCTION_NAMES}
    except Exception as error:
        accuracy = {functionName: 0 for functionName in FUNCTION_NAMES}
        numOfFailures += 1
    except BaseException as error:
        print(error)
        break
    print('Test #{}: {}, num of failures = {}'.format(n, ', '.join('{} accuracy = {:.24f} (worst = {:.24f})'.format(functionName, accuracy[functionName], worstAccuracy[functionName]) for functionName in FUNCTION_NAMES), numOfFailures))
