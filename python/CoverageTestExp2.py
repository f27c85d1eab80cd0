import InputGenerator
import FixedPointMath
import FixedPointNativePython


SAMPLES_COUNT_INPUT = 100000


def Main():
    rangeInput = InputGenerator.SignedDistribution(FixedPointMath.MIN_EXP2, FixedPointMath.MAX_EXP2, SAMPLES_COUNT_INPUT)

    testNum = 0
    numOfTests = len(rangeInput)

    worstAbsoluteLoss = Record(rangeInput[0], 0, 0.0)
    worstRelativeLoss = Record(rangeInput[0], 0, 0.0)

    failureTransactionCount = 0

    try:
        for x in rangeInput:
            testNum += 1
            resultFixedPoint = Run(FixedPointMath, x)
            resultNativePython = Run(FixedPointNativePython, x)
            if resultFixedPoint < 0:
                failureTransactionCount += 1
            elif resultNativePython < resultFixedPoint:
                print('Implementation Error:', Record(x, resultFixedPoint, resultNativePython))
                return
            else:  # 0 <= resultFixedPoint <= resultNativePython
                absoluteLoss = resultNativePython - resultFixedPoint
                relativeLoss = 1 - resultFixedPoint / resultNativePython
                worstAbsoluteLoss.Update(x, resultFixedPoint, resultNativePython, absoluteLoss, relativeLoss)
                worstRelativeLoss.Update(x, resultFixedPoint, resultNativePython, relativeLoss, absoluteLoss)
                worstAbsoluteLossStr = 'worstAbsoluteLoss = {:.0f} (relativeLoss = {:.0e})'.format(worstAbsoluteLoss.major, worstAbsoluteLoss.minor)
                worstRelativeLossStr = 'worstRelativeLoss = {:.0e} (absoluteLoss = {:.0f})'.format(worstRelativeLoss.major, worstRelativeLoss.minor)
                print('Test {} out of {}: {}, {}'.format(testNum, numOfTests, worstAbsoluteLossStr, worstRelativeLossStr))
    except KeyboardInterrupt:
        print('Process aborted by user request')

    print('worstAbsoluteLoss:', worstAbsoluteLoss)
    print('worstRelativeLoss:', worstRelativeLoss)

    print('failureTransactionCount:', failureTransactionCount)


def Run(module, x):
    try:
        return module.exp2(x)
    except Exception:
        return -1


class Record():
    def __init__(self, x, resultFixedPoint, resultNativePython, major=0.0, minor=0.0):
        self._set(x, resultFixedPoint, resultNativePython, major, minor)

    def __str__(self):
        return ''.join(['\n\t{} = {}'.format(var, vars(self)[var]) for var in 'x,resultFixedPoint,resultNativePython'.split(',')])

    def Update(self, x, resultFixedPoint, resultNativePython, major, minor):
        if self.major < major or (self.major == major and self.minor < minor):
            self._set(x, resultFixedPoint, resultNativePython, major, minor)

    def _set(self, x, resultFixedPoint, resultNativePython, major, minor):
        self.__dict__.update({key: val for key, val in locals().items() if key != 'self'})


Main()
