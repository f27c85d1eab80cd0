from common.functions import getScalingConstants


scalingConstants = getScalingConstants()


maxLen = len(hex(max(scalingConstants.values())))


for name,description in [('LN2','ln(2)'),('LN10','ln(10)'),('LOG10_2','log10(2)'),('LOG2E','log2(e)')]:
    print('{0:7s} = {1:#0{2}x} # floor({3} * SCALE)'.format(name,scalingConstants[name],maxLen,description))
