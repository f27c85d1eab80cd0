from math import log


def UniformDistribution(minimumValue,maximumValue,samplesCount):
    return [minimumValue+n*(maximumValue-minimumValue)//(samplesCount-1) for n in range(samplesCount)]


def ExponentialDistribution(minimumValue,maximumValue,growthFactor):
    return [int(minimumValue*growthFactor**n) for n in range(int(log(maximumValue/minimumValue,growthFactor))+1)]


def SignedDistribution(minimumValue,maximumValue,samplesCount):
    return sorted(set([-value for value in UniformDistribution(0,-minimumValue,samplesCount)]+UniformDistribution(0,maximumValue,samplesCount)))
