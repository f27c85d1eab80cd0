from common.functions import getExp2Constants
from common.constants import NUM_OF_EXP2_CONSTANTS


exp2Constants = getExp2Constants(NUM_OF_EXP2_CONSTANTS)


maxLen = len(hex(max(exp2Constants)))


print('EXP2_CONSTANTS = (')
for n in range(len(exp2Constants)):
    print('    {0:#0{1}x}, # 2 ^ (2 ^ -{2})'.format(exp2Constants[n],maxLen,n+1))
print(')')
