from common.constants import PRECISION


SCALE   = 1<<PRECISION
HALF    = SCALE>>1
MAX_NUM = (1<<(256+PRECISION))-1


maxLen = len(hex(max([SCALE,HALF])))


print('SCALE   = {0:#0{1}x}'.format(SCALE,maxLen))
print('HALF    = {0:#0{1}x}'.format(HALF ,maxLen))
print('MAX_NUM = 0x{:x}'.format(MAX_NUM))
