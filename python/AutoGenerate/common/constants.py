PRECISION = 64 # The scaling factor is 2 ^ PRECISION


NUM_OF_EXP2_CONSTANTS = 64 # Compute 2 ^ (2 ^ -n) for n = 1 to NUM_OF_EXP2_CONSTANTS
