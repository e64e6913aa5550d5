MASK64 = 0xFFFFFFFFFFFFFFFF

# xorshift128+ shift amounts used by V8, SpiderMonkey and JavaScriptCore
SHIFT_A = 23
SHIFT_B = 17
SHIFT_C = 26

TWO_POW_53 = 1 << 53
MANTISSA_MASK_52 = (1 << 52) - 1
MANTISSA_MASK_53 = 0x1FFFFFFFFFFFFF

# exponent bits of 1.0, puts a 52-bit mantissa into [1.0, 2.0)
EXPONENT_ONE = 0x3FF0000000000000

# V8 refills its Math.random() cache every 64 calls
MAX_NUM_PREDICTIONS = 64

DEFAULT_NUM_PREDICTIONS = 10

SS_0_STR = "sym_state_0"
SS_1_STR = "sym_state_1"
