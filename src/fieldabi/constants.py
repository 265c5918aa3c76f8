from __future__ import annotations

# wire word (unsigned, 64 bits)
WORD_BITS = 64
WORD_BYTES = WORD_BITS // 8
WORD_MAX = (1 << WORD_BITS) - 1

# 256-bit quantities (address, hash, u256, topic) span four words
FIXED_WORD4_LEN = 4
DIGEST_BYTES = FIXED_WORD4_LEN * WORD_BYTES

U32_MAX = (1 << 32) - 1
U256_MAX = (1 << 256) - 1
MAX_CODE_POINT = 0x10FFFF

# leading digest bytes kept for a function selector
SELECTOR_BYTES = 4
