# protocol_constants.py

AUTO_BASE = 0  # let the engine detect the radix from 0b/0o/0x prefixes
DECIMAL_BASE = 10
HEX_BASE = 16
MIN_BASE = 2
MAX_BASE = 62  # largest radix gmpy2 parses and renders
