"""
Core value types and counter arithmetic.

Pure value types without I/O: Moneybag (coins of three denominations),
Value (worth in deniers), and the fixed-width counter primitives they rely on.
"""
