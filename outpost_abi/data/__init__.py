"""
Market data records, payload parsing and fixed-point conversion.
"""
