"""
Library functions used by the alphabase units. The encoder itself lives in `alphabase.lib.base58`.
"""
