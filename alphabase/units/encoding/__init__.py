"""
Units that encode binary data as text.
"""
