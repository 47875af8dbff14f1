"""
svg drawing of the chromosome ideogram
"""
