class ChromosomeLengthError(ValueError):
    """
    raised when a chromosome is given without a usable (positive) length

    positions are scaled by the chromosome length so drawing is not possible
    without one
    """
    pass
