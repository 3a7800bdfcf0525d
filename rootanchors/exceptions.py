class RootAnchorsError(Exception):
    pass


class DecodeError(RootAnchorsError):
    """Trust anchor document could not be decoded"""


class ValidationError(RootAnchorsError):
    """Decoded data could not be used as requested"""
