class PBMError(Exception):
    """Base exception for all PBM reading/writing errors."""
    pass


class FormatError(PBMError, ValueError):
    """Magic number is not one of the supported PBM variants."""
    pass


class OpenError(PBMError, OSError):
    """Source or destination file could not be opened."""
    pass


class PBMIOError(PBMError, OSError):
    """Read or write failed on an already open file."""
    pass
