class PhotonCoreError(Exception):
    """Base class for errors raised by photon_core."""


class InvalidParameter(PhotonCoreError, ValueError):
    """A mass, time step or other input is outside its valid range."""
