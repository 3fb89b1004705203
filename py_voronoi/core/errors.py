"""Exception hierarchy for the Voronoi visualizer."""


class VoronoiAppError(Exception):
    """Base class for all application errors."""


class StartupArgumentError(VoronoiAppError):
    """A command-line flag or startup input could not be used.

    Fatal: raised before the event loop starts.
    """


class PersistedFileError(StartupArgumentError):
    """A persisted sites file is unreadable or its content is malformed."""


class MalformedInputError(VoronoiAppError, ValueError):
    """Text is not a JSON array of 2-element numeric pairs."""


class DegenerateGeometryError(VoronoiAppError):
    """The subdivision algorithm could not build any cells for the input."""
