import inspect


class TrigmException(Exception):
    """Base class for trigm exceptions.

    TrigmException instances should not be created; this base class exists so
    that all exceptions raised by trigm can be caught in a try / except block.
    """


class ValidationError(TrigmException, ValueError):
    """A ValueError encountered during validation of an argument."""

    def __init__(self, msg, attr, obj=None):
        self.attr = attr
        self.obj = obj
        super().__init__(msg)

    def __str__(self):
        if self.obj is None:
            return f"{self.attr}: {super().__str__()}"
        name = (
            self.obj.__name__
            if inspect.isclass(self.obj) or inspect.isfunction(self.obj)
            else type(self.obj).__name__
        )
        return f"{name}.{self.attr}: {super().__str__()}"


class NotMatrixError(ValidationError):
    """Input is not a finite, numeric, two-dimensional array."""


class RectangularError(ValidationError):
    """Input is a matrix, but not a square one."""

    def __init__(self, shape, attr, obj=None):
        self.shape = tuple(shape)
        super().__init__(
            f"Input matrix must be square (got shape {self.shape})", attr, obj
        )


class InvalidSchurError(ValidationError):
    """An unsupported Schur factorization mode was requested."""


class ParameterSelectionError(TrigmException, RuntimeError):
    """No scaling and degree pair satisfies the backward error bound.

    This indicates a broken internal invariant rather than a bad argument;
    ``norm`` holds the norm quantity that could not be bounded.
    """

    def __init__(self, msg, norm=None):
        self.norm = norm
        super().__init__(msg)

    def __str__(self):
        norm_txt = "" if self.norm is None else f" (norm estimate {self.norm!r})"
        return f"{super().__str__()}{norm_txt}"


class ConfigError(TrigmException, ValueError):
    """A ValueError encountered in the RC settings."""
