"""Typed failures raised before any pixel is touched."""


class CurveCloakError(ValueError):
    """Base class for rejected transform inputs."""


class InvalidDimensions(CurveCloakError):
    def __init__(self, width, height):
        super().__init__(f"Image dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class BufferSizeMismatch(CurveCloakError):
    def __init__(self, actual: int, expected: int):
        super().__init__(f"Pixel buffer holds {actual} samples, expected {expected} (4 per pixel)")
        self.actual = actual
        self.expected = expected


class ParameterOutOfRange(CurveCloakError):
    def __init__(self, name: str, value, reason: str):
        super().__init__(f"{name}={value!r}: {reason}")
        self.name = name
        self.value = value


__all__ = ["BufferSizeMismatch", "CurveCloakError", "InvalidDimensions", "ParameterOutOfRange"]
