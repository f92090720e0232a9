class TranscodeError(Exception):
    def __init__(self, bytes_written: int, message: str) -> None:
        super().__init__(message)
        self.bytes_written = bytes_written


class SourceReadError(TranscodeError):
    def __init__(self, bytes_written: int, message: str | None = None) -> None:
        super().__init__(
            bytes_written,
            f"Failed to read from source after writing {bytes_written} byte(s)"
            + (f": {message}" if message else ""),
        )


class SinkWriteError(TranscodeError):
    def __init__(self, bytes_written: int, message: str | None = None) -> None:
        super().__init__(
            bytes_written,
            f"Failed to write to sink after writing {bytes_written} byte(s)"
            + (f": {message}" if message else ""),
        )


class ConverterBusyError(RuntimeError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Converter is already running a conversion"
            + (f": {message}" if message else "")
        )


class UnsupportedStreamError(TypeError):
    def __init__(self, role: str, actual_type: str, expected_type: str) -> None:
        super().__init__(
            f"Unsupported {role} of type '{actual_type}'. {role.capitalize()} must conform to {expected_type}."
        )
        self.role = role
        self.actual_type = actual_type
        self.expected_type = expected_type
