"""Errors raised while validating and dispatching Alexa requests."""


class SkillError(Exception):
    """Base class for request rejections raised by this library."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class RequestEnvelopeMissingError(SkillError):
    def __init__(self, message: str = "request envelope is missing"):
        super().__init__("request_envelope_missing", message)


class ApplicationIdError(SkillError):
    def __init__(self, message: str):
        super().__init__("application_id_invalid", message)


class TimestampError(SkillError):
    def __init__(self, message: str):
        super().__init__("timestamp_invalid", message)
