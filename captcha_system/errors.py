"""Exceptions raised by the captcha generator."""


class CaptchaError(Exception):
    """Base class for captcha generation failures."""


class InvalidArgument(CaptchaError, ValueError):
    """Raised when generation parameters cannot produce a valid captcha.

    This is a configuration bug; retrying with the same arguments fails again.
    """


class ResourceUnavailable(CaptchaError, RuntimeError):
    """Raised when no renderable font or graphics resource can be acquired."""
