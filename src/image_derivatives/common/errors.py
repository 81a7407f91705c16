"""Exceptions raised at the image processing boundary."""

from typing import ClassVar, override


class ImageProcessingError(Exception):
    """Base error for the derivative pipeline.

    Carries a machine readable ``code`` next to the human message.
    """

    CODE_INVALID_IMAGE: ClassVar[str] = "INVALID_IMAGE"

    def __init__(self, message: str, code: str):
        self.message: str = message
        self.code: str = code
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{self.code}: {self.message}"


class InvalidImageError(ImageProcessingError):
    """Source could not be decoded or its dimensions/format are unknown."""

    def __init__(self, message: str = "Could not determine image dimensions or format."):
        super().__init__(message, ImageProcessingError.CODE_INVALID_IMAGE)
