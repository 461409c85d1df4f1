# palette_swatch/errors.py
"""
Error taxonomy. Every error is terminal for the CLI, which maps it to exit 1.
"""

from __future__ import annotations


class PaletteError(Exception):
    code = "E_PALETTE"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)


class ArgumentError(PaletteError):
    code = "E_ARGUMENTS"


class ImageLoadError(PaletteError):
    code = "E_IMAGE_LOAD"

    def __init__(self, path: object, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"failed to load image: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidTargetCount(PaletteError, ValueError):
    code = "E_TARGET_COUNT"


__all__ = ["PaletteError", "ArgumentError", "ImageLoadError", "InvalidTargetCount"]
