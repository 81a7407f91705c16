"""Format name helpers shared by the engine and the metadata extractor."""

_PIL_FORMATS = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "gif": "GIF",
    "bmp": "BMP",
    "tiff": "TIFF",
    "tif": "TIFF",
}


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    return _PIL_FORMATS.get(format_str.lower(), format_str.upper())


def normalize_format(format_str: str) -> str:
    """Lower-case canonical name, e.g. ``JPEG`` / ``jpg`` -> ``jpeg``."""
    fmt = format_str.lower()
    if fmt == "jpg":
        return "jpeg"
    if fmt == "tif":
        return "tiff"
    return fmt


def mimetype_for_format(format_str: str) -> str:
    return f"image/{normalize_format(format_str)}"
