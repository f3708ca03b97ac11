"""Image attachment loading and checks"""

import mimetypes
from pathlib import Path
from typing import Iterable

from ..utils.errors import (
    AttachmentNotFoundError,
    AttachmentReadError,
    AttachmentTooLargeError,
    UnsupportedImageTypeError,
)
from ..utils.logging import get_logger, log_call
from .models import ImageAttachment

logger = get_logger(__name__)

# Leading bytes of the image formats the workspace accepts
_SIGNATURES = {
    "image/png": (b"\x89PNG\r\n\x1a\n",),
    "image/jpeg": (b"\xff\xd8\xff",),
    "image/gif": (b"GIF87a", b"GIF89a"),
}


def sniff_image_type(header: bytes) -> str | None:
    """Return the MIME type matching the file header, if any."""

    for mime_type, signatures in _SIGNATURES.items():
        if header.startswith(signatures):
            return mime_type

    if header[:4] == b"RIFF" and header[8:12] == b"WEBP":
        return "image/webp"

    return None


def format_size(size: int) -> str:
    """Format a byte count for display."""

    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


@log_call
def load_image_attachment(
    path: str | Path,
    max_bytes: int,
    allowed_suffixes: Iterable[str],
) -> ImageAttachment:
    """Check a local image file and describe it as an attachment."""

    path = Path(path).expanduser()

    try:
        return _load_image(path, max_bytes, allowed_suffixes)
    except OSError as e:
        raise AttachmentReadError(
            f"Cannot read {path.name or path}: {e.strerror or e}",
            details={"path": str(path), "errno": e.errno},
        ) from e


def _load_image(path: Path, max_bytes: int, allowed_suffixes: Iterable[str]) -> ImageAttachment:
    if not path.is_file():
        raise AttachmentNotFoundError(
            f"No image found at {path}", details={"path": str(path)}
        )

    allowed = {suffix.lower() for suffix in allowed_suffixes}
    if path.suffix.lower() not in allowed:
        raise UnsupportedImageTypeError(
            f"'{path.suffix or path.name}' files cannot be attached",
            details={"path": str(path), "allowed": sorted(allowed)},
        )

    size = path.stat().st_size
    if size > max_bytes:
        raise AttachmentTooLargeError(
            f"{path.name} is {format_size(size)}; the limit is {format_size(max_bytes)}",
            details={"path": str(path), "size": size},
        )

    with open(path, "rb") as f:
        header = f.read(16)

    mime_type = sniff_image_type(header)
    if mime_type is None:
        raise UnsupportedImageTypeError(
            f"{path.name} is not a valid image", details={"path": str(path)}
        )

    guessed, _ = mimetypes.guess_type(path.name)
    if guessed and guessed != mime_type:
        logger.debug(f"Extension of {path.name} suggests {guessed}, content is {mime_type}")

    logger.info(f"Loaded image attachment {path.name} ({format_size(size)})")
    return ImageAttachment(path=path, name=path.name, mime_type=mime_type, size=size)
