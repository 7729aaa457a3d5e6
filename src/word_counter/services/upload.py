"""Validation and decoding of uploaded text files."""

from pathlib import PurePath

from fastapi import UploadFile

from ..config import WordCounterSettings
from ..logging import get_logger

logger = get_logger(__name__)

__all__ = ["UploadValidationError", "decode_text", "read_upload", "validate_upload"]


class UploadValidationError(ValueError):
    """Raised when an uploaded file must not reach the word counter."""


def _format_size(num_bytes: int) -> str:
    megabytes = num_bytes / (1024 * 1024)
    if megabytes.is_integer():
        return f"{int(megabytes)} MB"
    return f"{num_bytes} bytes"


def _extension(filename: str | None) -> str:
    # ".txt" counts as an extension too, unlike PurePath.suffix
    _, dot, ext = PurePath(filename or "").name.rpartition(".")
    return f".{ext.lower()}" if dot and ext else ""


def validate_upload(
    filename: str | None,
    data: bytes,
    *,
    max_bytes: int,
    allowed_extensions: list[str],
) -> None:
    """Check an upload is non-empty, has an allowed extension and fits the size cap.

    Checks run in that order, so the first failing rule determines the message.

    Args:
        filename: Client supplied file name, may be missing
        data: Raw file content (possibly truncated at max_bytes + 1)
        max_bytes: Largest accepted upload in bytes
        allowed_extensions: Lower-case extensions with leading dot

    Raises:
        UploadValidationError: If any rule is violated
    """
    if len(data) == 0:
        raise UploadValidationError("File is empty.")

    extension = _extension(filename)
    if extension not in allowed_extensions:
        allowed = ", ".join(allowed_extensions)
        raise UploadValidationError(f"Only {allowed} files are allowed.")

    if len(data) > max_bytes:
        raise UploadValidationError(
            f"File size cannot exceed {_format_size(max_bytes)}."
        )


def decode_text(data: bytes) -> str:
    """Strictly decode UTF-8 bytes, dropping a leading byte-order mark.

    Raises:
        UploadValidationError: If the bytes are not valid UTF-8
    """
    try:
        return data.decode("utf-8-sig", errors="strict")
    except UnicodeDecodeError as e:
        raise UploadValidationError(
            "The file is not valid UTF-8 encoded text."
        ) from e


async def read_upload(upload: UploadFile, settings: WordCounterSettings) -> str:
    """Read, validate and decode an uploaded file.

    At most ``max_upload_bytes + 1`` bytes are read, which is enough to tell
    an oversized upload apart without buffering all of it.

    Args:
        upload: The multipart file received by the endpoint
        settings: Settings providing the size cap and allowed extensions

    Returns:
        The decoded text content

    Raises:
        UploadValidationError: If the upload is rejected
    """
    data = await upload.read(settings.max_upload_bytes + 1)

    validate_upload(
        upload.filename,
        data,
        max_bytes=settings.max_upload_bytes,
        allowed_extensions=settings.allowed_extensions,
    )

    content = decode_text(data)
    logger.debug(
        "Upload decoded",
        filename=upload.filename,
        size_bytes=len(data),
        characters=len(content),
    )
    return content
