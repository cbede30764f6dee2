import secrets
from typing import NamedTuple

RANDOM_HASH_BYTES = 16


class UploadValidationError(ValueError):
    """Raised when an upload request is rejected before reaching storage."""


class GeneratedKey(NamedTuple):
    key: str
    random_hash: str


def extract_extension(filename: str) -> str:
    _, sep, extension = filename.rpartition(".")
    return extension if sep else ""


def generate_random_hash() -> str:
    return secrets.token_hex(RANDOM_HASH_BYTES)


def validate_folder(folder: str) -> None:
    # Keys are used verbatim, so refuse anything that looks like a traversal.
    if folder.startswith("/"):
        raise UploadValidationError("Invalid folder")
    if any(segment in (".", "..") for segment in folder.split("/")):
        raise UploadValidationError("Invalid folder")


def generate_object_key(filename: str, folder: str | None = None) -> GeneratedKey:
    """Build ``<folder>/<random hash>.<extension>`` for an uploaded file.

    The folder prefix and the extension suffix are left out when empty.
    Uniqueness relies on the 128 bits of the random hash alone.
    """
    folder = folder or ""
    if folder:
        validate_folder(folder)

    random_hash = generate_random_hash()
    extension = extract_extension(filename or "")

    key = random_hash
    if folder:
        key = f"{folder}/{key}"
    if extension:
        key = f"{key}.{extension}"
    return GeneratedKey(key=key, random_hash=random_hash)
