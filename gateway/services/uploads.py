"""
Pre-flight checks for image uploads. Pure and local: runs before any upstream call.
"""

from dataclasses import dataclass, field
from pathlib import PurePath

from gateway.schemas.result import OperationResult, fail


@dataclass(frozen=True)
class UploadPolicy:
    max_bytes: int = 8 * 1024 * 1024
    allowed_extensions: frozenset[str] = field(
        default_factory=lambda: frozenset({"bmp", "gif", "jpeg", "jpg", "png", "wbmp", "xbm", "webp"})
    )


IMAGE_UPLOAD_POLICY = UploadPolicy()

TOO_LARGE_MESSAGE = "The image size is too large. The maximum allowed size is 8MB."
UNSUPPORTED_TYPE_MESSAGE = (
    "The image file type is not supported. "
    "Supported file types are bmp, gif, jpeg, jpg, png, wbmp, xbm, and webp."
)


def file_extension(filename: str | None) -> str:
    """Lower-cased final suffix without the dot ("photo.PNG" -> "png")."""
    if not filename:
        return ""
    return PurePath(filename).suffix.lstrip(".").lower()


def validate_image_upload(
    filename: str | None,
    size: int,
    policy: UploadPolicy = IMAGE_UPLOAD_POLICY,
) -> OperationResult | None:
    """Return a 400 result when the upload breaks the policy, None when it may be forwarded."""
    if size > policy.max_bytes:
        return fail(400, TOO_LARGE_MESSAGE)
    if file_extension(filename) not in policy.allowed_extensions:
        return fail(400, UNSUPPORTED_TYPE_MESSAGE)
    return None
