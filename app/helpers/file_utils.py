import uuid
from pathlib import Path
from fastapi import UploadFile
from minio import Minio

from app.core import settings
from app.core.errors import ValidationError, UpstreamFailure
from app.core.logging import get_logger

logger = get_logger(__name__)

MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB


def generate_object_name(file: UploadFile, user_id: int) -> str:
    ext = Path(file.filename or "").suffix.lower()
    return f"courses/user_{user_id}/{uuid.uuid4().hex}{ext}"


def build_object_url(object_name: str) -> str:
    return f"{settings.MINIO_PUBLIC_URL}/{settings.MINIO_BUCKET}/{object_name}"


def get_file_size(file: UploadFile) -> int:
    file.file.seek(0, 2)
    file_size = file.file.tell()
    file.file.seek(0)
    return file_size


def validate_image(
    file: UploadFile,
    message: str = "Only PNG and JPG are allowed"
):
    if file.content_type not in settings.ALLOWED_IMAGE_TYPES:
        raise ValidationError(message)

    if get_file_size(file) > MAX_IMAGE_SIZE:
        raise ValidationError(
            f"File size exceeds limit ({MAX_IMAGE_SIZE//1024//1024}MB)"
        )


def upload_image(
    minio_client: Minio,
    file: UploadFile,
    owner_id: int
) -> tuple[str, str]:
    """Загружает картинку в бакет и возвращает (object_name, url)."""
    object_name = generate_object_name(file, owner_id)

    try:
        minio_client.put_object(
            settings.MINIO_BUCKET,
            object_name,
            file.file,
            length=get_file_size(file),
            content_type=file.content_type,
        )
    except Exception as e:
        logger.exception("Image upload failed", extra={"user_id": owner_id})
        raise UpstreamFailure("Error uploading image", status_code=400) from e

    return object_name, build_object_url(object_name)


def remove_image(minio_client: Minio, object_name: str):
    try:
        minio_client.remove_object(settings.MINIO_BUCKET, object_name)
    except Exception:
        logger.warning(
            f"Failed to delete object {object_name} from MinIO", exc_info=True
        )
