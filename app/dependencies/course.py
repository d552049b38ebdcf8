from dataclasses import dataclass

from fastapi import Request, UploadFile
from starlette.datastructures import UploadFile as StarletteUploadFile


UPDATE_FIELDS = ("title", "description", "price")


@dataclass
class CourseUpdatePayload:
    values: dict
    image: UploadFile | None = None
    # отдается обработчиком только после проверки владельца
    error: str | None = None


async def get_course_update_payload(request: Request) -> CourseUpdatePayload:
    """Тело PUT-запроса: multipart/form-data или JSON.

    Новая картинка приходит только в multipart, в поле ``imageUrl``.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return CourseUpdatePayload(values={}, error="Invalid JSON body")
        if not isinstance(body, dict):
            return CourseUpdatePayload(values={}, error="Invalid JSON body")
        return CourseUpdatePayload(
            values={k: body[k] for k in UPDATE_FIELDS if k in body}
        )

    if not content_type:
        return CourseUpdatePayload(values={})

    form = await request.form()
    image = form.get("imageUrl")
    return CourseUpdatePayload(
        values={
            k: form[k] for k in UPDATE_FIELDS
            if k in form and form[k] != ""
        },
        image=image if isinstance(image, StarletteUploadFile) else None,
    )
