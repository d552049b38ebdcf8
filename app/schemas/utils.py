from pydantic import ValidationError


def format_validation_errors(error: ValidationError) -> str:
    """Сворачивает ошибки pydantic в одну строку для ответа ``{"errors": ...}``."""
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)
