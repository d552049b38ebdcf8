from .user import get_current_user, get_current_user_admin
from .minio import get_minio_client
from .payments import get_payment_gateway
from .course import get_course_update_payload, CourseUpdatePayload
