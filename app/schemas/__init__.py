from .course import (
    SCourseImage,
    SCourseCreate,
    SCourseUpdate,
    SCourseResponse,
    SCourseEnvelope,
    SCourseListResponse,
    SMessageResponse,
)
from .payments import SPaymentIntent, SCoursePurchaseResponse
from .utils import format_validation_errors
