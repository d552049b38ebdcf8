from pydantic import BaseModel, ConfigDict, Field

from .course import SCourseResponse


class SPaymentIntent(BaseModel):
    id: str
    amount: int
    currency: str
    client_secret: str


class SCoursePurchaseResponse(BaseModel):
    message: str
    course: SCourseResponse
    client_secret: str = Field(..., serialization_alias="clientSecret")
    model_config = ConfigDict(populate_by_name=True)
