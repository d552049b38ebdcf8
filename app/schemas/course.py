from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

# максимальная сумма одного платежа в Stripe
MAX_PRICE = 99_999_999


class SCourseImage(BaseModel):
    public_id: str
    url: str


class SCourseBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: int = Field(..., gt=0, le=MAX_PRICE, description="Цена в центах")


class SCourseCreate(SCourseBase):
    pass


class SCourseUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[int] = Field(None, gt=0, le=MAX_PRICE)
    model_config = ConfigDict(extra="ignore")


class SCourseResponse(SCourseBase):
    id: int
    image: SCourseImage
    creator_id: int
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)


class SCourseEnvelope(BaseModel):
    message: Optional[str] = None
    course: SCourseResponse


class SCourseListResponse(BaseModel):
    courses: list[SCourseResponse]


class SMessageResponse(BaseModel):
    message: str
