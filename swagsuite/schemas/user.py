"""User Pydantic schemas."""


from datetime import datetime

from swagsuite.schemas.common import CamelModel


class UserOut(CamelModel):
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    role: str
    created_at: datetime
