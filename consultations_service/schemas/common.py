from pydantic import BaseModel, ConfigDict


class RequestModel(BaseModel):
    """Base for request bodies: unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")


class CreatedResponse(BaseModel):
    id: str


class SuccessResponse(BaseModel):
    success: bool = True
