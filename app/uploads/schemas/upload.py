from pydantic import BaseModel, Field


class UploadUrlRequest(BaseModel):
    filename: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field(..., description="MIME type the client will upload")
    folder: str | None = Field(None, description="Target folder; defaults to event-images")


class UploadUrlResponse(BaseModel):
    url: str = Field(description="Presigned PUT URL")
    key: str
    bucket: str
    expires_in: int = Field(description="Seconds until the URL expires")
    public_url: str = Field(description="Where the object is served once uploaded")
