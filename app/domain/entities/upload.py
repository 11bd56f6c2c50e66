from pydantic import BaseModel


class UploadResult(BaseModel):
    url: str
    filename: str
