from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


"""
User Entity:
1. username (str): Unique identifier of the user. Cannot be None and never changes.
2. display_name (str, Optional): Name used in greetings (stored as firstName).
3. avatar_url (str, Optional): Profile picture url (stored as imageUrl).
4. password_hash (str, Optional): Salted hash of the password. Only the server keeps it,
it is excluded from every public dump.
"""
class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: str
    display_name: Optional[str] = Field(default=None, alias='firstName')
    avatar_url: Optional[str] = Field(default=None, alias='imageUrl')
    password_hash: Optional[str] = Field(default=None, alias='passwordHash')

    def public_dump(self) -> dict:
        return self.model_dump(by_alias=True, exclude={'password_hash'})
