"""
User-related Pydantic models
"""

from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, model_validator

REQUIRED_FIELDS_MESSAGE = "Name and email are required"


class UserInput(BaseModel):
    """Request body for create and update; any extra fields are kept"""
    model_config = ConfigDict(extra="allow")

    name: Optional[Any] = None
    email: Optional[Any] = None

    @model_validator(mode="before")
    @classmethod
    def drop_identifier(cls, data: Any) -> Any:
        """The identifier is assigned by the store and never taken from a body"""
        if isinstance(data, dict) and "_id" in data:
            data = {key: value for key, value in data.items() if key != "_id"}
        return data

    def has_required_fields(self) -> bool:
        """Presence check only; 0, False, "" and null all count as missing"""
        return bool(self.name) and bool(self.email)

    def to_fields(self) -> Dict[str, Any]:
        """Fields actually submitted by the client, extras included"""
        return self.model_dump(exclude_unset=True)


class UserDocument(BaseModel):
    """Shape of a user document as stored in the users collection"""
    model_config = ConfigDict(extra="allow")

    name: str
    email: str
    age: Optional[Union[int, float]] = None
