"""
Data models for lookup uploads and workflow step results.

The descriptor travels on the wire with camelCase keys, so every model
declares explicit aliases and is dumped with by_alias=True.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class UploadRequest(BaseModel):
    """
    JSON descriptor sent as the `request` part of the multipart body.

    Optional fields are omitted from the serialized form when not supplied.
    """
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath")
    parse_pattern: str = Field(alias="parsePattern")
    lookup_field: str = Field(alias="lookupField")
    overwrite: bool = False
    auto_flatten: bool = Field(default=True, alias="autoFlatten")
    skipped_records: int = Field(default=0, alias="skippedRecords")

    display_name: Optional[str] = Field(default=None, alias="displayName")
    description: Optional[str] = None
    timezone: Optional[str] = None
    locale: Optional[str] = None

    def to_dict(self) -> dict:
        """Wire representation, without unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize for the `request` part."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


@dataclass
class UploadResponse:
    """Successful upload response."""
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    data: Any = None

    def to_dict(self) -> dict:
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "data": self.data,
        }


class UploadStepResult(BaseModel):
    """
    Output of the upload workflow action.

    Also the input contract of the query action: it must expose filePath.
    """
    model_config = ConfigDict(populate_by_name=True)

    message: str
    status_code: int = Field(alias="statusCode")
    response_body: Any = Field(default=None, alias="responseBody")
    file_path: str = Field(alias="filePath")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class LookupReference(BaseModel):
    """Location of an uploaded lookup table, read from a previous step result."""
    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(alias="filePath", min_length=1)

    @classmethod
    def from_step_result(cls, result: Any) -> Optional["LookupReference"]:
        """
        Find filePath at the top level or under content.filePath.

        Returns:
            LookupReference, or None if neither location carries a non-empty value
        """
        for candidate in (result, read_field(result, "content")):
            file_path = read_field(candidate, "filePath")
            if isinstance(file_path, str) and file_path:
                return cls(file_path=file_path)
        return None


class QueryStepResult(BaseModel):
    """Output of the query workflow action."""
    model_config = ConfigDict(populate_by_name=True)

    message: str
    file_path: str = Field(alias="filePath")
    record_count: int = Field(alias="recordCount")
    records: list = Field(default_factory=list)
    full_response: Any = Field(default=None, alias="fullResponse")

    def to_dict(self) -> dict:
        # fullResponse se entrega tal cual llegó del query client
        data = self.model_dump(by_alias=True, exclude={"full_response"})
        data["fullResponse"] = self.full_response
        return data


def read_field(obj: Any, key: str) -> Any:
    """Read a key from a mapping or an attribute from an object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)
