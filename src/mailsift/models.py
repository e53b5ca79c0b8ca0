"""Data models for email filtering."""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Union
from pydantic import BaseModel, Field, field_validator

# Wire (camelCase) key -> attribute name
_WIRE_KEYS = {
    "toAddress": "to_addr",
    "fromAddress": "from_addr",
    "folderNames": "folder_names",
    "foldersNames": "folder_names",
    "subject": "subject",
    "body": "body",
    "type": "type",
    "priority": "priority",
}

_ATTRIBUTES = ("to_addr", "from_addr", "subject", "body", "type", "priority", "folder_names")


@dataclass
class Email:
    """Represents an email record handed over by the mail store.

    Only ``to_addr``, ``type`` and ``folder_names`` are read by the filters;
    the remaining fields ride along so records survive a JSON round trip.
    """
    to_addr: Union[str, List[str], None] = None
    type: Optional[str] = None
    folder_names: Optional[List[str]] = None
    from_addr: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    priority: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Email':
        """Create an Email from a wire-format (camelCase) or snake_case dict."""
        values: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _WIRE_KEYS:
                values[_WIRE_KEYS[key]] = value
            elif key in _ATTRIBUTES:
                values[key] = value
            else:
                extra[key] = value

        # The compose form sends recipients as a list
        to_addr = values.get("to_addr")
        if isinstance(to_addr, (list, tuple)):
            values["to_addr"] = [addr for addr in to_addr if isinstance(addr, str)]

        folders = values.get("folder_names")
        if isinstance(folders, str):
            values["folder_names"] = [folders]
        elif folders is not None:
            values["folder_names"] = list(folders)

        return cls(extra=extra, **values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire format, skipping absent fields."""
        result: Dict[str, Any] = dict(self.extra)
        wire = {
            "toAddress": list(self.to_addr) if isinstance(self.to_addr, list) else self.to_addr,
            "fromAddress": self.from_addr,
            "subject": self.subject,
            "body": self.body,
            "type": self.type,
            "priority": self.priority,
            "folderNames": list(self.folder_names) if self.folder_names is not None else None,
        }
        result.update({key: value for key, value in wire.items() if value is not None})
        return result

    @property
    def recipients(self) -> List[str]:
        """Recipient addresses as a list; empty when the address is absent."""
        if isinstance(self.to_addr, str):
            return [self.to_addr]
        if isinstance(self.to_addr, list):
            return [addr for addr in self.to_addr if isinstance(addr, str)]
        return []

    def __str__(self) -> str:
        return f"{self.subject or '(no subject)'} -> {', '.join(self.recipients) or '(no recipient)'}"


class FilterRuleConfig(BaseModel):
    """One step of a saved view's filter chain."""
    kind: str = Field(..., description="Filter kind (folder, type, search, star, trash, sent, draft)")
    value: Optional[str] = Field(default=None, description="Selector value for the filter")

    @field_validator('kind')
    @classmethod
    def kind_lowercase(cls, v: str) -> str:
        return v.strip().lower()


class ViewConfig(BaseModel):
    """Configuration for a saved view."""
    name: str = Field(..., description="Name of the view")
    description: str = Field(default="", description="Description of the view")
    filters: List[FilterRuleConfig] = Field(default_factory=list, description="Filters applied in order")


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", description="Logging level")
    file: Optional[str] = Field(default=None, description="Log file path")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")


class Config(BaseModel):
    """Main configuration model."""
    version: str = Field(default="1.0", description="Configuration version")
    views: List[ViewConfig] = Field(default_factory=list, description="Saved views")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
