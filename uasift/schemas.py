# uasift/schemas.py

from pydantic import BaseModel, Field
from typing import List, Optional, Literal


class ExtractionResult(BaseModel):
    """Fields extracted for one category - None when unknown"""

    class Config:
        frozen = True

    def __str__(self) -> str:
        return " ".join(str(v) for v in self.model_dump().values() if v)


class BrowserInfo(ExtractionResult):
    name: Optional[str] = None
    version: Optional[str] = None
    major: Optional[str] = None
    type: Optional[str] = None  # cli, crawler, email, ... (None = ordinary browser)

    def __str__(self) -> str:
        return " ".join(v for v in (self.name, self.version) if v)


class CPUInfo(ExtractionResult):
    architecture: Optional[str] = None


class DeviceInfo(ExtractionResult):
    vendor: Optional[str] = None
    model: Optional[str] = None
    type: Optional[str] = None


class EngineInfo(ExtractionResult):
    name: Optional[str] = None
    version: Optional[str] = None


class OSInfo(ExtractionResult):
    name: Optional[str] = None
    version: Optional[str] = None


class ParseResult(BaseModel):
    """Snapshot of every category for one user-agent"""

    ua: str = ""
    browser: BrowserInfo = Field(default_factory=BrowserInfo)
    cpu: CPUInfo = Field(default_factory=CPUInfo)
    device: DeviceInfo = Field(default_factory=DeviceInfo)
    engine: EngineInfo = Field(default_factory=EngineInfo)
    os: OSInfo = Field(default_factory=OSInfo)

    class Config:
        frozen = True


class ParseRequest(BaseModel):
    """Single item of a POST /parse body"""

    ua: str = ""
    extensions: List[str] = []

    class Config:
        extra = "ignore"  # Ignore unexpected fields


class ParseBatchResponse(BaseModel):
    status: Literal["ok", "partial", "error"]
    processed: int
    errors: int = 0
    results: List[ParseResult] = []
