from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import Optional, Tuple
from datetime import datetime
from enum import Enum

# ==========================================
# 🧱 ENGINE VALUE TYPES
# ==========================================

class Reputation(str, Enum):
    TRUSTED = "trusted"
    UNKNOWN = "unknown"
    SUSPICIOUS = "suspicious"
    MALICIOUS = "malicious"

class RiskLevel(str, Enum):
    SAFE = "safe"
    SUSPICIOUS = "suspicious"
    FRAUD = "fraud"

class UrlFinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    domain: str
    is_shortened: bool = False
    is_dangerous: bool = False
    reputation: Reputation = Reputation.UNKNOWN
    threat_tags: Tuple[str, ...] = ()

class ContentFinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(default=0, ge=0)
    threat_tags: Tuple[str, ...] = ()
    insights: Tuple[str, ...] = ()

class SenderFinding(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(default=0, ge=0)
    threat_tags: Tuple[str, ...] = ()

class RiskVerdict(BaseModel):
    """
    Final verdict for one message.
    Serialized with camelCase keys for the frontend.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    risk_level: RiskLevel = Field(alias="riskLevel")
    risk_score: int = Field(alias="riskScore", ge=0, le=100)
    detected_threats: Tuple[str, ...] = Field(default=(), alias="detectedThreats")
    confidence: int = Field(ge=0, le=100)
    ai_insights: Tuple[str, ...] = Field(default=(), alias="aiInsights")

# ==========================================
# 📥 INPUT MODELS
# ==========================================

class ScanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # The legacy demo server took {"link": ...}
    text: str = Field(default="", validation_alias=AliasChoices("text", "link"))
    sender: str = "Unknown"
    sender_label: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("senderLabel", "sender_label")
    )

# ==========================================
# 📤 RESPONSE MODELS
# ==========================================

class ScanResponse(RiskVerdict):
    sender: str
    scanned_at: datetime = Field(alias="scannedAt")

class QuickScanExample(BaseModel):
    type: str
    content: str

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    service: str
    version: str
