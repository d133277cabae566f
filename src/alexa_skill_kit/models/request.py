"""Alexa Skill request envelope models."""

from typing import Any

from pydantic import BaseModel, Field


class ResolutionValueName(BaseModel):
    """Canonical entity a slot value resolved to."""

    name: str = ""
    id: str = ""


class ResolutionValue(BaseModel):
    value: ResolutionValueName = Field(default_factory=ResolutionValueName)


class ResolutionStatus(BaseModel):
    code: str = ""


class ResolutionAuthority(BaseModel):
    """Entity resolution result from one authority (custom or built-in slot type)."""

    authority: str = ""
    status: ResolutionStatus = Field(default_factory=ResolutionStatus)
    values: list[ResolutionValue] = Field(default_factory=list)


class Resolutions(BaseModel):
    """Entity resolutions attached to a slot."""

    resolutionsPerAuthority: list[ResolutionAuthority] = Field(default_factory=list)


class IntentSlotValue(BaseModel):
    """
    Value or values of a slot.

    When type is "Simple", value and resolutions are populated.
    When type is "List", values is populated.
    """

    type: str = "Simple"
    value: str | None = None
    values: list["IntentSlotValue"] = Field(default_factory=list)
    resolutions: Resolutions | None = None

    def flatten(self) -> list[str]:
        """Return every simple value below this one, in order."""
        if self.type == "List":
            return [v for item in self.values for v in item.flatten()]
        return [self.value] if self.value else []


class IntentSlot(BaseModel):
    """Alexa slot value."""

    name: str
    confirmationStatus: str | None = None
    value: str | None = None
    resolutions: Resolutions | None = None
    slotValue: IntentSlotValue | None = None

    def resolved_values(self) -> list[str]:
        """Slot values as a list, whether the slot is single or multi-valued."""
        if self.slotValue is not None:
            return self.slotValue.flatten()
        return [self.value] if self.value else []


class Intent(BaseModel):
    """Alexa intent with slots."""

    name: str = ""
    confirmationStatus: str | None = None
    slots: dict[str, IntentSlot] = Field(default_factory=dict)


class Request(BaseModel):
    """Alexa request payload."""

    type: str = ""
    locale: str = "en-US"
    timestamp: str = ""
    requestId: str = ""
    dialogState: str | None = None
    intent: Intent | None = None


class SessionAttributes(BaseModel):
    """Session attribute container; the map itself lives under `string`."""

    string: dict[str, Any] | None = None


class SessionUser(BaseModel):
    userId: str = ""
    accessToken: str | None = None


class SessionApplication(BaseModel):
    applicationId: str = ""


class Session(BaseModel):
    """Alexa session information."""

    new: bool = False
    sessionId: str = ""
    attributes: SessionAttributes = Field(default_factory=SessionAttributes)
    user: SessionUser = Field(default_factory=SessionUser)
    application: SessionApplication = Field(default_factory=SessionApplication)


class DevicePermissions(BaseModel):
    consentToken: str | None = None


class SystemDevice(BaseModel):
    deviceId: str = ""
    supportedInterfaces: dict[str, Any] = Field(default_factory=dict)


class SystemUser(BaseModel):
    userId: str = ""
    accessToken: str | None = None
    permissions: DevicePermissions | None = None


class SystemContext(BaseModel):
    """Device and platform details under `context.System`."""

    device: SystemDevice = Field(default_factory=SystemDevice)
    application: SessionApplication = Field(default_factory=SessionApplication)
    user: SystemUser = Field(default_factory=SystemUser)
    apiEndpoint: str = ""
    apiAccessToken: str = ""


class AudioPlayerState(BaseModel):
    """Playback state under `context.AudioPlayer`."""

    playerActivity: str = ""
    token: str | None = None
    offsetInMilliseconds: int = 0


class Context(BaseModel):
    """Alexa context; passed through to handlers untouched."""

    System: SystemContext = Field(default_factory=SystemContext)
    AudioPlayer: AudioPlayerState = Field(default_factory=AudioPlayerState)


class RequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    version: str = "1.0"
    session: Session = Field(default_factory=Session)
    request: Request
    context: Context | None = None
