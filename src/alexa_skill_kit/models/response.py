"""Alexa Skill response envelope models and builder helpers."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from .request import Intent

SDK_VERSION = "1.0"


class PlainTextOutputSpeech(BaseModel):
    """Alexa speech output as plain text."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class SsmlOutputSpeech(BaseModel):
    """Alexa speech output as SSML markup."""

    type: Literal["SSML"] = "SSML"
    ssml: str


OutputSpeech = Annotated[PlainTextOutputSpeech | SsmlOutputSpeech, Field(discriminator="type")]


class Reprompt(BaseModel):
    """Speech used when the user does not answer."""

    outputSpeech: OutputSpeech | None = None


class SimpleCard(BaseModel):
    """Alexa card for visual display."""

    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class CardImage(BaseModel):
    smallImageUrl: str | None = None
    largeImageUrl: str | None = None


class StandardCard(BaseModel):
    """Card with body text and an optional image."""

    type: Literal["Standard"] = "Standard"
    title: str
    text: str
    image: CardImage | None = None


class LinkAccountCard(BaseModel):
    """Card asking the user to link their account in the Alexa app."""

    type: Literal["LinkAccount"] = "LinkAccount"


Card = Annotated[SimpleCard | StandardCard | LinkAccountCard, Field(discriminator="type")]


class Stream(BaseModel):
    token: str
    url: str
    offsetInMilliseconds: int = 0


class AudioItem(BaseModel):
    stream: Stream


class AudioPlayerDirective(BaseModel):
    """Device instruction for audio playback, e.g. AudioPlayer.Play."""

    type: str = "AudioPlayer.Play"
    playBehavior: str | None = None
    audioItem: AudioItem | None = None


class DialogDirective(BaseModel):
    """Dialog management instruction, e.g. Dialog.Delegate or Dialog.ElicitSlot."""

    type: str = "Dialog.Delegate"
    slotToElicit: str | None = None
    slotToConfirm: str | None = None
    updatedIntent: Intent | None = None


Directive = AudioPlayerDirective | DialogDirective


class Response(BaseModel):
    """
    Alexa response body.

    Handlers fill this in through the set_* / add_* helpers below. The
    helpers never fail; speech, reprompt and card setters replace whatever
    was there before, directive helpers append.
    """

    outputSpeech: OutputSpeech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[Directive] = Field(default_factory=list)
    shouldEndSession: bool = True

    @model_serializer(mode="wrap")
    def _omit_empty_directives(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not data.get("directives"):
            data.pop("directives", None)
        return data

    def set_simple_card(self, title: str, content: str) -> None:
        """Show a card with a title and plain content."""
        self.card = SimpleCard(title=title, content=content)

    def set_standard_card(
        self,
        title: str,
        text: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> None:
        """Show a card with body text and small/large image URLs."""
        image = None
        if small_image_url or large_image_url:
            image = CardImage(
                smallImageUrl=small_image_url or None,
                largeImageUrl=large_image_url or None,
            )
        self.card = StandardCard(title=title, text=text, image=image)

    def set_link_account_card(self) -> None:
        self.card = LinkAccountCard()

    def set_output_text(self, text: str) -> None:
        self.outputSpeech = PlainTextOutputSpeech(text=text)

    def set_output_ssml(self, ssml: str) -> None:
        self.outputSpeech = SsmlOutputSpeech(ssml=ssml)

    def set_reprompt_text(self, text: str) -> None:
        if self.reprompt is None:
            self.reprompt = Reprompt()
        self.reprompt.outputSpeech = PlainTextOutputSpeech(text=text)

    def set_reprompt_ssml(self, ssml: str) -> None:
        if self.reprompt is None:
            self.reprompt = Reprompt()
        self.reprompt.outputSpeech = SsmlOutputSpeech(ssml=ssml)

    def add_audio_player(
        self,
        directive_type: str,
        play_behavior: str,
        stream_token: str,
        url: str,
        offset_in_milliseconds: int = 0,
    ) -> None:
        """Append an AudioPlayer directive after any existing directives."""
        self.directives.append(
            AudioPlayerDirective(
                type=directive_type,
                playBehavior=play_behavior or None,
                audioItem=AudioItem(
                    stream=Stream(
                        token=stream_token,
                        url=url,
                        offsetInMilliseconds=offset_in_milliseconds,
                    )
                ),
            )
        )

    def add_dialog_directive(
        self,
        directive_type: str,
        slot_to_elicit: str | None = None,
        slot_to_confirm: str | None = None,
        intent: Intent | None = None,
    ) -> None:
        """Append a Dialog directive; empty slot names are left out."""
        self.directives.append(
            DialogDirective(
                type=directive_type,
                slotToElicit=slot_to_elicit or None,
                slotToConfirm=slot_to_confirm or None,
                updatedIntent=intent,
            )
        )


class ResponseEnvelope(BaseModel):
    """Full Alexa response envelope."""

    version: str = SDK_VERSION
    sessionAttributes: dict[str, Any] = Field(default_factory=dict)
    response: Response = Field(default_factory=Response)

    @model_serializer(mode="wrap")
    def _omit_empty_attributes(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not data.get("sessionAttributes"):
            data.pop("sessionAttributes", None)
        return data

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict with unset optional fields left out."""
        return self.model_dump(mode="json", exclude_none=True)
