"""
Webhook request bodies for the Luxafor cloud API.

Every action is a JSON POST to ``<base>/<action>``::

    POST https://api.luxafor.com/webhook/v1/actions/solid_color
    {"userId": "2a0f2c73b72", "actionFields": {"color": "red"}}

Custom colors use the "custom" color name plus a hex value::

    {"userId": "...", "actionFields": {"color": "custom", "custom_color": "010203"}}

Patterns go to the ``pattern`` action::

    {"userId": "...", "actionFields": {"pattern": "police"}}
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from luxafor.models import Color, CustomColor, Pattern, WebhookDeviceId

ACTION_SOLID_COLOR = "solid_color"
ACTION_BLINK = "blink"
ACTION_PATTERN = "pattern"


class ActionFields(BaseModel):
    """The ``actionFields`` object; unset fields are left out of the JSON."""

    color: str | None = None
    custom_color: str | None = None
    pattern: str | None = None


class WebhookBody(BaseModel):
    """Top level webhook request body."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    action_fields: ActionFields = Field(alias="actionFields")

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using the API's camelCase names, dropping unset fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class WebhookRequest:
    """An encoded webhook call: which action to POST and what to send."""

    action: str
    body: WebhookBody

    def url(self, base_url: str) -> str:
        """Full endpoint URL for this action."""
        return f"{base_url.rstrip('/')}/{self.action}"


def color_request(device_id: WebhookDeviceId, color: Color, blink: bool = False) -> WebhookRequest:
    """
    Encode a solid or blinking color.

    Args:
        device_id: Webhook device identifier
        color: Named or custom color
        blink: Use the blink action instead of solid_color
    """
    if isinstance(color, CustomColor):
        fields = ActionFields(color="custom", custom_color=str(color))
    else:
        fields = ActionFields(color=str(color))

    return WebhookRequest(
        action=ACTION_BLINK if blink else ACTION_SOLID_COLOR,
        body=WebhookBody(user_id=str(device_id), action_fields=fields),
    )


def pattern_request(device_id: WebhookDeviceId, pattern: Pattern) -> WebhookRequest:
    """Encode a preset pattern."""
    return WebhookRequest(
        action=ACTION_PATTERN,
        body=WebhookBody(user_id=str(device_id), action_fields=ActionFields(pattern=str(pattern))),
    )
