"""Controllers por família de recurso da Evolution API."""

from evolution_sdk.controllers.base import (
    BaseController,
    ControllerContext,
    decode_body,
    resolve_instance,
)
from evolution_sdk.controllers.chat import ChatController
from evolution_sdk.controllers.group import GroupController
from evolution_sdk.controllers.instance import InstanceController
from evolution_sdk.controllers.label import LabelController
from evolution_sdk.controllers.message import MessageController
from evolution_sdk.controllers.profile import ProfileController
from evolution_sdk.controllers.settings import SettingsController
from evolution_sdk.controllers.websocket import WebsocketController, build_websocket_payload

__all__ = [
    "BaseController",
    "ChatController",
    "ControllerContext",
    "GroupController",
    "InstanceController",
    "LabelController",
    "MessageController",
    "ProfileController",
    "SettingsController",
    "WebsocketController",
    "build_websocket_payload",
    "decode_body",
    "resolve_instance",
]
