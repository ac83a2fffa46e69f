"""Public scenekit API contracts."""

from scenekit.api.actions import ActionDispatcher, ActionHandler, create_action_dispatcher
from scenekit.api.assets import (
    AssetLoaded,
    AssetLoadFailed,
    BatchCompleted,
    BatchIncompleted,
    BatchReport,
    BatchState,
    ModelReader,
    SceneSink,
    create_batch_loader,
)
from scenekit.api.events import EventBus, Subscription, create_event_bus
from scenekit.api.host import HostControl, SceneModule, TimeContext
from scenekit.api.logging import EngineLoggingConfig, configure_logging, get_logger

__all__ = [
    "ActionDispatcher",
    "ActionHandler",
    "AssetLoadFailed",
    "AssetLoaded",
    "BatchCompleted",
    "BatchIncompleted",
    "BatchReport",
    "BatchState",
    "EngineLoggingConfig",
    "EventBus",
    "HostControl",
    "ModelReader",
    "SceneModule",
    "SceneSink",
    "Subscription",
    "TimeContext",
    "configure_logging",
    "create_action_dispatcher",
    "create_batch_loader",
    "create_event_bus",
    "get_logger",
]
