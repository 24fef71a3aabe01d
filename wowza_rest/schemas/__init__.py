from wowza_rest.schemas.schemas import (
    ActionResult,
    RecorderParameters,
    RecorderValue,
    StreamRecorderConfig,
)

__all__ = [
    "ActionResult",
    "RecorderParameters",
    "RecorderValue",
    "StreamRecorderConfig",
]
