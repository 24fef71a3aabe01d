"""
Pydantic schemas for Wowza request bodies and response envelopes.
The client never validates against these; they exist for callers that want typed access.
"""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Primitive values accepted in a recorder request body
RecorderValue = Union[str, int, float, bool, None]
RecorderParameters = Mapping[str, RecorderValue]


# ============ Recorder Schemas ============

class StreamRecorderConfig(BaseModel):
    """Stream recorder settings as documented by the Wowza REST API"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",  # Newer server versions accept more keys
    )

    rest_uri: Optional[str] = Field(default=None, alias="restURI")
    recorder_name: Optional[str] = None
    instance_name: Optional[str] = None
    recorder_state: Optional[str] = None
    default_recorder: Optional[bool] = None
    segmentation_type: Optional[str] = None
    output_path: Optional[str] = None
    base_file: Optional[str] = None
    file_format: Optional[str] = None
    file_version_delegate_name: Optional[str] = None
    file_template: Optional[str] = None
    segment_duration: Optional[int] = None  # milliseconds
    segment_size: Optional[int] = None  # bytes
    segment_schedule: Optional[str] = None  # cron-like
    record_data: Optional[bool] = None
    start_on_key_frame: Optional[bool] = None
    split_on_tc_discontinuity: Optional[bool] = None
    back_buffer_time: Optional[int] = None
    option: Optional[str] = None
    move_first_video_frame_to_zero: Optional[bool] = None
    current_size: Optional[int] = None
    current_duration: Optional[int] = None
    recording_start_time: Optional[str] = None

    def to_request_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


# ============ Response Schemas ============

class ActionResult(BaseModel):
    """Envelope returned by create/stop/connect/disconnect actions"""
    success: bool
    message: str = ""
    data: Optional[Any] = None
