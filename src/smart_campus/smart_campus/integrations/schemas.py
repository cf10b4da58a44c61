from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiIntegrationCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    institution_id: int
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=50)
    endpoint: str = Field(..., min_length=1)
    api_key: Optional[str] = None
    configuration: Optional[Any] = None
    is_active: bool = True
    last_sync: Optional[dt.datetime] = None
