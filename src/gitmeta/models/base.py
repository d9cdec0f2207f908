#!/usr/bin/env python3

from pydantic import BaseModel as PydanticBaseModel
from pydantic import ConfigDict


class BaseModel(PydanticBaseModel):
    model_config = ConfigDict(
        frozen=True,  # 快照生成后不再修改
    )
