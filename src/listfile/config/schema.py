"""Pydantic v2 models for listfile configuration."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GlobalConfig(BaseModel):
    log_level: str = "info"
    json_logs: bool = False


class StoreConfig(BaseModel):
    path: str = ""
    auto_flush: bool = True
    encoding: str = "utf-8"


class TypedConfig(BaseModel):
    item_type: Literal["str", "int", "float", "bool"] = "str"


class ListFileConfig(BaseModel):
    """Root configuration model for listfile."""

    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    store: StoreConfig = Field(default_factory=StoreConfig)
    typed: TypedConfig = Field(default_factory=TypedConfig)

    model_config = {"populate_by_name": True}
