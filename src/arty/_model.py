"""Base classes for API payload models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ArtifactoryModel(BaseModel):
    """Artifactory payload. Wire names are camelCase, every field is optional.

    Fields left as None are dropped when the model is sent, so a partially
    filled model only updates what it sets.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, extra="allow")


class XrayModel(BaseModel):
    """Xray payload. Wire names are mostly snake_case."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class QueryOptions(BaseModel):
    """Structured query parameters; see ``arty._http.url.add_options``."""

    model_config = ConfigDict(populate_by_name=True)


__all__ = ["ArtifactoryModel", "XrayModel", "QueryOptions"]
