"""Global system configuration.

Artifactory serves its global configuration as an XML document and accepts
partial updates as YAML. ``GlobalConfig`` holds the commonly used parts of
the XML document (and the raw text for everything else);
``ConfigurationPatch`` is the YAML update payload.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from pydantic import BaseModel, Field

from .._model import ArtifactoryModel

_REPOSITORY_SECTIONS = {
    "local_repositories": ("localRepositories", "localRepository"),
    "remote_repositories": ("remoteRepositories", "remoteRepository"),
    "virtual_repositories": ("virtualRepositories", "virtualRepository"),
}


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _child(element: ET.Element, name: str) -> ET.Element | None:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _text(element: ET.Element, name: str) -> str | None:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip()


class ConfiguredRepository(BaseModel):
    """A repository as declared in the configuration document."""

    key: str | None = None
    type: str | None = None
    description: str | None = None
    url: str | None = None
    repositories: list[str] = Field(default_factory=list)

    @classmethod
    def from_element(cls, element: ET.Element) -> ConfiguredRepository:
        refs = _child(element, "repositories")
        return cls(
            key=_text(element, "key"),
            type=_text(element, "type"),
            description=_text(element, "description"),
            url=_text(element, "url"),
            repositories=[
                ref.text.strip() for ref in (refs if refs is not None else []) if ref.text
            ],
        )


class GlobalConfig(BaseModel):
    server_name: str | None = None
    url_base: str | None = None
    offline_mode: bool | None = None
    file_upload_max_size_mb: int | None = None
    date_format: str | None = None
    local_repositories: list[ConfiguredRepository] = Field(default_factory=list)
    remote_repositories: list[ConfiguredRepository] = Field(default_factory=list)
    virtual_repositories: list[ConfiguredRepository] = Field(default_factory=list)
    raw: str = Field(default="", repr=False)

    @classmethod
    def from_xml(cls, content: bytes | str) -> GlobalConfig:
        """Parse the configuration document.

        Raises:
            ValueError: If ``content`` is not well-formed XML or has
                ill-typed values.
        """
        try:
            root = ET.fromstring(content)
        except ET.ParseError as ex:
            raise ValueError(f"invalid configuration document: {ex}") from ex

        fields: dict[str, Any] = {
            "server_name": _text(root, "serverName"),
            "url_base": _text(root, "urlBase"),
            "offline_mode": _text(root, "offlineMode"),
            "file_upload_max_size_mb": _text(root, "fileUploadMaxSizeMb"),
            "date_format": _text(root, "dateFormat"),
        }
        for field_name, (section, item) in _REPOSITORY_SECTIONS.items():
            container = _child(root, section)
            if container is None:
                continue
            fields[field_name] = [
                ConfiguredRepository.from_element(element)
                for element in container
                if _local_name(element.tag) == item
            ]

        raw = content.decode("utf-8") if isinstance(content, bytes) else content
        return cls.model_validate({**fields, "raw": raw})


class ConfigurationPatch(ArtifactoryModel):
    """Partial configuration update, sent as YAML.

    Repository sections map repository keys to their settings in the
    camelCase form of the configuration descriptor. Other top-level keys of
    the descriptor may be passed as extra fields.
    """

    url_base: str | None = None
    server_name: str | None = None
    offline_mode: bool | None = None
    file_upload_max_size_mb: int | None = None
    date_format: str | None = None
    local_repositories: dict[str, dict[str, Any]] | None = None
    remote_repositories: dict[str, dict[str, Any]] | None = None
    virtual_repositories: dict[str, dict[str, Any]] | None = None


__all__ = ["ConfigurationPatch", "ConfiguredRepository", "GlobalConfig"]
