"""Artifactory REST API client."""

from .client import ArtifactoryClient, AsyncArtifactoryClient
from .configuration import ConfigurationPatch, ConfiguredRepository, GlobalConfig
from .models import (
    Agent,
    APIKey,
    ArtifactMessage,
    Artifacts,
    BinariesSummary,
    Build,
    BuildArtifact,
    BuildInfo,
    Checksums,
    Child,
    ContentSynchronisation,
    DeleteAPIKey,
    File,
    FileList,
    FileListItem,
    FileStatistics,
    FileStoreSummary,
    Folder,
    GAVCRequest,
    GAVCResponse,
    GenericRepository,
    Group,
    HALicense,
    HALicenseResponse,
    HALicenses,
    ImagePromotion,
    ItemLastModified,
    ItemProperties,
    License,
    LicenseRemoval,
    LicenseRequest,
    LicenseResponse,
    LocalRepository,
    Module,
    MultiPushReplication,
    PermissionTarget,
    Principals,
    Registry,
    RemoteRepository,
    Replication,
    Replications,
    RepositoriesSummary,
    Repository,
    RepositoryConfig,
    StorageSummary,
    Tags,
    User,
    Versions,
    VirtualRepository,
)

__all__ = [
    "ArtifactoryClient",
    "AsyncArtifactoryClient",
    "ConfigurationPatch",
    "ConfiguredRepository",
    "GlobalConfig",
    "Agent",
    "APIKey",
    "ArtifactMessage",
    "Artifacts",
    "BinariesSummary",
    "Build",
    "BuildArtifact",
    "BuildInfo",
    "Checksums",
    "Child",
    "ContentSynchronisation",
    "DeleteAPIKey",
    "File",
    "FileList",
    "FileListItem",
    "FileStatistics",
    "FileStoreSummary",
    "Folder",
    "GAVCRequest",
    "GAVCResponse",
    "GenericRepository",
    "Group",
    "HALicense",
    "HALicenseResponse",
    "HALicenses",
    "ImagePromotion",
    "ItemLastModified",
    "ItemProperties",
    "License",
    "LicenseRemoval",
    "LicenseRequest",
    "LicenseResponse",
    "LocalRepository",
    "Module",
    "MultiPushReplication",
    "PermissionTarget",
    "Principals",
    "Registry",
    "RemoteRepository",
    "Replication",
    "Replications",
    "RepositoriesSummary",
    "Repository",
    "RepositoryConfig",
    "StorageSummary",
    "Tags",
    "User",
    "Versions",
    "VirtualRepository",
]
