"""Artifactory request and response payloads."""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import Discriminator, Field, Tag

from .._model import ArtifactoryModel, QueryOptions
from ..timestamp import Timestamp

# Artifacts


class ArtifactMessage(ArtifactoryModel):
    level: str | None = None
    message: str | None = None


class Artifacts(ArtifactoryModel):
    """Result of a copy or move operation."""

    messages: list[ArtifactMessage] | None = None


# Builds


class Agent(ArtifactoryModel):
    name: str | None = None
    version: str | None = None


class BuildArtifact(ArtifactoryModel):
    sha1: str | None = None
    sha256: str | None = None
    md5: str | None = None
    name: str | None = None


class Module(ArtifactoryModel):
    properties: dict[str, str] | None = None
    id: str | None = None
    artifacts: list[BuildArtifact] | None = None


class BuildInfo(ArtifactoryModel):
    properties: dict[str, str] | None = None
    version: str | None = None
    name: str | None = None
    number: str | None = None
    build_agent: Agent | None = None
    agent: Agent | None = None
    started: str | None = None
    duration_millis: int | None = None
    artifactory_principal: str | None = None
    modules: list[Module] | None = None


class Build(ArtifactoryModel):
    build_info: BuildInfo | None = None
    uri: str | None = None


# Docker


class Registry(ArtifactoryModel):
    repositories: list[str] | None = None


class Tags(ArtifactoryModel):
    name: str | None = None
    tags: list[str] | None = None


class ImagePromotion(ArtifactoryModel):
    """Promotion of a Docker image between repositories.

    Leaving ``tag`` unset promotes the whole Docker repository. Unset target
    names default to the source names on the server side.
    """

    target_repo: str | None = None
    docker_repository: str | None = None
    target_docker_repository: str | None = None
    tag: str | None = None
    target_tag: str | None = None
    copy_: bool | None = Field(default=None, alias="copy")


# Groups


class Group(ArtifactoryModel):
    name: str | None = None
    uri: str | None = None
    description: str | None = None
    auto_join: bool | None = None
    admin_privileges: bool | None = None
    realm: str | None = None
    realm_attributes: str | None = None
    user_names: list[str] | None = None


# Licenses


class License(ArtifactoryModel):
    type: str | None = None
    valid_through: str | None = None
    licensed_to: str | None = None


class HALicense(ArtifactoryModel):
    type: str | None = None
    valid_through: str | None = None
    licensed_to: str | None = None
    license_hash: str | None = None
    node_id: str | None = None
    node_url: str | None = None
    expired: bool | None = None


class HALicenses(ArtifactoryModel):
    licenses: list[HALicense] | None = None


class LicenseRequest(ArtifactoryModel):
    license_key: str | None = None


class LicenseResponse(ArtifactoryModel):
    status: int | None = None
    message: str | None = None


class HALicenseResponse(ArtifactoryModel):
    status: int | None = None
    messages: dict[str, str] | None = None


class LicenseRemoval(QueryOptions):
    license_hashes: list[str] | None = Field(default=None, alias="licenseHash")


# Permissions


class Principals(ArtifactoryModel):
    """Permission letters (r, w, n, d, m) granted per user and per group."""

    users: dict[str, list[str]] | None = None
    groups: dict[str, list[str]] | None = None


class PermissionTarget(ArtifactoryModel):
    name: str | None = None
    uri: str | None = None
    includes_pattern: str | None = None
    excludes_pattern: str | None = None
    repositories: list[str] | None = None
    principals: Principals | None = None


# Replications


class Replication(ArtifactoryModel):
    username: str | None = None
    password: str | None = None
    url: str | None = None
    socket_timeout_millis: int | None = None
    cron_exp: str | None = None
    repo_key: str | None = None
    enable_event_replication: bool | None = None
    enabled: bool | None = None
    sync_deletes: bool | None = None
    sync_properties: bool | None = None
    sync_statistics: bool | None = None
    path_prefix: str | None = None
    check_binary_existence_in_filestore: bool | None = None


class Replications(Replication):
    """Entry of the replication list, tagged with its replication type."""

    replication_type: str | None = None


class MultiPushReplication(ArtifactoryModel):
    cron_exp: str | None = None
    enable_event_replication: bool | None = None
    replications: list[Replication] | None = None


# Repositories


class Repository(ArtifactoryModel):
    """Summary entry returned by the repository list."""

    key: str | None = None
    type: str | None = None
    description: str | None = None
    url: str | None = None
    package_type: str | None = None


class GenericRepository(ArtifactoryModel):
    """Configuration fields common to every repository class."""

    key: str | None = None
    rclass: str | None = None
    package_type: str | None = None
    description: str | None = None
    notes: str | None = None
    includes_pattern: str | None = None
    excludes_pattern: str | None = None
    repo_layout_ref: str | None = None
    handle_releases: bool | None = None
    handle_snapshots: bool | None = None
    max_unique_snapshots: int | None = None
    suppress_pom_consistency_checks: bool | None = None
    blacked_out: bool | None = None
    property_sets: list[str] | None = None
    force_nuget_authentication: bool | None = None


class LocalRepository(GenericRepository):
    debian_trivial_layout: bool | None = None
    checksum_policy_type: str | None = None
    max_unique_tags: int | None = None
    snapshot_version_behavior: str | None = None
    archive_browsing_enabled: bool | None = None
    calculate_yum_metadata: bool | None = None
    yum_root_depth: int | None = None
    docker_api_version: str | None = None
    block_pushing_schema1: bool | None = None
    enable_file_lists_indexing: bool | None = None
    optional_index_compression_formats: list[str] | None = None
    xray_index: bool | None = None
    download_redirect: bool | None = None


class EnabledFlag(ArtifactoryModel):
    enabled: bool | None = None


class ContentSynchronisationSource(ArtifactoryModel):
    origin_absence_detection: bool | None = None


class ContentSynchronisation(ArtifactoryModel):
    enabled: bool | None = None
    properties: EnabledFlag | None = None
    statistics: EnabledFlag | None = None
    source: ContentSynchronisationSource | None = None


class RemoteRepository(GenericRepository):
    url: str | None = None
    username: str | None = None
    password: str | None = None
    proxy: str | None = None
    remote_repo_checksum_policy_type: str | None = None
    hard_fail: bool | None = None
    offline: bool | None = None
    store_artifacts_locally: bool | None = None
    socket_timeout_millis: int | None = None
    local_address: str | None = None
    retrieval_cache_period_secs: int | None = None
    failed_retrieval_cache_period_secs: int | None = None
    missed_retrieval_cache_period_secs: int | None = None
    metadata_retrieval_timeout_secs: int | None = None
    unused_artifacts_cleanup_enabled: bool | None = None
    unused_artifacts_cleanup_period_hours: int | None = None
    assumed_offline_period_secs: int | None = None
    fetch_jars_eagerly: bool | None = None
    fetch_sources_eagerly: bool | None = None
    share_configuration: bool | None = None
    synchronize_properties: bool | None = None
    block_mismatching_mime_types: bool | None = None
    allow_any_host_auth: bool | None = None
    enable_cookie_management: bool | None = None
    bower_registry_url: str | None = None
    composer_registry_url: str | None = None
    pypi_registry_url: str | None = Field(default=None, alias="pyPIRegistryUrl")
    pypi_repository_suffix: str | None = Field(default=None, alias="pyPIRepositorySuffix")
    vcs_type: str | None = None
    vcs_git_provider: str | None = None
    vcs_git_download_url: str | None = None
    bypass_head_requests: bool | None = None
    client_tls_certificate: str | None = None
    external_dependencies_enabled: bool | None = None
    external_dependencies_patterns: list[str] | None = None
    download_redirect: bool | None = None
    feed_context_path: str | None = None
    download_context_path: str | None = None
    v3_feed_url: str | None = None
    xray_index: bool | None = None
    list_remote_folder_items: bool | None = None
    enable_token_authentication: bool | None = None
    content_synchronisation: ContentSynchronisation | None = None
    block_pushing_schema1: bool | None = None
    query_params: str | None = None
    propagate_query_params: bool | None = None


class VirtualRepository(GenericRepository):
    repositories: list[str] | None = None
    debian_trivial_layout: bool | None = None
    artifactory_requests_can_retrieve_remote_artifacts: bool | None = None
    key_pair: str | None = None
    pom_repository_references_cleanup_policy: str | None = None
    default_deployment_repo: str | None = None
    force_maven_authentication: bool | None = None
    external_dependencies_enabled: bool | None = None
    external_dependencies_patterns: list[str] | None = None
    external_dependencies_remote_repo: str | None = None
    resolve_docker_tags_by_timestamp: bool | None = None
    virtual_retrieval_cache_period_secs: int | None = None
    debian_default_architectures: str | None = None


_REPOSITORY_CLASSES = ("local", "remote", "virtual")


def _repository_class(value: Any) -> str:
    if isinstance(value, dict):
        rclass = value.get("rclass")
    else:
        rclass = getattr(value, "rclass", None)
    return rclass if rclass in _REPOSITORY_CLASSES else "generic"


# A repository configuration, typed by its ``rclass`` field. Unknown or
# missing classes fall back to GenericRepository.
RepositoryConfig = Annotated[
    Union[
        Annotated[LocalRepository, Tag("local")],
        Annotated[RemoteRepository, Tag("remote")],
        Annotated[VirtualRepository, Tag("virtual")],
        Annotated[GenericRepository, Tag("generic")],
    ],
    Discriminator(_repository_class),
]

# Storage


class Child(ArtifactoryModel):
    uri: str | None = None
    folder: bool | None = None


class Folder(ArtifactoryModel):
    uri: str | None = None
    repo: str | None = None
    path: str | None = None
    created: Timestamp | None = None
    created_by: str | None = None
    last_modified: Timestamp | None = None
    modified_by: str | None = None
    last_updated: Timestamp | None = None
    children: list[Child] | None = None


class Checksums(ArtifactoryModel):
    md5: str | None = None
    sha1: str | None = None
    sha256: str | None = None


class File(ArtifactoryModel):
    uri: str | None = None
    download_uri: str | None = None
    repo: str | None = None
    path: str | None = None
    remote_url: str | None = None
    created: Timestamp | None = None
    created_by: str | None = None
    last_modified: Timestamp | None = None
    modified_by: str | None = None
    last_updated: Timestamp | None = None
    size: str | None = None
    mime_type: str | None = None
    checksums: Checksums | None = None
    original_checksums: Checksums | None = None


class BinariesSummary(ArtifactoryModel):
    binaries_count: str | None = None
    binaries_size: str | None = None
    artifacts_size: str | None = None
    optimization: str | None = None
    items_count: str | None = None
    artifacts_count: str | None = None


class FileStoreSummary(ArtifactoryModel):
    storage_type: str | None = None
    storage_directory: str | None = None
    total_space: str | None = None
    used_space: str | None = None
    free_space: str | None = None


class RepositoriesSummary(ArtifactoryModel):
    repo_key: str | None = None
    repo_type: str | None = None
    folders_count: int | None = None
    files_count: int | None = None
    used_space: str | None = None
    items_count: int | None = None
    package_type: str | None = None
    percentage: str | None = None


class StorageSummary(ArtifactoryModel):
    binaries_summary: BinariesSummary | None = None
    file_store_summary: FileStoreSummary | None = None
    repositories_summary_list: list[RepositoriesSummary] | None = None


class ItemLastModified(ArtifactoryModel):
    uri: str | None = None
    last_modified: Timestamp | None = None


class FileStatistics(ArtifactoryModel):
    uri: str | None = None
    last_downloaded: int | None = None
    download_count: int | None = None
    last_downloaded_by: str | None = None


class ItemProperties(ArtifactoryModel):
    uri: str | None = None
    properties: dict[str, list[str]] | None = None


class FileListItem(ArtifactoryModel):
    uri: str | None = None
    size: int | None = None
    last_modified: Timestamp | None = None
    folder: bool | None = None
    sha1: str | None = None


class FileList(ArtifactoryModel):
    uri: str | None = None
    created: Timestamp | None = None
    files: list[FileListItem] | None = None


# Search


class GAVCRequest(QueryOptions):
    """Maven coordinates to search for. At least one coordinate is required."""

    group_id: str | None = Field(default=None, alias="g")
    artifact_id: str | None = Field(default=None, alias="a")
    version: str | None = Field(default=None, alias="v")
    classifier: str | None = Field(default=None, alias="c")
    repos: list[str] | None = None


class GAVCResponse(ArtifactoryModel):
    results: list[File] | None = None


# System


class Versions(ArtifactoryModel):
    version: str | None = None
    revision: str | None = None
    addons: list[str] | None = None


# Users


class User(ArtifactoryModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    admin: bool | None = None
    profile_updatable: bool | None = None
    disable_ui_access: bool | None = Field(default=None, alias="disableUIAccess")
    internal_password_disabled: bool | None = None
    last_logged_in: str | None = None
    realm: str | None = None
    groups: list[str] | None = None


class APIKey(ArtifactoryModel):
    api_key: str | None = None


class DeleteAPIKey(ArtifactoryModel):
    info: str | None = None
