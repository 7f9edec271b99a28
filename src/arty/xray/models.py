"""Xray request and response payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .._model import QueryOptions, XrayModel

# Scan


class ScanChecksum(XrayModel):
    md5: str | None = None
    sha1: str | None = None
    sha256: str | None = None


class ScanArtifactRequest(XrayModel):
    checksum: ScanChecksum | None = None
    component_id: str | None = Field(default=None, alias="componentId")
    summary: str | None = None


class ScanArtifactResponse(XrayModel):
    info: str | None = None


class ScanBuildRequest(XrayModel):
    artifactory_id: str | None = Field(default=None, alias="artifactoryId")
    build_name: str | None = Field(default=None, alias="buildName")
    build_number: str | None = Field(default=None, alias="buildNumber")


class ScanSummary(XrayModel):
    fail_build: str | None = None
    message: str | None = None
    more_details_url: str | None = None
    total_alerts: str | None = None


class ScanBannedLicense(XrayModel):
    alert_type: str | None = None
    description: str | None = None
    id: Any = None
    severity: str | None = None
    summary: str | None = None


class ScanVulnerability(XrayModel):
    alert_type: str | None = None
    description: str | None = None
    id: Any = None
    severity: str | None = None
    summary: str | None = None


class ScanDetail(XrayModel):
    banned_licenses: list[ScanBannedLicense] | None = None
    child: str | None = None
    vulnerabilities: list[ScanVulnerability] | None = None


class ScanInfectedFile(XrayModel):
    component_id: str | None = None
    depth: str | None = None
    details: list[ScanDetail] | None = None
    display_name: str | None = None
    name: str | None = None
    parent_sha: str | None = None
    path: str | None = None
    pkg_type: str | None = None
    sha1: str | None = None
    sha256: str | None = None


class ScanImpactedArtifact(XrayModel):
    depth: str | None = None
    display_name: str | None = None
    infected_files: list[ScanInfectedFile] | None = None
    name: str | None = None
    parent_sha: str | None = None
    path: str | None = None
    pkg_type: str | None = None
    sha1: str | None = None
    sha256: str | None = None


class ScanIssue(XrayModel):
    created: str | None = None
    cve: str | None = None
    description: str | None = None
    impacted_artifacts: list[ScanImpactedArtifact] | None = None
    provider: str | None = None
    severity: str | None = None
    summary: str | None = None
    type: str | None = None


class ScanAlert(XrayModel):
    created: str | None = None
    issues: list[ScanIssue] | None = None
    top_severity: str | None = None
    watch_name: str | None = None


class ScanLicense(XrayModel):
    components: list[str] | None = None
    full_name: str | None = None
    more_info_url: list[str] | None = None
    name: str | None = None


class ScanBuildResponse(XrayModel):
    summary: ScanSummary | None = None
    alerts: list[ScanAlert] | None = None
    licenses: list[ScanLicense] | None = None


# Summary


class SummaryArtifactRequest(XrayModel):
    checksums: list[str] | None = None
    paths: list[str] | None = None


class SummaryBuildOptions(QueryOptions):
    build_name: str
    build_number: int


class SummaryGeneral(XrayModel):
    component_id: str | None = None
    name: str | None = None
    path: str | None = None
    pkg_type: str | None = None
    sha256: str | None = None


class SummaryIssue(XrayModel):
    created: str | None = None
    description: str | None = None
    impact_path: list[str] | None = None
    issue_type: str | None = None
    provider: str | None = None
    severity: str | None = None
    summary: str | None = None


class SummaryLicense(XrayModel):
    components: list[str] | None = None
    full_name: str | None = None
    more_info_url: list[str] | None = None
    name: str | None = None


class SummaryArtifact(XrayModel):
    general: SummaryGeneral | None = None
    issues: list[SummaryIssue] | None = None
    licenses: list[SummaryLicense] | None = None


class SummaryError(XrayModel):
    error: str | None = None
    identifier: str | None = None


class SummaryResponse(XrayModel):
    artifacts: list[SummaryArtifact] | None = None
    errors: list[SummaryError] | None = None


# System


class Ping(XrayModel):
    status: str | None = None


class Versions(XrayModel):
    xray_version: str | None = None
    xray_revision: str | None = None


# Users


class User(XrayModel):
    admin: bool | None = None
    email: str | None = None
    name: str | None = None
    password: str | None = None
