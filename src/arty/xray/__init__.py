"""Xray REST API client."""

from .client import AsyncXrayClient, XrayClient
from .models import (
    Ping,
    ScanAlert,
    ScanArtifactRequest,
    ScanArtifactResponse,
    ScanBannedLicense,
    ScanBuildRequest,
    ScanBuildResponse,
    ScanChecksum,
    ScanDetail,
    ScanImpactedArtifact,
    ScanInfectedFile,
    ScanIssue,
    ScanLicense,
    ScanSummary,
    ScanVulnerability,
    SummaryArtifact,
    SummaryArtifactRequest,
    SummaryBuildOptions,
    SummaryError,
    SummaryGeneral,
    SummaryIssue,
    SummaryLicense,
    SummaryResponse,
    User,
    Versions,
)

__all__ = [
    "XrayClient",
    "AsyncXrayClient",
    "Ping",
    "ScanAlert",
    "ScanArtifactRequest",
    "ScanArtifactResponse",
    "ScanBannedLicense",
    "ScanBuildRequest",
    "ScanBuildResponse",
    "ScanChecksum",
    "ScanDetail",
    "ScanImpactedArtifact",
    "ScanInfectedFile",
    "ScanIssue",
    "ScanLicense",
    "ScanSummary",
    "ScanVulnerability",
    "SummaryArtifact",
    "SummaryArtifactRequest",
    "SummaryBuildOptions",
    "SummaryError",
    "SummaryGeneral",
    "SummaryIssue",
    "SummaryLicense",
    "SummaryResponse",
    "User",
    "Versions",
]
