"""Fixtures for integration tests using respx mocking."""

import pytest

# API base URLs
ARTIFACTORY_API_BASE = "https://art.example.com/artifactory"
XRAY_API_BASE = "https://xray.example.com/xray"


# =============================================================================
# Artifactory Mock Responses
# =============================================================================


@pytest.fixture
def mock_group_response() -> dict:
    """Mock response for a group fetched with includeUsers."""
    return {
        "name": "readers",
        "description": "Read-only access",
        "autoJoin": False,
        "adminPrivileges": False,
        "realm": "internal",
        "userNames": ["alice", "bob"],
    }


@pytest.fixture
def mock_copy_response() -> dict:
    """Mock response for a copy or move operation."""
    return {
        "messages": [
            {"level": "INFO", "message": "copying libs-release-local:a/b.jar to libs-staging"}
        ]
    }


@pytest.fixture
def mock_local_repository_response() -> dict:
    """Mock response for a local repository configuration."""
    return {
        "key": "libs-release-local",
        "rclass": "local",
        "packageType": "maven",
        "description": "Local releases",
        "handleReleases": True,
        "handleSnapshots": False,
        "maxUniqueSnapshots": 0,
        "checksumPolicyType": "client-checksums",
        "xrayIndex": True,
    }


@pytest.fixture
def mock_remote_repository_response() -> dict:
    """Mock response for a remote repository configuration."""
    return {
        "key": "pypi-remote",
        "rclass": "remote",
        "packageType": "pypi",
        "url": "https://files.pythonhosted.org",
        "pyPIRegistryUrl": "https://pypi.org",
        "hardFail": False,
        "contentSynchronisation": {
            "enabled": False,
            "properties": {"enabled": False},
            "statistics": {"enabled": False},
            "source": {"originAbsenceDetection": False},
        },
    }


@pytest.fixture
def mock_replication_response() -> dict:
    """Mock response for a single replication."""
    return {
        "username": "admin",
        "url": "https://mirror.example.com/artifactory/libs-release-local",
        "socketTimeoutMillis": 15000,
        "cronExp": "0 0 12 * * ?",
        "repoKey": "libs-release-local",
        "enableEventReplication": True,
        "enabled": True,
        "syncDeletes": False,
        "syncProperties": True,
        "syncStatistics": False,
        "pathPrefix": "",
    }


@pytest.fixture
def mock_gavc_response() -> dict:
    """Mock response for a GAVC search."""
    return {
        "results": [
            {
                "uri": (
                    "https://art.example.com/artifactory/api/storage/libs-release-local"
                    "/org/acme/lib/1.0/lib-1.0-sources.jar"
                )
            }
        ]
    }


@pytest.fixture
def mock_file_list_response() -> dict:
    """Mock response for a deep file listing."""
    return {
        "uri": "https://art.example.com/artifactory/api/storage/libs-release-local/org",
        "created": "2019-03-26T09:22:09.511Z",
        "files": [
            {
                "uri": "/acme/lib/1.0/lib-1.0.jar",
                "size": 1024,
                "lastModified": "2019-03-26T09:22:09.561Z",
                "folder": False,
                "sha1": "962cd4f5e5d5e2b1f5e3a7a8d7c6e5b4a3c2d1e0",
            },
            {
                "uri": "/acme/lib/1.0",
                "size": -1,
                "lastModified": "2019-03-26T09:22:09.530Z",
                "folder": True,
            },
        ],
    }


@pytest.fixture
def mock_storage_summary_response() -> dict:
    """Mock response for the storage summary."""
    return {
        "binariesSummary": {
            "binariesCount": "125,726",
            "binariesSize": "3.48 GB",
            "artifactsSize": "59.77 GB",
            "optimization": "5.82%",
            "itemsCount": "2,176,580",
            "artifactsCount": "1,083,588",
        },
        "fileStoreSummary": {
            "storageType": "filesystem",
            "storageDirectory": "/var/opt/jfrog/artifactory/data/filestore",
            "totalSpace": "204.28 GB",
            "usedSpace": "32.22 GB (15.77%)",
            "freeSpace": "172.06 GB (84.23%)",
        },
        "repositoriesSummaryList": [
            {
                "repoKey": "libs-release-local",
                "repoType": "LOCAL",
                "foldersCount": 12,
                "filesCount": 34,
                "usedSpace": "1.20 MB",
                "itemsCount": 46,
                "packageType": "Maven",
                "percentage": "0.01%",
            },
            {
                "repoKey": "TOTAL",
                "repoType": "NA",
                "foldersCount": 12,
                "filesCount": 34,
                "usedSpace": "1.20 MB",
                "itemsCount": 46,
            },
        ],
    }


@pytest.fixture
def mock_configuration_xml() -> str:
    """Mock global configuration document."""
    return """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<config xmlns="http://artifactory.jfrog.org/xsd/3.1.0">
    <offlineMode>false</offlineMode>
    <serverName>art-1</serverName>
    <urlBase>https://art.example.com/artifactory</urlBase>
    <fileUploadMaxSizeMb>100</fileUploadMaxSizeMb>
    <dateFormat>dd-MM-yy HH:mm:ss z</dateFormat>
    <localRepositories>
        <localRepository>
            <key>libs-release-local</key>
            <type>maven</type>
            <description>Local releases</description>
        </localRepository>
    </localRepositories>
    <virtualRepositories>
        <virtualRepository>
            <key>libs-release</key>
            <type>maven</type>
            <repositories>
                <repositoryRef>libs-release-local</repositoryRef>
            </repositories>
        </virtualRepository>
    </virtualRepositories>
</config>
"""


# =============================================================================
# Xray Mock Responses
# =============================================================================


@pytest.fixture
def mock_scan_build_response() -> dict:
    """Mock response for a build scan."""
    return {
        "summary": {
            "fail_build": "false",
            "message": "Build build-1 number 7 was scanned by Xray and 1 Alerts were generated",
            "more_details_url": "https://xray.example.com/web/#/component/details/build~2F/7",
            "total_alerts": "1",
        },
        "alerts": [
            {
                "created": "2018-03-08T12:34:07.123Z",
                "top_severity": "Major",
                "watch_name": "all-builds",
                "issues": [
                    {
                        "created": "2018-03-08T12:34:07.123Z",
                        "cve": "CVE-2018-0001",
                        "severity": "Major",
                        "type": "security",
                        "provider": "JFrog",
                        "summary": "Remote code execution",
                        "impacted_artifacts": [
                            {
                                "name": "build-1",
                                "display_name": "build-1:7",
                                "path": "artifactory-id/build-1/7/",
                                "pkg_type": "Build",
                                "depth": "0",
                                "infected_files": [
                                    {
                                        "name": "lib-1.0.jar",
                                        "component_id": "org.acme:lib:1.0",
                                        "pkg_type": "Maven",
                                        "depth": "1",
                                    }
                                ],
                            }
                        ],
                    }
                ],
            }
        ],
        "licenses": [
            {
                "name": "Apache-2.0",
                "full_name": "The Apache Software License, Version 2.0",
                "components": ["gav://org.acme:lib:1.0"],
                "more_info_url": ["http://www.apache.org/licenses/LICENSE-2.0"],
            }
        ],
    }


@pytest.fixture
def mock_summary_response() -> dict:
    """Mock response for an artifact or build summary."""
    return {
        "artifacts": [
            {
                "general": {
                    "component_id": "build-1:7",
                    "name": "build-1",
                    "path": "artifactory-id/build-1/7/",
                    "pkg_type": "Build",
                    "sha256": "0c3e5f2a",
                },
                "issues": [
                    {
                        "summary": "Remote code execution",
                        "description": "A flaw allows remote attackers to run code.",
                        "issue_type": "security",
                        "severity": "Major",
                        "provider": "JFrog",
                        "created": "2018-03-08T12:34:07.123Z",
                        "impact_path": ["default/build-1/7/lib-1.0.jar"],
                    }
                ],
                "licenses": [],
            }
        ],
        "errors": [{"error": "Artifact not found", "identifier": "missing:1"}],
    }


@pytest.fixture
def mock_build_response() -> dict:
    """Mock response for build info."""
    return {
        "uri": "https://art.example.com/artifactory/api/build/app/42",
        "buildInfo": {
            "version": "1.0.1",
            "name": "app",
            "number": "42",
            "agent": {"name": "Jenkins", "version": "2.401"},
            "buildAgent": {"name": "Maven", "version": "3.9.4"},
            "started": "2024-01-15T10:30:00.000+0000",
            "durationMillis": 94000,
            "artifactoryPrincipal": "ci",
            "modules": [
                {
                    "id": "org.acme:app:1.0.0",
                    "properties": {"java.version": "17"},
                    "artifacts": [
                        {
                            "name": "app-1.0.0.jar",
                            "sha1": "2bc3c52e6a8b1e0e9a43d7df8a3e0c1f2d9b4c7e",
                            "md5": "7e2f3c8b0a1d4e5f6a7b8c9d0e1f2a3b",
                        }
                    ],
                }
            ],
        },
    }


@pytest.fixture
def mock_permission_target_response() -> dict:
    """Mock response for a v1 permission target."""
    return {
        "name": "release-readers",
        "includesPattern": "**",
        "excludesPattern": "",
        "repositories": ["libs-release-local"],
        "principals": {
            "users": {"alice": ["r", "w"]},
            "groups": {"readers": ["r"]},
        },
    }
