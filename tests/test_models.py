"""Tests for payload models: wire names, repository dispatch and configuration parsing."""

import pytest
from pydantic import TypeAdapter

from arty.artifactory import (
    ConfigurationPatch,
    File,
    GenericRepository,
    GlobalConfig,
    ImagePromotion,
    LocalRepository,
    RemoteRepository,
    RepositoryConfig,
    User,
    VirtualRepository,
)
from arty.artifactory.replications import parse_replications
from arty.xray import ScanArtifactRequest, ScanChecksum

REPOSITORY = TypeAdapter(RepositoryConfig)

CONFIG_XML = b"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<config xmlns="http://artifactory.jfrog.org/xsd/3.1.0">
    <offlineMode>false</offlineMode>
    <fileUploadMaxSizeMb>100</fileUploadMaxSizeMb>
    <dateFormat>dd-MM-yy HH:mm:ss z</dateFormat>
    <urlBase>https://art.example.com/artifactory</urlBase>
    <serverName>art-01</serverName>
    <localRepositories>
        <localRepository>
            <key>libs-release-local</key>
            <type>maven</type>
            <description>Local releases</description>
        </localRepository>
        <localRepository>
            <key>docker-local</key>
            <type>docker</type>
        </localRepository>
    </localRepositories>
    <remoteRepositories>
        <remoteRepository>
            <key>jcenter</key>
            <type>maven</type>
            <url>https://jcenter.bintray.com</url>
        </remoteRepository>
    </remoteRepositories>
    <virtualRepositories>
        <virtualRepository>
            <key>libs-release</key>
            <type>maven</type>
            <repositories>
                <repositoryRef>libs-release-local</repositoryRef>
                <repositoryRef>jcenter</repositoryRef>
            </repositories>
        </virtualRepository>
    </virtualRepositories>
</config>
"""


class TestWireNames:
    def test_camel_case_aliases(self):
        user = User(name="jdoe", profile_updatable=True, disable_ui_access=False)
        assert user.model_dump(by_alias=True, exclude_none=True) == {
            "name": "jdoe",
            "profileUpdatable": True,
            "disableUIAccess": False,
        }

    def test_irregular_aliases(self):
        remote = RemoteRepository.model_validate(
            {"key": "pypi", "rclass": "remote", "pyPIRegistryUrl": "https://pypi.org"}
        )
        assert remote.pypi_registry_url == "https://pypi.org"

    def test_copy_flag(self):
        promotion = ImagePromotion(target_repo="docker-prod", copy_=True)
        assert promotion.model_dump(by_alias=True, exclude_none=True) == {
            "targetRepo": "docker-prod",
            "copy": True,
        }

    def test_unknown_fields_are_kept(self):
        file = File.model_validate({"uri": "u", "newServerField": 1})
        assert file.model_dump(by_alias=True, exclude_none=True) == {
            "uri": "u",
            "newServerField": 1,
        }

    def test_timestamps_on_storage_models(self):
        file = File.model_validate({"created": "2020-01-01T10:00:00.000+02:00"})
        assert file.created is not None
        assert file.created.isoformat() == "2020-01-01T10:00:00+02:00"

    def test_xray_names(self):
        request = ScanArtifactRequest(
            component_id="docker://alpine:3.18", checksum=ScanChecksum(sha256="abc")
        )
        assert request.model_dump(by_alias=True, exclude_none=True) == {
            "checksum": {"sha256": "abc"},
            "componentId": "docker://alpine:3.18",
        }


class TestRepositoryDispatch:
    @pytest.mark.parametrize(
        "rclass,expected",
        [
            ("local", LocalRepository),
            ("remote", RemoteRepository),
            ("virtual", VirtualRepository),
        ],
    )
    def test_rclass_selects_model(self, rclass, expected):
        repo = REPOSITORY.validate_json(f'{{"key": "r", "rclass": "{rclass}"}}')
        assert type(repo) is expected

    @pytest.mark.parametrize("body", ['{"key": "r", "rclass": "federated"}', '{"key": "r"}'])
    def test_other_classes_fall_back_to_generic(self, body):
        repo = REPOSITORY.validate_json(body)
        assert type(repo) is GenericRepository
        assert repo.key == "r"

    def test_class_specific_fields(self):
        repo = REPOSITORY.validate_python(
            {"key": "libs", "rclass": "virtual", "repositories": ["a", "b"]}
        )
        assert isinstance(repo, VirtualRepository)
        assert repo.repositories == ["a", "b"]


class TestParseReplications:
    def test_array(self):
        replications = parse_replications(b'[{"url": "a"}, {"url": "b"}]')
        assert [r.url for r in replications] == ["a", "b"]

    def test_single_object(self):
        replications = parse_replications(b'  \n{"url": "a", "enabled": true}')
        assert len(replications) == 1
        assert replications[0].enabled is True

    def test_empty_body(self):
        assert parse_replications(b"") == []

    def test_invalid_json_raises_value_error(self):
        with pytest.raises(ValueError):
            parse_replications(b"[not json")


class TestGlobalConfig:
    def test_parses_document(self):
        config = GlobalConfig.from_xml(CONFIG_XML)

        assert config.server_name == "art-01"
        assert config.url_base == "https://art.example.com/artifactory"
        assert config.offline_mode is False
        assert config.file_upload_max_size_mb == 100
        assert [r.key for r in config.local_repositories] == ["libs-release-local", "docker-local"]
        assert config.local_repositories[0].description == "Local releases"
        assert config.remote_repositories[0].url == "https://jcenter.bintray.com"
        assert config.virtual_repositories[0].repositories == ["libs-release-local", "jcenter"]
        assert "<serverName>art-01</serverName>" in config.raw

    def test_accepts_text(self):
        config = GlobalConfig.from_xml("<config><serverName>s</serverName></config>")
        assert config.server_name == "s"
        assert config.local_repositories == []

    def test_malformed_document_raises_value_error(self):
        with pytest.raises(ValueError, match="invalid configuration document"):
            GlobalConfig.from_xml(b"<config><serverName>")

    def test_patch_uses_descriptor_names(self):
        patch = ConfigurationPatch(
            url_base="https://art.example.com",
            local_repositories={"libs-local": {"type": "maven"}},
        )
        assert patch.model_dump(by_alias=True, exclude_none=True) == {
            "urlBase": "https://art.example.com",
            "localRepositories": {"libs-local": {"type": "maven"}},
        }
