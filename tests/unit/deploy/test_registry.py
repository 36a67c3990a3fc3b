"""Unit tests for the deployer type registry."""

import pytest
from unittest.mock import Mock

from ui5_deployer.deploy.base import DeployerType
from ui5_deployer.deploy.exceptions import DeployError, UnknownDeployerTypeError
from ui5_deployer.deploy.filesystem_deployer import FileSystemDeployer
from ui5_deployer.deploy.registry import TypeRepository, default_repository, get_type, list_types


class TestTypeRepository:
    """Test registration and lookup."""

    def test_get_type_calls_factory_per_lookup(self):
        repository = TypeRepository()
        factory = Mock(side_effect=lambda: object())
        repository.register_type("abap", factory)

        first = repository.get_type("abap")
        second = repository.get_type("abap")

        assert factory.call_count == 2
        assert first is not second

    def test_unknown_type_raises_typed_error(self):
        repository = TypeRepository()
        repository.register_type("abap", Mock())

        with pytest.raises(UnknownDeployerTypeError) as exc_info:
            repository.get_type("nonexistent")

        err = exc_info.value
        assert isinstance(err, DeployError)
        assert err.type_name == "nonexistent"
        assert err.known_types == ("abap",)
        assert "nonexistent" in str(err)
        assert "abap" in str(err)

    def test_none_type_raises_typed_error(self):
        with pytest.raises(UnknownDeployerTypeError):
            TypeRepository().get_type(None)

    def test_duplicate_registration_rejected(self):
        repository = TypeRepository()
        repository.register_type("abap", Mock())

        with pytest.raises(ValueError, match="already registered"):
            repository.register_type("abap", Mock())

    def test_duplicate_registration_with_replace(self):
        repository = TypeRepository()
        repository.register_type("abap", Mock(return_value="old"))
        repository.register_type("abap", Mock(return_value="new"), replace=True)

        assert repository.get_type("abap") == "new"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            TypeRepository().register_type("", Mock())

    def test_list_types_sorted(self):
        repository = TypeRepository()
        for name in ("sapCp", "abap", "filesystem"):
            repository.register_type(name, Mock())

        assert repository.list_types() == ["abap", "filesystem", "sapCp"]
        assert "abap" in repository
        assert "cf" not in repository


class TestDefaultRepository:
    """Test the repository populated at import time."""

    def test_filesystem_type_is_builtin(self):
        assert "filesystem" in list_types()
        assert "filesystem" in default_repository

    def test_builtin_satisfies_protocol(self):
        deployer_type = get_type("filesystem")

        assert isinstance(deployer_type, FileSystemDeployer)
        assert isinstance(deployer_type, DeployerType)
