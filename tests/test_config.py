import pytest
import yaml
from pathlib import Path
from pydantic import ValidationError
import copy

from snapbuilder.config import Config, ClientConfig, PreValidateConfig
from snapbuilder.constants import DEFAULT_ENDPOINT, TOKEN_ENV
from snapbuilder.exceptions import (
    ConfigFileMissingError,
    ConfigParsingError,
    ConfigValidationError,
)

BASE_CONFIG = {
    'client': {
        'endpoint': 'https://api.example.test/v1/',
        'token': 'secret',
        'timeout': 10,
        'page_size': 25,
    },
    'prevalidate': {
        'snapshot_name': 'my-snapshot',
        'force': True,
    },
}


@pytest.fixture
def create_config_file(tmp_path: Path):
    """A pytest fixture to create a temporary config.yml file."""
    def _create_file(config_data: dict) -> Path:
        config_file = tmp_path / "config.yml"
        with open(config_file, 'w') as f:
            yaml.dump(config_data, f)
        return config_file
    return _create_file


class TestConfigLoading:
    """Tests for basic loading and validation success/failure."""

    def test_load_valid_config_successfully(self, create_config_file):
        config = Config(create_config_file(BASE_CONFIG))

        assert config.client.endpoint == 'https://api.example.test/v1'
        assert config.client.token == 'secret'
        assert config.client.page_size == 25
        assert config.prevalidate.snapshot_name == 'my-snapshot'
        assert config.prevalidate.force is True

    def test_client_section_is_optional(self, create_config_file, monkeypatch):
        monkeypatch.delenv(TOKEN_ENV, raising=False)
        data = {'prevalidate': {'snapshot_name': 'my-snapshot'}}
        config = Config(str(create_config_file(data)))

        assert config.client.endpoint == DEFAULT_ENDPOINT
        assert config.client.token is None
        assert config.prevalidate.force is False

    def test_missing_prevalidate_raises_error(self, create_config_file):
        invalid_config = copy.deepcopy(BASE_CONFIG)
        del invalid_config['prevalidate']

        with pytest.raises(ConfigValidationError, match="prevalidate\n  Field required"):
            Config(create_config_file(invalid_config))

    def test_file_not_found_raises_error(self, tmp_path):
        with pytest.raises(ConfigFileMissingError):
            Config(tmp_path / "non_existent_file.yml")

    def test_invalid_yaml_raises_error(self, tmp_path):
        config_file = tmp_path / "invalid.yml"
        config_file.write_text("key: value: another")

        with pytest.raises(ConfigParsingError, match="Error parsing YAML file"):
            Config(config_file)

    def test_non_mapping_document_raises_error(self, tmp_path):
        config_file = tmp_path / "list.yml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigParsingError, match="containing a dictionary"):
            Config(config_file)


class TestConfigValidationLogic:

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_snapshot_name_rejected(self, name):
        with pytest.raises(ValidationError, match="snapshot_name must not be empty"):
            PreValidateConfig(snapshot_name=name)

    @pytest.mark.parametrize("page_size", [0, 51])
    def test_page_size_bounds(self, page_size):
        with pytest.raises(ValidationError):
            ClientConfig(page_size=page_size)

    def test_endpoint_must_be_http(self):
        with pytest.raises(ValidationError, match="http\\(s\\) URL"):
            ClientConfig(endpoint="ftp://api.example.test")

    def test_token_falls_back_to_env(self, monkeypatch):
        monkeypatch.setenv(TOKEN_ENV, "from-env")
        assert ClientConfig().token == "from-env"
        assert ClientConfig(token="explicit").token == "explicit"

    def test_token_not_in_repr(self):
        assert "secret" not in repr(ClientConfig(token="secret"))

    def test_prevalidate_config_is_frozen(self):
        config = PreValidateConfig(snapshot_name="snap")
        with pytest.raises(ValidationError):
            config.force = True
