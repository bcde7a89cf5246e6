import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator, ConfigDict

from . import constants
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
)


logger = logging.getLogger(__name__)


class ClientConfig(BaseModel):
    """
        Class Config-Validation Model describe `client`
    """
    endpoint: str = constants.DEFAULT_ENDPOINT
    token: Optional[str] = Field(default=None, repr=False)
    timeout: float = Field(default=constants.DEFAULT_TIMEOUT, gt=0)
    page_size: int = Field(default=constants.MAX_PAGE_SIZE, ge=1, le=constants.MAX_PAGE_SIZE)
    model_config = ConfigDict(frozen=True)

    @field_validator('endpoint')
    @classmethod
    def check_endpoint(cls, value: str) -> str:
        """Endpoint must be an http(s) URL; trailing slashes are dropped"""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"endpoint must be an http(s) URL, got '{value}'")
        return value.rstrip("/")

    @model_validator(mode='before')
    @classmethod
    def token_from_env(cls, data: Any) -> Any:
        """Fall back to HCLOUD_TOKEN when no token is configured"""
        if isinstance(data, dict) and not data.get('token'):
            env_token = os.environ.get(constants.TOKEN_ENV)
            if env_token:
                data = {**data, 'token': env_token}
        return data


class PreValidateConfig(BaseModel):
    """
        Class Config-Validation Model describe `prevalidate`
    """
    snapshot_name: str
    force: bool = False
    model_config = ConfigDict(frozen=True)

    @field_validator('snapshot_name')
    @classmethod
    def check_snapshot_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("snapshot_name must not be empty")
        return value


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of config
    """
    client: ClientConfig = Field(default_factory=ClientConfig)
    prevalidate: PreValidateConfig
    model_config = ConfigDict(extra="allow")


class Config:
    """
    Loads and validates the config.yml file using Pydantic models.
    It is the sole gatekeeper for configuration.
    """
    def __init__(self, config_path: Union[str, Path]):
        self.path = Path(config_path)
        logger.info(f"Loading configuration from '{self.path}'...")
        raw_data = self._load_raw_config()

        logger.debug("Validating configuration structure with Pydantic...")
        try:
            self.model = ConfigModel.model_validate(raw_data)
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")
        logger.info("Configuration validation passed.")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = self.path.read_text(encoding='utf-8')
            config_data = yaml.safe_load(content)
        except FileNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    @property
    def client(self) -> ClientConfig:
        return self.model.client

    @property
    def prevalidate(self) -> PreValidateConfig:
        return self.model.prevalidate
