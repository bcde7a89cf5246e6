"""
Snapshot Builder

Pre-flight checks for a snapshot image build.

Main modules:
- steps: Pipeline steps (pre-validation of the snapshot name)
- client: Async client for the provider image API
- config: Configuration loading and validation
- datacls: Image records and the build state
- ui: Message sinks for build output
- utils: Logging setup

Quick start example:
```python
import asyncio
from snapbuilder import BuildState, Config, ImageClient, LoggingUi, StepPreValidate

config = Config("snapbuilder.yml")
async with ImageClient(config.client) as client:
    state = BuildState(client=client, ui=LoggingUi())
    action = await StepPreValidate(config.prevalidate).run(state)
```
"""

from .constants import VERSION, ImageType, StepAction
from .config import Config, ConfigModel, ClientConfig, PreValidateConfig
from .datacls import BuildState, Image
from .client import ImageClient
from .ui import LoggingUi, MemoryUi
from .steps import StepPreValidate
from .utils import setup_logger
from .exceptions import (
    SnapBuilderError,
    ConfigurationError,
    ConfigValidationError,
    ProviderError,
    StepError,
    SnapshotNameCollisionError,
)

__version__ = VERSION

__all__ = [
    '__version__',
    'ImageType',
    'StepAction',
    'Config',
    'ConfigModel',
    'ClientConfig',
    'PreValidateConfig',
    'BuildState',
    'Image',
    'ImageClient',
    'LoggingUi',
    'MemoryUi',
    'StepPreValidate',
    'setup_logger',
    'SnapBuilderError',
    'ConfigurationError',
    'ConfigValidationError',
    'ProviderError',
    'StepError',
    'SnapshotNameCollisionError',
]
