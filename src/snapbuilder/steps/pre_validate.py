import logging
from typing import Optional

from ..config import PreValidateConfig
from ..constants import StepAction
from ..datacls.state import BuildState
from ..exceptions import PreValidateError, ProviderError, SnapshotNameCollisionError

logger = logging.getLogger(__name__)


class StepPreValidate:
    """
    Halts the build before any server exists when the snapshot name is taken.

    Snapshots have no name on the provider side, only a description, and the
    image API cannot filter on it: all images are listed and matched here.
    """

    def __init__(
        self,
        config: Optional[PreValidateConfig] = None,
        *,
        snapshot_name: Optional[str] = None,
        force: bool = False,
    ):
        if config is None:
            config = PreValidateConfig(snapshot_name=snapshot_name, force=force)
        self.config = config

    @property
    def snapshot_name(self) -> str:
        return self.config.snapshot_name

    @property
    def force(self) -> bool:
        return self.config.force

    async def run(self, state: BuildState) -> StepAction:
        ui = state.ui
        ui.say(f"Prevalidating snapshot name: {self.snapshot_name}")

        try:
            images = await state.client.list_images()
        except ProviderError as e:
            return self._halt(state, PreValidateError(f"Failed to list images: {e}"))

        if self.force:
            logger.debug(f"[PreValidate] Force flag set, not checking {len(images)} images for '{self.snapshot_name}'")
            return StepAction.CONTINUE

        for image in images:
            if not image.is_snapshot:
                continue
            if image.description == self.snapshot_name:
                return self._halt(state, SnapshotNameCollisionError(self.snapshot_name, image.id))

        logger.debug(f"[PreValidate] Snapshot name '{self.snapshot_name}' is free")
        return StepAction.CONTINUE

    def cleanup(self, state: BuildState) -> None:
        pass

    @staticmethod
    def _halt(state: BuildState, err: Exception) -> StepAction:
        state.error = err
        state.ui.error(str(err))
        logger.error(f"[PreValidate] {err}")
        return StepAction.HALT
