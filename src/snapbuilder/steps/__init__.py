"""
Snapshot Builder Steps

- StepPreValidate: refuses to start a build whose snapshot name is taken

Usage:
    from snapbuilder.steps import StepPreValidate

    step = StepPreValidate(config.prevalidate)
    action = await step.run(state)
"""

from .pre_validate import StepPreValidate

__all__ = [
    'StepPreValidate',
]
