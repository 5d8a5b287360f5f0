"""
Engine package - single-frame dispatch and timeline batches
"""

from .effect_engine import EFFECTS, apply_effect, create_effect
from .batch_runner import BatchRunner, apply_effect_to_frames, apply_gradient_to_frames

__all__ = [
    'EFFECTS',
    'apply_effect',
    'create_effect',
    'BatchRunner',
    'apply_effect_to_frames',
    'apply_gradient_to_frames',
]
