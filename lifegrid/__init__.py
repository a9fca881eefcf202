"""lifegrid — adaptive grid composition of life-domain blocks.

Usage:
    from lifegrid.pipeline.config import canvas_for_preset
    from lifegrid.pipeline.placer import compose_layout
"""

__version__ = "0.1.0"
