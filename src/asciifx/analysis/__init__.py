"""
Canvas analysis - unique colors and glyphs with frequencies
"""

from .canvas_analysis import CanvasAnalysis, analyze_canvas, canvas_hash

__all__ = ['CanvasAnalysis', 'analyze_canvas', 'canvas_hash']
