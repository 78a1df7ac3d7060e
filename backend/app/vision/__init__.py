"""
Vision module for geometry problem analysis.

Provides image recognition and GeoGebra command generation stages, and the
pipeline that chains them.
"""

from .recognizer import ProblemRecognizer
from .command_generator import CommandGenerator, extract_commands, is_command_line
from .pipeline import AnalysisPipeline, AnalysisResult, get_analysis_pipeline

__all__ = [
    'ProblemRecognizer',
    'CommandGenerator',
    'extract_commands',
    'is_command_line',
    'AnalysisPipeline',
    'AnalysisResult',
    'get_analysis_pipeline',
]
