"""
Function header recognition and parameter list rewriting.
"""

from dart2csharp.core.headers.matcher import HeaderTranspiler, transform_header_block
from dart2csharp.core.headers.params import ParameterListSplitter, split_sections, transform_parameter_list

__all__ = [
  "HeaderTranspiler",
  "ParameterListSplitter",
  "split_sections",
  "transform_header_block",
  "transform_parameter_list",
]
