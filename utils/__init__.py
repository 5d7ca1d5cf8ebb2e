"""工具模块"""
from .formatting import format_value, to_pair, to_frame

__all__ = ['format_value', 'to_pair', 'to_frame']
