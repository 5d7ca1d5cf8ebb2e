"""配置模块"""
from .config import PARSER_CONFIG, SWEEP_CONFIG, DISPLAY_CONFIG, validate_config

__all__ = ['PARSER_CONFIG', 'SWEEP_CONFIG', 'DISPLAY_CONFIG', 'validate_config']
