# This file makes the utils directory a Python package
from .basic_utils import BasicUtils, load_config, configure_logging

__all__ = ['BasicUtils', 'load_config', 'configure_logging']
