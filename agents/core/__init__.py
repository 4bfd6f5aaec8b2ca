"""
Core agent functionality

This module contains the base agent class and the JSON extraction
helpers shared by diagram agents.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from .base_agent import BaseAgent
from .json_parser import extract_json_from_response

__all__ = ['BaseAgent', 'extract_json_from_response']
