"""
JSON parsing utilities for LLM responses.

This module provides functions to extract JSON objects from free-form LLM
responses, handling common formatting issues (code fences, smart quotes,
trailing commas, prose around the object).

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Dict, Optional, Any
import json
import logging
import re

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r'```[a-zA-Z0-9_-]*[ \t]*\n?')


def extract_json_from_response(response_content: Any) -> Optional[Dict[str, Any]]:
    """
    Extract the first JSON object from LLM response content.

    Handles legitimate formatting issues:
    - Markdown code blocks (```json ... ```)
    - Prose before or after the object
    - Unicode quote characters (smart quotes)
    - Trailing commas (common JSON extension)

    Args:
        response_content: Raw response content from LLM

    Returns:
        dict or None: Decoded object, or None if no decodable object was found
    """
    if not response_content:
        logger.warning("Empty response content provided")
        return None

    content = strip_code_fences(str(response_content))
    first_brace = content.find('{')
    if first_brace == -1:
        logger.warning(
            "Failed to extract JSON: no object found. Content preview: %s",
            _preview(content)
        )
        return None

    candidates = []
    balanced = _extract_balanced_json_object(content, first_brace)
    if balanced:
        candidates.append(balanced)
    # Unbalanced or undecodable: fall back to first '{' .. last '}'
    last_brace = content.rfind('}')
    if last_brace > first_brace:
        greedy = content[first_brace:last_brace + 1]
        if greedy not in candidates:
            candidates.append(greedy)

    for candidate in candidates:
        data = _decode_object(candidate)
        if data is not None:
            return data

    logger.warning("Failed to decode JSON object. Content preview: %s", _preview(content))
    return None


def strip_code_fences(content: str) -> str:
    """Remove markdown code fence markers, keeping the fenced text."""
    return _FENCE_PATTERN.sub('', content).strip()


def _extract_balanced_json_object(content: str, first_brace: int) -> Optional[str]:
    """
    Extract JSON object using balanced bracket matching.

    Braces inside string literals are ignored.

    Args:
        content: Full content string
        first_brace: Position of first opening brace

    Returns:
        Extracted JSON object string or None when the object never closes
    """
    brace_count = 0
    in_string = False
    escape_next = False

    for i in range(first_brace, len(content)):
        char = content[i]

        if escape_next:
            escape_next = False
            continue

        if char == '\\':
            escape_next = in_string
            continue

        if char == '"':
            in_string = not in_string
            continue

        if not in_string:
            if char == '{':
                brace_count += 1
            elif char == '}':
                brace_count -= 1
                if brace_count == 0:
                    return content[first_brace:i + 1]

    return None


def _decode_object(text: str) -> Optional[Dict[str, Any]]:
    """Decode text as a JSON object, retrying once after cleanup."""
    for attempt in (text, _clean_json_string(text)):
        try:
            data = json.loads(attempt)
        except json.JSONDecodeError as e:
            logger.debug("JSON decode failed: %s (position: %s)", e.msg, e.pos)
            continue
        except ValueError as e:
            # Integer literals past the int conversion digit limit
            logger.debug("JSON decode failed: %s", e)
            continue
        if isinstance(data, dict):
            return data
    return None


def _clean_json_string(text: str) -> str:
    """
    Clean JSON string by fixing legitimate formatting issues.

    Only fixes issues that don't change JSON semantics:
    - Unicode quote normalization
    - Control character removal
    - Trailing comma removal

    Does NOT attempt to fix structural problems (truncated JSON, missing brackets, etc.)
    """
    text = text.strip().strip('`')

    # Replace smart quotes with ASCII equivalents
    text = text.replace('\u201c', '"').replace('\u201d', '"')
    text = text.replace('\u2018', "'").replace('\u2019', "'")

    # Remove zero-width and control characters
    text = re.sub(r'[\u200B-\u200D\uFEFF]', '', text)
    text = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F]', '', text)

    # Remove trailing commas before ] or }
    text = re.sub(r',\s*(\]|\})', r'\1', text)

    return text.strip()


def _preview(content: str, limit: int = 500) -> str:
    return content[:limit] + "..." if len(content) > limit else content
