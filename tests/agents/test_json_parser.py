"""
JSON Extraction Tests
=====================

Tests for pulling JSON objects out of free-form LLM replies.

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""

from agents.core.json_parser import extract_json_from_response, strip_code_fences


class TestExtractJsonFromResponse:
    """Tolerant extraction of the first JSON object."""

    def test_plain_object(self):
        assert extract_json_from_response('{"a": 1}') == {"a": 1}

    def test_fenced_object(self):
        content = '```json\n{"nodes": []}\n```'
        assert extract_json_from_response(content) == {"nodes": []}

    def test_prose_around_object(self):
        content = 'Sure! Here it is: {"title": "T", "nodes": []} Hope this helps.'
        assert extract_json_from_response(content) == {"title": "T", "nodes": []}

    def test_braces_inside_strings_are_ignored(self):
        content = '{"text": "set {x}"} trailing }'
        assert extract_json_from_response(content) == {"text": "set {x}"}

    def test_trailing_commas_are_removed(self):
        content = '{"nodes": [{"id": "1",},],}'
        assert extract_json_from_response(content) == {"nodes": [{"id": "1"}]}

    def test_smart_quotes_are_normalized(self):
        content = '{“title”: “Motion”}'
        assert extract_json_from_response(content) == {"title": "Motion"}

    def test_no_object_returns_none(self):
        assert extract_json_from_response("I cannot help with that.") is None

    def test_empty_content_returns_none(self):
        assert extract_json_from_response("") is None
        assert extract_json_from_response(None) is None

    def test_truncated_object_returns_none(self):
        assert extract_json_from_response('{"nodes": [{"id": "1"') is None


class TestStripCodeFences:

    def test_removes_language_tag(self):
        assert strip_code_fences('```json\n{}\n```') == '{}'

    def test_leaves_plain_text(self):
        assert strip_code_fences('  {}  ') == '{}'
