"""End-to-end formatting scenarios."""

import json
import pytest
from json_power_tools import JSONFormatter, FormatterConfig


class TestScenarios:
    """Realistic documents run through the formatter."""

    def setup_method(self):
        """Set up test fixtures."""
        self.formatter = JSONFormatter(FormatterConfig())

    def test_minified_document(self):
        minified = '{"users":[{"id":1,"name":"Ana"},{"id":2,"name":"Bo"}],"total":2}'

        formatted = self.formatter.format_text(minified)

        assert formatted == (
            '{\n'
            '  "users": [\n'
            '    {\n'
            '      "id": 1,\n'
            '      "name": "Ana"\n'
            '    },\n'
            '    {\n'
            '      "id": 2,\n'
            '      "name": "Bo"\n'
            '    }\n'
            '  ],\n'
            '  "total": 2\n'
            '}'
        )

    def test_already_formatted_document_is_stable(self):
        formatted = '{\n  "a": {\n    "b": [\n      1,\n      2\n    ]\n  }\n}'

        assert self.formatter.format_text(formatted) == formatted

    def test_mixed_stringified_and_regular_properties(self):
        document = {
            "config": json.dumps({"timeout": 30, "retries": 3}),
            "enabled": True,
            "count": 5,
            "label": "{not valid json}",
            "history": json.dumps([{"at": "2025-01-01"}]),
            "nothing": None,
        }

        parsed = json.loads(self.formatter.format_text(json.dumps(document)))

        assert parsed == {
            "config": {"timeout": 30, "retries": 3},
            "enabled": True,
            "count": 5,
            "label": "{not valid json}",
            "history": [{"at": "2025-01-01"}],
            "nothing": None,
        }

    def test_five_level_sequential_chain(self):
        """Test that each level's stringified payload is expanded."""
        level5 = {
            "userId": 12345,
            "permissions": ["read", "write", "admin"],
            "isActive": True,
            "lastLogin": "2025-09-11T22:00:00Z",
        }
        level4 = {"userProfile": json.dumps(level5), "sessionId": "sess_abc789"}
        level3 = {"authentication": json.dumps(level4), "requestId": "req_xyz456"}
        level2 = {"apiCall": json.dumps(level3), "version": "v2.1.3"}
        level1 = {
            "logEntry": json.dumps(level2),
            "logLevel": "INFO",
            "additionalData": {"server": "prod-gateway-01"},
        }

        parsed = json.loads(self.formatter.format_text(json.dumps(level1)))

        profile = parsed["logEntry"]["apiCall"]["authentication"]["userProfile"]
        assert profile == level5
        assert parsed["logEntry"]["version"] == "v2.1.3"
        assert parsed["additionalData"] == {"server": "prod-gateway-01"}
        assert list(parsed) == ["logEntry", "logLevel", "additionalData"]

    def test_embedded_document_with_further_nesting(self):
        inner = {"cache": json.dumps({"enabled": True, "ttl": 3600}), "data": "Level data"}
        document = {"settings": {"apiConfig": json.dumps(inner)}}

        parsed = json.loads(self.formatter.format_text(json.dumps(document)))

        assert parsed["settings"]["apiConfig"]["cache"] == {"enabled": True, "ttl": 3600}
        assert parsed["settings"]["apiConfig"]["data"] == "Level data"

    @pytest.mark.parametrize("document", [
        {"a": 1, "b": [True, False, None], "c": {"d": "text"}},
        [1, "two", 3.5, {"four": []}],
        {"numbers": ["1", "2"], "flags": ["true", "null"]},
        {},
        [],
    ])
    def test_idempotent_on_clean_documents(self, document):
        once = self.formatter.format_text(json.dumps(document))
        twice = self.formatter.format_text(once)

        assert once == twice
        assert json.loads(once) == document

    def test_very_long_string_value(self):
        document = {"blob": "x" * 200000}

        parsed = json.loads(self.formatter.format_text(json.dumps(document)))

        assert parsed == document

    def test_large_array(self):
        document = {"rows": [{"id": index, "payload": json.dumps({"v": index})}
                             for index in range(2000)]}

        parsed = json.loads(self.formatter.format_text(json.dumps(document)))

        assert parsed["rows"][1999] == {"id": 1999, "payload": {"v": 1999}}
