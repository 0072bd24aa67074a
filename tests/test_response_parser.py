"""Tests for agent output extraction and work order parsing."""

import pytest

from repair_planner.application.response_parser import extract_json, parse_work_order
from repair_planner.exceptions import ErrorKind, InvalidWorkOrderError


class TestExtractJson:
    def test_bare_object(self):
        assert extract_json('{"a":1}') == '{"a":1}'

    def test_bare_object_with_surrounding_whitespace(self):
        assert extract_json('\n  {"a":1}  \n') == '{"a":1}'

    def test_fenced_block(self):
        assert extract_json('```json\n{"a":1}\n```') == '{"a":1}'

    def test_fenced_block_without_language_tag(self):
        assert extract_json('```\n{"a":1}\n```') == '{"a":1}'

    def test_fence_without_closing_fence(self):
        assert extract_json('```json\n{"a":1}') == '{"a":1}'

    def test_embedded_object_in_noisy_text(self):
        assert extract_json('here: {"a":1} thanks') == '{"a":1}'

    def test_nested_braces_inside_string_values(self):
        text = 'Plan: {"title": "Fix {heater}", "tasks": [{"sequence": 1}]} done'

        assert extract_json(text) == '{"title": "Fix {heater}", "tasks": [{"sequence": 1}]}'

    def test_multiple_objects_span_first_open_to_last_close(self):
        text = 'first {"a":1} then {"b":2} end'

        assert extract_json(text) == '{"a":1} then {"b":2}'

    @pytest.mark.parametrize("text", ["", "   \n\t", "no json here", "} backwards {"])
    def test_returns_empty_when_no_object(self, text):
        assert extract_json(text) == ""

    def test_none_is_treated_as_blank(self):
        assert extract_json(None) == ""


class TestParseWorkOrder:
    def test_camel_case_keys(self):
        work_order = parse_work_order(
            '{"workOrderNumber": "WO-1", "machineId": "TCP-01", "type": "emergency",'
            ' "priority": "critical", "assignedTo": "T2", "estimatedDuration": 90,'
            ' "partsUsed": [{"partId": "part-001", "partNumber": "TCP-HTR-4KW", "quantity": 1}],'
            ' "tasks": [{"sequence": 1, "title": "Isolate press",'
            ' "estimatedDurationMinutes": 15, "requiredSkills": ["electrical_systems"]}]}'
        )

        assert work_order.work_order_number == "WO-1"
        assert work_order.machine_id == "TCP-01"
        assert work_order.type == "emergency"
        assert work_order.priority == "critical"
        assert work_order.assigned_to == "T2"
        assert work_order.estimated_duration == 90
        assert work_order.parts_used[0].part_number == "TCP-HTR-4KW"
        assert work_order.tasks[0].estimated_duration_minutes == 15
        assert work_order.tasks[0].required_skills == ["electrical_systems"]

    def test_keys_match_case_insensitively(self):
        work_order = parse_work_order('{"MachineID": "TCP-01", "ASSIGNEDTO": "T1", "Title": "Fix"}')

        assert work_order.machine_id == "TCP-01"
        assert work_order.assigned_to == "T1"
        assert work_order.title == "Fix"

    def test_snake_case_keys(self):
        work_order = parse_work_order('{"machine_id": "TCP-01", "estimated_duration": 30}')

        assert work_order.machine_id == "TCP-01"
        assert work_order.estimated_duration == 30

    def test_numeric_strings_are_coerced(self):
        work_order = parse_work_order(
            '{"estimatedDuration": "90", "tasks": [{"sequence": "2", "estimatedDurationMinutes": "45"}]}'
        )

        assert work_order.estimated_duration == 90
        assert work_order.tasks[0].sequence == 2
        assert work_order.tasks[0].estimated_duration_minutes == 45

    def test_choice_values_are_normalized(self):
        work_order = parse_work_order('{"type": " Corrective ", "priority": "HIGH"}')

        assert work_order.type == "corrective"
        assert work_order.priority == "high"

    def test_blank_choice_values_become_unset(self):
        work_order = parse_work_order('{"type": "", "priority": "  "}')

        assert work_order.type is None
        assert work_order.priority is None

    def test_absent_fields_stay_unset(self):
        work_order = parse_work_order('{"title": "Fix temp"}')

        assert work_order.assigned_to is None
        assert work_order.parts_used is None
        assert work_order.tasks is None
        assert work_order.estimated_duration == 0

    def test_explicit_null_assignment_is_kept_distinct_from_empty(self):
        assert parse_work_order('{"assignedTo": ""}').assigned_to == ""
        assert parse_work_order('{"assignedTo": null}').assigned_to is None

    def test_null_skill_lists_become_empty(self):
        work_order = parse_work_order('{"tasks": [{"sequence": 1, "requiredSkills": null}]}')

        assert work_order.tasks[0].sequence == 1
        assert work_order.tasks[0].required_skills == []

    def test_unknown_fields_are_ignored(self):
        work_order = parse_work_order('{"title": "Fix", "confidenceScore": 0.4}')

        assert work_order.title == "Fix"

    @pytest.mark.parametrize(
        "payload",
        [
            '{"title": "Fix",}',
            '{"title": "Fix"} then {"more": 1}',
            "[1, 2, 3]",
            '{"estimatedDuration": "90 minutes"}',
            '{"priority": "urgent"}',
        ],
    )
    def test_invalid_payload_raises(self, payload):
        with pytest.raises(InvalidWorkOrderError) as exc_info:
            parse_work_order(payload)

        assert exc_info.value.kind == ErrorKind.MALFORMED_AGENT_OUTPUT
        assert exc_info.value.payload == payload
