"""Tests for tool card extraction."""

import copy

from chatshape.transcript import (
    extract_tool_cards,
    tool_card_base,
    tool_card_identity,
)


class TestExtractToolCards:
    """Tests for card building from content fragments."""

    def test_single_tool_use(self, assistant_tool_use_message):
        cards = extract_tool_cards(assistant_tool_use_message)

        assert len(cards) == 1
        assert cards[0].kind == "call"
        assert cards[0].name == "search"
        assert cards[0].args == {"q": "x"}
        assert cards[0].identity == "msg-1:0"

    def test_preserves_order_and_does_not_dedupe(self, three_tool_calls_message):
        cards = extract_tool_cards(three_tool_calls_message)

        assert [card.name for card in cards] == ["alpha", "beta", "alpha"]
        assert [card.identity for card in cards] == ["msg-3:0", "msg-3:1", "msg-3:2"]
        assert len({card.identity for card in cards}) == 3

    def test_text_fragments_do_not_count_toward_position(self):
        message = {
            "id": "m",
            "content": [
                {"type": "text", "text": "a"},
                {"type": "tool_call", "name": "f", "args": {}},
                {"type": "text", "text": "b"},
                {"type": "tool_result", "name": "f", "content": "ok"},
            ],
        }
        cards = extract_tool_cards(message)
        assert [(card.kind, card.position) for card in cards] == [
            ("call", 0),
            ("result", 1),
        ]

    def test_call_shaped_fragment_without_type(self):
        cards = extract_tool_cards(
            {"content": [{"name": "lookup", "arguments": '{"id": 3}'}]}
        )
        assert cards[0].kind == "call"
        assert cards[0].args == {"id": 3}

    def test_result_fragment_text(self):
        message = {
            "role": "user",
            "content": [
                {
                    "type": "tool_result",
                    "tool_use_id": "toolu_1",
                    "content": [{"type": "text", "text": "line 1"}, {"type": "text", "text": "line 2"}],
                }
            ],
        }
        cards = extract_tool_cards(message)

        assert len(cards) == 1
        assert cards[0].kind == "result"
        assert cards[0].name == "tool"
        assert cards[0].text == "line 1\nline 2"
        assert cards[0].call_id == "toolu_1"

    def test_mapping_result_payload_is_kept(self):
        payload = {"rows": 3}
        message = {
            "role": "user",
            "content": [{"type": "tool_result", "name": "db", "output": payload}],
        }

        cards = extract_tool_cards(message)

        assert cards[0].name == "db"
        assert cards[0].result == {"rows": 3}
        assert cards[0].result is not payload
        assert cards[0].text == '{"rows": 3}'

    def test_numeric_result_payload_is_kept(self):
        cards = extract_tool_cards({"content": [{"type": "toolResult", "result": 7}]})
        assert cards[0].result == 7
        assert cards[0].text == "7"

    def test_deeply_nested_argument_string_does_not_raise(self):
        message = {"content": [{"type": "tool_call", "name": "f", "arguments": "[" * 100000}]}

        cards = extract_tool_cards(message)

        assert len(cards) == 1
        assert cards[0].args is None

    def test_message_level_result_card(self, tool_result_message):
        cards = extract_tool_cards(tool_result_message)

        assert len(cards) == 1
        assert cards[0].kind == "result"
        assert cards[0].name == "read_file"
        assert cards[0].text == "file contents"
        assert cards[0].identity == "call-42:0"

    def test_message_level_result_not_duplicated(self):
        message = {
            "role": "toolResult",
            "toolCallId": "c",
            "content": [{"type": "toolResult", "name": "x", "text": "r"}],
        }
        assert len(extract_tool_cards(message)) == 1

    def test_plain_messages_have_no_cards(self):
        assert extract_tool_cards({"role": "user", "content": "hi"}) == []
        assert extract_tool_cards({}) == []


class TestToolCardIdentity:
    """Identity derivation priority and stability."""

    def test_tool_call_id_first(self):
        message = {"toolCallId": "tc", "tool_call_id": "snake", "id": "i", "messageId": "m"}
        assert tool_card_base(message) == "tc"
        assert tool_card_base({"tool_call_id": "snake", "id": "i"}) == "snake"

    def test_then_id_then_message_id(self):
        assert tool_card_base({"id": "i", "messageId": "m", "timestamp": 5}) == "i"
        assert tool_card_base({"messageId": "m", "timestamp": 5}) == "m"

    def test_then_timestamp(self):
        assert tool_card_base({"timestamp": 1700000000000}) == "1700000000000"
        assert tool_card_base({"timestamp": 1700000000000.0}) == "1700000000000"
        assert tool_card_base({"timestamp": 1.5}) == "1.5"

    def test_then_placeholder(self):
        assert tool_card_base({}) == "tool-card"
        assert tool_card_base({"id": "", "timestamp": "yesterday"}) == "tool-card"

    def test_identity_suffix(self):
        assert tool_card_identity({"id": "abc"}, 2) == "abc:2"

    def test_stable_across_calls(self, three_tool_calls_message):
        first = extract_tool_cards(three_tool_calls_message)
        second = extract_tool_cards(copy.deepcopy(three_tool_calls_message))
        assert [card.identity for card in first] == [card.identity for card in second]
        assert first == second
