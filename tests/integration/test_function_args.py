"""End-to-end tests from raw payload to typed values."""

from decimal import ROUND_HALF_EVEN, Decimal

import orjson
import pytest

from outpost_abi import FunctionArgs, MalformedPayloadError, TickerNotFound, TypeCoercionFailed
from outpost_abi.config import load_config


@pytest.fixture
def args(sample_payload) -> FunctionArgs:
    return FunctionArgs.from_json(orjson.dumps(sample_payload))


class TestFromJson:
    """Payload decoding into a snapshot."""

    def test_sections_loaded(self, args, call_arguments):
        assert args.get_labels() == frozenset({"BTCUSD", "ETH"})
        assert args.get_pipe_sources() == frozenset({"news"})
        assert dict(args.get_call_arguments()) == call_arguments
        assert args.get_call_argument_names() == frozenset(call_arguments)

    def test_str_input(self, sample_payload):
        args = FunctionArgs.from_json(orjson.dumps(sample_payload).decode())
        assert args.get_call_argument("int_arg", int) == 42

    def test_empty_object(self):
        args = FunctionArgs.from_json(b"{}")
        assert args.get_labels() == frozenset()
        assert args.get_pipe_sources() == frozenset()
        assert dict(args.get_call_arguments()) == {}
        assert args.get_call_argument_names() == frozenset()

    def test_invalid_payload(self):
        with pytest.raises(MalformedPayloadError):
            FunctionArgs.from_json(b'{"tickers_data": {"X": {"symbol": "X"}}}')

    def test_config_rounding(self, sample_payload):
        sample_payload["tickers_data"]["BTCUSD"]["candles"][0][4] = 0.125
        config = load_config(overrides={"decimal": {"rounding": ROUND_HALF_EVEN}})

        args = FunctionArgs.from_payload(sample_payload, config)
        assert args.get_candles_decimal("BTCUSD")[0].close == Decimal("0.12")


class TestScenarios:
    """Documented behaviour, end to end."""

    def test_int_argument(self):
        args = FunctionArgs.from_json(b'{"call_arguments": {"int_arg": 42}}')
        assert args.get_call_argument("int_arg", int) == 42

    def test_numeric_string_argument(self):
        args = FunctionArgs.from_json(b'{"call_arguments": {"num_str_arg": "12345"}}')
        assert args.get_call_argument("num_str_arg", int) == 12345
        assert args.get_call_argument("num_str_arg", str) == "12345"
        assert args.get_call_argument("num_str_arg") == "12345"

    def test_array_string_argument(self):
        args = FunctionArgs.from_json(b'{"call_arguments": {"array_str_arg": "[1,2,3]"}}')
        assert args.get_call_argument("array_str_arg", list[int]) == [1, 2, 3]

    def test_invalid_numeric_string(self):
        args = FunctionArgs.from_json(b'{"call_arguments": {"invalid_num_str_arg": "not_a_number"}}')
        with pytest.raises(TypeCoercionFailed):
            args.get_call_argument("invalid_num_str_arg", int)

    def test_decimal_close(self, args):
        assert args.get_candles_decimal("BTCUSD")[0].close == Decimal("12345.68")
        assert next(args.get_candles_decimal_iter("BTCUSD")).close == Decimal("12345.68")

    def test_absent_label(self, args):
        with pytest.raises(TickerNotFound) as exc_info:
            args.get_candles("ZZZ")

        assert exc_info.value.label == "ZZZ"


class TestFacade:
    """Delegating accessors."""

    def test_market_data_accessors(self, args):
        assert args.get_ticker("ETH").precision == 4
        assert args.get_candles("BTCUSD")[1].close == 12350.0
        assert [c.timestamp for c in args.get_candles_iter("BTCUSD")] == [1700000000000, 1700000060000]
        assert args.get_data_from_pipe("news") == "BTC breaks out"

    def test_raw_argument(self, args):
        assert args.get_raw_call_argument("object_str_arg") == '{"name": "test", "value": 100}'

    def test_components_exposed(self, args):
        assert args.arguments.get("array_arg", list[int]) == [1, 2, 3, 4, 5]
        assert args.market_data.list_labels() == args.get_labels()

    def test_call_arguments_mapping_is_read_only_copy(self, args):
        arguments = args.get_call_arguments()
        with pytest.raises(TypeError):
            arguments["int_arg"] = 0

        arguments["array_arg"].append(6)
        assert args.get_call_argument("array_arg", list[int]) == [1, 2, 3, 4, 5]

    def test_payload_mutation_after_build(self, sample_payload):
        sample_payload["call_arguments"]["cfg"] = {"k": 1}
        args = FunctionArgs.from_payload(sample_payload)

        sample_payload["call_arguments"]["cfg"]["k"] = 999
        assert args.get_call_argument("cfg", dict[str, int]) == {"k": 1}
