"""Tests for the command-line interface."""

import io
import json

import pytest
from txdecode.main import build_parser, format_result, main
from txdecode.decoder import decode_transaction


def _run(argv, capsys):
    main(argv)
    return capsys.readouterr()


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.transaction == ""
        assert args.estimate is False
        assert args.hash is False
        assert args.log_level == "WARNING"

    def test_estimate_flag(self):
        assert build_parser().parse_args(["-e", "0xc0"]).estimate
        assert build_parser().parse_args(["--estimate", "0xc0"]).estimate


class TestMain:
    def test_prints_json(self, legacy_tx_hex, capsys):
        out = _run([legacy_tx_hex], capsys).out
        data = json.loads(out)

        assert data == {
            "nonce": 1,
            "gas": 1,
            "gas_limit": 21000,
            "target_address": "0x" + "00" * 20,
            "value": 0,
            "data": "0x",
            "v": "0x1b",
            "r": "0x01",
            "s": "0x02",
        }

    def test_estimate_output(self, legacy_tx_bytes, sender_bytes, capsys):
        text = "0x" + (sender_bytes + legacy_tx_bytes).hex()
        out = _run(["--estimate", text], capsys).out

        header, body = out.split("\ntransaction: ", 1)
        assert header == f"Sender: 0x{sender_bytes.hex()},"
        assert json.loads(body)["gas_limit"] == 21000

    def test_hash_output(self, eip155_tx_hex, capsys):
        out = _run(["--hash", eip155_tx_hex], capsys).out
        expected = decode_transaction(eip155_tx_hex).tx_hash
        assert out.rstrip().endswith(f"Hash: {expected}")

    def test_reads_stdin(self, legacy_tx_hex, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(legacy_tx_hex + "\n"))
        out = _run([], capsys).out
        assert json.loads(out)["nonce"] == 1

    def test_stdin_read_error(self, capsys, monkeypatch):
        def _fail():
            raise OSError("stdin closed")

        monkeypatch.setattr("txdecode.main.read_stdin_tx", _fail)
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
        assert "Unable to read transaction: stdin closed" in capsys.readouterr().err

    def test_invalid_format(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["not-a-transaction!"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Unable to decode transaction: Invalid transaction format" in err

    def test_invalid_rlp(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["0xc801010101010101"])
        assert exc_info.value.code == 1
        assert "Unable to decode transaction" in capsys.readouterr().err

    def test_negative_max_depth(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-depth", "-1", "0xc0"])
        assert exc_info.value.code == 2

    def test_max_depth_above_upper_bound(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-depth", "100000", "0xc0"])
        assert exc_info.value.code == 2
        assert "--max-depth must be between 0 and 256" in capsys.readouterr().err

    def test_deep_input_at_max_depth_reports_error(self, nested_lists, capsys):
        text = "0x" + nested_lists(3000).hex()
        with pytest.raises(SystemExit) as exc_info:
            main(["--max-depth", "256", text])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Unable to decode transaction" in err
        assert "depth 256" in err


class TestFormatResult:
    def test_bare(self, legacy_tx_hex):
        result = decode_transaction(legacy_tx_hex)
        text = format_result(result)
        assert json.loads(text) == result.transaction.to_dict()

    def test_large_integers_are_json_numbers(self, eip155_tx_hex):
        text = format_result(decode_transaction(eip155_tx_hex))
        assert '"value": 1000000000000000000' in text
