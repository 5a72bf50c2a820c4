"""
Tests for the command-line interface
"""

import base64
import json

import pytest

from xorscope.cli import main, build_parser

from conftest import SINGLE_BYTE_HEX, SINGLE_BYTE_PLAINTEXT


def test_convert(capsys):
    main(["convert", "49276d206b696c6c696e67", "--from", "hex", "--to", "base64"])
    assert capsys.readouterr().out.strip() == "SSdtIGtpbGxpbmc="


def test_fixed_xor(capsys):
    main(["fixed-xor", "1c0111001f010100061a024b53535009181c", "686974207468652062756c6c277320657965"])
    assert capsys.readouterr().out.strip() == "746865206b696420646f6e277420706c6179"


def test_encrypt(capsys):
    main(["encrypt", "Burning 'em", "--key", "ICE"])
    assert capsys.readouterr().out.strip() == "0b3637272a2b2e63622c2e"


def test_encrypt_from_file(capsys, tmp_path):
    source = tmp_path / "plain.txt"
    source.write_bytes(b"Burning 'em")
    main(["encrypt", "--file", str(source), "--key", "ICE"])
    assert capsys.readouterr().out.strip() == "0b3637272a2b2e63622c2e"


def test_solve(capsys):
    main(["solve", SINGLE_BYTE_HEX])
    out = capsys.readouterr().out
    assert "key 88 (0x58)" in out
    assert SINGLE_BYTE_PLAINTEXT in out


def test_solve_top(capsys):
    main(["solve", SINGLE_BYTE_HEX, "--top", "3"])
    lines = [l for l in capsys.readouterr().out.splitlines() if l.startswith("[+]")]
    assert len(lines) == 3
    assert "key 88" in lines[0]


def test_break_json(capsys, ice_ciphertext):
    encoded = base64.b64encode(ice_ciphertext).decode()
    main(["break", encoded, "--key-length", "3", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data['results'][0]['key_text'] == "ICE"


def test_break_file_with_report(capsys, ice_ciphertext, tmp_path):
    source = tmp_path / "cipher.bin"
    source.write_bytes(ice_ciphertext)
    out_dir = tmp_path / "results"

    main(["break", "--file", str(source), "--scheme", "raw", "--preset", "short_keys",
          "--out", str(out_dir), "--name", "sample", "--report"])

    out = capsys.readouterr().out
    assert "[+] Key length" in out
    assert (out_dir / "sample.json").exists()
    report = (out_dir / "sample_report.md").read_text()
    assert report.startswith("# Xorscope Analysis Report: sample")
    assert "## Key Length Estimates" in report


def test_break_report_without_out(capsys, ice_ciphertext):
    with pytest.raises(SystemExit) as exc:
        main(["break", ice_ciphertext.hex(), "--scheme", "hex", "--report"])
    assert exc.value.code == 1


def test_invalid_input_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["convert", "abc"])
    assert exc.value.code == 1
    assert "[!] Error:" in capsys.readouterr().err


def test_too_short_ciphertext_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["break", "AAAA"])
    assert exc.value.code == 1
    assert "too short" in capsys.readouterr().err


def test_missing_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["break", "--file", str(tmp_path / "missing.b64")])
    assert exc.value.code == 1


def test_unknown_scheme_rejected_by_parser():
    with pytest.raises(SystemExit) as exc:
        build_parser().parse_args(["convert", "00", "--from", "base32"])
    assert exc.value.code == 2
