# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import json

import pytest

import hexjson
import hsalsa20
import parse_hsalsa20_tv
import tvgen


@pytest.fixture
def written(tmp_path):
    tvgen.write_tests(tmp_path)
    return tmp_path


def test_write_and_check(written):
    assert tvgen.vector_file(written).exists()
    assert tvgen.check_tests(written) == len(list(tvgen.generate_testvectors()))

def test_file_format(written):
    with tvgen.vector_file(written).open() as f:
        raw = json.load(f)
    tv = raw[0]
    assert tv["cipher"] == "HSalsa20"
    assert set(tv["input"]) == {"key_hex", "nonce_hex"}
    assert len(bytes.fromhex(tv["output_hex"])) == hsalsa20.OUTPUT_SIZE

def test_tampered_vector_fails(written):
    fn = tvgen.vector_file(written)
    tvs = list(hexjson.read_vectors(fn))
    tvs[3]["output"] = bytes(32)
    hexjson.write_vectors(fn, tvs)
    with pytest.raises(Exception, match="Mismatch for"):
        tvgen.check_tests(written)

def test_published():
    tvs = list(parse_hsalsa20_tv.test_vectors())
    assert len(tvs) == 3
    assert tvs[1]["input"]["key"] == tvs[0]["output"]
    assert tvgen.check_published(verbose=True) == 3

def test_parse_rejects_garbage(tmp_path):
    fn = tmp_path / "bad.txt"
    fn.write_text("COUNT=0\nnot a vector\n")
    with pytest.raises(Exception, match="Can't parse"):
        list(parse_hsalsa20_tv.test_vectors(fn))

def test_parse_missing_field(tmp_path):
    fn = tmp_path / "short.txt"
    fn.write_text("COUNT=7\nKEY=00\n\n")
    with pytest.raises(Exception, match="missing NONCE, OUTPUT"):
        list(parse_hsalsa20_tv.test_vectors(fn))

def test_crosscheck():
    assert tvgen.crosscheck_tests() > 0

def test_hexjson_reserved_key():
    with pytest.raises(Exception, match="reserve"):
        hexjson.to_json({"key_hex": b'\0'})

def test_hexjson_nested():
    tv = {"description": "x", "input": {"key": b'\1\2'}, "tests": [{"n": 1}]}
    assert hexjson.from_json(hexjson.to_json(tv)) == tv

def test_main(written, capsys):
    tvgen.main(["--path", str(written), "--check", "--published", "--verbose"])
    out = capsys.readouterr().out
    assert "OK: NaCl 2" in out
    assert "OK: Random (12)" in out

def test_main_nothing_to_do(capsys):
    with pytest.raises(SystemExit) as e:
        tvgen.main([])
    assert e.value.code == 1
    assert "Nothing to do" in capsys.readouterr().err

def test_main_missing_vectors(tmp_path, capsys):
    with pytest.raises(SystemExit) as e:
        tvgen.main(["--path", str(tmp_path), "--check"])
    assert e.value.code == 1
    assert capsys.readouterr().err.startswith("Error: ")
