# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import inputgen

def test_lengths():
    for d, desc in inputgen.generate_testinputs():
        assert {k: len(v) for k, v in d.items()} == {"key": 32, "nonce": 16}, desc

def test_deterministic():
    assert list(inputgen.generate_testinputs()) == list(inputgen.generate_testinputs())

def test_descriptions_unique():
    descs = [desc for _, desc in inputgen.generate_testinputs()]
    assert len(descs) == len(set(descs))

def test_onebit():
    inputs = list(inputgen.generate_onebit())
    assert len(inputs) == 2 * inputgen.example_count
    for d, desc in inputs:
        assert sum(bin(b).count("1") for v in d.values() for b in v) == 1, desc
    assert inputs[0] == ({"key": b'\1' + bytes(31), "nonce": bytes(16)}, "Set bit 0 of key")

def test_set_containing():
    s = inputgen.set_containing(256, 12)
    assert len(s) == 12
    assert s[0] == 0 and s[-1] == 255
    assert s == sorted(s)

def test_chained_starts_from_zero():
    d, desc = next(inputgen.generate_chained())
    assert d == inputgen.zeros()
    assert desc == "Chained ( 1)"
