# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

# Vectors from "Cryptography in NaCl", D. J. Bernstein, 2009-03-10,
# https://cr.yp.to/highspeed/naclcrypto-20090310.pdf

import paths

_fields = ["KEY", "NONCE", "OUTPUT"]

def parse(fpath):
    d = {}
    with fpath.open() as f:
        for l in f:
            l = l.strip()
            if not l or l.startswith("#"):
                if d:
                    yield d
                d = {}
            elif "=" in l:
                k, v = l.split("=", 1)
                d[k.strip()] = v.strip()
            else:
                raise Exception("Can't parse: " + repr(l))
    if d:
        yield d

def test_vectors(fpath=None):
    if fpath is None:
        fpath = paths.other / "hsalsa20.txt"
    for d in parse(fpath):
        missing = [k for k in _fields if k not in d]
        if missing:
            raise Exception(f"Vector {d.get('COUNT')} is missing {', '.join(missing)}")
        bd = {k: bytes.fromhex(d[k]) for k in _fields}
        yield {
            'description': f"NaCl {d['COUNT']}",
            'input': {'key': bd["KEY"], 'nonce': bd["NONCE"]},
            'output': bd["OUTPUT"],
        }
