# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""JSON test vector files.

JSON has no bytes type, so a bytes value stored under key "k" is written as a
hex string under "k_hex" and turned back into bytes on reading. Keys ending
in "_hex" are therefore reserved.
"""

import json

_suffix = "_hex"

def to_json(o):
    if isinstance(o, dict):
        res = {}
        for k, v in o.items():
            if k.endswith(_suffix):
                raise Exception(f"Disallowed dict key {k}: we reserve keys that end {_suffix}")
            if isinstance(v, (bytes, bytearray)):
                res[k + _suffix] = bytes(v).hex()
            else:
                res[k] = to_json(v)
        return res
    elif isinstance(o, list):
        return [to_json(i) for i in o]
    elif isinstance(o, (bytes, bytearray)):
        raise Exception("Can't store bytes not contained in dict")
    return o

def from_json(o):
    if isinstance(o, dict):
        return {k[:-len(_suffix)] if k.endswith(_suffix) else k:
                    bytes.fromhex(v) if k.endswith(_suffix) else from_json(v)
                for k, v in o.items()}
    elif isinstance(o, list):
        return [from_json(i) for i in o]
    return o

def write_vectors(fn, it):
    fn.parent.mkdir(parents=True, exist_ok=True)
    with fn.open("w") as f:
        json.dump([to_json(tv) for tv in it], f, indent=4)

def read_vectors(fn):
    with fn.open() as f:
        for tv in json.load(f):
            yield from_json(tv)
