# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import random

import hsalsa20

lengths = {"key": hsalsa20.KEY_SIZE, "nonce": hsalsa20.NONCE_SIZE}

example_count = 12

def zeros():
    return {k: bytes(v) for k, v in lengths.items()}

def oneset(l, b):
    l = bytearray(l)
    l[b >> 3] |= (1 << (b & 7))
    return bytes(l)

def rangeset(l, s):
    return bytes((b & 0xff) for b in range(s, s+l))

def randbytes(l, r):
    return bytes(r.randrange(0x100) for _ in range(l))

def set_containing(hi, c):
    # Always includes both ends of the range; the rest is seeded by the arguments.
    r = random.Random(repr((hi, c)))
    s = set([0, hi-1])
    while len(s) < c:
        s.add(r.randrange(hi))
    return sorted(s)

def generate_onebit():
    for k, v in lengths.items():
        for i in set_containing(v*8, example_count):
            d = zeros()
            d[k] = oneset(v, i)
            yield d, f"Set bit {i} of {k}"

def generate_ranges():
    for k, v in lengths.items():
        for i in set_containing(0x100, example_count):
            d = zeros()
            d[k] = rangeset(v, i)
            yield d, f"Incrementing bytes from 0x{i:02x} for {k}"

def generate_repeated():
    for r in set_containing(1<<(len(lengths)*8), example_count):
        values = {k: (r>>(8*i)) & 0xff for i, k in enumerate(lengths)}
        d = {k: bytes([values[k]])*v for k, v in lengths.items()}
        yield d, "Repeated bytes: {}".format(" ".join(
            f"{k}: 0x{v:02x}" for k, v in values.items()))

def generate_chained():
    d = zeros()
    for i in range(1, example_count +1):
        yield dict(d), f"Chained ({i:2})"
        d["key"] = hsalsa20.hsalsa20(**d)
        d["nonce"] = rangeset(lengths["nonce"], i)

def generate_random():
    for i in range(1, example_count +1):
        r = random.Random(repr((lengths, i)))
        d = {k: randbytes(v, r) for k, v in lengths.items()}
        yield d, f"Random ({i:2})"

def generate_testinputs():
    yield from generate_onebit()
    yield from generate_ranges()
    yield from generate_repeated()
    yield from generate_chained()
    yield from generate_random()
