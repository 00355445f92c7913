# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

"""HSalsa20: derive a 32-byte subkey from a 32-byte key and a 16-byte nonce.

This is the Salsa20 permutation without the final feed-forward, keeping only
the eight words that are not seeded from the key. XSalsa20 uses it to turn the
first 16 bytes of its 24-byte nonce into a fresh Salsa20 key.
"""

OUTPUT_SIZE = 32
KEY_SIZE = 32
NONCE_SIZE = 16

_byteorder = 'little'
_word_bytes = 4
_rounds = 20

_constant = b"expand 32-byte k"

_positions = {
    "const": [0, 5, 10, 15],
    "key": [1, 2, 3, 4, 11, 12, 13, 14],
    "nonce": [6, 7, 8, 9],
}

_output_positions = _positions["const"] + _positions["nonce"]

_round_positions = [
    # columns
    [0, 4, 8, 12],
    [5, 9, 13, 1],
    [10, 14, 2, 6],
    [15, 3, 7, 11],
    # rows
    [0, 1, 2, 3],
    [5, 6, 7, 4],
    [10, 11, 8, 9],
    [15, 12, 13, 14],
]

_rotls = [7, 9, 13, 18]

class InvalidLengthError(ValueError):
    def __init__(self, name, length, expected):
        super().__init__(f"Expected {expected} bytes for {name}, got {length}")
        self.name = name
        self.length = length
        self.expected = expected

def _check_length(name, v, expected):
    if len(v) != expected:
        raise InvalidLengthError(name, len(v), expected)

def _mod(i):
    return i & ((1 << (_word_bytes * 8)) - 1)

def _rotl(i, r):
    return _mod((i << r) | (i >> (_word_bytes * 8 - r)))

def load_word(b, offset):
    return int.from_bytes(b[offset:offset + _word_bytes], byteorder=_byteorder)

def store_word(b, offset, w):
    b[offset:offset + _word_bytes] = w.to_bytes(_word_bytes, byteorder=_byteorder)

def load_words(b):
    assert len(b) % _word_bytes == 0
    return [load_word(b, i) for i in range(0, len(b), _word_bytes)]

def initial_state(key, nonce):
    state = [0] * 16
    for k, v in [("const", _constant), ("key", key), ("nonce", nonce)]:
        for p, w in zip(_positions[k], load_words(v)):
            state[p] = w
    return state

def quarterround(a, b, c, d):
    r = _rotls
    b ^= _rotl(_mod(a + d), r[0])
    c ^= _rotl(_mod(b + a), r[1])
    d ^= _rotl(_mod(c + b), r[2])
    a ^= _rotl(_mod(d + c), r[3])
    return a, b, c, d

def doubleround(state):
    state = list(state)
    for positions in _round_positions:
        result = quarterround(*[state[p] for p in positions])
        for p, r in zip(positions, result):
            state[p] = r
    return state

def permute(state):
    for _ in range(_rounds // 2):
        state = doubleround(state)
    return state

def derive_key(output, key, nonce):
    """Write HSalsa20(key, nonce) into the writable 32-byte buffer output.

    Lengths are checked in the order output, key, nonce, and the first
    mismatch raises InvalidLengthError. output is only written once the
    whole permutation has run, so a failed call leaves it untouched.
    """
    _check_length("output", output, OUTPUT_SIZE)
    _check_length("key", key, KEY_SIZE)
    _check_length("nonce", nonce, NONCE_SIZE)
    if memoryview(output).readonly:
        raise TypeError("output must be a writable buffer")
    state = permute(initial_state(key, nonce))
    result = bytearray(OUTPUT_SIZE)
    for i, p in enumerate(_output_positions):
        store_word(result, i * _word_bytes, state[p])
    output[:] = result

def hsalsa20(key, nonce):
    output = bytearray(OUTPUT_SIZE)
    derive_key(output, key, nonce)
    return bytes(output)
