# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

# Salsa20 block n is permute(x) + x, where x is the initial state with the
# nonce in words 6-7 and n in words 8-9. HSalsa20 puts its 16-byte nonce in
# those same four words and skips the addition, so subtracting x back out of
# a Salsa20 keystream block gives an HSalsa20 output computed without using
# any of the code in hsalsa20.py.

import Cryptodome.Cipher.Salsa20

import hsalsa20

MAX_COUNTER = 64

_block_bytes = 64
_salsa_nonce_bytes = 8

def _split_nonce(nonce):
    return nonce[:_salsa_nonce_bytes], int.from_bytes(
        nonce[_salsa_nonce_bytes:], byteorder='little')

def supports(nonce):
    return _split_nonce(nonce)[1] <= MAX_COUNTER

def _keystream_block(key, salsa_nonce, counter):
    s = Cryptodome.Cipher.Salsa20.new(key=bytes(key), nonce=bytes(salsa_nonce))
    stream = s.encrypt(b'\0' * (_block_bytes * (counter + 1)))
    return stream[-_block_bytes:]

def hsalsa20_from_keystream(key, nonce):
    assert len(key) == hsalsa20.KEY_SIZE
    assert len(nonce) == hsalsa20.NONCE_SIZE
    salsa_nonce, counter = _split_nonce(nonce)
    if counter > MAX_COUNTER:
        raise Exception(f"Block counter {counter} out of reach, limit is {MAX_COUNTER}")
    z = [int.from_bytes(_keystream_block(key, salsa_nonce, counter)[i:i + 4], byteorder='little')
        for i in range(0, _block_bytes, 4)]
    const = [int.from_bytes(b"expand 32-byte k"[i:i + 4], byteorder='little')
        for i in range(0, 16, 4)]
    nonce_words = [int.from_bytes(nonce[i:i + 4], byteorder='little')
        for i in range(0, 16, 4)]
    words = [(z[p] - x) & 0xffffffff
        for p, x in zip([0, 5, 10, 15, 6, 7, 8, 9], const + nonce_words)]
    return b''.join(w.to_bytes(4, byteorder='little') for w in words)
