#!/usr/bin/env python3
#
# Copyright 2018 Google LLC
#
# Use of this source code is governed by an MIT-style
# license that can be found in the LICENSE file or at
# https://opensource.org/licenses/MIT.

import argparse
import pathlib
import sys

import crosscheck
import hexjson
import hsalsa20
import inputgen
import parse_hsalsa20_tv
import paths

name = "HSalsa20"

def fail(msg):
    sys.stderr.write(f'Error: {msg}\n')
    sys.exit(1)

def vector_file(path):
    return path / name / f"{name}.json"

def make_testvector(input, description):
    return {
        "cipher": name,
        "description": description,
        "input": input,
        "output": hsalsa20.hsalsa20(**input),
    }

def check_testvector(tv, verbose=False):
    result = hsalsa20.hsalsa20(**tv["input"])
    if result != tv["output"]:
        raise Exception(f"Mismatch for {tv['description']}: "
            f"expected {tv['output'].hex()}, got {result.hex()}")
    if verbose:
        print(f"OK: {tv['description']}")

def crosscheck_testvector(tv, verbose=False):
    if not crosscheck.supports(tv["input"]["nonce"]):
        return False
    result = crosscheck.hsalsa20_from_keystream(**tv["input"])
    if result != tv["output"]:
        raise Exception(f"Reference disagrees for {tv['description']}: "
            f"expected {tv['output'].hex()}, got {result.hex()}")
    if verbose:
        print(f"OK (reference): {tv['description']}")
    return True

def generate_testvectors():
    for tv, d in inputgen.generate_testinputs():
        yield make_testvector(tv, d)

def write_tests(path):
    p = vector_file(path)
    print(f"Writing: {p}")
    hexjson.write_vectors(p, generate_testvectors())

def check_tests(path, verbose=False):
    fn = vector_file(path)
    print(f"======== {fn.name} ========")
    count = 0
    for tv in hexjson.read_vectors(fn):
        check_testvector(tv, verbose)
        count += 1
    return count

def check_published(verbose=False):
    print("======== published ========")
    count = 0
    for tv in parse_hsalsa20_tv.test_vectors():
        check_testvector(tv, verbose)
        count += 1
    return count

def crosscheck_tests(verbose=False):
    print("======== reference ========")
    checked = 0
    for tv in generate_testvectors():
        if crosscheck_testvector(tv, verbose):
            checked += 1
    print(f"Checked {checked} inputs against the reference implementation")
    return checked

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="""Generate and check HSalsa20
    test vectors.""")
    p.add_argument('--path', type=pathlib.Path, default=paths.ours,
                   help='directory holding our generated test vectors')
    p.add_argument('--write', action='store_true',
                   help='regenerate our test vectors')
    p.add_argument('--check', action='store_true',
                   help='check our test vectors')
    p.add_argument('--published', action='store_true',
                   help='check the published NaCl test vectors')
    p.add_argument('--crosscheck', action='store_true',
                   help='check generated inputs against the Salsa20 keystream')
    p.add_argument('--verbose', action='store_true',
                   help='report every vector checked')
    return p.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    if not (args.write or args.check or args.published or args.crosscheck):
        fail("Nothing to do: pass --write, --check, --published or --crosscheck")
    try:
        if args.write:
            write_tests(args.path)
        if args.check:
            check_tests(args.path, args.verbose)
        if args.published:
            check_published(args.verbose)
        if args.crosscheck:
            crosscheck_tests(args.verbose)
    except Exception as e:
        fail(str(e))

if __name__ == "__main__":
    main()
