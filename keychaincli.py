import sys
import json
import argparse
from binascii import hexlify, unhexlify

import nacl.utils

import config
from log import Logger, start_logging, stop_logging
from keys.errors import HDWalletError
from keys.extended import ExtendedPrivKey, ExtendedPubKey
from keys.keychain import KeyChain
from keys.keyindex import KeyIndex

logger = Logger(system="KeyChainCLI")

COMMANDS = ("master", "derive", "derivepub", "generate")


def print_value(value, out=None):
    out = out or sys.stdout
    out.write(json.dumps(value, indent=4) + "\n")


def print_error(error, out=None):
    out = out or sys.stderr
    out.write("error %s\n" % error)


def _key_pair(private_key):
    public_key = ExtendedPubKey.from_private_key(private_key)
    return {
        "private_key": private_key.to_hex(),
        "public_key": public_key.to_hex(),
    }


class Parser(object):
    def __init__(self, argv=None, out=None):
        self.argv = sys.argv[1:] if argv is None else argv
        self.out = out or sys.stdout
        parser = argparse.ArgumentParser(
            description='HD KeyChain CLI',
            usage='''
    keychain-cli command [<arguments>]

commands:
    master              prints the master extended key pair for a seed
    derive              walks a chain path from the master key of a seed
    derivepub           derives a public child from an extended public key
    generate            creates a random seed and its master key
''')
        parser.add_argument('command', help='Execute the given command')
        args = parser.parse_args(self.argv[:1])
        self.rest = self.argv[1:]
        if args.command not in COMMANDS:
            parser.print_help(self.out)
            raise SystemExit(1)
        self.command = getattr(self, args.command)

    def run(self):
        observer = start_logging(config.LOGLEVEL, sys.stderr)
        try:
            self.command()
        except (HDWalletError, ValueError) as e:
            logger.error("command failed: %s" % e)
            print_error(e)
            raise SystemExit(1)
        finally:
            stop_logging(observer)

    def master(self):
        parser = argparse.ArgumentParser(
            description="Print the master extended private and public key for the given seed",
            usage='''usage:
    keychain-cli master [-s SEED]''')
        parser.add_argument('-s', '--seed', required=True, help="the seed as hex")
        args = parser.parse_args(self.rest)
        master_key = ExtendedPrivKey.from_seed(unhexlify(args.seed))
        print_value(_key_pair(master_key), self.out)

    def derive(self):
        parser = argparse.ArgumentParser(
            description="Derive the key at the given chain path from the master key of the seed",
            usage='''usage:
    keychain-cli derive [-s SEED] [-p PATH]''')
        parser.add_argument('-s', '--seed', required=True, help="the seed as hex")
        parser.add_argument('-p', '--path', default=config.CHAIN_PATH, help="the chain path, e.g. m/0/1")
        args = parser.parse_args(self.rest)
        master_key = ExtendedPrivKey.from_seed(unhexlify(args.seed))
        key, derivation = KeyChain(master_key).derive_private_key(args.path)
        value = _key_pair(key)
        value["path"] = args.path
        value["depth"] = derivation.depth
        value["parent_public_key"] = None
        value["key_index"] = None
        if derivation.parent_key is not None:
            value["parent_public_key"] = hexlify(derivation.parent_key.public_key_bytes()).decode()
            value["key_index"] = int(derivation.key_index)
        print_value(value, self.out)

    def derivepub(self):
        parser = argparse.ArgumentParser(
            description="Derive a normal child from a 65 byte extended public key",
            usage='''usage:
    keychain-cli derivepub [-k KEY] [-i INDEX]''')
        parser.add_argument('-k', '--key', required=True, help="the extended public key as hex")
        parser.add_argument('-i', '--index', required=True, type=int, help="the child index")
        args = parser.parse_args(self.rest)
        public_key = ExtendedPubKey.deserialize(unhexlify(args.key))
        child = public_key.derive_public_key(KeyIndex.from_index(args.index))
        print_value({"public_key": child.to_hex(), "key_index": args.index}, self.out)

    def generate(self):
        parser = argparse.ArgumentParser(
            description="Create a random seed and print it with its master key pair",
            usage='''usage:
    keychain-cli generate [-n BYTES]''')
        parser.add_argument('-n', '--bytes', default=32, type=int, help="seed length in bytes")
        args = parser.parse_args(self.rest)
        seed = nacl.utils.random(args.bytes)
        logger.info("generated a %d byte seed" % args.bytes)
        value = _key_pair(ExtendedPrivKey.from_seed(seed))
        value["seed"] = hexlify(seed).decode()
        print_value(value, self.out)


def main(argv=None, out=None):
    Parser(argv, out).run()


if __name__ == '__main__':
    main()
