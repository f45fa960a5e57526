#!/usr/bin/env python3

import argparse as arg
import logging
import sys
from pathlib import Path
from climb.frontend.errors import CalcError
from climb.frontend.lexer import Source, tokenize
from climb.frontend.parser import parse
from climb.backend.evaluator import evaluate

logger = logging.getLogger('climb')

def run(source: Source, args) -> str:
    if args.tokens:
        return '\n'.join(repr(tok) for tok in tokenize(source))
    tree = parse(source)
    if args.tree_only:
        return str(tree)
    return f'Evaluating {tree}: {evaluate(tree)}'

def interact(args):
    import readline
    try:
        while (src := input("expr: ")):
            try:
                print(run(src, args))
            except CalcError as e:
                print(f'error: {e}')
    except EOFError:
        pass

def main(argv=None) -> int:
    parser = arg.ArgumentParser(
        prog='climb',
        description='Parses and evaluates integer arithmetic expressions',
        epilog='Version 0.1.0')

    parser.add_argument('source', type=Path, nargs='?')
    parser.add_argument('-t', '--tree-only', dest='tree_only', action='store_true', default=False)
    parser.add_argument('-T', '--tokens', dest='tokens', action='store_true', default=False)
    parser.add_argument('-i', '--interactive', dest='interactive', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    if args.interactive:
        interact(args)
        return 0

    if not args.source:
        parser.error('a source file is required unless --interactive is given')

    try:
        source = args.source.read_bytes()
    except OSError as e:
        logger.error('cannot read %s: %s', args.source, e.strerror)
        return 1

    try:
        print(run(source, args))
    except CalcError as e:
        logger.error('%s', e)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
