# encoding: utf8
import argparse
import logging
import sys

import pokelegality.cli.eggmoves
from pokelegality import catalog
from pokelegality import defaults
from pokelegality.cli.labels import rating_label
from pokelegality.errors import LegalityError
from pokelegality.extract.evolutions import decode_evolutions
from pokelegality.extract.learnsets import (
    decode_learnsets8, decode_learnsets16_container)
from pokelegality.match import MatchEngine
from pokelegality.species import max_species_id

log = logging.getLogger(__name__)


def main(junk, *argv):
    parser = create_parser()

    if len(argv) <= 0:
        parser.print_help()
        sys.exit()

    args = parser.parse_args(argv)
    configure_logging(args)
    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit()
    try:
        args.func(parser, args)
    except LegalityError as e:
        log.debug("Failed", exc_info=True)
        print(u"error: {}".format(e), file=sys.stderr)
        sys.exit(1)


def setuptools_entry():
    main(*sys.argv)


def configure_logging(args):
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format='%(levelname)s %(name)s: %(message)s')


def create_parser():
    """Build and return an ArgumentParser.
    """
    # Slightly clumsy workaround to make both `match -v` and `-v match` work
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument(
        '-d', '--data-dir', dest='data_dir', default=None,
        help=u'Directory to look in for table files named by a catalog, '
            u'after the catalog\'s own directory.  Use this option (or a '
            u'POKELEGALITY_DATA_DIR environment variable) to override the '
            u'default.',
    )
    common_parser.add_argument(
        '-q', '--quiet', dest='quiet', default=False, action='store_true',
        help=u'Only log errors.',
    )
    common_parser.add_argument(
        '-v', '--verbose', dest='verbose', default=False, action='store_true',
        help=u'Log everything, including each candidate\'s rating.',
    )

    parser = argparse.ArgumentParser(
        prog='pokelegality',
        description=u'Check where a Pokémon could have come from',
        parents=[common_parser],
    )

    cmds = parser.add_subparsers(title='commands', metavar='<command>', help='commands')
    cmd_help = cmds.add_parser(
        'help', help=u'Display this message',
        parents=[common_parser])
    cmd_help.set_defaults(func=command_help)

    cmd_evolutions = cmds.add_parser(
        'evolutions', help=u'Decode a packed evolution table and dump it as YAML',
        parents=[common_parser])
    cmd_evolutions.set_defaults(func=command_evolutions)
    cmd_evolutions.add_argument('file')
    cmd_evolutions.add_argument(
        '--layout', choices=['g3', 'g4'], default='g4',
        help=u'Generation III or IV layout (default: g4)')

    cmd_learnsets = cmds.add_parser(
        'learnsets', help=u'Decode a packed learnset table and dump it as YAML',
        parents=[common_parser])
    cmd_learnsets.set_defaults(func=command_learnsets)
    cmd_learnsets.add_argument('file')
    cmd_learnsets.add_argument(
        '--layout', type=int, choices=[8, 16], default=16,
        help=u'8-bit Game Boy layout, or 16-bit container (default: 16)')
    cmd_learnsets.add_argument(
        '--max-species', type=int, default=None,
        help=u'Highest species id in an 8-bit table (default: 251)')
    cmd_learnsets.add_argument(
        '--pack-id', default=None,
        help=u'Two-character container identifier to insist on')

    cmd_eggmoves = cmds.add_parser(
        'eggmoves', help=u'Explain how a hatched moveset was put together',
        parents=[common_parser])
    pokelegality.cli.eggmoves.configure_parser(cmd_eggmoves)

    cmd_match = cmds.add_parser(
        'match', help=u'Find the encounters that explain a record',
        parents=[common_parser])
    cmd_match.set_defaults(func=command_match)
    cmd_match.add_argument('record', help=u'YAML creature record')
    cmd_match.add_argument('catalog', help=u'YAML encounter catalog')
    cmd_match.add_argument(
        '-a', '--all', dest='report_all', default=False, action='store_true',
        help=u'List every candidate, not just the best')

    return parser


def get_data_dir(args):
    """Works out which data directory to use, and says so."""
    data_dir = args.data_dir
    got_from = 'command line'

    if data_dir is None:
        data_dir, got_from = defaults.get_default_data_dir_with_origin()

    log.info("Using data directory %s (from %s)", data_dir, got_from)
    return data_dir


def _read(path):
    with open(path, 'rb') as f:
        return f.read()


### Table commands

def command_evolutions(parser, args):
    evolutions = decode_evolutions(_read(args.file), args.layout)
    catalog.dump(catalog.evolutions_to_yaml(evolutions), sys.stdout)


def command_learnsets(parser, args):
    data = _read(args.file)
    if args.layout == 8:
        max_species = args.max_species
        if max_species is None:
            max_species = max_species_id(2)
        learnsets = decode_learnsets8(data, max_species)
    else:
        learnsets = decode_learnsets16_container(data, args.pack_id)
    catalog.dump(catalog.learnsets_to_yaml(learnsets), sys.stdout)


### Matching

def command_match(parser, args):
    record = catalog.load_record(args.record)
    data = catalog.load_game_data(args.catalog, get_data_dir(args))

    result = MatchEngine(data).match(record, report_all=args.report_all)
    print(rating_label(result.rating))
    if args.report_all:
        for rated in result.candidates:
            print(u"  {:<22} {}".format(
                rating_label(rated.rating), rated.template.long_name))
    else:
        for template in result.best:
            print(u"  {}".format(template.long_name))


def command_help(parser, args):
    parser.print_help()


if __name__ == '__main__':
    main(*sys.argv)
