# encoding: utf8
"""`pokelegality eggmoves`: explain a hatched moveset from pools given on
the command line.
"""
from pokelegality.cli.labels import egg_source_label
from pokelegality.eggmoves import (
    EggMovePools, get_egg_source_order, get_source_label, validate_breed)
from pokelegality import species as species_ids


def configure_parser(parser):
    parser.set_defaults(func=command_eggmoves)

    parser.add_argument('-g', '--generation', type=int, required=True)
    parser.add_argument('--species', type=int, default=0,
        help=u'Species that hatched; only matters for special moves')
    parser.add_argument('--moves', type=int, nargs='+', required=True,
        help=u'The hatched moves, in order')
    parser.add_argument('--base', type=int, nargs='*', default=[],
        help=u'Moves known at the hatch level, oldest first')
    parser.add_argument('--level-up', type=int, nargs='*', default=[])
    parser.add_argument('--egg', type=int, nargs='*', default=[])
    parser.add_argument('--machine', type=int, nargs='*', default=[])
    parser.add_argument('--tutor', type=int, nargs='*', default=[])


def command_eggmoves(parser, args):
    if get_egg_source_order(args.generation) is None:
        parser.error(u"Nothing hatches in generation {}".format(args.generation))

    pools = EggMovePools(
        base=args.base,
        level_up=args.level_up,
        egg=args.egg,
        machine=args.machine,
        tutor=args.tutor,
        volt_tackle=(args.species == species_ids.PICHU and args.generation >= 3),
    )
    # Empty slots are written as 0
    moves = [move for move in args.moves if move]
    result = validate_breed(moves, args.generation, pools)
    for index, move in enumerate(moves):
        label = get_source_label(result, args.generation, index, egg_source_label)
        print(u"{:>4}: {}".format(move, label))
    if not result.valid:
        print(u"No breeding order explains this moveset.")
