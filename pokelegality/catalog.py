# encoding: utf8
"""Loading records and encounter catalogs from YAML, and dumping decoded
tables back out.

A catalog document describes one game version:

    version: SW
    evolutions: {file: evos.bin, layout: g4}
    learnsets: {file: wazaoboe.bin, layout: 16, pack_id: WB}
    egg_moves: {172: [344, 6]}
    machine_moves: {172: [85]}
    encounters:
      - kind: slot8
        species: 263
        level_min: 3
        level_max: 5
        location: 122

Table files are looked up relative to the catalog, then the data
directory.
"""
import logging
import os

import yaml

from pokelegality.correlation import Shiny
from pokelegality.encounters import VARIANTS, AreaSlotType8
from pokelegality.errors import CatalogError
from pokelegality.evolution import EvolutionTree
from pokelegality.extract.evolutions import decode_evolutions
from pokelegality.extract.learnsets import (
    decode_learnsets8, decode_learnsets16_container)
from pokelegality.gamedata import GameData
from pokelegality.record import CreatureRecord
from pokelegality.species import max_species_id
from pokelegality.versions import coerce_version

log = logging.getLogger(__name__)


def _load_document(source):
    if hasattr(source, 'read'):
        return yaml.safe_load(source)
    with open(source, encoding='utf8') as f:
        return yaml.safe_load(f)


###
### Records
###

def record_from_dict(doc):
    if not isinstance(doc, dict):
        raise CatalogError("A record must be a mapping, not {!r}".format(doc))
    try:
        return CreatureRecord(**doc)
    except (TypeError, ValueError) as e:
        raise CatalogError("Bad record: {}".format(e))


def load_record(source):
    return record_from_dict(_load_document(source))


###
### Encounter templates
###

_ENUM_FIELDS = {
    'shiny': Shiny,
    'slot_type': AreaSlotType8,
}


def _coerce_enum(enum, value):
    """Accept an enum's value or, case-insensitively, its name."""
    try:
        return enum(value)
    except ValueError:
        if isinstance(value, str):
            for member in enum:
                if member.name.lower() == value.lower():
                    return member
        raise


def template_from_dict(doc, index=None):
    if not isinstance(doc, dict):
        raise CatalogError(
            "Encounter {} must be a mapping, not {!r}".format(index, doc))
    doc = dict(doc)
    kind = doc.pop('kind', None)
    try:
        cls = VARIANTS[kind]
    except KeyError:
        raise CatalogError("Encounter {}: unknown kind {!r}; expected one of {}"
                           .format(index, kind, ', '.join(sorted(VARIANTS))))

    for key in doc:
        if key not in cls.fields:
            raise CatalogError("Encounter {}: {} doesn't take {!r}".format(
                index, kind, key))
    for key, enum in _ENUM_FIELDS.items():
        if key in doc:
            try:
                doc[key] = _coerce_enum(enum, doc[key])
            except ValueError as e:
                raise CatalogError("Encounter {}: {}".format(index, e))

    try:
        return cls(**doc)
    except (TypeError, ValueError, KeyError) as e:
        raise CatalogError("Encounter {}: {}".format(index, e))


def load_templates(docs):
    return [template_from_dict(doc, index) for index, doc in enumerate(docs or ())]


###
### Whole catalogs
###

def _find_file(name, search_dirs):
    if os.path.isabs(name):
        return name
    for directory in search_dirs:
        if directory is None:
            continue
        path = os.path.join(directory, name)
        if os.path.exists(path):
            return path
    raise CatalogError("Can't find table file {!r} in {}".format(
        name, ', '.join(d for d in search_dirs if d)))


def _read_table(entry, search_dirs):
    path = _find_file(entry['file'], search_dirs)
    log.debug("Reading %s", path)
    with open(path, 'rb') as f:
        return f.read()


def load_evolutions(entry, search_dirs):
    data = _read_table(entry, search_dirs)
    layout = entry.get('layout', 'g4')
    return EvolutionTree(decode_evolutions(data, layout),
                         name='evolutions ({})'.format(entry['file']))


def load_learnsets(entry, search_dirs, generation):
    data = _read_table(entry, search_dirs)
    layout = int(entry.get('layout', 16))
    if layout == 8:
        max_species = entry.get('max_species', max_species_id(generation))
        return decode_learnsets8(data, max_species)
    elif layout == 16:
        return decode_learnsets16_container(data, entry.get('pack_id'))
    raise CatalogError("Unknown learnset layout {!r}".format(layout))


def game_data_from_dict(doc, search_dirs=()):
    if not isinstance(doc, dict):
        raise CatalogError("A catalog must be a mapping")
    unknown = set(doc) - set(['version', 'evolutions', 'learnsets', 'egg_moves',
                              'machine_moves', 'tutor_moves', 'encounters'])
    if unknown:
        raise CatalogError("Unknown catalog keys: {}".format(
            ', '.join(sorted(unknown))))
    try:
        version = coerce_version(doc['version'])
    except KeyError:
        raise CatalogError("A catalog needs a version")
    except ValueError as e:
        raise CatalogError(str(e))

    evolutions = learnsets = None
    if doc.get('evolutions'):
        evolutions = load_evolutions(doc['evolutions'], search_dirs)
    if doc.get('learnsets'):
        learnsets = load_learnsets(doc['learnsets'], search_dirs, version.generation)

    templates = load_templates(doc.get('encounters'))
    log.debug("Catalog for %s: %d encounters", version.name, len(templates))
    return GameData(
        version,
        evolutions=evolutions,
        learnsets=learnsets,
        egg_moves=doc.get('egg_moves'),
        machine_moves=doc.get('machine_moves'),
        tutor_moves=doc.get('tutor_moves'),
        encounters=templates,
    )


def load_game_data(path, data_dir=None):
    doc = _load_document(path)
    search_dirs = [os.path.dirname(os.path.abspath(path)), data_dir]
    return game_data_from_dict(doc, search_dirs)


###
### Dumping
###

def evolutions_to_yaml(evolutions):
    """Plain data for a decoded evolution table (list per species)."""
    out = {}
    for species, methods in enumerate(evolutions):
        if not methods:
            continue
        out[species] = [
            dict(method=evo.type.name.lower(), species=evo.species,
                 argument=evo.argument, level=evo.level)
            for evo in methods
        ]
    return out


def learnsets_to_yaml(learnsets):
    out = {}
    for species, learnset in enumerate(learnsets):
        if not len(learnset):
            continue
        out[species] = [[move, level] for move, level in learnset]
    return out


def dump(data, stream=None):
    return yaml.safe_dump(data, stream, default_flow_style=None, sort_keys=False)
