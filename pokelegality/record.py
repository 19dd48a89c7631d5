# encoding: utf8
"""The creature record being checked.

Records belong to whoever hands them to us; matching only reads them.  The
one exception is `CreatureRecord.copy()`, which hypothesis building uses to
get a record it's allowed to scribble on.
"""
from pokelegality import formulae
from pokelegality.versions import GameVersion, coerce_version

# Order the games roll individual values in
STATS = ('hp', 'attack', 'defense', 'special_attack', 'special_defense',
         'speed')

HIDDEN_ABILITY = 4


class _Field:
    name = None

    def __init__(self, default=None, min=None, max=None, convert=None):
        self.default = default
        self.min = min
        self.max = max
        self.convert = convert

    def __set_name__(self, cls, name):
        self.name = name

    def __get__(self, inst, owner):
        if inst is None:
            return self
        return inst.__dict__.get(self.name, self.default)

    def __set__(self, inst, value):
        if self.convert is not None and value is not None:
            value = self.convert(value)
        if value is not None:
            if self.min is not None and value < self.min:
                raise ValueError("{} can't be below {}, got {!r}".format(
                    self.name, self.min, value))
            if self.max is not None and value > self.max:
                raise ValueError("{} can't be above {}, got {!r}".format(
                    self.name, self.max, value))
        inst.__dict__[self.name] = value


def _ivs(value):
    value = tuple(int(iv) for iv in value)
    if len(value) != len(STATS):
        raise ValueError("need {} individual values, got {}".format(
            len(STATS), len(value)))
    for iv in value:
        if not -1 <= iv <= 31:
            raise ValueError("individual values run -1 to 31, got {}".format(iv))
    return value


def _moves(value):
    value = tuple(int(move) for move in value if move)
    if len(value) > 4:
        raise ValueError("a creature knows at most four moves")
    return value


def _ability_number(value):
    if value not in (1, 2, HIDDEN_ABILITY):
        raise ValueError("ability number is 1, 2 or 4, got {!r}".format(value))
    return value


class CreatureRecord:
    """Everything about a stored creature that matching looks at.

    Individual values may be -1, meaning "unknown, don't check".  Height
    and weight scalars are None when the format doesn't store them.
    """
    species = _Field(0, min=0, convert=int)
    form = _Field(0, min=0, convert=int)
    level = _Field(1, min=1, max=100, convert=int)
    ivs = _Field((-1,) * 6, convert=_ivs)
    encryption_constant = _Field(0, min=0, max=0xFFFFFFFF, convert=int)
    pid = _Field(0, min=0, max=0xFFFFFFFF, convert=int)
    tid = _Field(0, min=0, max=0xFFFF, convert=int)
    sid = _Field(0, min=0, max=0xFFFF, convert=int)
    held_item = _Field(0, min=0, convert=int)
    moves = _Field((), convert=_moves)
    relearn_moves = _Field((), convert=_moves)
    version = _Field(GameVersion.ANY, convert=coerce_version)
    met_level = _Field(0, min=0, max=100, convert=int)
    met_location = _Field(0, min=0, convert=int)
    egg_location = _Field(0, min=0, convert=int)
    ability_number = _Field(1, convert=_ability_number)
    marks = _Field(frozenset(), convert=frozenset)
    # Mark or ribbon shown beside the name; survives evolution
    affixed_ribbon = _Field(None, convert=str)
    fateful = _Field(False, convert=bool)
    dynamax_level = _Field(0, min=0, max=10, convert=int)
    height_scalar = _Field(None, min=0, max=0xFF, convert=int)
    weight_scalar = _Field(None, min=0, max=0xFF, convert=int)
    ball = _Field(0, min=0, convert=int)

    def __init__(self, **kwargs):
        cls = type(self)

        for key, value in kwargs.items():
            if not isinstance(cls.__dict__.get(key), _Field):
                raise TypeError("Unexpected argument: {!r}".format(key))

            setattr(self, key, value)

    @classmethod
    def field_names(cls):
        return [key for key, value in cls.__dict__.items()
                if isinstance(value, _Field)]

    def __repr__(self):
        return "<{}: species {} lv{} {}>".format(
            type(self).__qualname__, self.species, self.level,
            self.version.name)

    def copy(self, **changes):
        values = dict((name, getattr(self, name)) for name in self.field_names())
        values.update(changes)
        return type(self)(**values)

    def as_dict(self):
        values = {}
        for name in self.field_names():
            value = getattr(self, name)
            if name == 'version':
                value = value.name
            elif name == 'marks':
                value = sorted(value)
            elif isinstance(value, tuple):
                value = list(value)
            values[name] = value
        return values

    @property
    def generation(self):
        return self.version.generation

    @property
    def is_shiny(self):
        return formulae.is_shiny(self.pid, self.tid, self.sid)

    @property
    def has_hidden_ability(self):
        return self.ability_number == HIDDEN_ABILITY

    @property
    def is_egg_origin(self):
        return self.egg_location != 0

    def get_iv(self, stat):
        return self.ivs[STATS.index(stat)]

    def set_ivs(self, **ivs):
        current = list(self.ivs)
        for stat, value in ivs.items():
            current[STATS.index(stat)] = value
        self.ivs = current
