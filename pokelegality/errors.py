# encoding: utf8
"""Exceptions raised by the table decoders and accessors.

A record that no encounter explains is *not* an error; see
`pokelegality.match.MatchResult`.
"""

###
### Base
###

class LegalityError(Exception):
    pass


###
### Table errors
###

class _TableError(LegalityError):
    """Knows which table and which record it's complaining about."""
    def __init__(self, message, table=None, index=None):
        self.table = table
        self.index = index
        self.message = message
        super(_TableError, self).__init__(self._describe())

    def _describe(self):
        where = []
        if self.table is not None:
            where.append(u'table {0}'.format(self.table))
        if self.index is not None:
            where.append(u'index {0}'.format(self.index))
        if not where:
            return self.message
        return u'{0} ({1})'.format(self.message, u', '.join(where))


class DecodeError(_TableError, ValueError):
    """Binary table data is malformed: truncated, misaligned, or uses a
    method code we don't know.
    """


class RangeError(_TableError, IndexError):
    """A species or record id outside what a table declares.  Always a bug
    in the caller.
    """


class CatalogError(LegalityError, ValueError):
    """An encounter catalog or record document doesn't make sense."""
