# encoding: utf8
"""Matching a record against every encounter that might explain it.

Not finding an explanation is the normal answer for an illegal record, so
it comes back as a `MatchResult` with rating NONE rather than an
exception.
"""
from collections import namedtuple
import logging

from pokelegality.encounters import EncounterMatchRating

log = logging.getLogger(__name__)


class RatedEncounter(namedtuple('RatedEncounter', 'rating index template')):
    """A candidate template, its rating, and where it was declared."""
    __slots__ = ()

    @property
    def sort_key(self):
        return self.rating, self.index


class MatchResult(namedtuple('MatchResult', 'rating best candidates')):
    """`best` holds every template tied at the best rating, in declaration
    order.  Picking one is up to the caller.  `candidates` is the full
    ranked list, when asked for.
    """
    __slots__ = ()

    @property
    def is_valid(self):
        return self.rating <= EncounterMatchRating.PARTIAL_MATCH

    @property
    def encounter(self):
        """The first of the best templates, or None."""
        if not self.best:
            return None
        return self.best[0]


NO_MATCH = MatchResult(EncounterMatchRating.NONE, (), ())


class MatchEngine(object):
    def __init__(self, data):
        self.data = data

    def get_evolution_chain(self, record):
        return self.data.evolutions.get_evolution_chain(
            record.species, record.form,
            level=record.level, min_level=record.met_level)

    def get_candidates(self, record, chain=None):
        """(index, template) for every template whose static criteria
        contain the record.
        """
        if chain is None:
            chain = self.get_evolution_chain(record)
        return [(index, template)
                for index, template in enumerate(self.data.encounters)
                if template.is_within_range(record, chain)]

    def match(self, record, report_all=False, executor=None):
        """Rate every candidate and return the best.

        Ratings may be computed on `executor` (anything with an
        order-preserving `map`, like `concurrent.futures.Executor`); the
        result doesn't depend on it.
        """
        candidates = self.get_candidates(record)
        if not candidates:
            log.debug("%r: no candidate encounters", record)
            return NO_MATCH

        templates = [template for index, template in candidates]

        def rate(template):
            return template.get_match_rating(record)

        if executor is None:
            ratings = [rate(template) for template in templates]
        else:
            ratings = list(executor.map(rate, templates))

        ranked = sorted(
            (RatedEncounter(EncounterMatchRating(rating), index, template)
             for (index, template), rating in zip(candidates, ratings)),
            key=lambda rated: rated.sort_key)
        for rated in ranked:
            log.debug("%r: %s rated %s", record, rated.template.long_name,
                      rated.rating.name)

        best_rating = ranked[0].rating
        best = tuple(rated.template for rated in ranked
                     if rated.rating == best_rating)
        if report_all:
            return MatchResult(best_rating, best, tuple(ranked))
        return MatchResult(best_rating, best, ())


def hypothesize(template, record, seed=None):
    """A copy of `record` as `template` would have generated it.  The
    original is left alone.
    """
    hypothesis = record.copy()
    template.apply_to(hypothesis, seed)
    return hypothesis
