# encoding: utf8
"""Works out whether a stored Pokémon could have been legitimately obtained,
and how.
"""
