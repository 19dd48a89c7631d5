# encoding: utf8
"""Faithful translations of calculations the games make."""


def shiny_xor(pid, tid, sid):
    """The value the games compare against the shiny threshold."""
    return (tid ^ sid ^ (pid >> 16) ^ (pid & 0xFFFF)) & 0xFFFF


def is_shiny(pid, tid, sid):
    return shiny_xor(pid, tid, sid) < 16


def get_shiny_pid(pid, tid, sid):
    """Rewrite the high half of `pid` so that it comes out shiny for this
    trainer, the way the games force a shiny roll.
    """
    low = pid & 0xFFFF
    return (((tid ^ sid ^ low) << 16) | low) & 0xFFFFFFFF


def force_not_shiny(pid):
    """The games flip one high bit to dodge an unwanted shiny roll."""
    return pid ^ 0x10000000
