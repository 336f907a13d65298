from ranger.domain import IntDomain, get_domain, INT, U8, I8, U16, I16, U32, I32, U64, I64
from ranger.unit import Unit, Singleton, Span, singleton, span
from ranger.rangeset import Ranger

__all__ = [
    'IntDomain', 'get_domain', 'INT', 'U8', 'I8', 'U16', 'I16', 'U32', 'I32', 'U64', 'I64',
    'Unit', 'Singleton', 'Span', 'singleton', 'span',
    'Ranger',
]
