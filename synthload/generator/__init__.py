"""
Generator package for synthload.

Reference pools, the sampler, the nested record synthesizer and the key
resolver. Nothing here talks to a store except through the TableStore protocol.
"""

from synthload.generator.keys import KeyResolver, Resolution
from synthload.generator.pools import DEFAULT_POOLS, CountryEntry, ReferencePools
from synthload.generator.sampler import Sampler
from synthload.generator.synthesizer import RecordSynthesizer

__all__ = [
    "CountryEntry",
    "DEFAULT_POOLS",
    "KeyResolver",
    "RecordSynthesizer",
    "ReferencePools",
    "Resolution",
    "Sampler",
]
